"""Object store backed by Django's configured file storage."""

import structlog
from django.core.exceptions import SuspiciousOperation
from django.core.files.base import ContentFile, File
from django.core.files.storage import Storage, default_storage

from event_registry.domain import StoredFile, UploadedFile
from event_registry.domain.errors import UploadError
from event_registry.stores.interfaces import ObjectStore

logger = structlog.get_logger(__name__)


class DjangoObjectStore(ObjectStore):
    """Stores files through a Django ``Storage`` backend under a bucket prefix."""

    def __init__(self, prefix: str = "eventos", storage: Storage | None = None) -> None:
        self._prefix = prefix.strip("/")
        self._storage = storage or default_storage

    def _path(self, key: str) -> str:
        return f"{self._prefix}/{key}" if self._prefix else key

    def upload(self, key: str, upload: UploadedFile) -> StoredFile:
        content = upload.content
        if isinstance(content, bytes):
            content = ContentFile(content, name=upload.name)
        elif not isinstance(content, File):
            content = File(content, name=upload.name)
        path = self._path(key)
        try:
            exists = self._storage.exists(path)
            if not exists:
                saved = self._storage.save(path, content)
        except (OSError, SuspiciousOperation) as exc:
            logger.error("upload_failed", key=key, error=str(exc))
            raise UploadError(key) from exc
        if exists:
            logger.error("upload_rejected", key=key, reason="object exists")
            raise UploadError(key)
        return StoredFile(key=saved, url=self.public_url(saved))

    def public_url(self, key: str) -> str:
        return self._storage.url(key)
