"""Attachment service - checks and uploads the media and documents of an event."""

import time
from collections.abc import Callable
from pathlib import PurePosixPath

import structlog
from django.utils.crypto import get_random_string

from event_registry.domain import UploadedFile
from event_registry.domain.documents import FilePolicy, get_slot
from event_registry.domain.errors import UploadError
from event_registry.stores.interfaces import ObjectStore

logger = structlog.get_logger(__name__)

KEY_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789"


class AttachmentService:
    """Service for document and media uploads."""

    def __init__(
        self,
        object_store: ObjectStore,
        policy: FilePolicy | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._store = object_store
        self._policy = policy or FilePolicy()
        self._clock = clock

    def check(self, files: dict[str, UploadedFile]) -> None:
        """Apply the content type and size policy to every file.

        Raises:
            ValidationError: Naming the first slot that is unknown or breaks the policy.
        """
        self._policy.check_batch(files)

    def storage_key(self, upload: UploadedFile) -> str:
        """Build ``<epoch-millis>-<random suffix>.<ext>`` for a new object."""
        stamp = int(self._clock() * 1000)
        suffix = get_random_string(11, allowed_chars=KEY_ALPHABET)
        extension = PurePosixPath(upload.name).suffix.lower()
        return f"{stamp}-{suffix}{extension}"

    def upload_all(self, files: dict[str, UploadedFile]) -> dict[str, str]:
        """Upload files one after the other and return ``{<slot>_url: url}``.

        Stops at the first failure. Files already stored stay in the bucket.

        Raises:
            UploadError: Naming the slot whose upload failed.
        """
        urls: dict[str, str] = {}
        for name, upload in files.items():
            slot = get_slot(name)
            key = self.storage_key(upload)
            try:
                stored = self._store.upload(key, upload)
            except UploadError as exc:
                logger.warning(
                    "upload_batch_aborted",
                    slot=name,
                    uploaded=sorted(urls),
                    remaining=len(files) - len(urls) - 1,
                )
                raise UploadError(name) from exc
            urls[slot.url_field] = stored.url
            logger.info("file_uploaded", slot=name, key=stored.key, size=upload.size)
        return urls
