"""Media and legal document slots of an event, and the upload policy for them."""

from dataclasses import dataclass
from enum import Enum

from event_registry.domain.errors import ValidationError
from event_registry.domain.models import Event, EventDraft, UploadedFile

MEGABYTE = 1024 * 1024


class SlotKind(Enum):
    IMAGE = "image"
    DOCUMENT = "document"


class Requirement(Enum):
    OPTIONAL = "optional"
    MANDATORY = "mandatory"
    # Mandatory only when the event asks for a special noise permit.
    NOISE_PERMIT = "noise_permit"


@dataclass(frozen=True)
class DocumentSlot:
    """One named place on an event where a file URL is stored."""

    name: str
    label: str
    kind: SlotKind
    requirement: Requirement = Requirement.OPTIONAL

    @property
    def url_field(self) -> str:
        return f"{self.name}_url"

    def is_required(self, draft: EventDraft) -> bool:
        if self.requirement is Requirement.NOISE_PERMIT:
            return draft.autorizacao_sonora
        return self.requirement is Requirement.MANDATORY


IMAGE_SLOTS: tuple[DocumentSlot, ...] = (
    DocumentSlot("banner", "Banner Principal", SlotKind.IMAGE),
    DocumentSlot("foto1", "Foto 1", SlotKind.IMAGE),
    DocumentSlot("foto2", "Foto 2", SlotKind.IMAGE),
    DocumentSlot("foto3", "Foto 3", SlotKind.IMAGE),
)

MANDATORY = Requirement.MANDATORY

LEGAL_SLOTS: tuple[DocumentSlot, ...] = (
    DocumentSlot(
        "requerimento_autorizacao",
        "Requerimento de Autorização",
        SlotKind.DOCUMENT,
        MANDATORY,
    ),
    DocumentSlot("projeto_evento", "Projeto do Evento", SlotKind.DOCUMENT, MANDATORY),
    DocumentSlot("planta_local", "Planta do Local", SlotKind.DOCUMENT, MANDATORY),
    DocumentSlot("avcb_bombeiros", "AVCB dos Bombeiros", SlotKind.DOCUMENT, MANDATORY),
    DocumentSlot("apolice_seguro", "Apólice de Seguro", SlotKind.DOCUMENT, MANDATORY),
    DocumentSlot("plano_seguranca", "Plano de Segurança", SlotKind.DOCUMENT, MANDATORY),
    DocumentSlot(
        "alvara_funcionamento", "Alvará de Funcionamento", SlotKind.DOCUMENT
    ),
    DocumentSlot(
        "autorizacao_sonora_doc",
        "Autorização Sonora",
        SlotKind.DOCUMENT,
        Requirement.NOISE_PERMIT,
    ),
)

ALL_SLOTS: tuple[DocumentSlot, ...] = IMAGE_SLOTS + LEGAL_SLOTS
SLOTS_BY_NAME: dict[str, DocumentSlot] = {slot.name: slot for slot in ALL_SLOTS}

DOCUMENT_CONTENT_TYPES = frozenset(
    {
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    }
)


def get_slot(name: str) -> DocumentSlot:
    """Return the slot called ``name``.

    Raises:
        ValidationError: If no such slot exists.
    """
    try:
        return SLOTS_BY_NAME[name]
    except KeyError:
        raise ValidationError(name, f"Unknown document slot: {name}") from None


@dataclass(frozen=True)
class FilePolicy:
    """Content type and size limits applied to files before upload."""

    image_max_bytes: int = 5 * MEGABYTE
    document_max_bytes: int = 10 * MEGABYTE

    def max_bytes(self, slot: DocumentSlot) -> int:
        if slot.kind is SlotKind.IMAGE:
            return self.image_max_bytes
        return self.document_max_bytes

    def check(self, slot: DocumentSlot, upload: UploadedFile) -> None:
        """Raise ValidationError naming the slot if ``upload`` breaks the policy."""
        content_type = (upload.content_type or "").lower()
        if slot.kind is SlotKind.IMAGE and not content_type.startswith("image/"):
            raise ValidationError(
                slot.name, f"{slot.label}: only image files are allowed"
            )
        is_document = content_type in DOCUMENT_CONTENT_TYPES
        if slot.kind is SlotKind.DOCUMENT and not is_document:
            raise ValidationError(
                slot.name, f"{slot.label}: only PDF, DOC or DOCX files are allowed"
            )
        limit = self.max_bytes(slot)
        if upload.size > limit:
            raise ValidationError(
                slot.name,
                f"{slot.label}: file too large, maximum {limit // MEGABYTE}MB",
            )

    def check_batch(self, files: dict[str, UploadedFile]) -> None:
        for name, upload in files.items():
            self.check(get_slot(name), upload)


def document_count(event: Event) -> int:
    """Number of slots that hold a URL."""
    return sum(1 for slot in ALL_SLOTS if getattr(event, slot.url_field))


def required_slots(draft: EventDraft) -> tuple[DocumentSlot, ...]:
    return tuple(slot for slot in ALL_SLOTS if slot.is_required(draft))


def missing_documents(
    event: Event, incoming: frozenset[str] = frozenset()
) -> tuple[DocumentSlot, ...]:
    """Mandatory slots with neither a stored URL nor a file in ``incoming``."""
    return tuple(
        slot
        for slot in required_slots(event)
        if not getattr(event, slot.url_field) and slot.name not in incoming
    )


def required_documents_summary(event: Event) -> tuple[int, int]:
    """Return (attached, required) counts over the mandatory slots."""
    required = required_slots(event)
    attached = sum(1 for slot in required if getattr(event, slot.url_field))
    return attached, len(required)
