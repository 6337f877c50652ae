"""Completeness rules an event must meet before it is sent for approval."""

from event_registry.domain.documents import missing_documents
from event_registry.domain.errors import ValidationError
from event_registry.domain.models import Event, ScheduleEntryDraft
from event_registry.domain.value_objects import Attendance

REQUIRED_FIELDS: tuple[str, ...] = (
    "titulo",
    "local",
    "endereco_completo",
    "tipo_local",
    "hora_inicio",
    "hora_fim",
    "promotor_nome",
    "promotor_cpf",
    "promotor_telefone",
    "promotor_email",
)

SCHEDULE_REQUIRED_FIELDS: tuple[str, ...] = (
    "data",
    "hora_inicio",
    "hora_fim",
    "atividade",
)


def _is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def validate_for_approval(event: Event, incoming: frozenset[str] = frozenset()) -> None:
    """Check that ``event`` may be sent for approval.

    ``incoming`` names the document slots that receive a file in the same
    submission and therefore count as present.

    Raises:
        ValidationError: Naming the first missing field, date, time or document.
    """
    for name in REQUIRED_FIELDS:
        if _is_blank(getattr(event, name)):
            raise ValidationError(name, f"Required field: {name}")
    if not event.datas:
        raise ValidationError("datas", "At least one date must be listed")
    if event.hora_inicio >= event.hora_fim:
        raise ValidationError("hora_fim", "End time must be after start time")
    if event.estimativa_publico is not None:
        try:
            Attendance(event.estimativa_publico)
        except ValueError as exc:
            raise ValidationError("estimativa_publico", str(exc)) from None
    missing = missing_documents(event, incoming)
    if missing:
        slot = missing[0]
        raise ValidationError(slot.name, f"Required document: {slot.label}")


def validate_schedule_entry(entry: ScheduleEntryDraft) -> None:
    """Check that a schedule entry carries its mandatory fields.

    Start and end times are not compared; an entry ending before it starts is
    accepted.

    Raises:
        ValidationError: Naming the first missing field.
    """
    for name in SCHEDULE_REQUIRED_FIELDS:
        if _is_blank(getattr(entry, name)):
            raise ValidationError(name, f"Required field: {name}")
