"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in event_registry/models.py (persistence layer).
"""

from dataclasses import dataclass, field, replace
from datetime import date, datetime, time
from typing import Self

from event_registry.domain.value_objects import (
    EventId,
    EventStatus,
    RequestStatus,
    Role,
    ScheduleEntryId,
    UserId,
)


@dataclass(frozen=True)
class EventDraft:
    """Owner-supplied content of an event, as collected by the submission form."""

    titulo: str = ""
    descricao_evento: str = ""
    local: str = ""
    endereco_completo: str = ""
    tipo_local: str = ""
    datas: tuple[date, ...] = ()
    hora_inicio: time | None = None
    hora_fim: time | None = None
    estimativa_publico: int | None = None
    promotor_nome: str = ""
    promotor_cpf: str = ""
    promotor_telefone: str = ""
    promotor_email: str = ""
    musica: bool = False
    modalidade_musica: tuple[str, ...] = ()
    fins_lucrativos: bool = False
    ingressos: bool = False
    fechamento_rua: bool = False
    autorizacao_sonora: bool = False
    instagram_url: str = ""
    link_oficial: str = ""

    def normalized(self) -> Self:
        """Copy with sorted unique dates; music tags are kept only with music."""
        return replace(
            self,
            datas=tuple(sorted(set(self.datas))),
            modalidade_musica=tuple(dict.fromkeys(self.modalidade_musica))
            if self.musica
            else (),
        )


@dataclass(frozen=True)
class Event(EventDraft):
    """Domain representation of an Event."""

    id: EventId | None = None
    user_id: UserId | None = None
    status: EventStatus = EventStatus.DRAFT
    banner_url: str | None = None
    foto1_url: str | None = None
    foto2_url: str | None = None
    foto3_url: str | None = None
    requerimento_autorizacao_url: str | None = None
    projeto_evento_url: str | None = None
    planta_local_url: str | None = None
    avcb_bombeiros_url: str | None = None
    apolice_seguro_url: str | None = None
    plano_seguranca_url: str | None = None
    alvara_funcionamento_url: str | None = None
    autorizacao_sonora_doc_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def upcoming_dates(self, today: date) -> tuple[date, ...]:
        return tuple(d for d in self.datas if d >= today)


@dataclass(frozen=True)
class ScheduleEntryDraft:
    """Owner-supplied content of a schedule entry."""

    data: date | None = None
    hora_inicio: time | None = None
    hora_fim: time | None = None
    atividade: str = ""
    descricao: str = ""
    local_especifico: str = ""
    responsavel: str = ""


@dataclass(frozen=True)
class ScheduleEntry:
    """Domain representation of a timed activity within an event."""

    id: ScheduleEntryId
    evento_id: EventId
    data: date
    hora_inicio: time
    hora_fim: time
    atividade: str
    descricao: str = ""
    local_especifico: str = ""
    responsavel: str = ""
    created_at: datetime | None = None

    @property
    def sort_key(self) -> tuple[date, time]:
        return (self.data, self.hora_inicio)


@dataclass(frozen=True)
class UserProfile:
    """Domain representation of an account's profile row."""

    id: UserId
    nome: str
    role: Role = Role.REGISTRANT
    status_pedido: RequestStatus = RequestStatus.APPROVED
    created_at: datetime | None = None


@dataclass(frozen=True)
class Identity:
    """Authenticated actor as seen by services.

    Built by the session context from the session provider's account and the
    matching profile row.
    """

    id: UserId
    email: str = ""
    nome: str = ""
    role: Role = Role.REGISTRANT
    status_pedido: RequestStatus = RequestStatus.APPROVED

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    @property
    def can_submit(self) -> bool:
        return self.role in (Role.ADMIN, Role.REGISTRANT)

    def owns(self, event: Event) -> bool:
        return event.user_id == self.id


@dataclass(frozen=True)
class StoredFile:
    """Reference returned by the object store for an uploaded file."""

    key: str
    url: str


@dataclass(frozen=True)
class UploadedFile:
    """File offered for one document slot, before upload."""

    name: str
    content_type: str
    size: int
    content: object = field(default=None, repr=False, compare=False)
