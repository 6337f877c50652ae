"""Django ORM implementations of the event, schedule and user stores."""

import functools
from dataclasses import fields
from datetime import date

import structlog
from django.db import DatabaseError, transaction

from event_registry import models as orm
from event_registry.domain import (
    Event,
    EventId,
    EventStatus,
    RequestStatus,
    Role,
    ScheduleEntry,
    ScheduleEntryDraft,
    ScheduleEntryId,
    UserId,
    UserProfile,
)
from event_registry.domain.errors import RepositoryError
from event_registry.stores.interfaces import EventStore, ScheduleStore, UserStore

logger = structlog.get_logger(__name__)

EVENT_COLUMNS = (
    "titulo",
    "descricao_evento",
    "local",
    "endereco_completo",
    "tipo_local",
    "hora_inicio",
    "hora_fim",
    "estimativa_publico",
    "promotor_nome",
    "promotor_cpf",
    "promotor_telefone",
    "promotor_email",
    "musica",
    "fins_lucrativos",
    "ingressos",
    "fechamento_rua",
    "autorizacao_sonora",
    "instagram_url",
    "link_oficial",
    "banner_url",
    "foto1_url",
    "foto2_url",
    "foto3_url",
    "requerimento_autorizacao_url",
    "projeto_evento_url",
    "planta_local_url",
    "avcb_bombeiros_url",
    "apolice_seguro_url",
    "plano_seguranca_url",
    "alvara_funcionamento_url",
    "autorizacao_sonora_doc_url",
)


def guarded(operation: str):
    """Translate database failures into RepositoryError, logging the cause."""

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except DatabaseError as exc:
                logger.error("repository_failure", operation=operation, error=str(exc))
                raise RepositoryError(operation) from exc

        return wrapper

    return decorator


def _event_to_domain(row: orm.Event) -> Event:
    return Event(
        id=EventId(row.id),
        user_id=UserId(str(row.user_id)),
        status=EventStatus(row.status),
        datas=tuple(date.fromisoformat(d) for d in row.datas or ()),
        modalidade_musica=tuple(row.modalidade_musica or ()),
        created_at=row.created_at,
        updated_at=row.updated_at,
        **{column: getattr(row, column) for column in EVENT_COLUMNS},
    )


def _event_columns(values: dict) -> dict:
    """Map domain values onto column values."""
    columns = {}
    for name, value in values.items():
        if name == "datas":
            value = [d.isoformat() for d in value]
        elif name == "modalidade_musica":
            value = list(value)
        elif name == "status":
            value = value.value
        elif name == "user_id":
            value = value.value
        elif name not in EVENT_COLUMNS:
            continue
        columns[name] = value
    return columns


def _entry_to_domain(row: orm.ScheduleEntry) -> ScheduleEntry:
    return ScheduleEntry(
        id=ScheduleEntryId(row.id),
        evento_id=EventId(row.evento_id),
        data=row.data,
        hora_inicio=row.hora_inicio,
        hora_fim=row.hora_fim,
        atividade=row.atividade,
        descricao=row.descricao,
        local_especifico=row.local_especifico,
        responsavel=row.responsavel,
        created_at=row.created_at,
    )


def _entry_columns(entry: ScheduleEntryDraft) -> dict:
    return {
        "data": entry.data,
        "hora_inicio": entry.hora_inicio,
        "hora_fim": entry.hora_fim,
        "atividade": entry.atividade,
        "descricao": entry.descricao or "",
        "local_especifico": entry.local_especifico or "",
        "responsavel": entry.responsavel or "",
    }


def _account_pk(user_id: UserId) -> int | None:
    """Accounts are keyed by integer; any other id matches no profile."""
    try:
        return int(user_id.value)
    except ValueError:
        return None


def _profile_to_domain(row: orm.UserProfile) -> UserProfile:
    return UserProfile(
        id=UserId(str(row.user_id)),
        nome=row.nome,
        role=Role(row.role),
        status_pedido=RequestStatus(row.status_pedido),
        created_at=row.created_at,
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    @guarded("list_events")
    def list_events(
        self, status: EventStatus | None = None, user_id: UserId | None = None
    ) -> list[Event]:
        queryset = orm.Event.objects.order_by("-created_at")
        if status is not None:
            queryset = queryset.filter(status=status.value)
        if user_id is not None:
            queryset = queryset.filter(user_id=user_id.value)
        return [_event_to_domain(row) for row in queryset]

    @guarded("list_upcoming")
    def list_upcoming(self, today: date, limit: int) -> list[Event]:
        approved = orm.Event.objects.filter(status=EventStatus.APPROVED.value)
        # Events already running have a next date past primeira_data.
        running = approved.filter(primeira_data__lt=today, ultima_data__gte=today)
        starting = approved.filter(primeira_data__gte=today).order_by(
            "primeira_data", "-created_at"
        )[:limit]
        events = [_event_to_domain(row) for row in [*running, *starting]]
        events.sort(key=lambda event: event.upcoming_dates(today)[0])
        return events[:limit]

    @guarded("get_event")
    def get_event(self, event_id: EventId) -> Event | None:
        row = orm.Event.objects.filter(id=event_id.value).first()
        return _event_to_domain(row) if row else None

    @guarded("insert_event")
    def insert_event(self, event: Event) -> Event:
        values = {f.name: getattr(event, f.name) for f in fields(event)}
        row = orm.Event.objects.create(**_event_columns(values))
        return _event_to_domain(row)

    @guarded("update_event")
    def update_event(self, event_id: EventId, changes: dict) -> Event | None:
        with transaction.atomic():
            row = (
                orm.Event.objects.select_for_update().filter(id=event_id.value).first()
            )
            if row is None:
                return None
            columns = _event_columns(changes)
            for name, value in columns.items():
                setattr(row, name, value)
            row.save(update_fields=[*columns, "updated_at"])
        return _event_to_domain(row)

    @guarded("delete_event")
    def delete_event(self, event_id: EventId) -> bool:
        row = orm.Event.objects.filter(id=event_id.value).first()
        if row is None:
            return False
        # Instance delete so post_delete signals fire for the cascaded entries too.
        row.delete()
        return True


class DjangoScheduleStore(ScheduleStore):
    """Relational schedule store using Django ORM."""

    @guarded("list_entries")
    def list_entries(self, event_id: EventId) -> list[ScheduleEntry]:
        queryset = orm.ScheduleEntry.objects.filter(evento_id=event_id.value).order_by(
            "data", "hora_inicio"
        )
        return [_entry_to_domain(row) for row in queryset]

    @guarded("get_entry")
    def get_entry(self, entry_id: ScheduleEntryId) -> ScheduleEntry | None:
        row = orm.ScheduleEntry.objects.filter(id=entry_id.value).first()
        return _entry_to_domain(row) if row else None

    @guarded("insert_entry")
    def insert_entry(
        self, event_id: EventId, entry: ScheduleEntryDraft
    ) -> ScheduleEntry:
        row = orm.ScheduleEntry.objects.create(
            evento_id=event_id.value, **_entry_columns(entry)
        )
        return _entry_to_domain(row)

    @guarded("update_entry")
    def update_entry(
        self, entry_id: ScheduleEntryId, entry: ScheduleEntryDraft
    ) -> ScheduleEntry | None:
        row = orm.ScheduleEntry.objects.filter(id=entry_id.value).first()
        if row is None:
            return None
        for name, value in _entry_columns(entry).items():
            setattr(row, name, value)
        row.save()
        return _entry_to_domain(row)

    @guarded("delete_entry")
    def delete_entry(self, entry_id: ScheduleEntryId) -> bool:
        row = orm.ScheduleEntry.objects.filter(id=entry_id.value).first()
        if row is None:
            return False
        row.delete()
        return True


class DjangoUserStore(UserStore):
    """Relational account profile store using Django ORM."""

    @guarded("list_users")
    def list_users(self) -> list[UserProfile]:
        rows = orm.UserProfile.objects.order_by("-created_at")
        return [_profile_to_domain(row) for row in rows]

    @guarded("get_user")
    def get_user(self, user_id: UserId) -> UserProfile | None:
        pk = _account_pk(user_id)
        if pk is None:
            return None
        row = orm.UserProfile.objects.filter(user_id=pk).first()
        return _profile_to_domain(row) if row else None

    @guarded("insert_user")
    def insert_user(self, profile: UserProfile) -> UserProfile:
        row = orm.UserProfile.objects.create(
            user_id=profile.id.value,
            nome=profile.nome,
            role=profile.role.value,
            status_pedido=profile.status_pedido.value,
        )
        return _profile_to_domain(row)

    @guarded("update_user")
    def update_user(
        self,
        user_id: UserId,
        role: Role | None = None,
        status_pedido: RequestStatus | None = None,
    ) -> UserProfile | None:
        pk = _account_pk(user_id)
        if pk is None:
            return None
        row = orm.UserProfile.objects.filter(user_id=pk).first()
        if row is None:
            return None
        if role is not None:
            row.role = role.value
        if status_pedido is not None:
            row.status_pedido = status_pedido.value
        row.save(update_fields=["role", "status_pedido"])
        return _profile_to_domain(row)
