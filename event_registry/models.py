"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid
from datetime import date

from django.conf import settings
from django.db import models

from event_registry.domain.value_objects import (
    EventStatus,
    RequestStatus,
    Role,
    VenueType,
)


def _choices(enum) -> list[tuple[str, str]]:
    return [(member.value, member.name.replace("_", " ").title()) for member in enum]


class Event(models.Model):
    """Persistence model for event proposals."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="eventos"
    )
    titulo = models.CharField(max_length=255, blank=True)
    descricao_evento = models.TextField(blank=True)
    local = models.CharField(max_length=255, blank=True)
    endereco_completo = models.CharField(max_length=500, blank=True)
    tipo_local = models.CharField(
        max_length=32, choices=_choices(VenueType), blank=True
    )
    datas = models.JSONField(default=list, blank=True)
    # Derived from datas on save; used by the public listing query.
    primeira_data = models.DateField(null=True, blank=True, editable=False)
    ultima_data = models.DateField(null=True, blank=True, editable=False)
    hora_inicio = models.TimeField(null=True, blank=True)
    hora_fim = models.TimeField(null=True, blank=True)
    estimativa_publico = models.PositiveIntegerField(null=True, blank=True)

    promotor_nome = models.CharField(max_length=255, blank=True)
    promotor_cpf = models.CharField(max_length=32, blank=True)
    promotor_telefone = models.CharField(max_length=32, blank=True)
    promotor_email = models.EmailField(blank=True)

    musica = models.BooleanField(default=False)
    modalidade_musica = models.JSONField(default=list, blank=True)
    fins_lucrativos = models.BooleanField(default=False)
    ingressos = models.BooleanField(default=False)
    fechamento_rua = models.BooleanField(default=False)
    autorizacao_sonora = models.BooleanField(default=False)

    instagram_url = models.URLField(max_length=500, blank=True)
    link_oficial = models.URLField(max_length=500, blank=True)

    status = models.CharField(
        max_length=16, choices=_choices(EventStatus), default=EventStatus.DRAFT.value
    )

    banner_url = models.URLField(max_length=500, blank=True, null=True)
    foto1_url = models.URLField(max_length=500, blank=True, null=True)
    foto2_url = models.URLField(max_length=500, blank=True, null=True)
    foto3_url = models.URLField(max_length=500, blank=True, null=True)
    requerimento_autorizacao_url = models.URLField(
        max_length=500, blank=True, null=True
    )
    projeto_evento_url = models.URLField(max_length=500, blank=True, null=True)
    planta_local_url = models.URLField(max_length=500, blank=True, null=True)
    avcb_bombeiros_url = models.URLField(max_length=500, blank=True, null=True)
    apolice_seguro_url = models.URLField(max_length=500, blank=True, null=True)
    plano_seguranca_url = models.URLField(max_length=500, blank=True, null=True)
    alvara_funcionamento_url = models.URLField(max_length=500, blank=True, null=True)
    autorizacao_sonora_doc_url = models.URLField(max_length=500, blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "eventos"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="eventos_created_idx"),
            models.Index(fields=["status", "-created_at"], name="eventos_status_idx"),
            models.Index(fields=["user", "-created_at"], name="eventos_owner_idx"),
            models.Index(
                fields=["status", "primeira_data"], name="eventos_upcoming_idx"
            ),
        ]

    def __str__(self) -> str:
        return self.titulo or str(self.id)

    def save(self, *args, **kwargs):
        dates = sorted(date.fromisoformat(str(value)) for value in self.datas or ())
        self.primeira_data = dates[0] if dates else None
        self.ultima_data = dates[-1] if dates else None
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "datas" in update_fields:
            kwargs["update_fields"] = [*update_fields, "primeira_data", "ultima_data"]
        super().save(*args, **kwargs)


class ScheduleEntry(models.Model):
    """Persistence model for timed activities within an event."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    evento = models.ForeignKey(
        Event, on_delete=models.CASCADE, related_name="cronograma"
    )
    data = models.DateField()
    hora_inicio = models.TimeField()
    hora_fim = models.TimeField()
    atividade = models.CharField(max_length=255)
    descricao = models.TextField(blank=True)
    local_especifico = models.CharField(max_length=255, blank=True)
    responsavel = models.CharField(max_length=255, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "cronograma_eventos"
        ordering = ["data", "hora_inicio"]
        verbose_name_plural = "schedule entries"
        indexes = [
            models.Index(
                fields=["evento", "data", "hora_inicio"], name="cronograma_order_idx"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.evento} - {self.data} {self.hora_inicio} {self.atividade}"


class UserProfile(models.Model):
    """Persistence model for account roles and onboarding status."""

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        primary_key=True,
        db_column="id",
        related_name="profile",
    )
    nome = models.CharField(max_length=255)
    role = models.CharField(
        max_length=16, choices=_choices(Role), default=Role.REGISTRANT.value
    )
    status_pedido = models.CharField(
        max_length=16,
        choices=_choices(RequestStatus),
        default=RequestStatus.APPROVED.value,
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "users"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.nome
