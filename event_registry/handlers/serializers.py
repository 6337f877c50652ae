"""Serializers for parsing API input and rendering domain models."""

from rest_framework import serializers

from event_registry.domain import (
    EventDraft,
    EventStatus,
    RequestStatus,
    Role,
    ScheduleEntryDraft,
    UploadedFile,
)
from event_registry.domain.documents import (
    ALL_SLOTS,
    document_count,
    required_documents_summary,
)
from event_registry.domain.value_objects import MUSIC_MODALITIES, VenueType, badge_for

FILE_SUFFIX = "_file"
OPTIONAL_TEXT = {"required": False, "allow_blank": True, "default": ""}
OPTIONAL_VALUE = {"required": False, "allow_null": True, "default": None}


def _badge(status) -> dict:
    badge = badge_for(status)
    return {"label": badge.label, "variant": badge.variant}


class EventInputSerializer(serializers.Serializer):
    """Form fields of an event submission. Completeness is checked by the service."""

    titulo = serializers.CharField(max_length=255, **OPTIONAL_TEXT)
    descricao_evento = serializers.CharField(**OPTIONAL_TEXT)
    local = serializers.CharField(max_length=255, **OPTIONAL_TEXT)
    endereco_completo = serializers.CharField(max_length=500, **OPTIONAL_TEXT)
    tipo_local = serializers.ChoiceField(
        choices=[v.value for v in VenueType], **OPTIONAL_TEXT
    )
    datas = serializers.ListField(
        child=serializers.DateField(), required=False, default=list
    )
    hora_inicio = serializers.TimeField(**OPTIONAL_VALUE)
    hora_fim = serializers.TimeField(**OPTIONAL_VALUE)
    estimativa_publico = serializers.IntegerField(min_value=0, **OPTIONAL_VALUE)
    promotor_nome = serializers.CharField(max_length=255, **OPTIONAL_TEXT)
    promotor_cpf = serializers.CharField(max_length=32, **OPTIONAL_TEXT)
    promotor_telefone = serializers.CharField(max_length=32, **OPTIONAL_TEXT)
    promotor_email = serializers.EmailField(**OPTIONAL_TEXT)
    musica = serializers.BooleanField(required=False, default=False)
    modalidade_musica = serializers.ListField(
        child=serializers.ChoiceField(choices=MUSIC_MODALITIES),
        required=False,
        default=list,
    )
    fins_lucrativos = serializers.BooleanField(required=False, default=False)
    ingressos = serializers.BooleanField(required=False, default=False)
    fechamento_rua = serializers.BooleanField(required=False, default=False)
    autorizacao_sonora = serializers.BooleanField(required=False, default=False)
    instagram_url = serializers.URLField(max_length=500, **OPTIONAL_TEXT)
    link_oficial = serializers.URLField(max_length=500, **OPTIONAL_TEXT)
    status = serializers.ChoiceField(
        choices=[EventStatus.DRAFT.value, EventStatus.PENDING.value],
        required=False,
        default=EventStatus.DRAFT.value,
    )

    def to_draft(self) -> EventDraft:
        data = dict(self.validated_data)
        data.pop("status")
        data["datas"] = tuple(data["datas"])
        data["modalidade_musica"] = tuple(data["modalidade_musica"])
        return EventDraft(**data)

    def target_status(self) -> EventStatus:
        return EventStatus(self.validated_data["status"])


def uploaded_files(files) -> dict[str, UploadedFile]:
    """Collect ``<slot>_file`` uploads from ``request.FILES`` keyed by slot name."""
    collected = {}
    for key, upload in files.items():
        name = key[: -len(FILE_SUFFIX)] if key.endswith(FILE_SUFFIX) else key
        collected[name] = UploadedFile(
            name=upload.name,
            content_type=upload.content_type or "",
            size=upload.size,
            content=upload,
        )
    return collected


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField()
    user_id = serializers.CharField()
    titulo = serializers.CharField()
    descricao_evento = serializers.CharField()
    local = serializers.CharField()
    endereco_completo = serializers.CharField()
    tipo_local = serializers.CharField()
    datas = serializers.ListField(child=serializers.DateField())
    hora_inicio = serializers.TimeField(format="%H:%M")
    hora_fim = serializers.TimeField(format="%H:%M")
    estimativa_publico = serializers.IntegerField()
    promotor_nome = serializers.CharField()
    promotor_cpf = serializers.CharField()
    promotor_telefone = serializers.CharField()
    promotor_email = serializers.CharField()
    musica = serializers.BooleanField()
    modalidade_musica = serializers.ListField(child=serializers.CharField())
    fins_lucrativos = serializers.BooleanField()
    ingressos = serializers.BooleanField()
    fechamento_rua = serializers.BooleanField()
    autorizacao_sonora = serializers.BooleanField()
    instagram_url = serializers.CharField()
    link_oficial = serializers.CharField()
    status = serializers.SerializerMethodField()
    status_badge = serializers.SerializerMethodField()
    document_count = serializers.SerializerMethodField()
    required_documents = serializers.SerializerMethodField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()

    def get_fields(self):
        fields = super().get_fields()
        for slot in ALL_SLOTS:
            fields[slot.url_field] = serializers.CharField()
        return fields

    def get_status(self, event) -> str:
        return event.status.value

    def get_status_badge(self, event) -> dict:
        return _badge(event.status)

    def get_document_count(self, event) -> int:
        return document_count(event)

    def get_required_documents(self, event) -> dict:
        attached, required = required_documents_summary(event)
        return {"attached": attached, "required": required}


class ScheduleEntryInputSerializer(serializers.Serializer):
    """Schedule form fields. Mandatory fields are checked by the service."""

    data = serializers.DateField(**OPTIONAL_VALUE)
    hora_inicio = serializers.TimeField(**OPTIONAL_VALUE)
    hora_fim = serializers.TimeField(**OPTIONAL_VALUE)
    atividade = serializers.CharField(max_length=255, **OPTIONAL_TEXT)
    descricao = serializers.CharField(**OPTIONAL_TEXT)
    local_especifico = serializers.CharField(max_length=255, **OPTIONAL_TEXT)
    responsavel = serializers.CharField(max_length=255, **OPTIONAL_TEXT)

    def to_draft(self) -> ScheduleEntryDraft:
        return ScheduleEntryDraft(**self.validated_data)


class ScheduleEntrySerializer(serializers.Serializer):
    """Serializer for ScheduleEntry domain model."""

    id = serializers.CharField()
    evento_id = serializers.CharField()
    data = serializers.DateField()
    hora_inicio = serializers.TimeField(format="%H:%M")
    hora_fim = serializers.TimeField(format="%H:%M")
    atividade = serializers.CharField()
    descricao = serializers.CharField()
    local_especifico = serializers.CharField()
    responsavel = serializers.CharField()
    created_at = serializers.DateTimeField()


class DecisionSerializer(serializers.Serializer):
    decision = serializers.ChoiceField(
        choices=[EventStatus.APPROVED.value, EventStatus.REJECTED.value]
    )

    def to_status(self) -> EventStatus:
        return EventStatus(self.validated_data["decision"])


class UserProfileSerializer(serializers.Serializer):
    """Serializer for UserProfile domain model."""

    id = serializers.CharField()
    nome = serializers.CharField()
    role = serializers.SerializerMethodField()
    status_pedido = serializers.SerializerMethodField()
    status_badge = serializers.SerializerMethodField()
    created_at = serializers.DateTimeField()

    def get_role(self, profile) -> str:
        return profile.role.value

    def get_status_pedido(self, profile) -> str:
        return profile.status_pedido.value

    def get_status_badge(self, profile) -> dict:
        return _badge(profile.status_pedido)


class UserUpdateSerializer(serializers.Serializer):
    role = serializers.ChoiceField(choices=[r.value for r in Role], required=False)
    status_pedido = serializers.ChoiceField(
        choices=[s.value for s in RequestStatus], required=False
    )

    def validate(self, attrs):
        if not attrs:
            raise serializers.ValidationError("Provide role or status_pedido")
        return attrs


class IdentitySerializer(serializers.Serializer):
    id = serializers.CharField()
    email = serializers.CharField()
    nome = serializers.CharField()
    role = serializers.SerializerMethodField()
    status_pedido = serializers.SerializerMethodField()
    status_badge = serializers.SerializerMethodField()

    def get_role(self, identity) -> str:
        return identity.role.value

    def get_status_pedido(self, identity) -> str:
        return identity.status_pedido.value

    def get_status_badge(self, identity) -> dict:
        return _badge(identity.status_pedido)


class StatisticsSerializer(serializers.Serializer):
    total_events = serializers.IntegerField()
    pending_events = serializers.IntegerField()
    approved_events = serializers.IntegerField()
    rejected_events = serializers.IntegerField()
    total_users = serializers.IntegerField()
    pending_users = serializers.IntegerField()
