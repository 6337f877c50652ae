"""Unit tests for document slots, the upload policy and completeness rules.

Run with: pytest tests/test_documents.py -v
"""

from datetime import date, time

import pytest

from event_registry.domain import ScheduleEntryDraft, UploadedFile
from event_registry.domain.documents import (
    ALL_SLOTS,
    IMAGE_SLOTS,
    MEGABYTE,
    FilePolicy,
    document_count,
    get_slot,
    missing_documents,
    required_documents_summary,
)
from event_registry.domain.errors import ValidationError
from event_registry.domain.validation import (
    REQUIRED_FIELDS,
    validate_for_approval,
    validate_schedule_entry,
)
from tests.fakes import complete_draft, event_with, image, mandatory_documents, pdf

DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
MANDATORY_URLS = {
    f"{name}_url": f"https://files.example.org/{name}.pdf"
    for name in mandatory_documents()
}


def complete_event(**overrides):
    values = {**complete_draft().__dict__, **MANDATORY_URLS}
    values.update(overrides)
    return event_with(**values)


class TestSlots:
    """Tests for the slot table."""

    def test_twelve_slots(self):
        """Four image slots and eight legal document slots."""
        assert len(IMAGE_SLOTS) == 4
        assert len(ALL_SLOTS) == 12

    def test_url_field(self):
        assert get_slot("banner").url_field == "banner_url"

    def test_unknown_slot(self):
        """get_slot raises ValidationError naming the slot."""
        with pytest.raises(ValidationError) as exc_info:
            get_slot("contrato")
        assert exc_info.value.field == "contrato"

    def test_noise_permit_depends_on_flag(self):
        """The noise permit document is required only with a special permit request."""
        slot = get_slot("autorizacao_sonora_doc")
        assert not slot.is_required(complete_draft(autorizacao_sonora=False))
        assert slot.is_required(complete_draft(autorizacao_sonora=True))

    def test_operating_licence_is_optional(self):
        assert not get_slot("alvara_funcionamento").is_required(complete_draft())


class TestFilePolicy:
    """Tests for content type and size limits."""

    def test_accepts_image_and_pdf(self):
        policy = FilePolicy()
        policy.check(get_slot("banner"), image("banner.jpg"))
        policy.check(get_slot("planta_local"), pdf("planta.pdf"))

    def test_image_slot_rejects_pdf(self):
        """A PDF offered for an image slot fails with that slot as the field."""
        with pytest.raises(ValidationError) as exc_info:
            FilePolicy().check(get_slot("foto1"), pdf("foto.pdf"))
        assert exc_info.value.field == "foto1"

    def test_document_slot_rejects_image(self):
        with pytest.raises(ValidationError) as exc_info:
            FilePolicy().check(get_slot("avcb_bombeiros"), image("avcb.jpg"))
        assert exc_info.value.field == "avcb_bombeiros"

    def test_docx_is_a_document(self):
        upload = UploadedFile(
            name="projeto.docx",
            content_type=DOCX,
            size=1024,
        )
        FilePolicy().check(get_slot("projeto_evento"), upload)

    def test_image_size_limit(self):
        """Images up to 5MB pass; one byte more fails."""
        policy = FilePolicy()
        policy.check(get_slot("banner"), image("banner.jpg", size=5 * MEGABYTE))
        with pytest.raises(ValidationError):
            policy.check(get_slot("banner"), image("banner.jpg", size=5 * MEGABYTE + 1))

    def test_document_size_limit(self):
        """Documents up to 10MB pass; one byte more fails."""
        policy = FilePolicy()
        policy.check(get_slot("apolice_seguro"), pdf("apolice.pdf", size=10 * MEGABYTE))
        with pytest.raises(ValidationError) as exc_info:
            too_big = pdf("apolice.pdf", size=10 * MEGABYTE + 1)
            policy.check(get_slot("apolice_seguro"), too_big)
        assert "10MB" in exc_info.value.message

    def test_check_batch_reports_first_bad_file(self):
        files = {"banner": image("b.jpg"), "planta_local": image("p.jpg")}
        with pytest.raises(ValidationError) as exc_info:
            FilePolicy().check_batch(files)
        assert exc_info.value.field == "planta_local"


class TestDocumentCounts:
    """Tests for attached and required document counters."""

    def test_document_count_counts_filled_slots(self):
        event = event_with(
            banner_url="https://x/banner.jpg", planta_local_url="https://x/p.pdf"
        )
        assert document_count(event) == 2

    def test_required_summary_without_noise_permit(self):
        event = complete_event()
        assert required_documents_summary(event) == (6, 6)

    def test_required_summary_with_noise_permit(self):
        event = complete_event(autorizacao_sonora=True)
        assert required_documents_summary(event) == (6, 7)
        missing = [slot.name for slot in missing_documents(event)]
        assert missing == ["autorizacao_sonora_doc"]

    def test_incoming_files_count_as_present(self):
        event = event_with()
        incoming = frozenset(mandatory_documents())
        assert missing_documents(event, incoming) == ()


class TestApprovalValidation:
    """Tests for validate_for_approval."""

    def test_complete_event_passes(self):
        validate_for_approval(complete_event())

    @pytest.mark.parametrize("field", REQUIRED_FIELDS)
    def test_missing_required_field(self, field):
        """Each required field is reported by name when empty."""
        blank = None if field in ("hora_inicio", "hora_fim") else ""
        with pytest.raises(ValidationError) as exc_info:
            validate_for_approval(complete_event(**{field: blank}))
        assert exc_info.value.field == field

    def test_whitespace_counts_as_empty(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_for_approval(complete_event(titulo="   "))
        assert exc_info.value.field == "titulo"

    def test_no_dates(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_for_approval(complete_event(datas=()))
        assert exc_info.value.field == "datas"

    @pytest.mark.parametrize("end", [time(18, 0), time(17, 0)])
    def test_end_must_follow_start(self, end):
        """An end time equal to or before the start time fails."""
        with pytest.raises(ValidationError) as exc_info:
            validate_for_approval(complete_event(hora_inicio=time(18, 0), hora_fim=end))
        assert exc_info.value.field == "hora_fim"

    def test_negative_attendance(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_for_approval(complete_event(estimativa_publico=-1))
        assert exc_info.value.field == "estimativa_publico"
        assert exc_info.value.message == "Attendance cannot be negative"

    def test_missing_document_named_by_slot(self):
        """The first mandatory slot without a URL or incoming file is reported."""
        event = complete_event(requerimento_autorizacao_url=None)
        with pytest.raises(ValidationError) as exc_info:
            validate_for_approval(event)
        assert exc_info.value.field == "requerimento_autorizacao"
        validate_for_approval(event, frozenset({"requerimento_autorizacao"}))


class TestScheduleValidation:
    """Tests for validate_schedule_entry."""

    @pytest.mark.parametrize("field", ["data", "hora_inicio", "hora_fim", "atividade"])
    def test_missing_mandatory_field(self, field):
        values = {
            "data": date(2025, 7, 12),
            "hora_inicio": time(14, 0),
            "hora_fim": time(15, 0),
            "atividade": "Abertura",
        }
        values[field] = "" if field == "atividade" else None
        with pytest.raises(ValidationError) as exc_info:
            validate_schedule_entry(ScheduleEntryDraft(**values))
        assert exc_info.value.field == field
