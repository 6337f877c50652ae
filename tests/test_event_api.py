"""Integration tests for the event registry HTTP API.

These tests drive the views through DRF's APIClient against the database.
Run with: pytest tests/test_event_api.py -v
"""

from datetime import time, timedelta

import pytest
from django.core.cache import cache
from django.core.files.uploadedfile import SimpleUploadedFile
from django.utils import timezone
from rest_framework.test import APIClient

from event_registry import models as orm
from event_registry.domain.documents import LEGAL_SLOTS, Requirement
from event_registry.handlers import cache as cache_keys

MISSING_ID = "0b6c7a8e-1111-4c2d-9e3f-123456789abc"
APPROVED_BADGE = {"label": "Aprovado", "variant": "default"}


def day(offset: int) -> str:
    return (timezone.localdate() + timedelta(days=offset)).isoformat()


def create_event(user, status="approved", offsets=(3,), **extra):
    values = {
        "titulo": "Festival de Inverno",
        "local": "Praça Central",
        "endereco_completo": "Praça Central, s/n",
        "tipo_local": "praca",
        "hora_inicio": time(18, 0),
        "hora_fim": time(22, 0),
    }
    values.update(extra)
    return orm.Event.objects.create(
        user=user, status=status, datas=[day(o) for o in offsets], **values
    )


def form(**overrides) -> dict:
    values = {
        "titulo": "Festival de Inverno",
        "descricao_evento": "Shows e feira",
        "local": "Praça Central",
        "endereco_completo": "Praça Central, s/n - Centro",
        "tipo_local": "praca",
        "datas": [day(10), day(11)],
        "hora_inicio": "18:00",
        "hora_fim": "22:00",
        "estimativa_publico": 300,
        "promotor_nome": "Associação Cultural",
        "promotor_cpf": "123.456.789-00",
        "promotor_telefone": "(11) 99999-0000",
        "promotor_email": "promotor@example.org",
    }
    values.update(overrides)
    return values


def document_files() -> dict:
    return {
        f"{slot.name}_file": SimpleUploadedFile(
            f"{slot.name}.pdf", b"%PDF-1.4", content_type="application/pdf"
        )
        for slot in LEGAL_SLOTS
        if slot.requirement is Requirement.MANDATORY
    }


def submit_pending(client: APIClient) -> dict:
    response = client.post(
        "/api/events",
        {**form(status="pending"), **document_files()},
        format="multipart",
    )
    assert response.status_code == 201, response.json()
    return response.json()


@pytest.mark.django_db
class TestEventList:
    """Tests for GET /api/events"""

    def test_list_events_empty_catalog(self, api_client: APIClient):
        """Given no events, returns empty list."""
        response = api_client.get("/api/events")
        assert response.status_code == 200
        assert response.json() == {"count": 0, "results": []}

    def test_only_upcoming_approved_events(self, api_client: APIClient, registrant):
        """Pending, rejected and past events stay out of the public listing."""
        listed = create_event(registrant, offsets=(-5, 2))
        create_event(registrant, offsets=(-1,))
        create_event(registrant, status="pending")
        create_event(registrant, status="rejected")
        response = api_client.get("/api/events")
        body = response.json()
        assert body["count"] == 1
        assert body["results"][0]["id"] == str(listed.id)
        assert body["results"][0]["status_badge"] == APPROVED_BADGE

    def test_list_events_cached_response(self, api_client: APIClient):
        """Given cached data, returns from cache."""
        cache.set(cache_keys.public_list_key(), {"count": 42, "results": []})
        assert api_client.get("/api/events").json()["count"] == 42


@pytest.mark.django_db
class TestSubmitEvent:
    """Tests for POST /api/events"""

    def test_anonymous_gets_401(self, api_client: APIClient):
        response = api_client.post("/api/events", form(), format="json")
        assert response.status_code == 401
        assert response.json()["error"]["code"] == "NOT_AUTHENTICATED"

    def test_save_draft(self, api_client: APIClient, registrant):
        """A registrant saves an incomplete form as a draft."""
        api_client.force_authenticate(user=registrant)
        response = api_client.post(
            "/api/events", {"titulo": "Feira", "status": "draft"}, format="json"
        )
        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "draft"
        assert body["status_badge"] == {"label": "Rascunho", "variant": "secondary"}
        assert body["user_id"] == str(registrant.pk)
        assert orm.Event.objects.get(id=body["id"]).user_id == registrant.pk

    def test_pending_missing_field(self, api_client: APIClient, registrant):
        api_client.force_authenticate(user=registrant)
        response = api_client.post(
            "/api/events",
            {**form(titulo="", status="pending"), **document_files()},
            format="multipart",
        )
        assert response.status_code == 400
        assert response.json()["error"] == {
            "code": "VALIDATION_FAILED",
            "message": "Required field: titulo",
            "field": "titulo",
        }
        assert orm.Event.objects.count() == 0

    def test_pending_without_documents(self, api_client: APIClient, registrant):
        api_client.force_authenticate(user=registrant)
        response = api_client.post("/api/events", form(status="pending"), format="json")
        assert response.status_code == 400
        assert response.json()["error"]["field"] == "requerimento_autorizacao"

    def test_pending_with_documents(
        self, api_client: APIClient, registrant, media_root
    ):
        """A complete submission stores every document and is pending review."""
        api_client.force_authenticate(user=registrant)
        body = submit_pending(api_client)
        assert body["status"] == "pending"
        assert body["document_count"] == 6
        assert body["required_documents"] == {"attached": 6, "required": 6}
        assert body["planta_local_url"].startswith("/media/eventos/")
        assert len(list((media_root / "eventos").iterdir())) == 6

    def test_wrong_file_type(self, api_client: APIClient, registrant):
        api_client.force_authenticate(user=registrant)
        photo = SimpleUploadedFile("foto.pdf", b"%PDF", content_type="application/pdf")
        files = {"foto1_file": photo}
        response = api_client.post(
            "/api/events", {**form(), **files}, format="multipart"
        )
        assert response.status_code == 400
        assert response.json()["error"]["field"] == "foto1"

    def test_malformed_input_uses_default_errors(
        self, api_client: APIClient, registrant
    ):
        api_client.force_authenticate(user=registrant)
        response = api_client.post(
            "/api/events", form(datas=["31/12/2025"]), format="json"
        )
        assert response.status_code == 400
        assert "datas" in response.json()


@pytest.mark.django_db
class TestEventDetail:
    """Tests for GET/PUT/DELETE /api/events/{id}"""

    def test_get_event_returns_details(self, api_client: APIClient, registrant):
        """Given an approved event, anyone sees its details."""
        event = create_event(registrant)
        response = api_client.get(f"/api/events/{event.id}")
        assert response.status_code == 200
        assert response.json()["titulo"] == "Festival de Inverno"
        assert response.json()["hora_inicio"] == "18:00"

    def test_get_event_not_found(self, api_client: APIClient):
        """Given event does not exist, returns 404."""
        response = api_client.get(f"/api/events/{MISSING_ID}")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "EVENT_NOT_FOUND"

    def test_get_event_invalid_uuid(self, api_client: APIClient):
        """Given invalid UUID, returns 400."""
        response = api_client.get("/api/events/not-a-uuid")
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_EVENT_ID"

    def test_draft_hidden_from_public(self, api_client: APIClient, registrant):
        event = create_event(registrant, status="draft")
        assert api_client.get(f"/api/events/{event.id}").status_code == 404
        api_client.force_authenticate(user=registrant)
        assert api_client.get(f"/api/events/{event.id}").status_code == 200

    def test_owner_updates_draft(self, api_client: APIClient, registrant):
        event = create_event(registrant, status="draft")
        api_client.force_authenticate(user=registrant)
        response = api_client.put(
            f"/api/events/{event.id}", form(titulo="Novo título"), format="json"
        )
        assert response.status_code == 200
        assert response.json()["titulo"] == "Novo título"

    def test_stranger_cannot_update(
        self, api_client: APIClient, registrant, other_registrant
    ):
        event = create_event(registrant, status="draft")
        api_client.force_authenticate(user=other_registrant)
        response = api_client.put(f"/api/events/{event.id}", form(), format="json")
        assert response.status_code == 403

    def test_approved_event_is_locked(self, api_client: APIClient, registrant):
        event = create_event(registrant)
        api_client.force_authenticate(user=registrant)
        response = api_client.put(f"/api/events/{event.id}", form(), format="json")
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "INVALID_TRANSITION"

    def test_owner_deletes_draft(self, api_client: APIClient, registrant):
        event = create_event(registrant, status="draft")
        api_client.force_authenticate(user=registrant)
        assert api_client.delete(f"/api/events/{event.id}").status_code == 204
        assert not orm.Event.objects.filter(id=event.id).exists()


@pytest.mark.django_db
class TestDecision:
    """Tests for POST /api/events/{id}/decision"""

    def test_admin_approves(self, api_client: APIClient, registrant, admin_user):
        """An approved event becomes part of the public listing."""
        api_client.force_authenticate(user=registrant)
        event = submit_pending(api_client)
        api_client.force_authenticate(user=admin_user)
        response = api_client.post(
            f"/api/events/{event['id']}/decision",
            {"decision": "approved"},
            format="json",
        )
        assert response.status_code == 200
        assert response.json()["status"] == "approved"
        api_client.force_authenticate(user=None)
        listed = api_client.get("/api/events").json()["results"]
        assert [e["id"] for e in listed] == [event["id"]]

    def test_second_decision_conflicts(
        self, api_client: APIClient, registrant, admin_user
    ):
        event = create_event(registrant, status="rejected")
        api_client.force_authenticate(user=admin_user)
        response = api_client.post(
            f"/api/events/{event.id}/decision", {"decision": "approved"}, format="json"
        )
        assert response.status_code == 409

    def test_registrant_cannot_decide(self, api_client: APIClient, registrant):
        event = create_event(registrant, status="pending")
        api_client.force_authenticate(user=registrant)
        response = api_client.post(
            f"/api/events/{event.id}/decision", {"decision": "approved"}, format="json"
        )
        assert response.status_code == 403
        assert response.json()["error"]["code"] == "PERMISSION_DENIED"

    def test_unknown_decision(self, api_client: APIClient, registrant, admin_user):
        event = create_event(registrant, status="pending")
        api_client.force_authenticate(user=admin_user)
        response = api_client.post(
            f"/api/events/{event.id}/decision", {"decision": "draft"}, format="json"
        )
        assert response.status_code == 400


@pytest.mark.django_db
class TestMyEvents:
    """Tests for GET /api/events/mine"""

    def test_requires_login(self, api_client: APIClient):
        assert api_client.get("/api/events/mine").status_code == 401

    def test_lists_own_events_with_counts(
        self, api_client: APIClient, registrant, other_registrant
    ):
        create_event(registrant, status="draft")
        create_event(registrant, status="pending")
        create_event(registrant, status="approved")
        create_event(other_registrant, status="pending")
        api_client.force_authenticate(user=registrant)
        body = api_client.get("/api/events/mine").json()
        assert len(body["results"]) == 3
        assert body["counts"] == {
            "draft": 1,
            "pending": 1,
            "approved": 1,
            "rejected": 0,
        }


@pytest.mark.django_db
class TestSchedule:
    """Tests for /api/events/{id}/schedule and /api/schedule/{id}"""

    def entry(self, offset=3, **overrides):
        values = {
            "data": day(offset),
            "hora_inicio": "14:00",
            "hora_fim": "15:00",
            "atividade": "Abertura",
        }
        values.update(overrides)
        return values

    def test_owner_adds_and_lists(self, api_client: APIClient, registrant):
        event = create_event(registrant, status="draft", offsets=(3, 4))
        api_client.force_authenticate(user=registrant)
        url = f"/api/events/{event.id}/schedule"
        show = self.entry(4, atividade="Show")
        assert api_client.post(url, show, format="json").status_code == 201
        assert api_client.post(url, self.entry(3), format="json").status_code == 201
        body = api_client.get(url).json()
        assert [e["atividade"] for e in body["results"]] == ["Abertura", "Show"]
        assert list(body["by_date"]) == [day(3), day(4)]

    def test_reversed_times_are_accepted(self, api_client: APIClient, registrant):
        event = create_event(registrant, status="draft")
        api_client.force_authenticate(user=registrant)
        response = api_client.post(
            f"/api/events/{event.id}/schedule",
            self.entry(hora_inicio="14:00", hora_fim="13:00"),
            format="json",
        )
        assert response.status_code == 201

    def test_date_outside_event(self, api_client: APIClient, registrant):
        event = create_event(registrant, status="draft")
        api_client.force_authenticate(user=registrant)
        response = api_client.post(
            f"/api/events/{event.id}/schedule", self.entry(offset=30), format="json"
        )
        assert response.status_code == 400
        assert response.json()["error"]["field"] == "data"

    def test_update_and_delete_entry(self, api_client: APIClient, registrant):
        event = create_event(registrant, status="draft")
        api_client.force_authenticate(user=registrant)
        created = api_client.post(
            f"/api/events/{event.id}/schedule", self.entry(), format="json"
        ).json()
        response = api_client.put(
            f"/api/schedule/{created['id']}",
            self.entry(atividade="Oficina"),
            format="json",
        )
        assert response.json()["atividade"] == "Oficina"
        assert api_client.delete(f"/api/schedule/{created['id']}").status_code == 204
        assert orm.ScheduleEntry.objects.count() == 0

    def test_stranger_cannot_add(
        self, api_client: APIClient, registrant, other_registrant
    ):
        event = create_event(registrant)
        api_client.force_authenticate(user=other_registrant)
        response = api_client.post(
            f"/api/events/{event.id}/schedule", self.entry(), format="json"
        )
        assert response.status_code == 403


@pytest.mark.django_db
class TestAdmin:
    """Tests for the /api/admin endpoints"""

    def test_events_with_statistics(
        self, api_client: APIClient, registrant, admin_user
    ):
        create_event(registrant, status="pending")
        create_event(registrant, status="approved")
        api_client.force_authenticate(user=admin_user)
        body = api_client.get("/api/admin/events").json()
        assert len(body["results"]) == 2
        assert len(body["by_status"]["pending"]) == 1
        assert body["statistics"]["total_events"] == 2
        assert body["statistics"]["pending_events"] == 1
        assert body["statistics"]["total_users"] == 2

    def test_statistics_forbidden_for_registrants(
        self, api_client: APIClient, registrant
    ):
        api_client.force_authenticate(user=registrant)
        assert api_client.get("/api/admin/statistics").status_code == 403

    def test_users_listing(self, api_client: APIClient, registrant, admin_user):
        api_client.force_authenticate(user=admin_user)
        body = api_client.get("/api/admin/users").json()
        listed = {u["id"] for u in body["results"]}
        assert listed == {str(registrant.pk), str(admin_user.pk)}

    def test_change_role_and_status(self, api_client: APIClient, make_user, admin_user):
        newcomer = make_user("novo", status="pending")
        api_client.force_authenticate(user=admin_user)
        response = api_client.patch(
            f"/api/admin/users/{newcomer.pk}",
            {"role": "admin", "status_pedido": "approved"},
            format="json",
        )
        assert response.status_code == 200
        assert response.json()["role"] == "admin"
        assert response.json()["status_badge"] == APPROVED_BADGE

    def test_empty_patch(self, api_client: APIClient, registrant, admin_user):
        api_client.force_authenticate(user=admin_user)
        response = api_client.patch(
            f"/api/admin/users/{registrant.pk}", {}, format="json"
        )
        assert response.status_code == 400

    def test_unknown_user(self, api_client: APIClient, admin_user):
        api_client.force_authenticate(user=admin_user)
        response = api_client.patch(
            "/api/admin/users/999", {"role": "admin"}, format="json"
        )
        assert response.status_code == 404

    def test_non_numeric_user_id(self, api_client: APIClient, admin_user):
        api_client.force_authenticate(user=admin_user)
        response = api_client.patch(
            "/api/admin/users/abc", {"status_pedido": "approved"}, format="json"
        )
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "USER_NOT_FOUND"


@pytest.mark.django_db
class TestSession:
    """Tests for /api/me and /api/session/sign-out"""

    def test_me_requires_login(self, api_client: APIClient):
        assert api_client.get("/api/me").status_code == 401

    def test_first_visit_creates_profile(self, api_client: APIClient, make_user):
        user = make_user("carla", role=None)
        api_client.force_authenticate(user=user)
        body = api_client.get("/api/me").json()
        assert body["role"] == "registrant"
        assert body["status_pedido"] == "approved"
        assert body["status_badge"] == APPROVED_BADGE
        assert orm.UserProfile.objects.filter(user=user).exists()

    def test_sign_out(self, api_client: APIClient, registrant):
        api_client.force_login(registrant)
        assert api_client.get("/api/me").status_code == 200
        assert api_client.post("/api/session/sign-out").status_code == 204
        assert api_client.get("/api/me").status_code == 401
