"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from event_registry import container


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def fresh_services():
    container.reset()
    yield
    container.reset()


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    settings.MEDIA_ROOT = str(tmp_path / "media")
    return tmp_path / "media"


@pytest.fixture
def make_user(django_user_model):
    """Create an account, with a profile unless ``role`` is None."""
    from event_registry.models import UserProfile

    def make(username: str, role: str | None = "registrant", status: str = "approved"):
        user = django_user_model.objects.create_user(
            username=username,
            email=f"{username}@example.org",
            password="secret-123",
            first_name=username.title(),
        )
        if role is not None:
            UserProfile.objects.create(
                user=user, nome=user.get_full_name(), role=role, status_pedido=status
            )
        return user

    return make


@pytest.fixture
def registrant(make_user):
    return make_user("maria")


@pytest.fixture
def other_registrant(make_user):
    return make_user("joao")


@pytest.fixture
def admin_user(make_user):
    return make_user("prefeitura", role="admin")
