"""User service - account profiles, roles and onboarding status."""

import structlog

from event_registry.domain import Identity, RequestStatus, Role, UserId, UserProfile
from event_registry.domain.errors import UserNotFoundError
from event_registry.services.access import require_admin
from event_registry.stores.interfaces import UserStore

logger = structlog.get_logger(__name__)


def parse_user_id(user_id: str | UserId) -> UserId:
    """Raises UserNotFoundError for a blank id."""
    if isinstance(user_id, UserId):
        return user_id
    try:
        return UserId(str(user_id))
    except ValueError:
        raise UserNotFoundError(str(user_id)) from None


class UserService:
    """Service for the user directory."""

    def __init__(self, store: UserStore) -> None:
        self._store = store

    def ensure_profile(self, identity: Identity) -> UserProfile:
        """Return the profile of ``identity``, creating one on first access."""
        profile = self._store.get_user(identity.id)
        if profile is not None:
            return profile
        profile = self._store.insert_user(
            UserProfile(
                id=identity.id,
                nome=identity.nome or "Usuário",
                role=Role.REGISTRANT,
                status_pedido=RequestStatus.APPROVED,
            )
        )
        logger.info("profile_created", user_id=str(identity.id))
        return profile

    def list_users(self, actor: Identity | None) -> list[UserProfile]:
        """Return all profiles, newest first. Administrators only."""
        require_admin(actor)
        return self._store.list_users()

    def set_role(
        self, actor: Identity | None, user_id: str | UserId, role: Role
    ) -> UserProfile:
        """Raises UserNotFoundError if there is no such profile."""
        actor = require_admin(actor)
        user_id = parse_user_id(user_id)
        profile = self._store.update_user(user_id, role=role)
        if profile is None:
            raise UserNotFoundError(str(user_id))
        logger.info(
            "user_role_changed",
            user_id=str(user_id),
            role=role.value,
            admin_id=str(actor.id),
        )
        return profile

    def set_status(
        self, actor: Identity | None, user_id: str | UserId, status: RequestStatus
    ) -> UserProfile:
        actor = require_admin(actor)
        user_id = parse_user_id(user_id)
        profile = self._store.update_user(user_id, status_pedido=status)
        if profile is None:
            raise UserNotFoundError(str(user_id))
        logger.info(
            "user_status_changed",
            user_id=str(user_id),
            status=status.value,
            admin_id=str(actor.id),
        )
        return profile
