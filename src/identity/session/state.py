"""Authentication session state as seen by the storefront.

``SessionState`` is an immutable value: every transition produces a new one, so a
reader always sees a user, session and role that were assigned together.
"""

from dataclasses import dataclass
from enum import Enum

from identity.shared.role import UserRole


@dataclass(frozen=True)
class User:
    """The signed-in user as reported by the identity provider."""

    id: str
    email: str | None = None


@dataclass(frozen=True)
class AuthSession:
    """Opaque session handle owned by the identity provider."""

    access_token: str
    user: User | None = None
    expires_at: int | None = None


class SessionPhase(Enum):
    INITIALIZING = "Initializing"
    UNAUTHENTICATED = "Unauthenticated"
    ROLE_PENDING = "AuthenticatedRolePending"
    RESOLVED = "AuthenticatedResolved"


@dataclass(frozen=True)
class SessionState:
    session: AuthSession | None = None
    user: User | None = None
    role: UserRole | None = None
    loading: bool = True
    # Set once a session-changed event has been applied; the initial fetch
    # never overrides an event.
    change_event_seen: bool = False

    @classmethod
    def initial(cls):
        return cls()

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def phase(self) -> SessionPhase:
        if self.user is not None:
            return SessionPhase.ROLE_PENDING if self.role is None else SessionPhase.RESOLVED
        if self.loading:
            return SessionPhase.INITIALIZING
        return SessionPhase.UNAUTHENTICATED

    @property
    def is_customer(self) -> bool:
        return self.role is UserRole.CUSTOMER

    @property
    def is_supplier(self) -> bool:
        return self.role is UserRole.SUPPLIER

    @property
    def is_admin(self) -> bool:
        return self.role is UserRole.ADMIN
