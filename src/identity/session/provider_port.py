"""Identity provider port: abstract interface to the hosted auth service."""

from abc import ABC, abstractmethod
from collections.abc import Callable

from identity.session.state import AuthSession
from identity.shared.role import UserRole

# handler(auth_event, session); auth_event is the provider's event name
# ("SIGNED_IN", "SIGNED_OUT", "TOKEN_REFRESHED", ...)
SessionChangeHandler = Callable[[str, AuthSession | None], None]


class Subscription(ABC):
    @abstractmethod
    def unsubscribe(self) -> None: ...


class IdentityProvider(ABC):
    """Abstract interface for identity provider adapters."""

    @abstractmethod
    def subscribe_to_session_changes(self, handler: SessionChangeHandler) -> Subscription:
        """Register ``handler`` for session-changed events.

        Events arrive on the provider's own dispatch path, which may hold the
        provider's internal locks: handlers must not call back into the provider
        before returning.
        """
        ...

    @abstractmethod
    async def get_current_session(self) -> AuthSession | None: ...

    @abstractmethod
    async def lookup_user_role(self, user_id: str) -> UserRole | None: ...
