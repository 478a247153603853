"""Fake identity provider: scripted sessions and roles for testing."""

from identity.session.provider_port import IdentityProvider, Subscription


class ProviderGate:
    """Awaitable that stays pending until ``open()`` is called.

    Yields bare ``None`` while closed, which both asyncio tasks and
    ``ManualScheduler`` treat as "poll me again later".
    """

    def __init__(self):
        self.is_open = False

    def open(self):
        self.is_open = True

    def __await__(self):
        while not self.is_open:
            yield
        return None


class FakeSubscription(Subscription):
    def __init__(self, provider, handler):
        self._provider = provider
        self._handler = handler

    def unsubscribe(self) -> None:
        self._provider.unsubscribe_calls += 1
        if self._handler in self._provider.handlers:
            self._provider.handlers.remove(self._handler)


class FakeIdentityProvider(IdentityProvider):
    """Identity provider that keeps sessions and roles in memory.

    ``emit()`` delivers a session-changed event synchronously to every active
    handler, the way the hosted provider dispatches from its own call frame.
    Gates hold the async calls open until a test releases them.
    """

    def __init__(self):
        self.handlers = []
        self.unsubscribe_calls = 0
        self.current_session = None
        self.roles = {}
        self.session_fetches = 0
        self.role_lookups: list[str] = []
        self.session_error: Exception | None = None
        self.role_error: Exception | None = None
        self.session_gate: ProviderGate | None = None
        self.role_gate: ProviderGate | None = None

    def configure(self, session_error=None, role_error=None, session_gate=None, role_gate=None):
        """Configure the fake provider behavior for testing."""
        self.session_error = session_error
        self.role_error = role_error
        self.session_gate = session_gate
        self.role_gate = role_gate

    def assign_role(self, user_id, role):
        self.roles[user_id] = role

    def subscribe_to_session_changes(self, handler) -> Subscription:
        self.handlers.append(handler)
        return FakeSubscription(self, handler)

    def emit(self, auth_event, session):
        self.current_session = session
        for handler in list(self.handlers):
            handler(auth_event, session)

    async def get_current_session(self):
        self.session_fetches += 1
        # Captured now: a fetch answers with the session current when it was issued
        session = self.current_session
        if self.session_gate is not None:
            await self.session_gate
        if self.session_error is not None:
            raise self.session_error
        return session

    async def lookup_user_role(self, user_id):
        self.role_lookups.append(user_id)
        if self.role_gate is not None:
            await self.role_gate
        if self.role_error is not None:
            raise self.role_error
        return self.roles.get(user_id)

    def reset(self):
        """Forget sessions, roles and configured failures (useful between tests)."""
        self.handlers.clear()
        self.unsubscribe_calls = 0
        self.current_session = None
        self.roles.clear()
        self.session_fetches = 0
        self.role_lookups.clear()
        self.configure()
