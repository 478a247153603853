"""Session state machine executor.

``SessionMachine`` owns one ``SessionState`` for the lifetime of a mounted UI
component. It feeds provider events through the pure ``transition`` function
and runs the side effects: the initial session fetch, deferred role lookups and
the loading fallback timer. ``stop()`` is the only cancellation mechanism;
every callback checks the liveness flag before touching state.
"""

from identity.session import session_fallback_timeout
from identity.session.state import SessionState
from identity.session.transitions import (
    FallbackTimeoutElapsed,
    InitialSessionFailed,
    InitialSessionLoaded,
    RoleLookupFailed,
    RoleResolved,
    SessionChanged,
    transition,
)
from identity.utils.logging import get_logger

logger = get_logger(__name__)


class SessionMachine:
    def __init__(self, provider, scheduler, fallback_timeout=None):
        self._provider = provider
        self._scheduler = scheduler
        self._fallback_timeout = session_fallback_timeout() if fallback_timeout is None else fallback_timeout
        self._state = SessionState.initial()
        self._alive = False
        self._started = False
        self._subscription = None
        self._fallback_timer = None
        self._listeners = []

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def alive(self) -> bool:
        return self._alive

    def subscribe(self, listener):
        """Call ``listener(state)`` after every applied transition.

        Returns a function that removes the listener.
        """
        self._listeners.append(listener)

        def remove():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove

    # -------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------
    def start(self):
        if self._started:
            raise RuntimeError("SessionMachine has already been started")

        self._started = True
        self._alive = True
        self._subscription = self._provider.subscribe_to_session_changes(self._on_session_changed)
        self._scheduler.spawn(self._load_initial_session())
        self._fallback_timer = self._scheduler.call_later(self._fallback_timeout, self._on_fallback_timeout)

    def stop(self):
        if not self._alive:
            return

        self._alive = False
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None
        if self._fallback_timer is not None:
            self._fallback_timer.cancel()
            self._fallback_timer = None
        self._listeners.clear()
        logger.debug("session.machine_stopped")

    # -------------------------------------------------------------------
    # Provider callbacks
    # -------------------------------------------------------------------
    def _on_session_changed(self, auth_event, session):
        # Runs inside the provider's dispatch frame: assign state and return.
        if not self._alive:
            return

        logger.info("session.changed", auth_event=auth_event, has_session=session is not None)
        self._dispatch(SessionChanged(session=session))

    async def _load_initial_session(self):
        if not self._alive:
            return

        logger.debug("session.initial_fetch_started")
        try:
            session = await self._provider.get_current_session()
        except Exception as exc:
            logger.error("session.initial_fetch_failed", error=str(exc), exc_info=True)
            if self._alive:
                self._dispatch(InitialSessionFailed())
            return

        if self._alive:
            self._dispatch(InitialSessionLoaded(session=session))

    def _on_fallback_timeout(self):
        self._fallback_timer = None
        if not self._alive:
            return

        if self._state.loading:
            logger.warning("session.initialization_timeout", timeout=self._fallback_timeout)
        self._dispatch(FallbackTimeoutElapsed())

    # -------------------------------------------------------------------
    # Role resolution
    # -------------------------------------------------------------------
    def _schedule_role_lookup(self, user_id):
        # Deferred to the next tick so the lookup never re-enters the
        # provider from inside its own event dispatch.
        self._scheduler.call_soon(self._start_role_lookup, user_id)

    def _start_role_lookup(self, user_id):
        if not self._alive:
            return
        self._scheduler.spawn(self._resolve_role(user_id))

    async def _resolve_role(self, user_id):
        try:
            role = await self._provider.lookup_user_role(user_id)
        except Exception as exc:
            logger.error("session.role_lookup_failed", user_id=user_id, error=str(exc), exc_info=True)
            if self._alive:
                self._dispatch(RoleLookupFailed(user_id=user_id))
            return

        if not self._alive:
            logger.debug("session.role_discarded", user_id=user_id)
            return

        logger.info("session.role_resolved", user_id=user_id, role=role.value if role else None)
        self._dispatch(RoleResolved(user_id=user_id, role=role))

    async def refresh_user_role(self):
        """Look the current user's role up again and return the resulting role."""
        user = self._state.user
        if user is None or not self._alive:
            return None

        await self._resolve_role(user.id)
        return self._state.role

    # -------------------------------------------------------------------
    # State assignment
    # -------------------------------------------------------------------
    def _dispatch(self, event):
        previous = self._state
        state = transition(previous, event)
        if state is previous:
            return

        self._state = state
        for listener in list(self._listeners):
            listener(state)

        if isinstance(event, (SessionChanged, InitialSessionLoaded)) and state.user is not None:
            self._schedule_role_lookup(state.user.id)
