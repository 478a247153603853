"""Pure transition function of the session state machine.

``transition(state, event)`` never performs I/O and never schedules work; the
``SessionMachine`` executor feeds it events and runs the side effects.
"""

from dataclasses import dataclass, replace

from identity.session.state import AuthSession, SessionState
from identity.shared.role import UserRole


@dataclass(frozen=True)
class SessionChanged:
    """The identity provider reported a new session (or none, on sign-out)."""

    session: AuthSession | None


@dataclass(frozen=True)
class InitialSessionLoaded:
    session: AuthSession | None


@dataclass(frozen=True)
class InitialSessionFailed:
    pass


@dataclass(frozen=True)
class RoleResolved:
    user_id: str
    role: UserRole | None


@dataclass(frozen=True)
class RoleLookupFailed:
    user_id: str


@dataclass(frozen=True)
class FallbackTimeoutElapsed:
    pass


def _from_session(session, change_event_seen):
    user = session.user if session is not None else None
    return SessionState(
        session=session,
        user=user,
        role=None,
        loading=False,
        change_event_seen=change_event_seen,
    )


def transition(state: SessionState, event) -> SessionState:
    """Return the state that follows ``state`` once ``event`` is applied.

    Returns ``state`` itself when the event does not apply, so callers can
    detect a no-op with an identity check.
    """
    if isinstance(event, SessionChanged):
        return _from_session(event.session, change_event_seen=True)

    if isinstance(event, InitialSessionLoaded):
        if state.change_event_seen:
            return state
        return _from_session(event.session, change_event_seen=False)

    if isinstance(event, InitialSessionFailed):
        if state.change_event_seen:
            return state
        return SessionState(loading=False)

    if isinstance(event, RoleResolved):
        if state.user is None or state.user.id != event.user_id or state.role == event.role:
            return state
        return replace(state, role=event.role)

    if isinstance(event, RoleLookupFailed):
        # A failed lookup keeps whatever role is already known
        return state

    if isinstance(event, FallbackTimeoutElapsed):
        if not state.loading:
            return state
        return replace(state, loading=False)

    raise TypeError(f"Unknown session event: {event!r}")
