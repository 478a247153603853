"""Tests for the pure session transition function."""

import pytest
from identity.session.state import AuthSession, SessionPhase, SessionState, User
from identity.session.transitions import (
    FallbackTimeoutElapsed,
    InitialSessionFailed,
    InitialSessionLoaded,
    RoleLookupFailed,
    RoleResolved,
    SessionChanged,
    transition,
)
from identity.shared.role import UserRole

USER = User(id="usr-001", email="amina@example.com")
OTHER_USER = User(id="usr-002")
SESSION = AuthSession(access_token="token-001", user=USER)
OTHER_SESSION = AuthSession(access_token="token-002", user=OTHER_USER)


def _resolved(role=UserRole.CUSTOMER):
    state = transition(SessionState.initial(), SessionChanged(session=SESSION))
    return transition(state, RoleResolved(user_id=USER.id, role=role))


class TestSessionChanged:
    def test_signed_in(self):
        state = transition(SessionState.initial(), SessionChanged(session=SESSION))
        assert state.user == USER
        assert state.session == SESSION
        assert state.role is None
        assert state.loading is False
        assert state.phase is SessionPhase.ROLE_PENDING

    def test_signed_out(self):
        state = transition(_resolved(), SessionChanged(session=None))
        assert state.user is None
        assert state.session is None
        assert state.role is None
        assert state.phase is SessionPhase.UNAUTHENTICATED

    def test_resets_role(self):
        state = transition(_resolved(), SessionChanged(session=SESSION))
        assert state.role is None
        assert state.phase is SessionPhase.ROLE_PENDING

    def test_marks_change_event_seen(self):
        state = transition(SessionState.initial(), SessionChanged(session=None))
        assert state.change_event_seen is True

    def test_does_not_mutate_previous_state(self):
        initial = SessionState.initial()
        transition(initial, SessionChanged(session=SESSION))
        assert initial == SessionState.initial()


class TestInitialSession:
    def test_loaded_with_user(self):
        state = transition(SessionState.initial(), InitialSessionLoaded(session=SESSION))
        assert state.user == USER
        assert state.loading is False
        assert state.change_event_seen is False

    def test_loaded_without_session(self):
        state = transition(SessionState.initial(), InitialSessionLoaded(session=None))
        assert state.phase is SessionPhase.UNAUTHENTICATED

    def test_ignored_after_change_event(self):
        state = transition(SessionState.initial(), SessionChanged(session=SESSION))
        assert transition(state, InitialSessionLoaded(session=None)) is state

    def test_failure_resolves_unauthenticated(self):
        state = transition(SessionState.initial(), InitialSessionFailed())
        assert state.loading is False
        assert state.user is None

    def test_failure_ignored_after_change_event(self):
        state = transition(SessionState.initial(), SessionChanged(session=SESSION))
        assert transition(state, InitialSessionFailed()) is state


class TestRoleResolution:
    def test_role_applied_for_current_user(self):
        state = _resolved(UserRole.SUPPLIER)
        assert state.role is UserRole.SUPPLIER
        assert state.phase is SessionPhase.RESOLVED

    def test_role_for_other_user_ignored(self):
        state = transition(SessionState.initial(), SessionChanged(session=OTHER_SESSION))
        assert transition(state, RoleResolved(user_id=USER.id, role=UserRole.ADMIN)) is state

    def test_role_without_user_ignored(self):
        state = transition(SessionState.initial(), SessionChanged(session=None))
        assert transition(state, RoleResolved(user_id=USER.id, role=UserRole.ADMIN)) is state

    def test_missing_role_keeps_role_empty(self):
        state = transition(SessionState.initial(), SessionChanged(session=SESSION))
        assert transition(state, RoleResolved(user_id=USER.id, role=None)).role is None

    def test_lookup_failure_keeps_resolved_role(self):
        state = _resolved(UserRole.ADMIN)
        assert transition(state, RoleLookupFailed(user_id=USER.id)) is state
        assert state.role is UserRole.ADMIN

    def test_lookup_failure_while_pending_keeps_role_empty(self):
        state = transition(SessionState.initial(), SessionChanged(session=SESSION))
        assert transition(state, RoleLookupFailed(user_id=USER.id)).role is None

    def test_lookup_failure_for_other_user_ignored(self):
        state = _resolved()
        assert transition(state, RoleLookupFailed(user_id=OTHER_USER.id)) is state


class TestFallbackTimeout:
    def test_forces_loading_off(self):
        state = transition(SessionState.initial(), FallbackTimeoutElapsed())
        assert state.loading is False
        assert state.user is None

    def test_no_op_once_loaded(self):
        state = transition(SessionState.initial(), SessionChanged(session=SESSION))
        assert transition(state, FallbackTimeoutElapsed()) is state


def test_unknown_event_rejected():
    with pytest.raises(TypeError, match="Unknown session event"):
        transition(SessionState.initial(), object())
