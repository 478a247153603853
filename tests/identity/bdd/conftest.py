"""Shared BDD fixtures and step definitions for the Identity domain."""

import pytest
from identity.session.fake_provider import ProviderGate
from identity.shared.role import UserRole
from pytest_bdd import given, parsers


@pytest.fixture()
def gates():
    """Provider gates declared by Given steps."""
    return {}


@given(parsers.cfparse('user "{user_id}" holds the role "{role}"'))
def user_holds_role(provider, user_id, role):
    provider.assign_role(user_id, UserRole(role))


@given("a started session machine")
def started_machine(machine):
    machine.start()


@given("the provider stalls the initial fetch")
def stall_initial_fetch(provider, gates):
    # The initial fetch is queued but has not run yet, so it picks the gate up.
    gates["session"] = ProviderGate()
    provider.configure(session_gate=gates["session"])


@given("the provider stalls role lookups")
def stall_role_lookups(provider, gates):
    gates["role"] = ProviderGate()
    provider.configure(role_gate=gates["role"])
