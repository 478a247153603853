import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def identity_bed():
    from identity.domain import identity

    bed = DomainFixture(identity)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(identity_bed):
    with identity_bed.domain_context():
        yield


@pytest.fixture()
def provider():
    from identity.session.fake_provider import FakeIdentityProvider

    return FakeIdentityProvider()


@pytest.fixture()
def scheduler():
    from identity.session.scheduling import ManualScheduler

    scheduler = ManualScheduler()
    yield scheduler
    scheduler.close()


@pytest.fixture()
def machine(provider, scheduler):
    from identity.session.machine import SessionMachine

    machine = SessionMachine(provider, scheduler, fallback_timeout=5.0)
    yield machine
    machine.stop()
    scheduler.close()


@pytest.fixture()
def make_session():
    from identity.session.state import AuthSession, User

    def _make(user_id="usr-001", email="amina@example.com", token="token-001"):
        return AuthSession(access_token=token, user=User(id=user_id, email=email))

    return _make
