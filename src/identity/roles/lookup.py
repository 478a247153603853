"""Role lookup backed by the identity domain's role assignments."""

from protean.utils.globals import current_domain

from identity.domain import identity
from identity.roles.assignment import UserRoleAssignment
from identity.session.provider_port import IdentityProvider
from identity.shared.role import UserRole


def find_user_role(user_id) -> UserRole | None:
    repo = current_domain.repository_for(UserRoleAssignment)
    assignments = repo._dao.query.filter(user_id=str(user_id)).all().items
    if not assignments:
        return None
    return UserRole(assignments[0].role)


class RoleDirectoryProvider(IdentityProvider):
    """Identity provider whose roles come from the role assignments.

    Sessions and events are delegated to the wrapped provider.
    """

    def __init__(self, inner: IdentityProvider, domain=identity):
        self.inner = inner
        self._domain = domain

    def subscribe_to_session_changes(self, handler):
        return self.inner.subscribe_to_session_changes(handler)

    async def get_current_session(self):
        return await self.inner.get_current_session()

    async def lookup_user_role(self, user_id):
        with self._domain.domain_context():
            return find_user_role(user_id)
