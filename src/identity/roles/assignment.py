"""User role assignment: aggregate, command and handler.

Each user holds exactly one marketplace role. Assigning a role to a user who
already has one replaces it.
"""

from datetime import UTC, datetime

from protean import handle
from protean.fields import DateTime, Identifier, String
from protean.utils.globals import current_domain

from identity.domain import identity
from identity.shared.role import UserRole


@identity.event(part_of="UserRoleAssignment")
class RoleAssigned:
    """A user was given a marketplace role."""

    __version__ = 1

    user_id = Identifier(required=True)
    role = String(required=True)
    previous_role = String()


@identity.aggregate
class UserRoleAssignment:
    user_id = Identifier(required=True, unique=True)
    role = String(required=True, choices=UserRole)
    assigned_at = DateTime()

    @classmethod
    def assign(cls, user_id, role):
        role = UserRole(role).value
        assignment = cls(user_id=user_id, role=role, assigned_at=datetime.now(UTC))
        assignment.raise_(RoleAssigned(user_id=str(user_id), role=role))
        return assignment

    def change_role(self, role):
        role = UserRole(role).value
        if role == self.role:
            return

        previous_role = self.role
        self.role = role
        self.assigned_at = datetime.now(UTC)
        self.raise_(
            RoleAssigned(
                user_id=str(self.user_id),
                role=role,
                previous_role=previous_role,
            )
        )


@identity.command(part_of="UserRoleAssignment")
class AssignRole:
    user_id = Identifier(required=True)
    role = String(required=True, choices=UserRole)


@identity.command_handler(part_of=UserRoleAssignment)
class AssignRoleHandler:
    @handle(AssignRole)
    def assign_role(self, command):
        repo = current_domain.repository_for(UserRoleAssignment)
        existing = repo._dao.query.filter(user_id=command.user_id).all().items

        if existing:
            assignment = repo.get(existing[0].id)
            assignment.change_role(command.role)
        else:
            assignment = UserRoleAssignment.assign(user_id=command.user_id, role=command.role)

        repo.add(assignment)
        return str(assignment.id)
