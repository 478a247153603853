"""FastAPI endpoints for the Identity domain."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from identity.api.schemas import AssignRoleRequest, StatusResponse, UserRoleResponse
from identity.roles.assignment import AssignRole
from identity.roles.lookup import find_user_role

router = APIRouter(prefix="/users", tags=["users"])


@router.put("/{user_id}/role", response_model=StatusResponse)
async def assign_role(user_id: str, body: AssignRoleRequest) -> StatusResponse:
    command = AssignRole(user_id=user_id, role=body.role)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@router.get("/{user_id}/role", response_model=UserRoleResponse)
async def get_user_role(user_id: str) -> UserRoleResponse:
    role = find_user_role(user_id)
    return UserRoleResponse(user_id=user_id, role=role.value if role else None)
