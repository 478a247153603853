"""Pydantic request/response schemas for the Identity API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

# --- Request Schemas ---


class AssignRoleRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"role": "supplier"}]}}

    role: Literal["admin", "customer", "supplier"]


# --- Response Schemas ---


class UserRoleResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"user_id": "usr-001", "role": "customer"}]}}

    user_id: str
    role: str | None = None


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"
