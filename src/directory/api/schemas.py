"""Pydantic request schemas for the Directory API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class SupplierNotificationRequest(BaseModel):
    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [{"supplierId": "sup-001", "action": "approved", "adminEmail": "admin@example.com"}]
        },
    }

    supplier_id: str = Field(..., alias="supplierId")
    action: Literal["approved", "rejected"]
    admin_email: str | None = Field(None, alias="adminEmail")
