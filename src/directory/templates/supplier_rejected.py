"""Supplier rejection template: sent when an admin rejects an application."""

from directory.templates.branding import MARKETPLACE_NAME


class SupplierRejectedTemplate:
    action = "rejected"

    @staticmethod
    def render(context: dict) -> dict:
        first_name = context.get("first_name") or "Supplier"
        business_name = context.get("business_name", "")
        return {
            "subject": f"Application Update - {MARKETPLACE_NAME}",
            "body": (
                f"Dear {first_name}, your supplier application for \"{business_name}\" has been rejected. "
                "Please contact support for more information."
            ),
        }
