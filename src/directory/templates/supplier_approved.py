"""Supplier approval template: sent when an admin approves an application."""

from directory.templates.branding import MARKETPLACE_NAME


class SupplierApprovedTemplate:
    action = "approved"

    @staticmethod
    def render(context: dict) -> dict:
        first_name = context.get("first_name") or "Supplier"
        business_name = context.get("business_name", "")
        return {
            "subject": f"🎉 Welcome to {MARKETPLACE_NAME}! Your supplier application has been approved",
            "body": (
                f"Dear {first_name}, your supplier application for \"{business_name}\" has been APPROVED! "
                "You can now access your dashboard and start managing your business."
            ),
        }
