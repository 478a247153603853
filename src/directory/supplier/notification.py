"""Supplier review notice: looks up the supplier and prepares the email.

Delivery is not wired to an email service: the prepared message is logged and
returned so the caller can report what would be sent.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from directory.domain import logger
from directory.supplier.supplier import Supplier
from directory.templates import get_template


class SupplierNotificationError(Exception):
    """The notice cannot be prepared for this supplier."""


def prepare_supplier_notification(supplier_id, action, admin_email=None) -> dict:
    logger.info("supplier_notification.processing", supplier_id=supplier_id, action=action)
    template = get_template(action)

    try:
        supplier = current_domain.repository_for(Supplier).get(supplier_id)
    except ObjectNotFoundError:
        raise SupplierNotificationError("Supplier not found") from None

    owner = supplier.owner
    user_email = owner.email if owner else None
    if not user_email:
        raise SupplierNotificationError("Supplier email not found")

    rendered = template.render(
        {
            "first_name": owner.first_name,
            "business_name": supplier.business_name,
        }
    )

    logger.info(
        "supplier_notification.email_prepared",
        to=user_email,
        subject=rendered["subject"],
        message=rendered["body"],
        business_name=supplier.business_name,
        action=action,
        admin_email=admin_email,
    )

    return {
        "success": True,
        "message": f"Notification prepared for {action} supplier",
        "details": {
            "email": user_email,
            "businessName": supplier.business_name,
            "action": action,
            "subject": rendered["subject"],
        },
    }
