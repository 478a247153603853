"""Template registry: maps a review decision to its notice template."""

from directory.templates.supplier_approved import SupplierApprovedTemplate
from directory.templates.supplier_rejected import SupplierRejectedTemplate

TEMPLATE_REGISTRY: dict[str, type] = {
    SupplierApprovedTemplate.action: SupplierApprovedTemplate,
    SupplierRejectedTemplate.action: SupplierRejectedTemplate,
}


def get_template(action: str):
    """Look up a template class by review decision."""
    template_cls = TEMPLATE_REGISTRY.get(action)
    if template_cls is None:
        raise ValueError(f"No template registered for supplier action: {action}")
    return template_cls
