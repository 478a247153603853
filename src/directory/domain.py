"""Directory bounded context: suppliers listed on the marketplace.

Holds the supplier records the storefront reads and the glue that prepares the
approval/rejection notice sent to a supplier after an admin review.
"""

import structlog
from protean.domain import Domain

directory = Domain(name="directory")

logger = structlog.get_logger(__name__)
