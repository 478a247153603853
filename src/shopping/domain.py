"""Shopping bounded context: Cart aggregate and checkout split.

Holds the in-memory cart owned by one storefront UI session and the pure
derivations checkout needs to create one order per supplier.
"""

import structlog
from protean.domain import Domain

shopping = Domain(name="shopping")

logger = structlog.get_logger(__name__)
