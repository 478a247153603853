"""Identity bounded context: authentication session and user roles.

Tracks the signed-in user across the identity provider's event stream and
resolves the user's marketplace role (customer, supplier or admin).
"""

from protean.domain import Domain

from identity.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
identity = Domain(name="identity")
