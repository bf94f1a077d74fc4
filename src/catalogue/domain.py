"""Catalogue bounded context: products offered by sellers.

Owns the Product aggregate, the seller listing commands, and the
point-in-time catalog snapshots that the ordering context prices carts from.
"""

from protean.domain import Domain

from catalogue.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging(log_file_prefix="storefront")

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
catalogue = Domain(name="catalogue")
