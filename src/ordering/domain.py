"""Ordering bounded context: shopping cart, pricing and checkout.

Cart lines are stored per (user, product). Carts are priced on demand from a
fresh catalogue snapshot and finalized into order confirmations at checkout.
"""

import structlog
from protean.domain import Domain

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)
