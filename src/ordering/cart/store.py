"""Cart store: the operations the storefront performs on a user's bag.

Each call processes one command synchronously inside its own unit of work,
so it either fully applies or leaves the store untouched. Failures of the
store itself surface as CartStoreError with the original error chained.
"""

import structlog
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from ordering.cart.items import AddToBag, RemoveLine, SetLineQuantity
from ordering.cart.line import CartLine
from ordering.errors import CartLineNotFound, CartStoreError

logger = structlog.get_logger(__name__)


def _process(command):
    try:
        return current_domain.process(command, asynchronous=False)
    except (ValidationError, ObjectNotFoundError):
        raise
    except Exception as exc:
        logger.error("Cart store command failed", command=type(command).__name__, error=str(exc))
        raise CartStoreError(f"{type(command).__name__} failed: {exc}") from exc


def add_or_merge(user_id, product_id, quantity) -> str:
    """Put ``quantity`` units of a product in the user's bag and return the line id.

    An existing line for the same product grows by ``quantity``. If a
    concurrent add created the line first, the unique line key rejects this
    insert and the add is re-issued once, which then merges.
    """
    command = AddToBag(user_id=user_id, product_id=product_id, quantity=quantity)
    try:
        return _process(command)
    except ValidationError as exc:
        if "line_key" not in (exc.messages or {}):
            raise
        logger.info(
            "Concurrent add converged on existing cart line",
            user_id=str(user_id),
            product_id=str(product_id),
        )
        return _process(command)


def set_quantity(line_id, quantity) -> None:
    """Replace a line's quantity. Quantities below one raise InvalidQuantity."""
    try:
        _process(SetLineQuantity(line_id=line_id, quantity=quantity))
    except ObjectNotFoundError as exc:
        raise CartLineNotFound(line_id) from exc


def remove(line_id) -> None:
    """Delete a line. Removing a line that is already gone is not an error."""
    _process(RemoveLine(line_id=line_id))


def list_lines(user_id) -> list[CartLine]:
    try:
        return current_domain.repository_for(CartLine).for_user(user_id)
    except Exception as exc:
        raise CartStoreError(f"Could not list cart lines for user {user_id}: {exc}") from exc
