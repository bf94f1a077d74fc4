"""Cart line management: commands and handler."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from ordering.cart.line import CartLine
from ordering.domain import ordering

logger = structlog.get_logger(__name__)


@ordering.command(part_of="CartLine")
class AddToBag:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)


@ordering.command(part_of="CartLine")
class SetLineQuantity:
    line_id = Identifier(required=True)
    quantity = Integer(required=True)


@ordering.command(part_of="CartLine")
class RemoveLine:
    line_id = Identifier(required=True)


@ordering.command_handler(part_of=CartLine)
class ManageCartLinesHandler:
    @handle(AddToBag)
    def add_to_bag(self, command):
        repo = current_domain.repository_for(CartLine)
        line = repo.find_line(command.user_id, command.product_id)
        if line is None:
            line = CartLine.open(
                user_id=command.user_id,
                product_id=command.product_id,
                quantity=command.quantity,
            )
        else:
            line.merge(command.quantity)
        repo.add(line)
        return str(line.id)

    @handle(SetLineQuantity)
    def set_line_quantity(self, command):
        repo = current_domain.repository_for(CartLine)
        line = repo.get(command.line_id)
        line.change_quantity(command.quantity)
        repo.add(line)

    @handle(RemoveLine)
    def remove_line(self, command):
        repo = current_domain.repository_for(CartLine)
        try:
            line = repo.get(command.line_id)
        except ObjectNotFoundError:
            logger.debug("Cart line already removed", line_id=str(command.line_id))
            return
        repo._dao.delete(line)
        logger.info(
            "Cart line removed",
            line_id=str(line.id),
            user_id=str(line.user_id),
            product_id=str(line.product_id),
        )
