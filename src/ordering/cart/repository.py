"""Repository for the CartLine aggregate."""

from ordering.cart.line import CartLine, line_key_for
from ordering.domain import ordering


@ordering.repository(part_of=CartLine)
class CartLineRepository:
    def for_user(self, user_id) -> list[CartLine]:
        """All lines in a user's bag, in no particular order."""
        return self._dao.query.filter(user_id=str(user_id)).all().items

    def find_line(self, user_id, product_id) -> CartLine | None:
        """The user's line for ``product_id``, if they have one."""
        items = self._dao.query.filter(line_key=line_key_for(user_id, product_id)).all().items
        return items[0] if items else None
