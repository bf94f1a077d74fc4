"""Shared BDD fixtures and step definitions for the Ordering domain."""

import pytest
from ordering.cart import store
from ordering.errors import InvalidQuantity
from pytest_bdd import given, parsers, then


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@pytest.fixture()
def bag():
    """Line ids keyed by product, as the steps add them."""
    return {}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("an empty bag")
def _(user_id):
    assert store.list_lines(user_id) == []


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the change is rejected as an invalid quantity")
def _(error):
    assert isinstance(error["exc"], InvalidQuantity)


@then(parsers.cfparse("the bag has {count:d} line"))
def bag_has_n_lines_singular(user_id, count):
    assert len(store.list_lines(user_id)) == count


@then(parsers.cfparse("the bag has {count:d} lines"))
def bag_has_n_lines(user_id, count):
    assert len(store.list_lines(user_id)) == count
