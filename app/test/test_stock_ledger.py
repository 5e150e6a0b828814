"""
Tests for StockLedger and the conditional stock updates behind it
"""

import pytest
from conftest import add_product
from app.buisness.errors import InsufficientStockError, ProductNotFoundError


def test_debit_takes_stock(components):
    product = add_product(components, amount=10)

    result = components.ledger.debit(product.id, 4)

    assert result.amount == 6, "Debit should leave 6 of 10 units"


def test_debit_whole_stock_reaches_zero(components):
    product = add_product(components, amount=5)

    components.ledger.debit(product.id, 5)

    assert components.products.get(product.id).amount == 0, "Exact debit should empty the stock"


def test_debit_refused_when_stock_is_short(components):
    product = add_product(components, amount=5)
    components.ledger.debit(product.id, 3)

    # The second debit of 3 must not drive stock negative
    with pytest.raises(InsufficientStockError) as excinfo:
        components.ledger.debit(product.id, 3)

    assert excinfo.value.available == 2
    assert excinfo.value.requested == 3
    assert components.products.get(product.id).amount == 2, "Refused debit should not change stock"


def test_debit_unknown_product(components):
    with pytest.raises(ProductNotFoundError):
        components.ledger.debit(999, 1)


def test_credit_returns_stock(components):
    product = add_product(components, amount=2)

    result = components.ledger.credit(product.id, 3)

    assert result.amount == 5


def test_credit_unknown_product_is_skipped(components):
    assert components.ledger.credit(999, 3) is None
    assert components.ledger.credit(None, 3) is None


def test_conditional_decrement_checks_current_row(components):
    """The UPDATE itself enforces amount >= quantity, independent of any earlier read"""
    product = add_product(components, amount=5)
    repository = components.products.products

    assert repository.decrement_amount(product.id, 3) is True
    assert repository.decrement_amount(product.id, 3) is False
    assert repository.decrement_amount(product.id, 2) is True
    assert components.products.get(product.id).amount == 0
