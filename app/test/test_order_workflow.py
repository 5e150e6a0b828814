"""
Tests for OrderWorkflow: stock follows every order create, update and delete
"""

import pytest
from conftest import add_product, add_user
from app.buisness.errors import (
    InsufficientStockError,
    OrderNotFoundError,
    ProductNotFoundError,
    UserNotFoundError,
)
from app.data.ordering.order import Order


def stock_of(components, product_id):
    return components.products.get(product_id).amount


def only_order(db_session):
    return db_session.query(Order).one()


def test_create_update_delete_scenario(components, db_session):
    """SKU1 with 10 units: create 4 -> 6, update to 7 -> 3, delete -> 10"""
    user = add_user(components)
    product = add_product(components, code='SKU1', amount=10)

    result = components.orders.create(user.uid, product.id, 4)
    assert result == {'status': 'success'}, "Create should only report success"
    assert stock_of(components, product.id) == 6

    order = only_order(db_session)
    components.orders.update(order.id, 7)
    assert stock_of(components, product.id) == 3
    assert components.orders.get_by_id(order.id).amount == 7

    components.orders.delete(order.id)
    assert stock_of(components, product.id) == 10
    assert db_session.query(Order).count() == 0


def test_create_snapshots_uid_and_code(components, db_session):
    user = add_user(components)
    product = add_product(components, code='SKU9', amount=3)

    components.orders.create(user.uid, product.id, 1)

    order = only_order(db_session)
    assert order.uid == user.uid
    assert order.code == 'SKU9'
    assert order.user_id == user.id
    assert order.product_id == product.id


def test_create_more_than_stock_fails(components, db_session):
    user = add_user(components)
    product = add_product(components, amount=2)

    with pytest.raises(InsufficientStockError):
        components.orders.create(user.uid, product.id, 3)

    assert stock_of(components, product.id) == 2, "Failed create should not touch stock"
    assert db_session.query(Order).count() == 0


def test_second_create_against_short_stock_fails(components, db_session):
    user = add_user(components)
    product = add_product(components, amount=5)

    components.orders.create(user.uid, product.id, 3)
    with pytest.raises(InsufficientStockError):
        components.orders.create(user.uid, product.id, 3)

    assert stock_of(components, product.id) == 2
    assert db_session.query(Order).count() == 1


def test_create_unknown_user(components, db_session):
    product = add_product(components, amount=5)

    with pytest.raises(UserNotFoundError):
        components.orders.create('no-such-uid', product.id, 1)

    assert stock_of(components, product.id) == 5


def test_create_unknown_product(components, db_session):
    user = add_user(components)
    product = add_product(components, amount=5)

    with pytest.raises(ProductNotFoundError):
        components.orders.create(user.uid, product.id + 100, 1)

    assert stock_of(components, product.id) == 5
    assert db_session.query(Order).count() == 0


def test_update_to_same_amount_is_noop(components, db_session):
    user = add_user(components)
    product = add_product(components, amount=10)
    components.orders.create(user.uid, product.id, 4)
    order = only_order(db_session)

    returned = components.orders.update(order.id, 4)
    assert returned.amount == 4
    assert stock_of(components, product.id) == 6

    components.orders.update(order.id, None)
    assert stock_of(components, product.id) == 6


def test_update_decrease_credits_stock(components, db_session):
    user = add_user(components)
    product = add_product(components, amount=10)
    components.orders.create(user.uid, product.id, 6)
    order = only_order(db_session)

    components.orders.update(order.id, 2)

    assert stock_of(components, product.id) == 8


def test_update_beyond_stock_fails(components, db_session):
    user = add_user(components)
    product = add_product(components, amount=5)
    components.orders.create(user.uid, product.id, 3)
    order = only_order(db_session)

    with pytest.raises(InsufficientStockError) as excinfo:
        components.orders.update(order.id, 6)

    assert excinfo.value.message == 'Not enough product in stock for the update'
    assert stock_of(components, product.id) == 2
    assert components.orders.get_by_id(order.id).amount == 3, "Refused update should keep the old amount"


def test_update_and_delete_unknown_order(components):
    with pytest.raises(OrderNotFoundError):
        components.orders.update(42, 1)
    with pytest.raises(OrderNotFoundError):
        components.orders.delete(42)
    with pytest.raises(OrderNotFoundError):
        components.orders.get_by_id(42)


def test_update_with_deleted_product_fails(components, db_session):
    user = add_user(components)
    product = add_product(components, amount=5)
    components.orders.create(user.uid, product.id, 1)
    order = only_order(db_session)
    components.products.delete(product.id)

    with pytest.raises(ProductNotFoundError):
        components.orders.update(order.id, 2)


def test_delete_without_product_still_removes_order(components, db_session):
    user = add_user(components)
    product = add_product(components, amount=5)
    components.orders.create(user.uid, product.id, 2)
    order = only_order(db_session)
    components.products.delete(product.id)

    components.orders.delete(order.id)

    assert db_session.query(Order).count() == 0


def test_net_stock_matches_active_orders(components, db_session):
    user = add_user(components)
    product = add_product(components, amount=50)

    for quantity in (5, 7, 3):
        components.orders.create(user.uid, product.id, quantity)
    first, second, third = db_session.query(Order).order_by(Order.id).all()

    components.orders.update(first.id, 9)
    components.orders.update(second.id, 1)
    components.orders.delete(third.id)

    active = sum(order.amount for order in db_session.query(Order).all())
    assert active == 10
    assert stock_of(components, product.id) == 50 - active


def test_get_all_paginates(components):
    user = add_user(components)
    product = add_product(components, amount=100)
    for _ in range(12):
        components.orders.create(user.uid, product.id, 1)

    page = components.orders.get_all(page=2, page_size=5)

    assert len(page['data']) == 5
    assert page['total'] == 12
    assert page['page'] == 2
    assert page['pageSize'] == 5
    assert page['totalPages'] == 3


def test_get_all_defaults_and_relations(components):
    user = add_user(components, name='Ann', email='ann@example.com')
    product = add_product(components, name='Widget', description='Blue', amount=20)
    for _ in range(11):
        components.orders.create(user.uid, product.id, 1)

    page = components.orders.get_all(page=0, page_size=None)

    assert page['page'] == 1
    assert page['pageSize'] == 10
    assert page['totalPages'] == 2
    first = page['data'][0]
    assert first['user'] == {'name': 'Ann', 'email': 'ann@example.com'}
    assert first['product'] == {'name': 'Widget', 'description': 'Blue'}


def test_get_by_user_uid(components):
    user = add_user(components)
    other = add_user(components, name='Bob', email='bob@example.com')
    product = add_product(components, amount=10)
    components.orders.create(user.uid, product.id, 1)
    components.orders.create(user.uid, product.id, 2)
    components.orders.create(other.uid, product.id, 3)

    orders = components.orders.get_by_user_uid(user.uid)

    assert [order.amount for order in orders] == [1, 2]
    with pytest.raises(UserNotFoundError):
        components.orders.get_by_user_uid('missing')


def test_legacy_lookup_adjusts_product_with_order_id(legacy_components):
    """With ORDER_PRODUCT_LOOKUP=order_id the product whose id equals the order id is adjusted"""
    user = add_user(legacy_components)
    first = add_product(legacy_components, code='SKU1', amount=10)
    second = add_product(legacy_components, code='SKU2', amount=10)

    legacy_components.orders.create(user.uid, second.id, 4)
    order = legacy_components.orders.orders.list_all()[0]
    assert order.id == first.id, "First order id should collide with the first product id"

    legacy_components.orders.delete(order.id)

    assert stock_of(legacy_components, second.id) == 6, "Ordered product keeps its debit"
    assert stock_of(legacy_components, first.id) == 14, "Product matched by order id gets the credit"


def test_default_lookup_adjusts_ordered_product(components, db_session):
    user = add_user(components)
    first = add_product(components, code='SKU1', amount=10)
    second = add_product(components, code='SKU2', amount=10)

    components.orders.create(user.uid, second.id, 4)
    order = only_order(db_session)
    components.orders.delete(order.id)

    assert stock_of(components, second.id) == 10
    assert stock_of(components, first.id) == 10


def test_legacy_lookup_update_without_matching_product(legacy_components):
    user = add_user(legacy_components)
    # Consume id 1 for a product that is then removed, so order 1 resolves nothing
    gone = add_product(legacy_components, code='GONE', amount=1)
    product = add_product(legacy_components, code='SKU2', amount=10)
    legacy_components.products.delete(gone.id)

    legacy_components.orders.create(user.uid, product.id, 2)
    order = legacy_components.orders.orders.list_all()[0]

    with pytest.raises(ProductNotFoundError):
        legacy_components.orders.update(order.id, 3)
