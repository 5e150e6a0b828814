"""
Order Workflow
Coordinates user/product resolution, stock checks and order persistence.

Order lifecycle: absent -> active -> (amount adjusted)* -> deleted.
There is no cancelled or fulfilled state.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional

from app.buisness.errors import (
    InsufficientStockError,
    OrderNotFoundError,
    ProductNotFoundError,
    UserNotFoundError,
)
from app.buisness.inventory.stock_ledger import StockLedger
from app.config import PRODUCT_LOOKUP_BY_ORDER_ID, PRODUCT_LOOKUP_BY_PRODUCT
from app.data.inventory.product import Product
from app.data.ordering.order import Order
from app.data.repositories import OrderRepository, ProductRepository, UserRepository
from app.logger import get_logger

logger = get_logger("order_management.buisness.ordering.order_workflow")

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10


class OrderWorkflow:
    """
    Create, read, update and delete orders while keeping product stock in step.

    The stock debit and the order write are separate committed statements;
    the debit itself is atomic, so stock can never be oversold, but a failure
    between the two leaves the stock debited without an order row.
    """

    def __init__(
        self,
        users: UserRepository,
        products: ProductRepository,
        orders: OrderRepository,
        ledger: StockLedger,
        product_lookup: str = PRODUCT_LOOKUP_BY_PRODUCT,
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self.users = users
        self.products = products
        self.orders = orders
        self.ledger = ledger
        self.product_lookup = product_lookup
        self.default_page_size = default_page_size

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_all(self, page: Optional[int] = None, page_size: Optional[int] = None) -> Dict[str, Any]:
        """
        Paginated order list.

        Args:
            page: 1-based page number (missing or < 1 -> 1)
            page_size: Rows per page (missing or < 1 -> default page size)

        Returns:
            dict with data, total, page, pageSize and totalPages
        """
        page = page if page and page > 0 else DEFAULT_PAGE
        page_size = page_size if page_size and page_size > 0 else self.default_page_size

        pagination = self.orders.paginate_with_relations(page, page_size)
        return {
            'data': [order.to_list_dict() for order in pagination.items],
            'total': pagination.total,
            'page': page,
            'pageSize': page_size,
            'totalPages': math.ceil(pagination.total / page_size),
        }

    def get_by_id(self, order_id: int) -> Order:
        order = self.orders.get_with_relations(order_id)
        if order is None:
            raise OrderNotFoundError()
        return order

    def get_by_user_uid(self, uid: str) -> List[Order]:
        if self.users.get_by_uid(uid) is None:
            raise UserNotFoundError()
        return self.orders.list_by_uid(uid)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create(self, uid: str, product_id: int, quantity: int) -> Dict[str, str]:
        """
        Place an order and debit the product's stock.

        Raises:
            UserNotFoundError: no user with this uid
            ProductNotFoundError: no product with this id
            InsufficientStockError: product holds fewer than `quantity` units

        Returns:
            {"status": "success"}; the created order is not echoed back
        """
        user = self.users.get_by_uid(uid)
        if user is None:
            raise UserNotFoundError()

        product = self.products.get(product_id)
        if product is None:
            raise ProductNotFoundError()

        if not product.has_stock_for(quantity):
            raise InsufficientStockError(
                product_id=product.id,
                requested=quantity,
                available=product.amount,
            )

        order = Order(
            uid=user.uid,
            code=product.code,
            amount=quantity,
            user_id=user.id,
            product_id=product.id,
        )

        self.ledger.debit(product.id, quantity)
        self.orders.insert(order)

        logger.info(f"Order {order.id} created: {quantity} x {order.code} for user {order.uid}")
        return {'status': 'success'}

    def update(self, order_id: int, new_amount: Optional[int] = None) -> Order:
        """
        Change an order's quantity, moving the difference in or out of stock.

        A missing or unchanged amount leaves the order and the stock untouched.

        Raises:
            OrderNotFoundError: no order with this id
            ProductNotFoundError: the order's product cannot be resolved
            InsufficientStockError: an increase exceeds the product's stock
        """
        order = self.orders.get(order_id)
        if order is None:
            raise OrderNotFoundError()

        if new_amount is None or new_amount == order.amount:
            return order

        delta = new_amount - order.amount
        product = self._resolve_product(order)
        if product is None:
            raise ProductNotFoundError()

        if delta > 0:
            try:
                self.ledger.debit(product.id, delta)
            except InsufficientStockError as e:
                raise InsufficientStockError(
                    'Not enough product in stock for the update',
                    product_id=e.product_id,
                    requested=e.requested,
                    available=e.available,
                ) from e
        else:
            self.ledger.credit(product.id, -delta)

        self.orders.update(order, {'amount': new_amount})
        logger.info(f"Order {order.id} amount changed by {delta} to {new_amount}")
        return order

    def delete(self, order_id: int) -> None:
        """
        Delete an order, crediting its quantity back to the resolved product.

        The order row is removed even when no product resolves.

        Raises:
            OrderNotFoundError: no order with this id
        """
        order = self.orders.get(order_id)
        if order is None:
            raise OrderNotFoundError()

        product = self._resolve_product(order)
        if product is not None:
            self.ledger.credit(product.id, order.amount)
        else:
            logger.warning(f"Order {order.id} deleted without stock credit: product not found")

        self.orders.delete(order)
        logger.info(f"Order {order_id} deleted")

    def _resolve_product(self, order: Order) -> Optional[Product]:
        """
        Product whose stock an update/delete adjusts.

        With the "order_id" lookup the product is fetched by the order's own
        primary key, reproducing the legacy API; otherwise the order's
        associated product is used.
        """
        if self.product_lookup == PRODUCT_LOOKUP_BY_ORDER_ID:
            return self.products.get(order.id)
        return self.products.get(order.product_id)
