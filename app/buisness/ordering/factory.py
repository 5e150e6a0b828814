"""
Wiring for the order management components.

Repositories, the stock ledger, the managers and the workflow are built once
per application in create_app() and stored in app.extensions.
"""

from dataclasses import dataclass

from app.buisness.core.user_manager import UserManager
from app.buisness.inventory.product_manager import ProductManager
from app.buisness.inventory.stock_ledger import StockLedger
from app.buisness.ordering.order_workflow import OrderWorkflow, DEFAULT_PAGE_SIZE
from app.config import PRODUCT_LOOKUP_BY_PRODUCT
from app.data.repositories import OrderRepository, ProductRepository, UserRepository


@dataclass
class OrderManagement:
    users: UserManager
    products: ProductManager
    ledger: StockLedger
    orders: OrderWorkflow


def build_order_management(session, product_lookup=PRODUCT_LOOKUP_BY_PRODUCT, default_page_size=DEFAULT_PAGE_SIZE):
    """
    Construct the component graph over one session.

    Args:
        session: SQLAlchemy session (the Flask-SQLAlchemy scoped session in the app)
        product_lookup: How order update/delete resolve the product to adjust
        default_page_size: Page size used when a request does not give one

    Returns:
        OrderManagement bundle
    """
    user_repository = UserRepository(session)
    product_repository = ProductRepository(session)
    order_repository = OrderRepository(session)

    ledger = StockLedger(product_repository)

    return OrderManagement(
        users=UserManager(user_repository),
        products=ProductManager(product_repository),
        ledger=ledger,
        orders=OrderWorkflow(
            users=user_repository,
            products=product_repository,
            orders=order_repository,
            ledger=ledger,
            product_lookup=product_lookup,
            default_page_size=default_page_size,
        ),
    )
