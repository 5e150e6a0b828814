from __future__ import annotations

from app.buisness.errors import InsufficientStockError, ProductNotFoundError
from app.data.inventory.product import Product
from app.data.repositories.product_repository import ProductRepository
from app.logger import get_logger

logger = get_logger("order_management.buisness.inventory.stock_ledger")


class StockLedger:
    """
    Stock movements caused by orders.

    Responsibilities:
    - Debit Product.amount when an order takes stock, never below zero
    - Credit Product.amount when an order gives stock back
    Each movement is a single committed, conditional UPDATE.
    """

    def __init__(self, products: ProductRepository):
        self.products = products

    def debit(self, product_id: int, quantity: int) -> Product:
        """
        Take `quantity` units from a product's stock.

        Raises:
            ProductNotFoundError: product does not exist
            InsufficientStockError: product holds fewer than `quantity` units
        """
        product = self.products.get(product_id)
        if product is None:
            raise ProductNotFoundError()

        if not self.products.decrement_amount(product_id, quantity):
            # Re-read: the row may have been removed or drained since the lookup
            product = self.products.get(product_id)
            if product is None:
                raise ProductNotFoundError()
            logger.warning(
                f"Stock debit refused for product {product_id}: requested {quantity}, available {product.amount}"
            )
            raise InsufficientStockError(
                product_id=product_id,
                requested=quantity,
                available=product.amount,
            )

        product = self.products.get(product_id)
        logger.info(f"Debited {quantity} from product {product_id}, stock now {product.amount}")
        return product

    def credit(self, product_id: int | None, quantity: int) -> Product | None:
        """
        Give `quantity` units back to a product's stock.

        A missing product is skipped: stock for a deleted product cannot be
        recovered.

        Returns:
            The credited product, or None when it does not exist
        """
        if product_id is None or not self.products.increment_amount(product_id, quantity):
            logger.warning(f"Stock credit of {quantity} skipped: product {product_id} not found")
            return None

        product = self.products.get(product_id)
        logger.info(f"Credited {quantity} to product {product_id}, stock now {product.amount}")
        return product
