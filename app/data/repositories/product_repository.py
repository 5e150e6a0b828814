"""
Product repository
Besides the generic operations, exposes atomic stock adjustments so the
read-check-write on Product.amount happens inside a single UPDATE.
"""

from app.data.inventory.product import Product
from app.data.repositories.base_repository import BaseRepository


class ProductRepository(BaseRepository):
    model = Product

    def get_by_code(self, code):
        if not code:
            return None
        return self.find_one_by(code=code)

    def decrement_amount(self, product_id: int, quantity: int) -> bool:
        """
        Conditionally subtract quantity from stock.

        The row only changes when it holds at least `quantity`, so two
        concurrent debits can never both succeed on the same units.

        Returns:
            True when the stock was debited, False when the product is
            missing or does not hold enough stock
        """
        changed = (
            self.query()
            .filter(Product.id == product_id, Product.amount >= quantity)
            .update({Product.amount: Product.amount - quantity}, synchronize_session=False)
        )
        self._commit("stock debit")
        return changed == 1

    def increment_amount(self, product_id: int, quantity: int) -> bool:
        """
        Add quantity to stock.

        Returns:
            True when the product exists and was credited
        """
        changed = (
            self.query()
            .filter(Product.id == product_id)
            .update({Product.amount: Product.amount + quantity}, synchronize_session=False)
        )
        self._commit("stock credit")
        return changed == 1
