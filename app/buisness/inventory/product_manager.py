"""
Product Manager
CRUD for products. Stock changes caused by orders go through StockLedger;
this manager only sets stock directly when a product is created or edited.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List

from sqlalchemy.exc import IntegrityError

from app.buisness.errors import BadRequestError, ConflictError, ProductNotFoundError
from app.data.inventory.product import Product
from app.data.repositories.product_repository import ProductRepository
from app.logger import get_logger

logger = get_logger("order_management.buisness.inventory.product_manager")

PRICE_QUANTUM = Decimal('0.01')


def to_price(value) -> Decimal:
    """Fixed-point price with two fractional digits"""
    try:
        return Decimal(str(value)).quantize(PRICE_QUANTUM)
    except (InvalidOperation, ValueError):
        raise BadRequestError(f"Invalid price: {value!r}")


class ProductManager:

    def __init__(self, products: ProductRepository):
        self.products = products

    def list_all(self) -> List[Product]:
        return self.products.list_all()

    def get(self, product_id: int) -> Product:
        product = self.products.get(product_id)
        if product is None:
            raise ProductNotFoundError()
        return product

    def get_by_code(self, code: str) -> Product:
        """
        Look a product up by code. Codes are matched in upper case.

        Raises:
            BadRequestError: If the code is blank
            ProductNotFoundError: If no product has this code
        """
        if not code or not code.strip():
            raise BadRequestError('Code is required')

        product = self.products.get_by_code(code.strip().upper())
        if product is None:
            raise ProductNotFoundError()
        return product

    def create(self, data: Dict[str, Any]) -> Product:
        """
        Create a product from a payload.

        Raises:
            ConflictError: If the code is already used by another product
        """
        payload = dict(data)
        if 'price' in payload and payload['price'] is not None:
            payload['price'] = to_price(payload['price'])

        code = payload.get('code')
        if code and self.products.get_by_code(code) is not None:
            raise ConflictError('Product code already in use')

        try:
            return self.products.insert(Product.from_dict(payload))
        except IntegrityError:
            # A concurrent request took the code between the check and the insert
            self._raise_if_code_taken(code)
            raise

    def update(self, product_id: int, changes: Dict[str, Any]) -> Product:
        product = self.get(product_id)

        payload = dict(changes)
        if 'price' in payload and payload['price'] is not None:
            payload['price'] = to_price(payload['price'])

        code = payload.get('code')
        if code and code != product.code:
            existing = self.products.get_by_code(code)
            if existing is not None and existing.id != product.id:
                raise ConflictError('Product code already in use')

        try:
            return self.products.update(product, payload)
        except IntegrityError:
            self._raise_if_code_taken(code, product_id)
            raise

    def delete(self, product_id: int) -> None:
        product = self.get(product_id)
        self.products.delete(product)
        logger.info(f"Deleted product {product_id}")

    def _raise_if_code_taken(self, code, product_id=None):
        existing = self.products.get_by_code(code)
        if existing is not None and existing.id != product_id:
            raise ConflictError('Product code already in use')
