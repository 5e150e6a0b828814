"""
Inventory models: products and their stock on hand.
"""

from app.data.inventory.product import Product

__all__ = [
    'Product',
]
