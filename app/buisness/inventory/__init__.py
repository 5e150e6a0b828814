"""
Inventory business layer.

Stock movements caused by orders go through the stock ledger.
"""

from app.buisness.inventory.stock_ledger import StockLedger

__all__ = [
    'StockLedger',
]
