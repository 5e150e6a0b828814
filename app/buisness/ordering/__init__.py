"""
Ordering business layer: the order workflow and its wiring.
"""

from app.buisness.ordering.order_workflow import OrderWorkflow

__all__ = [
    'OrderWorkflow',
]
