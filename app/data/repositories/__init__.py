"""
Repositories: one small data-access object per entity.

Every write commits immediately; callers compose repository calls into
workflows but no repository call spans more than one statement group.
"""

from app.data.repositories.base_repository import BaseRepository
from app.data.repositories.user_repository import UserRepository
from app.data.repositories.product_repository import ProductRepository
from app.data.repositories.order_repository import OrderRepository

__all__ = [
    'BaseRepository',
    'UserRepository',
    'ProductRepository',
    'OrderRepository',
]
