"""
Core models package for the Order Management API
"""

from .user import User

__all__ = [
    'User',
]
