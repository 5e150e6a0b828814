"""
User Manager (Core)
Provides a clean interface for user operations.

Handles:
- User creation with a generated uid
- User update operations (email uniqueness)
- User deletion (orders referencing the user are left in place)
"""

import uuid
from typing import Any, Dict, List

from sqlalchemy.exc import IntegrityError

from app.buisness.errors import ConflictError, UserNotFoundError
from app.data.core.user import User
from app.data.repositories.user_repository import UserRepository
from app.logger import get_logger

logger = get_logger("order_management.buisness.core.user_manager")


class UserManager:
    """
    Core manager for user operations.

    The uid is generated here and never taken from the caller.
    """

    def __init__(self, users: UserRepository):
        self.users = users

    def list_all(self) -> List[User]:
        return self.users.list_all()

    def get(self, user_id: int) -> User:
        user = self.users.get(user_id)
        if user is None:
            raise UserNotFoundError()
        return user

    def get_by_uid(self, uid: str) -> User:
        user = self.users.get_by_uid(uid)
        if user is None:
            raise UserNotFoundError()
        return user

    def create(self, name: str, email: str) -> User:
        """
        Create a new user.

        Args:
            name: Display name
            email: Email address (must be unique)

        Returns:
            The created User

        Raises:
            ConflictError: If the email is already in use
        """
        if self.users.get_by_email(email) is not None:
            raise ConflictError('Email already in use')

        user = User(uid=str(uuid.uuid4()), name=name, email=email)
        try:
            return self.users.insert(user)
        except IntegrityError:
            # A concurrent request took the email between the check and the insert
            if self.users.get_by_email(email) is not None:
                raise ConflictError('Email already in use')
            raise

    def update(self, user_id: int, changes: Dict[str, Any]) -> User:
        """
        Merge changes into a user. uid is immutable.

        Raises:
            UserNotFoundError: If the user does not exist
            ConflictError: If the new email belongs to another user
        """
        user = self.get(user_id)

        email = changes.get('email')
        if email and email != user.email and self.users.get_by_email(email) is not None:
            raise ConflictError('Email already in use')

        try:
            return self.users.update(user, {key: value for key, value in changes.items() if key != 'uid'})
        except IntegrityError:
            existing = self.users.get_by_email(email)
            if existing is not None and existing.id != user_id:
                raise ConflictError('Email already in use')
            raise

    def delete(self, user_id: int) -> None:
        user = self.get(user_id)
        self.users.delete(user)
        logger.info(f"Deleted user {user_id}")
