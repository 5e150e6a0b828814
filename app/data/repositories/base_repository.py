"""
Base repository
Point lookups, filtered lookups, pagination and committed writes for a single model.
"""

from typing import Any, Dict, List, Optional
from flask_sqlalchemy.pagination import Pagination
from app.logger import get_logger

logger = get_logger("order_management.data.repositories")


class BaseRepository:
    """
    Data access for one SQLAlchemy model.

    The session is injected (normally the Flask-SQLAlchemy scoped session) so
    a repository carries no global state of its own.
    """

    model = None

    def __init__(self, session):
        self.session = session

    def query(self):
        return self.session.query(self.model)

    def get(self, entity_id: Optional[int]):
        """Get by primary key, None when absent"""
        if entity_id is None:
            return None
        return self.session.get(self.model, entity_id)

    def find_one_by(self, **filters):
        return self.query().filter_by(**filters).first()

    def list_by(self, **filters) -> List[Any]:
        return self.query().filter_by(**filters).order_by(self.model.id).all()

    def list_all(self) -> List[Any]:
        return self.query().order_by(self.model.id).all()

    def paginate(self, page: int, page_size: int, query=None) -> Pagination:
        """
        Offset/limit page of rows ordered by id.

        Args:
            page: 1-based page number
            page_size: Rows per page
            query: Optional pre-built query (e.g. with eager loading)

        Returns:
            Pagination object (items, total, pages)
        """
        query = query if query is not None else self.query()
        return query.order_by(self.model.id).paginate(
            page=page,
            per_page=page_size,
            error_out=False,
        )

    def insert(self, instance):
        self.session.add(instance)
        self._commit("insert")
        logger.info(f"Created {self.model.__name__}: {instance}")
        return instance

    def update(self, instance, changes: Optional[Dict[str, Any]] = None):
        """
        Merge changes (payload keys) into the instance and persist it.

        Args:
            instance: Loaded model instance
            changes: Partial payload; unknown and server-owned keys are ignored

        Returns:
            The updated instance
        """
        if changes:
            instance.apply_changes(changes)
        self._commit("update")
        return instance

    def delete(self, instance):
        self.session.delete(instance)
        self._commit("delete")

    def _commit(self, action: str):
        try:
            self.session.commit()
        except Exception as e:
            self.session.rollback()
            logger.error(f"Error during {action} of {self.model.__name__}: {e}")
            raise
