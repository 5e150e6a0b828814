"""
Generic data mixin for SQLAlchemy models
Provides from_dict, apply_changes and to_dict so models can be built from and
rendered to the JSON payloads of the API.

API payloads use camelCase keys (productId, createdAt); model columns use
snake_case. Conversion happens here and nowhere else.
"""

from datetime import datetime
from decimal import Decimal
from sqlalchemy import inspect
from app.logger import get_logger

logger = get_logger("order_management.buisness.core.data_insertion")

# Columns the server owns; payload values for these are ignored
PROTECTED_FIELDS = {'id', 'created_at', 'updated_at'}


def to_camel(key):
    head, *tail = key.split('_')
    return head + ''.join(part.title() for part in tail)


def to_snake(key):
    return ''.join(f'_{c.lower()}' if c.isupper() else c for c in key)


def serialize_value(value):
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Decimal):
        return f"{value:.2f}"
    return value


class DataInsertionMixin:
    """
    Mixin that adds payload conversion to SQLAlchemy models

    This mixin adds:
    - from_dict(): Create model instance from a payload dictionary
    - apply_changes(): Merge a partial payload into an existing instance
    - to_dict(): Convert model instance to a payload dictionary
    """

    @classmethod
    def _column_keys(cls):
        return {c.key for c in inspect(cls).columns}

    @classmethod
    def filter_payload(cls, data_dict, skip_fields=None):
        """
        Keep only keys that map onto writable columns

        Args:
            data_dict (dict): Payload with camelCase or snake_case keys
            skip_fields (iterable, optional): Extra column names to drop

        Returns:
            dict: column name -> value
        """
        skip = PROTECTED_FIELDS | set(skip_fields or ())
        columns = cls._column_keys()

        filtered = {}
        for key, value in (data_dict or {}).items():
            column = key if key in columns else to_snake(key)
            if column in columns and column not in skip:
                filtered[column] = value
        return filtered

    @classmethod
    def from_dict(cls, data_dict, skip_fields=None):
        """
        Create a model instance from a dictionary

        Returns:
            Model instance (not saved to database)
        """
        return cls(**cls.filter_payload(data_dict, skip_fields))

    def apply_changes(self, data_dict, skip_fields=None):
        """
        Merge a partial payload into this instance

        Returns:
            dict: the column changes that were applied
        """
        changes = self.filter_payload(data_dict, skip_fields)
        for key, value in changes.items():
            setattr(self, key, value)
        return changes

    def to_dict(self, include_relationships=False, include_audit_fields=True):
        """
        Convert model instance to dictionary

        Args:
            include_relationships (bool): Whether to include loaded relationship data
            include_audit_fields (bool): Whether to include createdAt/updatedAt

        Returns:
            dict: camelCase dictionary representation of the model
        """
        result = {}
        mapper = inspect(self.__class__)

        for column in mapper.columns:
            if not include_audit_fields and column.key in ('created_at', 'updated_at'):
                continue
            result[to_camel(column.key)] = serialize_value(getattr(self, column.key))

        if include_relationships:
            for relationship in mapper.relationships:
                key = to_camel(relationship.key)
                if key in result:
                    continue
                related_obj = getattr(self, relationship.key)
                if related_obj is None:
                    result[key] = None
                elif hasattr(related_obj, 'to_dict'):
                    result[key] = related_obj.to_dict()
                else:
                    result[key] = str(related_obj)

        return result

    def to_summary(self, *fields):
        """Subset of columns, used for embedded relation snapshots"""
        return {to_camel(field): serialize_value(getattr(self, field)) for field in fields}
