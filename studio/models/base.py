"""
Shared model helpers.
"""

import enum
from datetime import datetime, timezone

from pydantic.alias_generators import to_camel


def utc_now_naive():
    return datetime.now(timezone.utc).replace(tzinfo=None)


class SerializerMixin:
    """Render a row as a camelCase JSON-ready dict."""

    # Columns that must never leave the server
    __hidden_fields__ = ()

    def to_dict(self):
        data = {}
        for column in self.__table__.columns:
            if column.key in self.__hidden_fields__:
                continue
            value = getattr(self, column.key)
            if isinstance(value, datetime):
                value = value.isoformat()
            elif isinstance(value, enum.Enum):
                value = value.value
            data[to_camel(column.key)] = value
        return data
