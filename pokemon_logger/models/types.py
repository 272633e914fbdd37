"""Custom SQLAlchemy column types."""

import json

from sqlalchemy import Text
from sqlalchemy.types import TypeDecorator


class JSONEncodedList(TypeDecorator):
    """Stores a list of strings as a JSON array in a text column.

    Order is preserved, and ``None`` is stored as an empty array.
    """

    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return json.dumps(list(value or []))

    def process_result_value(self, value, dialect):
        if value is None:
            return []
        return json.loads(value)
