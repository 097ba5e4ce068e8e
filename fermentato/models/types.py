"""JSON column types stored as TEXT so SQLite and PostgreSQL behave alike."""
import json

from sqlalchemy.types import TypeDecorator, TEXT


class JSONList(TypeDecorator):
    """Store Python list as JSON string."""
    impl = TEXT
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None:
            value = json.dumps(value)
        return value

    def process_result_value(self, value, dialect):
        if value is not None:
            value = json.loads(value)
        return value or []


class JSONDict(TypeDecorator):
    """Store Python dict as JSON string. NULL stays None."""
    impl = TEXT
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None:
            value = json.dumps(value)
        return value

    def process_result_value(self, value, dialect):
        if value is not None:
            value = json.loads(value)
        return value
