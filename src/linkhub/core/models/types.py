"""Column types that behave the same on PostgreSQL and SQLite.

Production runs on PostgreSQL; the test suite runs on in-memory SQLite.
"""

import json
import uuid
from typing import Iterable, List, Optional

from sqlalchemy import String, Text, TypeDecorator
from sqlalchemy.dialects import postgresql


def normalize_labels(values: Iterable[str]) -> List[str]:
    """Trim each label, drop blanks and repeats, keep the original order."""
    labels: List[str] = []
    for value in values:
        label = str(value).strip()
        if label and label not in labels:
            labels.append(label)
    return labels


class StringListType(TypeDecorator):
    """Ordered list of short labels, such as a user's skills.

    ARRAY(VARCHAR) on PostgreSQL, a JSON array in a TEXT column elsewhere.
    Values are normalized on the way in.
    """

    impl = Text
    cache_ok = True

    def __init__(self, item_length: int = 100):
        super().__init__()
        self.item_length = item_length

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            return dialect.type_descriptor(postgresql.ARRAY(String(self.item_length)))
        return dialect.type_descriptor(Text())

    def process_bind_param(self, value: Optional[Iterable[str]], dialect):
        if value is None:
            return None
        labels = normalize_labels(value)
        if dialect.name == "postgresql":
            return labels
        return json.dumps(labels, ensure_ascii=False)

    def process_result_value(self, value, dialect) -> Optional[List[str]]:
        if value is None:
            return None
        if isinstance(value, str):
            value = json.loads(value)
        return [str(v) for v in value]


class GUID(TypeDecorator):
    """UUID key: native UUID on PostgreSQL, its 36-character text form elsewhere."""

    impl = String(36)
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            return dialect.type_descriptor(postgresql.UUID(as_uuid=True))
        return dialect.type_descriptor(String(36))

    def process_bind_param(self, value, dialect):
        if value is None or dialect.name == "postgresql":
            return value
        # accept str ids from path params as well as UUID objects
        return str(value if isinstance(value, uuid.UUID) else uuid.UUID(str(value)))

    def process_result_value(self, value, dialect):
        if value is None or isinstance(value, uuid.UUID):
            return value
        return uuid.UUID(value)
