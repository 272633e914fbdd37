"""Mixins for SQLAlchemy models."""

import uuid
from datetime import UTC, datetime

from sqlalchemy import Column, String


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def generate_id() -> str:
    """Random identifier that is safe under concurrent inserts."""
    return str(uuid.uuid4())


class UUIDPrimaryKeyMixin:
    """Mixin to add a string UUID primary key generated on insert."""

    id = Column(String(36), primary_key=True, default=generate_id)
