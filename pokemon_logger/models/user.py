"""User model."""

from sqlalchemy import Column, DateTime, String

from pokemon_logger.database import Base
from pokemon_logger.models.mixins import UUIDPrimaryKeyMixin, utcnow


class User(Base, UUIDPrimaryKeyMixin):
    """User model for authentication and ownership."""

    __tablename__ = "users"

    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
