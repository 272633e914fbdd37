"""Saved Pokemon collection entry model."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from pokemon_logger.database import Base
from pokemon_logger.models.mixins import UUIDPrimaryKeyMixin, utcnow
from pokemon_logger.models.types import JSONEncodedList


class UserPokemon(Base, UUIDPrimaryKeyMixin):
    """A Pokemon saved to a user's collection.

    Name, image and types are a snapshot taken when the entry was added and
    are never refreshed from PokeAPI afterwards.
    """

    __tablename__ = "user_pokemon"

    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    pokemon_id = Column(Integer, nullable=False)
    pokemon_name = Column(String(255), nullable=False)
    pokemon_image = Column(String, nullable=False, default="")
    pokemon_types = Column(JSONEncodedList, nullable=False)
    category = Column(String(20), nullable=False, index=True)  # see PokemonCategory
    notes = Column(Text, nullable=False, default="")
    date_added = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)

    # Relationships
    user = relationship("User", backref="pokemon")
