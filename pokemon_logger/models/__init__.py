"""SQLAlchemy models."""

from pokemon_logger.models.user import User
from pokemon_logger.models.user_pokemon import UserPokemon

__all__ = [
    "User",
    "UserPokemon",
]
