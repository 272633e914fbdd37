"""Enums for model fields."""

from enum import Enum


class PokemonCategory(str, Enum):
    """Collection categories a saved Pokemon can belong to."""

    CAUGHT = "caught"
    WANT_TO_CATCH = "want-to-catch"
    FAVORITES = "favorites"

    @classmethod
    def values(cls) -> list[str]:
        """All valid category values, in declaration order."""
        return [member.value for member in cls]


# Listing filter value that disables category filtering
ALL_CATEGORIES = "all"
