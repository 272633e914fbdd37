"""Owner-scoped persistence for saved Pokemon."""

import logging
from collections.abc import Sequence

from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pokemon_logger.errors import InternalError, InvalidCategoryError, NotFoundError
from pokemon_logger.models.enums import ALL_CATEGORIES, PokemonCategory
from pokemon_logger.models.user_pokemon import UserPokemon

logger = logging.getLogger(__name__)

POKEMON_NOT_FOUND = "Pokemon not found"


def validate_category(category: str | None) -> str:
    """Return the category if it is one of PokemonCategory, else raise."""
    if category not in PokemonCategory.values():
        raise InvalidCategoryError()
    return category


class CollectionStore:
    """Reads and writes collection entries.

    Every query is filtered by owner, so an entry that belongs to someone
    else behaves exactly like one that does not exist.
    """

    def __init__(self, db: Session):
        self.db = db

    def insert(
        self,
        user_id: str,
        pokemon_id: int,
        pokemon_name: str,
        pokemon_image: str,
        pokemon_types: Sequence[str],
        category: str,
        notes: str = "",
    ) -> UserPokemon:
        """Persist a new entry and return it."""
        entry = UserPokemon(
            user_id=user_id,
            pokemon_id=pokemon_id,
            pokemon_name=pokemon_name,
            pokemon_image=pokemon_image or "",
            pokemon_types=list(pokemon_types),
            category=validate_category(category),
            notes=notes or "",
        )
        self.db.add(entry)
        self._commit()
        self.db.refresh(entry)
        return entry

    def list_by_owner(
        self,
        user_id: str,
        category: str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> list[UserPokemon]:
        """List a user's entries newest first, one page at a time."""
        offset = (page - 1) * limit
        try:
            query = self.db.query(UserPokemon).filter(UserPokemon.user_id == user_id)
            # Unknown categories simply match nothing
            if category and category != ALL_CATEGORIES:
                query = query.filter(UserPokemon.category == category)
            return (
                query.order_by(desc(UserPokemon.date_added)).offset(offset).limit(limit).all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Collection read failed for user {user_id}: {e}")
            raise InternalError() from e

    def get_one(self, user_id: str, entry_id: str) -> UserPokemon:
        """Get one of the user's entries."""
        try:
            entry = (
                self.db.query(UserPokemon)
                .filter(UserPokemon.id == entry_id, UserPokemon.user_id == user_id)
                .first()
            )
        except SQLAlchemyError as e:
            logger.error(f"Collection read failed for entry {entry_id}: {e}")
            raise InternalError() from e
        if entry is None:
            raise NotFoundError(POKEMON_NOT_FOUND)
        return entry

    def update(
        self, user_id: str, entry_id: str, category: str | None, notes: str | None
    ) -> UserPokemon:
        """Replace category and notes; missing notes become empty."""
        category = validate_category(category)
        entry = self.get_one(user_id, entry_id)
        entry.category = category
        entry.notes = notes or ""
        self._commit()
        self.db.refresh(entry)
        return entry

    def delete(self, user_id: str, entry_id: str) -> None:
        """Remove one of the user's entries."""
        deleted = (
            self.db.query(UserPokemon)
            .filter(UserPokemon.id == entry_id, UserPokemon.user_id == user_id)
            .delete(synchronize_session=False)
        )
        if deleted == 0:
            self.db.rollback()
            raise NotFoundError(POKEMON_NOT_FOUND)
        self._commit()

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Collection write failed: {e}")
            raise InternalError() from e
