"""Collection service for adding, listing and editing saved Pokemon."""

import asyncio
import logging
from collections.abc import Sequence

from pokemon_logger.errors import NotFoundError, ValidationError
from pokemon_logger.models.user_pokemon import UserPokemon
from pokemon_logger.services.collection_store import CollectionStore, validate_category
from pokemon_logger.services.pokeapi import PokeAPIClient

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Pokemon ID, name, and category are required"


class CollectionService:
    """Service for collection-related operations."""

    def __init__(self, store: CollectionStore, pokeapi: PokeAPIClient):
        self.store = store
        self.pokeapi = pokeapi

    async def add_by_external_id(
        self,
        user_id: str,
        pokemon_id: int | None,
        pokemon_name: str | None,
        category: str | None,
        notes: str = "",
    ) -> UserPokemon:
        """Add a Pokemon using PokeAPI's canonical name, artwork and types.

        The caller's ``pokemon_name`` is only checked for presence; what gets
        stored is PokeAPI's data as of now.
        """
        _validate_new_entry(pokemon_id, pokemon_name, category)

        try:
            pokemon = await self.pokeapi.get_pokemon(pokemon_id)
        except NotFoundError as e:
            raise NotFoundError("Pokemon not found in PokeAPI") from e

        # Session commits block, so keep them off the event loop
        return await asyncio.to_thread(
            self.store.insert,
            user_id=user_id,
            pokemon_id=pokemon.id,
            pokemon_name=pokemon.name,
            pokemon_image=pokemon.image,
            pokemon_types=pokemon.types,
            category=category,
            notes=notes,
        )

    def add_custom(
        self,
        user_id: str,
        pokemon_id: int | None,
        pokemon_name: str | None,
        category: str | None,
        pokemon_image: str | None = None,
        pokemon_types: Sequence[str] | None = None,
        notes: str = "",
    ) -> UserPokemon:
        """Save caller-supplied Pokemon data verbatim, without a PokeAPI lookup."""
        _validate_new_entry(pokemon_id, pokemon_name, category)

        entry = self.store.insert(
            user_id=user_id,
            pokemon_id=pokemon_id,
            pokemon_name=pokemon_name,
            pokemon_image=pokemon_image or "",
            pokemon_types=pokemon_types or [],
            category=category,
            notes=notes,
        )
        logger.info(f"Saved custom Pokemon {entry.id} for user {user_id}")
        return entry

    def list_entries(
        self,
        user_id: str,
        category: str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> list[UserPokemon]:
        """List the user's collection, optionally for one category (``"all"`` means every one)."""
        return self.store.list_by_owner(user_id, category=category, page=page, limit=limit)

    def get_entry(self, user_id: str, entry_id: str) -> UserPokemon:
        return self.store.get_one(user_id, entry_id)

    def update_entry(
        self, user_id: str, entry_id: str, category: str | None, notes: str | None
    ) -> UserPokemon:
        """Change category and notes. Category is required even for a notes-only edit."""
        if not category:
            raise ValidationError("Category is required")
        return self.store.update(user_id, entry_id, category, notes)

    def delete_entry(self, user_id: str, entry_id: str) -> None:
        self.store.delete(user_id, entry_id)


def _validate_new_entry(
    pokemon_id: int | None, pokemon_name: str | None, category: str | None
) -> None:
    if category:
        validate_category(category)
    # A zero id counts as missing; negative and large ids are allowed
    if not pokemon_id or not pokemon_name or not category:
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)
