"""Pokemon search and collection API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from pokemon_logger.api.dependencies import (
    get_collection_service,
    get_current_user,
    get_pokeapi_client,
)
from pokemon_logger.models.user import User
from pokemon_logger.schemas.pokemon import (
    MessageResponse,
    PokemonSearchResult,
    UserPokemonCreate,
    UserPokemonResponse,
    UserPokemonUpdate,
)
from pokemon_logger.services.collection_service import CollectionService
from pokemon_logger.services.pokeapi import PokeAPIClient

router = APIRouter(prefix="/api/pokemon", tags=["pokemon"])


@router.get("/search/{query}", response_model=PokemonSearchResult)
async def search_pokemon(
    query: str,
    pokeapi: Annotated[PokeAPIClient, Depends(get_pokeapi_client)],
):
    """Look up a Pokemon on PokeAPI by name or id; no login or database needed."""
    pokemon = await pokeapi.get_pokemon(query)
    return PokemonSearchResult(
        id=pokemon.id, name=pokemon.name, image=pokemon.image, types=pokemon.types
    )


@router.get("/my-pokemon", response_model=list[UserPokemonResponse])
def list_my_pokemon(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[CollectionService, Depends(get_collection_service)],
    category: str | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
):
    """Get the current user's Pokemon, newest first.

    ``category`` narrows the list to one category; ``all`` or no value
    returns every category.
    """
    return service.list_entries(current_user.id, category=category, page=page, limit=limit)


@router.get("/my-pokemon/{entry_id}", response_model=UserPokemonResponse)
def get_my_pokemon(
    entry_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[CollectionService, Depends(get_collection_service)],
):
    """Get a single saved Pokemon."""
    return service.get_entry(current_user.id, entry_id)


@router.post(
    "/my-pokemon", response_model=UserPokemonResponse, status_code=status.HTTP_201_CREATED
)
async def add_my_pokemon(
    pokemon_data: UserPokemonCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[CollectionService, Depends(get_collection_service)],
):
    """Add a Pokemon to the collection using PokeAPI's data for its id."""
    return await service.add_by_external_id(
        current_user.id,
        pokemon_id=pokemon_data.pokemon_id,
        pokemon_name=pokemon_data.pokemon_name,
        category=pokemon_data.category,
        notes=pokemon_data.notes,
    )


@router.put("/my-pokemon/{entry_id}", response_model=UserPokemonResponse)
def update_my_pokemon(
    entry_id: str,
    pokemon_data: UserPokemonUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[CollectionService, Depends(get_collection_service)],
):
    """Update category and notes of a saved Pokemon."""
    return service.update_entry(
        current_user.id, entry_id, category=pokemon_data.category, notes=pokemon_data.notes
    )


@router.delete("/my-pokemon/{entry_id}", response_model=MessageResponse)
def delete_my_pokemon(
    entry_id: str,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[CollectionService, Depends(get_collection_service)],
):
    """Remove a Pokemon from the collection."""
    service.delete_entry(current_user.id, entry_id)
    return MessageResponse(message="Pokemon deleted successfully")
