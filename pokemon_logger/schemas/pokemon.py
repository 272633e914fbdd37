"""Pokemon search and collection schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PokemonSearchResult(BaseModel):
    """A single PokeAPI lookup result."""

    id: int
    name: str
    image: str
    types: list[str]


class UserPokemonCreate(CamelModel):
    """Add a Pokemon to the collection by its PokeAPI id."""

    pokemon_id: int | None = None
    pokemon_name: str | None = Field(None, max_length=255)
    category: str | None = None
    notes: str = Field("", max_length=5000)


class CustomPokemonCreate(CamelModel):
    """Save a user-authored or AI-generated Pokemon as-is."""

    pokemon_id: int | None = None
    pokemon_name: str | None = Field(None, max_length=255)
    pokemon_image: str | None = None
    pokemon_types: list[str] | None = None
    category: str | None = None
    notes: str = Field("", max_length=5000)


class UserPokemonUpdate(CamelModel):
    """Change the category and notes of a saved Pokemon."""

    category: str | None = None
    notes: str | None = Field(None, max_length=5000)


class UserPokemonResponse(CamelModel):
    """Saved Pokemon response."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str
    user_id: str
    pokemon_id: int
    pokemon_name: str
    pokemon_image: str
    pokemon_types: list[str]
    category: str
    notes: str
    date_added: datetime


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str
