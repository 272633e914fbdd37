"""Image identification and pokemonization schemas."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pokemon_logger.schemas.pokemon import CamelModel


class IdentifiedPokemon(BaseModel):
    """PokeAPI data for an identified Pokemon."""

    id: int
    name: str
    image: str
    types: list[str]
    stats: list[dict] = Field(default_factory=list)  # raw PokeAPI base stats
    height: int | None = None
    weight: int | None = None


class IdentifyResponse(CamelModel):
    """Result of identifying a Pokemon in an uploaded photo."""

    success: bool
    message: str | None = None
    pokemon: IdentifiedPokemon | None = None
    image_url: str | None = None
    uploaded_image_url: str | None = None
    identified_as: str | None = None


class PokemonStats(BaseModel):
    """Base stats suggested for a pokemonized person."""

    hp: int = 75
    attack: int = 65
    defense: int = 70


class PokemonizeAnalysis(CamelModel):
    """Pokemon character the vision model designed from a person's photo."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    characteristics: list[str] = Field(default_factory=list)
    suggested_pokemon: str = "Custom Pokemon"
    pokemonized_description: str = ""
    power_type: str = "Normal"
    abilities: list[str] = Field(default_factory=list)
    stats: PokemonStats = Field(default_factory=PokemonStats)
    image_prompt: str | None = None


class PokemonizeResponse(CamelModel):
    """Result of pokemonizing a person's photo."""

    success: bool = True
    analysis: PokemonizeAnalysis
    uploaded_image_url: str
    generated_pokemon_image_url: str | None = None


class ImageUrlResponse(BaseModel):
    """Time-limited retrieval URL for a stored image."""

    url: str
