"""Pydantic schemas for API requests and responses."""

from pokemon_logger.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse
from pokemon_logger.schemas.image import (
    IdentifyResponse,
    ImageUrlResponse,
    PokemonizeAnalysis,
    PokemonizeResponse,
)
from pokemon_logger.schemas.pokemon import (
    CustomPokemonCreate,
    MessageResponse,
    PokemonSearchResult,
    UserPokemonCreate,
    UserPokemonResponse,
    UserPokemonUpdate,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
    "PokemonSearchResult",
    "UserPokemonCreate",
    "CustomPokemonCreate",
    "UserPokemonUpdate",
    "UserPokemonResponse",
    "MessageResponse",
    "IdentifyResponse",
    "ImageUrlResponse",
    "PokemonizeAnalysis",
    "PokemonizeResponse",
]
