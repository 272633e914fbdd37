"""FastAPI dependencies for authentication and services."""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from pokemon_logger.database import get_db
from pokemon_logger.errors import AuthError, ForbiddenError, UnauthorizedError
from pokemon_logger.models.user import User
from pokemon_logger.services.auth import verify_token
from pokemon_logger.services.collection_service import CollectionService
from pokemon_logger.services.collection_store import CollectionStore
from pokemon_logger.services.image_analysis import ImageAnalysisService
from pokemon_logger.services.image_service import ImageService
from pokemon_logger.services.llm import LLMService
from pokemon_logger.services.pokeapi import PokeAPIClient

# Missing credentials are reported by get_current_user, not by the scheme
security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the current authenticated user from the bearer token.

    No token is a 401; a token that fails verification, or whose user no
    longer exists, is a 403.
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError()

    try:
        return verify_token(db, credentials.credentials)
    except AuthError as e:
        raise ForbiddenError(e.message) from e


def get_pokeapi_client(request: Request) -> PokeAPIClient:
    """Get the shared PokeAPI client created at startup."""
    return request.app.state.pokeapi


def get_collection_store(
    db: Annotated[Session, Depends(get_db)],
) -> CollectionStore:
    """Get collection store bound to the request's session."""
    return CollectionStore(db)


def get_collection_service(
    store: Annotated[CollectionStore, Depends(get_collection_store)],
    pokeapi: Annotated[PokeAPIClient, Depends(get_pokeapi_client)],
) -> CollectionService:
    """Get collection service with dependencies."""
    return CollectionService(store, pokeapi)


def get_image_service(request: Request) -> ImageService:
    """Get the S3 image service created at startup."""
    return request.app.state.image_service


def get_llm_service(request: Request) -> LLMService:
    """Get the Bedrock model service created at startup."""
    return request.app.state.llm_service


def get_image_analysis_service(
    images: Annotated[ImageService, Depends(get_image_service)],
    llm: Annotated[LLMService, Depends(get_llm_service)],
    pokeapi: Annotated[PokeAPIClient, Depends(get_pokeapi_client)],
) -> ImageAnalysisService:
    """Get image analysis service with dependencies."""
    return ImageAnalysisService(images, llm, pokeapi)
