"""Image upload and analysis API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile, status

from pokemon_logger.api.dependencies import (
    get_collection_service,
    get_current_user,
    get_image_analysis_service,
    get_image_service,
)
from pokemon_logger.config import get_settings
from pokemon_logger.errors import UpstreamError, ValidationError
from pokemon_logger.models.user import User
from pokemon_logger.schemas.image import IdentifyResponse, ImageUrlResponse, PokemonizeResponse
from pokemon_logger.schemas.pokemon import CustomPokemonCreate, UserPokemonResponse
from pokemon_logger.services.collection_service import CollectionService
from pokemon_logger.services.image_analysis import ImageAnalysisService
from pokemon_logger.services.image_service import ImageService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/images", tags=["images"])


async def read_image_upload(image: UploadFile | None) -> bytes:
    """Read an uploaded image, enforcing type and size limits."""
    if image is None:
        raise ValidationError("No image file provided")
    if not (image.content_type or "").startswith("image/"):
        raise ValidationError("Only image files are allowed")

    max_bytes = get_settings().max_upload_bytes
    data = await image.read(max_bytes + 1)
    if not data:
        raise ValidationError("No image file provided")
    if len(data) > max_bytes:
        raise ValidationError("Image file is too large")
    return data


@router.post("/identify", response_model=IdentifyResponse, response_model_exclude_none=True)
async def identify_pokemon(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[ImageAnalysisService, Depends(get_image_analysis_service)],
    image: UploadFile | None = File(default=None),
):
    """Identify the Pokemon in an uploaded photo."""
    data = await read_image_upload(image)
    try:
        return await service.identify(data)
    except UpstreamError as e:
        logger.error(f"Image identification failed for user {current_user.id}: {e}")
        raise UpstreamError("Failed to process image") from e


@router.post("/pokemonize", response_model=PokemonizeResponse)
async def pokemonize_person(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[ImageAnalysisService, Depends(get_image_analysis_service)],
    image: UploadFile | None = File(default=None),
):
    """Turn a photo of a person into a Pokemon character."""
    data = await read_image_upload(image)
    try:
        return await service.pokemonize(data)
    except UpstreamError as e:
        logger.error(f"Pokemonization failed for user {current_user.id}: {e}")
        raise UpstreamError("Failed to process image") from e


@router.post(
    "/save-custom-pokemon",
    response_model=UserPokemonResponse,
    status_code=status.HTTP_201_CREATED,
)
def save_custom_pokemon(
    pokemon_data: CustomPokemonCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[CollectionService, Depends(get_collection_service)],
):
    """Save an AI-generated or hand-made Pokemon to the collection."""
    return service.add_custom(
        current_user.id,
        pokemon_id=pokemon_data.pokemon_id,
        pokemon_name=pokemon_data.pokemon_name,
        category=pokemon_data.category,
        pokemon_image=pokemon_data.pokemon_image,
        pokemon_types=pokemon_data.pokemon_types,
        notes=pokemon_data.notes,
    )


@router.get("/url/{file_name:path}", response_model=ImageUrlResponse)
async def get_image_url(
    file_name: str,
    current_user: Annotated[User, Depends(get_current_user)],
    images: Annotated[ImageService, Depends(get_image_service)],
):
    """Get a time-limited URL for a stored image."""
    try:
        url = await images.get_signed_url(file_name)
    except UpstreamError as e:
        raise UpstreamError("Failed to get image URL") from e
    return ImageUrlResponse(url=url)
