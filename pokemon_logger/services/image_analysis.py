"""Photo identification and pokemonization."""

import asyncio
import logging

from pokemon_logger.errors import AppError, NotFoundError, UpstreamError
from pokemon_logger.schemas.image import (
    IdentifiedPokemon,
    IdentifyResponse,
    PokemonizeResponse,
)
from pokemon_logger.services.image_service import ImageService, prepare_image
from pokemon_logger.services.llm import UNKNOWN_POKEMON, LLMService
from pokemon_logger.services.pokeapi import PokeAPIClient

logger = logging.getLogger(__name__)


class ImageAnalysisService:
    """Stores an uploaded photo and runs one of the vision features on it."""

    def __init__(self, images: ImageService, llm: LLMService, pokeapi: PokeAPIClient):
        self.images = images
        self.llm = llm
        self.pokeapi = pokeapi

    async def identify(self, image_data: bytes) -> IdentifyResponse:
        """Identify the Pokemon in a photo and attach its PokeAPI data.

        Not recognising the Pokemon, or failing to look the name up on
        PokeAPI for any reason, is reported with ``success=False`` rather
        than as an error.
        """
        processed = await asyncio.to_thread(prepare_image, image_data)
        key = await self.images.upload_image(processed)
        name = await self.llm.identify_pokemon(processed)

        if name == UNKNOWN_POKEMON:
            return IdentifyResponse(
                success=False,
                message="Could not identify Pokemon from image",
                image_url=await self.images.get_signed_url(key),
            )

        try:
            pokemon = await self.pokeapi.get_pokemon(name)
        except (NotFoundError, UpstreamError) as e:
            logger.info(f"Model identified '{name}' but PokeAPI lookup failed: {e}")
            return IdentifyResponse(
                success=False,
                message=f'Pokemon "{name}" identified but not found in PokeAPI',
                image_url=await self.images.get_signed_url(key),
                identified_as=name,
            )

        return IdentifyResponse(
            success=True,
            pokemon=IdentifiedPokemon(
                id=pokemon.id,
                name=pokemon.name,
                image=pokemon.image,
                types=pokemon.types,
                stats=pokemon.stats,
                height=pokemon.height,
                weight=pokemon.weight,
            ),
            uploaded_image_url=await self.images.get_signed_url(key),
            identified_as=name,
        )

    async def pokemonize(self, image_data: bytes) -> PokemonizeResponse:
        """Design a Pokemon from a person's photo and try to draw it."""
        processed = await asyncio.to_thread(prepare_image, image_data)
        key = await self.images.upload_image(processed)
        analysis = await self.llm.pokemonize_person(processed)

        generated_url = None
        if analysis.image_prompt:
            # Artwork is optional; the analysis is still returned without it
            try:
                art = await self.llm.generate_pokemon_image(analysis.image_prompt)
                art_key = await self.images.upload_generated_image(art)
                generated_url = await self.images.get_signed_url(art_key)
            except AppError as e:
                logger.warning(f"Failed to generate Pokemon image: {e}")

        return PokemonizeResponse(
            success=True,
            analysis=analysis,
            uploaded_image_url=await self.images.get_signed_url(key),
            generated_pokemon_image_url=generated_url,
        )
