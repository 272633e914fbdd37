"""Vision and image-generation models on Amazon Bedrock."""

import asyncio
import base64
import json
import logging
import random
from typing import Any

import anthropic
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError as PydanticValidationError

from pokemon_logger.config import Settings, get_settings
from pokemon_logger.errors import UpstreamError
from pokemon_logger.schemas.image import PokemonizeAnalysis, PokemonStats
from pokemon_logger.services.aws import build_aws_client
from pokemon_logger.services.llm_prompts import (
    IDENTIFY_POKEMON_PROMPT,
    IMAGE_NEGATIVE_PROMPT,
    POKEMONIZE_PROMPT,
    get_image_generation_prompt,
)

logger = logging.getLogger(__name__)

UNKNOWN_POKEMON = "unknown"


def strip_code_fences(text: str) -> str:
    """Remove a surrounding markdown code block, if any."""
    result = text.strip()
    if result.startswith("```json"):
        result = result[7:]
    if result.startswith("```"):
        result = result[3:]
    if result.endswith("```"):
        result = result[:-3]
    return result.strip()


def fallback_analysis(raw_text: str) -> PokemonizeAnalysis:
    """Analysis used when the model's reply is not the JSON we asked for."""
    return PokemonizeAnalysis(
        characteristics=["Unique features detected"],
        suggested_pokemon="Custom Pokemon",
        pokemonized_description=raw_text,
        power_type="Normal/Psychic",
        abilities=["Adaptability", "Charm", "Quick Thinking"],
        stats=PokemonStats(hp=75, attack=65, defense=70),
        image_prompt="A cute Pokemon character with unique features, in official Pokemon art style",
    )


def parse_analysis(raw_text: str) -> PokemonizeAnalysis:
    """Parse the pokemonize reply, degrading to the fallback on bad output."""
    try:
        data = json.loads(strip_code_fences(raw_text))
        return PokemonizeAnalysis.model_validate(data)
    except (json.JSONDecodeError, PydanticValidationError) as e:
        logger.warning(f"Failed to parse pokemonize response as JSON: {e}")
        return fallback_analysis(raw_text)


class LLMService:
    """Calls Claude (vision) and Stable Diffusion (image generation) on Bedrock."""

    def __init__(
        self,
        settings: Settings | None = None,
        client: anthropic.AsyncAnthropicBedrock | None = None,
        bedrock_runtime: Any | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.text_model = self.settings.bedrock_text_model_id
        self.image_model = self.settings.bedrock_image_model_id
        self.client = client or anthropic.AsyncAnthropicBedrock(
            aws_region=self.settings.aws_region,
            aws_access_key=self.settings.aws_access_key_id,
            aws_secret_key=self.settings.aws_secret_access_key,
            aws_session_token=self.settings.aws_session_token,
        )
        self.bedrock_runtime = bedrock_runtime or build_aws_client(
            "bedrock-runtime", self.settings
        )

    async def describe_image(self, image_data: bytes, prompt: str, max_tokens: int) -> str:
        """Send a JPEG and a prompt to the vision model and return its text reply."""
        image_base64 = base64.standard_b64encode(image_data).decode("utf-8")
        try:
            message = await self.client.messages.create(
                model=self.text_model,
                max_tokens=max_tokens,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": prompt},
                            {
                                "type": "image",
                                "source": {
                                    "type": "base64",
                                    "media_type": "image/jpeg",
                                    "data": image_base64,
                                },
                            },
                        ],
                    }
                ],
            )
        except anthropic.APIError as e:
            logger.error(f"Error calling Bedrock model {self.text_model}: {e}")
            raise UpstreamError("Failed to analyze image") from e

        if not message.content:
            logger.error(f"Bedrock model {self.text_model} returned an empty reply")
            raise UpstreamError("Failed to analyze image")
        return message.content[0].text.strip()

    async def identify_pokemon(self, image_data: bytes) -> str:
        """Name of the Pokemon in the picture, lower-cased, or ``"unknown"``."""
        reply = await self.describe_image(image_data, IDENTIFY_POKEMON_PROMPT, max_tokens=50)
        return reply.strip().rstrip(".").lower() or UNKNOWN_POKEMON

    async def pokemonize_person(self, image_data: bytes) -> PokemonizeAnalysis:
        """Design a Pokemon character inspired by the person in the picture."""
        reply = await self.describe_image(image_data, POKEMONIZE_PROMPT, max_tokens=1000)
        return parse_analysis(reply)

    async def generate_pokemon_image(self, image_prompt: str) -> bytes:
        """Render a 512x512 PNG for a character prompt."""
        body = {
            "text_prompts": [
                {"text": get_image_generation_prompt(image_prompt), "weight": 1.0},
                {"text": IMAGE_NEGATIVE_PROMPT, "weight": -1.0},
            ],
            "cfg_scale": 10,
            "steps": 50,
            "seed": random.randint(0, 999_999),
            "width": 512,
            "height": 512,
            "style_preset": "anime",
        }
        try:
            response = await asyncio.to_thread(
                self.bedrock_runtime.invoke_model,
                modelId=self.image_model,
                body=json.dumps(body),
                contentType="application/json",
                accept="application/json",
            )
            payload = json.loads(response["body"].read())
            return base64.b64decode(payload["artifacts"][0]["base64"])
        except (BotoCoreError, ClientError, KeyError, IndexError, ValueError) as e:
            logger.error(f"Error generating Pokemon image: {e}")
            raise UpstreamError("Failed to generate Pokemon image") from e
