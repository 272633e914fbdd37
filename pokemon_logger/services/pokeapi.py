"""PokeAPI client for canonical Pokemon data."""

import logging
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

import httpx

from pokemon_logger.config import get_settings
from pokemon_logger.errors import NotFoundError, UpstreamError

logger = logging.getLogger(__name__)


@dataclass
class PokemonData:
    """The parts of a PokeAPI pokemon resource the app uses."""

    id: int
    name: str
    image: str
    types: list[str]
    stats: list[dict[str, Any]] = field(default_factory=list)
    height: int | None = None
    weight: int | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "PokemonData":
        """Build from a raw ``/pokemon/{id or name}`` response body."""
        artwork = data.get("sprites", {}).get("other", {}).get("official-artwork", {})
        return cls(
            id=data["id"],
            name=data["name"],
            image=artwork.get("front_default") or "",
            types=[t["type"]["name"] for t in data.get("types", [])],
            stats=data.get("stats", []),
            height=data.get("height"),
            weight=data.get("weight"),
        )


class PokeAPIClient:
    """Async client for PokeAPI.

    One instance is created at startup and shares its connection pool across
    requests. Calls are made once; there is no retry.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = get_settings()
        self.base_url = (base_url or settings.pokeapi_base_url).rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else settings.pokeapi_timeout_seconds,
            transport=transport,
        )

    async def get_pokemon(self, name_or_id: str | int) -> PokemonData:
        """Look up a Pokemon by name or National Dex id.

        Raises:
            NotFoundError: PokeAPI answered 404
            UpstreamError: any other failure talking to PokeAPI
        """
        key = str(name_or_id).strip().lower()
        if not key:
            raise NotFoundError("Pokemon not found")

        try:
            response = await self._client.get(f"/pokemon/{quote(key, safe='')}")
        except httpx.HTTPError as e:
            logger.error(f"HTTP error calling PokeAPI for {key}: {e}")
            raise UpstreamError("Failed to fetch Pokemon data") from e

        if response.status_code == httpx.codes.NOT_FOUND:
            raise NotFoundError("Pokemon not found")

        try:
            response.raise_for_status()
            return PokemonData.from_api(response.json())
        except httpx.HTTPStatusError as e:
            logger.error(f"PokeAPI returned {response.status_code} for {key}")
            raise UpstreamError("Failed to fetch Pokemon data") from e
        except (ValueError, KeyError, TypeError) as e:
            logger.error(f"Unexpected PokeAPI payload for {key}: {e}")
            raise UpstreamError("Failed to fetch Pokemon data") from e

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()
