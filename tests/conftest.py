"""Pytest configuration and fixtures."""

import os

# Must be set before the application reads its settings
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_S3_BUCKET", "test-bucket")

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from pokemon_logger.api.dependencies import (  # noqa: E402
    get_image_service,
    get_llm_service,
    get_pokeapi_client,
)
from pokemon_logger.config import get_settings  # noqa: E402
from pokemon_logger.database import Base, Database, get_db  # noqa: E402
from pokemon_logger.main import app  # noqa: E402
from pokemon_logger.services.pokeapi import PokeAPIClient  # noqa: E402


class AuthHeaders(dict):
    """Dict subclass that also stores user_id and email."""

    def __init__(self, *args, user_id: str | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


test_database = Database(get_settings().database_url)

POKEAPI_BASE_URL = "https://pokeapi.test/api/v2"


def make_pokeapi_pokemon(pokemon_id: int, name: str, types: list[str]) -> dict:
    """Minimal PokeAPI /pokemon payload."""
    return {
        "id": pokemon_id,
        "name": name,
        "height": 7,
        "weight": 69,
        "sprites": {
            "other": {
                "official-artwork": {
                    "front_default": f"https://img.pokeapi.test/{pokemon_id}.png",
                }
            }
        },
        "types": [{"slot": i + 1, "type": {"name": t}} for i, t in enumerate(types)],
        "stats": [
            {"base_stat": 45, "effort": 0, "stat": {"name": "hp"}},
            {"base_stat": 49, "effort": 0, "stat": {"name": "attack"}},
            {"base_stat": 49, "effort": 0, "stat": {"name": "defense"}},
        ],
    }


POKEDEX = {
    "1": make_pokeapi_pokemon(1, "bulbasaur", ["grass", "poison"]),
    "6": make_pokeapi_pokemon(6, "charizard", ["fire", "flying"]),
    "25": make_pokeapi_pokemon(25, "pikachu", ["electric"]),
}
POKEDEX.update({p["name"]: p for p in list(POKEDEX.values())})


def pokeapi_handler(request: httpx.Request) -> httpx.Response:
    """Serve POKEDEX entries; ``missingno`` simulates a PokeAPI outage."""
    key = request.url.path.rsplit("/", 1)[-1]
    if key == "missingno":
        return httpx.Response(503, json={"detail": "unavailable"})
    if key in POKEDEX:
        return httpx.Response(200, json=POKEDEX[key])
    return httpx.Response(404, text="Not Found")


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    test_database.create_all()
    yield
    test_database.dispose()


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = test_database.session()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def pokeapi_client():
    """PokeAPI client backed by an in-process mock transport."""
    return PokeAPIClient(base_url=POKEAPI_BASE_URL, transport=httpx.MockTransport(pokeapi_handler))


@pytest.fixture
def image_service():
    """Stand-in for the S3 image service."""
    service = MagicMock()
    service.upload_image = AsyncMock(return_value="pokemon-images/test.jpg")
    service.upload_generated_image = AsyncMock(return_value="pokemon-generated/test.png")
    service.get_signed_url = AsyncMock(
        side_effect=lambda key: f"https://test-bucket.s3.test/{key}?signature=abc"
    )
    return service


@pytest.fixture
def llm_service():
    """Stand-in for the Bedrock model service."""
    service = MagicMock()
    service.identify_pokemon = AsyncMock(return_value="bulbasaur")
    service.pokemonize_person = AsyncMock()
    service.generate_pokemon_image = AsyncMock(return_value=b"\x89PNG fake")
    return service


@pytest.fixture(scope="function")
def client(db, pokeapi_client, image_service, llm_service):
    """Create a test client with database and external services overridden."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_pokeapi_client] = lambda: pokeapi_client
    app.dependency_overrides[get_image_service] = lambda: image_service
    app.dependency_overrides[get_llm_service] = lambda: llm_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(client):
    """Factory that registers a user and returns auth headers for it."""

    def _make_user(email: str, password: str = "pikachu123", name: str = "Ash") -> AuthHeaders:
        response = client.post(
            "/api/auth/register",
            json={"email": email, "password": password, "name": name},
        )
        assert response.status_code == 201
        data = response.json()
        return AuthHeaders(
            {"Authorization": f"Bearer {data['token']}"},
            user_id=data["user"]["id"],
            email=email,
        )

    return _make_user


@pytest.fixture
def auth_headers(make_user):
    """Create a user and return auth headers with user info."""
    return make_user("trainer@pokemon.com", name="Pokemon Trainer")


@pytest.fixture
def other_auth_headers(make_user):
    """A second, unrelated user."""
    return make_user("rival@pokemon.com", name="Gary")
