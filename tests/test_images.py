"""Image upload and analysis endpoint tests."""

import io

import pytest
from PIL import Image

from pokemon_logger.errors import UpstreamError
from pokemon_logger.schemas.image import PokemonizeAnalysis, PokemonStats


@pytest.fixture
def jpeg_bytes():
    """A small real JPEG."""
    buffer = io.BytesIO()
    Image.new("RGB", (32, 32), color=(255, 200, 0)).save(buffer, format="JPEG")
    return buffer.getvalue()


@pytest.fixture
def analysis():
    return PokemonizeAnalysis(
        characteristics=["curly hair", "big smile"],
        suggested_pokemon="Grinnet",
        pokemonized_description="A cheerful fairy-type",
        power_type="Fairy/Normal",
        abilities=["Charm", "Cute Charm"],
        stats=PokemonStats(hp=90, attack=60, defense=70),
        image_prompt="a round pink creature with curly fur",
    )


def upload(client, path, headers, data, content_type="image/jpeg"):
    return client.post(
        path,
        headers=headers,
        files={"image": ("photo.jpg", data, content_type)},
    )


def test_identify_pokemon(client, auth_headers, jpeg_bytes, image_service):
    """Test a recognised Pokemon comes back with PokeAPI data."""
    response = upload(client, "/api/images/identify", auth_headers, jpeg_bytes)
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["identifiedAs"] == "bulbasaur"
    assert data["pokemon"]["id"] == 1
    assert data["pokemon"]["types"] == ["grass", "poison"]
    assert data["pokemon"]["height"] == 7
    assert data["pokemon"]["stats"][0]["base_stat"] == 45
    assert data["uploadedImageUrl"].startswith("https://test-bucket.s3.test/pokemon-images/")
    image_service.upload_image.assert_awaited_once()


def test_identify_unknown_pokemon(client, auth_headers, jpeg_bytes, llm_service):
    llm_service.identify_pokemon.return_value = "unknown"

    response = upload(client, "/api/images/identify", auth_headers, jpeg_bytes)
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is False
    assert data["message"] == "Could not identify Pokemon from image"
    assert data["imageUrl"]
    assert "pokemon" not in data


def test_identify_pokemon_missing_from_pokeapi(client, auth_headers, jpeg_bytes, llm_service):
    llm_service.identify_pokemon.return_value = "agumon"

    response = upload(client, "/api/images/identify", auth_headers, jpeg_bytes)
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is False
    assert data["identifiedAs"] == "agumon"
    assert "not found in PokeAPI" in data["message"]


def test_identify_pokemon_during_pokeapi_outage(client, auth_headers, jpeg_bytes, llm_service):
    """A failing PokeAPI lookup degrades to success=False, not a 500."""
    llm_service.identify_pokemon.return_value = "missingno"

    response = upload(client, "/api/images/identify", auth_headers, jpeg_bytes)
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is False
    assert data["identifiedAs"] == "missingno"
    assert data["imageUrl"]
    assert "pokemon" not in data


def test_identify_requires_auth(client, jpeg_bytes):
    response = upload(client, "/api/images/identify", {}, jpeg_bytes)
    assert response.status_code == 401


def test_identify_without_file(client, auth_headers):
    response = client.post("/api/images/identify", headers=auth_headers)
    assert response.status_code == 400
    assert response.json() == {"error": "No image file provided"}


def test_identify_rejects_non_image(client, auth_headers):
    response = upload(client, "/api/images/identify", auth_headers, b"hello", "text/plain")
    assert response.status_code == 400
    assert response.json() == {"error": "Only image files are allowed"}


def test_identify_rejects_undecodable_image(client, auth_headers):
    response = upload(client, "/api/images/identify", auth_headers, b"fake-image-data")
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid image file"}


def test_identify_storage_failure(client, auth_headers, jpeg_bytes, image_service):
    image_service.upload_image.side_effect = UpstreamError("Failed to upload image")

    response = upload(client, "/api/images/identify", auth_headers, jpeg_bytes)
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to process image"}


def test_pokemonize_person(client, auth_headers, jpeg_bytes, llm_service, analysis):
    """Test the analysis and generated art URL are returned."""
    llm_service.pokemonize_person.return_value = analysis

    response = upload(client, "/api/images/pokemonize", auth_headers, jpeg_bytes)
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["analysis"]["suggestedPokemon"] == "Grinnet"
    assert data["analysis"]["powerType"] == "Fairy/Normal"
    assert data["analysis"]["stats"] == {"hp": 90, "attack": 60, "defense": 70}
    assert data["uploadedImageUrl"]
    assert "pokemon-generated/" in data["generatedPokemonImageUrl"]
    llm_service.generate_pokemon_image.assert_awaited_once_with(analysis.image_prompt)


def test_pokemonize_survives_image_generation_failure(
    client, auth_headers, jpeg_bytes, llm_service, analysis
):
    """A failed art generation still returns the analysis."""
    llm_service.pokemonize_person.return_value = analysis
    llm_service.generate_pokemon_image.side_effect = UpstreamError("boom")

    response = upload(client, "/api/images/pokemonize", auth_headers, jpeg_bytes)
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["generatedPokemonImageUrl"] is None


def test_pokemonize_without_image_prompt_skips_generation(
    client, auth_headers, jpeg_bytes, llm_service, analysis
):
    llm_service.pokemonize_person.return_value = analysis.model_copy(update={"image_prompt": None})

    response = upload(client, "/api/images/pokemonize", auth_headers, jpeg_bytes)
    assert response.status_code == 200
    assert response.json()["generatedPokemonImageUrl"] is None
    llm_service.generate_pokemon_image.assert_not_awaited()


def test_pokemonize_model_failure(client, auth_headers, jpeg_bytes, llm_service):
    llm_service.pokemonize_person.side_effect = UpstreamError("Failed to analyze image")

    response = upload(client, "/api/images/pokemonize", auth_headers, jpeg_bytes)
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to process image"}


def test_save_custom_pokemon(client, auth_headers):
    """Custom Pokemon are stored verbatim, with no PokeAPI lookup."""
    response = client.post(
        "/api/images/save-custom-pokemon",
        headers=auth_headers,
        json={
            "pokemonId": 100001,
            "pokemonName": "Grinnet",
            "pokemonImage": "https://test-bucket.s3.test/pokemon-generated/x.png",
            "pokemonTypes": ["fairy", "normal"],
            "category": "favorites",
            "notes": "Made from my selfie",
        },
    )
    assert response.status_code == 201
    data = response.json()
    assert data["pokemonId"] == 100001
    assert data["pokemonName"] == "Grinnet"
    assert data["pokemonTypes"] == ["fairy", "normal"]
    assert data["userId"] == auth_headers.user_id

    listed = client.get("/api/pokemon/my-pokemon", headers=auth_headers).json()
    assert [p["id"] for p in listed] == [data["id"]]


def test_save_custom_pokemon_defaults(client, auth_headers):
    response = client.post(
        "/api/images/save-custom-pokemon",
        headers=auth_headers,
        json={"pokemonId": -7, "pokemonName": "Glitch", "category": "caught"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["pokemonImage"] == ""
    assert data["pokemonTypes"] == []
    assert data["notes"] == ""


def test_save_custom_pokemon_invalid_category(client, auth_headers):
    response = client.post(
        "/api/images/save-custom-pokemon",
        headers=auth_headers,
        json={"pokemonId": 1, "pokemonName": "Grinnet", "category": "invalid-category"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid category"}


def test_save_custom_pokemon_missing_fields(client, auth_headers):
    response = client.post(
        "/api/images/save-custom-pokemon",
        headers=auth_headers,
        json={"pokemonName": "Grinnet"},
    )
    assert response.status_code == 400


def test_get_image_url(client, auth_headers, image_service):
    """Keys containing slashes are passed through whole."""
    response = client.get("/api/images/url/pokemon-images/abc.jpg", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {
        "url": "https://test-bucket.s3.test/pokemon-images/abc.jpg?signature=abc"
    }
    image_service.get_signed_url.assert_awaited_once_with("pokemon-images/abc.jpg")


def test_get_image_url_requires_auth(client):
    response = client.get("/api/images/url/pokemon-images/abc.jpg")
    assert response.status_code == 401
