"""LLM prompt templates for Pokemon identification and pokemonization."""

IDENTIFY_POKEMON_PROMPT = """You are a Pokemon expert. Analyze this image and identify the Pokemon.

Please respond with ONLY the Pokemon name in lowercase, no additional text.
If you're not sure or can't identify the Pokemon, respond with "unknown".

Examples of good responses:
- pikachu
- charizard
- bulbasaur
- unknown"""


POKEMONIZE_PROMPT = """You are an expert Pokemon character designer. Analyze this image of a person and create a unique Pokemon character inspired by them.

Respond ONLY with a JSON object matching this schema:
{
  "characteristics": ["list", "of", "observed", "traits"],
  "suggestedPokemon": "A creative Pokemon name",
  "pokemonizedDescription": "How this person would look as a Pokemon character",
  "powerType": "Primary/Secondary type combination",
  "abilities": ["ability1", "ability2", "ability3"],
  "stats": {"hp": 85, "attack": 75, "defense": 70},
  "imagePrompt": "A detailed prompt for generating the character in official Pokemon art style"
}

Base the design on:
- Physical characteristics (hair color, build, facial features)
- Perceived personality from expression
- A color palette that would suit them
- Types and abilities that match their vibe
- Stats between 40 and 120 that reflect perceived traits (strong = high attack, energetic = high hp, sturdy = high defense)

The imagePrompt must describe body structure, color scheme, facial features, type-specific
visual effects and any accessories, in "Pokemon official artwork style, clean lines,
vibrant colors, cute and appealing design".

Be creative and positive!"""


IMAGE_STYLE_SUFFIX = (
    "Pokemon official artwork style, anime style, clean lines, vibrant colors, "
    "cute and appealing design, high quality, detailed, colorful, fantasy creature"
)

IMAGE_NEGATIVE_PROMPT = (
    "blurry, low quality, distorted, ugly, deformed, realistic, photographic, dark, scary"
)


def get_image_generation_prompt(image_prompt: str) -> str:
    """Append the house art style to a model-written image prompt."""
    return f"{image_prompt}, {IMAGE_STYLE_SUFFIX}"
