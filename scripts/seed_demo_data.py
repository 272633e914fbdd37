#!/usr/bin/env python3
"""Seed demo data for screenshots.

Creates a dedicated demo trainer with a small collection spread across every
category. Re-running the script clears and re-creates the demo trainer only.

Usage:
    # From project root:
    python scripts/seed_demo_data.py

    # Or against another database:
    DATABASE_URL=sqlite:///./demo.db python scripts/seed_demo_data.py
"""

import os
import sys
from datetime import UTC, datetime, timedelta

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pokemon_logger.config import get_settings
from pokemon_logger.database import Database
from pokemon_logger.models import User, UserPokemon
from pokemon_logger.models.enums import PokemonCategory
from pokemon_logger.services.auth import get_password_hash

DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "demopass123"

ARTWORK_URL = (
    "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/other/"
    "official-artwork/{id}.png"
)

# (dex id, name, types, category, notes, days ago)
DEMO_COLLECTION = [
    (25, "pikachu", ["electric"], PokemonCategory.FAVORITES, "Never leaves the pokeball", 0),
    (1, "bulbasaur", ["grass", "poison"], PokemonCategory.CAUGHT, "First partner", 30),
    (4, "charmander", ["fire"], PokemonCategory.CAUGHT, "Found on Route 24", 21),
    (7, "squirtle", ["water"], PokemonCategory.CAUGHT, "", 14),
    (133, "eevee", ["normal"], PokemonCategory.FAVORITES, "Undecided on evolution", 7),
    (143, "snorlax", ["normal"], PokemonCategory.WANT_TO_CATCH, "Blocking the road again", 3),
    (149, "dragonite", ["dragon", "flying"], PokemonCategory.WANT_TO_CATCH, "", 2),
    (150, "mewtwo", ["psychic"], PokemonCategory.WANT_TO_CATCH, "Cerulean Cave?", 1),
]


def seed_demo_data():
    """Seed the database with a demo trainer and collection."""
    database = Database(get_settings().database_url)
    database.create_all()
    session = database.session()

    try:
        existing_user = session.query(User).filter_by(email=DEMO_EMAIL).first()
        if existing_user:
            print("Demo data already exists. Clearing and re-seeding...")
            session.query(UserPokemon).filter_by(user_id=existing_user.id).delete()
            session.delete(existing_user)
            session.commit()

        print("Creating demo user...")
        user = User(
            email=DEMO_EMAIL,
            password_hash=get_password_hash(DEMO_PASSWORD),
            name="Demo Trainer",
        )
        session.add(user)
        session.flush()

        print("Creating collection...")
        now = datetime.now(UTC)
        session.add_all(
            [
                UserPokemon(
                    user_id=user.id,
                    pokemon_id=dex_id,
                    pokemon_name=name,
                    pokemon_image=ARTWORK_URL.format(id=dex_id),
                    pokemon_types=types,
                    category=category.value,
                    notes=notes,
                    date_added=now - timedelta(days=days_ago),
                )
                for dex_id, name, types, category, notes, days_ago in DEMO_COLLECTION
            ]
        )

        session.commit()
        print(f"Demo data seeded successfully! Log in as {DEMO_EMAIL} / {DEMO_PASSWORD}")

    except Exception as e:
        session.rollback()
        print(f"Error seeding demo data: {e}")
        raise
    finally:
        session.close()
        database.dispose()


if __name__ == "__main__":
    seed_demo_data()
