"""create users and user_pokemon

Revision ID: 5d1c0e7a9b42
Revises:
Create Date: 2026-10-19 09:12:04.118520

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5d1c0e7a9b42"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "user_pokemon",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("user_id", sa.String(length=36), nullable=False),
        sa.Column("pokemon_id", sa.Integer(), nullable=False),
        sa.Column("pokemon_name", sa.String(length=255), nullable=False),
        sa.Column("pokemon_image", sa.String(), nullable=False),
        # JSON array of type names, in PokeAPI slot order
        sa.Column("pokemon_types", sa.Text(), nullable=False),
        sa.Column("category", sa.String(length=20), nullable=False),
        sa.Column("notes", sa.Text(), nullable=False),
        sa.Column("date_added", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_user_pokemon_user_id"), "user_pokemon", ["user_id"], unique=False)
    op.create_index(op.f("ix_user_pokemon_category"), "user_pokemon", ["category"], unique=False)
    op.create_index(
        op.f("ix_user_pokemon_date_added"), "user_pokemon", ["date_added"], unique=False
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_user_pokemon_date_added"), table_name="user_pokemon")
    op.drop_index(op.f("ix_user_pokemon_category"), table_name="user_pokemon")
    op.drop_index(op.f("ix_user_pokemon_user_id"), table_name="user_pokemon")
    op.drop_table("user_pokemon")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
