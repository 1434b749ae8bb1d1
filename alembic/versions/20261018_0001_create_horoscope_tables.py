# mypy: ignore-errors
"""
Migration Alembic pour créer les tables de profils, d'horoscopes quotidiens et de consultations.

Aucune contrainte d'unicité sur (zodiac_sign, horoscope_date, language); les clés étrangères des
consultations n'ont pas de suppression en cascade.
"""

from __future__ import annotations

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "20261018_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Crée les tables `horoscope_profiles`, `daily_horoscopes` et `horoscope_views`."""
    op.create_table(
        "horoscope_profiles",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column("user_id", sa.String(length=255), nullable=False),
        sa.Column("name", sa.Text(), nullable=True),
        sa.Column("birth_date", sa.Date(), nullable=True),
        sa.Column("birth_time", sa.Text(), nullable=True),
        sa.Column("birth_place", sa.Text(), nullable=True),
        sa.Column("zodiac_sign", sa.Text(), nullable=True),
        sa.Column("preferred_language", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_horoscope_profiles_user_id", "horoscope_profiles", ["user_id"])

    op.create_table(
        "daily_horoscopes",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column("horoscope_date", sa.Date(), nullable=False),
        sa.Column("zodiac_sign", sa.Text(), nullable=False),
        sa.Column("language", sa.Text(), nullable=True),
        sa.Column("general_text", sa.Text(), nullable=False),
        sa.Column("love_text", sa.Text(), nullable=True),
        sa.Column("career_text", sa.Text(), nullable=True),
        sa.Column("health_text", sa.Text(), nullable=True),
        sa.Column("lucky_number", sa.Text(), nullable=True),
        sa.Column("lucky_color", sa.Text(), nullable=True),
        sa.Column("mood", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index(
        "ix_daily_horoscopes_horoscope_date", "daily_horoscopes", ["horoscope_date"]
    )

    op.create_table(
        "horoscope_views",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column(
            "profile_id",
            sa.String(length=64),
            sa.ForeignKey("horoscope_profiles.id"),
            nullable=True,
        ),
        sa.Column("user_id", sa.String(length=255), nullable=False),
        sa.Column(
            "daily_horoscope_id",
            sa.String(length=64),
            sa.ForeignKey("daily_horoscopes.id"),
            nullable=True,
        ),
        sa.Column("viewed_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("device_info", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_horoscope_views_user_id", "horoscope_views", ["user_id"])


def downgrade() -> None:
    """Supprime les tables créées par `upgrade` (ordre inverse des dépendances)."""
    op.drop_index("ix_horoscope_views_user_id", table_name="horoscope_views")
    op.drop_table("horoscope_views")
    op.drop_index("ix_daily_horoscopes_horoscope_date", table_name="daily_horoscopes")
    op.drop_table("daily_horoscopes")
    op.drop_index("ix_horoscope_profiles_user_id", table_name="horoscope_profiles")
    op.drop_table("horoscope_profiles")
