"""SQLAlchemy models for the persistence layer (profiles, daily horoscopes, views)."""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import (
    Column,
    Date,
    DateTime,
    ForeignKey,
    MetaData,
    String,
    Text,
)
from sqlalchemy.orm import DeclarativeBase


def utcnow() -> datetime:
    """Horodatage courant en UTC."""
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Classe de base pour tous les modèles SQLAlchemy."""

    metadata = MetaData()


class HoroscopeProfileORM(Base):
    """Profil astrologique d'une personne, possédé par un seul utilisateur."""

    __tablename__ = "horoscope_profiles"

    id = Column(String(64), primary_key=True)
    user_id = Column(String(255), nullable=False, index=True)

    name = Column(Text, nullable=True)  # "Self", "Partner"
    birth_date = Column(Date, nullable=True)
    birth_time = Column(Text, nullable=True)  # "14:30" si connue
    birth_place = Column(Text, nullable=True)

    zodiac_sign = Column(Text, nullable=True)  # "aries", "taurus", ...
    preferred_language = Column(Text, nullable=True)

    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)


class DailyHoroscopeORM(Base):
    """Contenu quotidien d'un signe; partagé, sans propriétaire.

    (zodiac_sign, horoscope_date, language) n'est pas unique.
    """

    __tablename__ = "daily_horoscopes"

    id = Column(String(64), primary_key=True)
    horoscope_date = Column(Date, nullable=False, index=True)

    zodiac_sign = Column(Text, nullable=False)
    language = Column(Text, nullable=True)  # "en", ...

    general_text = Column(Text, nullable=False)
    love_text = Column(Text, nullable=True)
    career_text = Column(Text, nullable=True)
    health_text = Column(Text, nullable=True)

    lucky_number = Column(Text, nullable=True)
    lucky_color = Column(Text, nullable=True)
    mood = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)


class HoroscopeViewORM(Base):
    """Journal append-only des consultations d'horoscope."""

    __tablename__ = "horoscope_views"

    id = Column(String(64), primary_key=True)
    profile_id = Column(String(64), ForeignKey("horoscope_profiles.id"), nullable=True)
    user_id = Column(String(255), nullable=False, index=True)
    daily_horoscope_id = Column(String(64), ForeignKey("daily_horoscopes.id"), nullable=True)

    viewed_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    device_info = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
