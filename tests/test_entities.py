"""Tests pour les modèles d'entrée et la coercition des dates."""

from __future__ import annotations

from datetime import UTC, date, datetime

import pytest
from pydantic import ValidationError as PydanticValidationError

from horoscope_backend.domain.entities import (
    ZODIAC_SIGNS,
    DailyHoroscopeRecord,
    ProfileUpdate,
    coerce_date,
)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("2024-01-01", date(2024, 1, 1)),
        (" 2024-02-29 ", date(2024, 2, 29)),
        ("2024-01-01T23:59:00", date(2024, 1, 1)),
        ("2024-01-01T10:00:00+02:00", date(2024, 1, 1)),
        (date(2024, 5, 6), date(2024, 5, 6)),
        (datetime(2024, 5, 6, 7, 8, tzinfo=UTC), date(2024, 5, 6)),
    ],
)
def test_coerce_date_accepts_date_like_values(value, expected) -> None:
    assert coerce_date(value) == expected


@pytest.mark.parametrize("value", ["", "yesterday", "2024-13-01", 20240101, [2024, 1, 1]])
def test_coerce_date_rejects_other_values(value) -> None:
    with pytest.raises(ValueError):
        coerce_date(value)


def test_provided_only_lists_explicit_fields() -> None:
    """Teste que `provided` distingue un champ absent d'un champ fourni."""
    data = ProfileUpdate.model_validate({"id": "p1", "birthDate": "1990-05-01", "notes": ""})
    assert data.provided() == {"id": "p1", "birth_date": date(1990, 5, 1), "notes": ""}


def test_explicit_null_is_rejected() -> None:
    with pytest.raises(PydanticValidationError):
        ProfileUpdate.model_validate({"id": "p1", "zodiacSign": None})


def test_record_serializes_camel_case() -> None:
    record = DailyHoroscopeRecord.model_validate(
        {
            "id": "h1",
            "horoscope_date": date(2024, 1, 1),
            "zodiac_sign": "aries",
            "general_text": "x",
            "created_at": datetime(2024, 1, 1),
        }
    )
    wire = record.to_wire()
    assert wire["horoscopeDate"] == date(2024, 1, 1)
    assert wire["generalText"] == "x"
    assert "general_text" not in wire


def test_zodiac_signs_are_twelve_lowercase_codes() -> None:
    assert len(ZODIAC_SIGNS) == 12
    assert all(sign == sign.lower() for sign in ZODIAC_SIGNS)
