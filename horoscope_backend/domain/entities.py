"""
Entités du domaine métier.

Ce module définit les modèles d'entrée des actions (validation) et les enregistrements renvoyés
aux clients. Les noms de champs exposés sont en camelCase, les attributs Python en snake_case.
"""

from datetime import date, datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# Codes de signes connus; documentaires, jamais utilisés pour rejeter une entrée.
ZODIAC_SIGNS = (
    "aries",
    "taurus",
    "gemini",
    "cancer",
    "leo",
    "virgo",
    "libra",
    "scorpio",
    "sagittarius",
    "capricorn",
    "aquarius",
    "pisces",
)


def coerce_date(value: Any) -> date:
    """Convertit une valeur « date-like » en date calendaire.

    Accepte `date`, `datetime` (partie date conservée telle quelle) et les chaînes ISO 8601
    de date ou de date-heure.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text).date()
        except ValueError as err:
            raise ValueError(f"invalid date: {value!r}") from err
    raise ValueError(f"invalid date: {value!r}")


CoercedDate = Annotated[date, BeforeValidator(coerce_date)]
RequiredText = Annotated[str, Field(min_length=1)]


class User(BaseModel):
    """Identité authentifiée fournie par le fournisseur d'identité."""

    id: str
    email: str | None = None


class ActionInput(BaseModel):
    """Base des entrées d'action: champs camelCase, clés inconnues ignorées.

    Un champ optionnel absent reste « non défini »; `null` explicite est refusé.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("must not be null")
        return value

    def provided(self) -> dict[str, Any]:
        """Champs explicitement fournis par l'appelant (noms snake_case)."""
        return self.model_dump(exclude_unset=True)


class ProfileFields(ActionInput):
    name: str | None = None
    birth_date: CoercedDate | None = None
    birth_time: str | None = None
    birth_place: str | None = None
    zodiac_sign: str | None = None
    preferred_language: str | None = None
    notes: str | None = None


class ProfileCreate(ProfileFields):
    """Entrée de `createProfile`: tous les champs sont optionnels."""


class ProfileUpdate(ProfileFields):
    """Entrée de `updateProfile`: seuls les champs fournis sont écrits."""

    id: RequiredText


class ProfileRef(ActionInput):
    id: RequiredText


class EmptyInput(ActionInput):
    """Entrée vide (ex: `listProfiles`)."""


class DailyHoroscopeCreate(ActionInput):
    horoscope_date: CoercedDate
    zodiac_sign: RequiredText
    language: str | None = None
    general_text: RequiredText
    love_text: str | None = None
    career_text: str | None = None
    health_text: str | None = None
    lucky_number: str | None = None
    lucky_color: str | None = None
    mood: str | None = None


class DailyHoroscopeUpdate(ActionInput):
    id: RequiredText
    horoscope_date: CoercedDate | None = None
    zodiac_sign: str | None = None
    language: str | None = None
    general_text: str | None = None
    love_text: str | None = None
    career_text: str | None = None
    health_text: str | None = None
    lucky_number: str | None = None
    lucky_color: str | None = None
    mood: str | None = None


class DailyHoroscopeQuery(ActionInput):
    """Entrée de `getDailyHoroscope`; la date vaut « aujourd'hui » si absente."""

    zodiac_sign: RequiredText
    horoscope_date: CoercedDate | None = None
    language: str | None = None


class DailyHoroscopeFilter(ActionInput):
    """Entrée de `listDailyHoroscopes`; une valeur vide ne filtre pas."""

    zodiac_sign: str | None = None
    horoscope_date: CoercedDate | None = None
    language: str | None = None


class ViewLogCreate(ActionInput):
    profile_id: str | None = None
    daily_horoscope_id: str | None = None
    device_info: str | None = None


class Record(BaseModel):
    """Base des enregistrements renvoyés (sérialisés en camelCase)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class ProfileRecord(Record):
    id: str
    user_id: str
    name: str | None = None
    birth_date: date | None = None
    birth_time: str | None = None
    birth_place: str | None = None
    zodiac_sign: str | None = None
    preferred_language: str | None = None
    notes: str | None = None
    created_at: datetime
    updated_at: datetime


class DailyHoroscopeRecord(Record):
    id: str
    horoscope_date: date
    zodiac_sign: str
    language: str | None = None
    general_text: str
    love_text: str | None = None
    career_text: str | None = None
    health_text: str | None = None
    lucky_number: str | None = None
    lucky_color: str | None = None
    mood: str | None = None
    created_at: datetime
