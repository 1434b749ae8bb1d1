"""Tests de bout en bout des actions HTTP (`POST /actions/<nom>`).

Ce module vérifie les enveloppes de succès et d'erreur, les codes HTTP et les scénarios
profil/horoscope/consultation via le client FastAPI.
"""

from __future__ import annotations

from horoscope_backend.core.http_constants import (
    HTTP_BAD_REQUEST,
    HTTP_FORBIDDEN,
    HTTP_NOT_FOUND,
    HTTP_OK,
    HTTP_UNAUTHORIZED,
)
from tests.fakes import make_token


def _ids(response) -> set[str]:
    return {item["id"] for item in response.json()["data"]["items"]}


def test_profile_scenario_across_two_users(client, auth) -> None:
    """Teste création, isolement et suppression d'un profil entre U1 et U2."""
    r = client.post(
        "/actions/createProfile",
        json={"name": "Self", "zodiacSign": "aries"},
        headers=auth("U1"),
    )
    assert r.status_code == HTTP_OK
    assert r.json()["success"] is True
    p1 = r.json()["data"]["id"]

    assert p1 in _ids(client.post("/actions/listProfiles", headers=auth("U1")))
    assert p1 not in _ids(client.post("/actions/listProfiles", headers=auth("U2")))

    r = client.post("/actions/deleteProfile", json={"id": p1}, headers=auth("U2"))
    assert r.status_code == HTTP_NOT_FOUND
    assert r.json()["success"] is False
    assert r.json()["error"]["code"] == "NOT_FOUND"

    r = client.post("/actions/deleteProfile", json={"id": p1}, headers=auth("U1"))
    assert r.status_code == HTTP_OK
    assert r.json() == {"success": True, "data": {"id": p1}}

    r = client.post("/actions/listProfiles", json={}, headers=auth("U1"))
    assert r.json()["data"] == {"items": [], "total": 0}


def test_profile_listing_is_camel_case_json(client, auth) -> None:
    client.post(
        "/actions/createProfile",
        json={"name": "Self", "birthDate": "1990-05-01", "birthTime": "14:30"},
        headers=auth("U1"),
    )
    [item] = client.post("/actions/listProfiles", headers=auth("U1")).json()["data"]["items"]
    assert item["birthDate"] == "1990-05-01"
    assert item["birthTime"] == "14:30"
    assert item["userId"] == "U1"
    assert "createdAt" in item and "updatedAt" in item


def test_update_profile_via_http(client, auth) -> None:
    pid = client.post(
        "/actions/createProfile", json={"name": "Self", "notes": "n"}, headers=auth("U1")
    ).json()["data"]["id"]
    r = client.post(
        "/actions/updateProfile", json={"id": pid, "name": "Me"}, headers=auth("U1")
    )
    assert r.status_code == HTTP_OK
    [item] = client.post("/actions/listProfiles", headers=auth("U1")).json()["data"]["items"]
    assert item["name"] == "Me"
    assert item["notes"] == "n"

    r = client.post(
        "/actions/updateProfile", json={"id": pid, "name": "Other"}, headers=auth("U2")
    )
    assert r.status_code == HTTP_NOT_FOUND


def test_horoscope_scenario(client, auth) -> None:
    """Teste publication puis lecture publique (aries, 2024-01-01)."""
    r = client.post(
        "/actions/createDailyHoroscope",
        json={"horoscopeDate": "2024-01-01", "zodiacSign": "aries", "generalText": "..."},
        headers=auth("editor"),
    )
    assert r.status_code == HTTP_OK
    data = r.json()["data"]
    assert data["ownerId"] == "editor"
    h1 = data["id"]

    r = client.post(
        "/actions/getDailyHoroscope",
        json={"zodiacSign": "aries", "horoscopeDate": "2024-01-01"},
    )
    assert r.status_code == HTTP_OK
    horoscope = r.json()["data"]["horoscope"]
    assert horoscope["id"] == h1
    assert horoscope["generalText"] == "..."
    assert horoscope["horoscopeDate"] == "2024-01-01"

    r = client.post("/actions/listDailyHoroscopes")
    assert r.status_code == HTTP_OK
    assert r.json()["data"]["total"] == 1

    r = client.post(
        "/actions/updateDailyHoroscope",
        json={"id": h1, "mood": "bright"},
        headers=auth("someone-else"),
    )
    assert r.status_code == HTTP_OK


def test_get_daily_horoscope_not_found(client) -> None:
    r = client.post(
        "/actions/getDailyHoroscope",
        json={"zodiacSign": "virgo", "horoscopeDate": "2024-01-01"},
    )
    assert r.status_code == HTTP_NOT_FOUND
    assert r.json()["error"]["code"] == "NOT_FOUND"


def test_log_view_errors(client, auth) -> None:
    """Teste Forbidden pour un profil étranger et NotFound pour un horoscope inconnu."""
    pid = client.post("/actions/createProfile", json={}, headers=auth("U1")).json()["data"]["id"]

    r = client.post("/actions/logHoroscopeView", json={"profileId": pid}, headers=auth("U2"))
    assert r.status_code == HTTP_FORBIDDEN
    assert r.json()["error"]["code"] == "FORBIDDEN"

    r = client.post(
        "/actions/logHoroscopeView", json={"dailyHoroscopeId": "nope"}, headers=auth("U1")
    )
    assert r.status_code == HTTP_NOT_FOUND

    r = client.post(
        "/actions/logHoroscopeView",
        json={"profileId": pid, "deviceInfo": "web"},
        headers=auth("U1"),
    )
    assert r.status_code == HTTP_OK
    assert r.json()["data"]["id"]


def test_missing_invalid_or_foreign_tokens_are_unauthorized(client) -> None:
    """Teste qu'un jeton absent, malformé ou mal signé donne 401."""
    for headers in (
        {},
        {"Authorization": "Bearer not.a.valid.token"},
        {"Authorization": "Basic dXNlcjpwYXNz"},
        {"Authorization": f"Bearer {make_token('U1', secret='wrong-secret')}"},
    ):
        r = client.post("/actions/listProfiles", headers=headers)
        assert r.status_code == HTTP_UNAUTHORIZED
        assert r.json()["error"]["code"] == "UNAUTHORIZED"


def test_validation_errors_use_envelope(client, auth) -> None:
    r = client.post(
        "/actions/createDailyHoroscope",
        json={"zodiacSign": "aries", "generalText": ""},
        headers=auth("editor"),
    )
    assert r.status_code == HTTP_BAD_REQUEST
    body = r.json()
    assert body["success"] is False
    assert body["error"]["code"] == "VALIDATION_ERROR"
    fields = {e["field"] for e in body["error"]["details"]["errors"]}
    assert {"horoscopeDate", "generalText"} <= fields

    r = client.post("/actions/deleteProfile", json=["not", "an", "object"], headers=auth("U1"))
    assert r.status_code == HTTP_BAD_REQUEST
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"


def test_validation_precedes_authentication(client) -> None:
    r = client.post("/actions/updateProfile", json={"name": "x"})
    assert r.status_code == HTTP_BAD_REQUEST


def test_trace_id_echoes_request_id(client, auth) -> None:
    r = client.post(
        "/actions/listProfiles", headers={"X-Request-ID": "req-123"}
    )
    assert r.headers["X-Request-ID"] == "req-123"
    assert r.json()["trace_id"] == "req-123"
    assert "X-Process-Time-ms" in r.headers
