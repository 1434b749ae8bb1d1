"""Tests pour les métriques Prometheus.

Ce module teste que les métriques HTTP et le compteur métier des actions sont exposés via
l'endpoint /metrics.
"""

import pytest
from prometheus_client import REGISTRY

from horoscope_backend.app.metrics import observe_action
from horoscope_backend.core.http_constants import HTTP_OK
from horoscope_backend.domain.errors import NotFound


def _actions(action: str, outcome: str) -> float:
    value = REGISTRY.get_sample_value(
        "horoscope_actions_total", {"action": action, "outcome": outcome}
    )
    return value or 0.0


def test_metrics_exposed(client, auth):
    """Teste que l'endpoint /metrics expose les métriques Prometheus."""
    client.post("/actions/listProfiles", headers=auth("U1"))
    r = client.get("/metrics")
    assert r.status_code == HTTP_OK
    assert b"http_requests_total" in r.content
    assert b"horoscope_actions_total" in r.content
    # Le label de route est le gabarit, jamais le chemin brut d'une requête non routée
    assert b'route="/actions/listProfiles"' in r.content


def test_action_outcomes_are_counted(client, auth):
    before_ok = _actions("createProfile", "ok")
    before_unauth = _actions("createProfile", "UNAUTHORIZED")

    client.post("/actions/createProfile", json={"name": "x"}, headers=auth("U1"))
    client.post("/actions/createProfile", json={"name": "x"})

    assert _actions("createProfile", "ok") == before_ok + 1
    assert _actions("createProfile", "UNAUTHORIZED") == before_unauth + 1


def test_observe_action_reraises():
    def boom():
        raise NotFound("gone")

    before = _actions("unitTest", "NOT_FOUND")
    with pytest.raises(NotFound):
        observe_action("unitTest", boom)
    assert _actions("unitTest", "NOT_FOUND") == before + 1
    assert observe_action("unitTest", lambda v: v, 3) == 3
