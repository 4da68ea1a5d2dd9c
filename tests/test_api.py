import pytest
from fastapi.testclient import TestClient

from farmmate.config import DEFAULT_DATA_SOURCE, settings
from farmmate.engine import texts
from farmmate.engine.crops import CROP_IDS
from farmmate.main import app


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(settings, "data_source", DEFAULT_DATA_SOURCE)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def broken_client(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "data_source", str(tmp_path / "missing.json"))
    with TestClient(app) as c:
        yield c


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True, "knowledge_base": "loaded", "error": None}


def test_chat(client):
    r = client.post("/chat", json={"message": "Tell me about maize diseases"})
    assert r.status_code == 200
    assert "affect maize" in r.json()["response"]


def test_chat_rejects_blank_message(client):
    r = client.post("/chat", json={"message": "   "})
    assert r.status_code == 400


def test_crops(client):
    assert client.get("/crops").json() == {"crops": list(CROP_IDS)}


def test_reload(client):
    r = client.post("/knowledge/reload")
    assert r.status_code == 200
    assert r.json()["knowledge_base"] == "loaded"


def test_unavailable_knowledge_base(broken_client):
    health = broken_client.get("/health").json()
    assert health["knowledge_base"] == "unavailable"
    assert "missing.json" in health["error"]

    r = broken_client.post("/chat", json={"message": "hello"})
    assert r.json() == {"response": texts.LOADING}
    assert broken_client.get("/crops").json() == {"crops": []}


def test_reload_failure_is_503(broken_client):
    r = broken_client.post("/knowledge/reload")
    assert r.status_code == 503
    assert "missing.json" in r.json()["detail"]
