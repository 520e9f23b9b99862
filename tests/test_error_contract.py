import re

from fastapi.testclient import TestClient

from conftest import build_brief

REQUEST_ID_RE = re.compile(r"^[A-Za-z0-9._-]{8,64}$")


def _create_client(monkeypatch):
    monkeypatch.setenv("DOCGATE_ENV", "dev")
    from docgate.main import create_app

    return TestClient(create_app())


def test_health(monkeypatch):
    client = _create_client(monkeypatch)
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "validators": ["architecture", "brief"]}
    assert REQUEST_ID_RE.fullmatch(response.headers.get("X-Request-Id", ""))


def test_request_id_passthrough(monkeypatch):
    client = _create_client(monkeypatch)
    response = client.get("/health", headers={"X-Request-Id": "test-req-1234"})
    assert response.headers.get("X-Request-Id") == "test-req-1234"


def test_unsafe_request_id_is_replaced(monkeypatch):
    client = _create_client(monkeypatch)
    response = client.get("/health", headers={"X-Request-Id": "bad id!"})
    assert response.headers.get("X-Request-Id") != "bad id!"
    assert REQUEST_ID_RE.fullmatch(response.headers.get("X-Request-Id", ""))


def test_validate_brief_returns_verdict(monkeypatch):
    client = _create_client(monkeypatch)
    response = client.post("/validate/brief", json={"markdown": build_brief(), "source": "docs/brief.md"})
    assert response.status_code == 200
    body = response.json()
    assert body["verdict"] == "COMPLETE"
    assert body["passed"] is True
    assert body["exit_code"] == 0
    assert body["source"] == "docs/brief.md"
    assert body["coverage"]["completeness"] == 100
    assert len(body["advisories"]) == 5
    assert body["tally"] is None
    assert body["request_id"] == response.headers.get("X-Request-Id")


def test_validate_architecture_returns_verdict(monkeypatch, architecture_base):
    client = _create_client(monkeypatch)
    response = client.post("/validate/architecture", json={"markdown": architecture_base})
    assert response.status_code == 200
    body = response.json()
    assert body["verdict"] == "INVALID"
    assert body["exit_code"] == 1
    assert body["source"] == "<request>"
    assert body["tally"]["failed"] >= 1
    assert len(body["results"]) == 24


def test_unknown_validator_error_contract(monkeypatch):
    client = _create_client(monkeypatch)
    response = client.post("/validate/roadmap", json={"markdown": "x"})
    assert response.status_code == 404
    body = response.json()
    assert set(body.keys()) == {"code", "message", "request_id"}
    assert body["code"] == "UNKNOWN_VALIDATOR"
    assert body["request_id"] == response.headers.get("X-Request-Id")


def test_request_validation_422_error_contract(monkeypatch):
    client = _create_client(monkeypatch)
    response = client.post("/validate/brief", json={"markdown": "x", "extra": True})
    assert response.status_code == 422
    body = response.json()
    assert set(body.keys()) == {"code", "message", "request_id"}
    assert body["code"] == "REQUEST_VALIDATION_FAILED"



def test_validate_needs_no_credentials(monkeypatch):
    client = _create_client(monkeypatch)
    response = client.post("/validate/brief", headers={"X-Docgate-Api-Key": "anything"}, json={"markdown": "x"})
    assert response.status_code == 200
    assert response.json()["verdict"] == "INCOMPLETE"


def test_prod_hides_docs(monkeypatch):
    client = _create_client(monkeypatch)
    assert client.get("/docs").status_code == 200
    monkeypatch.setenv("DOCGATE_ENV", "prod")
    from docgate.main import create_app

    assert TestClient(create_app()).get("/docs").status_code == 404
