from pathlib import Path

import httpx
import pytest
from fastapi.testclient import TestClient

from src.fdl_site.config import Settings
from src.fdl_site.main import create_app
from src.fdl_site.models.domain import CoverageFailed

ZONES_CSV = (
    "Zone,Zip,City,DeliveryDays\n"
    "A,08817,Edison,DNT\n"
    "A,08901,New Brunswick,mon-fri\n"
    "B,8837,,TUE\n"
)


def _settings(tmp_path: Path, **overrides) -> Settings:
    values = {
        "coverage_file": tmp_path / "Zones.csv",
        "contact_endpoint_url": "https://script.example.test/exec",
        "frontend_allowed_origins": ("http://localhost:3000",),
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def api_client(tmp_path: Path):
    (tmp_path / "Zones.csv").write_text(ZONES_CSV, encoding="utf-8")
    app = create_app(_settings(tmp_path))
    with TestClient(app) as client:
        yield client


@pytest.fixture
def failed_client(tmp_path: Path):
    async def failing_loader(config):
        return CoverageFailed(message="Failed to load zones.csv")

    app = create_app(_settings(tmp_path), loader=failing_loader)
    with TestClient(app) as client:
        yield client


def test_root_and_health(api_client: TestClient):
    root = api_client.get("/")
    assert root.status_code == 200
    assert root.json()["coverage_ready"] is True

    assert api_client.get("/api/health").json() == {"status": "ok"}
    coverage_health = api_client.get("/api/health/coverage").json()
    assert coverage_health["healthy"] is True
    assert coverage_health["zips"] == 3


def test_coverage_status(api_client: TestClient):
    response = api_client.get("/api/coverage/status")

    assert response.status_code == 200
    payload = response.json()
    assert payload["tableReady"] is True
    assert payload["loadError"] is None
    assert payload["zipCount"] == 3
    assert payload["rowsRead"] == 3


def test_check_covered_zip(api_client: TestClient):
    response = api_client.post("/api/coverage/check", json={"zip": "08901"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["state"] == "covered"
    assert payload["outcome"] == {
        "kind": "covered",
        "zip": "08901",
        "city": "New Brunswick",
        "deliveryDays": "MON-FRI",
        "contactMessage": None,
    }
    assert payload["banner"]["title"] == "We Deliver Here"
    assert payload["banner"]["meta"] == "Days: MON-FRI"


def test_check_affiliate_zip_by_path(api_client: TestClient):
    response = api_client.get("/api/coverage/08817")

    assert response.status_code == 200
    payload = response.json()
    assert payload["state"] == "affiliate"
    assert payload["outcome"]["city"] == "Edison"
    assert payload["banner"]["tone"] == "warn"


def test_check_padded_zip_and_missing_city(api_client: TestClient):
    payload = api_client.get("/api/coverage/08837").json()

    assert payload["state"] == "covered"
    assert payload["outcome"]["city"] is None
    assert payload["banner"]["body"] == "ZIP 08837."


def test_check_not_covered_and_invalid(api_client: TestClient):
    missing = api_client.post("/api/coverage/check", json={"zip": "99999"}).json()
    assert missing["state"] == "not_covered"
    assert "shipping@fdlwarehouse.com" in missing["outcome"]["contactMessage"]

    invalid = api_client.post("/api/coverage/check", json={"zip": "123"})
    assert invalid.status_code == 200
    assert invalid.json()["state"] == "invalid"
    assert invalid.json()["banner"]["body"] == "Enter a valid 5-digit ZIP."


def test_overlong_input_is_an_invalid_outcome(api_client: TestClient):
    long_zip = "1" * 40

    posted = api_client.post("/api/coverage/check", json={"zip": long_zip})
    assert posted.status_code == 200
    assert posted.json()["state"] == "invalid"

    by_path = api_client.get(f"/api/coverage/{long_zip}")
    assert by_path.status_code == 200
    assert by_path.json()["state"] == "invalid"


def test_queries_rejected_when_load_failed(failed_client: TestClient):
    status_payload = failed_client.get("/api/coverage/status").json()
    assert status_payload["tableReady"] is False
    assert status_payload["loadError"] == "Failed to load zones.csv"

    response = failed_client.post("/api/coverage/check", json={"zip": "08817"})
    assert response.status_code == 503
    assert response.json()["detail"] == "Failed to load zones.csv"


def test_missing_coverage_file_disables_lookup(tmp_path: Path):
    app = create_app(_settings(tmp_path))
    with TestClient(app) as client:
        response = client.get("/api/coverage/08817")
        health = client.get("/api/health/coverage").json()

    assert response.status_code == 503
    assert "Coverage file not found" in response.json()["detail"]
    assert health["healthy"] is False


def test_contact_endpoint(api_client: TestClient, monkeypatch: pytest.MonkeyPatch):
    from src.fdl_site.api.routes import contact as contact_routes
    from src.fdl_site.services.contact import relay

    sent = []

    def handler(request: httpx.Request) -> httpx.Response:
        sent.append(request)
        return httpx.Response(200)

    async def submit_with_mock(fields, config=None):
        return await relay.submit_quote_request(fields, config=config, transport=httpx.MockTransport(handler))

    monkeypatch.setattr(contact_routes, "submit_quote_request", submit_with_mock)

    ok = api_client.post("/api/contact", json={"company": "Acme", "email": "ops@acme.test", "details": "wine"})
    assert ok.status_code == 200
    assert ok.json() == {"state": "success", "msg": "Thanks! Your request was emailed."}
    assert len(sent) == 1

    invalid = api_client.post("/api/contact", json={"company": "", "email": "ops@acme.test"})
    assert invalid.status_code == 400
    assert invalid.json()["detail"] == "Company and Email are required."
    assert len(sent) == 1


def test_contact_endpoint_upstream_failure(api_client: TestClient, monkeypatch: pytest.MonkeyPatch):
    from src.fdl_site.api.routes import contact as contact_routes
    from src.fdl_site.services.contact import relay

    async def submit_with_mock(fields, config=None):
        transport = httpx.MockTransport(lambda request: httpx.Response(502))
        return await relay.submit_quote_request(fields, config=config, transport=transport)

    monkeypatch.setattr(contact_routes, "submit_quote_request", submit_with_mock)

    response = api_client.post("/api/contact", json={"company": "Acme", "email": "ops@acme.test"})
    assert response.status_code == 502
    assert response.json()["detail"] == "Email failed. Please try again."


def test_site_content(api_client: TestClient):
    payload = api_client.get("/api/site/content").json()

    assert payload["brand"] == "Fond du Lac Cold Storage"
    assert "HACCP-Compliant Handling" in payload["ticker"]
    assert [section["id"] for section in payload["sections"]] == ["warehouse", "transport", "services"]
    assert payload["footer"]["contact"]["phone"] == "(732) 650-9200"
