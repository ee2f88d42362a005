from fastapi.testclient import TestClient

from cadunits.api.app import app
from cadunits.settings import reset_settings


client = TestClient(app)


def test_translate_endpoint_uses_requested_schema():
    response = client.post(
        "/v1/units/translate",
        json={"value": 25.4, "dimension": "Length", "schema_name": "ImperialUK"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["symbol"] == "in"
    assert data["factor"] == 25.4
    assert data["text"] == "1.00 in"


def test_translate_endpoint_defaults_from_environment(monkeypatch):
    monkeypatch.setenv("CADUNITS_PRECISION", "1")
    monkeypatch.setenv("CADUNITS_ADAPTIVE", "1")
    reset_settings()
    response = client.post("/v1/units/translate", json={"value": 12000, "dimension": "length"})
    data = response.json()
    assert data["symbol"] == "m"
    assert data["text"] == "12.0 m"


def test_translate_endpoint_rejects_unknown_dimension():
    response = client.post("/v1/units/translate", json={"value": 1, "dimension": "Torque"})
    assert response.status_code == 422
    assert "Torque" in response.json()["detail"]["message"]


def test_parse_endpoint_returns_canonical_value():
    response = client.post("/v1/units/parse", json={"text": "1in"})
    assert response.status_code == 200
    data = response.json()
    assert data["ok"] is True
    assert data["value"] == 1.0
    assert data["factor"] == 25.4
    assert data["canonical"] == 25.4
    assert data["dimension"] == "Length"


def test_parse_endpoint_flags_unknown_symbol():
    response = client.post("/v1/units/parse", json={"text": "5xyz"})
    data = response.json()
    assert data["ok"] is False
    assert data["dimension"] == "None"
    assert data["value"] is None


def test_schemas_endpoint_lists_rows_in_lookup_order():
    response = client.get("/v1/units/schemas")
    data = response.json()["schemas"]
    assert list(data) == ["SI", "ImperialUK"]
    assert data["SI"][0] == {"dimension": "Length", "symbol": "mm", "factor": 1.0}
    assert any(row["symbol"] == "thou" for row in data["ImperialUK"])


def test_health():
    assert client.get("/health").json()["status"] == "ok"


def test_parse_endpoint_rejects_non_finite_quantities():
    for text in ("nanmm", "1e400mm", "-infin", "1e300km³"):
        response = client.post("/v1/units/parse", json={"text": text})
        assert response.status_code == 422, text
        assert "not a finite number" in response.json()["detail"]["message"]
