import pytest

from app import create_app


def _client():
    app = create_app("TestingConfig")
    return app.test_client()


def test_evaluate_endpoint():
    client = _client()
    resp = client.post("/api/calculator/evaluate", json={"expression": "3*4+5"})
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["success"] is True
    assert data["data"]["result"] == 17
    assert data["data"]["display"] == "17"


def test_evaluate_defaults_to_degrees():
    client = _client()
    resp = client.post("/api/calculator/evaluate", json={"expression": "sin(90)"})
    payload = resp.get_json()["data"]
    assert payload["angle_mode"] == "degree"
    assert payload["result"] == pytest.approx(1.0)


def test_angle_mode_toggle_is_remembered():
    client = _client()
    assert client.get("/api/calculator/angle_mode").get_json()["data"]["angle_mode"] == "degree"
    resp = client.post("/api/calculator/angle_mode", json={"angle_mode": "radian"})
    assert resp.status_code == 200
    assert client.get("/api/calculator/angle_mode").get_json()["data"]["angle_mode"] == "radian"
    payload = client.post("/api/calculator/evaluate", json={"expression": "sin(pi/2)"}).get_json()["data"]
    assert payload["angle_mode"] == "radian"
    assert payload["result"] == pytest.approx(1.0)


def test_explicit_angle_mode_overrides_session():
    client = _client()
    client.post("/api/calculator/angle_mode", json={"angle_mode": "radian"})
    payload = client.post(
        "/api/calculator/evaluate",
        json={"expression": "cos(180)", "angle_mode": "degree"},
    ).get_json()["data"]
    assert payload["result"] == pytest.approx(-1.0)


def test_invalid_expression_returns_error():
    client = _client()
    resp = client.post("/api/calculator/evaluate", json={"expression": "1/0"})
    assert resp.status_code == 400
    data = resp.get_json()
    assert data["success"] is False
    assert data["error"]["code"] == "calculator.invalid_expression"
    assert data["error"]["details"]["reason"] == "domain"


def test_invalid_request_returns_error():
    client = _client()
    resp = client.post("/api/calculator/angle_mode", json={"angle_mode": "gradian"})
    assert resp.status_code == 400
    assert resp.get_json()["error"]["code"] == "calculator.invalid_request"


def test_deeply_nested_expression_is_a_validation_error():
    client = _client()
    resp = client.post("/api/calculator/evaluate", json={"expression": "-" * 1000 + "1"})
    assert resp.status_code == 400
    data = resp.get_json()
    assert data["error"]["code"] == "calculator.invalid_expression"
    assert data["error"]["details"]["reason"] == "syntax"
