from app import create_app


def test_home_lists_plugins():
    app = create_app("TestingConfig")
    client = app.test_client()
    response = client.get("/")
    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    titles = [item["title"] for item in payload["data"]["plugins"]]
    assert titles == ["Calculator", "Function Grapher", "Unit Converter"]
    assert response.headers.get("Content-Security-Policy")
    assert response.headers.get("X-Request-ID")


def test_unknown_route_returns_json_error():
    client = create_app("TestingConfig").test_client()
    response = client.get("/api/does-not-exist")
    assert response.status_code == 404
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["error"]["code"] == "http.404"


def test_yaml_settings_are_loaded():
    app = create_app("TestingConfig")
    assert app.config["PLUGIN_SETTINGS"]["grapher"]["steps"] == 200
    assert app.config["SITE_SETTINGS"]["default_angle_mode"] == "degree"
