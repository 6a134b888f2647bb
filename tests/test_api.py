from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from linecmp.main import app


@pytest.fixture
def client():
    return TestClient(app)


def fruit_sources():
    return [
        {"label": "file1.txt", "content": "apple\nbanana\ncherry\n"},
        {"label": "file2.txt", "content": "banana\ncherry\ndate\n"},
        {"label": "file3.txt", "content": "cherry\ndate\nelderberry\n"},
    ]


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "linecmp"}


def test_compare_common(client):
    response = client.post("/api/compare", json={"sources": fruit_sources()[:2]})

    assert response.status_code == 200
    body = response.json()
    assert body["result"]["common"] == ["banana", "cherry"]
    assert body["report"].startswith("Lines common to all 2 files:\n")


def test_compare_different(client):
    response = client.post(
        "/api/compare",
        json={"sources": fruit_sources(), "display": {"mode": "different", "max_lines": 1}},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["result"]["unique"] == [["apple"], [], ["elderberry"]]
    assert body["result"]["partial"] == {"banana": [0, 1], "date": [1, 2]}
    assert "  ... and 1 more lines (use --full to show all)" in body["report"]


def test_compare_uses_configured_defaults(client, isolated_config):
    isolated_config.save_config({"display": {"max_lines": 1, "show_full": False}})

    response = client.post("/api/compare", json={"sources": fruit_sources()[:2]})

    assert "... and 1 more lines" in response.json()["report"]


def test_compare_requires_two_sources(client):
    response = client.post("/api/compare", json={"sources": fruit_sources()[:1]})

    assert response.status_code == 400
    assert response.json()["detail"] == "At least 2 sources are required"


def test_compare_rejects_bad_limit(client):
    response = client.post(
        "/api/compare",
        json={"sources": fruit_sources(), "display": {"max_lines": 0}},
    )

    assert response.status_code == 422


def test_get_config_defaults(client):
    response = client.get("/api/config")

    assert response.status_code == 200
    assert response.json() == {"max_lines": 20, "show_full": False}


def test_update_config(client, isolated_config):
    response = client.put("/api/config", json={"max_lines": 7})

    assert response.status_code == 200
    assert response.json() == {"max_lines": 7, "show_full": False}
    assert isolated_config.config_file.exists()
    assert client.get("/api/config").json() == {"max_lines": 7, "show_full": False}


def test_update_config_rejects_bad_limit(client):
    response = client.put("/api/config", json={"max_lines": -1})

    assert response.status_code == 422


def write_invalid_limit(isolated_config):
    isolated_config.config_file.parent.mkdir(parents=True, exist_ok=True)
    isolated_config.config_file.write_text(json.dumps({"display": {"max_lines": 0, "show_full": False}}))
    isolated_config.get_config()


def test_compare_with_invalid_configured_limit_uses_default(client, isolated_config):
    write_invalid_limit(isolated_config)

    response = client.post("/api/compare", json={"sources": fruit_sources()[:2]})

    assert response.status_code == 200
    assert response.json()["result"]["common"] == ["banana", "cherry"]


def test_get_config_with_invalid_configured_limit(client, isolated_config):
    write_invalid_limit(isolated_config)

    response = client.get("/api/config")

    assert response.status_code == 200
    assert response.json() == {"max_lines": 20, "show_full": False}


def test_update_config_repairs_invalid_limit(client, isolated_config):
    write_invalid_limit(isolated_config)

    assert client.put("/api/config", json={"show_full": True}).json() == {"max_lines": 20, "show_full": True}
    assert client.put("/api/config", json={"max_lines": 4}).json() == {"max_lines": 4, "show_full": True}
