"""Tests for API endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from kumiko.config import settings
from kumiko.main import app
from tests.conftest import SAMPLER_CSV, WALLED_GRID


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["motifs_registered"] == 5


def test_motifs():
    response = client.get("/api/motifs")
    assert response.status_code == 200
    data = response.json()
    assert [m["id"] for m in data["motifs"]] == ["asanoha", "goma", "kaku", "sakura", "blank"]
    assert data["default_characters"]["k"] == "kaku"


def test_render_grid():
    response = client.post("/api/render", json={"grid": WALLED_GRID, "config": {"sideLength": 100}})
    assert response.status_code == 200
    data = response.json()
    assert data["canvas_width"] == 200
    assert data["cell_count"] == 6
    assert data["svg"].startswith("<?xml")
    assert data["skeleton_groups"]
    assert data["processing_time_ms"] >= 0


def test_render_content():
    response = client.post("/api/render", json={"content": SAMPLER_CSV, "format": "csv"})
    assert response.status_code == 200
    data = response.json()
    assert data["clip_regions"]
    assert "<clipPath" in data["svg"]


def test_render_repeat():
    response = client.post(
        "/api/render",
        json={"grid": ["A"], "config": {"sideLength": 100}, "repeat_x": 2, "repeat_y": 3},
    )
    assert response.status_code == 200
    data = response.json()
    # "A A" per row
    assert data["canvas_width"] == 150
    assert data["cell_count"] == 12


def test_render_custom_motifs():
    response = client.post(
        "/api/render",
        json={"grid": ["X"], "motifs": {"X": {"type": "blank"}}},
    )
    assert response.status_code == 200
    assert response.json()["skeleton_groups"] == []


def test_render_needs_one_grid_source():
    assert client.post("/api/render", json={}).status_code == 422
    both = client.post("/api/render", json={"grid": ["A"], "content": "A"})
    assert both.status_code == 422


def test_render_invalid_side_length():
    response = client.post("/api/render", json={"grid": ["A"], "config": {"sideLength": 0}})
    assert response.status_code == 422
    assert response.json()["error"] == "InvalidGeometry"


def test_render_unknown_motif():
    response = client.post("/api/render", json={"grid": ["A"], "motifs": {"A": {"type": "shippo"}}})
    assert response.status_code == 422
    data = response.json()
    assert data["error"] == "UnknownMotifType"
    assert "shippo" in data["detail"]


def test_render_malformed_content():
    response = client.post("/api/render", json={"content": "# nothing\n", "format": "txt"})
    assert response.status_code == 422
    assert response.json()["error"] == "MalformedGrid"


@pytest.mark.parametrize("grid", [[], ["|"], ["   "]])
def test_render_rejects_grid_without_symbols(grid):
    response = client.post("/api/render", json={"grid": grid})
    assert response.status_code == 422
    assert response.json()["error"] == "MalformedGrid"


def test_render_rejects_css_in_config_colour():
    response = client.post(
        "/api/render",
        json={"grid": ["A"], "config": {"colors": {"leaf": "red; } svg { display: none"}}},
    )
    assert response.status_code == 422


def test_render_rejects_css_in_motif_colour():
    response = client.post(
        "/api/render",
        json={
            "grid": ["S"],
            "motifs": {"S": {"type": "sakura", "options": {"flowerColor": "pink} *{x:y"}}},
        },
    )
    assert response.status_code == 422
    assert response.json()["error"] == "KumikoError"


def test_partial_config_keeps_service_defaults(monkeypatch):
    monkeypatch.setattr(settings, "default_leaf_color", "#010203")
    response = client.post(
        "/api/render",
        json={"grid": ["A"], "config": {"sideLength": 50, "colors": {"skeleton": "#fff"}}},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["canvas_width"] == 50
    assert data["leaf_groups"][0]["color"] == "#010203"
    assert data["skeleton_groups"][0]["color"] == "#fff"
    assert "var(--kumiko-bg, #33312eff)" in data["svg"]
