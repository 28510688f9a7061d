# tests/test_api.py
"""
Test the REST API on top of SphereGraph.

The API is the presentation layer: it rejects out-of-range targets itself
and turns "not found" into a message.
"""

import pytest
from fastapi.testclient import TestClient

import api.main as api_main
from api.main import MAX_NODES, app


@pytest.fixture
def client():
    client = TestClient(app)
    response = client.post("/api/graph", json={"target_count": 36, "radius": 2.0})
    assert response.status_code == 200
    return client


def test_health(client):
    assert client.get("/").json()["status"] == "ok"


def test_build(client):
    data = client.get("/api/graph").json()
    assert data["n_nodes"] == 36
    assert data["active"] == 1
    assert data["last_trip"] == []
    assert [n["label"] for n in data["nodes"]] == list(range(1, 37))
    assert len(data["nodes"][0]["neighbors"]) == 6


def test_build_validates_params(client):
    assert client.post("/api/graph", json={"target_count": 1}).status_code == 422
    assert client.post("/api/graph", json={"radius": -1.0}).status_code == 422


def test_search_and_avoid(client):
    data = client.post("/api/search", json={"target": 10, "animate": True}).json()
    assert data["found"]
    assert data["path"][0] == 1 and data["path"][-1] == 10
    assert data["active"] == 10
    assert len(data["steps"]) == len(data["path"]) - 1

    retry = client.post("/api/search", json={"target": data["path"][0]}).json()
    assert not retry["found"]
    assert retry["outcome"] == "avoided"
    assert retry["message"] == f"Node {data['path'][0]} not found"


def test_search_already_there(client):
    data = client.post("/api/search", json={"target": 1}).json()
    assert data["found"]
    assert data["path"] == [1]
    assert data["message"] == "Already at node 1"


@pytest.mark.parametrize("target", [0, 37])
def test_search_out_of_range_rejected(client, target):
    response = client.post("/api/search", json={"target": target})
    assert response.status_code == 422


def test_add_and_remove(client):
    assert client.post("/api/graph/nodes", json={"count": 4}).json()["n_nodes"] == 40
    assert client.delete("/api/graph/nodes/3").json()["n_nodes"] == 39
    assert client.delete("/api/graph/nodes/99").status_code == 404
    assert client.post("/api/graph/nodes", json={"count": 0}).status_code == 422


def test_build_capped_at_max_nodes(client):
    response = client.post("/api/graph", json={"target_count": MAX_NODES + 1})
    assert response.status_code == 422
    assert client.get("/api/graph").json()["n_nodes"] == 36


def test_growth_capped_at_max_nodes(client, monkeypatch):
    monkeypatch.setattr(api_main, "MAX_NODES", 40)
    assert client.post("/api/graph/nodes", json={"count": 4}).status_code == 200
    response = client.post("/api/graph/nodes", json={"count": 1})
    assert response.status_code == 422
    assert client.get("/api/graph").json()["n_nodes"] == 40


def test_remove_at_floor_is_ignored(client):
    client.post("/api/graph", json={"target_count": 2})
    assert client.delete("/api/graph/nodes/1").json()["n_nodes"] == 2


def test_nearest(client):
    assert client.get("/api/nearest", params={"x": 0, "y": 5, "z": 0}).json()["label"] == 1


def test_figure(client):
    data = client.get("/api/figure").json()
    assert "data" in data and "layout" in data
