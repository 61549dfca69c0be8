import pytest
from fastapi.testclient import TestClient

from app.api.routes import get_entity_source
from app.main import app


@pytest.fixture(name="client")
def client_fixture(dex):
    app.dependency_overrides[get_entity_source] = lambda: dex
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.pop(get_entity_source, None)


def test_health(client: TestClient):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_generate_team(client: TestClient):
    resp = client.post(
        "/api/generate",
        json={
            "quantity": 4,
            "types": ["water"],
            "show_stats": True,
            "show_natures": True,
            "show_genders": True,
            "generate_moves": True,
            "generate_ability": True,
            "eviv_mode": "competitive",
            "seed": 11,
        },
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["generated"] == 4
    assert data["requested"] == 4
    assert data["state"] == "quota_met"
    assert data["status"] == f"Generated 4/4 (attempts {data['attempts']})"
    for member in data["roster"]:
        assert "water" in member["types"]
        assert member["ivs"] == [31, 31, 31, 31, 31, 31]
        assert member["gender"] == "50% Female"
        assert member["display_name"] == member["name"].capitalize()
        assert member["lines"]


def test_generate_unparseable_quantity_defaults_to_three(client: TestClient):
    resp = client.post("/api/generate", json={"quantity": "lots", "seed": 1})
    assert resp.status_code == 200
    assert resp.json()["requested"] == 3


def test_generate_rejects_unknown_eviv_mode(client: TestClient):
    resp = client.post("/api/generate", json={"eviv_mode": "max"})
    assert resp.status_code == 422


def test_generate_then_export(client: TestClient):
    options = {"quantity": 2, "show_stats": True, "generate_moves": True, "seed": 5}
    generated = client.post("/api/generate", json=options).json()

    resp = client.post("/api/export", json={"roster": generated["roster"], "options": options, "seed": 3})
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/plain")
    assert 'filename="team-showdown.txt"' in resp.headers["content-disposition"]
    blocks = resp.text.rstrip("\n").split("\n\n")
    assert len(blocks) == 2
    assert "Level: 63" in blocks[0]

    again = client.post("/api/export", json={"roster": generated["roster"], "options": options, "seed": 3})
    assert again.text == resp.text


def test_export_empty_roster(client: TestClient):
    resp = client.post("/api/export", json={"roster": []})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Generate a team first"


def test_options(client: TestClient):
    resp = client.get("/api/options")
    assert resp.status_code == 200
    data = resp.json()
    assert "kanto" in data["regions"]
    assert len(data["natures"]) == 25
    assert data["max_quantity"] == 6


def test_generate_rejects_unknown_stage(client: TestClient):
    resp = client.post("/api/generate", json={"stages": ["unevloved"]})
    assert resp.status_code == 422


def test_generate_with_every_stage_skips_chain_lookups(client: TestClient, dex):
    resp = client.post(
        "/api/generate",
        json={"quantity": 3, "stages": ["unevolved", "evolvedOnce", "evolvedTwice"], "seed": 2},
    )
    assert resp.status_code == 200
    assert resp.json()["generated"] == 3
    assert dex.tree_calls == []
