import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.db import get_session, seed_default_rosters
from app.main import app
from team_picker.board import ActivityBoard
from team_picker.rosters import DEFAULT_ACTIVITIES


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        seed_default_rosters(session)
    yield engine


@pytest.fixture(name="client")
def client_fixture(engine):
    def _get_test_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_test_session
    previous_board = app.state.board
    app.state.board = ActivityBoard(DEFAULT_ACTIVITIES)
    with TestClient(app) as client:
        yield client
    app.state.board = previous_board
    app.dependency_overrides.pop(get_session, None)


def test_list_activities_starts_empty(client: TestClient):
    data = client.get("/api/activities").json()
    names = [item["name"] for item in data["items"]]
    assert names == ["general", "chess", "carrom", "badminton", "cricket", "speaker"]
    assert all(item["generation"] == 0 for item in data["items"])
    assert all(item["matches"] is None and item["groups"] is None for item in data["items"])


def test_generate_chess_then_switch_mode(client: TestClient):
    resp = client.post("/api/activities/chess/generate", json={"seed": 1})
    assert resp.status_code == 200
    data = resp.json()
    assert data["committed"] is True
    assert data["activity"]["generation"] == 1
    assert len(data["activity"]["matches"]["matches"]) == 3

    switched = client.put("/api/activities/chess/mode", json={"mode": "2v2"}).json()
    assert switched["mode"] == "2v2"
    assert switched["matches"] is None

    regenerated = client.post("/api/activities/chess/generate", json={}).json()["activity"]
    assert regenerated["matches"]["mode"] == "2v2"
    assert len(regenerated["matches"]["matches"]) == 1
    assert len(regenerated["matches"]["leftover"]) == 3


def test_same_mode_keeps_matches(client: TestClient):
    client.post("/api/activities/carrom/generate", json={"seed": 2})
    before = client.get("/api/activities/carrom").json()
    after = client.put("/api/activities/carrom/mode", json={"mode": "2v2"}).json()
    assert after["matches"] == before["matches"]


def test_mode_rules(client: TestClient):
    assert client.put("/api/activities/general/mode", json={"mode": "1v1"}).status_code == 400
    assert client.put("/api/activities/chess/mode", json={"mode": "3v3"}).status_code == 422
    assert client.put("/api/activities/darts/mode", json={"mode": "1v1"}).status_code == 404
    assert client.post("/api/activities/darts/generate", json={}).status_code == 404


def test_general_groups_and_failed_regeneration(client: TestClient):
    first = client.post("/api/activities/general/generate", json={"group_size": 5, "seed": 3}).json()
    groups = first["activity"]["groups"]
    assert len(groups["groups"]) == 3
    assert len(groups["leftover"]) == 3

    bad = client.post("/api/activities/general/generate", json={"group_size": 1})
    assert bad.status_code == 400

    current = client.get("/api/activities/general").json()
    assert current["groups"] == groups
    assert current["generation"] == 1


def test_general_uses_default_group_size(client: TestClient):
    data = client.post("/api/activities/general/generate", json={}).json()["activity"]
    assert all(len(group) == 2 for group in data["groups"]["groups"])
    assert data["groups"]["leftover"] == []


def test_cricket_and_speaker(client: TestClient):
    cricket = client.post("/api/activities/cricket/generate", json={"seed": 6}).json()["activity"]
    assert len(cricket["teams"]["team1"]) == 6
    assert cricket["teams"]["contributions"]["bowlers"] == [2, 2]

    speaker = client.post("/api/activities/speaker/generate", json={"seed": 6, "exclude": ["Aarav Mehta"]}).json()
    pick = speaker["activity"]["speaker"]
    assert pick["speaker"] != "Aarav Mehta"
    assert pick["eligible"] == 17
