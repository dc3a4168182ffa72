"""
HTTP tests for the board API using FastAPI's TestClient.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient

from pictocomm.config import settings
from pictocomm.core.repositories.implementations.memory.pictogram_repository import (
    InMemoryPictogramRepository,
)
from pictocomm.core.repositories.implementations.memory.sentence_repository import (
    InMemorySentenceRepository,
)
from pictocomm.core.services.session_service import SessionService
from pictocomm.dependencies import (
    get_favorite_policy,
    get_pictogram_repository,
    get_sentence_repository,
    get_session_service,
)
from pictocomm.main import app

API = settings.api_prefix


@pytest.fixture
def pictogram_repo(demo_catalog):
    return InMemoryPictogramRepository(demo_catalog)


@pytest.fixture
def client(pictogram_repo):
    sessions = SessionService(pictogram_repo, page_size=20, max_sessions=5)
    sentence_repo = InMemorySentenceRepository()
    app.dependency_overrides[get_pictogram_repository] = lambda: pictogram_repo
    app.dependency_overrides[get_session_service] = lambda: sessions
    app.dependency_overrides[get_sentence_repository] = lambda: sentence_repo
    app.dependency_overrides[get_favorite_policy] = lambda: False
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def session_id(client):
    response = client.post(f"{API}/sessions/")
    assert response.status_code == 201
    return response.json()["session_id"]


def tap(client, session_id, pictogram_id):
    return client.post(f"{API}/sessions/{session_id}/tap", json={"pictogram_id": pictogram_id})


class TestHealthAndMetadata:
    def test_health(self, client):
        response = client.get(f"{API}/health/")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.headers["X-Content-Type-Options"] == "nosniff"

    def test_ready_reports_catalog(self, client):
        body = client.get(f"{API}/health/ready").json()
        assert body["catalog_size"] == 51
        assert body["pictogram_store"] == "connected"

    def test_categories_in_selector_order(self, client):
        body = client.get(f"{API}/metadata/categories").json()
        assert [c["value"] for c in body] == ["person", "action", "thing", "quality", "place", "time"]
        assert body[0]["color"] == "#4CAF50"


class TestSessionFlow:
    def test_new_session_snapshot(self, client, session_id):
        body = client.get(f"{API}/sessions/{session_id}").json()

        assert body["display_text"] == ""
        assert body["can_play"] is False
        assert body["active_filter"] == {"kind": "most_used", "category": None}
        assert len(body["available_pictograms"]) == 20
        assert len(body["catalog"]) == 51

    def test_tap_sequence_drives_suggestions(self, client, session_id):
        assert tap(client, session_id, "1").json()["active_filter"]["category"] == "action"
        assert tap(client, session_id, "9").json()["active_filter"]["category"] == "thing"
        body = tap(client, session_id, "21").json()

        assert body["active_filter"]["category"] == "time"
        assert body["display_text"] == "Yo Quiero Helado"
        assert body["can_save"] is True

    def test_remove_and_clear(self, client, session_id):
        tap(client, session_id, "1")
        tap(client, session_id, "9")

        body = client.post(f"{API}/sessions/{session_id}/remove", json={"index": 7}).json()
        assert body["display_text"] == "Yo Quiero"

        body = client.post(f"{API}/sessions/{session_id}/remove", json={"index": 0}).json()
        assert body["display_text"] == "Quiero"

        body = client.post(f"{API}/sessions/{session_id}/clear").json()
        assert body["display_text"] == ""
        assert body["active_filter"]["kind"] == "most_used"

    def test_category_and_favorites(self, client, session_id):
        body = client.post(f"{API}/sessions/{session_id}/category", json={"category": "place"}).json()
        assert {p["category"] for p in body["available_pictograms"]} == {"place"}

        body = client.post(f"{API}/sessions/{session_id}/favorites").json()
        assert body["active_filter"] == {"kind": "favorites", "category": None}
        assert body["available_pictograms"] == []

    def test_invalid_category_rejected(self, client, session_id):
        response = client.post(f"{API}/sessions/{session_id}/category", json={"category": "animals"})
        assert response.status_code == 422

    def test_long_press_without_persistence(self, client, session_id, pictogram_repo):
        response = client.post(f"{API}/sessions/{session_id}/long-press", json={"pictogram_id": "22"})

        body = response.json()
        assert body["favorite"] is True
        assert body["persisted"] is False
        assert [p["id"] for p in body["session"]["catalog"] if p["favorite"]] == ["22"]

    def test_long_press_with_persistence(self, client, session_id, pictogram_repo):
        app.dependency_overrides[get_favorite_policy] = lambda: True

        response = client.post(f"{API}/sessions/{session_id}/long-press", json={"pictogram_id": "22"})

        assert response.json()["persisted"] is True
        stored = asyncio.run(pictogram_repo.get("22"))
        assert stored.favorite is True

    def test_unknown_session_and_pictogram(self, client, session_id):
        assert tap(client, "missing", "1").status_code == 404
        assert tap(client, session_id, "404").status_code == 404

    def test_delete_session(self, client, session_id):
        assert client.delete(f"{API}/sessions/{session_id}").status_code == 204
        assert client.get(f"{API}/sessions/{session_id}").status_code == 404
        assert client.delete(f"{API}/sessions/{session_id}").status_code == 404

    def test_session_limit(self, client):
        for _ in range(5):
            assert client.post(f"{API}/sessions/").status_code == 201
        assert client.post(f"{API}/sessions/").status_code == 429


class TestSentences:
    def test_save_single_token_is_rejected(self, client, session_id):
        tap(client, session_id, "1")

        response = client.post(f"{API}/sentences/", json={"session_id": session_id})

        assert response.status_code == 422

    def test_save_clears_board_and_counts_usage(self, client, session_id, pictogram_repo):
        for pictogram_id in ["1", "13", "40"]:
            tap(client, session_id, pictogram_id)

        response = client.post(f"{API}/sentences/", json={"session_id": session_id})

        assert response.status_code == 201
        saved = response.json()
        assert saved["text"] == "Yo Voy Casa"
        assert saved["pictogram_ids"] == ["1", "13", "40"]
        assert client.get(f"{API}/sessions/{session_id}").json()["display_text"] == ""

        casa = asyncio.run(pictogram_repo.get("40"))
        assert casa.usage_count == 1

    def test_history_search_reuse_delete(self, client, session_id):
        tap(client, session_id, "1")
        tap(client, session_id, "14")
        saved = client.post(f"{API}/sentences/", json={"session_id": session_id}).json()

        recent = client.get(f"{API}/sentences/recent").json()
        assert [s["id"] for s in recent] == [saved["id"]]

        found = client.get(f"{API}/sentences/search", params={"q": "comer"}).json()
        assert [s["text"] for s in found] == ["Yo Comer"]

        board = client.post(f"{API}/sentences/{saved['id']}/reuse", json={"session_id": session_id}).json()
        assert board["display_text"] == "Yo Comer"

        most_used = client.get(f"{API}/sentences/most-used").json()
        assert most_used[0]["times_used"] == 1

        assert client.delete(f"{API}/sentences/{saved['id']}").status_code == 204
        assert client.delete(f"{API}/sentences/{saved['id']}").status_code == 404


class TestPictograms:
    def _create(self, client, **fields):
        payload = {"text": "Mi perro", "category": "thing", "creator_id": "child-1", **fields}
        return client.post(f"{API}/pictograms/", json=payload)

    def test_child_pictogram_goes_through_approval(self, client, session_id):
        response = self._create(client)
        assert response.status_code == 201
        created = response.json()
        assert created["approved"] is False

        pending = client.get(f"{API}/pictograms/pending").json()
        assert [p["id"] for p in pending] == [created["id"]]

        approved = client.post(f"{API}/pictograms/{created['id']}/approve").json()
        assert approved["approved"] is True
        assert client.get(f"{API}/pictograms/pending").json() == []

        board = client.post(f"{API}/sessions/{session_id}/refresh").json()
        assert created["id"] in [p["id"] for p in board["catalog"]]

    def test_parent_pictogram_is_listed_at_once(self, client):
        created = self._create(client, text="Abuela", category="person", created_by_parent=True).json()

        catalog = client.get(f"{API}/pictograms/").json()

        assert created["approved"] is True
        assert created["id"] in [p["id"] for p in catalog]
        assert len(catalog) == 52

    def test_reject_pending(self, client):
        created = self._create(client).json()

        assert client.delete(f"{API}/pictograms/{created['id']}").status_code == 204
        assert client.delete(f"{API}/pictograms/{created['id']}").status_code == 404
        assert client.get(f"{API}/pictograms/pending").json() == []

    def test_system_pictogram_cannot_be_rejected(self, client):
        assert client.delete(f"{API}/pictograms/1").status_code == 409

    def test_approve_unknown(self, client):
        assert client.post(f"{API}/pictograms/missing/approve").status_code == 404

    def test_blank_text_rejected(self, client):
        assert self._create(client, text="   ").status_code == 422
