"""Testes dos endpoints CRUD de cards."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime
from unittest.mock import AsyncMock, patch

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from app.app import create_app
from app.domain.card import build_card_patch
from app.infra.stores.memory_stores import MemoryCardStore
from tests.fakes.fake_inference_client import FakeInferenceClient
from utils.errors import StoreUnavailableError


@pytest.fixture
def store() -> MemoryCardStore:
    return MemoryCardStore()


@pytest.fixture
def client(store: MemoryCardStore) -> Iterator[TestClient]:
    app = create_app(card_store=store, inference_client=FakeInferenceClient())
    with TestClient(app) as test_client:
        yield test_client


class TestListCards:
    """GET /api/cards."""

    def test_empty_list(self, client: TestClient) -> None:
        response = client.get("/api/cards")
        assert response.status_code == 200
        assert response.json() == {"cards": []}

    def test_newest_first(self, client: TestClient) -> None:
        first = client.post("/api/cards", json={"name": "Ana", "company": "Acme"}).json()
        second = client.post("/api/cards", json={"name": "Bruno", "company": "Beta"}).json()

        cards = client.get("/api/cards").json()["cards"]

        assert [card["id"] for card in cards] == [second["id"], first["id"]]

    def test_store_failure_returns_500(self, store: MemoryCardStore, client: TestClient) -> None:
        store.list_cards = AsyncMock(  # type: ignore[method-assign]
            side_effect=StoreUnavailableError("Falha ao buscar dados do banco.")
        )

        response = client.get("/api/cards")

        assert response.status_code == 500
        assert response.json() == {"error": "Falha ao buscar dados do banco."}


class TestCreateCard:
    """POST /api/cards."""

    def test_create_returns_201_with_id(self, client: TestClient) -> None:
        response = client.post(
            "/api/cards",
            json={"name": "Ana", "company": "Acme", "jobTitle": "CTO", "notes": "expo"},
        )

        assert response.status_code == 201
        body = response.json()
        assert ObjectId.is_valid(body["id"])
        assert body["name"] == "Ana"
        assert body["jobTitle"] == "CTO"
        assert body["notes"] == "expo"
        assert body["creationTimestamp"].endswith("Z")

    @pytest.mark.parametrize(
        "payload",
        [{"company": "Acme"}, {"name": "Ana"}, {"name": "", "company": "Acme"}],
    )
    def test_missing_required_fields(self, client: TestClient, payload: dict[str, str]) -> None:
        response = client.post("/api/cards", json=payload)

        assert response.status_code == 400
        assert response.json() == {"error": "Nome e empresa não podem ser vazios."}

    def test_non_object_body(self, client: TestClient) -> None:
        response = client.post("/api/cards", json=["Ana"])

        assert response.status_code == 400
        assert "error" in response.json()

    def test_client_supplied_id_is_ignored(self, client: TestClient) -> None:
        body = client.post(
            "/api/cards", json={"id": "mine", "name": "Ana", "company": "Acme"}
        ).json()
        assert body["id"] != "mine"

    def test_non_string_optional_fields_are_stored_verbatim(self, client: TestClient) -> None:
        response = client.post(
            "/api/cards", json={"name": "Ana", "company": "Acme", "phoneNumber": 5511999}
        )

        assert response.status_code == 201
        assert response.json()["phoneNumber"] == 5511999
        assert client.get("/api/cards").json()["cards"][0]["phoneNumber"] == 5511999

    def test_non_string_name_counts_as_present(self, client: TestClient) -> None:
        response = client.post("/api/cards", json={"name": 123, "company": "X"})

        assert response.status_code == 201
        assert response.json()["name"] == 123

    def test_creation_timestamp_not_before_request(self, client: TestClient) -> None:
        issued_at = datetime.now(UTC)

        body = client.post("/api/cards", json={"name": "Ana", "company": "Acme"}).json()

        created_at = datetime.fromisoformat(body["creationTimestamp"].replace("Z", "+00:00"))
        assert created_at >= issued_at


class TestUpdateCard:
    """PUT /api/cards/{id}."""

    def test_update_returns_id_and_applied_fields(self, client: TestClient) -> None:
        created = client.post("/api/cards", json={"name": "Ana", "company": "Acme"}).json()

        response = client.put(
            f"/api/cards/{created['id']}",
            json={"id": "other", "email": "ana@acme.com"},
        )

        assert response.status_code == 200
        assert response.json() == {"id": created["id"], "email": "ana@acme.com"}

        stored = client.get("/api/cards").json()["cards"][0]
        assert stored["email"] == "ana@acme.com"
        assert stored["name"] == "Ana"
        assert stored["id"] == created["id"]

    def test_update_unknown_id_returns_404(self, client: TestClient) -> None:
        response = client.put(f"/api/cards/{ObjectId()}", json={"email": "x@y.z"})

        assert response.status_code == 404
        assert response.json() == {"error": "Cartão não encontrado."}

    def test_update_cannot_null_name(self, client: TestClient) -> None:
        created = client.post("/api/cards", json={"name": "Ana", "company": "Acme"}).json()

        response = client.put(f"/api/cards/{created['id']}", json={"name": None})

        assert response.status_code == 400

    def test_update_with_non_string_value(self, client: TestClient) -> None:
        created = client.post("/api/cards", json={"name": "Ana", "company": "Acme"}).json()

        response = client.put(f"/api/cards/{created['id']}", json={"phoneNumber": 5511999})

        assert response.status_code == 200
        assert response.json() == {"id": created["id"], "phoneNumber": 5511999}
        assert client.get("/api/cards").json()["cards"][0]["phoneNumber"] == 5511999

    def test_update_validates_fields_once(self, client: TestClient) -> None:
        created = client.post("/api/cards", json={"name": "Ana", "company": "Acme"}).json()

        with patch(
            "api.routes.cards.router.build_card_patch", wraps=build_card_patch
        ) as build_patch:
            client.put(f"/api/cards/{created['id']}", json={"email": "ana@acme.com"})

        build_patch.assert_called_once_with({"email": "ana@acme.com"})


class TestDeleteCard:
    """DELETE /api/cards/{id}."""

    def test_delete_returns_204(self, client: TestClient) -> None:
        created = client.post("/api/cards", json={"name": "Ana", "company": "Acme"}).json()

        response = client.delete(f"/api/cards/{created['id']}")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get("/api/cards").json() == {"cards": []}

    def test_delete_twice_returns_404(self, client: TestClient) -> None:
        created = client.post("/api/cards", json={"name": "Ana", "company": "Acme"}).json()
        client.delete(f"/api/cards/{created['id']}")

        response = client.delete(f"/api/cards/{created['id']}")

        assert response.status_code == 404
        assert response.json() == {"error": "Cartão não encontrado."}


def test_cors_allows_any_origin(client: TestClient) -> None:
    response = client.options(
        "/api/cards",
        headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "POST"},
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


def test_correlation_id_is_echoed(client: TestClient) -> None:
    response = client.get("/api/cards", headers={"X-Correlation-Id": "req-42"})
    assert response.headers["X-Correlation-Id"] == "req-42"


def test_correlation_id_generated_when_absent(client: TestClient) -> None:
    response = client.get("/api/cards")
    assert response.headers["X-Correlation-Id"]
