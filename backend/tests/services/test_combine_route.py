"""Combine Route — end-to-end tests over HTTP with SQLite and a fake model.

Tests cover:
    - New pair returns 200, discovered=true, and stores one row
    - Repeat (either order) returns discovered=false with no model call
    - Two pairs resolving to the same label share one row
    - Fallback on unparsable output
    - Missing parameter -> 400 {"message": "Bad Request"}
    - Word that grows past the column width when lower-cased -> 400
    - Storage failure through the real get_db -> 500 DATABASE_ERROR
    - Unexpected failure -> 500 {"message": "Internal Server Error"}
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from app.api.routes.combine import get_text_generator
from app.infrastructure.database import get_db
from app.infrastructure.element_repository import SqlElementRepository
from app.main import app
from app.models.element import Element
from app.services.combine_elements import CombinationService
from tests.services.fake_ollama import FakeGenerator


async def _row_count(test_db) -> int:
    result = await test_db.execute(select(func.count(Element.id)))
    return result.scalar_one()


@pytest.mark.asyncio
async def test_new_pair_is_discovered(client, test_db, fake_generator):
    response = await client.get(
        "/api/v1/combine", params={"word1": "Monet", "word2": "wasser"},
    )
    assert response.status_code == 200
    assert response.json() == {
        "message": "New element created",
        "element": {"emoji": "🌊", "text": "wasserlandschaft", "discovered": True},
    }
    assert fake_generator.calls == 1

    row = (await test_db.execute(select(Element))).scalar_one()
    assert (row.word1, row.word2, row.text) == ("monet", "wasser", "wasserlandschaft")


@pytest.mark.asyncio
async def test_repeat_request_is_cache_hit(client, test_db, fake_generator):
    await client.get("/api/v1/combine", params={"word1": "Monet", "word2": "wasser"})
    response = await client.get(
        "/api/v1/combine", params={"word1": "Wasser", "word2": "MONET"},
    )
    body = response.json()
    assert response.status_code == 200
    assert body["message"] == "Element already exists"
    assert body["element"] == {
        "emoji": "🌊", "text": "wasserlandschaft", "discovered": False,
    }
    assert fake_generator.calls == 1
    assert await _row_count(test_db) == 1


@pytest.mark.asyncio
async def test_label_shared_between_pairs(client, test_db, fake_generator):
    await client.get("/api/v1/combine", params={"word1": "monet", "word2": "wasser"})
    response = await client.get(
        "/api/v1/combine", params={"word1": "sisley", "word2": "fluss"},
    )
    body = response.json()
    assert body["message"] == "Text already exists"
    assert body["element"]["discovered"] is False
    assert await _row_count(test_db) == 1


@pytest.mark.asyncio
async def test_unparsable_output_uses_fallback(client):
    generator = FakeGenerator("Das ist ein schönes Konzept über Kunst.")
    app.dependency_overrides[get_text_generator] = lambda: generator

    response = await client.get(
        "/api/v1/combine", params={"word1": "Pinselstrich", "word2": "Seerosenteich"},
    )
    body = response.json()
    assert response.status_code == 200
    assert body["message"] == "Element created with fallback"
    assert body["element"] == {
        "emoji": "✨", "text": "lichtstimmung", "discovered": True,
    }
    assert generator.calls == 3


@pytest.mark.asyncio
@pytest.mark.parametrize("params", [
    {"word1": "monet"},
    {"word2": "wasser"},
    {"word1": "", "word2": "wasser"},
    {},
])
async def test_missing_parameters_return_400(client, test_db, fake_generator, params):
    response = await client.get("/api/v1/combine", params=params)
    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Bad Request"
    assert body["error"]["code"] == "MISSING_PARAMETERS"
    assert fake_generator.calls == 0
    assert await _row_count(test_db) == 0


@pytest.mark.asyncio
async def test_overlong_word_rejected_as_bad_request(client):
    response = await client.get(
        "/api/v1/combine", params={"word1": "a" * 101, "word2": "wasser"},
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_unexpected_failure_returns_500(client, monkeypatch):
    async def explode(self, first, second):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(CombinationService, "combine", explode)
    response = await client.get(
        "/api/v1/combine", params={"word1": "monet", "word2": "wasser"},
    )
    assert response.status_code == 500
    body = response.json()
    assert body["message"] == "Internal Server Error"
    assert "disk on fire" not in response.text


@pytest.mark.asyncio
async def test_word_longer_after_lowercasing_rejected(client, test_db, fake_generator):
    # "İ" lower-cases to two code points, so 100 of them become 200
    response = await client.get(
        "/api/v1/combine", params={"word1": "İ" * 100, "word2": "wasser"},
    )
    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Bad Request"
    assert body["error"]["code"] == "WORD_TOO_LONG"
    assert fake_generator.calls == 0
    assert await _row_count(test_db) == 0


@pytest.mark.asyncio
async def test_storage_failure_returns_database_error(client, test_db, monkeypatch):
    # Use the real get_db so the session manager maps the failure
    app.dependency_overrides.pop(get_db)

    async def unreachable(self, record):
        raise OperationalError(
            "INSERT INTO elements", {}, Exception("connection lost"),
        )

    monkeypatch.setattr(SqlElementRepository, "create", unreachable)
    response = await client.get(
        "/api/v1/combine", params={"word1": "monet", "word2": "wasser"},
    )
    assert response.status_code == 500
    body = response.json()
    assert body["message"] == "Internal Server Error"
    assert body["error"]["code"] == "DATABASE_ERROR"
    assert "connection lost" not in response.text
    assert await _row_count(test_db) == 0
