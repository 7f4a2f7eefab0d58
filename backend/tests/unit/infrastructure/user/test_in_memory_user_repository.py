"""Unit tests for InMemoryUserRepository."""

import pytest
from bson import ObjectId

from domain.shared.errors import RepositoryError
from infrastructure.user.in_memory_user_repository import InMemoryUserRepository


@pytest.fixture
def repository():
    return InMemoryUserRepository()


@pytest.mark.asyncio
async def test_empty(repository):
    assert await repository.list_all() == []
    assert repository.count() == 0


@pytest.mark.asyncio
async def test_create_assigns_object_id(repository):
    user = await repository.create({"name": "Ada"})

    assert ObjectId.is_valid(user["_id"])
    assert user["name"] == "Ada"
    assert await repository.list_all() == [user]


@pytest.mark.asyncio
async def test_create_stores_a_copy(repository):
    body = {"name": "Ada", "tags": ["a"]}
    await repository.create(body)
    body["tags"].append("b")

    stored = await repository.list_all()
    assert stored[0]["tags"] == ["a"]
    assert "_id" not in body


@pytest.mark.asyncio
async def test_ids_are_distinct(repository):
    first = await repository.create({})
    second = await repository.create({})
    assert first["_id"] != second["_id"]


@pytest.mark.asyncio
async def test_duplicate_client_id_fails(repository):
    await repository.create({"_id": "ada"})
    with pytest.raises(RepositoryError):
        await repository.create({"_id": "ada"})
    assert repository.count() == 1


@pytest.mark.asyncio
async def test_clear(repository):
    await repository.create({"name": "Ada"})
    repository.clear()
    assert await repository.list_all() == []
