"""Unit tests for user repository factory."""

from unittest.mock import MagicMock

import pytest

from infrastructure.user.in_memory_user_repository import InMemoryUserRepository
from infrastructure.user.mongo_user_repository import MongoUserRepository
from infrastructure.user.repository_factory import create_user_repository


def test_default_is_mongodb(monkeypatch):
    monkeypatch.delenv("USER_REPOSITORY", raising=False)
    db = MagicMock()

    repository = create_user_repository(db)

    assert isinstance(repository, MongoUserRepository)
    db.__getitem__.assert_called_once_with("users")


def test_mongodb_without_database(monkeypatch):
    monkeypatch.setenv("USER_REPOSITORY", "mongodb")
    repository = create_user_repository(None)
    assert isinstance(repository, MongoUserRepository)


def test_inmemory(monkeypatch):
    monkeypatch.setenv("USER_REPOSITORY", "inmemory")
    assert isinstance(create_user_repository(), InMemoryUserRepository)


def test_invalid_value(monkeypatch):
    monkeypatch.setenv("USER_REPOSITORY", "redis")
    with pytest.raises(ValueError, match="Invalid USER_REPOSITORY value: redis"):
        create_user_repository()
