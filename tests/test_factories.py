"""Tests for the synthetic data builders and factories."""

import uuid

import pytest
from pydantic import ValidationError

from database.factories import (
    build_category,
    build_post,
    build_user,
    category_factory,
    create_batch,
    post_factory,
    set_faker_seed,
    user_factory,
)
from database.records import CategoryRecord, UserCreate


class TestBuilders:
    """Builders synthesize valid input models without touching the store."""

    def test_build_user_has_name_and_email(self):
        user = build_user()

        assert isinstance(user, UserCreate)
        assert user.name
        assert "@" in user.email

    def test_build_user_overrides(self):
        user = build_user(name="Ada Lovelace")

        assert user.name == "Ada Lovelace"

    def test_build_user_rejects_invalid_override(self):
        with pytest.raises(ValidationError):
            build_user(email="not-an-email")

    def test_build_category_single_word(self):
        category = build_category()

        assert category.name
        assert " " not in category.name

    def test_build_post_references_parents(self):
        author_id, category_id = uuid.uuid4(), uuid.uuid4()

        post = build_post(author_id, category_id, title="Hello")

        assert post.title == "Hello"
        assert post.author_id == author_id
        assert post.category_id == category_id

    def test_seed_makes_values_reproducible(self, restore_faker_state):
        set_faker_seed(42)
        first = [build_user() for _ in range(3)]
        set_faker_seed(42)
        second = [build_user() for _ in range(3)]

        assert first == second


class TestCategoryFactory:
    """category_factory persists one category per call."""

    async def test_returns_stored_record(self, data_client):
        category = await category_factory(data_client)

        assert isinstance(category, CategoryRecord)
        assert await data_client.category.find_one(category.id) == category

    async def test_distinct_ids_across_calls(self, data_client):
        categories = [await category_factory(data_client) for _ in range(5)]

        assert len({c.id for c in categories}) == 5
        assert await data_client.category.count() == 5

    async def test_propagates_store_failure(self, data_client, monkeypatch):
        class Boom(Exception):
            pass

        async def failing_insert(data):
            raise Boom("store down")

        monkeypatch.setattr(data_client.category, "insert", failing_insert)

        with pytest.raises(Boom):
            await category_factory(data_client)


class TestOtherFactories:
    """User and post factories."""

    async def test_user_factory_overrides(self, data_client):
        user = await user_factory(data_client, email="fixed@example.com")

        assert user.email == "fixed@example.com"

    async def test_post_factory_creates_missing_parents(self, data_client):
        post = await post_factory(data_client)

        assert await data_client.user.find_one(post.author_id) is not None
        assert await data_client.category.find_one(post.category_id) is not None

    async def test_post_factory_uses_given_parents(self, data_client):
        author = await user_factory(data_client)
        category = await category_factory(data_client)

        post = await post_factory(data_client, author=author, category=category)

        assert post.author_id == author.id
        assert post.category_id == category.id
        assert await data_client.user.count() == 1
        assert await data_client.category.count() == 1


class TestCreateBatch:
    """create_batch runs a factory sequentially."""

    async def test_creates_requested_number(self, data_client):
        categories = await create_batch(category_factory, data_client, 5)

        assert len(categories) == 5
        assert len({c.id for c in categories}) == 5

    async def test_calls_are_sequential(self, data_client):
        events = []

        async def tracking_factory(client):
            events.append("start")
            record = await category_factory(client)
            events.append("end")
            return record

        await create_batch(tracking_factory, data_client, 3)

        assert events == ["start", "end"] * 3

    async def test_zero_size(self, data_client):
        assert await create_batch(category_factory, data_client, 0) == []

    async def test_stops_at_first_failure(self, data_client):
        calls = 0

        async def flaky_factory(client):
            nonlocal calls
            calls += 1
            if calls == 2:
                raise RuntimeError("insert failed")
            return await category_factory(client)

        with pytest.raises(RuntimeError):
            await create_batch(flaky_factory, data_client, 5)

        assert calls == 2
        assert await data_client.category.count() == 1
