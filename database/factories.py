"""
Synthetic data factories.

build_* functions only synthesize input models (nothing is persisted);
*_factory functions insert one record through the client and return what
the store confirmed, including the id it assigned. Factories never catch,
validate beyond the input models, or retry: failures reach the caller.
"""

import uuid
from collections.abc import Awaitable, Callable
from typing import TypeVar

from faker import Faker

from database.client import DataClient
from database.records import (
    CategoryCreate,
    CategoryRecord,
    PostCreate,
    PostRecord,
    UserCreate,
    UserRecord,
)
from shared.config import get_settings

T = TypeVar("T")

_settings = get_settings()
fake = Faker(_settings.FAKER_LOCALE)
if _settings.FAKER_SEED is not None:
    fake.seed_instance(_settings.FAKER_SEED)


def set_faker_seed(seed: int) -> None:
    """Make subsequent synthetic values reproducible."""
    fake.seed_instance(seed)


def build_user(**overrides) -> UserCreate:
    """Synthesize a user with a random full name and email."""
    data = {
        "name": fake.name(),
        "email": fake.email(),
    }
    data.update(overrides)
    return UserCreate(**data)


def build_category(**overrides) -> CategoryCreate:
    """Synthesize a category named after a single random word."""
    data = {"name": fake.word()}
    data.update(overrides)
    return CategoryCreate(**data)


def build_post(author_id: uuid.UUID, category_id: uuid.UUID, **overrides) -> PostCreate:
    """Synthesize a post for an existing author and category."""
    data = {
        "title": fake.sentence(nb_words=6).rstrip("."),
        "content": fake.paragraph(nb_sentences=4),
        "author_id": author_id,
        "category_id": category_id,
    }
    data.update(overrides)
    return PostCreate(**data)


async def category_factory(client: DataClient) -> CategoryRecord:
    """Insert one synthetic category and return the stored record."""
    return await client.category.insert(build_category())


async def user_factory(client: DataClient, **overrides) -> UserRecord:
    """Insert one synthetic user and return the stored record."""
    return await client.user.insert(build_user(**overrides))


async def post_factory(
    client: DataClient,
    *,
    author: UserRecord | None = None,
    category: CategoryRecord | None = None,
    **overrides,
) -> PostRecord:
    """
    Insert one synthetic post and return the stored record.

    Missing parents are created first through the user/category factories.
    """
    if author is None:
        author = await user_factory(client)
    if category is None:
        category = await category_factory(client)
    return await client.post.insert(build_post(author.id, category.id, **overrides))


async def create_batch(
    factory: Callable[[DataClient], Awaitable[T]],
    client: DataClient,
    size: int,
) -> list[T]:
    """Call a factory `size` times, awaiting each call before the next."""
    created: list[T] = []
    for _ in range(size):
        created.append(await factory(client))
    return created
