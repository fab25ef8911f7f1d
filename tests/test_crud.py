"""
CRUD tests against the data-access client.

Each test builds whatever data it needs inline or through the factories;
no test depends on another having run first.

Run with: pytest tests/test_crud.py
"""

from database.factories import category_factory
from database.records import UserCreate
from database.seeds.seeders import UserSeeder


# =============================================================================
# CREATE
# =============================================================================

async def test_create_user(data_client, fake):
    """A created user can be fetched back unchanged by its id."""
    user_data = UserCreate(name=fake.name(), email=fake.email())

    created_user = await data_client.user.insert(user_data)

    found_user = await data_client.user.find_one(created_user.id)

    assert created_user == found_user


# =============================================================================
# READ
# =============================================================================

async def test_get_all_users(data_client):
    """Fetching all users returns the seeded ones."""
    await UserSeeder(data_client).seed()

    users = await data_client.user.find_all()

    assert len(users) > 0


# =============================================================================
# UPDATE
# =============================================================================

async def test_update_user_information(data_client, fake):
    """Creating a user keeps the given name and email."""
    user_data = UserCreate(email=fake.email(), name=fake.name())

    created_user = await data_client.user.insert(user_data)

    assert created_user.email == user_data.email
    assert created_user.name == user_data.name


# =============================================================================
# DELETE
# =============================================================================

async def test_delete_user(data_client, fake):
    """A deleted user is no longer found (None, not an error)."""
    user_data = UserCreate(email=fake.email(), name=fake.name())
    created_user = await data_client.user.insert(user_data)

    await data_client.user.delete(created_user.id)

    found_user = await data_client.user.find_one(created_user.id)

    assert found_user is None


# =============================================================================
# FACTORY
# =============================================================================

async def test_factory_generates_five_categories(data_client):
    """Calling the category factory five times yields five records."""
    number_of_categories = 5
    created_categories = []

    for _ in range(number_of_categories):
        created_categories.append(await category_factory(data_client))

    assert len(created_categories) == number_of_categories


# =============================================================================
# WORKED EXAMPLE
# =============================================================================

async def test_ada_lovelace_lifecycle(data_client):
    """Insert, list, delete and look up a known user."""
    created = await data_client.user.insert(
        UserCreate(name="Ada Lovelace", email="ada@example.com")
    )

    assert created.id
    assert created.name == "Ada Lovelace"
    assert created.email == "ada@example.com"

    assert len(await data_client.user.find_all()) >= 1

    await data_client.user.delete(created.id)
    assert await data_client.user.find_one(created.id) is None
