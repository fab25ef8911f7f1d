"""
Blog data Seeders Module.

Reusable seeding logic.
"""

from database.seeds.seeders.base import BaseSeeder
from database.seeds.seeders.user import DEFAULT_USER_COUNT, SeedResult, UserSeeder

__all__ = [
    "BaseSeeder",
    "DEFAULT_USER_COUNT",
    "SeedResult",
    "UserSeeder",
]
