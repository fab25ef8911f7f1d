"""
Blog data - Database Seed Scripts.

- seeders/: Reusable seeding logic
- run_seed.py: Top-level runner and CLI

Run the seed:
    python -m database.seeds.run_seed
"""

from database.seeds.run_seed import SeedOutcome, run_seed

__all__ = [
    "SeedOutcome",
    "run_seed",
]
