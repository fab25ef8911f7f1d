"""
Blog data User Seeder.

Inserts a fixed number of synthetic users, one at a time. The first failed
insertion is logged and ends the run; no later iteration executes.
"""

import logging
from dataclasses import dataclass, field

from database.client import DataClient
from database.factories import build_user
from database.records import UserRecord
from database.seeds.seeders.base import BaseSeeder

logger = logging.getLogger(__name__)

DEFAULT_USER_COUNT = 10


@dataclass
class SeedResult:
    """What a seeding run did."""

    requested: int
    created: list[UserRecord] = field(default_factory=list)
    error: Exception | None = None
    log_ref: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class UserSeeder(BaseSeeder):
    """Seeder for synthetic users."""

    def __init__(self, client: DataClient, count: int = DEFAULT_USER_COUNT):
        super().__init__(client)
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        self.count = count

    async def seed(self) -> SeedResult:
        """
        Insert `count` synthetic users sequentially.

        Returns:
            SeedResult with the created records, and the error that stopped
            the loop if an insertion failed
        """
        logger.info(f"Seeding {self.count} users")
        self.reset_stats()
        result = SeedResult(requested=self.count)

        try:
            for _ in range(self.count):
                record = await self.client.user.insert(build_user())
                result.created.append(record)
                self.log_created("User", record.email)
        except Exception as e:
            result.error = e
            result.log_ref = self.log_failed("User", e, iteration=len(result.created))

        self.log_summary("Users")
        return result
