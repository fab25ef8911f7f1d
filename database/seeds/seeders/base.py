"""
Blog data Base Seeder.

Provides common functionality for all seeders:
- Uniform logging format
- Statistics tracking
"""

import logging

from database.client import DataClient
from shared.errors import get_error_logger

logger = logging.getLogger(__name__)


class BaseSeeder:
    """
    Base class for all seeders with common functionality.

    Provides:
    - Consistent logging format
    - Statistics tracking (created, failed)
    """

    def __init__(self, client: DataClient):
        """
        Initialize the seeder.

        Args:
            client: The data-access client to insert through
        """
        self.client = client
        self.stats = {
            "created": 0,
            "failed": 0,
        }

    def reset_stats(self) -> None:
        """Reset statistics counters."""
        self.stats = {"created": 0, "failed": 0}

    def log_created(self, entity_type: str, code: str) -> None:
        """Log a created entity."""
        self.stats["created"] += 1
        logger.info(f"  + {entity_type} {code}: Created")

    def log_failed(self, entity_type: str, error: Exception, iteration: int) -> str:
        """Log a failed insertion and return its log reference."""
        self.stats["failed"] += 1
        return get_error_logger().log_error(
            error,
            operation=f"seed.{entity_type.lower()}",
            context={"iteration": iteration},
        )

    def log_summary(self, entity_type: str) -> None:
        """Log a summary of operations."""
        logger.info(
            f"  {entity_type}: {self.stats['created']} created, "
            f"{self.stats['failed']} failed"
        )
