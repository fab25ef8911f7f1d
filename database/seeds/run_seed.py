"""
Blog data - Run the seed.

Inserts SEED_USER_COUNT (default 10) synthetic users into the configured
database, then releases the connection pool.

Run with: python -m database.seeds.run_seed [--count N] [--database-url URL] [--create-tables]

Exit codes:
    0: Seeding ran (an insertion failure inside the loop is logged, not fatal)
    1: An error escaped the seeder (client setup, schema creation, ...)
"""

import argparse
import asyncio
import logging
import sys
from dataclasses import dataclass

from database.client import DataClient, create_data_client
from database.seeds.seeders import SeedResult, UserSeeder
from shared.config import Settings, get_settings
from shared.errors import get_error_logger
from shared.logging_config import configure_logging

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


@dataclass
class SeedOutcome:
    """Result of a top-level seeding run, mapped to a process exit status."""

    exit_code: int
    result: SeedResult | None = None
    error: Exception | None = None
    log_ref: str | None = None

    @property
    def ok(self) -> bool:
        return self.exit_code == EXIT_SUCCESS


async def run_seed(
    settings: Settings | None = None,
    *,
    client: DataClient | None = None,
    count: int | None = None,
    database_url: str | None = None,
    create_tables: bool = False,
) -> SeedOutcome:
    """
    Run the user seeder and always release the client afterwards.

    Args:
        settings: Settings to read (defaults to get_settings())
        client: Client to use instead of building one from settings
        count: Number of users (defaults to SEED_USER_COUNT)
        database_url: Override for DATABASE_URL when building the client
        create_tables: Create the schema before seeding

    Returns:
        SeedOutcome carrying the exit status; this function does not raise
        for failures inside the run
    """
    settings = settings or get_settings()
    count = settings.SEED_USER_COUNT if count is None else count

    logger.info("=" * 70)
    logger.info(f"{settings.PROJECT_NAME} Database Seeding")
    logger.info("=" * 70)

    try:
        if client is None:
            client = create_data_client(settings, url=database_url)
        if create_tables:
            logger.info("Creating tables...")
            await client.create_tables()
        result = await UserSeeder(client, count).seed()
    except Exception as e:
        log_ref = get_error_logger().log_error(e, operation="seed.run")
        logger.error(f"Seeding aborted (ref {log_ref})")
        outcome = SeedOutcome(EXIT_FAILURE, error=e, log_ref=log_ref)
    else:
        if result.ok:
            logger.info(f"Seeding completed: {len(result.created)} users created")
        else:
            logger.warning(
                f"Seeding stopped after {len(result.created)} of {result.requested} "
                f"users (ref {result.log_ref})"
            )
        outcome = SeedOutcome(EXIT_SUCCESS, result=result)
    finally:
        if client is not None:
            await client.disconnect()

    return outcome


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blog-seed",
        description="Insert synthetic users into the database.",
    )
    parser.add_argument(
        "--count",
        type=_non_negative_int,
        default=None,
        help="Number of users to insert (default: SEED_USER_COUNT)",
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="Async SQLAlchemy URL (default: DATABASE_URL)",
    )
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create the schema before seeding (local SQLite; use Alembic otherwise)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings)

    outcome = asyncio.run(
        run_seed(
            settings,
            count=args.count,
            database_url=args.database_url,
            create_tables=args.create_tables,
        )
    )
    return outcome.exit_code


if __name__ == "__main__":
    sys.exit(main())
