"""
Database reset task.

Removes every bookmark and user, leaving the schema in place. Intended for
local development and end-to-end test setup, never for production data.

Usage:
    python -m tasks.clean_db
"""
import asyncio
import logging
from dataclasses import dataclass

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from db.session import async_session_factory, dispose_engine
from models.bookmark import Bookmark
from models.user import User

logger = logging.getLogger(__name__)


@dataclass
class CleanStats:
    """Row counts removed by a reset."""

    bookmarks_deleted: int = 0
    users_deleted: int = 0


async def clean_db(db: AsyncSession) -> CleanStats:
    """
    Delete all bookmarks, then all users.

    Bookmarks go first so the foreign key is never violated, even on databases
    that don't cascade. Does not commit.
    """
    # Plain DELETE without RETURNING so rowcount is reliable on every backend
    bookmarks_result = await db.execute(
        delete(Bookmark).execution_options(synchronize_session=False),
    )
    users_result = await db.execute(
        delete(User).execution_options(synchronize_session=False),
    )
    await db.flush()
    return CleanStats(
        bookmarks_deleted=bookmarks_result.rowcount,
        users_deleted=users_result.rowcount,
    )


async def run_clean_db() -> CleanStats:
    """Run the reset in its own session and commit it."""
    async with async_session_factory() as session:
        stats = await clean_db(session)
        await session.commit()
    await dispose_engine()
    logger.info(
        "Database cleaned: %d bookmarks, %d users removed",
        stats.bookmarks_deleted,
        stats.users_deleted,
    )
    return stats


def main() -> None:
    """Entry point for running the reset as a script."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(run_clean_db())


if __name__ == "__main__":
    main()
