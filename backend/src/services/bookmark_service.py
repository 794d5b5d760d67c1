"""Service layer for owner-scoped bookmark CRUD operations."""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models.base import clock_now
from models.bookmark import Bookmark
from schemas.bookmark import BookmarkCreate, BookmarkUpdate
from services.exceptions import AccessDeniedError

logger = logging.getLogger(__name__)


class BookmarkService:
    """
    Ownership-checked CRUD for bookmarks.

    Every method takes the caller's user id as a trusted value (already
    authenticated upstream). A bookmark is only ever returned, changed or removed
    when its user_id equals the caller's id; otherwise AccessDeniedError is raised,
    whether or not the id exists.

    The session is injected so the service holds no state of its own between
    calls. Methods flush but never commit; the session owner decides the
    transaction boundary. Database errors propagate unchanged.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_bookmarks(self, user_id: int) -> list[Bookmark]:
        """Return all bookmarks owned by the user (empty list if none)."""
        result = await self.db.execute(
            select(Bookmark)
            .where(Bookmark.user_id == user_id)
            .order_by(Bookmark.id),
        )
        return list(result.scalars().all())

    async def get_bookmark_by_id(self, user_id: int, bookmark_id: int) -> Bookmark:
        """
        Return a single bookmark owned by the user.

        The lookup filters on id and owner together, so a bookmark owned by
        someone else is indistinguishable from one that doesn't exist.

        Raises:
            AccessDeniedError: If no bookmark with that id belongs to the user.
        """
        result = await self.db.execute(
            select(Bookmark).where(
                Bookmark.id == bookmark_id,
                Bookmark.user_id == user_id,
            ),
        )
        bookmark = result.scalar_one_or_none()
        if bookmark is None:
            logger.debug("Denied read of bookmark %s for user %s", bookmark_id, user_id)
            raise AccessDeniedError
        return bookmark

    async def create_bookmark(self, user_id: int, data: BookmarkCreate) -> Bookmark:
        """Create a bookmark owned by the user and return it with generated fields."""
        bookmark = Bookmark(
            user_id=user_id,
            title=data.title,
            description=data.description,
            link=data.link,
        )
        self.db.add(bookmark)
        await self.db.flush()
        await self.db.refresh(bookmark)
        return bookmark

    async def edit_bookmark_by_id(
        self,
        user_id: int,
        bookmark_id: int,
        data: BookmarkUpdate,
    ) -> Bookmark:
        """
        Apply a partial update to a bookmark owned by the user.

        Only fields present in `data` are changed; updated_at is bumped. The owner
        is never taken from the payload.

        Raises:
            AccessDeniedError: If the bookmark is missing or owned by another user.
        """
        bookmark = await self._get_owned_bookmark(user_id, bookmark_id)

        update_data = data.model_dump(exclude_unset=True)
        for field, value in update_data.items():
            setattr(bookmark, field, value)
        bookmark.updated_at = clock_now()

        await self.db.flush()
        await self.db.refresh(bookmark)
        return bookmark

    async def delete_bookmark_by_id(self, user_id: int, bookmark_id: int) -> None:
        """
        Permanently delete a bookmark owned by the user.

        Raises:
            AccessDeniedError: If the bookmark is missing or owned by another user.
        """
        bookmark = await self._get_owned_bookmark(user_id, bookmark_id)
        await self.db.delete(bookmark)
        await self.db.flush()

    async def _get_owned_bookmark(self, user_id: int, bookmark_id: int) -> Bookmark:
        """Fetch by primary key, then require the caller to be the owner."""
        bookmark = await self.db.get(Bookmark, bookmark_id)
        if bookmark is None or bookmark.user_id != user_id:
            logger.debug("Denied write to bookmark %s for user %s", bookmark_id, user_id)
            raise AccessDeniedError
        return bookmark
