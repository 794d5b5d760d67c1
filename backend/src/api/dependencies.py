"""FastAPI dependencies for injection."""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from core.auth import get_current_user
from core.config import get_settings
from db.session import get_async_session
from services.bookmark_service import BookmarkService


def get_bookmark_service(
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkService:
    """Build a bookmark service bound to the request's session."""
    return BookmarkService(db)


__all__ = [
    "get_async_session",
    "get_bookmark_service",
    "get_current_user",
    "get_settings",
]
