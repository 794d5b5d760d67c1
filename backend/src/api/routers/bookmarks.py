"""Bookmark CRUD endpoints."""
from fastapi import APIRouter, Depends

from api.dependencies import get_bookmark_service, get_current_user
from models.user import User
from schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate
from services.bookmark_service import BookmarkService

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])


@router.get("/", response_model=list[BookmarkResponse])
async def list_bookmarks(
    current_user: User = Depends(get_current_user),
    service: BookmarkService = Depends(get_bookmark_service),
) -> list[BookmarkResponse]:
    """List all bookmarks for the current user."""
    bookmarks = await service.get_bookmarks(current_user.id)
    return [BookmarkResponse.model_validate(b) for b in bookmarks]


@router.get("/{bookmark_id}", response_model=BookmarkResponse)
async def get_bookmark(
    bookmark_id: int,
    current_user: User = Depends(get_current_user),
    service: BookmarkService = Depends(get_bookmark_service),
) -> BookmarkResponse:
    """Get a single bookmark by ID. Returns 403 if not owned (or missing)."""
    bookmark = await service.get_bookmark_by_id(current_user.id, bookmark_id)
    return BookmarkResponse.model_validate(bookmark)


@router.post("/", response_model=BookmarkResponse, status_code=201)
async def create_bookmark(
    data: BookmarkCreate,
    current_user: User = Depends(get_current_user),
    service: BookmarkService = Depends(get_bookmark_service),
) -> BookmarkResponse:
    """Create a new bookmark."""
    bookmark = await service.create_bookmark(current_user.id, data)
    return BookmarkResponse.model_validate(bookmark)


@router.patch("/{bookmark_id}", response_model=BookmarkResponse)
async def edit_bookmark(
    bookmark_id: int,
    data: BookmarkUpdate,
    current_user: User = Depends(get_current_user),
    service: BookmarkService = Depends(get_bookmark_service),
) -> BookmarkResponse:
    """Update a bookmark. Only supplied fields change."""
    bookmark = await service.edit_bookmark_by_id(current_user.id, bookmark_id, data)
    return BookmarkResponse.model_validate(bookmark)


@router.delete("/{bookmark_id}", status_code=204)
async def delete_bookmark(
    bookmark_id: int,
    current_user: User = Depends(get_current_user),
    service: BookmarkService = Depends(get_bookmark_service),
) -> None:
    """Permanently delete a bookmark."""
    await service.delete_bookmark_by_id(current_user.id, bookmark_id)
