"""Service layer for user profile updates."""
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models.base import clock_now
from models.user import User
from schemas.user import UserUpdate
from services.exceptions import CredentialsTakenError


async def edit_user(db: AsyncSession, user: User, data: UserUpdate) -> User:
    """
    Apply a partial profile update to the given user.

    Note: Does not commit. Caller (session generator) handles commit at request end.

    Raises:
        CredentialsTakenError: If the new email belongs to a different user.
    """
    update_data = data.model_dump(exclude_unset=True)

    new_email = update_data.get("email")
    if new_email is not None and new_email != user.email:
        result = await db.execute(
            select(User.id).where(User.email == new_email, User.id != user.id),
        )
        if result.scalar_one_or_none() is not None:
            raise CredentialsTakenError

    for field, value in update_data.items():
        setattr(user, field, value)
    user.updated_at = clock_now()

    await db.flush()
    await db.refresh(user)
    return user
