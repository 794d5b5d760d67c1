"""Service layer for email/password signup and signin."""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import Settings
from core.security import create_access_token, hash_password, verify_password
from models.user import User
from schemas.auth import AuthRequest, TokenResponse
from services.exceptions import CredentialsTakenError, InvalidCredentialsError

logger = logging.getLogger(__name__)


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    """Look up a user by email (case-sensitive, as stored)."""
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def signup(db: AsyncSession, data: AuthRequest, settings: Settings) -> TokenResponse:
    """
    Register a new user and return an access token for them.

    Note: Does not commit. Caller (session generator) handles commit at request end.

    Raises:
        CredentialsTakenError: If the email is already registered.
    """
    if await get_user_by_email(db, data.email) is not None:
        raise CredentialsTakenError

    user = User(email=data.email, hash=hash_password(data.password))
    db.add(user)
    await db.flush()
    logger.info("Registered user %s", user.id)

    return TokenResponse(access_token=create_access_token(user.id, user.email, settings))


async def signin(db: AsyncSession, data: AuthRequest, settings: Settings) -> TokenResponse:
    """
    Verify credentials and return an access token.

    Raises:
        InvalidCredentialsError: If the email is unknown or the password is wrong.
    """
    user = await get_user_by_email(db, data.email)
    if user is None or not verify_password(data.password, user.hash):
        logger.warning("Failed signin attempt")
        raise InvalidCredentialsError

    return TokenResponse(access_token=create_access_token(user.id, user.email, settings))
