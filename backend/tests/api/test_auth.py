"""Tests for signup and signin endpoints."""
from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models.user import User

CREDENTIALS = {"email": "bobo@example.com", "password": "123"}


async def test_signup_returns_201_and_token(client: AsyncClient) -> None:
    """Signup creates an account and returns an access token."""
    response = await client.post("/auth/signup", json=CREDENTIALS)
    assert response.status_code == 201
    data = response.json()
    assert data["access_token"]
    assert data["token_type"] == "bearer"


async def test_signup_stores_hashed_password(
    client: AsyncClient,
    db_session: AsyncSession,
) -> None:
    """The plaintext password is never stored."""
    await client.post("/auth/signup", json=CREDENTIALS)

    result = await db_session.execute(select(User).where(User.email == CREDENTIALS["email"]))
    user = result.scalar_one()
    assert user.hash != CREDENTIALS["password"]
    assert user.hash.startswith("$2")


async def test_signup_missing_email_returns_422(client: AsyncClient) -> None:
    """Email is required."""
    response = await client.post("/auth/signup", json={"password": "123"})
    assert response.status_code == 422


async def test_signup_missing_password_returns_422(client: AsyncClient) -> None:
    """Password is required."""
    response = await client.post("/auth/signup", json={"email": "bobo@example.com"})
    assert response.status_code == 422


async def test_signup_no_body_returns_422(client: AsyncClient) -> None:
    """An empty request is rejected."""
    response = await client.post("/auth/signup")
    assert response.status_code == 422


async def test_signup_invalid_email_returns_422(client: AsyncClient) -> None:
    """Email must be well-formed."""
    response = await client.post("/auth/signup", json={"email": "not-an-email", "password": "x"})
    assert response.status_code == 422


async def test_signup_duplicate_email_returns_403(client: AsyncClient) -> None:
    """Registering the same email twice is refused."""
    await client.post("/auth/signup", json=CREDENTIALS)
    response = await client.post("/auth/signup", json=CREDENTIALS)
    assert response.status_code == 403
    assert response.json()["detail"] == "Credentials taken"


async def test_signin_returns_200_and_token(client: AsyncClient) -> None:
    """Signin with correct credentials returns a usable token."""
    await client.post("/auth/signup", json=CREDENTIALS)

    response = await client.post("/auth/signin", json=CREDENTIALS)
    assert response.status_code == 200
    token = response.json()["access_token"]

    me = await client.get("/users/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["email"] == CREDENTIALS["email"]


async def test_signin_wrong_password_returns_403(client: AsyncClient) -> None:
    """Wrong password is rejected."""
    await client.post("/auth/signup", json=CREDENTIALS)
    response = await client.post(
        "/auth/signin", json={"email": CREDENTIALS["email"], "password": "wrong"},
    )
    assert response.status_code == 403
    assert response.json()["detail"] == "Credentials incorrect"


async def test_signin_unknown_email_same_error_as_wrong_password(client: AsyncClient) -> None:
    """Unknown email is indistinguishable from a wrong password."""
    response = await client.post(
        "/auth/signin", json={"email": "nobody@example.com", "password": "123"},
    )
    assert response.status_code == 403
    assert response.json()["detail"] == "Credentials incorrect"


async def test_signin_missing_password_returns_422(client: AsyncClient) -> None:
    """Password is required for signin too."""
    response = await client.post("/auth/signin", json={"email": CREDENTIALS["email"]})
    assert response.status_code == 422
