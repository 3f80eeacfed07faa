"""
User endpoints for API v1.

Signup, login (returns a bearer token) and the current user's profile.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from selectshop_api.app.core.security import create_access_token, get_current_user
from selectshop_api.app.models import User
from selectshop_api.app.schemas.user import LoginRequest, SignupRequest, Token, UserRead
from selectshop_api.app.services.user_service import UserService


router = APIRouter()


@router.post("/signup", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def signup(data: SignupRequest) -> UserRead:
    """Register a new account.

    Requesting ``admin`` requires the server's admin token; a wrong
    token or a taken username/e‑mail answers 400.
    """
    return await UserService.signup(data)


@router.post("/login", response_model=Token)
async def login(credentials: LoginRequest) -> Token:
    """Exchange username and password for an access token."""
    user = await UserService.authenticate(credentials.username, credentials.password)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    token = create_access_token({"sub": user.username, "role": user.role.value})
    return Token(access_token=token)


@router.get("/me", response_model=UserRead)
async def read_me(current_user: User = Depends(get_current_user)) -> UserRead:
    return UserRead.from_model(current_user)
