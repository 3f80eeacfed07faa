"""
Pydantic models for user data.

``SignupRequest`` registers an account, ``LoginRequest`` exchanges
credentials for a bearer token and ``UserRead`` is what the API
returns.  Passwords never appear in a response model.
"""

from pydantic import BaseModel, Field

from ..models import User, UserRole


class SignupRequest(BaseModel):
    """Schema for registering a user.

    Setting ``admin`` requests the ADMIN role and requires
    ``adminToken`` to match the server's configured admin token.
    """

    username: str = Field(..., min_length=1, max_length=50, example="shopper")
    email: str = Field(..., min_length=3, example="shopper@example.com")
    password: str = Field(..., min_length=4, example="strongpassword")
    admin: bool = Field(False, example=False)
    admin_token: str = Field("", alias="adminToken")

    model_config = {
        "populate_by_name": True,
    }


class LoginRequest(BaseModel):
    username: str = Field(..., example="shopper")
    password: str = Field(..., example="strongpassword")


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int
    username: str
    email: str
    role: UserRole

    model_config = {
        "from_attributes": True,
    }

    @classmethod
    def from_model(cls, user: User) -> "UserRead":
        return cls(id=user.id, username=user.username, email=user.email, role=user.role)
