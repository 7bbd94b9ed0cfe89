"""
QuanThink Backend: User Request/Response Schemas
=================================================

What:  Pydantic models for registration, update, login and user output.

Security:
    UserResponse deliberately has no password field. Stored hashes never
    leave the server, including from POST /login.
"""

from pydantic import BaseModel, Field


class UserCredentials(BaseModel):
    """Email and password pair shared by every inbound user payload."""
    email: str = Field(min_length=1, max_length=255, description="Login email; unique across users")
    password: str = Field(min_length=1, description="Plaintext password; hashed before storage")


class UserCreate(UserCredentials):
    """Body of POST /users."""


class UserUpdate(UserCredentials):
    """Body of PUT /users/{id} (full-record update)."""


class LoginRequest(UserCredentials):
    """Body of POST /login."""


class UserResponse(BaseModel):
    """A stored user as returned by the API."""
    id: int = Field(description="Identifier assigned at creation")
    email: str = Field(description="Login email")

    model_config = {"from_attributes": True}
