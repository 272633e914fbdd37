"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict, Field

# Fields default to empty so missing values reach the service as a 400,
# not as a framework validation error.


class UserRegister(BaseModel):
    """User registration request."""

    email: str = Field("", max_length=255)
    password: str = Field("", max_length=128)
    name: str = Field("", max_length=255)


class UserLogin(BaseModel):
    """User login request."""

    email: str = Field("", max_length=255)
    password: str = Field("", max_length=128)


class UserResponse(BaseModel):
    """Public user information; never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    name: str


class AuthResponse(BaseModel):
    """Authentication response with token and user info."""

    token: str
    user: UserResponse
