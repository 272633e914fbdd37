"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from pokemon_logger.api.dependencies import get_current_user
from pokemon_logger.database import get_db
from pokemon_logger.models.user import User
from pokemon_logger.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse
from pokemon_logger.services.auth import login_user, register_user

router = APIRouter(prefix="/api/auth", tags=["auth"])

# Handlers are sync so bcrypt runs in the worker thread pool, off the event loop


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user."""
    token, user = register_user(db, user_data.email, user_data.password, user_data.name)
    return AuthResponse(token=token, user=UserResponse.model_validate(user))


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with email and password."""
    token, user = login_user(db, credentials.email, credentials.password)
    return AuthResponse(token=token, user=UserResponse.model_validate(user))


@router.get("/me", response_model=UserResponse)
def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return current_user
