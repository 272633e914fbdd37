"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from pokemon_logger.config import get_settings
from pokemon_logger.errors import AuthError, ConflictError, InternalError, ValidationError
from pokemon_logger.models.user import User

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

INVALID_CREDENTIALS = "Invalid credentials"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user_id: str) -> str:
    """Create a JWT access token for a user."""
    settings = get_settings()
    to_encode: dict = {"sub": user_id}
    if settings.jwt_expiration_minutes is not None:
        to_encode["exp"] = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a JWT token."""
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return _first_user(db, User.email == email)


def get_user_by_id(db: Session, user_id: str) -> User | None:
    """Get a user by id."""
    return _first_user(db, User.id == user_id)


def _first_user(db: Session, criterion) -> User | None:
    try:
        return db.query(User).filter(criterion).first()
    except SQLAlchemyError as e:
        logger.error(f"Failed to load user: {e}")
        raise InternalError() from e


def create_user(db: Session, email: str, password: str, name: str) -> User:
    """Create a new user.

    Raises:
        ConflictError: the email is already registered
    """
    user = User(email=email, password_hash=get_password_hash(password), name=name)
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError("Email already exists") from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to create user: {e}")
        raise InternalError() from e
    db.refresh(user)
    return user


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Authenticate a user by email and password."""
    user = get_user_by_email(db, email)
    if not user:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def register_user(db: Session, email: str, password: str, name: str) -> tuple[str, User]:
    """Register a new account and issue its first token."""
    if not email or not password or not name:
        raise ValidationError("All fields are required")

    if get_user_by_email(db, email):
        raise ConflictError("Email already exists")

    user = create_user(db, email, password, name)
    logger.info(f"Registered user {user.id}")
    return create_access_token(user.id), user


def login_user(db: Session, email: str, password: str) -> tuple[str, User]:
    """Check credentials and issue a token.

    Unknown email and wrong password fail with the same message.
    """
    if not email or not password:
        raise ValidationError("Email and password are required")

    user = authenticate_user(db, email, password)
    if not user:
        raise AuthError(INVALID_CREDENTIALS)

    return create_access_token(user.id), user


def verify_token(db: Session, token: str) -> User:
    """Resolve a bearer token to its user.

    The user row is fetched on every call so a token for a removed user
    stops working immediately.
    """
    payload = decode_access_token(token)
    if payload is None:
        raise AuthError("Invalid token")

    user_id = payload.get("sub")
    if not isinstance(user_id, str) or not user_id:
        raise AuthError("Invalid token")

    user = get_user_by_id(db, user_id)
    if user is None:
        raise AuthError("User not found")

    return user
