"""Authentication utilities for JWT tokens and password hashing."""
from datetime import datetime, timedelta
from typing import Optional

from fastapi import Request, Response
from fastapi.security.utils import get_authorization_scheme_param
from jose import JWTError, jwt
from passlib.context import CryptContext

from app.config import get_settings
from app.repositories import UserRepository
from app.utils.exceptions import AuthError

import logging

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

settings = get_settings()

SECRET_KEY = settings.secret_key
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = settings.access_token_expire_minutes


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token."""
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire})
    encoded_jwt = jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)
    return encoded_jwt


def decode_access_token(token: str) -> Optional[int]:
    """Return the user ID carried by a token, or None if it is invalid."""
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        return None
    subject = payload.get("sub")
    if subject is None:
        return None
    try:
        return int(subject)
    except (TypeError, ValueError):
        return None


def _extract_token_from_request(request: Optional[Request]) -> Optional[str]:
    if request is None:
        return None

    token = request.cookies.get(settings.auth_cookie_name)
    if token:
        return token

    auth_header = request.headers.get("Authorization")
    if not auth_header:
        return None

    scheme, param = get_authorization_scheme_param(auth_header)
    if scheme.lower() != "bearer":
        return None
    return param


def set_auth_cookie(response: Response, token: str) -> None:
    """Persist the JWT in an HttpOnly cookie."""
    cookie_domain = settings.auth_cookie_domain or None
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=token,
        max_age=settings.auth_cookie_max_age,
        httponly=True,
        secure=settings.auth_cookie_secure,
        samesite=settings.auth_cookie_samesite,
        domain=cookie_domain,
        path="/",
    )


def clear_auth_cookie(response: Response) -> None:
    """Remove the authentication cookie from the client."""
    cookie_domain = settings.auth_cookie_domain or None
    response.delete_cookie(
        key=settings.auth_cookie_name,
        domain=cookie_domain,
        path="/",
    )


def create_user(email: str, username: str, password: str) -> dict:
    """Create a new registered user with a hashed password."""
    return UserRepository.create_user(
        email=email,
        username=username,
        hashed_password=get_password_hash(password),
    )


def authenticate_user(username: str, password: str) -> Optional[dict]:
    """Return the user for valid credentials, otherwise None."""
    user = UserRepository.get_user_by_username(username, include_password=True)
    if not user or not user.get("hashed_password"):
        return None
    if not verify_password(password, user["hashed_password"]):
        return None
    user.pop("hashed_password", None)
    return user


async def get_current_user(request: Request) -> dict:
    """Get the current authenticated user from the JWT token."""
    token_value = _extract_token_from_request(request)
    if not token_value:
        raise AuthError()

    user_id = decode_access_token(token_value)
    if user_id is None:
        raise AuthError()

    user = UserRepository.get_user_by_id(user_id)
    if user is None:
        raise AuthError()

    return user


async def get_current_user_optional(request: Request) -> Optional[dict]:
    """Get the current user if authenticated, otherwise return None (for guest access)."""
    token_value = _extract_token_from_request(request)
    if not token_value:
        return None

    user_id = decode_access_token(token_value)
    if user_id is None:
        return None

    return UserRepository.get_user_by_id(user_id)
