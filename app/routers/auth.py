"""Authentication routes for user registration and login."""
from fastapi import APIRouter, Depends, HTTPException, Response, status
from app.models.schemas import ApiResponse, LoginResult, User, UserCreate, UserLogin
from app.auth import (
    authenticate_user,
    clear_auth_cookie,
    create_access_token,
    create_user,
    get_current_user,
    set_auth_cookie,
)
from app.repositories import UserRepository
from app.utils.exceptions import AuthError, ValidationError
import logging
from psycopg2 import IntegrityError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["authentication"])


@router.post("/signup", response_model=ApiResponse[User], status_code=status.HTTP_201_CREATED)
def signup(user_data: UserCreate):
    """Register a new user."""
    try:
        if UserRepository.get_user_by_email(user_data.email):
            raise ValidationError("User already exists")
        if UserRepository.get_user_by_username(user_data.username):
            raise ValidationError("Username already taken")

        user = create_user(
            email=user_data.email,
            username=user_data.username,
            password=user_data.password
        )

        logger.info(f"New user registered: {user['username']}")
        return {"ok": True, "data": user}

    except HTTPException:
        raise
    except IntegrityError:
        raise ValidationError("User already exists")
    except Exception as e:
        logger.error(f"Registration error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Registration failed"
        )


@router.post("/login", response_model=ApiResponse[LoginResult])
def login(credentials: UserLogin, response: Response):
    """Authenticate user and establish a session via secure cookie."""
    try:
        user = authenticate_user(credentials.username, credentials.password)
    except Exception as e:
        logger.error(f"Login error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )

    if not user:
        raise AuthError("Invalid username or password")

    access_token = create_access_token(data={"sub": str(user["id"])})
    set_auth_cookie(response, access_token)

    logger.info(f"User logged in: {user['username']}")
    return {"ok": True, "data": {"user": user, "access_token": access_token}}


@router.post("/logout", response_model=ApiResponse[None])
def logout(response: Response):
    """Terminate the current session by clearing the auth cookie."""
    clear_auth_cookie(response)
    return {"ok": True, "data": None}


@router.get("/me", response_model=ApiResponse[User])
def get_current_user_info(current_user: dict = Depends(get_current_user)):
    """Get current authenticated user information."""
    return {"ok": True, "data": current_user}
