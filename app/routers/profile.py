"""Routes for viewing and editing the signed-in user's profile."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from app.auth import get_current_user
from app.models.schemas import ApiResponse, ProfileUpdate, User
from app.repositories import UserRepository
from app.utils.exceptions import NotFoundError
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/user", tags=["profile"])

CurrentUser = Annotated[dict, Depends(get_current_user)]


@router.get("/profile", response_model=ApiResponse[User])
def get_profile(current_user: CurrentUser):
    """Return the current user's profile."""
    return {"ok": True, "data": current_user}


@router.put("/profile", response_model=ApiResponse[User])
def update_profile(payload: ProfileUpdate, current_user: CurrentUser):
    """Update bio, location and profile image; omitted fields stay as they are."""
    try:
        user = UserRepository.update_profile(
            current_user["id"],
            payload.model_dump(exclude_unset=True),
        )
        if user is None:
            raise NotFoundError("User not found")

        logger.info(f"User {current_user['id']} updated profile")
        return {"ok": True, "data": user}

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating profile: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update profile"
        )
