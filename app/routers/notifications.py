"""Notification routes."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from psycopg2 import IntegrityError

from app.auth import get_current_user
from app.models.schemas import (
    ApiResponse,
    MarkReadResult,
    Notification,
    NotificationCreate,
    NotificationList,
)
from app.repositories import NotificationRepository
from app.utils.exceptions import NotFoundError
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/notifications", tags=["notifications"])

CurrentUser = Annotated[dict, Depends(get_current_user)]


@router.post("", response_model=ApiResponse[Notification], status_code=status.HTTP_201_CREATED)
def create_notification(payload: NotificationCreate):
    """Record a notification for a user."""
    try:
        notification = NotificationRepository.create_notification(
            user_id=payload.user_id,
            type=payload.type.value,
            related_id=None if payload.related_id is None else str(payload.related_id),
            message=payload.message,
        )
        return {"ok": True, "data": notification}
    except IntegrityError:
        # user_id has a foreign key on users
        raise NotFoundError("User not found")
    except Exception as e:
        logger.error(f"Error creating notification: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create notification"
        )


@router.get("/me", response_model=ApiResponse[NotificationList])
def get_my_notifications(
    current_user: CurrentUser,
    limit: int = Query(default=50, ge=1, le=200),
):
    """List the current user's notifications, newest first."""
    try:
        notifications = NotificationRepository.get_user_notifications(current_user["id"], limit=limit)
        unread = NotificationRepository.count_unread(current_user["id"])
        return {"ok": True, "data": {"notifications": notifications, "unread_count": unread}}
    except Exception as e:
        logger.error(f"Error retrieving notifications: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve notifications"
        )


@router.post("/read", response_model=ApiResponse[MarkReadResult])
def mark_notifications_read(current_user: CurrentUser):
    """Mark all of the current user's notifications read."""
    try:
        updated = NotificationRepository.mark_all_read(current_user["id"])
        return {"ok": True, "data": {"updated": updated}}
    except Exception as e:
        logger.error(f"Error marking notifications read: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update notifications"
        )
