"""Answer routes: comments and votes on embedded answers."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from app.auth import get_current_user_optional
from app.models.schemas import ApiResponse, Comment, CommentCreate, VoteRequest, VoteResult
from app.routers.questions import display_name, question_service
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/answers", tags=["answers"])


@router.post("/{answer_id}/comments", response_model=ApiResponse[Comment], status_code=status.HTTP_201_CREATED)
def add_comment(
    answer_id: str,
    payload: CommentCreate,
    current_user: Optional[dict] = Depends(get_current_user_optional),
):
    """Comment on an answer."""
    try:
        comment = question_service.add_comment(
            payload.question_id,
            answer_id,
            content=payload.content,
            user=display_name(payload.user, current_user),
        )
        return {"ok": True, "data": comment}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error adding comment to answer {answer_id}: {e}")
        raise HTTPException(status_code=500, detail="Server error")


@router.post("/{answer_id}/votes", response_model=ApiResponse[VoteResult])
def vote(answer_id: str, payload: VoteRequest):
    """Vote an answer, or one of its comments, up or down."""
    try:
        target = question_service.vote(
            payload.question_id,
            answer_id,
            payload.dir,
            comment_id=payload.comment_id,
        )
        return {
            "ok": True,
            "data": {
                "answer_id": answer_id,
                "comment_id": payload.comment_id,
                "votes": target["votes"],
            },
        }
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error voting on answer {answer_id}: {e}")
        raise HTTPException(status_code=500, detail="Server error")
