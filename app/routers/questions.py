"""Question routes: ask, browse, read, answer and accept."""
from typing import Annotated, List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query, status

from app.auth import get_current_user, get_current_user_optional
from app.models.schemas import (
    Answer,
    AnswerCreate,
    ApiResponse,
    Question,
    QuestionCreate,
    QuestionSummary,
)
from app.services.notification_service import notify_question_author
from app.services.question_service import QuestionService
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/questions", tags=["questions"])

question_service = QuestionService()

CurrentUser = Annotated[dict, Depends(get_current_user)]
OptionalCurrentUser = Annotated[Optional[dict], Depends(get_current_user_optional)]


def display_name(supplied: Optional[str], current_user: Optional[dict]) -> Optional[str]:
    """Signed-in users post under their username; anonymous callers may name themselves."""
    if current_user:
        return current_user.get("username")
    if supplied and supplied.strip():
        return supplied.strip()
    return None


@router.post("", response_model=ApiResponse[Question], status_code=status.HTTP_201_CREATED)
def create_question(payload: QuestionCreate, current_user: OptionalCurrentUser):
    """Ask a new question."""
    try:
        question = question_service.create_question(
            title=payload.title,
            description=payload.description,
            tags=payload.tags,
            user=display_name(payload.user, current_user),
        )
        return {"ok": True, "data": question}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error creating question: {e}")
        raise HTTPException(status_code=500, detail="Server error")


@router.get("", response_model=ApiResponse[List[QuestionSummary]])
def list_questions(
    limit: int = Query(default=50, ge=1, le=100),
    tag: Optional[str] = Query(default=None, description="Only questions carrying this tag"),
):
    """List questions, newest first."""
    try:
        questions = question_service.list_questions(limit=limit, tag=tag)
        return {"ok": True, "data": questions}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error listing questions: {e}")
        raise HTTPException(status_code=500, detail="Server error")


@router.get("/{question_id}", response_model=ApiResponse[Question])
def get_question(question_id: int):
    """Get a question with its answers and comments."""
    try:
        question = question_service.get_question(question_id)
        return {"ok": True, "data": question}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching question {question_id}: {e}")
        raise HTTPException(status_code=500, detail="Server error")


@router.post("/{question_id}/answers", response_model=ApiResponse[Answer], status_code=status.HTTP_201_CREATED)
def add_answer(
    question_id: int,
    payload: AnswerCreate,
    background_tasks: BackgroundTasks,
    current_user: OptionalCurrentUser,
):
    """Post an answer and notify the question's author in the background."""
    try:
        question, answer = question_service.add_answer(
            question_id,
            content=payload.content,
            user=display_name(payload.user, current_user),
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error adding answer to question {question_id}: {e}")
        raise HTTPException(status_code=500, detail="Server error")

    background_tasks.add_task(notify_question_author, question, answer)
    return {"ok": True, "data": answer}


@router.post("/{question_id}/answers/{answer_id}/accept", response_model=ApiResponse[Answer])
def accept_answer(question_id: int, answer_id: str, current_user: CurrentUser):
    """Mark an answer as the accepted one (question author only)."""
    try:
        answer = question_service.accept_answer(question_id, answer_id, current_user["username"])
        return {"ok": True, "data": answer}
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error accepting answer {answer_id}: {e}")
        raise HTTPException(status_code=500, detail="Server error")
