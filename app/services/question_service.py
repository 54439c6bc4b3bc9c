"""Business logic for questions, answers, comments and votes."""
import logging
from typing import List, Optional, Tuple

from app.repositories import QuestionRepository
from app.services import answer_thread
from app.utils.exceptions import ForbiddenError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def normalize_tags(tags: Optional[List[str]]) -> List[str]:
    """Trim tags, drop blanks and duplicates, keep first-seen order."""
    seen = []
    for tag in tags or []:
        cleaned = (tag or "").strip()
        if cleaned and cleaned not in seen:
            seen.append(cleaned)
    return seen


class QuestionService:
    """Service for handling question-related business logic."""

    def __init__(self):
        self.question_repo = QuestionRepository()

    def create_question(self, title: str, description: str, tags: List[str], user: Optional[str]) -> dict:
        if not (title or "").strip() or not (description or "").strip():
            raise ValidationError("Title, description and at least one tag are required")
        clean_tags = normalize_tags(tags)
        if not clean_tags:
            raise ValidationError("Title, description and at least one tag are required")

        question = self.question_repo.create_question(
            title=title.strip(),
            description=description,
            tags=clean_tags,
            user=user,
        )
        logger.info(f"Question {question['id']} created by {user or 'anonymous'}")
        return question

    def list_questions(self, limit: int = 50, tag: Optional[str] = None) -> list:
        return self.question_repo.list_questions(limit=limit, tag=tag)

    def get_question(self, question_id: int) -> dict:
        question = self.question_repo.get_question(question_id)
        if question is None:
            raise NotFoundError("Question not found")
        return question

    def _modify(self, question_id: int, mutate) -> Tuple[dict, dict]:
        outcome = self.question_repo.modify_answers(question_id, mutate)
        if outcome is None:
            raise NotFoundError("Question not found")
        return outcome

    def add_answer(self, question_id: int, content: str, user: Optional[str]) -> Tuple[dict, dict]:
        """Append an answer; returns the updated question and the new answer."""
        answer_thread.require_text(content)
        question, answer = self._modify(
            question_id,
            lambda q: answer_thread.append_answer(q, content, user),
        )
        logger.info(f"Answer {answer['id']} added to question {question_id}")
        return question, answer

    def add_comment(self, question_id: int, answer_id: str, content: str, user: Optional[str]) -> dict:
        answer_thread.require_text(content)
        _, comment = self._modify(
            question_id,
            lambda q: answer_thread.append_comment(q, answer_id, content, user),
        )
        logger.info(f"Comment {comment['id']} added to answer {answer_id}")
        return comment

    def vote(self, question_id: int, answer_id: str, direction: str, comment_id: Optional[str] = None) -> dict:
        """Apply one vote and return the changed answer or comment."""
        _, target = self._modify(
            question_id,
            lambda q: answer_thread.apply_vote(q, answer_id, direction, comment_id),
        )
        return target

    def accept_answer(self, question_id: int, answer_id: str, username: str) -> dict:
        """Mark an answer accepted; only the question's author may do this."""
        def mutate(question: dict) -> dict:
            if question.get("user") != username:
                raise ForbiddenError("Only the question author can accept an answer")
            return answer_thread.accept_answer(question, answer_id)

        _, answer = self._modify(question_id, mutate)
        logger.info(f"Answer {answer_id} accepted on question {question_id}")
        return answer
