"""Notification side effects of user activity."""
import logging
from typing import Optional

from app.config import get_settings
from app.repositories import NotificationRepository, UserRepository

logger = logging.getLogger(__name__)

ANSWER_MESSAGE = "Someone answered your question"


def notify_question_author(question: dict, answer: dict) -> Optional[dict]:
    """Tell a question's author that it received an answer.

    Runs as a background task after the answer is stored. Failures are
    logged and swallowed; the answer stays saved either way.
    """
    if not get_settings().notifications_enabled:
        return None

    author = question.get("user")
    if not author or author == answer.get("user"):
        return None

    try:
        recipient = UserRepository.get_user_by_username(author)
        if recipient is None:
            logger.info(f"No account for question author '{author}', skipping notification")
            return None

        return NotificationRepository.create_notification(
            user_id=recipient["id"],
            type="answer",
            related_id=str(question["id"]),
            message=ANSWER_MESSAGE,
        )
    except Exception as e:
        logger.warning(f"Failed to notify author of question {question.get('id')}: {e}")
        return None
