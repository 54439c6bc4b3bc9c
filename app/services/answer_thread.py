"""Operations on the answers embedded in a question document.

A question's ``answers`` value is a list of answer dicts, each carrying its
own ``comments`` list. List order is insertion order and is the only order;
nothing here sorts, reorders or removes entries. The helpers mutate the
question dict in place and leave loading and saving it to the caller.
"""
import uuid
from datetime import datetime, timezone
from typing import Optional

from app.utils.exceptions import NotFoundError, ValidationError

VOTE_DELTAS = {"up": 1, "down": -1}


def _timestamp() -> str:
    # Stored inside JSONB, so keep it a string
    return datetime.now(timezone.utc).isoformat()


def _new_id() -> str:
    return uuid.uuid4().hex


def require_text(value: Optional[str], field: str = "Content") -> str:
    """Return ``value`` unchanged, or raise if it is blank once trimmed."""
    if value is None or not value.strip():
        raise ValidationError(f"{field} required")
    return value


def new_answer(content: str, user: Optional[str]) -> dict:
    return {
        "id": _new_id(),
        "content": content,
        "user": user,
        "votes": 0,
        "is_accepted": False,
        "created_at": _timestamp(),
        "comments": [],
    }


def new_comment(content: str, user: Optional[str]) -> dict:
    return {
        "id": _new_id(),
        "content": content,
        "user": user,
        "votes": 0,
        "created_at": _timestamp(),
    }


def find_answer(question: dict, answer_id: str) -> dict:
    for answer in question.get("answers") or []:
        if answer.get("id") == answer_id:
            return answer
    raise NotFoundError("Answer not found")


def find_comment(answer: dict, comment_id: str) -> dict:
    for comment in answer.get("comments") or []:
        if comment.get("id") == comment_id:
            return comment
    raise NotFoundError("Comment not found")


def append_answer(question: dict, content: str, user: Optional[str]) -> dict:
    """Append a fresh answer to the end of the question's answer list."""
    answer = new_answer(require_text(content), user)
    if question.get("answers") is None:
        question["answers"] = []
    question["answers"].append(answer)
    return answer


def append_comment(question: dict, answer_id: str, content: str, user: Optional[str]) -> dict:
    """Append a fresh comment to the end of an answer's comment list."""
    require_text(content)
    answer = find_answer(question, answer_id)
    comment = new_comment(content, user)
    if answer.get("comments") is None:
        answer["comments"] = []
    answer["comments"].append(comment)
    return comment


def apply_vote(question: dict, answer_id: str, direction: str, comment_id: Optional[str] = None) -> dict:
    """Move the vote counter of an answer, or of one of its comments, by one.

    Counters have no floor and votes are not deduplicated per user.
    Returns the answer or comment that was changed.
    """
    if direction not in VOTE_DELTAS:
        raise ValidationError("Vote direction must be 'up' or 'down'")

    target = find_answer(question, answer_id)
    if comment_id:
        target = find_comment(target, comment_id)

    target["votes"] = int(target.get("votes") or 0) + VOTE_DELTAS[direction]
    return target


def accept_answer(question: dict, answer_id: str) -> dict:
    """Mark one answer accepted and clear the flag on every other answer."""
    accepted = find_answer(question, answer_id)
    for answer in question.get("answers") or []:
        answer["is_accepted"] = answer is accepted
    return accepted
