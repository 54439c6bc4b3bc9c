"""Repository for question documents.

Each row of ``questions`` is one document: scalar question fields plus an
``answers`` JSONB array holding the embedded answers and their comments.
"""
from typing import Any, Callable, List, Optional, Tuple

from psycopg2.extras import Json

from app.database import get_db_connection

QUESTION_COLUMNS = "id, title, description, tags, author, answers, created_at"


def _convert_question(row: Optional[dict]) -> Optional[dict]:
    """Map a questions row onto the document shape used by the services."""
    if not row:
        return None
    question = {
        "id": row["id"],
        "title": row["title"],
        "description": row["description"],
        "tags": list(row.get("tags") or []),
        "user": row.get("author"),
        "created_at": row["created_at"],
    }
    if "answers" in row:
        question["answers"] = row["answers"] or []
    if "answer_count" in row:
        question["answer_count"] = row["answer_count"]
    return question


class QuestionRepository:
    """Repository for question-related database operations."""

    @staticmethod
    def create_question(title: str, description: str, tags: List[str], user: Optional[str]) -> dict:
        """Insert a question with an empty answer list and return it."""
        with get_db_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    f"""
                    INSERT INTO questions (title, description, tags, author, answers)
                    VALUES (%s, %s, %s, %s, '[]'::jsonb)
                    RETURNING {QUESTION_COLUMNS};
                    """,
                    (title, description, tags, user)
                )
                question = _convert_question(cur.fetchone())
                conn.commit()
                return question

    @staticmethod
    def list_questions(limit: int = 50, tag: Optional[str] = None) -> list:
        """List question summaries, newest first."""
        with get_db_connection() as conn:
            with conn.cursor() as cur:
                if tag:
                    cur.execute(
                        """
                        SELECT id, title, description, tags, author, created_at,
                               jsonb_array_length(answers) AS answer_count
                        FROM questions
                        WHERE %s = ANY(tags)
                        ORDER BY created_at DESC, id DESC
                        LIMIT %s
                        """,
                        (tag, limit)
                    )
                else:
                    cur.execute(
                        """
                        SELECT id, title, description, tags, author, created_at,
                               jsonb_array_length(answers) AS answer_count
                        FROM questions
                        ORDER BY created_at DESC, id DESC
                        LIMIT %s
                        """,
                        (limit,)
                    )
                return [_convert_question(row) for row in cur.fetchall()]

    @staticmethod
    def get_question(question_id: int) -> Optional[dict]:
        """Fetch a full question document."""
        with get_db_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    f"SELECT {QUESTION_COLUMNS} FROM questions WHERE id = %s",
                    (question_id,)
                )
                return _convert_question(cur.fetchone())

    @staticmethod
    def modify_answers(question_id: int, mutate: Callable[[dict], Any]) -> Optional[Tuple[dict, Any]]:
        """Load a question under a row lock, apply ``mutate`` and save its answers.

        ``mutate`` receives the question document and edits its ``answers``
        in place. The row stays locked until commit, so concurrent writers on
        the same question run one after another. Returns ``(question, result)``
        or ``None`` when the question does not exist. Exceptions from
        ``mutate`` abort the transaction without writing.
        """
        with get_db_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    f"SELECT {QUESTION_COLUMNS} FROM questions WHERE id = %s FOR UPDATE",
                    (question_id,)
                )
                question = _convert_question(cur.fetchone())
                if question is None:
                    conn.rollback()
                    return None

                result = mutate(question)

                cur.execute(
                    "UPDATE questions SET answers = %s, updated_at = CURRENT_TIMESTAMP WHERE id = %s",
                    (Json(question["answers"]), question_id)
                )
                conn.commit()
                return question, result
