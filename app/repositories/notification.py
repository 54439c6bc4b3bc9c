"""Repository for user notifications."""
from typing import Optional

from app.database import get_db_connection

NOTIFICATION_COLUMNS = "id, user_id, type, related_id, message, read, created_at"


class NotificationRepository:
    """Repository for notification database operations."""

    @staticmethod
    def create_notification(user_id: int, type: str, related_id: Optional[str] = None,
                            message: Optional[str] = None) -> dict:
        with get_db_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    f"""
                    INSERT INTO notifications (user_id, type, related_id, message)
                    VALUES (%s, %s, %s, %s)
                    RETURNING {NOTIFICATION_COLUMNS}
                    """,
                    (user_id, type, related_id, message)
                )
                notification = cur.fetchone()
                conn.commit()
                return notification

    @staticmethod
    def get_user_notifications(user_id: int, limit: int = 50) -> list:
        """Newest notifications for a user."""
        with get_db_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    f"""
                    SELECT {NOTIFICATION_COLUMNS}
                    FROM notifications
                    WHERE user_id = %s
                    ORDER BY created_at DESC, id DESC
                    LIMIT %s
                    """,
                    (user_id, limit)
                )
                return cur.fetchall()

    @staticmethod
    def count_unread(user_id: int) -> int:
        with get_db_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    "SELECT COUNT(*) AS unread FROM notifications WHERE user_id = %s AND read = FALSE",
                    (user_id,)
                )
                row = cur.fetchone()
                return row["unread"] if row else 0

    @staticmethod
    def mark_all_read(user_id: int) -> int:
        """Mark every unread notification of a user read; return how many changed."""
        with get_db_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    "UPDATE notifications SET read = TRUE WHERE user_id = %s AND read = FALSE",
                    (user_id,)
                )
                updated = cur.rowcount
                conn.commit()
                return updated
