"""Repository for user accounts and profiles."""
from typing import Optional

from app.database import get_db_connection

PUBLIC_COLUMNS = "id, username, email, bio, location, profile_image, created_at"


def _convert_user(row: Optional[dict]) -> Optional[dict]:
    """Normalize database rows to plain dicts for downstream consumers."""
    if not row:
        return None
    return {
        "id": row["id"],
        "username": row["username"],
        "email": row["email"],
        "bio": row.get("bio"),
        "location": row.get("location"),
        "profile_image": row.get("profile_image"),
        "created_at": row["created_at"],
        **({"hashed_password": row["hashed_password"]} if "hashed_password" in row else {})
    }


class UserRepository:
    """Repository for user-related database operations."""

    @staticmethod
    def get_user_by_username(username: str, include_password: bool = False) -> Optional[dict]:
        columns = PUBLIC_COLUMNS + (", hashed_password" if include_password else "")
        with get_db_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    f"SELECT {columns} FROM users WHERE username = %s",
                    (username,)
                )
                return _convert_user(cur.fetchone())

    @staticmethod
    def get_user_by_email(email: str) -> Optional[dict]:
        with get_db_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    f"SELECT {PUBLIC_COLUMNS} FROM users WHERE email = %s",
                    (email,)
                )
                return _convert_user(cur.fetchone())

    @staticmethod
    def get_user_by_id(user_id: int) -> Optional[dict]:
        with get_db_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    f"SELECT {PUBLIC_COLUMNS} FROM users WHERE id = %s",
                    (user_id,)
                )
                return _convert_user(cur.fetchone())

    @staticmethod
    def create_user(email: str, username: str, hashed_password: str) -> dict:
        """Insert a user row and return its public fields."""
        with get_db_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    f"""
                    INSERT INTO users (email, username, hashed_password)
                    VALUES (%s, %s, %s)
                    RETURNING {PUBLIC_COLUMNS}
                    """,
                    (email, username, hashed_password)
                )
                user = cur.fetchone()
                conn.commit()
                return _convert_user(user)

    @staticmethod
    def update_profile(user_id: int, fields: dict) -> Optional[dict]:
        """Update the given profile columns and return the user.

        Only ``bio``, ``location`` and ``profile_image`` are writable; other
        keys are ignored.
        """
        updates = {k: v for k, v in fields.items() if k in ("bio", "location", "profile_image")}
        if not updates:
            return UserRepository.get_user_by_id(user_id)

        assignments = ", ".join(f"{column} = %s" for column in updates)
        with get_db_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    f"UPDATE users SET {assignments} WHERE id = %s RETURNING {PUBLIC_COLUMNS}",
                    (*updates.values(), user_id)
                )
                user = cur.fetchone()
                conn.commit()
                return _convert_user(user)
