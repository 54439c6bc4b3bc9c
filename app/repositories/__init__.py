"""Repository modules for database operations.

All repository classes are re-exported here for convenient imports.
"""
from app.repositories.question import QuestionRepository
from app.repositories.user import UserRepository
from app.repositories.notification import NotificationRepository

__all__ = [
    "QuestionRepository",
    "UserRepository",
    "NotificationRepository",
]
