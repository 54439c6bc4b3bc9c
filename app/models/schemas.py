"""Pydantic models for request/response schemas.

Payloads travel as camelCase JSON (``createdAt``, ``questionId``); the models
use snake_case attributes and accept either spelling on input.
"""
from datetime import datetime
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, EmailStr
from pydantic.alias_generators import to_camel
from typing import Generic, List, Literal, Optional, TypeVar, Union


T = TypeVar("T")


class CamelModel(BaseModel):
    """Base model serialising field names as camelCase."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope wrapping every payload."""
    ok: bool = True
    data: Optional[T] = None


class ErrorResponse(BaseModel):
    """Failure envelope."""
    ok: bool = False
    error: str


class HealthCheck(BaseModel):
    """Health check response model."""
    status: str
    timestamp: datetime
    version: str = "1.0.0"


# Question / answer / comment schemas
class QuestionCreate(CamelModel):
    """Request model for asking a question."""
    title: str = Field(..., max_length=300, description="Question title")
    description: str = Field(..., description="Question body (rich text)")
    tags: List[str] = Field(default_factory=list, description="At least one tag")
    user: Optional[str] = Field(default=None, description="Display name of the asker")


class AnswerCreate(CamelModel):
    """Request model for posting an answer."""
    content: str = Field(..., description="Answer body (rich text)")
    user: Optional[str] = Field(default=None, description="Display name of the answerer")


class CommentCreate(CamelModel):
    """Request model for commenting on an answer."""
    question_id: int = Field(..., description="Question owning the answer")
    content: str = Field(..., description="Comment text")
    user: Optional[str] = Field(default=None, description="Display name of the commenter")


class VoteRequest(CamelModel):
    """Request model for voting on an answer or one of its comments."""
    question_id: int = Field(..., description="Question owning the answer")
    dir: Literal["up", "down"] = Field(..., description="Vote direction")
    comment_id: Optional[str] = Field(default=None, description="Vote on this comment instead of the answer")


class Comment(CamelModel):
    id: str
    content: str
    user: Optional[str] = None
    votes: int = 0
    created_at: datetime


class Answer(CamelModel):
    id: str
    content: str
    user: Optional[str] = None
    votes: int = 0
    is_accepted: bool = False
    created_at: datetime
    comments: List[Comment] = Field(default_factory=list)


class QuestionSummary(CamelModel):
    """Question as shown in listings."""
    id: int
    title: str
    description: str
    tags: List[str]
    user: Optional[str] = None
    created_at: datetime
    answer_count: int = 0


class Question(CamelModel):
    """Full question document with embedded answers and comments."""
    id: int
    title: str
    description: str
    tags: List[str]
    user: Optional[str] = None
    created_at: datetime
    answers: List[Answer] = Field(default_factory=list)


class VoteResult(CamelModel):
    """Counter value after a vote."""
    answer_id: str
    comment_id: Optional[str] = None
    votes: int


# Authentication Schemas
class UserCreate(BaseModel):
    """Request model for user registration."""
    email: EmailStr = Field(..., description="User's email address")
    username: str = Field(..., min_length=3, max_length=50, description="Username")
    password: str = Field(..., min_length=8, max_length=100, description="Password")


class UserLogin(BaseModel):
    """Request model for user login."""
    username: str = Field(..., min_length=1, description="Username")
    password: str = Field(..., min_length=1, description="Password")


class User(CamelModel):
    """Response model for user data."""
    id: int
    username: str
    email: str
    bio: Optional[str] = None
    location: Optional[str] = None
    profile_image: Optional[str] = None
    created_at: datetime


class LoginResult(CamelModel):
    user: User
    access_token: str
    token_type: str = "bearer"


class ProfileUpdate(CamelModel):
    """Partial profile update; omitted fields are left unchanged."""
    bio: Optional[str] = Field(default=None, max_length=500)
    location: Optional[str] = Field(default=None, max_length=100)
    profile_image: Optional[str] = Field(default=None, max_length=2048)


# Notification Schemas
class NotificationType(str, Enum):
    ANSWER = "answer"
    COMMENT = "comment"
    MENTION = "mention"


class NotificationCreate(CamelModel):
    """Request model for recording a notification."""
    user_id: int = Field(..., description="Recipient user ID")
    type: NotificationType
    related_id: Optional[Union[int, str]] = Field(
        default=None, description="Question id or answer id the notification points at"
    )
    message: Optional[str] = Field(default=None, max_length=500)


class Notification(CamelModel):
    id: int
    user_id: int
    type: NotificationType
    related_id: Optional[str] = None
    message: Optional[str] = None
    read: bool = False
    created_at: datetime


class NotificationList(CamelModel):
    notifications: List[Notification]
    unread_count: int


class MarkReadResult(CamelModel):
    updated: int
