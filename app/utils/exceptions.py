"""Custom exceptions for the StackIt API."""
from fastapi import HTTPException


class DatabaseError(HTTPException):
    """Database-related errors."""
    def __init__(self, detail: str = "Database operation failed"):
        super().__init__(status_code=500, detail=detail)


class ValidationError(HTTPException):
    """Input validation errors."""
    def __init__(self, detail: str = "Invalid input"):
        super().__init__(status_code=400, detail=detail)


class AuthError(HTTPException):
    """Missing or invalid credentials."""
    def __init__(self, detail: str = "Could not validate credentials"):
        super().__init__(
            status_code=401,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class ForbiddenError(HTTPException):
    """Authenticated caller is not allowed to perform the action."""
    def __init__(self, detail: str = "Not allowed"):
        super().__init__(status_code=403, detail=detail)


class NotFoundError(HTTPException):
    """A referenced question, answer, comment or user does not exist."""
    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=404, detail=detail)
