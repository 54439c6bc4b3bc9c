"""Tests for custom exception classes."""
from app.utils.exceptions import (
    AuthError,
    DatabaseError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)


class TestDatabaseError:

    def test_default_detail(self):
        err = DatabaseError()
        assert err.status_code == 500
        assert err.detail == "Database operation failed"


class TestValidationError:

    def test_default_detail(self):
        err = ValidationError()
        assert err.status_code == 400
        assert err.detail == "Invalid input"

    def test_custom_detail(self):
        err = ValidationError(detail="Content required")
        assert err.status_code == 400
        assert err.detail == "Content required"


class TestAuthError:

    def test_sets_bearer_challenge(self):
        err = AuthError()
        assert err.status_code == 401
        assert err.headers == {"WWW-Authenticate": "Bearer"}

    def test_custom_detail(self):
        assert AuthError("Invalid username or password").detail == "Invalid username or password"


class TestForbiddenError:

    def test_status(self):
        assert ForbiddenError().status_code == 403


class TestNotFoundError:

    def test_custom_detail(self):
        err = NotFoundError("Question not found")
        assert err.status_code == 404
        assert err.detail == "Question not found"
