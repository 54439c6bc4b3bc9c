"""Tests for the answer notification side effect."""
from unittest.mock import patch

from app.services.notification_service import ANSWER_MESSAGE, notify_question_author


QUESTION = {"id": 12, "user": "alice"}
ANSWER = {"id": "a1", "user": "bob"}


class TestNotifyQuestionAuthor:

    @patch("app.services.notification_service.NotificationRepository.create_notification")
    @patch("app.services.notification_service.UserRepository.get_user_by_username")
    def test_creates_answer_notification(self, mock_get_user, mock_create):
        mock_get_user.return_value = {"id": 5, "username": "alice"}
        mock_create.return_value = {"id": 1}

        result = notify_question_author(QUESTION, ANSWER)

        assert result == {"id": 1}
        mock_get_user.assert_called_once_with("alice")
        mock_create.assert_called_once_with(
            user_id=5,
            type="answer",
            related_id="12",
            message=ANSWER_MESSAGE,
        )

    @patch("app.services.notification_service.NotificationRepository.create_notification")
    @patch("app.services.notification_service.UserRepository.get_user_by_username", return_value=None)
    def test_unknown_author_skipped(self, mock_get_user, mock_create):
        assert notify_question_author(QUESTION, ANSWER) is None
        mock_create.assert_not_called()

    @patch("app.services.notification_service.UserRepository.get_user_by_username")
    def test_self_answer_skipped(self, mock_get_user):
        assert notify_question_author(QUESTION, {"id": "a2", "user": "alice"}) is None
        mock_get_user.assert_not_called()

    @patch("app.services.notification_service.UserRepository.get_user_by_username")
    def test_anonymous_question_skipped(self, mock_get_user):
        assert notify_question_author({"id": 3, "user": None}, ANSWER) is None
        mock_get_user.assert_not_called()

    @patch("app.services.notification_service.NotificationRepository.create_notification",
           side_effect=Exception("db down"))
    @patch("app.services.notification_service.UserRepository.get_user_by_username",
           return_value={"id": 5})
    def test_failure_is_swallowed(self, mock_get_user, mock_create):
        assert notify_question_author(QUESTION, ANSWER) is None

    @patch("app.services.notification_service.UserRepository.get_user_by_username")
    @patch("app.services.notification_service.get_settings")
    def test_disabled_by_settings(self, mock_get_settings, mock_get_user, mock_settings):
        mock_settings.notifications_enabled = False
        mock_get_settings.return_value = mock_settings

        assert notify_question_author(QUESTION, ANSWER) is None
        mock_get_user.assert_not_called()
