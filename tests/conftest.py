"""Configuration for pytest."""
import copy
from datetime import datetime, timezone

import pytest
from unittest.mock import MagicMock, Mock


@pytest.fixture
def mock_settings():
    """Mock application settings for testing."""
    settings = Mock()
    settings.app_name = "Test StackIt API"
    settings.debug = True
    settings.db_name = "test_db"
    settings.db_user = "test_user"
    settings.db_password = "test_password"
    settings.db_host = "localhost"
    settings.db_port = 5432
    settings.notifications_enabled = True
    settings.allowed_origins = ["http://localhost:3000"]
    return settings


@pytest.fixture
def question_doc():
    """A stored question document with one answer and one comment."""
    return {
        "id": 7,
        "title": "How do I reverse a list?",
        "description": "<p>In Python</p>",
        "tags": ["python", "lists"],
        "user": "alice",
        "created_at": datetime(2026, 1, 5, 12, 0, tzinfo=timezone.utc),
        "answers": [
            {
                "id": "a1",
                "content": "Use reversed()",
                "user": "bob",
                "votes": 3,
                "is_accepted": False,
                "created_at": "2026-01-05T12:30:00+00:00",
                "comments": [
                    {
                        "id": "c1",
                        "content": "Or slicing",
                        "user": "carol",
                        "votes": 0,
                        "created_at": "2026-01-05T12:45:00+00:00",
                    }
                ],
            }
        ],
    }


@pytest.fixture
def in_memory_question_repo():
    """QuestionRepository stand-in backed by a dict of documents.

    ``modify_answers`` works on a copy and only stores it when ``mutate``
    returns normally, like the real transaction does.
    """
    store = {}
    repo = MagicMock()

    def create_question(title, description, tags, user):
        question_id = len(store) + 1
        store[question_id] = {
            "id": question_id,
            "title": title,
            "description": description,
            "tags": tags,
            "user": user,
            "created_at": datetime.now(timezone.utc),
            "answers": [],
        }
        return copy.deepcopy(store[question_id])

    def get_question(question_id):
        question = store.get(question_id)
        return copy.deepcopy(question) if question else None

    def modify_answers(question_id, mutate):
        if question_id not in store:
            return None
        question = copy.deepcopy(store[question_id])
        result = mutate(question)
        store[question_id] = question
        return copy.deepcopy(question), result

    repo.create_question.side_effect = create_question
    repo.get_question.side_effect = get_question
    repo.modify_answers.side_effect = modify_answers
    repo.store = store
    return repo
