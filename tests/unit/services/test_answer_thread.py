"""Tests for the embedded answer/comment operations."""
import pytest

from app.services import answer_thread
from app.utils.exceptions import NotFoundError, ValidationError


class TestRequireText:

    def test_returns_value_untouched(self):
        assert answer_thread.require_text("  hello ") == "  hello "

    @pytest.mark.parametrize("value", [None, "", "   ", "\n\t"])
    def test_blank_values_rejected(self, value):
        with pytest.raises(ValidationError) as exc:
            answer_thread.require_text(value)
        assert exc.value.status_code == 400
        assert exc.value.detail == "Content required"


class TestAppendAnswer:

    def test_new_answer_goes_to_end_with_defaults(self, question_doc):
        answer = answer_thread.append_answer(question_doc, "Use list.reverse()", "dave")

        assert question_doc["answers"][-1] is answer
        assert len(question_doc["answers"]) == 2
        assert answer["content"] == "Use list.reverse()"
        assert answer["user"] == "dave"
        assert answer["votes"] == 0
        assert answer["is_accepted"] is False
        assert answer["comments"] == []
        assert answer["id"] and answer["id"] != "a1"
        assert isinstance(answer["created_at"], str)

    def test_existing_answers_keep_their_order(self, question_doc):
        answer_thread.append_answer(question_doc, "second", "x")
        answer_thread.append_answer(question_doc, "third", "y")

        assert [a["content"] for a in question_doc["answers"]] == ["Use reversed()", "second", "third"]

    def test_question_without_answers_key(self):
        question = {"id": 1}
        answer = answer_thread.append_answer(question, "first", None)
        assert question["answers"] == [answer]

    def test_blank_content_leaves_document_untouched(self, question_doc):
        with pytest.raises(ValidationError):
            answer_thread.append_answer(question_doc, "   ", "dave")
        assert len(question_doc["answers"]) == 1


class TestAppendComment:

    def test_comment_appended_to_answer(self, question_doc):
        comment = answer_thread.append_comment(question_doc, "a1", "Nice", "erin")

        comments = question_doc["answers"][0]["comments"]
        assert comments[-1] is comment
        assert len(comments) == 2
        assert comment["votes"] == 0
        assert comment["user"] == "erin"
        assert "comments" not in comment

    def test_unknown_answer(self, question_doc):
        with pytest.raises(NotFoundError) as exc:
            answer_thread.append_comment(question_doc, "nope", "Nice", "erin")
        assert exc.value.status_code == 404
        assert exc.value.detail == "Answer not found"

    def test_blank_content_checked_before_lookup(self, question_doc):
        with pytest.raises(ValidationError):
            answer_thread.append_comment(question_doc, "nope", "", "erin")


class TestApplyVote:

    def test_up_vote_on_answer(self, question_doc):
        target = answer_thread.apply_vote(question_doc, "a1", "up")
        assert target is question_doc["answers"][0]
        assert target["votes"] == 4

    def test_down_vote_on_comment(self, question_doc):
        target = answer_thread.apply_vote(question_doc, "a1", "down", comment_id="c1")
        assert target is question_doc["answers"][0]["comments"][0]
        assert target["votes"] == -1
        # answer counter untouched
        assert question_doc["answers"][0]["votes"] == 3

    def test_counter_has_no_floor(self, question_doc):
        for _ in range(5):
            answer_thread.apply_vote(question_doc, "a1", "down")
        assert question_doc["answers"][0]["votes"] == -2

    def test_repeated_votes_all_count(self, question_doc):
        answer_thread.apply_vote(question_doc, "a1", "up")
        answer_thread.apply_vote(question_doc, "a1", "up")
        assert question_doc["answers"][0]["votes"] == 5

    def test_unknown_comment(self, question_doc):
        with pytest.raises(NotFoundError) as exc:
            answer_thread.apply_vote(question_doc, "a1", "up", comment_id="zzz")
        assert exc.value.detail == "Comment not found"

    def test_unknown_answer(self, question_doc):
        with pytest.raises(NotFoundError):
            answer_thread.apply_vote(question_doc, "zzz", "up")

    def test_invalid_direction(self, question_doc):
        with pytest.raises(ValidationError):
            answer_thread.apply_vote(question_doc, "a1", "sideways")
        assert question_doc["answers"][0]["votes"] == 3


class TestAcceptAnswer:

    def test_only_one_answer_accepted(self, question_doc):
        second = answer_thread.append_answer(question_doc, "other", "x")

        answer_thread.accept_answer(question_doc, "a1")
        accepted = answer_thread.accept_answer(question_doc, second["id"])

        assert accepted is second
        assert [a["is_accepted"] for a in question_doc["answers"]] == [False, True]

    def test_unknown_answer(self, question_doc):
        with pytest.raises(NotFoundError):
            answer_thread.accept_answer(question_doc, "missing")
