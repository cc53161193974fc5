# tests/test_models.py
"""Tests for row <-> model conversion and enums."""

from datetime import datetime, timezone

from core.models import (
    Answer,
    Question,
    QuestionFilter,
    QuestionThread,
    Vote,
    VoteType,
)
from core.models.timestamps import format_date, parse_timestamp


class TestQuestionModel:
    def test_from_dict_parses_row(self):
        question = Question.from_dict({
            'id': 'q1',
            'title': 'How?',
            'content': 'Details',
            'user_id': 'u1',
            'created_at': '2024-05-01T10:00:00+00:00',
            'is_answered': True,
        })
        assert question.id == 'q1'
        assert question.is_answered is True
        assert question.created_at == datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)

    def test_insert_row_leaves_server_columns_out(self):
        row = Question(title='t', content='c', user_id='u1').to_insert()
        assert row == {'title': 't', 'content': 'c', 'user_id': 'u1'}


class TestAnswerModel:
    def test_insert_row_carries_parent_and_owner(self):
        row = Answer(content='x', question_id='q1', user_id='u1').to_insert()
        assert row == {'content': 'x', 'question_id': 'q1', 'user_id': 'u1'}

    def test_missing_counts_default_to_zero(self):
        answer = Answer.from_dict({'id': 'a1', 'content': 'x', 'likes': None})
        assert answer.likes == 0
        assert answer.dislikes == 0


class TestVoteModel:
    def test_round_trip_keeps_vote_type(self):
        vote = Vote.from_dict({'answer_id': 'a1', 'user_id': 'u1', 'vote_type': 'dislike'})
        assert vote.vote_type is VoteType.DISLIKE
        assert vote.to_dict()['vote_type'] == 'dislike'


class TestQuestionFilter:
    def test_answered_flag(self):
        assert QuestionFilter.ALL.answered_flag is None
        assert QuestionFilter.ANSWERED.answered_flag is True
        assert QuestionFilter.UNANSWERED.answered_flag is False

    def test_accepts_plain_strings(self):
        assert QuestionFilter("unanswered") is QuestionFilter.UNANSWERED


class TestQuestionThread:
    def test_answer_count_label(self):
        thread = QuestionThread(question=Question(id='q1'))
        assert thread.answer_count_label == "0 Answers"
        thread.answers = [Answer(id='a1')]
        assert thread.answer_count_label == "1 Answer"

    def test_vote_for_unknown_answer(self):
        thread = QuestionThread(question=Question(id='q1'), votes={'a1': VoteType.LIKE})
        assert thread.vote_for('a1') is VoteType.LIKE
        assert thread.vote_for('a2') is None


class TestTimestamps:
    def test_parse_zulu_suffix(self):
        assert parse_timestamp('2024-05-01T10:00:00Z') == datetime(2024, 5, 1, 10, tzinfo=timezone.utc)

    def test_parse_none(self):
        assert parse_timestamp(None) is None

    def test_format_date(self):
        assert format_date(datetime(2024, 5, 1)) == '01.05.2024'
        assert format_date(None) == '-'
