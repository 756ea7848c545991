"""
Unit tests for the QuizSession model.
"""

import unittest
from datetime import datetime, timezone

from finlit.models import UNANSWERED, Category, Level, Question, QuizSession
from finlit.utils.validation import validate_quiz_session


def _question(qid, category=Category.SAVINGS, correct_index=0):
    return Question(
        id=qid,
        prompt=f"Prompt {qid}?",
        options=("A", "B", "C", "D"),
        correct_index=correct_index,
        level=Level.NOVICE,
        category=category,
        explanation="Because.",
        difficulty_weight=1,
    )


class TestQuizSession(unittest.TestCase):
    """Test QuizSession defaults, helpers and serialization."""

    def setUp(self):
        self.questions = [_question("q1"), _question("q2", Category.CREDIT, 2), _question("q3")]
        self.session = QuizSession(user_level=Level.NOVICE, questions=self.questions)

    def test_session_id_format(self):
        self.assertTrue(self.session.session_id.startswith("qs-"))
        other = QuizSession(user_level=Level.NOVICE)
        self.assertNotEqual(self.session.session_id, other.session_id)

    def test_defaults(self):
        self.assertEqual(self.session.total_questions, 3)
        self.assertEqual(self.session.user_answers, [UNANSWERED] * 3)
        self.assertEqual(self.session.score, 0)
        self.assertEqual(self.session.category_performance, {})
        self.assertFalse(self.session.is_scored)

    def test_accuracy(self):
        self.session.score = 2
        self.assertAlmostEqual(self.session.accuracy, 66.6666, places=3)

    def test_accuracy_of_empty_session(self):
        self.assertEqual(QuizSession(user_level=Level.ADVANCED).accuracy, 0.0)

    def test_answer_at_out_of_range(self):
        self.session.user_answers = [0]
        self.assertEqual(self.session.answer_at(0), 0)
        self.assertEqual(self.session.answer_at(2), UNANSWERED)
        self.assertEqual(self.session.answer_at(-1), UNANSWERED)

    def test_answered_count(self):
        self.session.user_answers = [0, UNANSWERED, 3]
        self.assertEqual(self.session.answered_count(), 2)

    def test_public_questions_hide_answers(self):
        public = self.session.public_questions()
        self.assertEqual(len(public), 3)
        for item in public:
            self.assertNotIn("correct_index", item)
            self.assertNotIn("explanation", item)
            self.assertEqual(len(item["options"]), 4)

    def test_dict_round_trip(self):
        self.session.user_answers = [0, 2, 1]
        self.session.score = 2
        self.session.category_performance = {Category.SAVINGS: 1, Category.CREDIT: 1}
        self.session.completed_at = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)
        self.session.user_id = "u-7"

        data = self.session.to_dict()
        self.assertEqual(data["user_level"], "novice")
        self.assertEqual(data["category_performance"], {"savings": 1, "credit": 1})

        restored = QuizSession.from_dict(data)
        self.assertEqual(restored.session_id, self.session.session_id)
        self.assertEqual([q.id for q in restored.questions], ["q1", "q2", "q3"])
        self.assertEqual(restored.category_performance, self.session.category_performance)
        self.assertEqual(restored.completed_at, self.session.completed_at)
        self.assertTrue(restored.is_scored)

    def test_snapshot_matches_schema(self):
        result = validate_quiz_session(self.session.to_dict())
        self.assertTrue(result, result.errors)

    def test_schema_rejects_bad_session_id(self):
        data = self.session.to_dict()
        data["session_id"] = "session-1"
        self.assertFalse(validate_quiz_session(data))


if __name__ == "__main__":
    unittest.main()
