import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_wizard.extraction.gate import (  # noqa: E402
    MIN_TEXT_LENGTH,
    count_indicators,
    evaluate,
    evaluate_text,
    is_valid_resume_text,
)
from resume_wizard.extraction.models import ExtractionCandidate, ExtractionSource  # noqa: E402

FILLER = "lorem ipsum dolor sit amet " * 6


class ValidityGateTests(unittest.TestCase):
    def test_short_text_rejected_even_with_indicators(self):
        text = "Experience Education Skills email a@b.com 555-123-4567 2020 resume project"
        self.assertLess(len(text), MIN_TEXT_LENGTH)
        decision = evaluate_text(text)
        self.assertFalse(decision.accepted)
        self.assertGreaterEqual(decision.indicators_matched, 3)

    def test_three_indicators_accepted(self):
        text = "experience education skills " + FILLER
        self.assertGreaterEqual(len(text.strip()), MIN_TEXT_LENGTH)
        self.assertEqual(count_indicators(text), 3)
        self.assertTrue(is_valid_resume_text(text))

    def test_two_indicators_rejected(self):
        text = "experience education " + FILLER
        self.assertEqual(count_indicators(text), 2)
        self.assertFalse(is_valid_resume_text(text))

    def test_whitespace_padding_does_not_count(self):
        text = "experience education skills" + " " * 200
        self.assertFalse(is_valid_resume_text(text))

    def test_none_is_rejected(self):
        self.assertFalse(is_valid_resume_text(None))

    def test_contact_shapes_are_indicators(self):
        text = "reach me at jane@example.org or 555.123.4567 since March"
        self.assertEqual(count_indicators(text), 3)

    def test_evaluate_keeps_candidate_only_when_accepted(self):
        good = ExtractionCandidate(ExtractionSource.OCR, "experience education skills " + FILLER)
        bad = ExtractionCandidate(ExtractionSource.OCR, "too short")
        self.assertIs(evaluate(good).candidate, good)
        self.assertIsNone(evaluate(bad).candidate)


if __name__ == "__main__":
    unittest.main()
