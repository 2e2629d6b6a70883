import re
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_wizard.extraction.hybrid import (  # noqa: E402
    ADDITIONAL_INFO_MARKER,
    merge_candidates,
    unique_tokens,
)
from resume_wizard.extraction.models import ExtractionCandidate, ExtractionSource  # noqa: E402

BASE_TEXT = (
    "Jane Doe software engineer. Experience at Acme Corp building payment services "
    "with python and postgres for seven years."
)
OTHER_TEXT = (
    "jane doe jane@example.org 555-123-4567 github.com/janedoe kubernetes terraform "
    "(team lead) and a ~weird~ token"
)


class HybridMergeTests(unittest.TestCase):
    def test_tokens_from_other_candidate_are_unioned(self):
        base = ExtractionCandidate(ExtractionSource.STRUCTURAL_TEXT, BASE_TEXT)
        other = ExtractionCandidate(ExtractionSource.OCR, OTHER_TEXT)
        self.assertGreater(base.length, 100)
        self.assertGreater(other.length, 100)
        self.assertGreater(base.length, other.length)

        merged = merge_candidates([base, other])

        self.assertEqual(merged.source, ExtractionSource.HYBRID)
        base_tokens = set(BASE_TEXT.lower().split())
        merged_lower = merged.text.lower()
        for token in OTHER_TEXT.lower().split():
            if len(token) > 3 and token not in base_tokens and re.fullmatch(r"[a-z0-9@._-]+", token):
                self.assertIn(token, merged_lower)

    def test_longest_candidate_is_base(self):
        short = ExtractionCandidate(ExtractionSource.OCR, "x" * 120)
        long = ExtractionCandidate(ExtractionSource.AI_VISION, "y" * 300)
        merged = merge_candidates([short, long])
        self.assertTrue(merged.text.startswith("y" * 300))
        self.assertIn(ADDITIONAL_INFO_MARKER, merged.text)

    def test_candidates_under_floor_are_ignored(self):
        tiny = ExtractionCandidate(ExtractionSource.OCR, "kubernetes terraform")
        base = ExtractionCandidate(ExtractionSource.STRUCTURAL_TEXT, BASE_TEXT)
        merged = merge_candidates([tiny, base])
        self.assertEqual(merged.text, BASE_TEXT)

    def test_nothing_usable_gives_empty_candidate(self):
        merged = merge_candidates([ExtractionCandidate(ExtractionSource.OCR, "short")])
        self.assertTrue(merged.is_empty)
        self.assertEqual(merged.source, ExtractionSource.HYBRID)

    def test_unique_tokens_filters(self):
        tokens = unique_tokens("python engineer", "Python ENGINEER golang (lead) rust jane@x.io")
        self.assertEqual(tokens, ["golang", "rust", "jane@x.io"])


if __name__ == "__main__":
    unittest.main()
