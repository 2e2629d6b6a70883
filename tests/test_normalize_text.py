import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_wizard.normalize.text import (  # noqa: E402
    collapse_whitespace,
    fix_contact_patterns,
    fix_ocr_confusions,
    normalize_text,
)

SAMPLES = [
    "",
    "plain text",
    "  \t\n\n\n\nEXPERIENCE\r\n0pen l0 rn vv II\r\n",
    "Contact: john @ example.com, a@ b@ c, phone 555 123 4567 890 1234",
    "WORLD WAR II\n\n\n\n\nSKILLS\tPython\x07React\x00Docker",
    "Café manager • led team – 2019\n\n\nEDUCATION",
    "0l5 l0x ll0 II5 rnrn vv.vv",
    "555.123.4567\n555 - 123 - 4567\n5551234567",
]


class NormalizeTextTests(unittest.TestCase):
    def test_normalize_is_idempotent(self):
        for sample in SAMPLES:
            with self.subTest(sample=sample):
                once = normalize_text(sample)
                self.assertEqual(normalize_text(once), once)

    def test_ocr_confusions(self):
        self.assertEqual(fix_ocr_confusions("0ffice"), "Office")
        self.assertEqual(fix_ocr_confusions("l5 years"), "15 years")
        self.assertEqual(fix_ocr_confusions("rn"), "m")
        self.assertEqual(fix_ocr_confusions("vv"), "w")
        self.assertEqual(fix_ocr_confusions("II"), "ll")
        self.assertEqual(fix_ocr_confusions("corner"), "corner")

    def test_contact_patterns(self):
        self.assertEqual(fix_contact_patterns("jane @ example.org"), "jane@example.org")
        self.assertEqual(fix_contact_patterns("call 555 123 4567"), "call 555-123-4567")
        self.assertEqual(fix_contact_patterns("555.123.4567"), "555-123-4567")

    def test_section_headers_title_cased(self):
        text = normalize_text("EXPERIENCE\nEDUCATION\nSKILLS\nPROJECTS\nCERTIFICATIONS")
        self.assertEqual(text, "Experience\nEducation\nSkills\nProjects\nCertifications")

    def test_blank_line_runs_collapse(self):
        self.assertEqual(collapse_whitespace("a\n\n\n\n\nb"), "a\n\nb")
        self.assertEqual(collapse_whitespace("  a   b  \n  c  "), "a b\nc")

    def test_control_characters_removed(self):
        self.assertEqual(normalize_text("Python\x07React"), "Python React")
        self.assertNotIn("\x00", normalize_text("a\x00b"))

    def test_bullets_and_dashes_kept(self):
        text = normalize_text("• Led team – 2019")
        self.assertIn("•", text)
        self.assertIn("–", text)


if __name__ == "__main__":
    unittest.main()
