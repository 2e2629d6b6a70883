import sys
import unittest
from pathlib import Path
from unittest import mock

import fitz
from PIL import Image

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fakes import FakeAIClient  # noqa: E402

from resume_wizard.ai.errors import AIUnavailableError  # noqa: E402
from resume_wizard.extraction.models import ExtractionSource, RawDocument, UnreadableDocumentError  # noqa: E402
from resume_wizard.extraction.ocr import OcrRead, _text_and_confidence, best_read, preprocess_for_ocr  # noqa: E402
from resume_wizard.extraction.rendering import to_jpeg  # noqa: E402
from resume_wizard.extraction.structural import group_text_by_position, open_pdf, read_text_layer  # noqa: E402
from resume_wizard.extraction.vision import extract_vision_text  # noqa: E402


def _pdf_with_text(*lines):
    doc = fitz.open()
    page = doc.new_page()
    for index, line in enumerate(lines):
        page.insert_text((72, 72 + index * 24), line)
    content = doc.tobytes()
    doc.close()
    return content


class StructuralTextTests(unittest.TestCase):
    def test_group_text_by_position(self):
        items = [
            (200.0, 700.0, "Doe"),
            (72.0, 701.0, "Jane"),
            (72.0, 650.0, "EXPERIENCE"),
            (72.0, 600.0, "   "),
        ]
        self.assertEqual(group_text_by_position(items), "Jane Doe\nEXPERIENCE")

    def test_reads_text_layer(self):
        document = RawDocument(content=_pdf_with_text("Jane Doe", "jane@example.org"), filename="cv.pdf")
        candidate = read_text_layer(document, max_pages=10)
        self.assertEqual(candidate.source, ExtractionSource.STRUCTURAL_TEXT)
        self.assertEqual(candidate.pages_read, 1)
        self.assertIn("Jane Doe", candidate.text)

    def test_unreadable_pdf(self):
        with self.assertRaises(UnreadableDocumentError):
            open_pdf(RawDocument(content=b"definitely not a pdf", filename="cv.pdf"))


class OcrHelperTests(unittest.TestCase):
    def test_text_and_confidence_groups_lines(self):
        data = {
            "text": ["Jane", "Doe", "", "Python", "noise"],
            "conf": ["90", "80", "-1", "70", "-1"],
            "block_num": [1, 1, 1, 1, 1],
            "par_num": [1, 1, 1, 1, 1],
            "line_num": [1, 1, 1, 2, 2],
        }
        read = _text_and_confidence(data)
        self.assertEqual(read.text, "Jane Doe\nPython")
        self.assertAlmostEqual(read.confidence, 80.0)

    def test_best_read_prefers_confidence_then_first(self):
        first = OcrRead(text="first", confidence=60.0)
        tie = OcrRead(text="tie", confidence=60.0)
        better = OcrRead(text="better", confidence=75.0)
        self.assertIs(best_read([first, tie]), first)
        self.assertIs(best_read([first, better, tie]), better)
        self.assertEqual(best_read([]).text, "")

    def test_preprocess_returns_grayscale(self):
        image = Image.new("RGB", (4, 4), color=(200, 10, 10))
        self.assertEqual(preprocess_for_ocr(image).mode, "L")
        self.assertTrue(to_jpeg(image).startswith(b"\xff\xd8"))


class VisionTests(unittest.IsolatedAsyncioTestCase):
    async def test_without_client_is_empty(self):
        candidate = await extract_vision_text(RawDocument(content=b"%PDF-"), 3)
        self.assertTrue(candidate.is_empty)

    async def test_pages_are_joined_and_failures_skipped(self):
        client = FakeAIClient()
        calls = {"count": 0}

        async def read_image(*, instruction, image, mime_type="image/jpeg"):
            calls["count"] += 1
            if calls["count"] == 2:
                raise AIUnavailableError("timeout")
            return f"page {calls['count']}"

        client.read_image = read_image
        with mock.patch(
            "resume_wizard.extraction.vision.render_pages_as_jpeg", return_value=[b"p1", b"p2", b"p3"]
        ):
            candidate = await extract_vision_text(RawDocument(content=b"%PDF-"), 3, client=client)

        self.assertEqual(candidate.source, ExtractionSource.AI_VISION)
        self.assertEqual(candidate.text, "page 1\n\npage 3")
        self.assertEqual(candidate.pages_read, 3)


if __name__ == "__main__":
    unittest.main()
