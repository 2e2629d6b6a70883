import asyncio
import sys
import unittest
from dataclasses import replace
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fakes import RESUME_TEXT, FakeAIClient, FakeStrategy  # noqa: E402

from resume_wizard.core.config import settings  # noqa: E402
from resume_wizard.extraction.fallback import PLACEHOLDER_NOTICE  # noqa: E402
from resume_wizard.extraction.models import (  # noqa: E402
    ExtractionSource,
    RawDocument,
    UnreadableDocumentError,
)
from resume_wizard.extraction.pipeline import ExtractionPipeline, default_strategies  # noqa: E402

S = ExtractionSource
DOCUMENT = RawDocument(content=b"%PDF-1.4 test", filename="resume.pdf")
PARTIAL_A = "Experience at Acme Corp. Education BS 2020. Skills python. " * 2
PARTIAL_B = "contact jane@example.org github janedoe kubernetes terraform dashboards " * 2


class ExtractionPipelineTests(unittest.IsolatedAsyncioTestCase):
    async def test_text_rich_pdf_accepted_on_first_strategy(self):
        structural = FakeStrategy(S.STRUCTURAL_TEXT, RESUME_TEXT)
        ocr = FakeStrategy(S.OCR, RESUME_TEXT)
        vision = FakeStrategy(S.AI_VISION, RESUME_TEXT)
        pipeline = ExtractionPipeline([s.as_strategy() for s in (structural, ocr, vision)])

        outcome = await pipeline.run(DOCUMENT)

        self.assertEqual(outcome.source, S.STRUCTURAL_TEXT)
        self.assertTrue(outcome.decision.accepted)
        self.assertEqual(outcome.attempted, (S.STRUCTURAL_TEXT,))
        self.assertFalse(outcome.synthetic)
        self.assertIsNone(outcome.notice)
        self.assertEqual((ocr.calls, vision.calls), (0, 0))

    async def test_scanned_pdf_falls_through_to_ocr(self):
        structural = FakeStrategy(S.STRUCTURAL_TEXT, "")
        ocr = FakeStrategy(S.OCR, RESUME_TEXT)
        vision = FakeStrategy(S.AI_VISION, RESUME_TEXT)
        pipeline = ExtractionPipeline([s.as_strategy() for s in (structural, ocr, vision)])

        outcome = await pipeline.run(DOCUMENT)

        self.assertEqual(outcome.source, S.OCR)
        self.assertEqual(outcome.attempted, (S.STRUCTURAL_TEXT, S.OCR))
        self.assertEqual(vision.calls, 0)

    async def test_short_candidates_merge_into_hybrid(self):
        self.assertLess(len(PARTIAL_A), 150)
        self.assertLess(len(PARTIAL_B), 150)
        strategies = [
            FakeStrategy(S.STRUCTURAL_TEXT, PARTIAL_A),
            FakeStrategy(S.OCR, PARTIAL_B),
            FakeStrategy(S.AI_VISION, ""),
        ]
        outcome = await ExtractionPipeline([s.as_strategy() for s in strategies]).run(DOCUMENT)

        self.assertEqual(outcome.source, S.HYBRID)
        self.assertIn("Additional Information:", outcome.candidate.text)
        self.assertEqual(outcome.attempted[-1], S.HYBRID)
        # Every strategy ran once in order, then once more for the merge.
        self.assertEqual([s.calls for s in strategies], [2, 2, 2])

    async def test_unusable_candidates_fall_back_to_placeholder(self):
        strategies = [
            FakeStrategy(S.STRUCTURAL_TEXT, "Page 1"),
            FakeStrategy(S.OCR, "~~ ## ~~"),
            FakeStrategy(S.AI_VISION, "I cannot read this image."),
        ]
        document = RawDocument(content=b"%PDF-1.4", filename="john_smith.pdf")

        outcome = await ExtractionPipeline([s.as_strategy() for s in strategies]).run(document)

        self.assertEqual(outcome.source, S.SYNTHETIC_FALLBACK)
        self.assertTrue(outcome.synthetic)
        self.assertEqual(outcome.notice, PLACEHOLDER_NOTICE)
        self.assertIn("John Smith", outcome.candidate.text)
        self.assertEqual(
            outcome.attempted,
            (S.STRUCTURAL_TEXT, S.OCR, S.AI_VISION, S.HYBRID, S.SYNTHETIC_FALLBACK),
        )

    async def test_strategy_errors_and_timeouts_become_empty_candidates(self):
        strategies = [
            FakeStrategy(S.STRUCTURAL_TEXT, error=UnreadableDocumentError("not a pdf")),
            FakeStrategy(S.OCR, RESUME_TEXT, delay=1.0),
            FakeStrategy(S.AI_VISION, error=RuntimeError("boom")),
        ]
        pipeline = ExtractionPipeline(
            [
                strategies[0].as_strategy(),
                strategies[1].as_strategy(timeout_s=0.01),
                strategies[2].as_strategy(),
            ]
        )

        outcome = await pipeline.run(DOCUMENT)

        self.assertEqual(outcome.source, S.SYNTHETIC_FALLBACK)
        self.assertTrue(outcome.candidate.text)

    async def test_hybrid_runs_strategies_concurrently(self):
        slow = [FakeStrategy(source, "", delay=0.2) for source in (S.STRUCTURAL_TEXT, S.OCR, S.AI_VISION)]
        pipeline = ExtractionPipeline([s.as_strategy() for s in slow])

        loop = asyncio.get_running_loop()
        started = loop.time()
        await pipeline.run(DOCUMENT)
        elapsed = loop.time() - started

        # Three sequential attempts plus one concurrent round, not six sequential ones.
        self.assertLess(elapsed, 1.1)

    def test_default_strategies_follow_settings(self):
        no_client = default_strategies(None, settings)
        self.assertEqual([s.source for s in no_client][:1], [S.STRUCTURAL_TEXT])
        self.assertNotIn(S.AI_VISION, [s.source for s in no_client])

        with_client = default_strategies(FakeAIClient(), replace(settings, ocr_enabled=True))
        self.assertEqual([s.source for s in with_client], [S.STRUCTURAL_TEXT, S.OCR, S.AI_VISION])
        self.assertEqual(with_client[0].max_pages, settings.structural_max_pages)

        without_ocr = default_strategies(FakeAIClient(), replace(settings, ocr_enabled=False))
        self.assertEqual([s.source for s in without_ocr], [S.STRUCTURAL_TEXT, S.AI_VISION])


if __name__ == "__main__":
    unittest.main()
