import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fakes import STRUCTURED_PAYLOAD, FakeAIClient  # noqa: E402

from resume_wizard.ai.errors import AIQuotaError, ConfigurationError  # noqa: E402
from resume_wizard.schemas.resume import StructuredResume  # noqa: E402
from resume_wizard.services.chat_service import chat_answer, resume_context, trim_sentences  # noqa: E402
from resume_wizard.services.suggestions import DEFAULT_SUGGESTIONS, suggest_improvements  # noqa: E402


class TrimSentencesTests(unittest.TestCase):
    def test_long_answer_is_trimmed(self):
        text = "One. Two! Three? Four. Five."
        self.assertEqual(trim_sentences(text), "One. Two! Three?")

    def test_short_answer_unchanged(self):
        self.assertEqual(trim_sentences("  Add metrics. Keep it short.  "), "Add metrics. Keep it short.")

    def test_missing_final_punctuation(self):
        self.assertEqual(trim_sentences("A. B. C. D", limit=2), "A. B.")


class ChatTests(unittest.IsolatedAsyncioTestCase):
    async def test_answer_uses_resume_context(self):
        resume = StructuredResume.model_validate(STRUCTURED_PAYLOAD)
        client = FakeAIClient(["Learn Kubernetes. Add metrics. Try mentoring. What role do you want?"])

        answer = await chat_answer(client, "What should I learn?", resume)

        self.assertEqual(answer, "Learn Kubernetes. Add metrics. Try mentoring.")
        self.assertIn("Role: Software Engineer", client.calls[0]["messages"][1].content)

    def test_context_without_resume(self):
        self.assertIsNone(resume_context(None))


class SuggestionTests(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.resume = StructuredResume.model_validate(STRUCTURED_PAYLOAD)

    async def test_parses_object_payload(self):
        client = FakeAIClient(['{"suggestions": ["a", "b", "c", "d", "e", "f"]}'])
        self.assertEqual(await suggest_improvements(client, self.resume), ["a", "b", "c", "d", "e"])

    async def test_parses_bare_array(self):
        client = FakeAIClient(['Sure: ["Quantify impact", "Add a summary"]'])
        self.assertEqual(await suggest_improvements(client, self.resume), ["Quantify impact", "Add a summary"])

    async def test_defaults_on_garbage_or_provider_error(self):
        for response in ("no json at all", AIQuotaError("quota")):
            with self.subTest(response=response):
                suggestions = await suggest_improvements(FakeAIClient([response]), self.resume)
                self.assertEqual(suggestions, list(DEFAULT_SUGGESTIONS))

    async def test_configuration_error_propagates(self):
        with self.assertRaises(ConfigurationError):
            await suggest_improvements(FakeAIClient([ConfigurationError("missing key")]), self.resume)


if __name__ == "__main__":
    unittest.main()
