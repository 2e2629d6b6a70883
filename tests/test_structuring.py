import json
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fakes import OVERLAY_PAYLOAD, STRUCTURED_PAYLOAD, FakeAIClient, overlay_response, structured_response  # noqa: E402

from resume_wizard.ai.errors import AIQuotaError, ValidationFailure  # noqa: E402
from resume_wizard.schemas.api import ResumePrompt  # noqa: E402
from resume_wizard.schemas.resume import StructuredResume  # noqa: E402
from resume_wizard.services.enhancement import enhance_resume  # noqa: E402
from resume_wizard.services.llm_json import first_json_value  # noqa: E402
from resume_wizard.services.structuring import generate_resume_from_prompt, structure_resume  # noqa: E402


class FirstJsonValueTests(unittest.TestCase):
    def test_object_inside_prose(self):
        value = first_json_value('Sure! {"a": 1} and then {"b": 2}')
        self.assertEqual(value, {"a": 1})

    def test_skips_broken_braces(self):
        value = first_json_value('{not json} ```json\n{"ok": true}\n```')
        self.assertEqual(value, {"ok": True})

    def test_array(self):
        self.assertEqual(first_json_value('x ["a", "b"] y', list), ["a", "b"])

    def test_missing_json_raises(self):
        with self.assertRaises(ValidationFailure):
            first_json_value("no payload here")


class StructuringTests(unittest.IsolatedAsyncioTestCase):
    async def test_structures_resume_from_wrapped_json(self):
        client = FakeAIClient([structured_response()])
        resume = await structure_resume(client, "resume text")

        self.assertEqual(resume.personal_info.full_name, "Jane Doe")
        self.assertEqual(resume.education[0].year, "2020")
        self.assertEqual(resume.experience[0].achievements, ["Led migration to PostgreSQL"])
        self.assertTrue(client.calls[0]["json_output"])

    async def test_empty_full_name_is_validation_failure(self):
        client = FakeAIClient(['Here is the data: {"personalInfo": {"fullName": ""}, "education": []}'])
        with self.assertRaises(ValidationFailure):
            await structure_resume(client, "resume text")

    async def test_missing_personal_info_is_validation_failure(self):
        client = FakeAIClient(['{"education": []}'])
        with self.assertRaises(ValidationFailure):
            await structure_resume(client, "resume text")

    async def test_schema_type_error_is_validation_failure(self):
        payload = dict(STRUCTURED_PAYLOAD, experience="five years")
        client = FakeAIClient([json.dumps(payload)])
        with self.assertRaises(ValidationFailure):
            await structure_resume(client, "resume text")

    async def test_provider_errors_propagate(self):
        client = FakeAIClient([AIQuotaError("quota")])
        with self.assertRaises(AIQuotaError):
            await structure_resume(client, "resume text")

    async def test_generate_from_prompt(self):
        client = FakeAIClient([structured_response()])
        prompt = ResumePrompt(full_name="Jane Doe", target_role="Backend Engineer", skills="Python")
        resume = await generate_resume_from_prompt(client, prompt)
        self.assertEqual(resume.personal_info.full_name, "Jane Doe")
        self.assertIn("Target Role: Backend Engineer", client.calls[0]["messages"][1].content)


class EnhancementTests(unittest.IsolatedAsyncioTestCase):
    async def test_overlay_is_built_without_touching_resume(self):
        resume = StructuredResume.model_validate(STRUCTURED_PAYLOAD)
        before = resume.model_dump()
        overlay = await enhance_resume(FakeAIClient([overlay_response()]), resume)

        self.assertTrue(overlay.career_summary)
        self.assertEqual(overlay.optimized_projects[0].id, "proj_1")
        self.assertEqual(resume.model_dump(), before)

    async def test_missing_summary_or_skills_fails(self):
        resume = StructuredResume.model_validate(STRUCTURED_PAYLOAD)
        for broken in (
            dict(OVERLAY_PAYLOAD, careerSummary=""),
            dict(OVERLAY_PAYLOAD, enhancedSkills=[]),
        ):
            with self.subTest(payload=broken):
                with self.assertRaises(ValidationFailure):
                    await enhance_resume(FakeAIClient([json.dumps(broken)]), resume)


class ResumeSchemaTests(unittest.TestCase):
    def test_nulls_become_defaults_and_ids_are_unique(self):
        resume = StructuredResume.model_validate(
            {
                "personalInfo": {"fullName": "Jane", "email": None},
                "careerObjective": None,
                "experience": [{"id": "a"}, {"id": "a"}, {}],
                "skills": {"technical": "Python, SQL", "soft": None},
                "languages": None,
            }
        )
        self.assertEqual(resume.personal_info.email, "")
        self.assertEqual(resume.career_objective, "")
        self.assertEqual([item.id for item in resume.experience], ["a", "exp_2", "exp_3"])
        self.assertEqual(resume.skills.technical, ["Python", "SQL"])
        self.assertEqual(resume.skills.soft, [])
        self.assertEqual(resume.languages, [])

    def test_wire_format_is_camel_case(self):
        resume = StructuredResume.model_validate(STRUCTURED_PAYLOAD)
        dumped = resume.model_dump(by_alias=True)
        self.assertIn("personalInfo", dumped)
        self.assertIn("fullName", dumped["personalInfo"])
        self.assertIn("linkedIn", dumped["personalInfo"])
        self.assertIn("careerObjective", dumped)


if __name__ == "__main__":
    unittest.main()
