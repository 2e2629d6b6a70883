from __future__ import annotations

import json
from typing import Any

RESUME_JSON_SHAPE = """{
  "personalInfo": {"fullName": "", "email": "", "phone": "", "location": "", "linkedIn": "", "github": "", "website": ""},
  "careerObjective": "",
  "education": [{"id": "edu_1", "degree": "", "institution": "", "year": "", "gpa": "", "honors": ""}],
  "experience": [{"id": "exp_1", "company": "", "position": "", "duration": "", "location": "", "description": "", "achievements": [""]}],
  "projects": [{"id": "proj_1", "title": "", "description": "", "technologies": [""], "link": "", "github": ""}],
  "skills": {"technical": [""], "soft": [""]},
  "certifications": [{"id": "cert_1", "name": "", "issuer": "", "date": "", "expiryDate": "", "credentialId": ""}],
  "languages": [""]
}"""

OVERLAY_JSON_SHAPE = """{
  "careerSummary": "2-3 sentence professional summary with quantified achievements",
  "enhancedSkills": ["relevant skill"],
  "optimizedProjects": [{"id": "proj_1", "title": "", "description": "", "technologies": [""], "link": "", "github": ""}],
  "professionalExperience": [{"id": "exp_1", "company": "", "position": "", "duration": "", "location": "", "description": "", "achievements": [""]}],
  "portfolioIntro": "one sentence portfolio introduction"
}"""

STRUCTURE_SYSTEM_PROMPT = f"""You are an expert resume parser. Map resume text into JSON.
Rules:
- Extract exactly what is written. Never invent information.
- Keep dates and durations in their original form.
- Include every skill mentioned anywhere in the text.
- Leave a field empty when the information is missing.
Return one JSON object with exactly this shape and nothing else:
{RESUME_JSON_SHAPE}"""

GENERATE_SYSTEM_PROMPT = f"""You are a professional resume writer. Build an ATS-friendly resume
from the candidate's notes. Tailor every section to the target role, use industry-standard
terminology and quantify achievements where the notes allow it. Use the candidate's name as given.
Return one JSON object with exactly this shape and nothing else:
{RESUME_JSON_SHAPE}"""

ENHANCE_SYSTEM_PROMPT = f"""You are a professional resume writer. Rewrite the resume content so it is
concise, quantified and keyword-rich for applicant tracking systems.
- Career summary: 2-3 sentences, starting with experience and key expertise.
- Experience: strong action verbs, metrics, at most 3 achievements per role.
- Projects: technical complexity and business value in at most 2 sentences.
- Skills: current and relevant to the candidate's field.
Return one JSON object with exactly this shape and nothing else:
{OVERLAY_JSON_SHAPE}"""

SUGGESTIONS_SYSTEM_PROMPT = """You review resumes. Give exactly 5 specific, actionable improvement suggestions covering:
missing quantified achievements, weak descriptions, skills gaps, ATS optimization and presentation.
Return one JSON object: {"suggestions": ["suggestion 1", "suggestion 2", "suggestion 3", "suggestion 4", "suggestion 5"]}"""

CHAT_SYSTEM_PROMPT = """You are a professional resume and career advisor. Answer in 2-3 short sentences.
Be specific, actionable and encouraging. For skills questions suggest 2-3 relevant skills; for resume
questions give 1-2 concrete improvements; for job search questions give 1-2 practical tips.
End with a brief follow-up question."""


def resume_json(payload: dict[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2)


def build_structure_prompt(text: str) -> str:
    return f"RESUME TEXT:\n{text}"


def build_generate_prompt(
    *,
    full_name: str,
    target_role: str,
    experience: str,
    education: str,
    skills: str,
    achievements: str,
    additional_info: str,
) -> str:
    return "\n".join(
        [
            f"Name: {full_name}",
            f"Target Role: {target_role}",
            f"Experience: {experience}",
            f"Education: {education}",
            f"Skills: {skills}",
            f"Achievements: {achievements}",
            f"Additional Info: {additional_info}",
        ]
    )


def build_enhance_prompt(resume_payload: dict[str, Any]) -> str:
    return f"RESUME DATA:\n{resume_json(resume_payload)}"


def build_suggestions_prompt(resume_payload: dict[str, Any]) -> str:
    return f"RESUME:\n{resume_json(resume_payload)}"


def build_chat_prompt(message: str, context: str | None) -> str:
    if not context:
        return f"User question: {message}"
    return f"CURRENT RESUME CONTEXT:\n{context}\n\nUser question: {message}"
