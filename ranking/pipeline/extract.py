"""Structured extraction of JD requirements and per-resume analyses over an LLM client."""

import json
from pathlib import Path

from ranking.models import JDExtract, ResumeAnalysis
from ranking.validation import JD_EXTRACT_SCHEMA, RESUME_ANALYSIS_SCHEMA

PROMPTS_DIR = Path(__file__).resolve().parent.parent / "prompts"


def _load_prompt(name: str) -> str:
    return (PROMPTS_DIR / f"{name}.txt").read_text(encoding="utf-8").strip()


def truncate_text(text: str, max_chars: int) -> str:
    """Cut to max_chars characters; max_chars <= 0 means no limit."""
    if max_chars <= 0 or len(text) <= max_chars:
        return text
    return text[:max_chars]


def extract_jd_requirements(client, jd_text: str) -> JDExtract:
    """
    Extract structured requirements from an already-redacted JD.
    Raises whatever the client raises on transport or schema failure.
    """
    data = client.complete_json(JD_EXTRACT_SCHEMA, _load_prompt("extract_jd"), jd_text)
    return JDExtract.from_response(data)


def analyze_resume(client, jd: JDExtract, resume_text: str, max_chars: int) -> ResumeAnalysis:
    """Assess one redacted resume against extracted requirements."""
    user = (
        _load_prompt("analyze_resume_user")
        .replace("{{jd_json}}", json.dumps(jd.to_dict()))
        .replace("{{resume_text}}", truncate_text(resume_text, max_chars))
    )
    data = client.complete_json(RESUME_ANALYSIS_SCHEMA, _load_prompt("analyze_resume"), user)
    return ResumeAnalysis.from_response(data)
