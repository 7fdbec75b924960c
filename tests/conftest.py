from pathlib import Path

import pytest

from fakes import JD_TEXT, FakeLLMClient
from resume_matcher.config import Settings


@pytest.fixture
def settings():
    return Settings(skill_match_mode="word")


@pytest.fixture
def fake_client():
    return FakeLLMClient()


@pytest.fixture
def workspace(tmp_path: Path):
    """JD file, a resumes folder with two candidates, and an output path."""
    jd = tmp_path / "jd.txt"
    jd.write_text(JD_TEXT, encoding="utf-8")
    resumes = tmp_path / "resumes"
    resumes.mkdir()
    (resumes / "alice.txt").write_text("Python, SQL, Docker. Contact alice@example.com", encoding="utf-8")
    (resumes / "bob.md").write_text("Java", encoding="utf-8")
    return {"jd": jd, "resumes": resumes, "out": tmp_path / "out" / "results.csv"}
