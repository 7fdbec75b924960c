"""Rank résumés against a job description with a heuristic or Groq-assisted pipeline."""

from resume_matcher.config import Settings
from resume_matcher.engine import evaluate_candidate, run, run_heuristic
from resume_matcher.errors import MatcherError

__all__ = ["Settings", "MatcherError", "evaluate_candidate", "run", "run_heuristic"]
