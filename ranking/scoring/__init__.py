"""Deterministic scoring and ranking."""

from ranking.scoring.engine import SkillUniverse, score_candidate, score_weights
from ranking.scoring.ranking import rank_results

__all__ = ["SkillUniverse", "score_candidate", "score_weights", "rank_results"]
