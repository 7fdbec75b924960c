"""Hybrid scoring: similarity plus skill-overlap ratios under a weight table. Pure code, no LLM."""

from dataclasses import dataclass
from typing import NamedTuple

from ranking.models import Result
from ranking.utils import join_or_none, ratio, round2

MAX_LISTED_SKILLS = 10


class ScoreWeights(NamedTuple):
    cos: float
    must: float
    nice: float
    skill: float


WEIGHTS_WITH_MUST = ScoreWeights(cos=0.45, must=0.35, nice=0.10, skill=0.10)
WEIGHTS_WITHOUT_MUST = ScoreWeights(cos=0.55, must=0.0, nice=0.15, skill=0.30)


def score_weights(must_count: int) -> ScoreWeights:
    """Weight table keyed only on whether any must skills exist."""
    return WEIGHTS_WITH_MUST if must_count > 0 else WEIGHTS_WITHOUT_MUST


@dataclass(frozen=True)
class SkillUniverse:
    """JD skill sets a resume is measured against."""

    must: list[str]
    nice: list[str]
    general: list[str]


def hybrid_score(
    similarity: float,
    must_ratio: float,
    nice_ratio: float,
    skill_ratio: float,
    weights: ScoreWeights,
) -> float:
    """Weighted sum bounded to [0, 1], returned as a 0-100 score with 2 decimals."""
    raw = (
        weights.cos * similarity
        + weights.must * must_ratio
        + weights.nice * nice_ratio
        + weights.skill * skill_ratio
    )
    return round2(min(1.0, max(0.0, raw)) * 100)


def _collect(skill_lists, keep, limit: int = MAX_LISTED_SKILLS) -> list[str]:
    out: list[str] = []
    for skills in skill_lists:
        for skill in skills:
            if len(out) >= limit:
                return out
            if keep(skill) and skill not in out:
                out.append(skill)
    return out


def build_strengths(present: set[str], universe: SkillUniverse) -> list[str]:
    """Skills the resume has, must first, then nice, then general."""
    lists = (universe.must, universe.nice, universe.general)
    return _collect(lists, lambda s: s in present)


def build_weaknesses(present: set[str], universe: SkillUniverse) -> list[str]:
    """Skills the resume lacks, in the same priority order."""
    lists = (universe.must, universe.nice, universe.general)
    return _collect(lists, lambda s: s not in present)


def score_candidate(
    name: str,
    path: str,
    similarity: float,
    present: set[str],
    universe: SkillUniverse,
) -> Result:
    """Score one resume given its similarity to the JD and the skills found in it."""
    weights = score_weights(len(universe.must))

    must_ratio = ratio(sum(1 for s in universe.must if s in present), len(universe.must))
    nice_ratio = ratio(sum(1 for s in universe.nice if s in present), len(universe.nice))
    skill_ratio = ratio(sum(1 for s in universe.general if s in present), len(universe.general))

    score = hybrid_score(similarity, must_ratio, nice_ratio, skill_ratio, weights)
    explanation = (
        f"Similarity={similarity:.2f}; MustMatch={must_ratio:.2f}; "
        f"NiceMatch={nice_ratio:.2f}; SkillMatch={skill_ratio:.2f}"
    )
    return Result(
        candidate=name,
        score=score,
        strengths=join_or_none(build_strengths(present, universe)),
        weaknesses=join_or_none(build_weaknesses(present, universe)),
        explanation=explanation,
        file=path,
    )
