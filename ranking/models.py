"""Typed records passed between ranking stages."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field

from ranking.utils import clean_list, clean_skill_list


def _non_negative(value) -> float:
    try:
        number = float(value or 0)
    except (TypeError, ValueError):
        return 0.0
    return max(0.0, number)


@dataclass(frozen=True)
class ResumeDocument:
    """One discovered resume after extraction. Built once, never mutated."""

    path: str
    name: str
    raw: str
    redacted: str
    normalized: str


@dataclass(frozen=True)
class SkippedDocument:
    path: str
    reason: str


@dataclass(frozen=True)
class JDExtract:
    """Structured job requirements."""

    role_title: str = ""
    skills_must: list[str] = field(default_factory=list)
    skills_nice: list[str] = field(default_factory=list)
    skills_other: list[str] = field(default_factory=list)
    years_experience_min: float = 0.0
    education: list[str] = field(default_factory=list)
    certifications: list[str] = field(default_factory=list)
    titles: list[str] = field(default_factory=list)
    responsibilities: list[str] = field(default_factory=list)

    @classmethod
    def from_response(cls, data: dict) -> JDExtract:
        """Build from a schema-valid response, applying list cleaning and clamping."""
        return cls(
            role_title=(data.get("role_title") or "").strip(),
            skills_must=clean_skill_list(data.get("skills_must")),
            skills_nice=clean_skill_list(data.get("skills_nice")),
            skills_other=clean_skill_list(data.get("skills_other")),
            years_experience_min=_non_negative(data.get("years_experience_min")),
            education=clean_list(data.get("education")),
            certifications=clean_list(data.get("certifications")),
            titles=clean_list(data.get("titles")),
            responsibilities=clean_list(data.get("responsibilities")),
        )

    def has_skills(self) -> bool:
        return bool(self.skills_must or self.skills_nice or self.skills_other)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ResumeExtract:
    skills: list[str] = field(default_factory=list)
    years_experience: float = 0.0
    education: list[str] = field(default_factory=list)
    certifications: list[str] = field(default_factory=list)
    titles: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ResumeAnalysis:
    """LLM assessment of one resume against extracted requirements."""

    strengths: list[str] = field(default_factory=list)
    weaknesses: list[str] = field(default_factory=list)
    summary: str = ""
    skills: list[str] = field(default_factory=list)
    years_experience: float = 0.0
    education: list[str] = field(default_factory=list)
    certifications: list[str] = field(default_factory=list)
    titles: list[str] = field(default_factory=list)

    @classmethod
    def from_response(cls, data: dict) -> ResumeAnalysis:
        return cls(
            strengths=clean_list(data.get("strengths")),
            weaknesses=clean_list(data.get("weaknesses")),
            summary=(data.get("summary") or "").strip(),
            skills=clean_skill_list(data.get("skills")),
            years_experience=_non_negative(data.get("years_experience")),
            education=clean_list(data.get("education")),
            certifications=clean_list(data.get("certifications")),
            titles=clean_list(data.get("titles")),
        )

    def to_extract(self) -> ResumeExtract:
        return ResumeExtract(
            skills=list(self.skills),
            years_experience=self.years_experience,
            education=list(self.education),
            certifications=list(self.certifications),
            titles=list(self.titles),
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Result:
    """One ranked candidate row. rank is assigned by the ranker."""

    candidate: str
    score: float
    strengths: str
    weaknesses: str
    explanation: str
    file: str
    rank: int = 0
    extracted: ResumeExtract | None = None

    def to_dict(self) -> dict:
        data = asdict(self)
        if self.extracted is None:
            data.pop("extracted")
        return data


@dataclass(frozen=True)
class RunInput:
    jd_path: str
    resumes_dir: str
    top_n: int = 0
    out_path: str = ""


@dataclass
class Output:
    results: list[Result]
    out_path: str
    total: int
    pipeline: str
    jd_info: JDExtract | None = None
    skipped: list[SkippedDocument] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "results": [r.to_dict() for r in self.results],
            "out_path": self.out_path,
            "total": self.total,
            "pipeline": self.pipeline,
            "jd_info": self.jd_info.to_dict() if self.jd_info else None,
            "skipped": [asdict(s) for s in self.skipped],
        }
