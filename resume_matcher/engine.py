"""
Orchestrates a ranking run: validate inputs, extract every résumé once, pick the
AI or heuristic pipeline, rank, write the CSV and the run log.
"""

import logging
import os
from pathlib import Path

from ranking.models import JDExtract, Output, ResumeAnalysis, ResumeDocument, Result, RunInput, SkippedDocument
from ranking.pipeline import (
    analyze_resume,
    build_tfidf_vectors,
    cosine_similarity,
    cosine_similarity_dense,
    embed_documents,
    extract_jd_requirements,
    extract_skills,
    find_must_nice_skills,
    normalize_text,
    redact_pii,
    skills_in_text,
    top_terms,
)
from ranking.pipeline.skills import JD_TERMS_LIMIT
from ranking.results import write_results_csv
from ranking.scoring import SkillUniverse, rank_results, score_candidate
from ranking.utils import join_or_none, merge_unique
from resume_matcher.audit import append_run_log
from resume_matcher.config import Settings
from resume_matcher.documents import SUPPORTED_EXTENSIONS, extract_text
from resume_matcher.errors import (
    ListResumesError,
    MatcherError,
    MissingAPIKeyError,
    MissingJDError,
    MissingResumeError,
    MissingResumesError,
    NoResumesError,
    ReadJDError,
    ReadResumeError,
    UpstreamAPIError,
    WriteResultsError,
)
from resume_matcher.llm import GroqLLMClient

logger = logging.getLogger(__name__)

DEFAULT_OUT_PATH = os.path.join("outputs", "results.csv")
PIPELINE_AI = "ai"
PIPELINE_HEURISTIC = "heuristic"


def _is_file(path: str) -> bool:
    return bool(path and path.strip()) and os.path.isfile(path)


def _is_dir(path: str) -> bool:
    return bool(path and path.strip()) and os.path.isdir(path)


def list_resume_files(directory: str) -> list[str]:
    """Recursive walk for supported extensions, sorted for a stable discovery order."""
    def _raise(err: OSError):
        raise ListResumesError(f"Failed to list resumes: {err}") from err

    files = []
    for root, _dirs, names in os.walk(directory, onerror=_raise):
        for name in names:
            if Path(name).suffix.lower() in SUPPORTED_EXTENSIONS:
                files.append(os.path.join(root, name))
    return sorted(files)


def build_document(path: str) -> ResumeDocument:
    raw = extract_text(path)
    return ResumeDocument(
        path=path,
        name=Path(path).stem,
        raw=raw,
        redacted=redact_pii(raw),
        normalized=normalize_text(raw),
    )


def load_resume_documents(paths: list[str]) -> tuple[list[ResumeDocument], list[SkippedDocument]]:
    """Extract every path; failures are recorded and skipped, never raised."""
    docs: list[ResumeDocument] = []
    skipped: list[SkippedDocument] = []
    for path in paths:
        try:
            docs.append(build_document(path))
        except Exception as e:  # any extractor failure drops just this document
            logger.warning("Skipping %s: %s", path, e)
            skipped.append(SkippedDocument(path=path, reason=str(e) or e.__class__.__name__))
    return docs, skipped


def _read_jd(jd_path: str) -> str:
    try:
        return extract_text(jd_path)
    except Exception as e:
        raise ReadJDError(f"Failed to read job description: {e}") from e


def _prepare(run_input: RunInput) -> tuple[str, list[ResumeDocument], list[SkippedDocument], int]:
    """Validate paths and extract everything. No side effects on failure."""
    if not _is_file(run_input.jd_path):
        raise MissingJDError(run_input.jd_path)
    if not _is_dir(run_input.resumes_dir):
        raise MissingResumesError(run_input.resumes_dir)

    jd_raw = _read_jd(run_input.jd_path)

    paths = list_resume_files(run_input.resumes_dir)
    if not paths:
        raise NoResumesError()
    docs, skipped = load_resume_documents(paths)
    if not docs:
        raise NoResumesError(f"No resumes could be read ({len(skipped)} skipped)")
    return jd_raw, docs, skipped, len(paths)


def _score_heuristic(jd_raw: str, docs: list[ResumeDocument], settings: Settings) -> list[Result]:
    """TF-IDF similarity with lexicon skills and cue-classified must/nice sets."""
    mode = settings.skill_match_mode
    jd_norm = normalize_text(jd_raw)
    jd_terms = top_terms(jd_norm, JD_TERMS_LIMIT)
    must, nice = find_must_nice_skills(jd_raw, mode)
    universe = SkillUniverse(must=must, nice=nice, general=extract_skills(jd_norm, jd_terms, mode))

    vectors, _ = build_tfidf_vectors([jd_norm] + [d.normalized for d in docs])
    jd_vec = vectors[0]

    results = []
    for row, doc in enumerate(docs, start=1):
        present = set(extract_skills(doc.normalized, jd_terms, mode))
        results.append(
            score_candidate(doc.name, doc.path, cosine_similarity(jd_vec, vectors[row]), present, universe)
        )
    return results


def _ai_skill_universe(jd_info: JDExtract, jd_raw: str, jd_norm: str, mode: str) -> SkillUniverse:
    """LLM skill sets, with the lexicon and cue classifier standing in when the LLM found none."""
    fallback = extract_skills(jd_norm, top_terms(jd_norm, JD_TERMS_LIMIT), mode)
    must, nice, other = jd_info.skills_must, jd_info.skills_nice, jd_info.skills_other
    if not jd_info.has_skills():
        must, nice = find_must_nice_skills(jd_raw, mode)
        other = fallback
    return SkillUniverse(must=must, nice=nice, general=merge_unique(must, nice, other, fallback))


def _score_ai(client, jd_raw: str, docs: list[ResumeDocument], settings: Settings) -> tuple[list[Result], JDExtract]:
    """Embedding similarity with LLM-extracted skill sets. Raises UpstreamAPIError on any call failure."""
    mode = settings.skill_match_mode
    jd_redacted = redact_pii(jd_raw)
    jd_norm = normalize_text(jd_raw)

    jd_info = extract_jd_requirements(client, jd_redacted)
    universe = _ai_skill_universe(jd_info, jd_raw, jd_norm, mode)

    embeddings = embed_documents(client, [jd_redacted] + [d.redacted for d in docs], settings.embed_chunk_words)
    jd_vec = embeddings[0]

    results = []
    for doc, vec in zip(docs, embeddings[1:]):
        present = skills_in_text(doc.normalized, universe.general, mode)
        results.append(
            score_candidate(doc.name, doc.path, cosine_similarity_dense(jd_vec, vec), present, universe)
        )
    return results, jd_info


def _explain_count(settings: Settings, top_n: int, result_count: int) -> int:
    limit = settings.explain_top_n
    if top_n > 0:
        limit = min(limit, top_n)
    return min(limit, result_count)


def _enrich_explanations(
    client,
    jd_info: JDExtract,
    results: list[Result],
    docs: list[ResumeDocument],
    settings: Settings,
    top_n: int,
) -> None:
    """Overwrite strengths/weaknesses/explanation of the top results with an LLM analysis."""
    by_path = {d.path: d for d in docs}
    for result in results[:_explain_count(settings, top_n, len(results))]:
        doc = by_path.get(result.file)
        if doc is None:
            continue
        try:
            analysis = analyze_resume(client, jd_info, doc.redacted, settings.explain_max_chars)
        except MatcherError as e:
            logger.warning("Explanation failed for %s: %s", result.candidate, e)
            continue
        result.strengths = join_or_none(analysis.strengths)
        result.weaknesses = join_or_none(analysis.weaknesses)
        if analysis.summary:
            result.explanation = analysis.summary
        result.extracted = analysis.to_extract()


def _resolve_client(settings: Settings, client):
    """Client for the AI pipeline, or None when AI is unavailable and not required."""
    if client is not None:
        return client
    if settings.ai_available:
        return GroqLLMClient(settings)
    if settings.require_ai:
        raise MissingAPIKeyError()
    logger.info("No API key configured; using heuristic pipeline")
    return None


def _finish(
    run_input: RunInput,
    results: list[Result],
    total: int,
    pipeline: str,
    skipped: list[SkippedDocument],
    jd_info: JDExtract | None = None,
) -> Output:
    out_path = run_input.out_path.strip() or DEFAULT_OUT_PATH
    try:
        write_results_csv(Path(out_path), results)
    except OSError as e:
        raise WriteResultsError(f"Failed to write results: {e}") from e
    append_run_log(out_path, total)
    logger.info("Scored %d resumes with %s pipeline -> %s", total, pipeline, out_path)
    return Output(
        results=results,
        out_path=out_path,
        total=total,
        pipeline=pipeline,
        jd_info=jd_info,
        skipped=skipped,
    )


def _top_n(run_input: RunInput) -> int:
    return max(0, run_input.top_n)


def run_heuristic(run_input: RunInput, settings: Settings) -> Output:
    """Always rank with the heuristic pipeline, regardless of credentials."""
    jd_raw, docs, skipped, total = _prepare(run_input)
    scored = _score_heuristic(jd_raw, docs, settings)
    results = rank_results(scored, _top_n(run_input))
    return _finish(run_input, results, total, PIPELINE_HEURISTIC, skipped)


def run(run_input: RunInput, settings: Settings, client=None) -> Output:
    """
    Rank résumés against a job description.

    The AI pipeline runs when a client is given or an API key is configured.
    Any AI failure falls back to the heuristic pipeline unless
    settings.require_ai is set, in which case it propagates.

    Raises:
        MissingJDError, ReadJDError, MissingResumesError, ListResumesError,
        NoResumesError, WriteResultsError, and with require_ai
        MissingAPIKeyError or UpstreamAPIError.
    """
    jd_raw, docs, skipped, total = _prepare(run_input)
    top_n = _top_n(run_input)

    ai_client = _resolve_client(settings, client)
    if ai_client is not None:
        try:
            scored, jd_info = _score_ai(ai_client, jd_raw, docs, settings)
        except UpstreamAPIError as e:
            if settings.require_ai:
                raise
            logger.warning("AI pipeline failed, falling back to heuristic: %s", e)
        else:
            results = rank_results(scored, top_n)
            _enrich_explanations(ai_client, jd_info, results, docs, settings, top_n)
            return _finish(run_input, results, total, PIPELINE_AI, skipped, jd_info)

    scored = _score_heuristic(jd_raw, docs, settings)
    results = rank_results(scored, top_n)
    return _finish(run_input, results, total, PIPELINE_HEURISTIC, skipped)


def evaluate_candidate(jd_path: str, resume_path: str, settings: Settings, client=None) -> ResumeAnalysis:
    """LLM analysis of a single résumé against a job description. Requires credentials."""
    if not _is_file(jd_path):
        raise MissingJDError(jd_path)
    if not _is_file(resume_path):
        raise MissingResumeError(f"Resume file not found: {resume_path}")

    if client is None:
        client = GroqLLMClient(settings)

    jd_raw = _read_jd(jd_path)
    try:
        resume_raw = extract_text(resume_path)
    except Exception as e:
        raise ReadResumeError(f"Failed to read resume: {e}") from e

    jd_info = extract_jd_requirements(client, redact_pii(jd_raw))
    return analyze_resume(client, jd_info, redact_pii(resume_raw), settings.explain_max_chars)
