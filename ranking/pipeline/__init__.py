"""Text stages: redact → normalize → skills → TF-IDF / embeddings, plus LLM extraction."""

from ranking.pipeline.redact import redact_pii
from ranking.pipeline.normalize import normalize_text, top_terms
from ranking.pipeline.skills import extract_skills, find_must_nice_skills, skills_in_text
from ranking.pipeline.tfidf import build_tfidf_vectors, cosine_similarity
from ranking.pipeline.embed import chunk_by_words, cosine_similarity_dense, embed_documents
from ranking.pipeline.extract import analyze_resume, extract_jd_requirements

__all__ = [
    "redact_pii",
    "normalize_text",
    "top_terms",
    "extract_skills",
    "find_must_nice_skills",
    "skills_in_text",
    "build_tfidf_vectors",
    "cosine_similarity",
    "chunk_by_words",
    "cosine_similarity_dense",
    "embed_documents",
    "analyze_resume",
    "extract_jd_requirements",
]
