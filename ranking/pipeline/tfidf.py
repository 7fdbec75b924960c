"""Unigram+bigram TF-IDF over the JD and all resumes as one corpus."""

from collections import Counter

import numpy as np
from scipy.sparse import csr_matrix
from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.metrics.pairwise import cosine_similarity as _pairwise_cosine


def _vectorizer() -> TfidfVectorizer:
    # Input is already normalized; whitespace tokens keep "c++" and "c#" intact.
    return TfidfVectorizer(
        ngram_range=(1, 2),
        token_pattern=r"\S+",
        lowercase=False,
        norm=None,
    )


def build_tfidf_vectors(docs: list[str]) -> tuple[csr_matrix, list[str]]:
    """
    One sparse row per document, in input order, plus the term for each column.

    tf is the raw count divided by the document's largest raw count; idf is
    sklearn's smoothed ln((1 + N) / (1 + df)) + 1.
    """
    if not any(doc.split() for doc in docs):
        return csr_matrix((len(docs), 0)), []

    vectorizer = _vectorizer()
    weights = vectorizer.fit_transform(docs)

    analyze = vectorizer.build_analyzer()
    max_counts = np.array([max(Counter(analyze(doc)).values(), default=1) for doc in docs], dtype=float)
    scaled = csr_matrix(weights.multiply(1.0 / max_counts[:, np.newaxis]))
    return scaled, list(vectorizer.get_feature_names_out())


def cosine_similarity(a, b) -> float:
    """Cosine of two single-row vectors; 0 when either side is empty or has zero norm."""
    if a.shape[1] == 0 or a.nnz == 0 or b.nnz == 0:
        return 0.0
    return float(_pairwise_cosine(a, b)[0, 0])
