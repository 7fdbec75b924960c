"""Document embeddings: word-count chunking, batched embedding, chunk averaging."""

import logging

import numpy as np

logger = logging.getLogger(__name__)


def chunk_by_words(text: str, words_per_chunk: int) -> list[str]:
    """Split on whitespace into chunks of words_per_chunk words; last may be shorter."""
    tokens = text.split()
    if not tokens:
        return []
    size = max(1, words_per_chunk)
    return [" ".join(tokens[i:i + size]) for i in range(0, len(tokens), size)]


def average_embeddings(vectors: list[list[float]]) -> list[float] | None:
    """
    Element-wise mean. Vectors whose length differs from the first are ignored.
    None when nothing usable remains.
    """
    if not vectors or not vectors[0]:
        return None
    dim = len(vectors[0])
    usable = [v for v in vectors if len(v) == dim]
    return np.mean(np.array(usable, dtype=float), axis=0).tolist()


def cosine_similarity_dense(a: list[float] | None, b: list[float] | None) -> float:
    """
    Cosine over the first min(len(a), len(b)) dimensions.

    Comparing only the shared prefix is a compatibility shim for providers
    returning different widths, not a principled similarity.
    """
    if not a or not b:
        return 0.0
    dim = min(len(a), len(b))
    va = np.asarray(a[:dim], dtype=float)
    vb = np.asarray(b[:dim], dtype=float)
    norm_a = np.linalg.norm(va)
    norm_b = np.linalg.norm(vb)
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return float(np.dot(va, vb) / (norm_a * norm_b))


def embed_documents(client, docs: list[str], words_per_chunk: int) -> list[list[float] | None]:
    """
    Embed each document as the mean of its chunk embeddings.

    All chunks from all documents go to the client in one list; the client
    batches them. A document with no usable chunk gets None.
    """
    chunks: list[str] = []
    doc_chunk_idxs: list[list[int]] = []
    for doc in docs:
        idxs = []
        for part in chunk_by_words(doc, words_per_chunk):
            idxs.append(len(chunks))
            chunks.append(part)
        doc_chunk_idxs.append(idxs)

    if not chunks:
        return [None] * len(docs)

    logger.debug("Embedding %d chunks across %d documents", len(chunks), len(docs))
    embeddings = client.embed_texts(chunks)

    out = []
    for idxs in doc_chunk_idxs:
        vectors = [embeddings[i] for i in idxs if i < len(embeddings) and embeddings[i]]
        out.append(average_embeddings(vectors))
    return out
