"""
Cosine similarity scoring for sparse TF-IDF vectors.
"""

from __future__ import annotations

import math
from typing import Mapping

from corpus_index import Corpus


def norm(vector: Mapping[str, float]) -> float:
    return math.sqrt(sum(weight * weight for weight in vector.values()))


def cosine(a: Mapping[str, float], b: Mapping[str, float]) -> float:
    """
    Cosine similarity between two term-weight mappings.

    Terms present in only one mapping contribute nothing to the dot
    product. Returns 0.0 when either vector has zero norm.
    """
    norm_a = norm(a)
    norm_b = norm(b)
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0

    # Iterate over the smaller mapping
    if len(a) > len(b):
        a, b = b, a
    dot = sum(weight * b[term] for term, weight in a.items() if term in b)

    similarity = dot / (norm_a * norm_b)
    return min(1.0, max(0.0, similarity))


def score(query_vector: Mapping[str, float], corpus: Corpus) -> list[tuple[int, float]]:
    """
    Score the query against every document in the corpus.

    Returns:
        list[tuple[int, float]]: (document id, similarity) pairs sorted by
            descending similarity. Equal scores keep corpus order.
    """
    ranked = [(doc.id, cosine(query_vector, doc.vector)) for doc in corpus.documents]
    # list.sort is stable, so ties stay in insertion order
    ranked.sort(key=lambda item: item[1], reverse=True)
    return ranked
