"""
TF-IDF Vectorizer

Builds sparse term-weight vectors from token lists. Knowledge base
questions and live queries go through the exact same function; only the
IDF table differs in where it came from (it is always the corpus table).

Author: Quinn Evans
"""

from collections import Counter
from types import MappingProxyType
from typing import Mapping


def term_frequencies(tokens: list[str]) -> dict[str, float]:
    """
    Raw counts normalized by the total number of tokens.

    Returns an empty dict for an empty token list.
    """
    total = len(tokens)
    if total == 0:
        return {}
    counts = Counter(tokens)
    return {term: count / total for term, count in counts.items()}


def vectorize(tokens: list[str], idf: Mapping[str, float]) -> Mapping[str, float]:
    """
    Compute the TF-IDF vector for a token list.

    Terms missing from the IDF table are dropped, which is the same as
    giving them zero weight.

    Args:
        tokens (list[str]): Output of tokenizer.tokenize
        idf (Mapping[str, float]): Corpus inverse document frequencies

    Returns:
        Mapping[str, float]: Read-only term -> weight mapping
    """
    vector = {}
    for term, tf in term_frequencies(tokens).items():
        weight = idf.get(term)
        if weight is None:
            continue
        vector[term] = tf * weight
    return MappingProxyType(vector)
