"""
Corpus Index

Builds the immutable TF-IDF index over every knowledge base question.
The index is created once at startup and only read afterwards, so a
single instance can be shared by the interactive loop and by every
request the backend server handles.

Algorithm:
- Tokenize each question and count its terms
- Document frequency df(t) = number of questions containing t
- idf(t) = ln(N / df(t)), N = number of questions
- Document weight = tf(t) * idf(t), tf normalized by question length

Author: Quinn Evans
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

from errors import ConfigurationError
from tokenizer import tokenize
from vectorizer import vectorize


def _frozen_mapping(mapping) -> Mapping:
    """Read-only view of mapping; plain mappings are copied first."""
    if isinstance(mapping, MappingProxyType):
        return mapping
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class Document:
    """One Q&A pair with its precomputed term counts and TF-IDF vector."""

    id: int
    question_text: str
    answer_text: str
    term_counts: Mapping[str, int]
    vector: Mapping[str, float]

    def __post_init__(self):
        object.__setattr__(self, "term_counts", _frozen_mapping(self.term_counts))
        object.__setattr__(self, "vector", _frozen_mapping(self.vector))


@dataclass(frozen=True)
class Corpus:
    """
    Ordered knowledge base documents plus the global IDF table.

    build() is the normal way to create one. Direct construction still
    yields an immutable value: documents become a tuple and mappings are
    copied into read-only proxies, so neither the IDF table nor any vector
    can change after construction.
    """

    documents: tuple[Document, ...]
    idf: Mapping[str, float]

    def __post_init__(self):
        object.__setattr__(self, "documents", tuple(self.documents))
        object.__setattr__(self, "idf", _frozen_mapping(self.idf))

    def __len__(self) -> int:
        return len(self.documents)

    def __getitem__(self, doc_id: int) -> Document:
        return self.documents[doc_id]


def build(pairs: Iterable[tuple[str, str]]) -> Corpus:
    """
    Build the TF-IDF corpus from (question, answer) pairs.

    Args:
        pairs: Ordered (question, answer) pairs. Order defines document ids
            and tie-breaking during ranking.

    Returns:
        Corpus: Immutable index ready for scoring

    Raises:
        ConfigurationError: If no pairs are supplied
    """
    pairs = list(pairs)
    if not pairs:
        raise ConfigurationError("Cannot build the question index: no Q&A pairs were loaded")

    tokenized = [tokenize(question) for question, _ in pairs]

    doc_freq = Counter()
    for tokens in tokenized:
        doc_freq.update(set(tokens))

    doc_count = len(pairs)
    idf = MappingProxyType({
        term: math.log(doc_count / df)
        for term, df in doc_freq.items()
    })

    documents = []
    for doc_id, ((question, answer), tokens) in enumerate(zip(pairs, tokenized)):
        documents.append(Document(
            id=doc_id,
            question_text=question,
            answer_text=answer,
            term_counts=MappingProxyType(dict(Counter(tokens))),
            vector=vectorize(tokens, idf),
        ))

    return Corpus(documents=tuple(documents), idf=idf)
