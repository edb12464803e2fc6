"""
Answer Selector

Turns a ranked match list into a tagged Response. Callers branch on
Response.kind instead of inspecting the rendered text.

Outcomes:
- CONFIDENT: top similarity >= threshold, answer returned verbatim
- UNCERTAIN: top similarity < threshold, fallback message plus the best guess
- NO_DATA: nothing was ranked (empty knowledge base)

Author: Quinn Evans
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from corpus_index import Corpus

FALLBACK_MESSAGE = "I'm sorry, I didn't quite understand that, but here's my best guess:"
NO_DATA_MESSAGE = "I'm sorry, no question data is available right now."


class ResponseKind(str, Enum):
    CONFIDENT = "confident"
    UNCERTAIN = "uncertain"
    NO_DATA = "no_data"


@dataclass(frozen=True)
class Response:
    kind: ResponseKind
    answer: Optional[str] = None
    score: float = 0.0
    document_id: Optional[int] = None
    question: Optional[str] = None

    @property
    def text(self) -> str:
        """User-facing response string."""
        if self.kind is ResponseKind.CONFIDENT:
            return self.answer
        if self.kind is ResponseKind.UNCERTAIN:
            return f"{FALLBACK_MESSAGE} {self.answer}"
        return NO_DATA_MESSAGE


def select(ranked: list[tuple[int, float]], threshold: float, corpus: Corpus) -> Response:
    """
    Decide between a confident answer and the best-guess fallback.

    Args:
        ranked (list[tuple[int, float]]): Output of similarity.score
        threshold (float): Minimum similarity for a confident match
        corpus (Corpus): Corpus the ids in ``ranked`` refer to

    Returns:
        Response: Tagged outcome with the chosen document, if any
    """
    if not ranked:
        return Response(kind=ResponseKind.NO_DATA)

    doc_id, top_score = ranked[0]
    document = corpus[doc_id]
    kind = ResponseKind.CONFIDENT if top_score >= threshold else ResponseKind.UNCERTAIN
    return Response(
        kind=kind,
        answer=document.answer_text,
        score=top_score,
        document_id=doc_id,
        question=document.question_text,
    )
