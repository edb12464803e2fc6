"""
Question-Answer Matching Engine

Matches user questions against a knowledge base of Q&A pairs using
TF-IDF term weighting and cosine similarity. No model training and no
network calls: the same corpus and question always produce the same
answer.

Key Features:
- TF-IDF index built once from the knowledge base questions
- Confidence threshold separating confident answers from best guesses
- Ranked candidate list offered only when the best match is uncertain
- Tagged Response results so callers never parse response text

Algorithm:
- Tokenize the question (lowercase, strip punctuation, split on whitespace)
- Weight terms with the corpus IDF table
- Cosine similarity (0.0-1.0) against every knowledge base question
- Top match answered verbatim when its score meets the threshold

Author: Quinn Evans
"""

from __future__ import annotations

from typing import Mapping

import corpus_index
import similarity
from answer_selector import Response, ResponseKind, select
from config import DEFAULT_THRESHOLD, DEFAULT_TOP_N
from tokenizer import tokenize
from vectorizer import vectorize


class Matcher:
    """
    TF-IDF matching engine for question-answer knowledge base lookup.

    The corpus is built in the constructor and never modified afterwards,
    so one Matcher can serve any number of questions, from any thread.

    Attributes:
        qa_data (list[dict]): Knowledge base of Q&A pairs
            Format: [{"question": str, "answer": str}, ...]
        threshold (float): Minimum similarity (0.0-1.0) for confident matches
        top_n (int): Number of candidates returned by match()
        corpus (Corpus): Immutable TF-IDF index over the questions

    Raises:
        ConfigurationError: If qa_data is empty
    """

    def __init__(self, qa_data: list[dict], threshold: float = DEFAULT_THRESHOLD,
                 top_n: int = DEFAULT_TOP_N):
        self.qa_data = qa_data
        self.threshold = float(threshold)
        self.top_n = top_n
        self.corpus = corpus_index.build(
            (item["question"], item["answer"]) for item in qa_data
        )

    def vectorize(self, text: str) -> Mapping[str, float]:
        """TF-IDF vector for arbitrary text against this corpus."""
        return vectorize(tokenize(text), self.corpus.idf)

    def rank(self, text: str) -> list[tuple[int, float]]:
        """All documents as (id, similarity), best first."""
        return similarity.score(self.vectorize(text), self.corpus)

    def respond(self, question: str) -> Response:
        """
        Pick the best answer for a question.

        Args:
            question (str): Raw user question

        Returns:
            Response: CONFIDENT or UNCERTAIN, carrying the chosen answer and score
        """
        return select(self.rank(question), self.threshold, self.corpus)

    def answer(self, question: str) -> str:
        """Response text for a question (confident answer or best-guess fallback)."""
        return self.respond(question).text

    def match(self, text: str) -> list[dict]:
        """
        Alternatives for a question the matcher is not confident about.

        When the best match is below the threshold, returns the top N
        candidates so callers can offer them instead. A confident match
        needs no alternatives and yields an empty list.

        Args:
            text (str): User question to match against knowledge base

        Returns:
            list[dict]: Matches sorted by descending similarity. Each match contains:
                - "score" (float): Cosine similarity (0.0-1.0)
                - "question" (str): Canonical question from knowledge base
                - "answer" (str): Corresponding answer text
        """
        ranked = self.rank(text)
        if select(ranked, self.threshold, self.corpus).kind is not ResponseKind.UNCERTAIN:
            return []

        matches = []
        for doc_id, score in ranked[:self.top_n]:
            document = self.corpus[doc_id]
            matches.append({
                "score": score,
                "question": document.question_text,
                "answer": document.answer_text,
            })
        return matches
