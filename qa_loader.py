"""
Q&A Knowledge Base Loader

Reads the question/answer JSON file into the in-memory list the Matcher
consumes, and flags data problems before the index is built.

Accepted file shapes:
- {"questions": [{"question": "...", "answer": "..."}, ...]}
- [{"question": "...", "answer": "..."}, ...]

Records without a string question and answer are skipped with a warning.
A question that appears twice keeps its first position and its last
answer. Questions that are nearly identical (RapidFuzz ratio) are
reported so the data can be cleaned up; both are kept.

Dependencies:
- rapidfuzz: Near-duplicate question detection

Author: Quinn Evans
"""

from __future__ import annotations

import json
from pathlib import Path

from rapidfuzz import fuzz

from errors import ConfigurationError
from exception_logger import exception_logger

NEAR_DUPLICATE_THRESHOLD = 90


def parse_qa_records(payload) -> list[dict]:
    """
    Convert decoded JSON into a clean list of Q&A dicts.

    Args:
        payload: Decoded JSON document (dict with "questions" or a list)

    Returns:
        list[dict]: [{"question": str, "answer": str}, ...] in file order

    Raises:
        ConfigurationError: If the document has neither supported shape
    """
    if isinstance(payload, dict):
        records = payload.get("questions")
    else:
        records = payload

    if not isinstance(records, list):
        raise ConfigurationError('Q&A data must be a list of records or an object with a "questions" list')

    qa_by_question: dict[str, str] = {}
    for index, record in enumerate(records):
        question = record.get("question") if isinstance(record, dict) else None
        answer = record.get("answer") if isinstance(record, dict) else None
        if not isinstance(question, str) or not isinstance(answer, str) or not question.strip():
            exception_logger.log_warning(
                "Skipping malformed Q&A record", "loader", f"record #{index}"
            )
            continue

        if question in qa_by_question:
            exception_logger.log_warning(
                "Duplicate question, keeping the later answer", "loader", question
            )
        qa_by_question[question] = answer

    return [{"question": q, "answer": a} for q, a in qa_by_question.items()]


def find_near_duplicates(qa_data: list[dict],
                         threshold: int = NEAR_DUPLICATE_THRESHOLD) -> list[tuple[int, int, float]]:
    """
    Find pairs of questions that are almost the same text.

    Args:
        qa_data (list[dict]): Parsed Q&A records
        threshold (int): Minimum RapidFuzz ratio (0-100) to report

    Returns:
        list[tuple[int, int, float]]: (first index, second index, ratio) pairs
    """
    lowered = [item["question"].lower() for item in qa_data]
    pairs = []
    for i in range(len(lowered)):
        for j in range(i + 1, len(lowered)):
            ratio = fuzz.ratio(lowered[i], lowered[j])
            if ratio >= threshold:
                pairs.append((i, j, ratio))
    return pairs


def load_qa_data(path) -> list[dict]:
    """
    Load and validate the Q&A knowledge base file.

    Args:
        path (str | Path): JSON file to read

    Returns:
        list[dict]: Cleaned Q&A records ready for Matcher

    Raises:
        ConfigurationError: If the file is missing, unreadable or malformed
    """
    qa_file = Path(path)
    try:
        with open(qa_file, "r", encoding="utf-8-sig") as f:
            payload = json.load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Q&A data file not found: {qa_file}") from None
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Q&A data file {qa_file} is not valid JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigurationError(f"Q&A data file {qa_file} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Could not read Q&A data file {qa_file}: {e}") from e

    qa_data = parse_qa_records(payload)

    for i, j, ratio in find_near_duplicates(qa_data):
        exception_logger.log_warning(
            f"Near-duplicate questions ({ratio:.0f}%)",
            "loader",
            f"{qa_data[i]['question']!r} / {qa_data[j]['question']!r}",
        )

    print(f"Loaded {len(qa_data)} Q&A pairs from {qa_file}")
    return qa_data
