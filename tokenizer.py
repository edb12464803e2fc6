"""
Question Tokenizer

Turns raw question text into the normalized terms used by the TF-IDF
matcher. The same rules apply to knowledge base questions and to live
caller input, so both sides always agree on what a term is.

Normalization:
- Unicode NFKC normalization, so composed and decomposed accents
  ("café" vs "cafe" + U+0301) and compatibility forms (full-width
  digits, ligatures) produce the same term
- Lowercase everything
- Delete characters that are neither alphanumeric nor whitespace
  ("what's" -> "whats", "24/7" -> "247")
- Split on runs of whitespace and drop empty tokens

Numerals are kept. There is no stemming and no stopword list.

Author: Quinn Evans
"""

import unicodedata


def normalize(text: str) -> str:
    """NFKC-normalize, lowercase, and delete punctuation and symbols."""
    lowered = unicodedata.normalize("NFKC", text).lower()
    return "".join(ch for ch in lowered if ch.isalnum() or ch.isspace())


def tokenize(text: str) -> list[str]:
    """
    Split text into an ordered list of normalized terms.

    Args:
        text (str): Raw question text

    Returns:
        list[str]: Terms in their original order, duplicates preserved
    """
    if not text:
        return []
    return normalize(text).split()
