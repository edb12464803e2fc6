"""
Runtime settings for FAQ Assist.

Defaults live in module constants; each can be overridden with an
environment variable (FAQASSIST_*).
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from errors import ConfigurationError

DEFAULT_QA_FILE = "qa_data.json"
DEFAULT_THRESHOLD = 0.5
DEFAULT_TOP_N = 5
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


@dataclass(frozen=True)
class Settings:
    qa_file: Path
    threshold: float
    top_n: int
    log_file: Optional[str]
    host: str
    port: int


def _read_number(env, name: str, default, cast):
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None


def load_settings(env=None) -> Settings:
    """
    Read settings from the environment.

    Args:
        env (Mapping[str, str], optional): Environment to read, defaults to os.environ

    Raises:
        ConfigurationError: If a numeric setting is malformed or out of range
    """
    env = os.environ if env is None else env

    threshold = _read_number(env, "FAQASSIST_THRESHOLD", DEFAULT_THRESHOLD, float)
    if not 0.0 < threshold <= 1.0:
        raise ConfigurationError(f"FAQASSIST_THRESHOLD must be above 0 and at most 1, got {threshold}")

    top_n = _read_number(env, "FAQASSIST_TOP_N", DEFAULT_TOP_N, int)
    if top_n < 1:
        raise ConfigurationError(f"FAQASSIST_TOP_N must be at least 1, got {top_n}")

    port = _read_number(env, "FAQASSIST_PORT", DEFAULT_PORT, int)

    qa_file = Path(env.get("FAQASSIST_QA_FILE") or os.path.join(os.getcwd(), DEFAULT_QA_FILE))

    return Settings(
        qa_file=qa_file,
        threshold=threshold,
        top_n=top_n,
        log_file=env.get("FAQASSIST_LOG_FILE") or None,
        host=env.get("FAQASSIST_HOST") or DEFAULT_HOST,
        port=port,
    )
