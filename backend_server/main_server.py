from __future__ import annotations

import threading
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from config import load_settings
from errors import ConfigurationError
from exception_logger import exception_logger

app = FastAPI(title="FAQ Assist Backend", version="1.0.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class AskRequest(BaseModel):
    question: str


class AskResponse(BaseModel):
    answer: str
    kind: str
    score: float
    question: Optional[str] = None


# Matcher is built on first use
_backend_lock = threading.Lock()
_matcher = None


def ensure_backend_initialized():
    """Load the knowledge base and build the matcher on first use.

    The matcher is read-only after construction, so one instance is
    shared by every request without further locking. Thread-safe.
    """
    global _matcher
    if _matcher is not None:
        return _matcher

    with _backend_lock:
        if _matcher is not None:
            return _matcher

        from matcher import Matcher
        from qa_loader import load_qa_data

        settings = load_settings()
        exception_logger.set_log_file(settings.log_file)
        qa_data = load_qa_data(settings.qa_file)
        _matcher = Matcher(qa_data, threshold=settings.threshold, top_n=settings.top_n)
        return _matcher


def reset_backend():
    """Drop the cached matcher so the next request reloads the data file."""
    global _matcher
    with _backend_lock:
        _matcher = None


def _get_matcher():
    try:
        return ensure_backend_initialized()
    except ConfigurationError as e:
        exception_logger.log_exception(e, "server", "Backend initialization failed")
        raise HTTPException(status_code=503, detail=str(e)) from e


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/ask", response_model=AskResponse)
def ask(request: AskRequest):
    response = _get_matcher().respond(request.question)
    return AskResponse(
        answer=response.text,
        kind=response.kind.value,
        score=response.score,
        question=response.question,
    )


@app.get("/candidates")
def candidates(q: str = ""):
    return {"matches": _get_matcher().match(q)}


if __name__ == "__main__":
    import uvicorn

    settings = load_settings()
    uvicorn.run("backend_server.main_server:app", host=settings.host, port=settings.port, reload=False)
