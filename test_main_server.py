import json

import pytest
from fastapi.testclient import TestClient

from backend_server.main_server import app, reset_backend

QA_DATA = [
    {"question": "What are your hours?", "answer": "9 to 5."},
    {"question": "Where are you located?", "answer": "123 Main St."},
    {"question": "Do you ship overseas?", "answer": "Yes, to most countries."},
]


@pytest.fixture
def client(tmp_path, monkeypatch):
    qa_file = tmp_path / "qa_data.json"
    qa_file.write_text(json.dumps({"questions": QA_DATA}), encoding="utf-8")
    monkeypatch.setenv("FAQASSIST_QA_FILE", str(qa_file))
    monkeypatch.setenv("FAQASSIST_THRESHOLD", "0.3")
    monkeypatch.delenv("FAQASSIST_LOG_FILE", raising=False)
    reset_backend()
    yield TestClient(app)
    reset_backend()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_ask_confident(client):
    response = client.post("/ask", json={"question": "Do you ship overseas?"})
    assert response.status_code == 200
    body = response.json()
    assert body["kind"] == "confident"
    assert body["answer"] == "Yes, to most countries."
    assert body["question"] == "Do you ship overseas?"
    assert body["score"] == pytest.approx(1.0)


def test_ask_uncertain(client):
    body = client.post("/ask", json={"question": "zebra quantum"}).json()
    assert body["kind"] == "uncertain"
    assert body["score"] == 0.0
    assert body["answer"].endswith("9 to 5.")


def test_ask_requires_question(client):
    assert client.post("/ask", json={}).status_code == 422


def test_candidates_for_uncertain_question(client):
    body = client.get("/candidates", params={"q": "zebra quantum"}).json()
    assert len(body["matches"]) == 3
    assert body["matches"][0]["answer"] == "9 to 5."


def test_no_candidates_for_confident_question(client):
    body = client.get("/candidates", params={"q": "where located"}).json()
    assert body == {"matches": []}


def test_undecodable_data_file_is_unavailable(tmp_path, monkeypatch):
    qa_file = tmp_path / "qa_data.json"
    qa_file.write_bytes(b'{"questions": [{"question": "caf\xe9", "answer": "x"}]}')
    monkeypatch.setenv("FAQASSIST_QA_FILE", str(qa_file))
    reset_backend()
    try:
        response = TestClient(app).post("/ask", json={"question": "hours?"})
        assert response.status_code == 503
        assert "not valid UTF-8" in response.json()["detail"]
    finally:
        reset_backend()


def test_missing_data_file_is_unavailable(tmp_path, monkeypatch):
    monkeypatch.setenv("FAQASSIST_QA_FILE", str(tmp_path / "missing.json"))
    reset_backend()
    try:
        response = TestClient(app).post("/ask", json={"question": "hours?"})
        assert response.status_code == 503
        assert "not found" in response.json()["detail"]
    finally:
        reset_backend()
