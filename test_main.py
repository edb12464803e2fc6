import json
from pathlib import Path

import pytest

from answer_selector import FALLBACK_MESSAGE
from config import Settings
from errors import ConfigurationError
from main import GOODBYE_MESSAGE, WELCOME_MESSAGE, FAQAssistApp, main

QA_DATA = [
    {"question": "What are your hours?", "answer": "9 to 5."},
    {"question": "Where are you located?", "answer": "123 Main St."},
]


def make_settings(qa_file=Path("unused.json"), threshold=0.3):
    return Settings(qa_file=qa_file, threshold=threshold, top_n=5,
                    log_file=None, host="127.0.0.1", port=8000)


def scripted_input(lines):
    remaining = list(lines)

    def read(prompt):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read


def test_loop_answers_until_exit():
    app = FAQAssistApp(settings=make_settings(), qa_data=QA_DATA)
    output = []
    app.run(scripted_input(["where are you located", "  EXIT  ", "never read"]), output.append)

    assert output[0] == WELCOME_MESSAGE
    assert output[2] == "123 Main St."
    assert output[-1] == GOODBYE_MESSAGE
    assert len(output) == 4


def test_loop_stops_at_end_of_input():
    app = FAQAssistApp(settings=make_settings(), qa_data=QA_DATA)
    output = []
    app.run(scripted_input(["", "what are your hours?"]), output.append)

    assert output[2] == f"{FALLBACK_MESSAGE} 9 to 5."
    assert output[3] == "9 to 5."
    assert output[-1] == GOODBYE_MESSAGE


def test_empty_knowledge_base_fails_startup():
    with pytest.raises(ConfigurationError):
        FAQAssistApp(settings=make_settings(), qa_data=[])


def test_app_loads_data_file(tmp_path):
    qa_file = tmp_path / "qa_data.json"
    qa_file.write_text(json.dumps({"questions": QA_DATA}), encoding="utf-8")
    app = FAQAssistApp(settings=make_settings(qa_file=qa_file))
    assert app.ask("  what are your hours  ") == "9 to 5."


def test_main_single_question(tmp_path, monkeypatch, capsys):
    qa_file = tmp_path / "qa_data.json"
    qa_file.write_text(json.dumps({"questions": QA_DATA}), encoding="utf-8")
    monkeypatch.setenv("FAQASSIST_QA_FILE", str(qa_file))
    monkeypatch.delenv("FAQASSIST_LOG_FILE", raising=False)

    assert main(["where", "are", "you", "located?"]) == 0
    assert capsys.readouterr().out.strip().endswith("123 Main St.")


def test_main_reports_missing_data(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("FAQASSIST_QA_FILE", str(tmp_path / "missing.json"))
    monkeypatch.delenv("FAQASSIST_LOG_FILE", raising=False)

    assert main([]) == 1
    assert "Cannot start FAQ Assist" in capsys.readouterr().err
