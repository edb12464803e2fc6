"""
FAQ Assist - Interactive Customer Support Agent

Answers customer questions from a fixed Q&A knowledge base using TF-IDF
matching. Runs as a terminal prompt by default; the same matcher is
served over HTTP by backend_server/main_server.py.

Usage:
    python main.py                       # interactive prompt, 'exit' to quit
    python main.py What are your hours?  # answer one question and exit

Configuration comes from FAQASSIST_* environment variables (see config.py).

Author: Quinn Evans
"""

import sys

from config import load_settings
from errors import ConfigurationError
from exception_logger import exception_logger
from matcher import Matcher
from qa_loader import load_qa_data

WELCOME_MESSAGE = "Welcome to the FAQ Assist Customer Support Agent!"
PROMPT_MESSAGE = "Ask a question (type 'exit' to quit):"
GOODBYE_MESSAGE = "Thank you for using the FAQ Assist Customer Support Agent. Goodbye!"
EXIT_COMMAND = "exit"


class FAQAssistApp:
    """
    Terminal front end for the Q&A matcher.

    Attributes:
        settings (Settings): Runtime configuration
        qa_data (list[dict]): Loaded Q&A knowledge base
        matcher (Matcher): TF-IDF matching engine built from qa_data
    """

    def __init__(self, settings=None, qa_data=None):
        """
        Load configuration and the knowledge base, then build the matcher.

        Args:
            settings (Settings, optional): Overrides environment settings
            qa_data (list[dict], optional): Overrides loading from settings.qa_file

        Raises:
            ConfigurationError: If settings, the data file, or the corpus are unusable
        """
        self.settings = settings or load_settings()
        exception_logger.set_log_file(self.settings.log_file)

        if qa_data is None:
            qa_data = load_qa_data(self.settings.qa_file)
        self.qa_data = qa_data

        self.matcher = Matcher(
            self.qa_data,
            threshold=self.settings.threshold,
            top_n=self.settings.top_n,
        )

    def ask(self, question: str) -> str:
        """Answer a single question."""
        return self.matcher.answer(question.strip())

    def run(self, input_func=input, output_func=print):
        """
        Run the question/answer loop until 'exit' or end of input.

        Args:
            input_func (Callable[[str], str]): Reads one line given a prompt
            output_func (Callable[[str], None]): Writes one line
        """
        output_func(WELCOME_MESSAGE)
        output_func(PROMPT_MESSAGE)

        while True:
            try:
                line = input_func("> ")
            except EOFError:
                break

            question = line.strip()
            if question.lower() == EXIT_COMMAND:
                break
            output_func(self.ask(question))

        output_func(GOODBYE_MESSAGE)


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    try:
        app = FAQAssistApp()
    except ConfigurationError as e:
        exception_logger.log_exception(e, "main", "Startup failed")
        print(f"Cannot start FAQ Assist: {e}", file=sys.stderr)
        return 1

    if argv:
        print(app.ask(" ".join(argv)))
        return 0

    try:
        app.run()
    except KeyboardInterrupt:
        print()
        print(GOODBYE_MESSAGE)
    return 0


# Application entry point
if __name__ == "__main__":
    raise SystemExit(main())
