"""
Exception Logger for FAQ Assist

Central error and warning log shared by the loader, the interactive
loop and the backend server. Entries carry a timestamp and the tag of
the component that produced them; exceptions also get a stack trace.

Features:
- Thread-safe appends (the backend serves requests concurrently)
- Falls back to stdout when no log file is configured
- Module-specific tags (LOADER, MAIN, SERVER)

Author: Quinn Evans
"""

import os
import threading
import traceback
from datetime import datetime
from pathlib import Path
from typing import Optional


class ExceptionLogger:
    """
    Centralized exception and warning log.

    Attributes:
        log_file (str): Path to the current log file, or None to print
        lock (threading.Lock): Thread-safe file access
    """

    def __init__(self):
        """Initialize the exception logger."""
        self.log_file = None
        self.lock = threading.Lock()

    def set_log_file(self, log_file_path: Optional[str]):
        """
        Set the log file path, creating its directory if needed.

        Passing None switches back to printing.
        """
        self.log_file = log_file_path
        if not log_file_path:
            return

        log_dir = os.path.dirname(log_file_path)
        if log_dir:
            Path(log_dir).mkdir(parents=True, exist_ok=True)

    def _write(self, entry: str, console_line: str):
        if not self.log_file:
            print(console_line)
            return

        with self.lock:
            try:
                with open(self.log_file, 'a', encoding='utf-8') as f:
                    f.write(entry)
            except OSError as write_error:
                print(f"Failed to write to error log: {write_error}")
                print(f"Original entry: {entry}")

    @staticmethod
    def _timestamp() -> str:
        return datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    def log_exception(self, exception: Exception, module: str = "unknown",
                      context: Optional[str] = None):
        """
        Log an exception with full details.

        Args:
            exception (Exception): The exception that occurred
            module (str): Name of the module where exception occurred
            context (str, optional): Additional context information
        """
        log_entry = f"\n[{self._timestamp()}] [{module.upper()}] {exception}\n"
        if context:
            log_entry += f"Context: {context}\n"

        log_entry += "Stack Trace:\n"
        log_entry += "".join(traceback.format_exception(
            type(exception), exception, exception.__traceback__
        ))
        log_entry += "\n" + "=" * 80 + "\n"

        self._write(log_entry, f"Exception in {module}: {exception}")

    def log_warning(self, message: str, module: str = "unknown",
                    context: Optional[str] = None):
        """Log a recoverable problem, such as a skipped Q&A record."""
        self._log_line("WARNING", message, module, context)

    def _log_line(self, level: str, message: str, module: str, context: Optional[str]):
        log_entry = f"[{self._timestamp()}] [{module.upper()}] {level}: {message}"
        if context:
            log_entry += f" | Context: {context}"
        log_entry += "\n"

        console_line = f"{level.capitalize()} in {module}: {message}"
        if context:
            console_line += f" ({context})"
        self._write(log_entry, console_line)


# Global exception logger instance
exception_logger = ExceptionLogger()

