class ConfigurationError(Exception):
    """Raised when the assistant cannot start: no QA data, unreadable data file, bad settings."""
