"""Custom error types for clear error handling."""


class LoadError(RuntimeError):
    """Raised when a lexicon or emoji table cannot be loaded."""


class InvalidTextError(ValueError):
    """Raised when input text is missing or not a string."""
