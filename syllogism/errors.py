"""
Error kinds raised by the quiz engine.

All errors derive from QuizError, which is a ValueError so callers that
already guard generation with ``except ValueError`` keep working.
"""


class QuizError(ValueError):
    """Base class for quiz generation failures."""


class InvalidLanguageError(QuizError):
    """Requested language code is not configured."""

    def __init__(self, lang: str, supported=()):
        self.lang = lang
        self.supported = tuple(supported)
        message = f"Invalid language: {lang!r}"
        if self.supported:
            message += f". Supported: {', '.join(self.supported)}"
        super().__init__(message)


class TemplateValidationError(QuizError):
    """A template violates one of the library invariants."""


class EmptyTemplateLibraryError(QuizError):
    """No usable template is available."""


class ConfigError(QuizError):
    """Configuration file or values are invalid."""
