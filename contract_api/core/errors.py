"""
Errors raised while generating contract code.

Every generation failure derives from GenerationError so the endpoint can
tell them apart from unexpected exceptions.
"""
from typing import Optional


class GenerationError(Exception):
    """Base class for contract generation failures."""


class TemplateLoadError(GenerationError):
    def __init__(self, path, message: Optional[str] = None):
        self.path = path
        super().__init__(message or f"Failed to read reference template: {path}")


class UpstreamError(GenerationError):
    """The text-generation service failed or answered with a non-200 status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        detail: Optional[str] = None,
    ):
        self.status_code = status_code
        self.detail = detail
        super().__init__(message)


class ExtractionError(GenerationError):
    """No fenced block could be extracted for the requested language."""

    def __init__(self, language: str):
        self.language = language
        super().__init__(f"No {language} code generated.")


class MissingParameterError(Exception):
    """A demonstration endpoint was called without a required input."""
