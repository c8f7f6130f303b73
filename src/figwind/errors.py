"""
Error types for figwind scaffolding and Figma sync.
"""

from __future__ import annotations


class FigwindError(Exception):
    """Base exception for all figwind errors."""

    def __init__(self, message: str, detail: str | None = None):
        self.message = message
        self.detail = detail
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with detail if available."""
        if self.detail:
            return f"{self.message}: {self.detail}"
        return self.message


class FigmaApiError(FigwindError):
    """
    Raised when the Figma REST API cannot be reached or rejects a request.

    Examples:
    - Invalid or expired access token
    - Unknown file key
    - Network/transport failures
    """

    def __init__(self, message: str, detail: str | None = None, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message, detail)


class ConfigError(FigwindError):
    """
    Raised when sync configuration is missing or malformed.

    Examples:
    - .figwindrc is not valid JSON
    - Figma file URL without a file key
    """

    pass


class ConverterError(FigwindError):
    """Raised when no converter exists for a requested output format."""

    pass


class ScaffoldError(FigwindError):
    """
    Raised when a project cannot be scaffolded.

    Examples:
    - Unknown template name
    - Template copy failure
    """

    pass
