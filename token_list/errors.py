"""
Exception hierarchy for token list loading.

Every failure of the load pipeline is raised as a subclass of
``TokenListError`` so callers can catch the whole family at once.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

if TYPE_CHECKING:
    from .services.validation import Violation


class TokenListError(Exception):
    """Base token list error."""
    pass


class TokenListParseError(TokenListError):
    """Input is not UTF-8 JSON, or does not have the token list shape."""

    def __init__(self, message: str, errors: Optional[Sequence[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors: List[Dict[str, Any]] = list(errors or [])


class TokenListValidationError(TokenListError):
    """Well-formed token list that breaks one or more domain constraints."""

    def __init__(self, violations: Sequence["Violation"]):
        self.violations: List["Violation"] = list(violations)
        lines = [f"{len(self.violations)} token list violation(s):"]
        lines.extend(f"  {v}" for v in self.violations)
        super().__init__("\n".join(lines))


class TokenListNetworkError(TokenListError):
    """Download failed: transport error or a non-200 response."""

    def __init__(self, message: str, *, uri: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.uri = uri
        self.status_code = status_code


__all__ = [
    "TokenListError",
    "TokenListParseError",
    "TokenListValidationError",
    "TokenListNetworkError",
]
