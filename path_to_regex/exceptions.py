"""path_to_regex exceptions."""

from typing import Optional


class PathToRegexError(Exception):
    """Base class for path_to_regex errors."""


class InvalidPatternSyntax(PathToRegexError, ValueError):
    """The regex generated from a template does not compile."""

    def __init__(self, message: str, pattern: str, template: Optional[str] = None):
        super().__init__(message)
        self.pattern = pattern
        self.template = template
