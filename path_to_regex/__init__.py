"""path_to_regex: compile path templates into matchers."""

from path_to_regex.encoding import percent_decode, percent_encode
from path_to_regex.exceptions import InvalidPatternSyntax, PathToRegexError
from path_to_regex.matcher import Matcher, match
from path_to_regex.types import CaseSensitivity, MatchResult

__version__ = "1.0.0"

__all__ = [
    "CaseSensitivity",
    "InvalidPatternSyntax",
    "MatchResult",
    "Matcher",
    "PathToRegexError",
    "match",
    "percent_decode",
    "percent_encode",
]
