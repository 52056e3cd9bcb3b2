"""Compiled path matchers."""

import logging
import re
from typing import Dict, Optional, Sequence, Tuple

from path_to_regex.encoding import percent_decode, percent_encode
from path_to_regex.exceptions import InvalidPatternSyntax
from path_to_regex.routing import make_pattern
from path_to_regex.types import CaseSensitivity, MatchResult

log = logging.getLogger("path_to_regex")


def _regex_flags(sensitivity: CaseSensitivity) -> int:
    if sensitivity == CaseSensitivity.INSENSITIVE:
        return re.IGNORECASE
    return 0


class Matcher:
    """Match paths against a compiled template and extract its params.

    Usage::

        matcher = Matcher(r"^/([^\\/]+?)\\/?$", ["id"])
        matched, params = matcher("/42")
    """

    __slots__ = ("_keys", "_pattern", "_regex", "_sensitivity", "_template")

    def __init__(
        self,
        pattern: str,
        keys: Sequence[str],
        sensitivity: CaseSensitivity = CaseSensitivity.SENSITIVE,
        template: Optional[str] = None,
    ) -> None:
        """Compile the regex; raise ``InvalidPatternSyntax`` when it is broken."""
        self._pattern = pattern
        self._template = pattern if template is None else template
        self._keys: Tuple[str, ...] = tuple(keys)
        self._sensitivity = sensitivity
        try:
            self._regex = re.compile(pattern, _regex_flags(sensitivity))
        except re.error as err:
            raise InvalidPatternSyntax(
                f"Invalid pattern {pattern!r}: {err}", pattern, self._template
            ) from err

        if self._regex.groups != len(self._keys):
            raise InvalidPatternSyntax(
                f"Pattern {pattern!r} has {self._regex.groups} capturing groups "
                f"for {len(self._keys)} keys",
                pattern,
                self._template,
            )

    @property
    def pattern(self) -> str:
        """Return the regex source."""
        return self._pattern

    @property
    def template(self) -> str:
        """Return the template the matcher was built from."""
        return self._template

    @property
    def keys(self) -> Tuple[str, ...]:
        return self._keys

    @property
    def sensitivity(self) -> CaseSensitivity:
        return self._sensitivity

    def __repr__(self) -> str:
        return f"Matcher(template={self._template!r}, pattern={self._pattern!r})"

    def __call__(self, path: str) -> MatchResult:
        """Match a path; params hold the decoded captures on success."""
        match = self._regex.fullmatch(percent_encode(path))
        if match is None:
            return MatchResult(matched=False)

        params: Dict[str, str] = {}
        # Ascending order so the last duplicate key wins.
        for index, key in enumerate(self._keys, start=1):
            params[key] = percent_decode(match.group(index) or "")
        return MatchResult(matched=True, params=params)


def match(
    path: str, sensitivity: CaseSensitivity = CaseSensitivity.SENSITIVE
) -> Matcher:
    """Compile a path template into a ``Matcher``.

    Templates support ``:name`` params with an optional ``(regex)``
    constraint, ``*name`` wildcards spanning separators and ``{...}``
    optional groups::

        >>> matcher = match("/api/v1/download/:file{.:ext}")
        >>> matcher("/api/v1/download/archive.zip").params
        {'file': 'archive', 'ext': 'zip'}
    """
    pattern, keys = make_pattern(path)
    try:
        matcher = Matcher(pattern, keys, sensitivity, template=path)
    except InvalidPatternSyntax as err:
        log.error(f"Cannot compile template {path!r}: {err}")
        raise

    log.debug(f"Compiled {path!r} to {pattern!r} with keys {keys}")
    return matcher
