"""Template to regex conversion utilities."""

from typing import List, Tuple

from path_to_regex.encoding import percent_decode, percent_encode
from path_to_regex.patterns import token_pattern


def find_separator(path: str) -> str:
    """Return the path component delimiter used by a template."""
    slash = path.find("/")
    backslash = path.find("\\")
    if backslash != -1 and (slash == -1 or backslash < slash):
        return "\\"
    return "/"


def _make_subpattern(path: str, separator: str) -> Tuple[str, List[str]]:
    """Translate percent-encoded template text into regex text and keys.

    Optional groups recurse with the separator of the whole template.
    Constraints are copied verbatim and only checked when the regex compiles.
    """
    keys: List[str] = []
    pattern = ""
    last_pos = 0

    for match in token_pattern.finditer(path):
        pattern += path[last_pos : match.start()]
        tokens = match.groupdict()

        if tokens["optional"] is not None:
            subpattern, subkeys = _make_subpattern(tokens["optional"], separator)
            if subpattern:
                pattern += f"(?:{subpattern})?"
                keys.extend(subkeys)
        elif tokens["name"] is not None:
            keys.append(percent_decode(tokens["name"]))
            pattern += tokens["constraint"] or f"([^\\{separator}]+?)"
        elif tokens["wildcard"] is not None:
            keys.append(percent_decode(tokens["wildcard"]))
            pattern += "(.+?)"
        else:
            pattern += "\\" + tokens["special"]

        last_pos = match.end()

    pattern += path[last_pos:]
    return pattern, keys


def make_pattern(path: str) -> Tuple[str, List[str]]:
    """Convert a template to an anchored regex and its ordered parameter keys.

    A trailing separator is always optional::

        >>> make_pattern("/:foo")
        ('^/([^\\\\/]+?)\\\\/?$', ['foo'])
    """
    separator = find_separator(path)
    pattern, keys = _make_subpattern(percent_encode(path), separator)
    if not pattern.endswith(separator):
        pattern += "\\" + separator
    return f"^{pattern}?$", keys
