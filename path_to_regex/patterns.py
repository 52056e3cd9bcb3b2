"""Regex patterns for template tokenizing."""

import re

# Token alternatives, first match wins:
# optional group | named param (+ constraint) | wildcard param | special char
token_pattern = re.compile(
    r"\{(?P<optional>[^}]*)\}"
    r"|:(?P<name>[\w%]+)(?P<constraint>\([^)]+\))?"
    r"|\*(?P<wildcard>[\w%]+)"
    r"|(?P<special>[.^$*+?()|\[\]{}\\])",
    re.ASCII,
)
percent_triplet = re.compile(rb"%([0-9A-Fa-f]{2})")
