"""Byte-level percent encoding of templates and paths."""

import codecs
import string

from path_to_regex.patterns import percent_triplet

SAFE_CHARS = frozenset(
    (string.ascii_letters + string.digits + "!\"#$%&'()*+,-./:;<=>?@[\\]^_{|}~`").encode()
)

_ERRORS = "path_to_regex.surrogates"


def _surrogates(err):
    """Keep undecodable bytes and lone surrogates, one character at a time.

    ``\\udc80``-``\\udcff`` map back to the raw byte they escape (as
    ``surrogateescape`` does); any other surrogate is passed as its UTF-8
    form (as ``surrogatepass`` does).
    """
    if isinstance(err, UnicodeEncodeError):
        raw = b"".join(
            char.encode(
                "utf-8",
                "surrogateescape" if "\udc80" <= char <= "\udcff" else "surrogatepass",
            )
            for char in err.object[err.start : err.end]
        )
        return raw, err.end

    if isinstance(err, UnicodeDecodeError):
        try:
            char = err.object[err.start : err.start + 3].decode("utf-8", "surrogatepass")
        except UnicodeDecodeError:
            return chr(0xDC00 + err.object[err.start]), err.start + 1
        return char, err.start + 3

    raise err


codecs.register_error(_ERRORS, _surrogates)


def percent_encode(text: str) -> str:
    """Escape every byte outside the safe set as ``%XX``.

    Multi-byte characters are escaped byte by byte, e.g. ``é`` -> ``%C3%A9``.
    """
    return "".join(
        chr(byte) if byte in SAFE_CHARS else f"%{byte:02X}"
        for byte in text.encode("utf-8", _ERRORS)
    )


def percent_decode(text: str) -> str:
    """Replace ``%XX`` triplets by their byte; malformed ``%`` stays as is."""
    raw = percent_triplet.sub(
        lambda match: bytes([int(match.group(1), 16)]),
        text.encode("utf-8", _ERRORS),
    )
    return raw.decode("utf-8", _ERRORS)
