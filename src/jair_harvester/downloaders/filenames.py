"""Filename helpers for downloaded articles."""

import re

MAX_STEM_BYTES = 200
DEFAULT_STEM = "untitled"

RESERVED_CHARACTERS = re.compile(r'[<>:"/\\|?*\x00-\x1f\x7f]')
WHITESPACE = re.compile(r"\s+")
REPEATED_UNDERSCORES = re.compile(r"_{2,}")


def sanitize_filename(title: str) -> str:
    """Return a filesystem-safe file stem derived from an article title.

    Path separators, reserved characters and control characters become
    underscores, as do runs of whitespace. The stem is cut to at most
    MAX_STEM_BYTES of UTF-8 so the filename fits common filesystem limits.
    """
    safe = RESERVED_CHARACTERS.sub("_", title)
    safe = WHITESPACE.sub("_", safe)
    safe = REPEATED_UNDERSCORES.sub("_", safe)
    safe = safe.strip("._ ")
    safe = safe.encode("utf-8")[:MAX_STEM_BYTES].decode("utf-8", errors="ignore")
    safe = safe.rstrip("._ ")
    return safe or DEFAULT_STEM


def pdf_filename(title: str) -> str:
    """Return the ``.pdf`` filename for an article title."""
    return f"{sanitize_filename(title)}.pdf"
