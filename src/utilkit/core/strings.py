"""String predicates and transformations."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any
from urllib.parse import urlsplit

from utilkit.core.errors import require
from utilkit.core.types import is_integer, is_string

DEFAULT_ELLIPSIS = "…"
DEFAULT_URL_SCHEMES: tuple[str, ...] = ("ftp", "http", "https")

_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_WHITESPACE_RE = re.compile(r"\s")
_SLUG_SEPARATOR_RE = re.compile(r"[^a-z0-9]+")


def is_empty_string(value: Any) -> bool:
    require(is_string(value), "is_empty_string", "a string", value)
    return len(value) == 0


def is_email(value: Any) -> bool:
    """Conservative ``local@domain.tld`` shape check.

    No whitespace or extra ``@`` anywhere, and at least one ``.`` after
    the ``@``.
    """
    require(is_string(value), "is_email", "a string", value)
    return _EMAIL_RE.fullmatch(str(value)) is not None


def is_url(value: Any, *, schemes: Iterable[str] = DEFAULT_URL_SCHEMES) -> bool:
    """Check that *value* parses as an absolute URL with an accepted scheme.

    Parsing is delegated to :func:`urllib.parse.urlsplit`. A URL is accepted
    when it contains no whitespace, its scheme is one of *schemes*, it names
    a host, and any explicit port is a valid port number.

    Examples:
        >>> is_url("https://example.com")
        True
        >>> is_url("ftp://files.example.com/file.txt")
        True
        >>> is_url("not-a-url")
        False
    """
    require(is_string(value), "is_url", "a string", value)
    text = str(value)
    if _WHITESPACE_RE.search(text):
        return False
    try:
        parts = urlsplit(text)
        # Accessing .port validates it; out-of-range ports raise ValueError.
        parts.port  # noqa: B018
    except ValueError:
        return False
    if parts.scheme.lower() not in {s.lower() for s in schemes}:
        return False
    return bool(parts.hostname)


def truncate(text: Any, max_length: Any, ellipsis: Any = DEFAULT_ELLIPSIS) -> str:
    """Shorten *text* to at most *max_length* characters, ending in *ellipsis*.

    Text that already fits is returned unchanged. When *max_length* leaves
    no room for any of the original text, the ellipsis itself is cut to
    *max_length*.

    Examples:
        >>> truncate("Hello, world", 8)
        'Hello, …'
        >>> truncate("short", 10)
        'short'
        >>> truncate("Hello", 2, "...")
        '..'
    """
    require(is_string(text), "truncate", "a string", text)
    require(
        is_integer(max_length) and max_length >= 0,
        "truncate",
        "a non-negative integer",
        max_length,
    )
    require(is_string(ellipsis), "truncate", "a string ellipsis", ellipsis)
    text, ellipsis, limit = str(text), str(ellipsis), int(max_length)
    if len(text) <= limit:
        return text
    if limit <= len(ellipsis):
        return ellipsis[:limit]
    return text[: limit - len(ellipsis)] + ellipsis


def slugify(text: Any) -> str:
    """Lowercase, then collapse each run of non ``[a-z0-9]`` into one hyphen.

    Examples:
        >>> slugify("Hello World")
        'hello-world'
        >>> slugify("  Fancy -- Title!")
        '-fancy-title-'
    """
    require(is_string(text), "slugify", "a string", text)
    return _SLUG_SEPARATOR_RE.sub("-", str(text).lower())
