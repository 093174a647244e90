"""String normalisation utilities used throughout the project."""

from __future__ import annotations

import re
import unicodedata
from typing import Iterable

__all__ = ["slugify", "camel_case", "pascal_case", "normalize_scope", "is_valid_email"]


_NON_WORD = re.compile(r"[^a-z0-9]+")
_EMAIL_PATTERN = re.compile(r"^[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,4}$", re.IGNORECASE)


def slugify(value: str | Iterable[str], *, separator: str = "-") -> str:
    """Create a kebab-case slug from ``value``.

    Parameters
    ----------
    value:
        The text to normalise. When an iterable of strings is provided the values
        are joined with spaces before slugification.
    separator:
        The character used to join individual words.

    Diacritics are folded to ASCII. Whitespace, punctuation and underscores all
    act as word separators, so the result only ever contains lowercase letters,
    digits and ``separator``.
    """

    if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
        value = " ".join(str(part) for part in value)

    text = unicodedata.normalize("NFKD", str(value))
    text = text.encode("ascii", "ignore").decode("ascii").lower()

    return _NON_WORD.sub(separator, text).strip(separator)


def _words(value: str) -> list[str]:
    return [word for word in slugify(value).split("-") if word]


def camel_case(value: str) -> str:
    """Return ``value`` as a lower camel case identifier (``my-lib`` -> ``myLib``)."""

    words = _words(value)
    if not words:
        return ""
    return words[0] + "".join(word.capitalize() for word in words[1:])


def pascal_case(value: str) -> str:
    """Return ``value`` as an upper camel case identifier (``my-lib`` -> ``MyLib``)."""

    return "".join(word.capitalize() for word in _words(value))


def normalize_scope(value: str) -> str:
    """Return ``value`` ready to be prepended to a package name.

    An empty scope stays empty, anything else ends with exactly one ``/``.
    """

    if not value:
        return ""
    return value.rstrip("/") + "/"


def is_valid_email(value: str) -> bool:
    return bool(_EMAIL_PATTERN.fullmatch(value))
