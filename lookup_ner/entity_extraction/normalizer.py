"""
Text normalization applied to entity definitions and token values before lookup.
"""
import re
import unicodedata

_WHITESPACE_RE = re.compile(r"\s+")


def strip_diacritics(text: str) -> str:
    """Remove combining marks after NFD decomposition (Wärtsilä → Wartsila)."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")


def normalize_text(text: str, ignore_diacritics: bool = True) -> str:
    """
    Case-fold `text`, stripping diacritics as well when `ignore_diacritics` is set.

    Whitespace is left alone; see `normalize_phrase` for entity definitions.
    """
    if ignore_diacritics:
        return strip_diacritics(text).lower()
    return text.lower()


def normalize_phrase(text: str, ignore_diacritics: bool = True) -> str:
    """Trim, collapse internal whitespace to single spaces, then `normalize_text`."""
    return normalize_text(_WHITESPACE_RE.sub(" ", text.strip()), ignore_diacritics)
