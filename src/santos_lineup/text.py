import re
import unicodedata

_NON_WORD = re.compile(r"[^\w ]+")
_SPACES = re.compile(r"\s+")


def normalize_text(value) -> str:
    """Lowercase, strip diacritics, turn punctuation into spaces and collapse whitespace."""
    if not value:
        return ""
    text = unicodedata.normalize("NFKD", str(value).lower())
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    text = _NON_WORD.sub(" ", text)
    return _SPACES.sub(" ", text).strip()


def collapse_spaces(value: str) -> str:
    return _SPACES.sub(" ", value).strip()


def contains_phrase(haystack: str, phrase: str) -> bool:
    """Whole-word containment of an already-normalized phrase in normalized text."""
    return f" {phrase} " in f" {haystack} "


def blank_to_none(value):
    if value is None:
        return None
    value = value.strip()
    return value or None
