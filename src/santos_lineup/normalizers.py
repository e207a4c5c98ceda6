"""
Cell normalizers.

Every function here is total over its input: malformed text yields None (or a
pass-through value where noted), never an exception.
"""
import re
import string
from datetime import datetime, timedelta, timezone
from typing import NamedTuple, Optional

from . import config, vocabulary
from .models import CargoCategory
from .text import contains_phrase, normalize_text


class LengthDraft(NamedTuple):
    length: Optional[float]
    draft: Optional[float]


class Arrival(NamedTuple):
    iso: Optional[str]
    ts: Optional[int]


UNAVAILABLE_DIMENSIONS = LengthDraft(None, None)
UNAVAILABLE_ARRIVAL = Arrival(None, None)


# --- Length / draft ---

_NUMBER = r"\d+(?:\.\d+)?"
_SEPARATED = re.compile(rf"^({_NUMBER})\s*(?:/|\s)\s*({_NUMBER})$")
_RUN_ON = re.compile(r"^(\d{3,6})(\.\d+)?$")

# Width of the length part tried for run-on cells like "18310.5"
_RUN_ON_LENGTH_WIDTHS = (3, 2, 4)


def parse_length_draft(text) -> LengthDraft:
    """
    Split a combined "length draft" cell into meters.

    Accepts "183/10.5", "183 10,5" and run-on "18310.5". Run-on cells are split at
    the first width (3, 2, then 4 digits of length) giving a draft of one or two
    integer digits without a leading zero, within the plausibility bounds.
    """
    if not text:
        return UNAVAILABLE_DIMENSIONS
    value = str(text).strip().replace(",", ".")

    match = _SEPARATED.match(value)
    if match:
        return LengthDraft(float(match.group(1)), float(match.group(2)))

    match = _RUN_ON.match(value)
    if not match:
        return UNAVAILABLE_DIMENSIONS
    digits, fraction = match.group(1), match.group(2) or ""
    for width in _RUN_ON_LENGTH_WIDTHS:
        length_part, draft_int = digits[:width], digits[width:]
        if not 1 <= len(draft_int) <= 2 or draft_int.startswith("0"):
            continue
        length, draft = float(length_part), float(draft_int + fraction)
        if length <= config.MAX_LENGTH_M and draft <= config.MAX_DRAFT_M:
            return LengthDraft(length, draft)
    return UNAVAILABLE_DIMENSIONS


def _plain(value: float) -> str:
    # repr keeps every digit; integral values drop the ".0"
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def format_length_draft(length: float, draft: float) -> str:
    return f"{_plain(length)}/{_plain(draft)}"


# --- Arrival date / time ---

# Matched against the whole cell: extra digits never shorten a year or an hour
_ARRIVAL = re.compile(
    r"(?P<day>\d{1,2})[/-](?P<month>\d{1,2})(?:[/-](?P<year>\d{4}|\d{2}))?"
    r"(?:\s+(?P<hour>\d{1,2})(?:[:h](?P<minute>\d{1,2}))?\s*h?)?",
    re.IGNORECASE,
)


def local_timezone(offset_minutes=None) -> timezone:
    if offset_minutes is None:
        offset_minutes = config.LOCAL_UTC_OFFSET_MINUTES
    return timezone(timedelta(minutes=offset_minutes))


def parse_arrival(text, now: Optional[datetime] = None, offset_minutes=None) -> Arrival:
    """
    Parse "dd/mm[/yyyy] [hh[:mm]]" local wall-clock text.

    Missing year is the current local year, missing time is midnight. Cells with
    anything beyond that pattern are unavailable rather than guessed. Returns the
    ISO-8601 string with the fixed offset and epoch milliseconds from the same parse.
    """
    if not text:
        return UNAVAILABLE_ARRIVAL
    tz = local_timezone(offset_minutes)
    match = _ARRIVAL.fullmatch(str(text).strip())
    if not match:
        return UNAVAILABLE_ARRIVAL

    if match.group("year"):
        year = int(match.group("year"))
        if year < 100:
            year += 2000
    else:
        now = now or datetime.now(tz)
        year = now.astimezone(tz).year if now.tzinfo else now.year

    try:
        moment = datetime(
            year,
            int(match.group("month")),
            int(match.group("day")),
            int(match.group("hour") or 0),
            int(match.group("minute") or 0),
            tzinfo=tz,
        )
    except ValueError:
        return UNAVAILABLE_ARRIVAL
    return Arrival(moment.isoformat(), int(moment.timestamp()) * 1000)


# --- Notice code ---

def translate_notice(code) -> Optional[str]:
    if not code or not code.strip():
        return None
    upper = code.strip().upper()
    if "EMB" in upper and "DESC" in upper:
        return "Load & Unload"
    if upper == "EMB":
        return "Load"
    if upper == "DESC":
        return "Unload"
    return code.strip()


# --- Flag ---

def translate_flag(flag, countries=vocabulary.COUNTRY_NAMES, hints=vocabulary.COUNTRY_HINTS) -> Optional[str]:
    """English country name for a Portuguese flag; falls back to a capitalized copy."""
    if not flag or not flag.strip():
        return None
    key = normalize_text(flag)
    if key in countries:
        return countries[key]
    for fragment, english in hints:
        if fragment in key:
            return english
    return string.capwords(flag.strip().lower())


# --- Goods ---

def translate_goods(goods, glossary=vocabulary.GOODS_GLOSSARY) -> Optional[str]:
    key = normalize_text(goods)
    if not key:
        return None
    if key in glossary:
        return glossary[key]
    best = None
    for phrase in glossary:
        if contains_phrase(key, phrase) and (best is None or len(phrase) > len(best)):
            best = phrase
    return glossary[best] if best else None


# --- Cargo category ---

def classify_cargo(*texts, keywords=vocabulary.CARGO_KEYWORDS) -> CargoCategory:
    """
    Bucket a vessel call by looking for keywords in its free-text fields.

    Categories are tried strictly in order (container, liquid, bulk): a container
    terminal moving soybeans is still a container call.
    """
    bag = normalize_text(" | ".join(t for t in texts if t))
    for category, words in keywords:
        if any(word in bag for word in words):
            return category
    return CargoCategory.OTHER


# --- Operation ---

_NUMERIC_ONLY = re.compile(r"^\d[\d\- ]*$")


def clean_operation(text) -> Optional[str]:
    """Operation text, or None when the column carries a number instead."""
    if not text or not text.strip():
        return None
    value = text.strip()
    if not re.search(r"[A-Za-z]", value) or _NUMERIC_ONLY.match(value):
        return None
    return value


# --- IMO ---

_IMO_CANDIDATE = re.compile(r"(?<!\d)(0\d{7}|\d{7})(?!\d)")


def _imo_from(text, excluded) -> Optional[str]:
    for match in _IMO_CANDIDATE.finditer(text or ""):
        digits = match.group(1)
        if len(digits) == 8:
            digits = digits[1:]
        if excluded and digits == excluded:
            continue
        return digits
    return None


def extract_imo(cells, imo_column=None, duv=None) -> Optional[str]:
    """
    Find the vessel's IMO number.

    When the table has a dedicated column only that cell is read, so a blank IMO
    cell gives None. Otherwise every cell is scanned for a 7-digit run ("0" + 7
    digits counts as zero-padded). A run equal to the DUV number's digits is never
    taken.
    """
    excluded = re.sub(r"\D", "", duv or "")
    if excluded.startswith("0") and len(excluded) == 8:
        excluded = excluded[1:]
    if imo_column is not None:
        return _imo_from(cells[imo_column], excluded) if imo_column < len(cells) else None
    for cell in cells:
        found = _imo_from(cell, excluded)
        if found:
            return found
    return None
