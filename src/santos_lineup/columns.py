"""Pick the lineup table among the page's tables and map its columns to fields."""
from typing import Optional

from . import config, vocabulary
from .logger import get_logger
from .models import SemanticKey, TableCandidate
from .text import contains_phrase, normalize_text

logger = get_logger(__name__)

normalize_label = normalize_text


def match_label(label, synonyms=vocabulary.HEADER_SYNONYMS) -> Optional[SemanticKey]:
    """First semantic key whose synonyms occur (as whole words) in the header label."""
    key = normalize_label(label)
    if not key:
        return None
    for semantic_key, phrases in synonyms:
        if any(contains_phrase(key, phrase) for phrase in phrases):
            return semantic_key
    return None


def recognized_headers(table: TableCandidate, synonyms=vocabulary.HEADER_SYNONYMS) -> int:
    return sum(1 for label in table.header_labels if match_label(label, synonyms) is not None)


def score_table(table: TableCandidate, synonyms=vocabulary.HEADER_SYNONYMS) -> tuple:
    """Sort key for selection: recognized headers first, then width, then document order."""
    return (recognized_headers(table, synonyms), table.width, -table.index)


def select_table(tables, synonyms=vocabulary.HEADER_SYNONYMS) -> Optional[TableCandidate]:
    """
    The table with the most recognized header labels, ties broken by width.

    When no table has a recognized header this reduces to the widest table, which
    is how headerless revisions of the page are handled.
    """
    if not tables:
        logger.warning("No tables found in the document")
        return None
    best = max(tables, key=lambda table: score_table(table, synonyms))
    logger.debug(
        f"Selected table #{best.index} of {len(tables)} "
        f"({recognized_headers(best, synonyms)} recognized headers, width {best.width})"
    )
    return best


def build_column_map(
    table: TableCandidate,
    synonyms=vocabulary.HEADER_SYNONYMS,
    fallback=config.FALLBACK_LAYOUT,
) -> tuple:
    """
    One slot per column holding a SemanticKey or None (unmapped).

    Header labels are matched against the synonyms; a key already claimed by an
    earlier column is not assigned again. Tables without any recognized header use
    the positional `fallback` layout, extra trailing columns left unmapped.
    """
    width = table.column_count
    mapped = []
    claimed = set()
    for label in table.header_labels:
        key = match_label(label, synonyms)
        if key in claimed:
            key = None
        if key is not None:
            claimed.add(key)
        mapped.append(key)

    if not claimed:
        logger.debug(f"Table #{table.index} has no recognized headers, using positional layout")
        mapped = list(fallback[:width])

    mapped.extend([None] * (width - len(mapped)))
    return tuple(mapped[:width])


def column_index(column_map, key: SemanticKey) -> Optional[int]:
    try:
        return column_map.index(key)
    except ValueError:
        return None
