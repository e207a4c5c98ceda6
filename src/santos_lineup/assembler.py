from datetime import datetime
from typing import Optional

from . import config, vocabulary
from .columns import build_column_map, column_index, select_table
from .logger import get_logger
from .models import SemanticKey, ShipRecord, TableCandidate
from .normalizers import (
    classify_cargo,
    clean_operation,
    extract_imo,
    parse_arrival,
    parse_length_draft,
    translate_flag,
    translate_goods,
    translate_notice,
)
from .text import blank_to_none

logger = get_logger(__name__)


def is_data_row(row, min_filled=config.MIN_FILLED_CELLS) -> bool:
    """Vessel rows have at least `min_filled` non-blank cells (inclusive)."""
    return sum(1 for cell in row if cell and cell.strip()) >= min_filled


def filter_rows(rows, min_filled=config.MIN_FILLED_CELLS) -> list:
    kept = [row for row in rows if is_data_row(row, min_filled)]
    dropped = len(rows) - len(kept)
    if dropped:
        logger.debug(f"Dropped {dropped} sparse rows (< {min_filled} filled cells)")
    return kept


def pad_row(row, width) -> tuple:
    row = tuple(row)
    return row + ("",) * (width - len(row))


def assemble_record(row, column_map, now: Optional[datetime] = None) -> ShipRecord:
    """Build one ShipRecord from a raw row; unmapped fields stay None."""
    row = pad_row(row, len(column_map))

    def cell(key):
        index = column_index(column_map, key)
        return blank_to_none(row[index]) if index is not None else None

    flag = cell(SemanticKey.FLAG)
    goods = cell(SemanticKey.GOODS)
    agency = cell(SemanticKey.AGENCY)
    pier = cell(SemanticKey.PIER)
    terminal = cell(SemanticKey.TERMINAL)
    notice = cell(SemanticKey.NOTICE)
    duv = cell(SemanticKey.DUV)
    arrival_text = cell(SemanticKey.ARRIVAL)

    dimensions = parse_length_draft(cell(SemanticKey.LENGTH_DRAFT))
    arrival = parse_arrival(arrival_text, now=now)
    category = classify_cargo(goods, terminal, pier, agency)

    return ShipRecord(
        raw=row,
        imo=extract_imo(row, column_index(column_map, SemanticKey.IMO), duv),
        ship=cell(SemanticKey.SHIP),
        flag=flag,
        flag_en=translate_flag(flag),
        length_m=dimensions.length,
        draft_m=dimensions.draft,
        nav=cell(SemanticKey.NAV),
        arrival_text=arrival_text,
        arrival_iso=arrival.iso,
        arrival_ts=arrival.ts,
        notice_code=notice,
        notice_en=translate_notice(notice),
        agency=agency,
        operation=clean_operation(cell(SemanticKey.OPERATION)),
        goods=goods,
        goods_en=translate_goods(goods),
        weight=cell(SemanticKey.WEIGHT),
        voyage=cell(SemanticKey.VOYAGE),
        duv=duv,
        duv_class=cell(SemanticKey.DUV_CLASS),
        pier=pier,
        terminal=terminal,
        cargo_category=category,
        cargo_category_en=category.label,
    )


def build_records(
    tables,
    synonyms=vocabulary.HEADER_SYNONYMS,
    fallback=config.FALLBACK_LAYOUT,
    min_filled=config.MIN_FILLED_CELLS,
    now: Optional[datetime] = None,
) -> list[ShipRecord]:
    """Run selection, column mapping, row filtering and assembly over a page's tables."""
    table: Optional[TableCandidate] = select_table(list(tables), synonyms)
    if table is None:
        return []
    column_map = build_column_map(table, synonyms, fallback)
    rows = filter_rows(table.rows, min_filled)
    records = [assemble_record(row, column_map, now=now) for row in rows]
    logger.debug(f"Assembled {len(records)} records from table #{table.index}")
    return records
