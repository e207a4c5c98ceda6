"""
Streaming <table> extractor.

Built on the same `html.parser` tokenizer BeautifulSoup's "html.parser" backend uses,
but driven chunk by chunk: a table is handed out as soon as its closing tag (or the
end of the document) is seen, without materializing the whole page first.
"""
from collections import deque
from html.parser import HTMLParser

from .logger import get_logger
from .models import TableCandidate
from .text import collapse_spaces

logger = get_logger(__name__)

CELL_TAGS = ("td", "th")
SECTION_TAGS = ("thead", "tbody", "tfoot")


class _TableBuilder:
    """Mutable state for one table while its markup is still streaming in."""

    def __init__(self, index):
        self.index = index
        self.section = None
        self.header = ()
        self.rows = []
        self.row = None
        self.row_has_td = False
        self.cell = None
        # text of the current run; the tokenizer may split it at feed() boundaries
        self.pending = []

    def open_row(self):
        self.close_row()
        self.row = []
        self.row_has_td = False

    def open_cell(self, tag):
        if self.row is None:
            self.open_row()
        self.close_cell()
        self.cell = []
        self.row_has_td = self.row_has_td or tag == "td"

    def add_text(self, text):
        if self.cell is not None:
            self.pending.append(text)

    def flush_text(self):
        """Close the current text run; runs are separated by markup, not by chunks."""
        if not self.pending:
            return
        text = collapse_spaces("".join(self.pending))
        self.pending = []
        if text and self.cell is not None:
            self.cell.append(text)

    def close_cell(self):
        self.flush_text()
        if self.cell is not None:
            self.row.append(" ".join(self.cell))
            self.cell = None

    def close_row(self):
        self.close_cell()
        row, self.row = self.row, None
        if not row:
            return
        if self._is_header_row():
            if len(row) > len(self.header):
                self.header = tuple(row)
        else:
            self.rows.append(tuple(row))

    def _is_header_row(self):
        if self.section == "thead":
            return True
        # <th>-only rows above the first data row also count as the header
        return not self.row_has_td and not self.rows and self.section != "tfoot"

    def build(self):
        self.close_row()
        return TableCandidate(index=self.index, header_labels=self.header, rows=self.rows)


class TableExtractor(HTMLParser):
    """
    Incremental table extractor with pull semantics.

    Feed it text with `feed()` as it arrives and collect finished tables with
    `next_table()` / `pop_tables()`. Markup errors never raise: unclosed cells and
    rows are closed by the next sibling, unclosed tables by `close()`.
    """

    def __init__(self):
        super().__init__(convert_charrefs=True)
        self._stack = []
        self._done = deque()
        self._opened = 0

    # --- tokenizer callbacks ---

    def handle_starttag(self, tag, attrs):
        if self._stack:
            self._stack[-1].flush_text()
        if tag == "table":
            self._stack.append(_TableBuilder(self._opened))
            self._opened += 1
            return
        if not self._stack:
            return
        table = self._stack[-1]
        if tag in SECTION_TAGS:
            table.close_row()
            table.section = tag
        elif tag == "tr":
            table.open_row()
        elif tag in CELL_TAGS:
            table.open_cell(tag)

    def handle_endtag(self, tag):
        if self._stack:
            self._stack[-1].flush_text()
        if tag == "table":
            if self._stack:
                self._finish(self._stack.pop())
            return
        if not self._stack:
            return
        table = self._stack[-1]
        if tag in CELL_TAGS:
            table.close_cell()
        elif tag == "tr":
            table.close_row()
        elif tag in SECTION_TAGS:
            table.close_row()
            table.section = None

    def handle_data(self, data):
        if self._stack:
            self._stack[-1].add_text(data)

    def close(self):
        super().close()
        while self._stack:
            self._finish(self._stack.pop())

    # --- pull interface ---

    def next_table(self):
        """Return the next completed table, or None when none is ready yet."""
        return self._done.popleft() if self._done else None

    def pop_tables(self):
        tables = list(self._done)
        self._done.clear()
        return tables

    def _finish(self, builder):
        table = builder.build()
        logger.debug(
            f"Table #{table.index}: {len(table.header_labels)} header labels, {len(table.rows)} rows"
        )
        self._done.append(table)


def extract_tables(html: str) -> list[TableCandidate]:
    """Extract every table of an in-memory document, in opening order."""
    extractor = TableExtractor()
    extractor.feed(html)
    extractor.close()
    return sorted(extractor.pop_tables(), key=lambda t: t.index)


async def iter_tables(chunks):
    """
    Yield tables from an async iterable of decoded text chunks as they complete.

    Tables come out in completion order (a nested table before its parent);
    `TableCandidate.index` keeps the opening order.
    """
    extractor = TableExtractor()
    async for chunk in chunks:
        extractor.feed(chunk)
        for table in extractor.pop_tables():
            yield table
    extractor.close()
    for table in extractor.pop_tables():
        yield table
