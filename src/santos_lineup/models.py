from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Optional, Tuple

RawRow = Tuple[str, ...]


class SemanticKey(str, Enum):
    """Logical field a table column can be mapped to."""

    SHIP = "ship"
    FLAG = "flag"
    LENGTH_DRAFT = "lengthDraft"
    NAV = "nav"
    ARRIVAL = "arrival"
    NOTICE = "notice"
    AGENCY = "agency"
    OPERATION = "operation"
    GOODS = "goods"
    WEIGHT = "weight"
    VOYAGE = "voyage"
    DUV = "duv"
    DUV_CLASS = "duvClass"
    PIER = "pier"
    TERMINAL = "terminal"
    IMO = "imo"


class CargoCategory(str, Enum):
    CONTAINER = "container"
    LIQUID = "liquid"
    BULK = "bulk"
    OTHER = "other"

    @property
    def label(self) -> str:
        return _CARGO_LABELS[self]


_CARGO_LABELS = {
    CargoCategory.CONTAINER: "Container",
    CargoCategory.LIQUID: "Liquid (Oil)",
    CargoCategory.BULK: "Bulk",
    CargoCategory.OTHER: "Other",
}


@dataclass
class TableCandidate:
    """
    One <table> element as seen by the extractor.

    `index` is the opening order of the table in the document, which keeps
    selection deterministic even though nested tables complete first.
    """

    index: int
    header_labels: Tuple[str, ...] = ()
    rows: list = field(default_factory=list)

    @property
    def width(self) -> int:
        first_row = len(self.rows[0]) if self.rows else 0
        return max(len(self.header_labels), first_row)

    @property
    def column_count(self) -> int:
        return max([len(self.header_labels)] + [len(row) for row in self.rows])


@dataclass
class ShipRecord:
    """A normalized vessel call. Field names are the JSON keys of the output."""

    raw: RawRow
    imo: Optional[str] = None
    ship: Optional[str] = None
    flag: Optional[str] = None
    flag_en: Optional[str] = None
    length_m: Optional[float] = None
    draft_m: Optional[float] = None
    nav: Optional[str] = None
    arrival_text: Optional[str] = None
    arrival_iso: Optional[str] = None
    arrival_ts: Optional[int] = None
    notice_code: Optional[str] = None
    notice_en: Optional[str] = None
    agency: Optional[str] = None
    operation: Optional[str] = None
    goods: Optional[str] = None
    goods_en: Optional[str] = None
    weight: Optional[str] = None
    voyage: Optional[str] = None
    duv: Optional[str] = None
    duv_class: Optional[str] = None
    pier: Optional[str] = None
    terminal: Optional[str] = None
    cargo_category: Optional[CargoCategory] = None
    cargo_category_en: Optional[str] = None

    def to_dict(self, include_raw: bool = False) -> dict:
        data = asdict(self)
        raw = list(data.pop("raw"))
        if self.cargo_category is not None:
            data["cargo_category"] = self.cargo_category.value
        if include_raw:
            data["raw"] = raw
        return data
