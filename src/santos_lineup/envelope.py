import json
from datetime import datetime, timezone

import pandas as pd

from . import config
from .logger import get_logger

logger = get_logger(__name__)


def utc_timestamp(now=None) -> str:
    now = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_envelope(records, source=None, include_raw=False, now=None) -> dict:
    """Wrap records in the {source, updatedAt, count, ships} response body."""
    ships = [record.to_dict(include_raw=include_raw) for record in records]
    return {
        "source": source or config.SOURCE_URL,
        "updatedAt": utc_timestamp(now),
        "count": len(ships),
        "ships": ships,
    }


def to_json(envelope: dict, pretty=False) -> str:
    return json.dumps(envelope, ensure_ascii=False, indent=2 if pretty else None)


def records_to_frame(records) -> pd.DataFrame:
    return pd.DataFrame([record.to_dict() for record in records])


def save_json(envelope: dict, path=config.LINEUP_JSON_FILE, pretty=True):
    """Saves the response body to a JSON file."""
    logger.info(f"Saving {envelope['count']} ships to {path}")
    with open(path, "w", encoding="utf-8") as f:
        f.write(to_json(envelope, pretty=pretty))


def save_csv(records, path=config.LINEUP_CSV_FILE):
    """Saves the records as a flat CSV table."""
    df = records_to_frame(records)
    df.to_csv(path, index=False)
    logger.info(f"Successfully wrote {len(df)} records to {path}")
