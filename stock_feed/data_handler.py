import csv
import logging
from datetime import date
from pathlib import Path
from typing import Optional

import pandas as pd

from . import settings
from . import utils
from .exceptions import EmptyFeedError
from .schemas import FeedRow

logger = logging.getLogger(__name__)


def build_feed_filename(supplier_id: str, run_date: Optional[date] = None) -> str:
    """`<supplier_id>_<yyyy-mm-dd>.csv`"""
    return f"{supplier_id}_{utils.get_date_suffix_for_filename(run_date)}.csv"


def feed_to_dataframe(rows: list[FeedRow], columns: list[str]) -> pd.DataFrame:
    """
    Flattens rows into a DataFrame with exactly `columns`, in that order.
    A row that does not fit the header is a bug upstream, so it raises.
    """
    records = [row.to_record() for row in rows]
    for record in records:
        if list(record.keys()) != columns:
            raise ValueError(
                f"Row for {record.get('product_code')} has columns {list(record.keys())}, expected {columns}"
            )
    return pd.DataFrame.from_records(records, columns=columns)


def render_feed(rows: list[FeedRow], columns: list[str]) -> str:
    """CSV text for the feed. Header and text fields are quoted, numbers are not."""
    df = feed_to_dataframe(rows, columns)
    return df.to_csv(index=False, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")


def save_feed(
    rows: list[FeedRow],
    columns: list[str],
    supplier_id: str,
    output_dir: Optional[Path] = None,
    run_date: Optional[date] = None,
) -> Path:
    """Writes the feed CSV to the output directory and returns its path."""
    if not rows:
        raise EmptyFeedError("No data available to export.")

    output_dir = Path(output_dir or settings.OUTPUT_DIR)
    output_dir.mkdir(parents=True, exist_ok=True)

    logger.info("Converting data to CSV format...")
    csv_text = render_feed(rows, columns)

    path = output_dir / build_feed_filename(supplier_id, run_date)
    path.write_text(csv_text, encoding="utf-8")
    logger.info(f"✅ CSV file generated: {path} ({len(rows)} rows)")
    return path
