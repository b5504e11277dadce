import logging
import re
from datetime import date, datetime

import pandas as pd

logger = logging.getLogger(__name__)

# pandas turns "today", "now" and bare times like "10:30" into the current
# date, so a value only counts as a date when it names a year.
_YEAR_PATTERN = re.compile(r"\d{4}")


def get_date_suffix_for_filename(run_date: date | None = None) -> str:
    """Returns the run date as a YYYY-MM-DD string for filenames."""
    return (run_date or datetime.now()).strftime("%Y-%m-%d")


def format_date_ddmmyyyy(value) -> str:
    """
    Normalizes a free-text date (ISO, '1 June 2024', '06/01/2024', ...) to
    'dd/mm/yyyy'. Anything blank, unparseable or without a year comes back as
    an empty string. Ambiguous numeric dates are read month-first.
    """
    if value is None or not str(value).strip():
        return ""

    text = str(value).strip()
    parsed = pd.NaT
    if _YEAR_PATTERN.search(text):
        try:
            parsed = pd.to_datetime(text, errors="coerce")
        except (ValueError, TypeError, OverflowError):
            parsed = pd.NaT

    if pd.isna(parsed):
        logger.warning(f"⚠️ Invalid date format received: {value!r}")
        return ""

    return parsed.strftime("%d/%m/%Y")
