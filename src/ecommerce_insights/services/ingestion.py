"""CSV ingestion for daily store metrics."""

import logging
import math
import re
from datetime import date, datetime
from decimal import Decimal

from ecommerce_insights.domain.errors import FormatError
from ecommerce_insights.domain.metrics import DailyRecord

REQUIRED_COLUMNS = ("date", "revenue", "orders", "ad_spend")

_DATE_FORMATS = ("%Y/%m/%d", "%m/%d/%Y")
_DECIMAL_PATTERN = re.compile(r"[+-]?(\d+\.\d*|\.\d+)")

_logger = logging.getLogger(__name__)


def parse_csv(text: str) -> list[DailyRecord]:
    """Parse CSV text into daily records sorted oldest first.

    Rows that are too short or carry an unusable date or number are skipped.
    Raises FormatError when the header lacks a required column.
    """
    lines = text.strip().split("\n")
    headers = [header.strip().lower() for header in lines[0].split(",")]
    missing = [column for column in REQUIRED_COLUMNS if column not in headers]
    if missing:
        raise FormatError(missing)
    positions = {column: headers.index(column) for column in REQUIRED_COLUMNS}

    records: list[DailyRecord] = []
    for line_number, line in enumerate(lines[1:], start=2):
        row = line.split(",")
        if len(row) < len(headers):
            _logger.debug("Skipping short row at line %s", line_number)
            continue
        record = _parse_row(row, positions)
        if record is None:
            _logger.debug("Skipping unparseable row at line %s", line_number)
            continue
        records.append(record)

    return sorted(records, key=lambda record: record.date)


def _parse_row(row: list[str], positions: dict[str, int]) -> DailyRecord | None:
    """Build a record from one split row, or None if a field is unusable."""
    revenue = _parse_number(row[positions["revenue"]])
    if revenue is None:
        return None
    orders = _parse_count(row[positions["orders"]])
    ad_spend = _parse_number(row[positions["ad_spend"]])
    if orders is None or ad_spend is None:
        return None
    day = _parse_date(row[positions["date"]])
    if day is None:
        return None
    return DailyRecord(date=day, revenue=revenue, orders=orders, ad_spend=ad_spend)


def _parse_number(raw: str) -> float | None:
    """Parse a finite float, returning None for anything else."""
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def _parse_count(raw: str) -> int | None:
    """Parse an integer count; plain decimals are truncated toward zero."""
    cleaned = raw.strip()
    try:
        return int(cleaned)
    except ValueError:
        pass
    if _DECIMAL_PATTERN.fullmatch(cleaned) is None:
        return None
    return int(Decimal(cleaned))


def _parse_date(raw: str) -> date | None:
    """Parse an ISO date, falling back to common slash-separated exports."""
    cleaned = raw.strip()
    try:
        return date.fromisoformat(cleaned)
    except ValueError:
        pass
    for date_format in _DATE_FORMATS:
        try:
            return datetime.strptime(cleaned, date_format).date()
        except ValueError:
            continue
    return None
