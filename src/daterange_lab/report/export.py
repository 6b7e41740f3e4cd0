"""Export of the current selection and the quick-pick catalog."""

import json
import logging
from datetime import tzinfo
from pathlib import Path

import pandas as pd

from daterange_lab.chrono.date_range import DateRange
from daterange_lab.config import EXPORT_DIR
from daterange_lab.humanize.labels import range_label
from daterange_lab.rules.predefined import predefined_ranges

logger = logging.getLogger("daterange_lab")

EXPORT_FORMATS = ("json", "csv")


def selection_to_json(date_range: DateRange, indent: int | None = 2) -> str:
    """Serialize a range record to a JSON string."""
    return json.dumps(date_range.to_record(), indent=indent)


def selection_from_json(text: str) -> DateRange:
    """Rebuild a range from ``selection_to_json`` output.

    Raises:
        ValueError: If the text is not a valid range record.
    """
    try:
        record = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid selection JSON: {e}") from e
    if not isinstance(record, dict):
        raise ValueError("Selection JSON must be an object")
    return DateRange.from_record(record)


def predefined_ranges_frame(zone: str | tzinfo, today) -> pd.DataFrame:
    """Tabulate the quick-pick catalog with one row per range.

    Returns:
        DataFrame with columns: label, begins_at, ends_at, begins_at_ms,
        ends_at_ms, days, caption.
    """
    rows = []
    for label, date_range in predefined_ranges(zone, today):
        record = date_range.to_record()
        rows.append({
            "label": label,
            "begins_at": record["begins_at"],
            "ends_at": record["ends_at"],
            "begins_at_ms": record["begins_at_ms"],
            "ends_at_ms": record["ends_at_ms"],
            "days": date_range.days,
            "caption": range_label(zone, today, date_range),
        })
    return pd.DataFrame(rows)


def export_selection(
    date_range: DateRange,
    output_dir: Path | None = None,
    fmt: str = "json",
    name: str = "selection",
) -> Path:
    """Write a range record to disk.

    Args:
        date_range: Range to export.
        output_dir: Output directory (default: PROJECT_ROOT/exports).
        fmt: "json" or "csv".
        name: File name stem.

    Returns:
        Path to the exported file.
    """
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Unsupported export format: {fmt!r}")

    output_dir = output_dir or EXPORT_DIR
    output_dir.mkdir(parents=True, exist_ok=True)

    output_path = output_dir / f"{name}.{fmt}"
    if fmt == "json":
        output_path.write_text(selection_to_json(date_range) + "\n")
    else:
        pd.DataFrame([date_range.to_record()]).to_csv(output_path, index=False)

    logger.info(f"Exported selection {date_range.begins_at} - {date_range.ends_at} to {output_path}")
    return output_path
