"""
Exporter for eo-identifiers.

Writes the batch results table (see ``table.identify_many``) to CSV or
Parquet. Parquet keeps the datetime and nullable integer columns typed;
CSV is written with ``utf-8-sig`` so spreadsheet tools detect the encoding.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import pandas as pd

from eo_identifiers.exceptions import ExportError

logger = logging.getLogger(__name__)

_SUPPORTED_FORMATS = {"csv", "parquet"}


def export_table(
    df: pd.DataFrame,
    path: str | Path,
    output_format: Literal["csv", "parquet"] = "parquet",
) -> str:
    """Write *df* to *path* in the given format.

    The parent directory is created if it does not exist.

    Returns:
        The written file path as a string.

    Raises:
        ExportError: If *output_format* is unsupported, or if the write fails.
    """
    if output_format not in _SUPPORTED_FORMATS:
        raise ExportError(
            f"Unsupported output format: '{output_format}'. "
            f"Supported formats: {sorted(_SUPPORTED_FORMATS)}"
        )

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        if output_format == "csv":
            df.to_csv(path, index=False, encoding="utf-8-sig")
        else:  # parquet
            df.to_parquet(path, index=False, engine="pyarrow")
    except Exception as exc:
        raise ExportError(
            f"Failed to write {path.name} as {output_format}: {exc}"
        ) from exc

    logger.info(
        "Exported %s (%d rows, %d cols)", path.name, len(df), len(df.columns)
    )
    return str(path)
