"""
Batch identification into a flat results table.

``identify_many()`` resolves a sequence of names and returns one row per
input, so a whole archive listing can be inspected or exported in one go.

Columns:
- input: the name as given.
- kind: record kind (e.g. ``sentinel2_product``), or None on failure.
- mission: mission display name (e.g. ``Sentinel 2``).
- start_datetime / stop_datetime: sensing period (NaT when unknown).
- record: the full record as JSON (pydantic ``model_dump_json``).
- error_offset / error_kind / error: failure details, None on success.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

import pandas as pd

from eo_identifiers.exceptions import NoGrammarMatched
from eo_identifiers.grammars import BaseGrammar
from eo_identifiers.registry import default_registry
from eo_identifiers.resolve import resolve

logger = logging.getLogger(__name__)

COLUMNS = [
    "input", "kind", "mission", "start_datetime", "stop_datetime", "record",
    "error_offset", "error_kind", "error",
]


def identify_many(
    names: Iterable[str],
    grammars: Sequence[BaseGrammar] | None = None,
    include_failures: bool = True,
) -> pd.DataFrame:
    """Resolve every name and tabulate the results.

    Args:
        names: Identifiers to resolve.
        grammars: Ordered registry; defaults to ``default_registry()``.
        include_failures: If False, names no grammar matched are dropped
            (they are still logged).

    Returns:
        DataFrame with the columns listed in ``COLUMNS``.
    """
    if grammars is None:
        grammars = default_registry()

    rows: list[dict] = []
    n_ok = 0
    n_failed = 0
    for name in names:
        try:
            ident = resolve(name, grammars)
        except NoGrammarMatched as err:
            n_failed += 1
            logger.warning("Could not identify %r: %s", name, err)
            if include_failures:
                rows.append(
                    {
                        "input": name,
                        "error_offset": err.offset,
                        "error_kind": type(err.cause).__name__,
                        "error": err.cause.message,
                    }
                )
            continue
        n_ok += 1
        rows.append(
            {
                "input": name,
                "kind": ident.kind,
                "mission": ident.mission.display_name,
                "start_datetime": ident.start_datetime,
                "stop_datetime": ident.stop_datetime,
                "record": ident.record.model_dump_json(),
            }
        )

    logger.info(
        "Identified %d of %d names (%d failed)", n_ok, n_ok + n_failed, n_failed
    )

    # columns given explicitly so an empty result still has the full schema
    df = pd.DataFrame(rows, columns=COLUMNS)
    df["start_datetime"] = pd.to_datetime(df["start_datetime"])
    df["stop_datetime"] = pd.to_datetime(df["stop_datetime"])
    df["error_offset"] = pd.to_numeric(df["error_offset"]).astype("Int64")
    return df
