"""
Demo script: identify every name in a list file and export the results.

Usage:
    python scripts/run_identify.py NAMES_FILE                # default config
    python scripts/run_identify.py NAMES_FILE config.yaml    # custom grammars/output

NAMES_FILE holds one product/scene name per line; blank lines and ``#``
comments are ignored. The results table is written to the config's
``output.output_path`` (``outputs/identifiers.parquet`` by default).
"""

from __future__ import annotations

import logging
import sys
from collections import Counter
from pathlib import Path

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("run_identify")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> int:
    from eo_identifiers.config import ResolverConfig, load_config
    from eo_identifiers.export import export_table
    from eo_identifiers.reader import read_names
    from eo_identifiers.table import identify_many

    if len(sys.argv) < 2:
        log.error("Usage: run_identify.py NAMES_FILE [CONFIG_YAML]")
        return 2

    names_path = Path(sys.argv[1])
    config = load_config(sys.argv[2]) if len(sys.argv) > 2 else ResolverConfig()

    log.info("=" * 70)
    log.info("Identifying: %s", names_path)
    log.info("  grammars    : %s", ", ".join(config.grammars))
    log.info("  output_path : %s", config.output.output_path)
    log.info("=" * 70)

    names = read_names(names_path)
    df = identify_many(
        names,
        grammars=config.registry(),
        include_failures=config.output.include_failures,
    )

    for kind, count in sorted(Counter(df["kind"].dropna()).items()):
        log.info("  %-20s %d", kind, count)
    n_failed = int(df["error"].notna().sum())
    if n_failed:
        log.warning("  %-20s %d", "unidentified", n_failed)

    export_table(df, config.output.output_path, config.output.output_format)
    log.info("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
