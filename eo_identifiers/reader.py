"""
Reader for identifier list files.

One identifier per line. Surrounding whitespace is stripped; blank lines
and lines starting with ``#`` are skipped, so sample files can carry
comments and section headers.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def read_names(path: str | Path) -> list[str]:
    """Read identifiers from a text file, skipping blanks and ``#`` comments.

    Raises:
        FileNotFoundError: If *path* does not exist.
    """
    path = Path(path)
    names: list[str] = []
    with open(path, "r", encoding="utf-8-sig") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            names.append(line)
    logger.info("Read %d identifiers from %s", len(names), path)
    return names
