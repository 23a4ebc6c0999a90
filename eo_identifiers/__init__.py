"""
eo-identifiers: parsers for the naming conventions of earth observation
products and datasets.

Public API surface:

- ``resolve(text, grammars=None)`` -- **recommended entry point**. Tries
  every registered grammar in priority order and returns a typed
  ``Identifier``; raises ``NoGrammarMatched`` with the most informative
  failure position otherwise.

- ``parse_as(text, name)`` -- parse with one named grammar and return its
  record (e.g. ``parse_as(name, "sentinel2_product")``).

- ``identify_many(names, ...)`` -- batch version of ``resolve`` returning a
  pandas DataFrame, one row per input.

Example::

    >>> ident = eo_identifiers.resolve(
    ...     "S2A_MSIL1C_20170105T013442_N0204_R031_T53NMJ_20170105T013443"
    ... )
    >>> ident.kind
    'sentinel2_product'
    >>> ident.record.relative_orbit_number
    31
"""

from __future__ import annotations

from eo_identifiers.exceptions import (
    EoIdentifiersError,
    IncompleteInput,
    NoGrammarMatched,
    ParseError,
    RangeViolation,
    ShapeViolation,
)
from eo_identifiers.identifier import Identifier
from eo_identifiers.missions import Mission
from eo_identifiers.registry import build_registry, default_registry
from eo_identifiers.resolve import parse_as, resolve
from eo_identifiers.table import identify_many

__all__ = [
    "resolve",
    "parse_as",
    "identify_many",
    "build_registry",
    "default_registry",
    "Identifier",
    "Mission",
    "EoIdentifiersError",
    "ParseError",
    "ShapeViolation",
    "RangeViolation",
    "IncompleteInput",
    "NoGrammarMatched",
]
