"""
Grammar registry for eo-identifiers.

The registry is an ordered, immutable tuple of grammar instances built once
and shared by every ``resolve()`` call. Order encodes priority between
grammars whose patterns could overlap: the first grammar that accepts an
input wins.

Default priority (``DEFAULT_GRAMMAR_ORDER``):
  sentinel1_product -> sentinel2_product -> sentinel3_product ->
  landsat_product -> landsat_scene -> sentinel1_dataset

Grammars are listed explicitly in ``_GRAMMAR_CLASSES``; there is no plugin
discovery.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import lru_cache

from eo_identifiers.exceptions import RegistryError
from eo_identifiers.grammars import (
    BaseGrammar,
    LandsatProductGrammar,
    LandsatSceneGrammar,
    Sentinel1DatasetGrammar,
    Sentinel1ProductGrammar,
    Sentinel2ProductGrammar,
    Sentinel3ProductGrammar,
)

logger = logging.getLogger(__name__)

_GRAMMAR_CLASSES: dict[str, type[BaseGrammar]] = {
    cls.name: cls
    for cls in (
        Sentinel1ProductGrammar,
        Sentinel2ProductGrammar,
        Sentinel3ProductGrammar,
        LandsatProductGrammar,
        LandsatSceneGrammar,
        Sentinel1DatasetGrammar,
    )
}

DEFAULT_GRAMMAR_ORDER: tuple[str, ...] = tuple(_GRAMMAR_CLASSES)


def available_grammars() -> list[str]:
    """Names of all built-in grammars, in default priority order."""
    return list(DEFAULT_GRAMMAR_ORDER)


def get_grammar(name: str) -> BaseGrammar:
    """Instantiate the built-in grammar registered under *name*.

    Raises:
        RegistryError: If no grammar has that name.
    """
    try:
        return _GRAMMAR_CLASSES[name]()
    except KeyError:
        raise RegistryError(
            f"Unknown grammar: '{name}'. "
            f"Available grammars: {available_grammars()}"
        ) from None


def build_registry(names: Iterable[str] | None = None) -> tuple[BaseGrammar, ...]:
    """Build an ordered registry of grammar instances.

    Args:
        names: Grammar names in priority order. ``None`` selects every
            built-in grammar in ``DEFAULT_GRAMMAR_ORDER``.

    Returns:
        Tuple of grammars, first entry tried first.

    Raises:
        RegistryError: If *names* is empty, repeats a name, or names an
            unknown grammar.
    """
    names = list(DEFAULT_GRAMMAR_ORDER if names is None else names)
    if not names:
        raise RegistryError("A grammar registry needs at least one grammar.")
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        raise RegistryError(f"Grammars listed more than once: {duplicates}")
    registry = tuple(get_grammar(name) for name in names)
    logger.debug("Built registry: %s", ", ".join(names))
    return registry


@lru_cache(maxsize=None)
def default_registry() -> tuple[BaseGrammar, ...]:
    """The shared registry of all built-in grammars in default order."""
    return build_registry()
