"""
Multi-grammar dispatch for eo-identifiers.

Given an input string and an ordered registry of grammars, ``resolve()``
decides which single grammar describes the input.

Dispatch algorithm:
1. Attempt each grammar, in registry order, against the full input.
2. The first grammar that succeeds wins; its record is wrapped in an
   ``Identifier``. Trailing input (file extensions etc.) is discarded.
3. Each failure is located against the input; the one with the largest
   offset is kept, ties going to the earlier grammar. Rejected content is
   positioned at the start of the failing field and truncated input at the
   end of the input, so a grammar that consumed everything it was given
   outranks one that rejected a character.
4. If nothing matched, raise ``NoGrammarMatched`` wrapping that furthest
   failure: the grammar that got furthest is most likely the intended one.

Grammars are atomic here: a failed attempt is never resumed or merged with
another grammar's partial match.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from eo_identifiers.exceptions import NoGrammarMatched, ParseError, RegistryError
from eo_identifiers.grammars import BaseGrammar, BaseRecord
from eo_identifiers.identifier import RECORD_TYPES, Identifier
from eo_identifiers.registry import default_registry, get_grammar

logger = logging.getLogger(__name__)


def resolve(text: str, grammars: Sequence[BaseGrammar] | None = None) -> Identifier:
    """Identify *text* with the first matching grammar.

    Args:
        text: A complete product/scene name, optionally followed by
            arbitrary trailing text such as ``.SAFE``.
        grammars: Ordered registry; defaults to ``default_registry()``.

    Returns:
        The typed ``Identifier``.

    Raises:
        NoGrammarMatched: If every grammar rejected *text*; wraps the
            failure with the largest offset.
        RegistryError: If *grammars* is empty, or a grammar matched but
            produced a record that is not a supported identifier type.
    """
    if grammars is None:
        grammars = default_registry()
    if not grammars:
        raise RegistryError("Cannot resolve identifiers against an empty registry.")

    furthest: ParseError | None = None
    for grammar in grammars:
        try:
            record, rest = grammar.attempt(text)
        except ParseError as err:
            logger.debug(
                "Grammar '%s' rejected %r at offset %d: %s",
                grammar.name, text, err.offset, err.message,
            )
            if furthest is None or err.offset > furthest.offset:
                furthest = err
            continue
        if not isinstance(record, RECORD_TYPES):
            raise RegistryError(
                f"Grammar '{grammar.name}' produced a {type(record).__name__} record, "
                f"which is not a supported identifier type."
            )
        logger.debug(
            "Resolved %r as '%s' (%d trailing characters ignored)",
            text, grammar.name, len(rest),
        )
        return Identifier(record=record)

    raise NoGrammarMatched(furthest) from furthest


def parse_as(text: str, name: str) -> BaseRecord:
    """Parse *text* with the single built-in grammar called *name*.

    Raises:
        ParseError: Located against *text*, if the grammar rejects it.
        RegistryError: If *name* is not a built-in grammar.
    """
    return get_grammar(name).parse(text)
