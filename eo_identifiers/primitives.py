"""
Primitive token parsers for fixed-format identifiers, built on pyparsing.

Every parser takes the unconsumed suffix of the input (a plain ``str``) and
returns a ``(value, rest)`` tuple, or raises a ``ParseError``. Internally each
field is a pyparsing element matched at the start of the suffix with
whitespace skipping and tab expansion turned off; the position of a failure
is taken from ``ParseException.loc``. Parsers never consume input on failure,
so the caller's suffix is still valid after an exception.

Parsers:
- take_digits / take_digits_in_range: ``Word(nums, exact=w)``, with a
  range-check parse action.
- signed_year: ``Opt(sign) + Word(nums, exact=4)``.
- take_alphanumeric / take_alphanumeric_run: ASCII letters and digits.
- take_hex / take_chars: fixed-width hex digits / arbitrary characters.
- tag / tag_no_case / one_of_no_case: ``Literal``, ``CaselessLiteral`` and a
  ``MatchFirst`` of caseless literals. Caseless matching is ASCII-only.
- alt / opt: choice between parser functions, optional parser function.

Failure positions:
- ``ShapeViolation`` and ``RangeViolation`` are reported at the start of the
  field that failed.
- A field that runs out of input while every character seen so far was
  acceptable raises ``IncompleteInput`` positioned at the end of the input,
  with ``needed`` set to the number of characters still missing.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from functools import lru_cache
import re
from typing import TypeVar

import pyparsing as pp

from eo_identifiers.exceptions import (
    IncompleteInput,
    ParseError,
    RangeViolation,
    ShapeViolation,
)

T = TypeVar("T")


class _OutOfRange(pp.ParseException):
    """A well-formed field whose value is outside its bound."""


class _Truncated(pp.ParseException):
    """The input ended while the field was still acceptable."""

    def __init__(self, pstr: str, loc: int, msg: str, needed: int | None = None) -> None:
        super().__init__(pstr, loc, msg)
        self.needed = needed


# ---------------------------------------------------------------------------
# Element helpers
# ---------------------------------------------------------------------------

def _anchored(expr: pp.ParserElement) -> pp.ParserElement:
    """Wrap *expr* so it matches at position 0 and reports where it stopped."""
    return pp.Located(expr).leave_whitespace().parse_with_tabs()


def _scan(element: pp.ParserElement, s: str) -> tuple[pp.ParseResults, str]:
    """Run an anchored element over *s*; returns (tokens, unconsumed suffix)."""
    try:
        located = element.parse_string(s)
    except _OutOfRange as exc:
        raise RangeViolation(exc.msg, remaining=len(s) - exc.loc) from exc
    except _Truncated as exc:
        raise IncompleteInput(
            exc.msg, remaining=len(s) - exc.loc, needed=exc.needed
        ) from exc
    except pp.ParseException as exc:
        raise ShapeViolation(exc.msg, remaining=len(s) - exc.loc) from exc
    return located["value"], s[located["locn_end"]:]


def _in_range(low: int, high: int):
    def check(s: str, loc: int, toks: pp.ParseResults) -> None:
        value = toks[0]
        if not low <= value <= high:
            raise _OutOfRange(s, loc, f"value {value} outside {low}..={high}")

    return check


def _truncated_field(width: int, alphabet: str | None):
    """Fail action: a short head made only of *alphabet* characters is truncation.

    ``alphabet=None`` accepts any character.
    """

    def fail_action(s: str, loc: int, expr: pp.ParserElement, err: Exception) -> None:
        head = s[loc:]
        if len(head) < width and (alphabet is None or all(ch in alphabet for ch in head)):
            raise _Truncated(
                s,
                len(s),
                f"{expr.errmsg}, input ended after {len(head)}",
                needed=width - len(head),
            )

    return fail_action


def _is_proper_prefix(head: str, literal: str, caseless: bool) -> bool:
    if len(head) >= len(literal):
        return False
    if caseless:
        return head.isascii() and literal.upper().startswith(head.upper())
    return literal.startswith(head)


def _truncated_literals(literals: tuple[str, ...], caseless: bool):
    """Fail action: input that is a proper prefix of a literal is truncation.

    ``needed`` is taken from the shortest literal the input could still become.
    """

    def fail_action(s: str, loc: int, expr: pp.ParserElement, err: Exception) -> None:
        head = s[loc:]
        shortfalls = [
            len(literal) - len(head)
            for literal in literals
            if _is_proper_prefix(head, literal, caseless)
        ]
        if shortfalls:
            raise _Truncated(s, len(s), expr.errmsg, needed=min(shortfalls))

    return fail_action


def _ascii_only(literal: str):
    # CaselessLiteral upper-cases the input, which folds characters such as
    # the long s or sharp s onto ASCII letters
    def check(s: str, loc: int, toks: pp.ParseResults) -> None:
        if not s[loc : loc + len(literal)].isascii():
            raise pp.ParseException(s, loc, f"Expected {literal!r}")

    return check


def _caseless(literal: str) -> pp.ParserElement:
    return pp.CaselessLiteral(literal).add_parse_action(_ascii_only(literal))


def _digit_field(width: int) -> pp.ParserElement:
    field = pp.Word(pp.nums, exact=width).set_name(f"{width} digit(s)")
    field.set_parse_action(pp.common.convert_to_integer)
    return field.set_fail_action(_truncated_field(width, pp.nums))


# ---------------------------------------------------------------------------
# Cached anchored elements
# ---------------------------------------------------------------------------

@lru_cache(maxsize=None)
def _digits(width: int, low: int | None = None, high: int | None = None) -> pp.ParserElement:
    field = _digit_field(width)
    if low is not None and high is not None:
        field.add_parse_action(_in_range(low, high))
    return _anchored(field)


@lru_cache(maxsize=None)
def _signed_year(low: int | None = None, high: int | None = None) -> pp.ParserElement:
    year = pp.Opt(pp.Char("+-"), default="+") + _digit_field(4)
    year.set_parse_action(lambda toks: -toks[1] if toks[0] == "-" else toks[1])
    if low is not None and high is not None:
        year.add_parse_action(_in_range(low, high))
    return _anchored(year)


@lru_cache(maxsize=None)
def _alphanumerics(width: int) -> pp.ParserElement:
    field = pp.Word(pp.alphanums, exact=width).set_name(
        f"{width} alphanumeric character(s)"
    )
    return _anchored(field.set_fail_action(_truncated_field(width, pp.alphanums)))


@lru_cache(maxsize=None)
def _alphanumeric_run(min_width: int, max_width: int | None) -> pp.ParserElement:
    field = pp.Word(pp.alphanums, min=min_width, max=max_width or 0).set_name(
        f"at least {min_width} alphanumeric character(s)"
    )
    return _anchored(field.set_fail_action(_truncated_field(min_width, pp.alphanums)))


@lru_cache(maxsize=None)
def _hex(width: int) -> pp.ParserElement:
    field = pp.Word(pp.hexnums, exact=width).set_name(f"{width} hex digit(s)")
    return _anchored(field.set_fail_action(_truncated_field(width, pp.hexnums)))


@lru_cache(maxsize=None)
def _chars(width: int) -> pp.ParserElement:
    field = pp.Regex(f".{{{width}}}", flags=re.DOTALL).set_name(f"{width} character(s)")
    return _anchored(field.set_fail_action(_truncated_field(width, None)))


@lru_cache(maxsize=None)
def _tag(literal: str, caseless: bool) -> pp.ParserElement:
    field = _caseless(literal) if caseless else pp.Literal(literal)
    field.set_name(repr(literal))
    return _anchored(field.set_fail_action(_truncated_literals((literal,), caseless)))


@lru_cache(maxsize=None)
def _one_of(literals: tuple[str, ...]) -> pp.ParserElement:
    choice = pp.MatchFirst([_caseless(literal) for literal in literals])
    choice.set_name("one of " + ", ".join(repr(k) for k in literals))
    return _anchored(choice.set_fail_action(_truncated_literals(literals, True)))


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------

def take_digits(s: str, width: int) -> tuple[int, str]:
    """Parse exactly *width* ASCII digits as an unsigned integer."""
    toks, rest = _scan(_digits(width), s)
    return toks[0], rest


def take_digits_in_range(s: str, width: int, low: int, high: int) -> tuple[int, str]:
    """Parse *width* digits and require ``low <= value <= high``.

    Out-of-range values are reported at the start of the field, the same
    position a shape failure would have.
    """
    toks, rest = _scan(_digits(width, low, high), s)
    return toks[0], rest


def signed_year(
    s: str, low: int | None = None, high: int | None = None
) -> tuple[int, str]:
    """Parse ``[+|-]YYYY``; the sign is optional and defaults to ``+``.

    With *low* and *high* the signed value is range-checked, and a violation
    is reported at the start of the field, sign included.
    """
    toks, rest = _scan(_signed_year(low, high), s)
    return toks[0], rest


def take_alphanumeric(s: str, width: int) -> tuple[str, str]:
    """Consume exactly *width* ASCII letters or digits (case preserved)."""
    toks, rest = _scan(_alphanumerics(width), s)
    return toks[0], rest


def take_alphanumeric_run(
    s: str, min_width: int = 1, max_width: int | None = None
) -> tuple[str, str]:
    """Greedily consume between *min_width* and *max_width* alphanumerics."""
    toks, rest = _scan(_alphanumeric_run(min_width, max_width), s)
    return toks[0], rest


def take_hex(s: str, width: int) -> tuple[str, str]:
    """Consume exactly *width* hex digits, returned uppercased."""
    toks, rest = _scan(_hex(width), s)
    return toks[0].upper(), rest


def take_chars(s: str, width: int) -> tuple[str, str]:
    """Consume any *width* characters."""
    toks, rest = _scan(_chars(width), s)
    return toks[0], rest


def tag(s: str, literal: str) -> tuple[str, str]:
    """Consume *literal* exactly (case-sensitive)."""
    _, rest = _scan(_tag(literal, False), s)
    return literal, rest


def tag_no_case(s: str, literal: str) -> tuple[str, str]:
    """Consume *literal* in any ASCII letter case; returns the matched text."""
    _, rest = _scan(_tag(literal, True), s)
    return s[: len(s) - len(rest)], rest


def one_of_no_case(s: str, choices: Mapping[str, T]) -> tuple[T, str]:
    """Match the first literal of *choices* (in order) ignoring ASCII case.

    Returns the value mapped to the literal that matched.
    """
    toks, rest = _scan(_one_of(tuple(choices)), s)
    return choices[toks[0]], rest


def alt(s: str, *parsers: Callable[[str], tuple[T, str]]) -> tuple[T, str]:
    """Return the result of the first parser that succeeds.

    When every alternative fails, the failure that got furthest (least
    remaining input) is raised; ties keep the earliest alternative, the same
    rule ``pyparsing.MatchFirst`` applies to its elements.
    """
    furthest: ParseError | None = None
    for parser in parsers:
        try:
            return parser(s)
        except ParseError as err:
            if furthest is None or err.remaining < furthest.remaining:
                furthest = err
    if furthest is None:
        raise ValueError("alt() requires at least one parser")
    raise furthest


def opt(s: str, parser: Callable[[str], tuple[T, str]]) -> tuple[T | None, str]:
    """Apply *parser* if it matches; otherwise return ``(None, s)``."""
    try:
        return parser(s)
    except ParseError:
        return None, s
