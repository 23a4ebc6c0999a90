"""
Custom exception hierarchy for eo-identifiers.

Parse failures are positioned: every ``ParseError`` knows how much input was
left at the failure position (``remaining``). Once the error has been located
against the full input of a grammar attempt, ``offset`` holds the distance in
characters from the start of that input, so callers can render
"parse failed at character N" without re-deriving positions.

Two failure families share one offset scale:
- rejected content (``ShapeViolation``, ``RangeViolation``), positioned at
  the start of the failing field, and
- truncated input (``IncompleteInput``), positioned at the end of the input
  and carrying a hint of how many more characters the field needed.
"""

from __future__ import annotations


class EoIdentifiersError(Exception):
    """Base exception for all eo-identifiers errors."""


class ParseError(EoIdentifiersError):
    """A positioned parse failure.

    Attributes:
        message: Human readable description of what was expected.
        remaining: Number of input characters left at the failure position.
        offset: Characters from the start of the located input, or ``None``
            while the error has not been located yet.
    """

    needs_more_input: bool = False

    def __init__(self, message: str, remaining: int, offset: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.remaining = remaining
        self.offset = offset

    def locate(self, text: str) -> ParseError:
        """Fix ``offset`` relative to *text*, the input of the failed attempt."""
        self.offset = len(text) - self.remaining
        return self

    def __str__(self) -> str:
        if self.offset is None:
            return self.message
        return f"parse failed at character {self.offset}: {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, remaining={self.remaining}, offset={self.offset})"


class ShapeViolation(ParseError):
    """A field did not have the required width, alphabet or literal value."""


class RangeViolation(ParseError):
    """A field had the right shape but its value was outside the allowed bound.

    Also raised when the fields of a date or time are individually valid but
    do not form a real calendar value (e.g. February 30th).
    """


class IncompleteInput(ParseError):
    """The input ended before a field could be fully read.

    Positioned at the end of the input (``remaining == 0``).

    Attributes:
        needed: How many more characters the field required, if known.
    """

    needs_more_input = True

    def __init__(
        self,
        message: str,
        remaining: int,
        needed: int | None = None,
        offset: int | None = None,
    ) -> None:
        super().__init__(message, remaining, offset)
        self.needed = needed


class NoGrammarMatched(ParseError):
    """Raised by ``resolve()`` when every registered grammar rejected the input.

    Wraps the single failure that got furthest into the input (``cause``);
    the failures of the other grammars are discarded.
    """

    def __init__(self, cause: ParseError) -> None:
        super().__init__(
            f"no grammar matched ({cause.message})",
            cause.remaining,
            cause.offset,
        )
        self.cause = cause

    @property
    def needs_more_input(self) -> bool:  # type: ignore[override]
        return self.cause.needs_more_input


class RegistryError(EoIdentifiersError):
    """Raised when a grammar registry cannot be built.

    For example an unknown grammar name, a duplicated name, or an empty
    registry.
    """


class ConfigValidationError(EoIdentifiersError):
    """Raised when a resolver config file is empty or malformed."""


class ExportError(EoIdentifiersError):
    """Raised when the results table cannot be written.

    For example permission errors or an unsupported output format.
    """
