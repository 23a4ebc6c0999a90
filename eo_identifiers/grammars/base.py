"""
Base grammar ABC and record model for eo-identifiers.

All mission grammars implement this interface. The contract is:
1. ``attempt(text)`` parses a prefix of *text* and returns
   ``(record, rest)``; trailing input such as a ``.SAFE`` or ``.tif``
   extension is left in ``rest``.
2. On failure it raises a ``ParseError`` whose ``offset`` is located
   against *text*, so failures of different grammars can be compared.

Grammars are stateless; a single instance can be shared by any number of
concurrent callers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from eo_identifiers.exceptions import ParseError


class BaseRecord(BaseModel):
    """Immutable structured record produced by a successful grammar parse."""

    model_config = ConfigDict(frozen=True)


class BaseGrammar(ABC):
    """Abstract base class for mission identifier grammars.

    Subclasses set ``name`` and ``record_type`` and implement ``_parse()``
    over the unconsumed suffix using the primitive and temporal parsers.
    """

    name: ClassVar[str]
    record_type: ClassVar[type[BaseRecord]]

    @abstractmethod
    def _parse(self, s: str) -> tuple[BaseRecord, str]:
        """Parse a record from the start of *s*.

        Returns:
            Tuple of (record, unconsumed suffix).

        Raises:
            ParseError: Positioned by ``remaining``; not yet located.
        """

    def attempt(self, text: str) -> tuple[BaseRecord, str]:
        """Parse a record from the start of *text*.

        Raises:
            ParseError: With ``offset`` relative to the start of *text*.
        """
        try:
            return self._parse(text)
        except ParseError as err:
            raise err.locate(text)

    def parse(self, text: str) -> BaseRecord:
        """Parse *text* and return only the record, discarding trailing input."""
        record, _ = self.attempt(text)
        return record

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
