"""
Unit tests for multi-grammar dispatch (eo_identifiers.resolve).

Tests first-match precedence, furthest-failure reporting, the empty registry
and single-grammar parsing with ``parse_as``.
"""

from typing import ClassVar

import pytest

from eo_identifiers.exceptions import (
    IncompleteInput,
    NoGrammarMatched,
    ParseError,
    RangeViolation,
    RegistryError,
    ShapeViolation,
)
from eo_identifiers.grammars import BaseGrammar, BaseRecord, Sentinel2ProductGrammar
from eo_identifiers.primitives import tag
from eo_identifiers.registry import build_registry
from eo_identifiers.resolve import parse_as, resolve


# ---------------------------------------------------------------------------
# Test grammars
# ---------------------------------------------------------------------------

class _RelabelledSentinel2(Sentinel2ProductGrammar):
    """Accepts the same inputs as the real grammar with a marked record."""

    name: ClassVar[str] = "relabelled_sentinel2"

    def _parse(self, s):
        record, rest = super()._parse(s)
        return record.model_copy(update={"tile_number": "XXXXX"}), rest


class _PrefixGrammar(BaseGrammar):
    """Requires ``prefix`` followed by ``X``."""

    name: ClassVar[str] = "prefix"
    record_type = BaseRecord

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix

    def _parse(self, s):
        _, rest = tag(s, self.prefix)
        _, rest = tag(rest, "X")
        return BaseRecord(), rest


class _BareRecordGrammar(BaseGrammar):
    """Accepts any input and returns a record outside the identifier union."""

    name: ClassVar[str] = "bare_record"
    record_type = BaseRecord

    def _parse(self, s):
        return BaseRecord(), s


# ---------------------------------------------------------------------------
# Success
# ---------------------------------------------------------------------------

class TestResolveSuccess:
    def test_sentinel2(self, s2_name):
        ident = resolve(s2_name)
        assert ident.kind == "sentinel2_product"
        assert ident.record.relative_orbit_number == 31

    def test_landsat_scene(self, landsat_scene_name):
        ident = resolve(landsat_scene_name)
        assert ident.kind == "landsat_scene"
        assert ident.record.wrs_path == 39

    def test_trailing_text_ignored(self, s2_name):
        assert resolve(s2_name + ".SAFE") == resolve(s2_name)

    def test_first_registered_grammar_wins(self, s2_name):
        grammars = (_RelabelledSentinel2(), Sentinel2ProductGrammar())
        assert resolve(s2_name, grammars).record.tile_number == "XXXXX"

        grammars = (Sentinel2ProductGrammar(), _RelabelledSentinel2())
        assert resolve(s2_name, grammars).record.tile_number == "53NMJ"

    def test_custom_registry_subset(self, landsat_scene_name):
        grammars = build_registry(["landsat_scene"])
        assert resolve(landsat_scene_name, grammars).kind == "landsat_scene"


# ---------------------------------------------------------------------------
# Failure
# ---------------------------------------------------------------------------

class TestResolveFailure:
    def test_garbage_fails_at_offset_zero(self):
        with pytest.raises(NoGrammarMatched) as exc_info:
            resolve("hello world")
        assert exc_info.value.offset == 0
        assert not exc_info.value.needs_more_input
        assert "parse failed at character 0" in str(exc_info.value)

    def test_empty_input_needs_more(self):
        with pytest.raises(NoGrammarMatched) as exc_info:
            resolve("")
        assert exc_info.value.offset == 0
        assert exc_info.value.needs_more_input

    def test_truncated_sentinel2_reports_incomplete(self):
        text = "S2A_MSIL1C_2017"
        with pytest.raises(NoGrammarMatched) as exc_info:
            resolve(text)
        err = exc_info.value
        assert err.offset == len(text)
        assert err.needs_more_input
        assert isinstance(err.cause, IncompleteInput)
        assert err.cause.needed == 2

    def test_range_failure_reported_from_closest_grammar(self, s2_name):
        text = s2_name.replace("_R031_", "_R000_")
        with pytest.raises(NoGrammarMatched) as exc_info:
            resolve(text)
        assert isinstance(exc_info.value.cause, RangeViolation)
        assert exc_info.value.offset == 34

    def test_furthest_failure_wins_regardless_of_order(self):
        text = "ABCDEFGHIJKLMNOP"
        near, far = _PrefixGrammar("ABCDE"), _PrefixGrammar("ABCDEFGHIJKL")
        for grammars in ((near, far), (far, near)):
            with pytest.raises(NoGrammarMatched) as exc_info:
                resolve(text, grammars)
            assert exc_info.value.offset == 12
            assert isinstance(exc_info.value.cause, ShapeViolation)

    def test_ties_go_to_earlier_grammar(self):
        first, second = _PrefixGrammar("AB"), _PrefixGrammar("AC")
        with pytest.raises(NoGrammarMatched) as exc_info:
            resolve("ZZZ", (first, second))
        assert "'AB'" in exc_info.value.cause.message

    def test_cause_is_chained(self):
        with pytest.raises(NoGrammarMatched) as exc_info:
            resolve("hello")
        assert exc_info.value.__cause__ is exc_info.value.cause

    def test_empty_registry(self, s2_name):
        with pytest.raises(RegistryError):
            resolve(s2_name, ())

    def test_record_outside_identifier_union(self, s2_name):
        with pytest.raises(RegistryError, match="bare_record"):
            resolve(s2_name, (_BareRecordGrammar(), Sentinel2ProductGrammar()))


# ---------------------------------------------------------------------------
# parse_as
# ---------------------------------------------------------------------------

class TestParseAs:
    def test_named_grammar(self, s2_name):
        record = parse_as(s2_name, "sentinel2_product")
        assert record.tile_number == "53NMJ"

    def test_named_grammar_rejects_other_kinds(self, landsat_scene_name):
        with pytest.raises(ParseError) as exc_info:
            parse_as(landsat_scene_name, "sentinel2_product")
        assert exc_info.value.offset == 0

    def test_unknown_name(self, s2_name):
        with pytest.raises(RegistryError):
            parse_as(s2_name, "sentinel5_product")
