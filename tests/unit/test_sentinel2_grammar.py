"""
Unit tests for the Sentinel-2 grammar (eo_identifiers.grammars.sentinel2).
"""

from datetime import datetime

import pytest

from eo_identifiers.exceptions import IncompleteInput, RangeViolation, ShapeViolation
from eo_identifiers.grammars.sentinel2 import (
    MissionId,
    ProductLevel,
    Sentinel2ProductGrammar,
)
from eo_identifiers.missions import Mission


class TestSentinel2Product:
    def test_fields(self, s2_name):
        product = Sentinel2ProductGrammar().parse(s2_name)
        assert product.kind == "sentinel2_product"
        assert product.mission_id is MissionId.S2A
        assert product.mission is Mission.SENTINEL_2
        assert product.product_level is ProductLevel.L1C
        assert product.start_datetime == datetime(2017, 1, 5, 1, 34, 42)
        assert product.stop_datetime is None
        assert product.pdgs_baseline_number == (2, 4)
        assert product.relative_orbit_number == 31
        assert product.tile_number == "53NMJ"
        assert product.product_discriminator == "20170105T013443"

    def test_safe_extension_left_over(self, s2_name):
        record, rest = Sentinel2ProductGrammar().attempt(s2_name + ".SAFE")
        assert rest == ".SAFE"
        assert record == Sentinel2ProductGrammar().parse(s2_name)

    def test_level_2a_and_s2c(self):
        product = Sentinel2ProductGrammar().parse(
            "S2C_MSIL2A_20250101T100421_N0511_R122_T32TMT_20250101T120212"
        )
        assert product.mission_id is MissionId.S2C
        assert product.product_level is ProductLevel.L2A
        assert product.pdgs_baseline_number == (5, 11)

    @pytest.mark.parametrize("orbit", ["000", "144"])
    def test_relative_orbit_out_of_range(self, s2_name, orbit):
        text = s2_name.replace("_R031_", f"_R{orbit}_")
        with pytest.raises(RangeViolation) as exc_info:
            Sentinel2ProductGrammar().attempt(text)
        assert exc_info.value.offset == 34

    def test_bad_level(self, s2_name):
        with pytest.raises(ShapeViolation) as exc_info:
            Sentinel2ProductGrammar().attempt(s2_name.replace("MSIL1C", "MSIL3C"))
        assert exc_info.value.offset == 7

    def test_truncated_after_date(self):
        text = "S2A_MSIL1C_2017"
        with pytest.raises(IncompleteInput) as exc_info:
            Sentinel2ProductGrammar().attempt(text)
        assert exc_info.value.offset == len(text)
        assert exc_info.value.needed == 2

    def test_old_format_rejected(self):
        # pre-December 2016 naming convention
        with pytest.raises(ShapeViolation):
            Sentinel2ProductGrammar().attempt(
                "S2A_OPER_PRD_MSIL1C_PDMC_20160101T000000_R031_V20160101T000000_20160101T000000"
            )
