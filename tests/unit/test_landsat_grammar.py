"""
Unit tests for the Landsat grammars (eo_identifiers.grammars.landsat).

Scene ids (pre-collection) and Collection 1/2 product identifiers.
"""

from datetime import date, datetime

import pytest

from eo_identifiers.exceptions import IncompleteInput, RangeViolation, ShapeViolation
from eo_identifiers.grammars.landsat import (
    CollectionCategory,
    LandsatProductGrammar,
    LandsatSceneGrammar,
    ProcessingLevel,
    Sensor,
)
from eo_identifiers.missions import Mission


# ---------------------------------------------------------------------------
# Scene ids
# ---------------------------------------------------------------------------

class TestLandsatScene:
    def test_scene_id_fields(self):
        scene = LandsatSceneGrammar().parse("LC80390222013076EDC00")
        assert scene.kind == "landsat_scene"
        assert scene.sensor is Sensor.OLI_TIRS
        assert scene.mission_id == 8
        assert scene.mission is Mission.LANDSAT_8
        assert scene.wrs_path == 39
        assert scene.wrs_row == 22
        assert scene.acquire_date == date(2013, 3, 17)
        assert scene.ground_station_identifier == "EDC"
        assert scene.archive_version_number == 0

    def test_sensing_period(self):
        scene = LandsatSceneGrammar().parse("LC80390222013076EDC00")
        assert scene.start_datetime == datetime(2013, 3, 17, 0, 0, 0)
        assert scene.stop_datetime is None

    def test_lowercase_is_accepted(self):
        scene = LandsatSceneGrammar().parse("lc80390222013076edc00")
        assert scene.sensor is Sensor.OLI_TIRS
        assert scene.ground_station_identifier == "EDC"

    @pytest.mark.parametrize(
        "name, sensor, mission",
        [
            ("LE70160392004262EDC02", Sensor.ETM_PLUS, Mission.LANDSAT_7),
            ("LT50390371995194PAC02", Sensor.TM, Mission.LANDSAT_5),
            ("LT80390222013076EDC00", Sensor.TIRS, Mission.LANDSAT_8),
            ("LM10320301972208AAA02", Sensor.MSS, Mission.LANDSAT_1),
        ],
    )
    def test_sensor_letters(self, name, sensor, mission):
        scene = LandsatSceneGrammar().parse(name)
        assert scene.sensor is sensor
        assert scene.mission is mission

    def test_trailing_text_is_left_over(self):
        _, rest = LandsatSceneGrammar().attempt("LC80390222013076EDC00_B4.TIF")
        assert rest == "_B4.TIF"

    def test_satellite_zero_rejected(self):
        with pytest.raises(RangeViolation) as exc_info:
            LandsatSceneGrammar().attempt("LC00390222013076EDC00")
        assert exc_info.value.offset == 2

    def test_unknown_sensor_letter(self):
        with pytest.raises(ShapeViolation) as exc_info:
            LandsatSceneGrammar().attempt("LX80390222013076EDC00")
        assert exc_info.value.offset == 1

    def test_truncated_scene(self):
        text = "LC80390222013076ED"
        with pytest.raises(IncompleteInput) as exc_info:
            LandsatSceneGrammar().attempt(text)
        assert exc_info.value.offset == len(text)
        assert exc_info.value.needed == 1


# ---------------------------------------------------------------------------
# Collection products
# ---------------------------------------------------------------------------

class TestLandsatProduct:
    def test_collection_1_real_time(self):
        product = LandsatProductGrammar().parse("LC08_L1GT_029030_20151209_20160131_01_RT")
        assert product.kind == "landsat_product"
        assert product.sensor is Sensor.OLI_TIRS
        assert product.mission is Mission.LANDSAT_8
        assert product.processing_level is ProcessingLevel.L1GT
        assert product.wrs_path == 29
        assert product.wrs_row == 30
        assert product.acquire_date == date(2015, 12, 9)
        assert product.processing_date == date(2016, 1, 31)
        assert product.collection_number == 1
        assert product.collection_category is CollectionCategory.REAL_TIME

    def test_collection_2_tier_1(self):
        product = LandsatProductGrammar().parse("LC08_L2SP_140041_20130503_20190828_02_T1")
        assert product.processing_level is ProcessingLevel.L2SP
        assert product.collection_number == 2
        assert product.collection_category is CollectionCategory.TIER_1
        assert product.collection_category.long_name == "Tier 1"
        assert product.has_standard_processing_level
        assert product.start_datetime == datetime(2013, 5, 3)
        assert product.stop_datetime is None

    def test_ard_tile_without_category(self):
        product = LandsatProductGrammar().parse("LC08_CU_003009_20200820_20210504_02")
        assert product.processing_level is ProcessingLevel.CU
        assert product.collection_category is None
        assert product.has_standard_processing_level

    def test_processing_level_is_uppercased(self):
        product = LandsatProductGrammar().parse("lc08_l1tp_016039_20040918_20160914_01_t1")
        assert product.processing_level is ProcessingLevel.L1TP
        assert product.collection_category is CollectionCategory.TIER_1

    def test_nonstandard_processing_level_kept(self):
        product = LandsatProductGrammar().parse("LC08_L3XX_140041_20130503_20190828_02_T1")
        assert product.processing_level == "L3XX"
        assert not isinstance(product.processing_level, ProcessingLevel)
        assert not product.has_standard_processing_level

    def test_processing_level_survives_json_round_trip(self):
        grammar = LandsatProductGrammar()
        for name in (
            "LC08_L2SP_140041_20130503_20190828_02_T1",
            "LC08_L3XX_140041_20130503_20190828_02_T1",
        ):
            product = grammar.parse(name)
            back = type(product).model_validate_json(product.model_dump_json())
            assert back == product
            assert type(back.processing_level) is type(product.processing_level)

    def test_band_file_suffix_left_over(self):
        _, rest = LandsatProductGrammar().attempt(
            "LC08_L2SP_140041_20130503_20190828_02_T1_SR_B4.TIF"
        )
        assert rest == "_SR_B4.TIF"

    def test_invalid_acquisition_date(self):
        text = "LC08_L2SP_140041_20130231_20190828_02_T1"
        with pytest.raises(RangeViolation) as exc_info:
            LandsatProductGrammar().attempt(text)
        assert exc_info.value.offset == text.index("20130231") + 6

    def test_scene_id_is_not_a_product(self):
        with pytest.raises(ShapeViolation) as exc_info:
            LandsatProductGrammar().attempt("LC80390222013076EDC00")
        assert exc_info.value.offset == 2

    def test_display_names(self):
        assert Sensor.ETM_PLUS.display_name == "ETM+"
        assert Sensor.OLI_TIRS.long_name == (
            "Operational Land Imager / Thermal Infrared Sensor"
        )
