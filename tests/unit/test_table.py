"""
Unit tests for batch identification (eo_identifiers.table).
"""

import json

import pandas as pd

from eo_identifiers.registry import build_registry
from eo_identifiers.table import COLUMNS, identify_many

S1_NAME = "S1A_IW_GRDH_1SDV_20191024T165509_20191024T165534_029600_035EE7_2A1E"


class TestIdentifyMany:
    def test_one_row_per_input(self, s2_name, landsat_scene_name):
        df = identify_many([s2_name, landsat_scene_name, "garbage"])
        assert list(df.columns) == COLUMNS
        assert list(df["input"]) == [s2_name, landsat_scene_name, "garbage"]
        assert list(df["kind"].iloc[:2]) == ["sentinel2_product", "landsat_scene"]
        assert df["mission"].iloc[0] == "Sentinel 2"
        assert df["mission"].iloc[1] == "Landsat 8"

    def test_datetime_columns(self, s2_name):
        df = identify_many([S1_NAME, s2_name])
        assert pd.api.types.is_datetime64_any_dtype(df["start_datetime"])
        assert pd.api.types.is_datetime64_any_dtype(df["stop_datetime"])
        assert df["start_datetime"].iloc[0] == pd.Timestamp("2019-10-24 16:55:09")
        assert df["stop_datetime"].iloc[0] == pd.Timestamp("2019-10-24 16:55:34")
        assert pd.isna(df["stop_datetime"].iloc[1])

    def test_record_column_is_json(self, s2_name):
        df = identify_many([s2_name])
        record = json.loads(df["record"].iloc[0])
        assert record["kind"] == "sentinel2_product"
        assert record["tile_number"] == "53NMJ"

    def test_failure_row(self, s2_name):
        df = identify_many([s2_name, "S2A_MSIL1C_2017"])
        ok, failed = df.iloc[0], df.iloc[1]
        assert pd.isna(ok["error"])
        assert pd.isna(ok["error_offset"])
        assert pd.isna(failed["kind"])
        assert failed["error_offset"] == 15
        assert failed["error_kind"] == "IncompleteInput"
        assert df["error_offset"].dtype == "Int64"

    def test_failures_dropped(self, s2_name):
        df = identify_many([s2_name, "garbage"], include_failures=False)
        assert list(df["input"]) == [s2_name]

    def test_custom_registry(self, s2_name, landsat_scene_name):
        grammars = build_registry(["landsat_scene"])
        df = identify_many([s2_name, landsat_scene_name], grammars=grammars)
        assert list(df["kind"].isna()) == [True, False]

    def test_empty_input(self):
        df = identify_many([])
        assert list(df.columns) == COLUMNS
        assert df.empty
