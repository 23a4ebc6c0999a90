"""
Landsat scene ids and Collection product identifiers.

Scene id (pre-collection), e.g. ``LC80390222013076EDC00``::

    L X S PPP RRR YYYYDDD GSI VV
    | | | |   |   |       |   archive version number
    | | | |   |   |       ground station identifier
    | | | |   |   acquisition date (Julian)
    | | | |   WRS row
    | | | WRS path
    | | satellite (1-9)
    | sensor
    Landsat

Collection product, e.g. ``LC08_L2SP_140041_20130503_20190828_02_T1``::

    LXSS_LLLL_PPPRRR_YYYYMMDD_yyyymmdd_CC_TX

References:
- https://www.usgs.gov/faqs/what-naming-convention-landsat-collections-level-1-scenes
- https://www.usgs.gov/faqs/what-naming-convention-landsat-collection-2-level-1-and-level-2-scenes
"""

from __future__ import annotations

from datetime import date, datetime, time
from enum import Enum
from typing import ClassVar, Literal

from pydantic import Field

from eo_identifiers.grammars.base import BaseGrammar, BaseRecord
from eo_identifiers.missions import Mission
from eo_identifiers.primitives import (
    one_of_no_case,
    opt,
    tag,
    tag_no_case,
    take_alphanumeric,
    take_alphanumeric_run,
    take_digits,
    take_digits_in_range,
)
from eo_identifiers.temporal import parse_date, parse_julian_date


class Sensor(str, Enum):
    OLI_TIRS = "OLI_TIRS"
    OLI = "OLI"
    TIRS = "TIRS"
    ETM_PLUS = "ETM_PLUS"
    TM = "TM"
    MSS = "MSS"

    @property
    def display_name(self) -> str:
        return _SENSOR_NAMES[self]

    @property
    def long_name(self) -> str:
        return _SENSOR_LONG_NAMES[self]


# https://en.wikipedia.org/wiki/Landsat_program
_SENSOR_NAMES = {
    Sensor.OLI_TIRS: "OLI/TIRS",
    Sensor.OLI: "OLI",
    Sensor.TIRS: "TIRS",
    Sensor.ETM_PLUS: "ETM+",
    Sensor.TM: "TM",
    Sensor.MSS: "MSS",
}

_SENSOR_LONG_NAMES = {
    Sensor.OLI_TIRS: "Operational Land Imager / Thermal Infrared Sensor",
    Sensor.OLI: "Operational Land Imager",
    Sensor.TIRS: "Thermal Infrared Sensor",
    Sensor.ETM_PLUS: "Enhanced Thematic Mapper Plus",
    Sensor.TM: "Thematic Mapper",
    Sensor.MSS: "Multi Spectral Scanner",
}


class CollectionCategory(str, Enum):
    REAL_TIME = "RT"
    TIER_1 = "T1"
    TIER_2 = "T2"
    ALBERS_TIER_1 = "A1"
    ALBERS_TIER_2 = "A2"

    @property
    def long_name(self) -> str:
        return _CATEGORY_LONG_NAMES[self]


_CATEGORY_LONG_NAMES = {
    CollectionCategory.REAL_TIME: "Real-Time",
    CollectionCategory.TIER_1: "Tier 1",
    CollectionCategory.TIER_2: "Tier 2",
    CollectionCategory.ALBERS_TIER_1: "Albers Tier 1",
    CollectionCategory.ALBERS_TIER_2: "Albers Tier 2",
}

class ProcessingLevel(str, Enum):
    """Processing correction levels of Collection products.

    Codes not listed here are kept on the record as uppercased text.
    """

    L1TP = "L1TP"
    L1GT = "L1GT"
    L1GS = "L1GS"
    L2SP = "L2SP"
    L2SR = "L2SR"
    # Albers tile regions: CONUS, Alaska, Hawaii
    CU = "CU"
    AK = "AK"
    HI = "HI"


def _mission(satellite: int) -> Mission:
    return Mission(f"Landsat {satellite}")


class LandsatSceneId(BaseRecord):
    """Pre-collection Landsat scene id."""

    kind: Literal["landsat_scene"] = "landsat_scene"
    sensor: Sensor
    mission_id: int = Field(..., ge=1, le=9, description="Landsat satellite number")
    wrs_path: int
    wrs_row: int
    acquire_date: date
    ground_station_identifier: str
    archive_version_number: int

    @property
    def mission(self) -> Mission:
        return _mission(self.mission_id)

    @property
    def start_datetime(self) -> datetime:
        return datetime.combine(self.acquire_date, time())

    @property
    def stop_datetime(self) -> None:
        return None


class LandsatProduct(BaseRecord):
    """Landsat Collection 1/2 product identifier."""

    kind: Literal["landsat_product"] = "landsat_product"
    sensor: Sensor
    mission_id: int = Field(..., ge=1, le=9, description="Landsat satellite number")
    processing_level: ProcessingLevel | str = Field(
        ...,
        union_mode="left_to_right",
        description="Processing correction level, e.g. L1TP, L2SP or CU",
    )
    wrs_path: int
    wrs_row: int
    acquire_date: date
    processing_date: date
    collection_number: int
    collection_category: CollectionCategory | None = None

    @property
    def mission(self) -> Mission:
        return _mission(self.mission_id)

    @property
    def start_datetime(self) -> datetime:
        return datetime.combine(self.acquire_date, time())

    @property
    def stop_datetime(self) -> None:
        return None

    @property
    def has_standard_processing_level(self) -> bool:
        return isinstance(self.processing_level, ProcessingLevel)


def _sensor_letter(s: str) -> tuple[str, str]:
    return one_of_no_case(s, {"C": "C", "O": "O", "T": "T", "E": "E", "M": "M"})


def _sensor(letter: str, satellite: int) -> Sensor:
    if letter == "T":
        # T is TM on Landsat 4 and 5, TIRS-only data on Landsat 8 and 9
        return Sensor.TM if satellite in (4, 5) else Sensor.TIRS
    return {
        "C": Sensor.OLI_TIRS,
        "O": Sensor.OLI,
        "E": Sensor.ETM_PLUS,
        "M": Sensor.MSS,
    }[letter]


def _separator(s: str) -> tuple[str, str]:
    return tag(s, "_")


def _processing_level(s: str) -> tuple[ProcessingLevel | str, str]:
    code, rest = take_alphanumeric_run(s)
    code = code.upper()
    try:
        return ProcessingLevel(code), rest
    except ValueError:
        return code, rest


def _collection_category(s: str) -> tuple[CollectionCategory, str]:
    _, rest = _separator(s)
    return one_of_no_case(rest, {c.value: c for c in CollectionCategory})


def parse_scene_id(s: str) -> tuple[LandsatSceneId, str]:
    _, rest = tag_no_case(s, "L")
    letter, rest = _sensor_letter(rest)
    satellite, rest = take_digits_in_range(rest, 1, 1, 9)
    wrs_path, rest = take_digits(rest, 3)
    wrs_row, rest = take_digits(rest, 3)
    acquire_date, rest = parse_julian_date(rest)
    station, rest = take_alphanumeric(rest, 3)
    version, rest = take_digits(rest, 2)
    return (
        LandsatSceneId(
            sensor=_sensor(letter, satellite),
            mission_id=satellite,
            wrs_path=wrs_path,
            wrs_row=wrs_row,
            acquire_date=acquire_date,
            ground_station_identifier=station.upper(),
            archive_version_number=version,
        ),
        rest,
    )


def parse_product(s: str) -> tuple[LandsatProduct, str]:
    _, rest = tag_no_case(s, "L")
    letter, rest = _sensor_letter(rest)
    _, rest = tag(rest, "0")
    satellite, rest = take_digits_in_range(rest, 1, 1, 9)
    _, rest = _separator(rest)
    processing_level, rest = _processing_level(rest)
    _, rest = _separator(rest)
    wrs_path, rest = take_digits(rest, 3)
    wrs_row, rest = take_digits(rest, 3)
    _, rest = _separator(rest)
    acquire_date, rest = parse_date(rest)
    _, rest = _separator(rest)
    processing_date, rest = parse_date(rest)
    _, rest = _separator(rest)
    collection_number, rest = take_digits(rest, 2)
    collection_category, rest = opt(rest, _collection_category)
    return (
        LandsatProduct(
            sensor=_sensor(letter, satellite),
            mission_id=satellite,
            processing_level=processing_level,
            wrs_path=wrs_path,
            wrs_row=wrs_row,
            acquire_date=acquire_date,
            processing_date=processing_date,
            collection_number=collection_number,
            collection_category=collection_category,
        ),
        rest,
    )


class LandsatSceneGrammar(BaseGrammar):
    name: ClassVar[str] = "landsat_scene"
    record_type = LandsatSceneId

    def _parse(self, s: str) -> tuple[LandsatSceneId, str]:
        return parse_scene_id(s)


class LandsatProductGrammar(BaseGrammar):
    name: ClassVar[str] = "landsat_product"
    record_type = LandsatProduct

    def _parse(self, s: str) -> tuple[LandsatProduct, str]:
        return parse_product(s)
