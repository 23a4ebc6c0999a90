"""
Sentinel-1 product names and measurement dataset names.

Product, e.g. ``S1A_IW_GRDH_1SDV_20191024T165509_20191024T165534_029600_035EE7_2A1E``::

    MMM_BB_TTTR_LFPP_<start>_<stop>_OOOOOO_DDDDDD_CCCC

    MMM     mission (S1A, S1B, S1C)
    BB      mode/beam (IW, EW, WV, SM swaths S1-S6, ...)
    TTT     product type (SLC, GRD, OCN, RAW)
    R       resolution class (F, H, M, or _ when not applicable)
    L       processing level (0-2)
    F       product class (S standard, A annotation, C calibration, N noise)
    PP      polarisation (SH, SV, DH, DV, HH, HV, VV, VH)
    OOOOOO  absolute orbit number
    DDDDDD  mission datatake id (hex)
    CCCC    product unique id (hex)

Dataset (measurement file inside the SAFE product), e.g.
``s1a-iw1-slc-vv-20191024t165508-20191024t165533-029600-035ee7-004``::

    mmm-sss-ttt-pp-<start>-<stop>-oooooo-dddddd-nnn

https://sentinel.esa.int/web/sentinel/user-guides/sentinel-1-sar/naming-conventions
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import ClassVar, Literal

from pydantic import Field

from eo_identifiers.grammars.base import BaseGrammar, BaseRecord
from eo_identifiers.missions import Mission
from eo_identifiers.primitives import (
    one_of_no_case,
    tag,
    take_alphanumeric,
    take_alphanumeric_run,
    take_digits,
    take_digits_in_range,
    take_hex,
)
from eo_identifiers.temporal import parse_esa_timestamp


class MissionId(str, Enum):
    S1A = "S1A"
    S1B = "S1B"
    S1C = "S1C"


class ProductType(str, Enum):
    SLC = "SLC"
    GRD = "GRD"
    OCN = "OCN"
    RAW = "RAW"


class Resolution(str, Enum):
    FULL = "F"
    HIGH = "H"
    MEDIUM = "M"


class ProductClass(str, Enum):
    STANDARD = "S"
    ANNOTATION = "A"
    CALIBRATION = "C"
    NOISE = "N"


class Polarisation(str, Enum):
    SH = "SH"
    SV = "SV"
    DH = "DH"
    DV = "DV"
    HH = "HH"
    HV = "HV"
    VV = "VV"
    VH = "VH"


class Sentinel1Product(BaseRecord):
    """Sentinel-1 SAR product (SAFE directory name)."""

    kind: Literal["sentinel1_product"] = "sentinel1_product"
    mission_id: MissionId
    mode: str = Field(..., description="Acquisition mode or beam, e.g. IW or S3")
    product_type: ProductType
    resolution: Resolution | None
    processing_level: int = Field(..., ge=0, le=2)
    product_class: ProductClass
    polarisation: Polarisation
    start_datetime: datetime
    stop_datetime: datetime
    absolute_orbit_number: int
    mission_datatake_id: str
    product_unique_id: str

    @property
    def mission(self) -> Mission:
        return Mission.SENTINEL_1


class Sentinel1Dataset(BaseRecord):
    """Sentinel-1 measurement/annotation dataset inside a product."""

    kind: Literal["sentinel1_dataset"] = "sentinel1_dataset"
    mission_id: MissionId
    swath: str
    product_type: ProductType
    polarisation: Polarisation
    start_datetime: datetime
    stop_datetime: datetime
    absolute_orbit_number: int
    mission_datatake_id: str
    image_number: int

    @property
    def mission(self) -> Mission:
        return Mission.SENTINEL_1


def _choices(enum_cls: type[Enum]) -> dict[str, Enum]:
    return {member.value: member for member in enum_cls}


def parse_product(s: str) -> tuple[Sentinel1Product, str]:
    def sep(r: str) -> tuple[str, str]:
        return tag(r, "_")

    mission_id, rest = one_of_no_case(s, _choices(MissionId))
    _, rest = sep(rest)
    mode, rest = take_alphanumeric(rest, 2)
    _, rest = sep(rest)
    product_type, rest = one_of_no_case(rest, _choices(ProductType))
    resolution, rest = one_of_no_case(rest, {**_choices(Resolution), "_": None})
    _, rest = sep(rest)
    processing_level, rest = take_digits_in_range(rest, 1, 0, 2)
    product_class, rest = one_of_no_case(rest, _choices(ProductClass))
    polarisation, rest = one_of_no_case(rest, _choices(Polarisation))
    _, rest = sep(rest)
    start_datetime, rest = parse_esa_timestamp(rest)
    _, rest = sep(rest)
    stop_datetime, rest = parse_esa_timestamp(rest)
    _, rest = sep(rest)
    orbit, rest = take_digits_in_range(rest, 6, 1, 999999)
    _, rest = sep(rest)
    datatake, rest = take_hex(rest, 6)
    _, rest = sep(rest)
    unique_id, rest = take_hex(rest, 4)
    return (
        Sentinel1Product(
            mission_id=mission_id,
            mode=mode.upper(),
            product_type=product_type,
            resolution=resolution,
            processing_level=processing_level,
            product_class=product_class,
            polarisation=polarisation,
            start_datetime=start_datetime,
            stop_datetime=stop_datetime,
            absolute_orbit_number=orbit,
            mission_datatake_id=datatake,
            product_unique_id=unique_id,
        ),
        rest,
    )


def parse_dataset(s: str) -> tuple[Sentinel1Dataset, str]:
    def sep(r: str) -> tuple[str, str]:
        return tag(r, "-")

    mission_id, rest = one_of_no_case(s, _choices(MissionId))
    _, rest = sep(rest)
    swath, rest = take_alphanumeric_run(rest, 1, 3)
    _, rest = sep(rest)
    product_type, rest = one_of_no_case(rest, _choices(ProductType))
    _, rest = sep(rest)
    polarisation, rest = one_of_no_case(rest, _choices(Polarisation))
    _, rest = sep(rest)
    start_datetime, rest = parse_esa_timestamp(rest)
    _, rest = sep(rest)
    stop_datetime, rest = parse_esa_timestamp(rest)
    _, rest = sep(rest)
    orbit, rest = take_digits_in_range(rest, 6, 1, 999999)
    _, rest = sep(rest)
    datatake, rest = take_hex(rest, 6)
    _, rest = sep(rest)
    image_number, rest = take_digits(rest, 3)
    return (
        Sentinel1Dataset(
            mission_id=mission_id,
            swath=swath.upper(),
            product_type=product_type,
            polarisation=polarisation,
            start_datetime=start_datetime,
            stop_datetime=stop_datetime,
            absolute_orbit_number=orbit,
            mission_datatake_id=datatake,
            image_number=image_number,
        ),
        rest,
    )


class Sentinel1ProductGrammar(BaseGrammar):
    name: ClassVar[str] = "sentinel1_product"
    record_type = Sentinel1Product

    def _parse(self, s: str) -> tuple[Sentinel1Product, str]:
        return parse_product(s)


class Sentinel1DatasetGrammar(BaseGrammar):
    name: ClassVar[str] = "sentinel1_dataset"
    record_type = Sentinel1Dataset

    def _parse(self, s: str) -> tuple[Sentinel1Dataset, str]:
        return parse_dataset(s)
