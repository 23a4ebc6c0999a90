"""
Sentinel-3 product names.

Example::

    S3A_OL_1_EFR____20220801T210143_20220801T210443_20220803T023357_0179_088_157_1800_MAR_O_NT_002

    MMM_SS_L_TTTTTT_<start>_<stop>_<creation>_<instance id>_GGG_P_XX_NNN

The 17 character instance id is one of: all underscores (auxiliary data),
``GLOBAL`` padded with underscores, a stripe
(``duration_cycle_orbit_____``), a frame (``duration_cycle_orbit_frame``),
or an alphanumeric tile name padded with underscores.

https://sentinel.esa.int/web/sentinel/user-guides/sentinel-3-olci/naming-convention
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field

from eo_identifiers.grammars.base import BaseGrammar, BaseRecord
from eo_identifiers.missions import Mission
from eo_identifiers.primitives import (
    alt,
    one_of_no_case,
    tag,
    tag_no_case,
    take_alphanumeric,
    take_alphanumeric_run,
    take_chars,
    take_digits,
)
from eo_identifiers.temporal import parse_esa_timestamp

_INSTANCE_WIDTH = 17


class MissionId(str, Enum):
    S3A = "S3A"
    S3B = "S3B"
    # "S3_": products combining both satellites
    S3AB = "S3_"


class DataSource(str, Enum):
    OLCI = "OL"
    SLSTR = "SL"
    SYNERGY = "SY"
    SRAL = "SR"
    DORIS = "DO"
    MWR = "MW"
    GNSS = "GN"


class Platform(str, Enum):
    OPERATIONAL = "O"
    REFERENCE = "F"
    DEVELOPMENT = "D"
    REPROCESSING = "R"


class Timeliness(str, Enum):
    NRT = "NR"
    STC = "ST"
    NTC = "NT"


class DataType(str, Enum):
    """Six character data type slot, trailing underscores removed.

    Codes not listed here are kept on the record as uppercased text.
    """

    AER_AX = "AER_AX"
    AOD = "AOD"
    ATP_AX = "ATP_AX"
    CAL = "CAL"
    CR0 = "CR0"
    CR1 = "CR1"
    EFR = "EFR"
    EFR_BW = "EFR_BW"
    ERR = "ERR"
    ERR_BW = "ERR_BW"
    FRP = "FRP"
    INS_AX = "INS_AX"
    LAN = "LAN"
    LAP_AX = "LAP_AX"
    LFR = "LFR"
    LFR_BW = "LFR_BW"
    LRR = "LRR"
    LRR_BW = "LRR_BW"
    LST = "LST"
    LST_BW = "LST_BW"
    LVI_AX = "LVI_AX"
    MSIR = "MSIR"
    RAC = "RAC"
    RBT = "RBT"
    RBT_BW = "RBT_BW"
    SLT = "SLT"
    SPC = "SPC"
    SRA = "SRA"
    SYN = "SYN"
    SYN_BW = "SYN_BW"
    V10 = "V10"
    V10_BW = "V10_BW"
    VG1 = "VG1"
    VG1_BW = "VG1_BW"
    VGP = "VGP"
    VGP_BW = "VGP_BW"
    WAT = "WAT"
    WCT = "WCT"
    WFR = "WFR"
    WFR_BW = "WFR_BW"
    WRR = "WRR"
    WRR_BW = "WRR_BW"
    WST = "WST"
    WST_BW = "WST_BW"


class InstanceType(str, Enum):
    STRIPE = "stripe"
    FRAME = "frame"
    GLOBAL_TILE = "global_tile"
    TILE = "tile"
    AUX = "aux"


class InstanceId(BaseModel):
    """The instance id block; which fields are set depends on ``instance_type``."""

    model_config = ConfigDict(frozen=True)

    instance_type: InstanceType
    duration: int | None = None
    cycle_number: int | None = None
    relative_orbit_number: int | None = None
    frame_along_track_coordinate: int | None = None
    tile_identifier: str | None = None


class Sentinel3Product(BaseRecord):
    """Sentinel-3 product (OLCI, SLSTR, SYN, SRAL, MWR, ...)."""

    kind: Literal["sentinel3_product"] = "sentinel3_product"
    mission_id: MissionId
    data_source: DataSource
    processing_level: int | None
    data_type: DataType | str = Field(..., union_mode="left_to_right")
    start_datetime: datetime
    stop_datetime: datetime
    product_creation_datetime: datetime
    instance_id: InstanceId
    centre_generating_file: str
    platform: Platform | None
    timeliness: Timeliness | None
    # baseline collection or data usage
    collection_or_usage: str | None

    @property
    def mission(self) -> Mission:
        return Mission.SENTINEL_3


def _separator(s: str) -> tuple[str, str]:
    return tag(s, "_")


def _processing_level(s: str) -> tuple[int | None, str]:
    return alt(
        s,
        lambda r: take_digits(r, 1),
        lambda r: (None, _separator(r)[1]),
    )


def _data_type(s: str) -> tuple[DataType | str, str]:
    slot, rest = take_chars(s, 6)
    code = slot.rstrip("_").upper()
    try:
        return DataType(code), rest
    except ValueError:
        return code, rest


def _aux_instance(s: str) -> tuple[InstanceId, str]:
    _, rest = tag(s, "_" * _INSTANCE_WIDTH)
    return InstanceId(instance_type=InstanceType.AUX), rest


def _global_instance(s: str) -> tuple[InstanceId, str]:
    _, rest = tag_no_case(s, "GLOBAL".ljust(_INSTANCE_WIDTH, "_"))
    return InstanceId(instance_type=InstanceType.GLOBAL_TILE), rest


def _orbit_instance(s: str) -> tuple[InstanceId, str]:
    duration, rest = take_digits(s, 4)
    _, rest = _separator(rest)
    cycle_number, rest = take_digits(rest, 3)
    _, rest = _separator(rest)
    relative_orbit, rest = take_digits(rest, 3)
    _, rest = _separator(rest)
    frame, rest = alt(
        rest,
        lambda r: (None, tag(r, "____")[1]),
        lambda r: take_digits(r, 4),
    )
    return (
        InstanceId(
            instance_type=InstanceType.STRIPE if frame is None else InstanceType.FRAME,
            duration=duration,
            cycle_number=cycle_number,
            relative_orbit_number=relative_orbit,
            frame_along_track_coordinate=frame,
        ),
        rest,
    )


def _tile_instance(s: str) -> tuple[InstanceId, str]:
    # alphanumeric tile name, right-padded with underscores (e.g. EUROPE___________)
    tile, _ = take_alphanumeric_run(s, 1, _INSTANCE_WIDTH)
    _, rest = tag(s[len(tile):], "_" * (_INSTANCE_WIDTH - len(tile)))
    return InstanceId(instance_type=InstanceType.TILE, tile_identifier=tile.upper()), rest


def _instance_id(s: str) -> tuple[InstanceId, str]:
    return alt(s, _aux_instance, _global_instance, _orbit_instance, _tile_instance)


def _collection_or_usage(s: str) -> tuple[str | None, str]:
    def present(r: str) -> tuple[str, str]:
        value, rest = take_alphanumeric_run(r, 1, 3)
        return value.upper(), rest

    return alt(s, present, lambda r: (None, tag(r, "___")[1]))


def parse_product(s: str) -> tuple[Sentinel3Product, str]:
    mission_id, rest = one_of_no_case(s, {m.value: m for m in MissionId})
    _, rest = _separator(rest)
    data_source, rest = one_of_no_case(rest, {d.value: d for d in DataSource})
    _, rest = _separator(rest)
    processing_level, rest = _processing_level(rest)
    _, rest = _separator(rest)
    data_type, rest = _data_type(rest)
    _, rest = _separator(rest)
    start_datetime, rest = parse_esa_timestamp(rest)
    _, rest = _separator(rest)
    stop_datetime, rest = parse_esa_timestamp(rest)
    _, rest = _separator(rest)
    creation_datetime, rest = parse_esa_timestamp(rest)
    _, rest = _separator(rest)
    instance_id, rest = _instance_id(rest)
    _, rest = _separator(rest)
    centre, rest = take_alphanumeric(rest, 3)
    _, rest = _separator(rest)
    platform, rest = one_of_no_case(
        rest, {**{p.value: p for p in Platform}, "_": None}
    )
    _, rest = _separator(rest)
    timeliness, rest = one_of_no_case(
        rest, {**{t.value: t for t in Timeliness}, "__": None}
    )
    _, rest = _separator(rest)
    collection_or_usage, rest = _collection_or_usage(rest)
    return (
        Sentinel3Product(
            mission_id=mission_id,
            data_source=data_source,
            processing_level=processing_level,
            data_type=data_type,
            start_datetime=start_datetime,
            stop_datetime=stop_datetime,
            product_creation_datetime=creation_datetime,
            instance_id=instance_id,
            centre_generating_file=centre.upper(),
            platform=platform,
            timeliness=timeliness,
            collection_or_usage=collection_or_usage,
        ),
        rest,
    )


class Sentinel3ProductGrammar(BaseGrammar):
    name: ClassVar[str] = "sentinel3_product"
    record_type = Sentinel3Product

    def _parse(self, s: str) -> tuple[Sentinel3Product, str]:
        return parse_product(s)
