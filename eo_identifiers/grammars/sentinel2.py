"""
Sentinel-2 product names (format used since 6 December 2016).

Example: ``S2A_MSIL1C_20170105T013442_N0204_R031_T53NMJ_20170105T013443``::

    MMM_MSIXXX_YYYYMMDDTHHMMSS_Nxxyy_ROOO_Txxxxx_<Product Discriminator>

https://sentinel.esa.int/web/sentinel/user-guides/sentinel-2-msi/naming-convention
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
    tag_no_case,
    take_alphanumeric,
    take_digits_in_range,
)
from eo_identifiers.temporal import parse_esa_timestamp


class MissionId(str, Enum):
    S2A = "S2A"
    S2B = "S2B"
    S2C = "S2C"


class ProductLevel(str, Enum):
    L1C = "L1C"
    L2A = "L2A"


class Sentinel2Product(BaseRecord):
    """Sentinel-2 MSI product."""

    kind: Literal["sentinel2_product"] = "sentinel2_product"
    mission_id: MissionId
    product_level: ProductLevel
    start_datetime: datetime = Field(..., description="Datatake sensing start")
    pdgs_baseline_number: tuple[int, int] = Field(
        ..., description="PDGS processing baseline, e.g. (2, 4) for N0204"
    )
    relative_orbit_number: int = Field(..., ge=1, le=143)
    tile_number: str
    product_discriminator: str = Field(
        ...,
        description=(
            "Distinguishes end user products of the same datatake; may be "
            "slightly earlier or later than the sensing time"
        ),
    )

    @property
    def mission(self) -> Mission:
        return Mission.SENTINEL_2

    @property
    def stop_datetime(self) -> None:
        return None


def _separator(s: str) -> tuple[str, str]:
    return tag(s, "_")


def _processing_baseline(s: str) -> tuple[tuple[int, int], str]:
    _, rest = tag_no_case(s, "N")
    major, rest = take_digits_in_range(rest, 2, 0, 99)
    minor, rest = take_digits_in_range(rest, 2, 0, 99)
    return (major, minor), rest


def _relative_orbit(s: str) -> tuple[int, str]:
    _, rest = tag_no_case(s, "R")
    return take_digits_in_range(rest, 3, 1, 143)


def _tile_number(s: str) -> tuple[str, str]:
    _, rest = tag_no_case(s, "T")
    tile, rest = take_alphanumeric(rest, 5)
    return tile.upper(), rest


def parse_product(s: str) -> tuple[Sentinel2Product, str]:
    mission_id, rest = one_of_no_case(s, {m.value: m for m in MissionId})
    _, rest = _separator(rest)
    _, rest = tag_no_case(rest, "MSI")
    product_level, rest = one_of_no_case(rest, {p.value: p for p in ProductLevel})
    _, rest = _separator(rest)
    start_datetime, rest = parse_esa_timestamp(rest)
    _, rest = _separator(rest)
    baseline, rest = _processing_baseline(rest)
    _, rest = _separator(rest)
    relative_orbit, rest = _relative_orbit(rest)
    _, rest = _separator(rest)
    tile_number, rest = _tile_number(rest)
    _, rest = _separator(rest)
    discriminator, rest = take_alphanumeric(rest, 15)
    return (
        Sentinel2Product(
            mission_id=mission_id,
            product_level=product_level,
            start_datetime=start_datetime,
            pdgs_baseline_number=baseline,
            relative_orbit_number=relative_orbit,
            tile_number=tile_number,
            product_discriminator=discriminator.upper(),
        ),
        rest,
    )


class Sentinel2ProductGrammar(BaseGrammar):
    name: ClassVar[str] = "sentinel2_product"
    record_type = Sentinel2Product

    def _parse(self, s: str) -> tuple[Sentinel2Product, str]:
        return parse_product(s)
