"""Satellite missions covered by the identifier grammars."""

from __future__ import annotations

from enum import Enum


class Mission(str, Enum):
    SENTINEL_1 = "Sentinel 1"
    SENTINEL_2 = "Sentinel 2"
    SENTINEL_3 = "Sentinel 3"
    LANDSAT_1 = "Landsat 1"
    LANDSAT_2 = "Landsat 2"
    LANDSAT_3 = "Landsat 3"
    LANDSAT_4 = "Landsat 4"
    LANDSAT_5 = "Landsat 5"
    LANDSAT_6 = "Landsat 6"
    LANDSAT_7 = "Landsat 7"
    LANDSAT_8 = "Landsat 8"
    LANDSAT_9 = "Landsat 9"

    @property
    def display_name(self) -> str:
        return self.value
