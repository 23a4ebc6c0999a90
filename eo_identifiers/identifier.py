"""
The typed identifier returned by ``resolve()``.

``Identifier`` wraps exactly one record from the closed set of supported
identifier types. The record's ``kind`` literal is the discriminator, so an
identifier serialized with ``model_dump_json()`` validates back into the same
record type with ``Identifier.model_validate_json()``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Union

from pydantic import BaseModel, ConfigDict, Field

from eo_identifiers.grammars import (
    LandsatProduct,
    LandsatSceneId,
    Sentinel1Dataset,
    Sentinel1Product,
    Sentinel2Product,
    Sentinel3Product,
)
from eo_identifiers.missions import Mission

RECORD_TYPES = (
    Sentinel1Product,
    Sentinel1Dataset,
    Sentinel2Product,
    Sentinel3Product,
    LandsatProduct,
    LandsatSceneId,
)

IdentifierRecord = Annotated[Union[RECORD_TYPES], Field(discriminator="kind")]


class Identifier(BaseModel):
    """Identifier of an earth observation product or dataset."""

    model_config = ConfigDict(frozen=True)

    record: IdentifierRecord

    @property
    def kind(self) -> str:
        return self.record.kind

    @property
    def mission(self) -> Mission:
        return self.record.mission

    @property
    def start_datetime(self) -> datetime:
        """Sensing start; Landsat acquisitions start at midnight of the acquisition date."""
        return self.record.start_datetime

    @property
    def stop_datetime(self) -> datetime | None:
        """Sensing stop, or ``None`` where the name does not encode it."""
        return self.record.stop_datetime
