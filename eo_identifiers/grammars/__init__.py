"""
Grammars sub-package for eo-identifiers.

One module per mission family. Each module defines:
- the record model(s) a successful parse produces (frozen pydantic models),
- plain ``parse_*(s) -> (record, rest)`` functions built from the
  primitive and temporal parsers,
- a ``BaseGrammar`` subclass per identifier type, which is what the
  registry (``registry.py`` in the parent package) collects.

Modules:
- sentinel1.py: Sentinel-1 products and measurement datasets.
- sentinel2.py: Sentinel-2 MSI products.
- sentinel3.py: Sentinel-3 products.
- landsat.py: Landsat scene ids and Collection products.
"""

from eo_identifiers.grammars.base import BaseGrammar, BaseRecord
from eo_identifiers.grammars.landsat import (
    LandsatProduct,
    LandsatProductGrammar,
    LandsatSceneGrammar,
    LandsatSceneId,
)
from eo_identifiers.grammars.sentinel1 import (
    Sentinel1Dataset,
    Sentinel1DatasetGrammar,
    Sentinel1Product,
    Sentinel1ProductGrammar,
)
from eo_identifiers.grammars.sentinel2 import Sentinel2Product, Sentinel2ProductGrammar
from eo_identifiers.grammars.sentinel3 import Sentinel3Product, Sentinel3ProductGrammar

__all__ = [
    "BaseGrammar",
    "BaseRecord",
    "LandsatProduct",
    "LandsatProductGrammar",
    "LandsatSceneGrammar",
    "LandsatSceneId",
    "Sentinel1Dataset",
    "Sentinel1DatasetGrammar",
    "Sentinel1Product",
    "Sentinel1ProductGrammar",
    "Sentinel2Product",
    "Sentinel2ProductGrammar",
    "Sentinel3Product",
    "Sentinel3ProductGrammar",
]
