"""
Shared test fixtures and path constants for eo-identifiers tests.

Sample identifier files live in ``tests/testdata``; one name per line with
``#`` comments. If sample files move or new ones are added, update this file.
"""

from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Sample file paths -- edit here if files move or new ones are added
# ---------------------------------------------------------------------------
TESTDATA_DIR = Path(__file__).resolve().parent / "testdata"

SAMPLE_FILES = {
    "landsat_product": TESTDATA_DIR / "landsat_products.txt",
    "landsat_scene": TESTDATA_DIR / "landsat_scenes.txt",
    "sentinel1_product": TESTDATA_DIR / "sentinel1_products.txt",
    "sentinel1_dataset": TESTDATA_DIR / "sentinel1_datasets.txt",
    "sentinel2_product": TESTDATA_DIR / "sentinel2_products.txt",
    "sentinel3_product": TESTDATA_DIR / "sentinel3_products.txt",
}

S2_NAME = "S2A_MSIL1C_20170105T013442_N0204_R031_T53NMJ_20170105T013443"
LANDSAT_SCENE_NAME = "LC80390222013076EDC00"


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs the full registry over sample files)",
    )


@pytest.fixture
def sample_files() -> dict[str, Path]:
    return dict(SAMPLE_FILES)


@pytest.fixture
def s2_name() -> str:
    return S2_NAME


@pytest.fixture
def landsat_scene_name() -> str:
    return LANDSAT_SCENE_NAME
