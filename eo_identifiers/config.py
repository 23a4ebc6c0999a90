"""
Configuration models and YAML I/O for eo-identifiers.

The config selects which grammars take part in dispatch (and in which
priority order) and where batch results are written. A config file looks
like::

    grammars:
    - sentinel2_product
    - landsat_product
    output:
      output_path: outputs/identifiers.parquet
      output_format: parquet
      include_failures: true

Key models:
- ResolverConfig: Top-level config (grammars + output).
- OutputConfig: Results table path, format and failure handling.

Key functions:
- load_config(path) -> ResolverConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator

from eo_identifiers.exceptions import ConfigValidationError
from eo_identifiers.grammars import BaseGrammar
from eo_identifiers.registry import DEFAULT_GRAMMAR_ORDER, build_registry

logger = logging.getLogger(__name__)


class OutputConfig(BaseModel):
    """Output settings for batch identification."""

    output_path: str = Field(
        "outputs/identifiers.parquet", description="File the results table is written to"
    )
    output_format: Literal["csv", "parquet"] = Field("parquet", description="Output format")
    include_failures: bool = Field(
        True, description="If True, inputs no grammar matched are kept as rows with error columns"
    )


class ResolverConfig(BaseModel):
    """Top-level configuration for eo-identifiers."""

    grammars: list[str] = Field(
        default_factory=lambda: list(DEFAULT_GRAMMAR_ORDER),
        description="Grammar names in priority order; the first match wins",
    )
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("grammars")
    @classmethod
    def _check_grammars(cls, value: list[str]) -> list[str]:
        """Validate that grammars is non-empty, known and free of duplicates."""
        if not value:
            raise ValueError("At least one grammar must be enabled.")
        unknown = [name for name in value if name not in DEFAULT_GRAMMAR_ORDER]
        if unknown:
            raise ValueError(
                f"Unknown grammars: {unknown}. Available: {list(DEFAULT_GRAMMAR_ORDER)}"
            )
        if len(set(value)) != len(value):
            raise ValueError(f"Grammars listed more than once: {value}")
        return value

    def registry(self) -> tuple[BaseGrammar, ...]:
        """Build the grammar registry this config describes."""
        return build_registry(self.grammars)


def load_config(path: str | Path) -> ResolverConfig:
    """Load and validate a resolver config YAML file.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    logger.info("Loaded config from %s", path)
    return ResolverConfig.model_validate(raw)


def save_config(config: ResolverConfig, path: str | Path) -> None:
    """Serialize a ResolverConfig to YAML."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# eo-identifiers configuration\n")
        f.write("# Grammars are tried top to bottom; the first match wins.\n\n")
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
    logger.info("Saved config to %s", path)
