"""ABOUTME: Loader for alternative type charts stored as YAML.
ABOUTME: Validates per-type relation lists and turns them into a TypeCatalog."""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, model_validator

from typeresist.utils.type_chart import RELATION_KEYS, TypeCatalog

logger = logging.getLogger(__name__)


class TypeRelationsConfig(BaseModel):
    """Relation lists of a single defending type, by type name."""

    weak_to: list[str] = Field(default_factory=list)
    resistant_to: list[str] = Field(default_factory=list)
    immune_to: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_disjoint(self) -> "TypeRelationsConfig":
        seen: dict[str, str] = {}
        for relation in RELATION_KEYS:
            for name in getattr(self, relation):
                key = name.strip().lower()
                if key in seen and seen[key] != relation:
                    raise ValueError(f"'{name}' is listed in both {seen[key]} and {relation}")
                seen[key] = relation
        return self


class TypeChartConfig(BaseModel):
    """A full type chart: defending type name to its relation lists."""

    types: dict[str, TypeRelationsConfig]

    def to_catalog(self) -> TypeCatalog:
        """Resolve every name and build a TypeCatalog.

        Raises:
            UnknownTypeError: If the chart names a type outside the 18 types.
        """
        return TypeCatalog.from_relations({name: relations.model_dump() for name, relations in self.types.items()})


def load_type_chart_config(config_path: Path) -> TypeChartConfig:
    """Load a type chart from a YAML file.

    Args:
        config_path: Path to the chart file.

    Returns:
        Parsed TypeChartConfig object.

    Raises:
        FileNotFoundError: If the chart file doesn't exist.
        ValueError: If the chart file is invalid.
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Type chart not found: {config_path}")

    with config_path.open(encoding="utf-8") as f:
        raw_config = yaml.safe_load(f)

    logger.debug("Loaded type chart from %s", config_path)
    return TypeChartConfig.model_validate(raw_config)
