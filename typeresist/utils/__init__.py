# ABOUTME: Utils package for the type catalog and effectiveness math.
# ABOUTME: Re-exports the catalog, type enum, and calculator helpers.

from typeresist.utils.effectiveness import (
    EffectivenessCalculator,
    TypeCombination,
    all_type_combinations,
    validate_attack_types,
)
from typeresist.utils.type_chart import (
    DEFAULT_TYPE_RELATIONS,
    PokemonType,
    TypeCatalog,
    TypeRelations,
    UnknownTypeError,
    default_catalog,
    parse_type,
)

__all__ = [
    "DEFAULT_TYPE_RELATIONS",
    "EffectivenessCalculator",
    "PokemonType",
    "TypeCatalog",
    "TypeCombination",
    "TypeRelations",
    "UnknownTypeError",
    "all_type_combinations",
    "default_catalog",
    "parse_type",
    "validate_attack_types",
]
