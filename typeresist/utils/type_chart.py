# ABOUTME: Pokemon type catalog for Gen 6+ (18 types including Fairy).
# ABOUTME: Holds each type's weaknesses, resistances, and immunities as typed sets.

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

# Damage multipliers
SUPER_EFFECTIVE_VALUE = 2.0
RESISTANCE_VALUE = 0.5
NEUTRAL_VALUE = 1.0
IMMUNITY_VALUE = 0.0

RELATION_KEYS = ("weak_to", "resistant_to", "immune_to")


class UnknownTypeError(ValueError):
    """Raised when a name does not match any of the 18 types."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid type: {name}")
        self.name = name


class PokemonType(Enum):
    """The 18 elemental types, declared in canonical order."""

    NORMAL = "Normal"
    FIRE = "Fire"
    WATER = "Water"
    ELECTRIC = "Electric"
    GRASS = "Grass"
    ICE = "Ice"
    FIGHTING = "Fighting"
    POISON = "Poison"
    GROUND = "Ground"
    FLYING = "Flying"
    PSYCHIC = "Psychic"
    BUG = "Bug"
    ROCK = "Rock"
    GHOST = "Ghost"
    DRAGON = "Dragon"
    DARK = "Dark"
    STEEL = "Steel"
    FAIRY = "Fairy"

    def __str__(self) -> str:
        return self.value


_TYPES_BY_NAME: Mapping[str, PokemonType] = MappingProxyType({t.value.lower(): t for t in PokemonType})


def parse_type(name: str) -> PokemonType:
    """Resolve a type name, ignoring case and surrounding whitespace.

    Args:
        name: Type name as typed by a user (e.g., "fire", "Fire").

    Returns:
        The matching PokemonType.

    Raises:
        UnknownTypeError: If the name matches none of the 18 types.
    """
    if not isinstance(name, str):
        raise UnknownTypeError(repr(name))
    try:
        return _TYPES_BY_NAME[name.strip().lower()]
    except KeyError:
        raise UnknownTypeError(name) from None


# Defensive relations per type: which attacking types hit it for 2x, 0.5x, and 0x.
DEFAULT_TYPE_RELATIONS: dict[str, dict[str, list[str]]] = {
    "Normal": {
        "weak_to": ["Fighting"],
        "immune_to": ["Ghost"],
    },
    "Fire": {
        "weak_to": ["Water", "Ground", "Rock"],
        "resistant_to": ["Fire", "Grass", "Ice", "Bug", "Steel", "Fairy"],
    },
    "Water": {
        "weak_to": ["Electric", "Grass"],
        "resistant_to": ["Fire", "Water", "Ice", "Steel"],
    },
    "Electric": {
        "weak_to": ["Ground"],
        "resistant_to": ["Electric", "Flying", "Steel"],
    },
    "Grass": {
        "weak_to": ["Fire", "Ice", "Poison", "Flying"],
        "resistant_to": ["Water", "Electric", "Grass", "Ground"],
    },
    "Ice": {
        "weak_to": ["Fire", "Fighting", "Rock", "Steel"],
        "resistant_to": ["Ice"],
    },
    "Fighting": {
        "weak_to": ["Flying", "Psychic", "Fairy"],
        "resistant_to": ["Bug", "Rock", "Dark"],
    },
    "Poison": {
        "weak_to": ["Ground", "Psychic"],
        "resistant_to": ["Grass", "Fighting", "Poison", "Bug", "Fairy"],
    },
    "Ground": {
        "weak_to": ["Water", "Grass", "Ice"],
        "resistant_to": ["Poison", "Rock"],
        "immune_to": ["Electric"],
    },
    "Flying": {
        "weak_to": ["Electric", "Ice", "Rock"],
        "resistant_to": ["Grass", "Fighting", "Bug"],
        "immune_to": ["Ground"],
    },
    "Psychic": {
        "weak_to": ["Bug", "Ghost", "Dark"],
        "resistant_to": ["Fighting", "Psychic"],
    },
    "Bug": {
        "weak_to": ["Fire", "Flying", "Rock"],
        "resistant_to": ["Grass", "Fighting", "Ground"],
    },
    "Rock": {
        "weak_to": ["Water", "Grass", "Fighting", "Ground", "Steel"],
        "resistant_to": ["Normal", "Fire", "Poison", "Flying"],
    },
    "Ghost": {
        "weak_to": ["Ghost", "Dark"],
        "resistant_to": ["Poison", "Bug"],
        "immune_to": ["Normal", "Fighting"],
    },
    "Dragon": {
        "weak_to": ["Ice", "Dragon", "Fairy"],
        "resistant_to": ["Fire", "Water", "Electric", "Grass"],
    },
    "Dark": {
        "weak_to": ["Fighting", "Bug", "Fairy"],
        "resistant_to": ["Ghost", "Dark"],
        "immune_to": ["Psychic"],
    },
    "Steel": {
        "weak_to": ["Fire", "Fighting", "Ground"],
        "resistant_to": ["Normal", "Grass", "Ice", "Flying", "Psychic", "Bug", "Rock", "Dragon", "Steel", "Fairy"],
        "immune_to": ["Poison"],
    },
    "Fairy": {
        "weak_to": ["Poison", "Steel"],
        "resistant_to": ["Fighting", "Bug", "Dark"],
        "immune_to": ["Dragon"],
    },
}


@dataclass(frozen=True)
class TypeRelations:
    """Attacking types a defending type is weak to, resists, or is immune to.

    Attributes:
        weak_to: Attacking types dealing 2x damage.
        resistant_to: Attacking types dealing 0.5x damage.
        immune_to: Attacking types dealing 0x damage.
    """

    weak_to: frozenset[PokemonType] = frozenset()
    resistant_to: frozenset[PokemonType] = frozenset()
    immune_to: frozenset[PokemonType] = frozenset()

    def __post_init__(self) -> None:
        overlap = (
            (self.weak_to & self.resistant_to)
            | (self.weak_to & self.immune_to)
            | (self.resistant_to & self.immune_to)
        )
        if overlap:
            names = ", ".join(t.value for t in PokemonType if t in overlap)
            raise ValueError(f"Relation sets must be disjoint, overlapping on: {names}")


class TypeCatalog:
    """Read-only table mapping each of the 18 types to its defensive relations.

    Types without an entry are neutral to every attacking type.
    """

    def __init__(self, relations: Mapping[PokemonType, TypeRelations] | None = None) -> None:
        relations = relations or {}
        self._relations: Mapping[PokemonType, TypeRelations] = MappingProxyType(
            {t: relations.get(t, TypeRelations()) for t in PokemonType}
        )

    @classmethod
    def from_relations(cls, table: Mapping[str, Mapping[str, Iterable[str]]]) -> "TypeCatalog":
        """Build a catalog from name-keyed relation lists.

        Args:
            table: Mapping of defending type name to a dict with optional
                "weak_to", "resistant_to", and "immune_to" lists of type names.

        Returns:
            TypeCatalog with every name resolved to a PokemonType.

        Raises:
            UnknownTypeError: If any name is not one of the 18 types.
            ValueError: If an entry has unknown keys, a type is listed twice,
                or an entry's relation sets overlap.
        """
        resolved: dict[PokemonType, TypeRelations] = {}
        for name, entry in table.items():
            defender = parse_type(name)
            if defender in resolved:
                raise ValueError(f"Type '{name}' is listed more than once")

            unexpected = set(entry) - set(RELATION_KEYS)
            if unexpected:
                raise ValueError(f"Unknown relation keys for '{name}': {', '.join(sorted(unexpected))}")

            resolved[defender] = TypeRelations(
                **{key: frozenset(parse_type(other) for other in entry.get(key, ())) for key in RELATION_KEYS}
            )
        return cls(resolved)

    def lookup(self, name: str) -> PokemonType:
        """Resolve a type name case-insensitively. See `parse_type`."""
        return parse_type(name)

    def all_types(self) -> tuple[PokemonType, ...]:
        """Return the 18 types in canonical order."""
        return tuple(PokemonType)

    def relations(self, defender: PokemonType) -> TypeRelations:
        """Return the defensive relations of a single type."""
        return self._relations[defender]

    def __len__(self) -> int:
        return len(self._relations)


default_catalog = TypeCatalog.from_relations(DEFAULT_TYPE_RELATIONS)
