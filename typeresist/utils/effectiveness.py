# ABOUTME: Damage multiplier math for single and dual type combinations.
# ABOUTME: Classifies attacking types into weaknesses, resistances, and immunities.

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from typeresist.utils.type_chart import (
    IMMUNITY_VALUE,
    NEUTRAL_VALUE,
    RESISTANCE_VALUE,
    SUPER_EFFECTIVE_VALUE,
    PokemonType,
    TypeCatalog,
    default_catalog,
)


@dataclass(frozen=True)
class TypeCombination:
    """A defending typing made of one or two distinct types.

    Building a combination from the same type twice collapses it to a
    monotype, so Fire/Fire is stored as Fire.

    Attributes:
        type1: The primary type.
        type2: The secondary type, or None for a monotype.
        extra_immunities: Attacking types this combination ignores for reasons
            outside the type chart (e.g., Levitate, Water Absorb). Only
            reported by `EffectivenessCalculator.immunities`.
    """

    type1: PokemonType
    type2: PokemonType | None = None
    extra_immunities: frozenset[PokemonType] = frozenset()

    def __post_init__(self) -> None:
        if self.type1 is None:
            raise ValueError("A type combination needs a primary type")
        if self.type2 == self.type1:
            object.__setattr__(self, "type2", None)

        extras = frozenset(self.extra_immunities)
        if None in extras:
            raise ValueError("Extra immunities must not contain missing types")
        object.__setattr__(self, "extra_immunities", extras)

    @property
    def types(self) -> tuple[PokemonType, ...]:
        """Member types in display order."""
        if self.type2 is None:
            return (self.type1,)
        return (self.type1, self.type2)

    @property
    def is_dual(self) -> bool:
        return self.type2 is not None

    def __str__(self) -> str:
        return " & ".join(t.value for t in self.types)


def validate_attack_types(attack_types: Iterable[PokemonType]) -> tuple[PokemonType, ...]:
    """Check that an attack type set is usable and return it as a tuple.

    Raises:
        ValueError: If the set is empty, or an entry is missing (None) or not
            a resolved PokemonType (e.g., a raw name like "Fire").
    """
    checked = tuple(attack_types)
    if not checked:
        raise ValueError("At least one attack type is required")
    for index, atk_type in enumerate(checked):
        if atk_type is None:
            raise ValueError(f"Missing attack type at index {index}")
        if not isinstance(atk_type, PokemonType):
            raise ValueError(f"Unresolved attack type at index {index}: {atk_type!r}")
    return checked


def all_type_combinations(catalog: TypeCatalog = default_catalog) -> list[TypeCombination]:
    """Generate all 171 unique type combinations.

    Returns:
        18 monotypes followed by 153 dual types, both in canonical order.
    """
    types = catalog.all_types()
    monotypes = [TypeCombination(t) for t in types]
    dual_types = [TypeCombination(type1, type2) for i, type1 in enumerate(types) for type2 in types[i + 1 :]]
    return monotypes + dual_types


class EffectivenessCalculator:
    """Computes damage multipliers against type combinations using a catalog."""

    def __init__(self, catalog: TypeCatalog | None = None) -> None:
        self.catalog = catalog if catalog is not None else default_catalog

    def multiplier(self, defender: PokemonType, atk_type: PokemonType) -> float:
        """Damage multiplier of one attacking type against one defending type.

        Returns:
            0 if immune, 0.5 if resistant, 2 if weak, otherwise 1.
        """
        relations = self.catalog.relations(defender)
        if atk_type in relations.immune_to:
            return IMMUNITY_VALUE
        if atk_type in relations.resistant_to:
            return RESISTANCE_VALUE
        if atk_type in relations.weak_to:
            return SUPER_EFFECTIVE_VALUE
        return NEUTRAL_VALUE

    def combined_multiplier(self, combo: TypeCombination, atk_type: PokemonType) -> float:
        """Damage multiplier against a combination: the product over its member types.

        Returns:
            Effectiveness multiplier: 0, 0.25, 0.5, 1, 2, or 4.
        """
        result = self.multiplier(combo.type1, atk_type)
        if combo.type2 is not None:
            result *= self.multiplier(combo.type2, atk_type)
        return result

    def is_resistant_or_immune_to_all(self, combo: TypeCombination, attack_types: Sequence[PokemonType]) -> bool:
        """True if every attacking type deals at most 0.5x to the combination."""
        return all(
            self.combined_multiplier(combo, atk_type) <= RESISTANCE_VALUE
            for atk_type in validate_attack_types(attack_types)
        )

    def is_weak_to_all(self, combo: TypeCombination, attack_types: Sequence[PokemonType]) -> bool:
        """True if every attacking type deals at least 2x to the combination."""
        return all(
            self.combined_multiplier(combo, atk_type) >= SUPER_EFFECTIVE_VALUE
            for atk_type in validate_attack_types(attack_types)
        )

    def _band(self, combo: TypeCombination, in_band: Callable[[float], bool]) -> dict[PokemonType, float]:
        band: dict[PokemonType, float] = {}
        for atk_type in self.catalog.all_types():
            value = self.combined_multiplier(combo, atk_type)
            if in_band(value):
                band[atk_type] = value
        return band

    def weaknesses(self, combo: TypeCombination) -> dict[PokemonType, float]:
        """Attacking types dealing more than 1x, with their multipliers (2 or 4)."""
        return self._band(combo, lambda value: value > NEUTRAL_VALUE)

    def resistances(self, combo: TypeCombination) -> dict[PokemonType, float]:
        """Attacking types dealing less than 1x but more than 0x (0.5 or 0.25)."""
        return self._band(combo, lambda value: IMMUNITY_VALUE < value < NEUTRAL_VALUE)

    def immunities(self, combo: TypeCombination) -> dict[PokemonType, float]:
        """Attacking types dealing 0x, including the combination's extra immunities."""
        return {
            atk_type: IMMUNITY_VALUE
            for atk_type in self.catalog.all_types()
            if atk_type in combo.extra_immunities or self.combined_multiplier(combo, atk_type) == IMMUNITY_VALUE
        }
