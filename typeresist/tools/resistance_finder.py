# ABOUTME: Finds every type combination that resists or is immune to a set of attack types.
# ABOUTME: Searches monotypes and dual types over a pruned candidate list.

import logging
from collections.abc import Iterator, Sequence

from typeresist.utils.effectiveness import EffectivenessCalculator, TypeCombination, validate_attack_types
from typeresist.utils.type_chart import PokemonType

logger = logging.getLogger(__name__)


def _search_order(candidates: Sequence[PokemonType]) -> Iterator[TypeCombination]:
    """Yield the combinations to test for three or more candidates.

    Monotypes come first in candidate order. Dual types follow, grouped by
    the first member ascending and, for a fixed first member, by the second
    member descending.
    """
    for candidate in candidates:
        yield TypeCombination(candidate)

    size = len(candidates)
    for i in range(size):
        for j in range(size - 1, i, -1):
            yield TypeCombination(candidates[i], candidates[j])


class CombinationEnumerator:
    """Searches the 171 type combinations for ones that wall an attack type set."""

    def __init__(self, calculator: EffectivenessCalculator | None = None) -> None:
        self.calculator = calculator if calculator is not None else EffectivenessCalculator()

    def candidate_types(self, attack_types: Sequence[PokemonType]) -> list[PokemonType]:
        """Return types, in canonical order, that are not weak to every attack type.

        Note:
            This filter is cheaper than it is sound. A dropped type could still
            appear in a valid dual type when its partner is immune to the
            attacks it is weak to (2x * 0x = 0x), but such pairs are never
            tested. E.g. [Fighting] drops Normal, so Normal & Ghost is missed.
        """
        attack_types = validate_attack_types(attack_types)
        return [
            candidate
            for candidate in self.calculator.catalog.all_types()
            if not self.calculator.is_weak_to_all(TypeCombination(candidate), attack_types)
        ]

    def find_all_resistant_combinations(self, attack_types: Sequence[PokemonType]) -> list[TypeCombination]:
        """Find type combinations that take at most 0.5x from every attack type.

        Args:
            attack_types: Non-empty, de-duplicated attack types.

        Returns:
            Matching combinations, monotypes before dual types. An empty list
            means no combination matches.

        Raises:
            ValueError: If attack_types is empty or contains None.
        """
        attack_types = validate_attack_types(attack_types)
        candidates = self.candidate_types(attack_types)
        logger.debug(
            "%d candidate types for attack types %s",
            len(candidates),
            ", ".join(t.value for t in attack_types),
        )

        if not candidates:
            return []

        tested: Iterator[TypeCombination] | list[TypeCombination]
        if len(candidates) == 1:
            tested = [TypeCombination(candidates[0])]
        elif len(candidates) == 2:
            tested = [TypeCombination(candidates[0], candidates[1])]
        else:
            tested = _search_order(candidates)

        matches = [combo for combo in tested if self.calculator.is_resistant_or_immune_to_all(combo, attack_types)]
        logger.debug("Found %d resistant type combinations", len(matches))
        return matches


def find_all_resistant_combinations(attack_types: Sequence[PokemonType]) -> list[TypeCombination]:
    """Run the search against the built-in type chart. See `CombinationEnumerator`."""
    return CombinationEnumerator().find_all_resistant_combinations(attack_types)
