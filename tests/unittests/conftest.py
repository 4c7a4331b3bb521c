"""Contains configurations for the test run."""

from collections.abc import Callable, Mapping

import pytest

from typeresist.tools.resistance_finder import CombinationEnumerator
from typeresist.utils.effectiveness import EffectivenessCalculator
from typeresist.utils.type_chart import PokemonType, TypeCatalog


@pytest.fixture(scope="session")
def calculator() -> EffectivenessCalculator:
    """Calculator over the built-in type chart."""
    return EffectivenessCalculator()


@pytest.fixture(scope="session")
def enumerator(calculator: EffectivenessCalculator) -> CombinationEnumerator:
    """Enumerator over the built-in type chart."""
    return CombinationEnumerator(calculator)


@pytest.fixture
def enumerator_for() -> Callable[[Mapping[str, Mapping[str, list[str]]]], CombinationEnumerator]:
    """Factory building an enumerator over a synthetic relation table."""

    def _build(table: Mapping[str, Mapping[str, list[str]]]) -> CombinationEnumerator:
        return CombinationEnumerator(EffectivenessCalculator(TypeCatalog.from_relations(table)))

    return _build


@pytest.fixture
def all_weak_to_normal() -> dict[str, dict[str, list[str]]]:
    """Relation table where every type is weak to Normal and nothing else."""
    return {t.value: {"weak_to": ["Normal"]} for t in PokemonType}
