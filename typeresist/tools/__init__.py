# ABOUTME: Tools package for type combination searches.
# ABOUTME: Contains the resistant type combination finder.

from typeresist.tools.resistance_finder import CombinationEnumerator, find_all_resistant_combinations

__all__ = [
    "CombinationEnumerator",
    "find_all_resistant_combinations",
]
