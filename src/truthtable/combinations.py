"""
CombinationGenerator.

Enumerates every boolean assignment for n variables in standard
truth-table order: all true first, all false last.

The order is a contract. Row k corresponds to the integer 2^n - 1 - k,
with the first variable as the most significant bit.
"""

from typing import List, Tuple

from truthtable.normalizer import VARIABLE_ALPHABET


Combination = Tuple[bool, ...]


def generate_combinations(variable_count: int) -> List[Combination]:
    """
    Generate all 2^n combinations for `variable_count` variables.

    Raises:
        ValueError: If variable_count is outside 1..len(VARIABLE_ALPHABET)
    """
    if not 1 <= variable_count <= len(VARIABLE_ALPHABET):
        raise ValueError(
            f"variable_count must be between 1 and {len(VARIABLE_ALPHABET)}, got {variable_count}"
        )

    combinations: List[Combination] = []
    for i in range(2 ** variable_count - 1, -1, -1):
        combinations.append(
            tuple(bool((i >> j) & 1) for j in range(variable_count - 1, -1, -1))
        )
    return combinations


__all__ = ["Combination", "generate_combinations"]
