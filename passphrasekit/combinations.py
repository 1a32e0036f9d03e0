#!/usr/bin/env python3
"""
Phrase Combinations
===================
Counts how many distinct phrases a description can produce and converts the
counts to entropy bits.

Each clause reports its own count and a phrase's total is the product across
clauses. This treats clauses as independent and ignores the "no repeated
word" rule, so counts are an upper bound that overstates small dictionaries.
Entropy displays depend on the approximation; keep it.

Three figures are tracked:
- shortest: every optional choice takes its smallest branch
- longest: every choice counts all its branches
- optional_average: every choice takes its factor-weighted average branch
"""

import math
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

UNKNOWN_ENTROPY_BITS = -1.0


def entropy_bits(combinations: float) -> float:
    """
    Convert a combination count to bits of entropy.

    Returns UNKNOWN_ENTROPY_BITS when there are no combinations.
    """
    if combinations <= 0:
        return UNKNOWN_ENTROPY_BITS
    return math.log2(combinations)


@dataclass(frozen=True)
class PhraseCombinations:
    """Combination counts for a phrase description."""
    shortest: float
    longest: float
    optional_average: float

    def __mul__(self, other: 'PhraseCombinations') -> 'PhraseCombinations':
        if not isinstance(other, PhraseCombinations):
            return NotImplemented
        return PhraseCombinations(
            shortest=self.shortest * other.shortest,
            longest=self.longest * other.longest,
            optional_average=self.optional_average * other.optional_average,
        )

    @property
    def shortest_as_entropy_bits(self) -> float:
        return entropy_bits(self.shortest)

    @property
    def longest_as_entropy_bits(self) -> float:
        return entropy_bits(self.longest)

    @property
    def optional_average_as_entropy_bits(self) -> float:
        return entropy_bits(self.optional_average)

    @classmethod
    def product(cls, items: Iterable['PhraseCombinations']) -> 'PhraseCombinations':
        result = cls.ONE
        for item in items:
            result = result * item
        return result


PhraseCombinations.ZERO = PhraseCombinations(0.0, 0.0, 0.0)
PhraseCombinations.ONE = PhraseCombinations(1.0, 1.0, 1.0)


def dimension(options: Sequence[Tuple[int, float]]) -> PhraseCombinations:
    """
    Combinations of one random choice inside a clause.

    Parameters
    ----------
    options : sequence of (factor, count)
        Each option's selection weight and how many realizations it yields.
        Options with a zero factor are never chosen and are ignored.

    Examples:
        >>> dimension([(1, 1), (1, 10)])      # optional word from 10
        PhraseCombinations(shortest=1, longest=11, optional_average=5.5)
    """
    enabled = [(factor, count) for factor, count in options if factor > 0]
    if not enabled:
        return PhraseCombinations.ZERO
    total_factor = sum(factor for factor, _ in enabled)
    return PhraseCombinations(
        shortest=min(count for _, count in enabled),
        longest=sum(count for _, count in enabled),
        optional_average=sum(factor * count for factor, count in enabled) / total_factor,
    )


def combine_strengths(per_preset: Sequence[PhraseCombinations]) -> PhraseCombinations:
    """
    Aggregate combinations across strength presets ("random" strength).

    shortest is the minimum, longest the sum (any preset may be drawn), and
    the average is the mean of per-preset average entropy, converted back to
    a count.
    """
    if not per_preset:
        return PhraseCombinations.ZERO
    mean_bits = sum(c.optional_average_as_entropy_bits for c in per_preset) / len(per_preset)
    return PhraseCombinations(
        shortest=min(c.shortest for c in per_preset),
        longest=sum(c.longest for c in per_preset),
        optional_average=2 ** mean_bits,
    )


def count_combinations(clauses, dictionary) -> PhraseCombinations:
    """
    Total combinations of a clause list against a dictionary.

    An empty description has no combinations.
    """
    clauses = list(clauses or ())
    if not clauses:
        return PhraseCombinations.ZERO
    return PhraseCombinations.product(c.count_combinations(dictionary) for c in clauses)


__all__ = [
    'PhraseCombinations',
    'UNKNOWN_ENTROPY_BITS',
    'entropy_bits',
    'dimension',
    'combine_strengths',
    'count_combinations',
]
