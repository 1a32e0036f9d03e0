#!/usr/bin/env python3
"""
Phrase Strength Presets
=======================
Named phrase descriptions for callers who do not supply their own.

- normal: "the dog chased an apple"
- strong: "a sleepy dog quietly chased the shiny apples"
- insane: two linked triples with a compound subject and prepositions
"""

from enum import Enum
from typing import List

from ..randomness import RandomSource
from ..words import VerbTense
from .clauses import Clause, ConjunctionClause, NounClause, VerbClause


class PhraseStrength(Enum):
    NORMAL = 'normal'
    STRONG = 'strong'
    INSANE = 'insane'
    CUSTOM = 'custom'
    RANDOM = 'random'


ALL_TENSES = {tense: 1 for tense in VerbTense}
SIMPLE_TENSES = {VerbTense.PRESENT: 1, VerbTense.PAST: 1, VerbTense.FUTURE: 1}


def _normal() -> List[Clause]:
    return [
        NounClause(),
        VerbClause(tense_factors=SIMPLE_TENSES),
        NounClause(),
    ]


def _strong() -> List[Clause]:
    return [
        NounClause(min_adjectives=0, max_adjectives=1),
        VerbClause(tense_factors=ALL_TENSES, no_adverb_factor=1, adverb_factor=1),
        NounClause(min_adjectives=1, max_adjectives=1),
    ]


def _insane() -> List[Clause]:
    return [
        NounClause(min_adjectives=1, max_adjectives=2),
        ConjunctionClause(),
        NounClause(min_adjectives=0, max_adjectives=1),
        VerbClause(tense_factors=ALL_TENSES, no_adverb_factor=1, adverb_factor=2),
        NounClause(min_adjectives=1, max_adjectives=2, no_preposition_factor=1, preposition_factor=1),
        NounClause(min_adjectives=0, max_adjectives=1, no_article_factor=0),
        VerbClause(tense_factors=ALL_TENSES, no_adverb_factor=1, adverb_factor=1),
        NounClause(min_adjectives=1, max_adjectives=1, no_preposition_factor=2, preposition_factor=1),
    ]


PRESETS = {
    PhraseStrength.NORMAL: _normal,
    PhraseStrength.STRONG: _strong,
    PhraseStrength.INSANE: _insane,
}


def concrete_strengths() -> List[PhraseStrength]:
    """Strengths with a fixed phrase description (what RANDOM draws from)."""
    return list(PRESETS)


def create_phrase_description(strength: PhraseStrength) -> List[Clause]:
    """
    Build the clause list for a preset strength.

    Raises
    ------
    ValueError
        For CUSTOM (needs a user description) and RANDOM (needs randomness,
        see ``create_random_phrase_description``)
    """
    factory = PRESETS.get(PhraseStrength(strength))
    if factory is None:
        raise ValueError(f"Strength '{PhraseStrength(strength).value}' has no preset phrase description")
    return factory()


def create_random_phrase_description(randomness: RandomSource) -> List[Clause]:
    """Pick one concrete preset uniformly at random."""
    strengths = concrete_strengths()
    return create_phrase_description(strengths[randomness.next_int(len(strengths))])


__all__ = [
    'PhraseStrength',
    'concrete_strengths',
    'create_phrase_description',
    'create_random_phrase_description',
]
