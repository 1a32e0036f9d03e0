"""
Shared fixtures for passphrasekit tests.
"""

import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from passphrasekit.dictionary import WordDictionary
from passphrasekit.randomness import RandomSource
from passphrasekit.words import (
    Adjective, Adverb, Article, Conjunction, Noun, Preposition, Verb, VerbTense,
)


class FirstChoiceRandom(RandomSource):
    """Always picks index 0, i.e. the first eligible option. Counts calls."""

    def __init__(self):
        self.calls = 0

    def next_int(self, n: int) -> int:
        self._check_bound(n)
        self.calls += 1
        return 0

    def next_bytes(self, n: int) -> bytes:
        self.calls += 1
        return bytes(n)


def present_verb(singular: str, plural: str) -> Verb:
    return Verb.from_forms({
        (VerbTense.PRESENT, False): singular,
        (VerbTense.PRESENT, True): plural,
    })


@pytest.fixture
def first_choice():
    return FirstChoiceRandom()


@pytest.fixture
def scenario_dictionary():
    """cat/cats, dog/dogs, chases/chase and the English article."""
    return WordDictionary([
        Noun('cat', 'cats'),
        Noun('dog', 'dogs'),
        present_verb('chases', 'chase'),
        Article(definite='the', indefinite='a', indefinite_before_vowel='an'),
    ], name='scenario')


@pytest.fixture
def small_dictionary():
    """A few words of every category used by templates."""
    return WordDictionary([
        Noun('cat', 'cats'),
        Noun('dog', 'dogs'),
        Noun('fox', 'foxes'),
        Noun('owl', 'owls'),
        Noun('rice'),
        present_verb('chases', 'chase'),
        present_verb('sees', 'see'),
        Verb.from_principal_parts('hide', 'hides', 'hid', 'hidden', 'hiding'),
        Adjective('red'),
        Adjective('orange'),
        Adjective('quiet'),
        Adverb('quickly'),
        Adverb('slowly'),
        Preposition('with'),
        Conjunction('and'),
        Article(),
    ], name='small')
