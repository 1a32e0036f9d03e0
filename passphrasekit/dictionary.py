#!/usr/bin/env python3
"""
Word Dictionary
===============
Read-only, queryable collection of words partitioned by category.

A dictionary is built once and never mutated, so a single instance can be
shared by any number of concurrent generation calls.

Usage:
    from passphrasekit.dictionary import WordDictionary
    from passphrasekit.words import Noun

    words = WordDictionary([Noun('cat', 'cats'), Noun('dog', 'dogs')])
    noun = words.choose_word(Noun, rng, already_chosen=set(),
                             predicate=lambda n: n.has_form(True))
"""

from typing import Callable, Collection, Dict, Iterable, Iterator, Optional, Tuple, Type, TypeVar

from .errors import DictionaryExhaustedError
from .randomness import RandomSource
from .words import Article, Word, WORD_CATEGORIES

W = TypeVar('W', bound=Word)

DEFAULT_ARTICLE = Article()


class WordDictionary:
    """
    Immutable set of words, partitioned by category.

    Each word is stored under exactly its own class, so the partitions are
    disjoint. Duplicate entries are collapsed.
    """

    def __init__(self, words: Iterable[Word], name: str = ''):
        self.name = name
        partitions: Dict[type, list] = {}
        seen = set()
        for word in words:
            if not isinstance(word, WORD_CATEGORIES):
                raise TypeError(f"Unsupported word type: {type(word).__name__}")
            if word in seen:
                continue
            seen.add(word)
            partitions.setdefault(type(word), []).append(word)
        self._partitions: Dict[type, Tuple[Word, ...]] = {
            category: tuple(items) for category, items in partitions.items()
        }
        self._count = sum(len(items) for items in self._partitions.values())

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Word]:
        for items in self._partitions.values():
            yield from items

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, count={self._count})"

    @property
    def count(self) -> int:
        return self._count

    @property
    def is_empty(self) -> bool:
        return self._count == 0

    @property
    def article(self) -> Article:
        """The dictionary's article; English defaults if none was loaded."""
        articles = self._partitions.get(Article)
        return articles[0] if articles else DEFAULT_ARTICLE

    def words_of(self, category: Type[W]) -> Tuple[W, ...]:
        return self._partitions.get(category, ())

    def count_of(self, category: Type[W], predicate: Optional[Callable[[W], bool]] = None) -> int:
        """Number of words in ``category`` satisfying ``predicate``."""
        words = self.words_of(category)
        if predicate is None:
            return len(words)
        return sum(1 for w in words if predicate(w))

    def choose_word(self,
                    category: Type[W],
                    randomness: RandomSource,
                    already_chosen: Collection[Word] = (),
                    predicate: Optional[Callable[[W], bool]] = None) -> W:
        """
        Pick a word uniformly at random.

        Parameters
        ----------
        category : type
            Word class to choose from (Noun, Verb, ...)
        randomness : RandomSource
            Source for the single index draw
        already_chosen : collection
            Words excluded from the pick (compared by identity of entry)
        predicate : callable, optional
            Extra constraint the word must satisfy

        Raises
        ------
        DictionaryExhaustedError
            If no word is eligible
        """
        eligible = [
            w for w in self.words_of(category)
            if w not in already_chosen and (predicate is None or predicate(w))
        ]
        if not eligible:
            raise DictionaryExhaustedError(category.category)
        return eligible[randomness.next_int(len(eligible))]


class EmptyDictionary(WordDictionary):
    """Sentinel for "no dictionary loaded yet"."""

    def __init__(self):
        super().__init__((), name='empty')


__all__ = [
    'WordDictionary',
    'EmptyDictionary',
    'DEFAULT_ARTICLE',
]
