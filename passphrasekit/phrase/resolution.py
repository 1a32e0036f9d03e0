#!/usr/bin/env python3
"""
Word Resolution
===============
Chooses concrete words for a template list and writes them into a sink.

Rules:
- templates are resolved strictly in order
- a word tracked by the "already used" set is never chosen twice in one
  phrase; the set is local to one call
- an article is held until the next word is chosen, then takes the form that
  matches that word's vowel onset ("a cat", "an owl", "an hour")
"""

from typing import Iterable, Iterator, Optional, Sequence, Set

from ..dictionary import WordDictionary
from ..errors import StructureError
from ..randomness import RandomSource
from ..sinks import OutputSink
from ..words import Word
from .templates import ArticleTemplate, Template


def resolve(templates: Sequence[Template],
            dictionary: WordDictionary,
            randomness: RandomSource) -> Iterator[str]:
    """
    Yield the surface form of each word, in phrase order.

    Raises
    ------
    DictionaryExhaustedError
        If a template has no eligible word left
    StructureError
        If an article is not followed by a word
    """
    already_chosen: Set[Word] = set()
    held_article: Optional[ArticleTemplate] = None

    for template in templates:
        if isinstance(template, ArticleTemplate):
            if held_article is not None:
                raise StructureError("Two articles in a row")
            held_article = template
            continue

        choice = template.choose_word(dictionary, randomness, already_chosen)
        if template.include_in_already_used:
            already_chosen.add(choice.word)

        if held_article is not None:
            yield held_article.choose_for_following(dictionary, choice).text
            held_article = None
        yield choice.text

    if held_article is not None:
        raise StructureError("Article at the end of a phrase has no word to agree with")


def write_words(words: Iterable[str], sink: OutputSink, include_spaces: bool = True):
    """
    Append words to a sink character by character.

    With spaces, words are separated by a single space. Without, the spaces
    inside multi-word forms ("is running") are dropped too, so the phrase
    reads as one run of letters ("isrunning").
    """
    first = True
    for word in words:
        if include_spaces:
            if not first:
                sink.append_char(' ')
            sink.append(word)
        else:
            sink.append(c for c in word if c != ' ')
        first = False


__all__ = [
    'resolve',
    'write_words',
]
