#!/usr/bin/env python3
"""
Word Templates
==============
One template per eventual word: "choose the next word from category C under
constraints K".

Templates are frozen; the expansion engine finalizes pending constraints by
building new instances with ``dataclasses.replace``.
"""

from dataclasses import dataclass
from typing import Collection, NamedTuple, Optional

from ..dictionary import WordDictionary
from ..errors import StructureError
from ..randomness import RandomSource
from ..words import Adjective, Adverb, Conjunction, Noun, Preposition, Verb, VerbTense, Word


class WordChoice(NamedTuple):
    """A chosen word with the surface form it is used in."""
    word: Word
    text: str

    @property
    def vowel_onset(self) -> bool:
        return self.word.has_vowel_onset(self.text)


@dataclass(frozen=True)
class Template:
    """Base class for word templates."""

    # Whether the chosen word joins the per-phrase "already used" set.
    include_in_already_used = True

    def choose_word(self,
                    dictionary: WordDictionary,
                    randomness: RandomSource,
                    already_chosen: Collection[Word]) -> WordChoice:
        raise NotImplementedError


@dataclass(frozen=True)
class NounTemplate(Template):
    plural: bool = False

    def choose_word(self, dictionary, randomness, already_chosen) -> WordChoice:
        noun = dictionary.choose_word(Noun, randomness, already_chosen,
                                      lambda n: n.has_form(self.plural))
        return WordChoice(noun, noun.get_form(self.plural))


@dataclass(frozen=True)
class AdjectiveTemplate(Template):

    def choose_word(self, dictionary, randomness, already_chosen) -> WordChoice:
        adjective = dictionary.choose_word(Adjective, randomness, already_chosen)
        return WordChoice(adjective, adjective.value)


@dataclass(frozen=True)
class AdverbTemplate(Template):

    def choose_word(self, dictionary, randomness, already_chosen) -> WordChoice:
        adverb = dictionary.choose_word(Adverb, randomness, already_chosen)
        return WordChoice(adverb, adverb.value)


@dataclass(frozen=True)
class VerbTemplate(Template):
    """
    A verb in a given tense.

    ``subject_is_plural`` is None while the subject's plurality is still
    pending; it must be fixed by the second expansion pass before resolution.
    """
    tense: VerbTense = VerbTense.PRESENT
    subject_is_plural: Optional[bool] = None

    @property
    def is_pending(self) -> bool:
        return self.subject_is_plural is None

    def choose_word(self, dictionary, randomness, already_chosen) -> WordChoice:
        if self.is_pending:
            raise StructureError("Verb template has no subject plurality; was the phrase expanded?")
        verb = dictionary.choose_word(Verb, randomness, already_chosen,
                                      lambda v: v.has_form(self.tense, self.subject_is_plural))
        return WordChoice(verb, verb.get_form(self.tense, self.subject_is_plural))


@dataclass(frozen=True)
class PrepositionTemplate(Template):
    include_in_already_used = False

    def choose_word(self, dictionary, randomness, already_chosen) -> WordChoice:
        preposition = dictionary.choose_word(Preposition, randomness, already_chosen)
        return WordChoice(preposition, preposition.value)


@dataclass(frozen=True)
class ConjunctionTemplate(Template):
    include_in_already_used = False

    def choose_word(self, dictionary, randomness, already_chosen) -> WordChoice:
        conjunction = dictionary.choose_word(Conjunction, randomness, already_chosen)
        return WordChoice(conjunction, conjunction.value)


@dataclass(frozen=True)
class ArticleTemplate(Template):
    """
    A definite or indefinite article.

    Its form depends on the word that follows, so resolution holds it until
    that word is chosen and then calls ``choose_for_following``.
    """
    definite: bool = True

    include_in_already_used = False

    def choose_word(self, dictionary, randomness, already_chosen) -> WordChoice:
        raise StructureError("An article is resolved from the word that follows it")

    def choose_for_following(self, dictionary: WordDictionary, following: WordChoice) -> WordChoice:
        article = dictionary.article
        return WordChoice(article, article.form_for(self.definite, following.vowel_onset))


__all__ = [
    'WordChoice',
    'Template',
    'NounTemplate',
    'AdjectiveTemplate',
    'AdverbTemplate',
    'VerbTemplate',
    'PrepositionTemplate',
    'ConjunctionTemplate',
    'ArticleTemplate',
]
