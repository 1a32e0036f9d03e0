#!/usr/bin/env python3
"""
Clause Model
============
Clauses describe the grammatical shape of a phrase; the expansion engine
turns them into word templates.

- NounClause: a noun phrase ([preposition] [article] [adjectives...] noun)
- VerbClause: a verb phrase ([adverb] verb) joining a subject and an object
- ConjunctionClause: joins two noun clauses on the same side of a verb

Clause choices are weighted by integer "factors": a factor of 0 disables an
option, and the relative size of positive factors sets its probability.

Every clause takes part in two expansion passes:
1. ``add_word_templates`` emits the clause's own templates from its own
   configuration.
2. ``second_pass`` returns a finalized copy of those templates once the
   whole (subject, verb, object) group is known.
"""

from dataclasses import dataclass, fields, replace
from typing import List, Mapping, Optional, Tuple

from ..combinations import PhraseCombinations, dimension
from ..dictionary import WordDictionary
from ..randomness import RandomSource
from ..words import Adjective, Adverb, Conjunction, Noun, Preposition, Verb, VerbTense
from .templates import (
    AdjectiveTemplate,
    AdverbTemplate,
    ArticleTemplate,
    ConjunctionTemplate,
    NounTemplate,
    PrepositionTemplate,
    Template,
    VerbTemplate,
)


def _check_factors(clause, *groups: Tuple[str, ...]):
    for f in fields(clause):
        value = getattr(clause, f.name)
        if f.name.endswith('_factor') and (not isinstance(value, int) or isinstance(value, bool) or value < 0):
            raise ValueError(f"{type(clause).__name__}.{f.name} must be a non-negative integer, got {value!r}")
    for group in groups:
        if sum(getattr(clause, name) for name in group) <= 0:
            raise ValueError(f"{type(clause).__name__}: at least one of {', '.join(group)} must be positive")


@dataclass(frozen=True)
class Clause:
    """Base class for phrase description clauses."""

    def add_word_templates(self, randomness: RandomSource) -> List[Template]:
        raise NotImplementedError

    def second_pass(self, templates: List[Template], subject_is_plural: Optional[bool]) -> List[Template]:
        """Finalize this clause's templates; the default keeps them as they are."""
        return list(templates)

    def count_combinations(self, dictionary: WordDictionary) -> PhraseCombinations:
        raise NotImplementedError


@dataclass(frozen=True)
class NounClause(Clause):
    """
    A noun phrase.

    The indefinite article only applies to singular nouns; a plural noun
    that draws it is realized without an article.
    """
    singular_factor: int = 1
    plural_factor: int = 1
    no_article_factor: int = 1
    definite_article_factor: int = 1
    indefinite_article_factor: int = 1
    min_adjectives: int = 0
    max_adjectives: int = 0
    no_preposition_factor: int = 1
    preposition_factor: int = 0

    def __post_init__(self):
        _check_factors(
            self,
            ('singular_factor', 'plural_factor'),
            ('no_article_factor', 'definite_article_factor', 'indefinite_article_factor'),
            ('no_preposition_factor', 'preposition_factor'),
        )
        for name in ('min_adjectives', 'max_adjectives'):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"NounClause.{name} must be an integer, got {value!r}")
        if not 0 <= self.min_adjectives <= self.max_adjectives:
            raise ValueError(
                f"Adjective range must satisfy 0 <= min <= max, got "
                f"[{self.min_adjectives}, {self.max_adjectives}]"
            )

    def add_word_templates(self, randomness: RandomSource) -> List[Template]:
        plural = randomness.weighted_choice([self.singular_factor, self.plural_factor]) == 1
        article = randomness.weighted_choice([
            self.no_article_factor, self.definite_article_factor, self.indefinite_article_factor,
        ])
        adjective_count = self.min_adjectives + randomness.next_int(self.max_adjectives - self.min_adjectives + 1)
        with_preposition = randomness.weighted_choice([self.no_preposition_factor, self.preposition_factor]) == 1

        templates: List[Template] = []
        if with_preposition:
            templates.append(PrepositionTemplate())
        if article == 1:
            templates.append(ArticleTemplate(definite=True))
        elif article == 2 and not plural:
            templates.append(ArticleTemplate(definite=False))
        templates.extend(AdjectiveTemplate() for _ in range(adjective_count))
        templates.append(NounTemplate(plural=plural))
        return templates

    def count_combinations(self, dictionary: WordDictionary) -> PhraseCombinations:
        adjectives = dictionary.count_of(Adjective)
        return PhraseCombinations.product([
            dimension([
                (self.singular_factor, dictionary.count_of(Noun, lambda n: n.has_form(False))),
                (self.plural_factor, dictionary.count_of(Noun, lambda n: n.has_form(True))),
            ]),
            dimension([
                (self.no_article_factor, 1),
                (self.definite_article_factor, 1),
                (self.indefinite_article_factor, 1),
            ]),
            dimension([
                (1, adjectives ** k) for k in range(self.min_adjectives, self.max_adjectives + 1)
            ]),
            dimension([
                (self.no_preposition_factor, 1),
                (self.preposition_factor, dictionary.count_of(Preposition)),
            ]),
        ])


DEFAULT_TENSES = ((VerbTense.PRESENT, 1),)


@dataclass(frozen=True)
class VerbClause(Clause):
    """
    A verb phrase linking a subject and an object.

    ``tense_factors`` may be given as a mapping; it is stored as a tuple of
    (tense, factor) pairs in VerbTense order. Which noun clauses are its
    subject and object is decided by linking, not here.
    """
    tense_factors: Tuple[Tuple[VerbTense, int], ...] = DEFAULT_TENSES
    no_adverb_factor: int = 1
    adverb_factor: int = 0

    def __post_init__(self):
        factors = self.tense_factors
        if isinstance(factors, Mapping):
            factors = factors.items()
        normalized = dict((VerbTense(t), f) for t, f in factors)
        object.__setattr__(self, 'tense_factors', tuple(
            (tense, normalized[tense]) for tense in VerbTense if tense in normalized
        ))
        for tense, factor in self.tense_factors:
            if not isinstance(factor, int) or isinstance(factor, bool) or factor < 0:
                raise ValueError(f"Factor for tense '{tense.value}' must be a non-negative integer, got {factor!r}")
        if sum(f for _, f in self.tense_factors) <= 0:
            raise ValueError("VerbClause needs at least one tense with a positive factor")
        _check_factors(self, ('no_adverb_factor', 'adverb_factor'))

    @property
    def tenses(self) -> List[VerbTense]:
        return [tense for tense, factor in self.tense_factors if factor > 0]

    def add_word_templates(self, randomness: RandomSource) -> List[Template]:
        tense_index = randomness.weighted_choice([f for _, f in self.tense_factors])
        with_adverb = randomness.weighted_choice([self.no_adverb_factor, self.adverb_factor]) == 1

        templates: List[Template] = []
        if with_adverb:
            templates.append(AdverbTemplate())
        # Plurality stays pending until the subject group is known.
        templates.append(VerbTemplate(tense=self.tense_factors[tense_index][0], subject_is_plural=None))
        return templates

    def second_pass(self, templates: List[Template], subject_is_plural: Optional[bool]) -> List[Template]:
        if subject_is_plural is None:
            return list(templates)
        return [
            replace(t, subject_is_plural=subject_is_plural)
            if isinstance(t, VerbTemplate) and t.is_pending else t
            for t in templates
        ]

    def count_combinations(self, dictionary: WordDictionary) -> PhraseCombinations:
        return dimension([
            (factor, dictionary.count_of(Verb, lambda v, t=tense: v.has_form(t, False)))
            for tense, factor in self.tense_factors
        ]) * dimension([
            (self.no_adverb_factor, 1),
            (self.adverb_factor, dictionary.count_of(Adverb)),
        ])


@dataclass(frozen=True)
class ConjunctionClause(Clause):
    """Joins the noun clauses either side of it into one compound subject or object."""

    def add_word_templates(self, randomness: RandomSource) -> List[Template]:
        return [ConjunctionTemplate()]

    def count_combinations(self, dictionary: WordDictionary) -> PhraseCombinations:
        return dimension([(1, dictionary.count_of(Conjunction))])


__all__ = [
    'Clause',
    'NounClause',
    'VerbClause',
    'ConjunctionClause',
]
