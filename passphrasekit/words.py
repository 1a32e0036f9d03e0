#!/usr/bin/env python3
"""
Word Model
==========
Immutable lexical entries with their inflected surface forms.

Each category is a frozen dataclass deriving from ``Word`` and defines its
own inflection contract:

- Noun: singular / plural form
- Verb: one form per (tense, subject plurality) pair
- Pronoun: singular / plural form
- Article: definite, indefinite and before-vowel indefinite forms
- Adjective, Adverb, Preposition, Conjunction: a single form

Words are created once when a dictionary loads and are shared read-only by
every generation call afterwards.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, Iterator, Optional, Tuple


# =============================================================================
# Vowel Onset
# =============================================================================

# Written with a consonant but spoken with a vowel ("an hour").
SILENT_H_PREFIXES = ('hour', 'honest', 'honor', 'honour', 'heir', 'herb')

# Written with a vowel but spoken with a "y" or "w" glide ("a unicorn").
GLIDE_ONSET_PREFIXES = (
    'unicorn', 'unif', 'union', 'uniq', 'unit', 'univ', 'unis',
    'use', 'usu', 'uten', 'uti', 'uran', 'ure', 'uku',
    'eu', 'ewe', 'one', 'once', 'ouija',
)


def starts_with_vowel_sound(text: str) -> bool:
    """
    Approximate whether an English word form starts with a vowel sound.

    Only the first token of a multi-word form is considered.

    Examples:
        >>> starts_with_vowel_sound("apple")
        True
        >>> starts_with_vowel_sound("hour")
        True
        >>> starts_with_vowel_sound("unicorn")
        False
    """
    tokens = text.strip().lower().split()
    if not tokens:
        return False
    first = tokens[0]
    if first.startswith(SILENT_H_PREFIXES):
        return True
    if first.startswith(GLIDE_ONSET_PREFIXES):
        return False
    return first[0] in 'aeiou'


# =============================================================================
# Base Class
# =============================================================================

@dataclass(frozen=True)
class Word:
    """Base class for dictionary entries."""

    category: ClassVar[str] = 'word'

    def forms(self) -> Iterator[str]:
        """Yield every surface form of this word."""
        raise NotImplementedError

    def has_vowel_onset(self, form: str) -> bool:
        """Whether ``form`` (one of this word's forms) starts with a vowel sound."""
        flag = getattr(self, 'vowel_onset', None)
        if flag is not None:
            return flag
        return starts_with_vowel_sound(form)


@dataclass(frozen=True)
class SingleFormWord(Word):
    """A word with exactly one surface form."""
    value: str
    vowel_onset: Optional[bool] = None

    def forms(self) -> Iterator[str]:
        yield self.value


# =============================================================================
# Categories
# =============================================================================

@dataclass(frozen=True)
class Noun(Word):
    """A common noun. Mass nouns have no plural form."""
    singular: str
    plural: Optional[str] = None
    vowel_onset: Optional[bool] = None

    category: ClassVar[str] = 'noun'

    def has_form(self, plural: bool) -> bool:
        return bool(self.plural) if plural else bool(self.singular)

    def get_form(self, plural: bool) -> str:
        if not self.has_form(plural):
            raise KeyError(f"Noun '{self.singular}' has no {'plural' if plural else 'singular'} form")
        return self.plural if plural else self.singular

    def forms(self) -> Iterator[str]:
        yield self.singular
        if self.plural:
            yield self.plural


class VerbTense(Enum):
    """Verb tenses a phrase can be realized in."""
    PRESENT = 'present'
    PAST = 'past'
    FUTURE = 'future'
    CONTINUOUS = 'continuous'
    CONTINUOUS_PAST = 'continuous_past'
    PERFECT = 'perfect'
    SUBJUNCTIVE = 'subjunctive'


VerbFormKey = Tuple[VerbTense, bool]


@dataclass(frozen=True)
class Verb(Word):
    """
    A transitive verb.

    ``forms_by_key`` holds ``(tense, subject_is_plural, text)`` triples.
    Use ``Verb.from_forms`` or ``Verb.from_principal_parts`` to build one.
    """
    forms_by_key: Tuple[Tuple[VerbTense, bool, str], ...]
    vowel_onset: Optional[bool] = None

    category: ClassVar[str] = 'verb'

    @classmethod
    def from_forms(cls, forms: Dict[VerbFormKey, str], vowel_onset: Optional[bool] = None) -> 'Verb':
        return cls(
            forms_by_key=tuple((tense, plural, text) for (tense, plural), text in forms.items()),
            vowel_onset=vowel_onset,
        )

    @classmethod
    def from_principal_parts(cls,
                             base: str,
                             third_person: str,
                             past: str,
                             past_participle: str,
                             present_participle: str,
                             vowel_onset: Optional[bool] = None) -> 'Verb':
        """
        Derive every tense from the verb's principal parts.

        Example:
            Verb.from_principal_parts('run', 'runs', 'ran', 'run', 'running')
            gives "runs"/"run", "ran", "will run", "is running"/"are running",
            "was running"/"were running", "has run"/"have run", "might run".
        """
        forms = {
            (VerbTense.PRESENT, False): third_person,
            (VerbTense.PRESENT, True): base,
            (VerbTense.PAST, False): past,
            (VerbTense.PAST, True): past,
            (VerbTense.FUTURE, False): f'will {base}',
            (VerbTense.FUTURE, True): f'will {base}',
            (VerbTense.CONTINUOUS, False): f'is {present_participle}',
            (VerbTense.CONTINUOUS, True): f'are {present_participle}',
            (VerbTense.CONTINUOUS_PAST, False): f'was {present_participle}',
            (VerbTense.CONTINUOUS_PAST, True): f'were {present_participle}',
            (VerbTense.PERFECT, False): f'has {past_participle}',
            (VerbTense.PERFECT, True): f'have {past_participle}',
            (VerbTense.SUBJUNCTIVE, False): f'might {base}',
            (VerbTense.SUBJUNCTIVE, True): f'might {base}',
        }
        return cls.from_forms(forms, vowel_onset=vowel_onset)

    def has_form(self, tense: VerbTense, plural: bool) -> bool:
        return any(t == tense and p == plural for t, p, _ in self.forms_by_key)

    def get_form(self, tense: VerbTense, plural: bool) -> str:
        for t, p, text in self.forms_by_key:
            if t == tense and p == plural:
                return text
        raise KeyError(f"Verb has no {tense.value} form for a {'plural' if plural else 'singular'} subject")

    def forms(self) -> Iterator[str]:
        for _, _, text in self.forms_by_key:
            yield text


@dataclass(frozen=True)
class Pronoun(Word):
    singular: str
    plural: str
    vowel_onset: Optional[bool] = None

    category: ClassVar[str] = 'pronoun'

    def get_form(self, plural: bool) -> str:
        return self.plural if plural else self.singular

    def forms(self) -> Iterator[str]:
        yield self.singular
        yield self.plural


@dataclass(frozen=True)
class Article(Word):
    """The article forms of the language; the indefinite form depends on the next word."""
    definite: str = 'the'
    indefinite: str = 'a'
    indefinite_before_vowel: str = 'an'

    category: ClassVar[str] = 'article'

    def form_for(self, definite: bool, next_has_vowel_onset: bool) -> str:
        if definite:
            return self.definite
        return self.indefinite_before_vowel if next_has_vowel_onset else self.indefinite

    def forms(self) -> Iterator[str]:
        yield self.definite
        yield self.indefinite
        yield self.indefinite_before_vowel


@dataclass(frozen=True)
class Adjective(SingleFormWord):
    category: ClassVar[str] = 'adjective'


@dataclass(frozen=True)
class Adverb(SingleFormWord):
    category: ClassVar[str] = 'adverb'


@dataclass(frozen=True)
class Preposition(SingleFormWord):
    category: ClassVar[str] = 'preposition'


@dataclass(frozen=True)
class Conjunction(SingleFormWord):
    category: ClassVar[str] = 'conjunction'


WORD_CATEGORIES = (Noun, Verb, Adjective, Adverb, Pronoun, Article, Preposition, Conjunction)


__all__ = [
    'Word',
    'SingleFormWord',
    'Noun',
    'Verb',
    'VerbTense',
    'Pronoun',
    'Article',
    'Adjective',
    'Adverb',
    'Preposition',
    'Conjunction',
    'WORD_CATEGORIES',
    'starts_with_vowel_sound',
]
