#!/usr/bin/env python3
"""
Dictionary Loader
=================
Loads word dictionaries from YAML files.

Usage:
    from passphrasekit.dictionaries import load_default_dictionary, YamlDictionaryLoader

    words = load_default_dictionary()
    custom = YamlDictionaryLoader().load({'file': 'my_words.yaml'})

File format (every section is optional):

    name: my-words
    article: {definite: the, indefinite: a, indefinite_before_vowel: an}
    nouns:
      - [cat, cats]                      # singular, plural
      - [rice]                           # mass noun, no plural
      - {singular: hour, plural: hours, vowel_onset: true}
    verbs:
      - [run, runs, ran, run, running]   # base, 3rd person, past, past participle, -ing
      - {forms: {present: [chases, chase], past: [chased, chased]}}
    adjectives: [red, quiet]
    adverbs: [quickly]
    prepositions: [with]
    conjunctions: [and]
    pronouns:
      - [it, they]
"""

import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from ..dictionary import WordDictionary
from ..errors import DictionaryLoadError
from ..settings import resolve_path
from ..words import (
    Adjective, Adverb, Article, Conjunction, Noun, Preposition, Pronoun, Verb, VerbTense, Word,
)

logger = logging.getLogger(__name__)

DICTIONARIES_DIR = Path(__file__).parent
DEFAULT_DICTIONARY_PATH = DICTIONARIES_DIR / 'default.yaml'

SINGLE_FORM_SECTIONS = {
    'adjectives': Adjective,
    'adverbs': Adverb,
    'prepositions': Preposition,
    'conjunctions': Conjunction,
}


# =============================================================================
# Argument Parsing
# =============================================================================

def parse_argument_string(arguments: str) -> Dict[str, str]:
    """
    Parse loader arguments written like a connection string.

    Semicolon separated ``key=value`` pairs; whitespace is trimmed, keys are
    case-insensitive and empty segments are ignored.

    Examples:
        >>> parse_argument_string("file = words.yaml; Name=mine;")
        {'file': 'words.yaml', 'name': 'mine'}
    """
    result = {}
    for segment in (arguments or '').split(';'):
        if not segment.strip():
            continue
        key, _, value = segment.partition('=')
        result[key.strip().lower()] = value.strip()
    return result


# =============================================================================
# Entry Parsing
# =============================================================================

def _parse_noun(entry: Any) -> Noun:
    if isinstance(entry, str):
        return Noun(singular=entry)
    if isinstance(entry, list) and 1 <= len(entry) <= 2:
        return Noun(singular=entry[0], plural=entry[1] if len(entry) > 1 else None)
    if isinstance(entry, dict) and 'singular' in entry:
        return Noun(
            singular=entry['singular'],
            plural=entry.get('plural'),
            vowel_onset=entry.get('vowel_onset'),
        )
    raise DictionaryLoadError(f"Invalid noun entry: {entry!r}")


def _parse_verb(entry: Any) -> Verb:
    if isinstance(entry, list) and len(entry) == 5:
        return Verb.from_principal_parts(*entry)
    if isinstance(entry, dict) and 'forms' in entry:
        forms = {}
        for tense_name, pair in (entry['forms'] or {}).items():
            try:
                tense = VerbTense(tense_name)
            except ValueError:
                raise DictionaryLoadError(f"Unknown verb tense '{tense_name}' in {entry!r}")
            if not isinstance(pair, list) or len(pair) != 2:
                raise DictionaryLoadError(f"Verb tense '{tense_name}' needs [singular, plural] forms")
            forms[(tense, False)] = pair[0]
            forms[(tense, True)] = pair[1]
        if not forms:
            raise DictionaryLoadError(f"Verb entry has no forms: {entry!r}")
        return Verb.from_forms(forms, vowel_onset=entry.get('vowel_onset'))
    if isinstance(entry, dict) and 'base' in entry:
        try:
            return Verb.from_principal_parts(
                entry['base'], entry['third_person'], entry['past'],
                entry['past_participle'], entry['present_participle'],
                vowel_onset=entry.get('vowel_onset'),
            )
        except KeyError as e:
            raise DictionaryLoadError(f"Verb entry is missing {e}: {entry!r}")
    raise DictionaryLoadError(f"Invalid verb entry: {entry!r}")


def _parse_single(cls, entry: Any) -> Word:
    if isinstance(entry, str):
        return cls(value=entry)
    if isinstance(entry, dict) and 'value' in entry:
        return cls(value=entry['value'], vowel_onset=entry.get('vowel_onset'))
    raise DictionaryLoadError(f"Invalid {cls.category} entry: {entry!r}")


def _parse_pronoun(entry: Any) -> Pronoun:
    if isinstance(entry, list) and len(entry) == 2:
        return Pronoun(singular=entry[0], plural=entry[1])
    raise DictionaryLoadError(f"Invalid pronoun entry: {entry!r}")


def _section(raw: Mapping[str, Any], key: str) -> List[Any]:
    items = raw.get(key) or []
    if not isinstance(items, list):
        raise DictionaryLoadError(f"Section '{key}' must be a list")
    return items


def parse_dictionary(raw: Mapping[str, Any], name: str = '') -> WordDictionary:
    """
    Build a WordDictionary from a parsed YAML mapping.

    Raises
    ------
    DictionaryLoadError
        If the mapping is malformed or contains no words
    """
    if not isinstance(raw, Mapping):
        raise DictionaryLoadError("Dictionary root must be a mapping")

    words: List[Word] = []
    words.extend(_parse_noun(e) for e in _section(raw, 'nouns'))
    words.extend(_parse_verb(e) for e in _section(raw, 'verbs'))
    words.extend(_parse_pronoun(e) for e in _section(raw, 'pronouns'))
    for key, cls in SINGLE_FORM_SECTIONS.items():
        words.extend(_parse_single(cls, e) for e in _section(raw, key))

    article = raw.get('article')
    if article is not None:
        if not isinstance(article, dict):
            raise DictionaryLoadError("Section 'article' must be a mapping")
        try:
            words.append(Article(**article))
        except TypeError as e:
            raise DictionaryLoadError(f"Invalid article entry: {e}")

    if not words:
        raise DictionaryLoadError("Dictionary contains no words")

    return WordDictionary(words, name=name or raw.get('name', ''))


# =============================================================================
# Loaders
# =============================================================================

class DictionaryLoader(ABC):
    """Produces a populated WordDictionary from an external representation."""

    @abstractmethod
    def load(self, arguments: Optional[Mapping[str, str]] = None) -> WordDictionary:
        """Load a dictionary. Raises DictionaryLoadError on failure."""


class YamlDictionaryLoader(DictionaryLoader):
    """
    Loads a dictionary from a YAML file.

    Arguments:
        file: path to the YAML file (default: bundled dictionary). Relative
              paths resolve against the project root.
        name: optional display name
    """

    def load(self, arguments: Optional[Mapping[str, str]] = None) -> WordDictionary:
        arguments = arguments or {}
        file_arg = arguments.get('file')
        path = resolve_path(file_arg) if file_arg else DEFAULT_DICTIONARY_PATH

        if not path.exists():
            raise DictionaryLoadError(f"Dictionary not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                raw = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise DictionaryLoadError(f"Unable to read dictionary {path}: {e}") from e

        dictionary = parse_dictionary(raw or {}, name=arguments.get('name', '') or path.stem)
        logger.info("Loaded dictionary '%s' with %d words from %s", dictionary.name, dictionary.count, path)
        return dictionary


@lru_cache(maxsize=1)
def load_default_dictionary() -> WordDictionary:
    """Load the bundled English dictionary."""
    return YamlDictionaryLoader().load()


def reload_dictionaries():
    """Clear cached dictionaries and reload from disk."""
    load_default_dictionary.cache_clear()


__all__ = [
    'DictionaryLoader',
    'YamlDictionaryLoader',
    'parse_dictionary',
    'parse_argument_string',
    'load_default_dictionary',
    'reload_dictionaries',
    'DEFAULT_DICTIONARY_PATH',
]
