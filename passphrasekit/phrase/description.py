#!/usr/bin/env python3
"""
Phrase Description Format
=========================
Human-writable YAML form of a clause list, used for custom phrases.

Example:

    - noun: {singular: 1, plural: 1, adjectives: [0, 1],
             article: {none: 1, definite: 1, indefinite: 1}}
    - conjunction
    - noun: {plural: 1, singular: 0}
    - verb: {tenses: {present: 1, past: 1}, adverb: {none: 1, some: 1}}
    - noun: {preposition: {none: 1, some: 1}}

Omitted keys take the clause defaults.
"""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence, Union

import yaml

from ..errors import PhraseDescriptionParseError
from ..words import VerbTense
from .clauses import Clause, ConjunctionClause, NounClause, VerbClause

NOUN_KEYS = {'singular', 'plural', 'article', 'adjectives', 'preposition'}
VERB_KEYS = {'tenses', 'adverb'}
ARTICLE_KEYS = {'none': 'no_article_factor', 'definite': 'definite_article_factor',
                'indefinite': 'indefinite_article_factor'}


def _check_keys(kind: str, mapping: Mapping[str, Any], allowed) -> None:
    unknown = set(mapping) - set(allowed)
    if unknown:
        raise PhraseDescriptionParseError(
            f"Unknown {kind} option(s): {', '.join(sorted(map(str, unknown)))}"
        )


def _mapping(kind: str, value: Any) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise PhraseDescriptionParseError(f"{kind} options must be a mapping, got {value!r}")
    return value


def _optional_word(kind: str, value: Any, none_name: str, some_name: str) -> Dict[str, Any]:
    options = _mapping(kind, value)
    _check_keys(kind, options, {'none', 'some'})
    result = {}
    if 'none' in options:
        result[none_name] = options['none']
    if 'some' in options:
        result[some_name] = options['some']
    return result


def _parse_noun(options: Mapping[str, Any]) -> NounClause:
    _check_keys('noun', options, NOUN_KEYS)
    kwargs: Dict[str, Any] = {}
    for key in ('singular', 'plural'):
        if key in options:
            kwargs[f'{key}_factor'] = options[key]

    if 'article' in options:
        article = _mapping('article', options['article'])
        _check_keys('article', article, ARTICLE_KEYS)
        for key, field_name in ARTICLE_KEYS.items():
            if key in article:
                kwargs[field_name] = article[key]

    if 'adjectives' in options:
        adjectives = options['adjectives']
        if isinstance(adjectives, int) and not isinstance(adjectives, bool):
            adjectives = [adjectives, adjectives]
        if not isinstance(adjectives, list) or len(adjectives) != 2:
            raise PhraseDescriptionParseError(f"adjectives must be a count or [min, max], got {adjectives!r}")
        kwargs['min_adjectives'], kwargs['max_adjectives'] = adjectives

    if 'preposition' in options:
        kwargs.update(_optional_word('preposition', options['preposition'],
                                     'no_preposition_factor', 'preposition_factor'))
    return NounClause(**kwargs)


def _parse_verb(options: Mapping[str, Any]) -> VerbClause:
    _check_keys('verb', options, VERB_KEYS)
    kwargs: Dict[str, Any] = {}
    if 'tenses' in options:
        tenses = _mapping('tenses', options['tenses'])
        try:
            kwargs['tense_factors'] = {VerbTense(name): factor for name, factor in tenses.items()}
        except ValueError:
            valid = ', '.join(t.value for t in VerbTense)
            raise PhraseDescriptionParseError(f"Unknown tense in {sorted(tenses)}; valid tenses: {valid}")
    if 'adverb' in options:
        kwargs.update(_optional_word('adverb', options['adverb'], 'no_adverb_factor', 'adverb_factor'))
    return VerbClause(**kwargs)


def _parse_item(index: int, item: Any) -> Clause:
    if isinstance(item, str):
        kind, options = item, None
    elif isinstance(item, Mapping) and len(item) == 1:
        kind, options = next(iter(item.items()))
    else:
        raise PhraseDescriptionParseError(f"Item {index} must be a clause name or a single-key mapping")

    options = _mapping(str(kind), options)
    try:
        if kind == 'noun':
            return _parse_noun(options)
        if kind == 'verb':
            return _parse_verb(options)
        if kind == 'conjunction':
            _check_keys('conjunction', options, set())
            return ConjunctionClause()
    except PhraseDescriptionParseError as e:
        raise PhraseDescriptionParseError(f"Item {index}: {e}") from e
    except (TypeError, ValueError) as e:
        raise PhraseDescriptionParseError(f"Item {index}: invalid {kind} clause: {e}") from e
    raise PhraseDescriptionParseError(f"Item {index}: unknown clause kind '{kind}'")


def parse_phrase_description(text: str) -> List[Clause]:
    """
    Parse a YAML phrase description into clauses.

    Raises
    ------
    PhraseDescriptionParseError
        If the YAML is invalid or describes unknown clauses/options
    """
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise PhraseDescriptionParseError(f"Invalid YAML: {e}") from e
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise PhraseDescriptionParseError("A phrase description must be a list of clauses")
    return [_parse_item(i, item) for i, item in enumerate(raw)]


def load_phrase_description(path: Union[str, Path]) -> List[Clause]:
    """Read and parse a phrase description file."""
    return parse_phrase_description(Path(path).read_text(encoding='utf-8'))


def _describe(clause: Clause) -> Union[str, Dict[str, Any]]:
    if isinstance(clause, NounClause):
        return {'noun': {
            'singular': clause.singular_factor,
            'plural': clause.plural_factor,
            'article': {
                key: getattr(clause, field_name) for key, field_name in ARTICLE_KEYS.items()
            },
            'adjectives': [clause.min_adjectives, clause.max_adjectives],
            'preposition': {'none': clause.no_preposition_factor, 'some': clause.preposition_factor},
        }}
    if isinstance(clause, VerbClause):
        return {'verb': {
            'tenses': {tense.value: factor for tense, factor in clause.tense_factors},
            'adverb': {'none': clause.no_adverb_factor, 'some': clause.adverb_factor},
        }}
    if isinstance(clause, ConjunctionClause):
        return 'conjunction'
    raise TypeError(f"Cannot describe clause of type {type(clause).__name__}")


def format_phrase_description(clauses: Sequence[Clause]) -> str:
    """Render clauses in the YAML phrase description format."""
    return yaml.safe_dump([_describe(c) for c in clauses], sort_keys=False, default_flow_style=False)


__all__ = [
    'parse_phrase_description',
    'load_phrase_description',
    'format_phrase_description',
]
