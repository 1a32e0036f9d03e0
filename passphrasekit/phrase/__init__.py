#!/usr/bin/env python3
"""
Phrase Grammar
==============
Clause model, linking, template expansion and word resolution.

    clauses --link--> groups --expand--> templates --resolve--> words
"""

from .clauses import Clause, ConjunctionClause, NounClause, VerbClause
from .description import format_phrase_description, load_phrase_description, parse_phrase_description
from .expansion import expand
from .linking import ClauseGroup, PhraseStructure, Role, link_clauses
from .resolution import resolve, write_words
from .strength import (
    PhraseStrength,
    concrete_strengths,
    create_phrase_description,
    create_random_phrase_description,
)
from .templates import (
    AdjectiveTemplate,
    AdverbTemplate,
    ArticleTemplate,
    ConjunctionTemplate,
    NounTemplate,
    PrepositionTemplate,
    Template,
    VerbTemplate,
    WordChoice,
)

__all__ = [
    # Clauses
    'Clause',
    'NounClause',
    'VerbClause',
    'ConjunctionClause',
    # Linking
    'Role',
    'ClauseGroup',
    'PhraseStructure',
    'link_clauses',
    # Presets
    'PhraseStrength',
    'concrete_strengths',
    'create_phrase_description',
    'create_random_phrase_description',
    # Description format
    'parse_phrase_description',
    'load_phrase_description',
    'format_phrase_description',
    # Templates
    'Template',
    'WordChoice',
    'NounTemplate',
    'AdjectiveTemplate',
    'AdverbTemplate',
    'ArticleTemplate',
    'VerbTemplate',
    'PrepositionTemplate',
    'ConjunctionTemplate',
    # Engines
    'expand',
    'resolve',
    'write_words',
]
