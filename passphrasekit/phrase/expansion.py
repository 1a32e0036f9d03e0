#!/usr/bin/env python3
"""
Template Expansion
==================
Turns a phrase description into an ordered list of word templates, one per
eventual word.

Each (subject, verb, object) group is processed in that logical order, in
two passes:

1. Draft: every clause emits its own templates. Noun clauses settle their
   plurality here, so a verb's subject plurality is known analytically
   before any word is chosen. The verb's template is left pending.
2. Finalize: a pure function of (drafts, subject plurality) that returns new
   template lists with the pending verb plurality filled in.

Output order is subject, verb, object templates per group, groups in source
order.
"""

import logging
from typing import Dict, List, Sequence

from ..errors import StructureError
from ..randomness import RandomSource
from .clauses import Clause
from .linking import ClauseGroup, link_clauses
from .templates import NounTemplate, Template

logger = logging.getLogger(__name__)


def subject_plurality(group: ClauseGroup, clauses: Sequence[Clause],
                      drafts: Dict[int, List[Template]]) -> bool:
    """
    Grammatical number of a group's subject.

    A compound subject ("a cat and a dog") is plural; a single noun clause
    takes the plurality its draft noun template chose.
    """
    if group.subject_noun_count(clauses) > 1:
        return True
    for index in group.subject:
        for template in drafts[index]:
            if isinstance(template, NounTemplate):
                return template.plural
    raise StructureError(f"Subject of verb clause {group.verb} produced no noun")


def expand_group(group: ClauseGroup, clauses: Sequence[Clause], randomness: RandomSource) -> List[Template]:
    """Expand a single (subject, verb, object) group with both passes."""
    # Pass 1: drafts from each clause's own configuration.
    drafts: Dict[int, List[Template]] = {}
    for index in group.ordered:
        drafts[index] = clauses[index].add_word_templates(randomness)

    # Pass 2: finalize with what the whole group now knows.
    plural = subject_plurality(group, clauses, drafts)
    result: List[Template] = []
    for index in group.ordered:
        result.extend(clauses[index].second_pass(drafts[index], plural))
    return result


def expand(clauses: Sequence[Clause], randomness: RandomSource, allow_empty: bool = False) -> List[Template]:
    """
    Expand a phrase description into word templates.

    Parameters
    ----------
    clauses : sequence of Clause
        The phrase description
    randomness : RandomSource
        Source for each clause's weighted choices
    allow_empty : bool
        Return an empty list (instead of raising) when there is no verb

    Raises
    ------
    StructureError
        If linking fails, or there is no verb and ``allow_empty`` is False
    """
    structure = link_clauses(clauses)
    if structure.is_empty:
        if allow_empty:
            return []
        raise StructureError("Phrase description contains no verb clause")

    templates: List[Template] = []
    for group in structure.groups:
        templates.extend(expand_group(group, structure.clauses, randomness))

    logger.debug("Expanded %d clauses in %d groups into %d templates",
                 len(structure.clauses), len(structure.groups), len(templates))
    return templates


__all__ = [
    'expand',
    'expand_group',
    'subject_plurality',
]
