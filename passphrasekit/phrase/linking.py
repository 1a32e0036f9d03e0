#!/usr/bin/env python3
"""
Clause Linking
==============
Resolves which noun clauses are the subject and object of each verb.

Linking is positional and deterministic. For a VerbClause at index ``v``:
- its subject is the run ``N (C N)*`` ending right before ``v``
- its object is the run ``N (C N)*`` starting right after ``v``

where N is a NounClause and C a ConjunctionClause. The result refers to
clauses by index into the input list; clauses themselves are never
modified.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Sequence, Tuple

from ..errors import StructureError
from .clauses import Clause, ConjunctionClause, NounClause, VerbClause


class Role(Enum):
    SUBJECT = 'subject'
    OBJECT = 'object'


@dataclass(frozen=True)
class ClauseGroup:
    """Indices of one (subject, verb, object) group."""
    subject: Tuple[int, ...]
    verb: int
    object: Tuple[int, ...]

    @property
    def ordered(self) -> Tuple[int, ...]:
        """Processing order: subject, verb, object."""
        return self.subject + (self.verb,) + self.object

    def subject_noun_count(self, clauses: Sequence[Clause]) -> int:
        return sum(1 for i in self.subject if isinstance(clauses[i], NounClause))


@dataclass(frozen=True)
class PhraseStructure:
    """Linked view of a phrase description."""
    clauses: Tuple[Clause, ...]
    groups: Tuple[ClauseGroup, ...]
    roles: Dict[int, Tuple[Role, int]]

    @property
    def is_empty(self) -> bool:
        return not self.groups


def _noun_run(clauses: Sequence[Clause], start: int, step: int) -> Tuple[int, ...]:
    """Collect ``N (C N)*`` walking from ``start`` in direction ``step``."""
    run: List[int] = []
    i = start
    while 0 <= i < len(clauses) and isinstance(clauses[i], NounClause):
        run.append(i)
        joiner = i + step
        after = joiner + step
        if (0 <= after < len(clauses)
                and isinstance(clauses[joiner], ConjunctionClause)
                and isinstance(clauses[after], NounClause)):
            run.append(joiner)
            i = after
        else:
            break
    return tuple(sorted(run))


def link_clauses(clauses: Sequence[Clause]) -> PhraseStructure:
    """
    Link every verb to its subject and object clauses.

    Raises
    ------
    StructureError
        If a verb lacks a subject or object, a clause is claimed by two
        verbs, a conjunction does not join two noun clauses, a noun clause
        belongs to no verb, or an unknown clause type is present
    """
    clauses = tuple(clauses)
    for index, clause in enumerate(clauses):
        if not isinstance(clause, (NounClause, VerbClause, ConjunctionClause)):
            raise StructureError(f"Clause {index} has unsupported type {type(clause).__name__}")

    groups: List[ClauseGroup] = []
    owner: Dict[int, int] = {}
    roles: Dict[int, Tuple[Role, int]] = {}

    for v, clause in enumerate(clauses):
        if not isinstance(clause, VerbClause):
            continue
        subject = _noun_run(clauses, v - 1, -1)
        obj = _noun_run(clauses, v + 1, +1)
        if not subject:
            raise StructureError(f"Verb clause {v} has no subject noun clause before it")
        if not obj:
            raise StructureError(f"Verb clause {v} has no object noun clause after it")

        for role, indices in ((Role.SUBJECT, subject), (Role.OBJECT, obj)):
            for i in indices:
                if i in owner:
                    raise StructureError(
                        f"Clause {i} is claimed by verb clauses {owner[i]} and {v}"
                    )
                owner[i] = v
                if isinstance(clauses[i], NounClause):
                    roles[i] = (role, v)
        groups.append(ClauseGroup(subject=subject, verb=v, object=obj))

    if not groups:
        # No verbs: nothing is emitted, the caller decides if that is allowed.
        return PhraseStructure(clauses=clauses, groups=(), roles={})

    for index, clause in enumerate(clauses):
        if index in owner or isinstance(clause, VerbClause):
            continue
        if isinstance(clause, ConjunctionClause):
            raise StructureError(f"Conjunction clause {index} does not join two noun clauses")
        raise StructureError(f"Noun clause {index} is not the subject or object of any verb")

    return PhraseStructure(clauses=clauses, groups=tuple(groups), roles=roles)


__all__ = [
    'Role',
    'ClauseGroup',
    'PhraseStructure',
    'link_clauses',
]
