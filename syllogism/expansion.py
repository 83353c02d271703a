"""
Entailment expansion of a template.

The canonical conclusions of a template cover what follows from the two
premises together. Expansion adds what follows from each premise on its
own via immediate inference (see quantifier.immediate_inferences):

    ALL(A, B)  -> SOME(A, B), SOME(B, A)
    SOME(A, B) -> SOME(B, A)
    NONE(A, B) -> NONE(B, A)
    SOME_NOT   -> nothing
"""
from typing import Iterable, List

from .quantifier import QuantifierKind, Statement, immediate_inferences
from .templates import Template


def dedupe(statements: Iterable[Statement]) -> List[Statement]:
    """Drop repeated (kind, subject, object) triples, keeping first-seen order."""
    unique = {}
    for statement in statements:
        unique.setdefault(statement.key, statement)
    return list(unique.values())


def expand(template: Template) -> List[Statement]:
    """
    Canonical conclusions plus everything each premise entails alone.

    Premises are not combined here; pairwise inference is already in
    ``template.correct``.

    Returns:
        Duplicate-free list of conclusions, canonical ones first
    """
    derived: List[Statement] = list(template.correct)
    for premise in template.premises:
        derived.extend(immediate_inferences(premise))
    return dedupe(derived)


def is_non_trivial(expansion: List[Statement]) -> bool:
    """True iff the expansion has at least one conclusion that is not UNKNOWN."""
    return any(c.kind is not QuantifierKind.UNKNOWN for c in expansion)


def has_definite_conclusion(template: Template) -> bool:
    """True iff some canonical conclusion is not UNKNOWN."""
    return is_non_trivial(list(template.correct))
