"""
Renders symbolic statements to localized sentences.

Each quiz assigns three distinct vocabulary terms to X, Y and Z, then
fills the language's sentence pattern for the statement's kind:

    some_none(X, Z) + {X: artists, Z: farmers}
        -> "Some artists are not farmers."
"""
from typing import Dict, List, Optional, Sequence

from .localization import OBJECT_PLACEHOLDER, SUBJECT_PLACEHOLDER, Localization
from .quantifier import ALL_KINDS, VARIABLES, Statement, Variable
from .randomness import RandomSource


def assign_terms(
    vocabulary: Sequence[str],
    source: RandomSource,
    variables: Sequence[Variable] = VARIABLES,
) -> Dict[Variable, str]:
    """
    Map each variable to a distinct vocabulary term.

    The vocabulary is shuffled and its first entries are assigned to the
    variables in order.

    Args:
        vocabulary: Candidate terms (at least one per variable)
        source: Random source used for the shuffle
        variables: Variables to assign, X, Y, Z by default

    Returns:
        Variable -> term mapping
    """
    if len(vocabulary) < len(variables):
        raise ValueError(f"Need {len(variables)} terms, got {len(vocabulary)}")
    terms = source.shuffle(vocabulary)
    return dict(zip(variables, terms))


def render(pattern: str, subject_term: str, object_term: str) -> str:
    """Fill the first ``{sub}`` and first ``{obj}`` placeholder of a pattern."""
    return pattern.replace(SUBJECT_PLACEHOLDER, subject_term, 1).replace(OBJECT_PLACEHOLDER, object_term, 1)


class SentenceRenderer:
    """
    Renders statements for one language and one term assignment.

    A renderer lives for a single quiz; its assignment is fixed at
    construction.
    """

    def __init__(self, localization: Localization, lang: str, terms: Dict[Variable, str]):
        self.localization = localization
        self.lang = lang
        self.terms = dict(terms)
        self._patterns = {kind: localization.lookup_pattern(lang, kind) for kind in ALL_KINDS}

    def render(self, statement: Statement) -> str:
        return render(
            self._patterns[statement.kind],
            self.terms[statement.subject],
            self.terms[statement.object],
        )

    __call__ = render

    def render_all(self, statements: Sequence[Statement]) -> List[str]:
        return [self.render(s) for s in statements]

    def parse(self, sentence: str) -> Optional[Statement]:
        """
        Recover the statement behind a rendered sentence.

        Tries every kind and ordered variable pair under this renderer's
        assignment.

        Returns:
            The unique matching statement, or None if no statement (or
            more than one) renders to ``sentence``
        """
        matches = [
            Statement(kind, subject, obj)
            for kind in ALL_KINDS
            for subject in VARIABLES
            for obj in VARIABLES
            if subject != obj and subject in self.terms and obj in self.terms
            and self.render(Statement(kind, subject, obj)) == sentence
        ]
        if len(matches) != 1:
            return None
        return matches[0]
