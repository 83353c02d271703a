"""
Answer-set construction for both quiz modes.

Single-answer mode offers one statement per quantifier kind on the
subject/object pair of a chosen canonical conclusion; the UNKNOWN
choice is always last.

Multi-answer mode offers a sample of every non-UNKNOWN statement over
the three variables, minus the premises, labelled against the
template's expansion.
"""
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from .errors import QuizError
from .expansion import expand
from .quantifier import ALL_KINDS, PREMISE_KINDS, QuantifierKind, Statement, all_statements
from .randomness import RandomSource
from .templates import Template

DEFAULT_MAX_ANSWERS = 6


@dataclass(frozen=True)
class Answer:
    """
    One answer choice.

    Attributes:
        statement: The symbolic statement behind the choice
        is_correct: Whether it is a valid conclusion
        sentence: Rendered text (empty until rendered)
    """
    statement: Statement
    is_correct: bool
    sentence: str = ""

    def to_dict(self) -> Dict[str, object]:
        return {"sentence": self.sentence, "isCorrect": self.is_correct}


def _render_all(answers: Iterable[Answer], render: Optional[Callable[[Statement], str]]) -> List[Answer]:
    if render is None:
        return list(answers)
    return [Answer(a.statement, a.is_correct, render(a.statement)) for a in answers]


def is_multi_correct(candidate: Statement, expansion_keys) -> bool:
    """
    Label a multi-answer candidate.

    A candidate is correct if its triple is in the expansion, or if it is
    a SOME statement whose mirror image is. The mirror rule is applied to
    SOME only, not to NONE.
    """
    if candidate.key in expansion_keys:
        return True
    return candidate.kind is QuantifierKind.SOME and candidate.reversed().key in expansion_keys


class AnswerSetBuilder:
    """
    Builds answer sets for a template.

    Both quiz modes share this builder; randomness comes from the
    injected RandomSource.
    """

    def __init__(self, source: Optional[RandomSource] = None, max_answers: int = DEFAULT_MAX_ANSWERS):
        if max_answers < 1:
            raise ValueError(f"max_answers must be positive, got {max_answers}")
        self.source = source or RandomSource()
        self.max_answers = max_answers

    # ===== Single-answer mode =====

    def single(
        self,
        template: Template,
        render: Optional[Callable[[Statement], str]] = None,
    ) -> List[Answer]:
        """
        Build the five single-answer choices.

        One canonical conclusion is picked as the correct answer. Each
        quantifier kind is instantiated on its subject/object pair; the
        four definite kinds are shuffled and UNKNOWN is appended last.

        Args:
            template: Template to quiz on
            render: Optional statement -> sentence function

        Returns:
            Exactly five answers with exactly one correct
        """
        chosen = self.source.choice(template.correct)
        candidates = {
            kind: Answer(chosen.with_kind(kind), kind is chosen.kind)
            for kind in ALL_KINDS
        }
        unknown = candidates.pop(QuantifierKind.UNKNOWN)
        ordered = self.source.shuffle(list(candidates.values())) + [unknown]
        return _render_all(ordered, render)

    # ===== Multi-answer mode =====

    def candidates(self, template: Template, expansion: Optional[List[Statement]] = None) -> List[Answer]:
        """
        Every definite statement over the three variables except the
        premises, labelled against the expansion.
        """
        expansion = expand(template) if expansion is None else expansion
        expansion_keys = {c.key for c in expansion}
        premise_keys = template.premise_keys
        return [
            Answer(statement, is_multi_correct(statement, expansion_keys))
            for statement in all_statements(PREMISE_KINDS)
            if statement.key not in premise_keys
        ]

    def multi(
        self,
        template: Template,
        expansion: Optional[List[Statement]] = None,
        render: Optional[Callable[[Statement], str]] = None,
    ) -> List[Answer]:
        """
        Build a multi-answer set of at most ``max_answers`` choices.

        Candidates are shuffled, de-duplicated by rendered sentence and
        truncated. A sentence shared by several candidates keeps the
        first-seen position and is correct if any of them is; sentences
        equal to a rendered premise are dropped. If truncation dropped every correct candidate, the
        last slot is replaced by a random correct one and the set is
        reshuffled.

        Args:
            template: Template to quiz on
            expansion: Precomputed expansion (computed if omitted)
            render: Optional statement -> sentence function; without it
                candidates are de-duplicated by triple

        Returns:
            Between 1 and ``max_answers`` answers, at least one correct

        Raises:
            QuizError: If the template yields no correct candidate at all
        """
        candidates = _render_all(self.candidates(template, expansion), render)
        if not any(a.is_correct for a in candidates):
            raise QuizError(f"Template has no correct multi-answer candidate: {template}")

        # Sentences equal to a rendered premise are never offered
        taken = {render(p) for p in template.premises} if render is not None else set()
        unique: Dict[object, Answer] = {}
        for answer in self.source.shuffle(candidates):
            identity = answer.sentence if render is not None else answer.statement.key
            if identity in taken:
                continue
            seen = unique.get(identity)
            if seen is None or (answer.is_correct and not seen.is_correct):
                unique[identity] = answer
        answers = list(unique.values())
        if not any(a.is_correct for a in answers):
            raise QuizError(f"Every correct candidate renders like a premise: {template}")

        selected = answers[:self.max_answers]
        if not any(a.is_correct for a in selected):
            correct = self.source.choice([a for a in answers if a.is_correct])
            selected.pop()
            selected.append(correct)
            selected = self.source.shuffle(selected)
        return selected
