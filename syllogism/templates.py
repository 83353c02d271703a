"""
Syllogism template library.

A template fixes two premises over the variables X, Y, Z and the
canonical conclusions that follow from the pair. The library is loaded
once from JSON and is read-only afterwards.

Premise layouts (pattern -> variables):
- CHAIN:          K1(X, Y), K2(Y, Z)   premise1.object == premise2.subject
- COMMON_SUBJECT: K1(X, Y), K2(X, Z)   premise1.subject == premise2.subject
- COMMON_OBJECT:  K1(Y, X), K2(Z, X)   premise1.object == premise2.object
"""
import json
import logging
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple, Union

from .errors import EmptyTemplateLibraryError, TemplateValidationError
from .quantifier import QuantifierKind, Statement, StatementKey

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATES_PATH = Path(__file__).parent / "data" / "quiz_templates.json"

MAX_CONCLUSIONS = 2


class Pattern(Enum):
    """How the two premises share their middle term."""
    CHAIN = "chain"
    COMMON_SUBJECT = "common-subject"
    COMMON_OBJECT = "common-object"

    @classmethod
    def classify(cls, first: Statement, second: Statement) -> Optional['Pattern']:
        """
        Classify a premise pair. Chain is checked first, then common
        subject, then common object.

        Returns:
            The matching Pattern, or None if the premises share no term
            in a recognised position
        """
        if first.object == second.subject:
            return cls.CHAIN
        if first.subject == second.subject:
            return cls.COMMON_SUBJECT
        if first.object == second.object:
            return cls.COMMON_OBJECT
        return None


@dataclass(frozen=True)
class Template:
    """
    Two premises and their canonical conclusions.

    Attributes:
        premises: The two given statements
        correct: Canonical conclusions (1 or 2 entries)
    """
    premises: Tuple[Statement, Statement]
    correct: Tuple[Statement, ...]
    pattern: Optional[Pattern] = field(init=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "premises", tuple(self.premises))
        object.__setattr__(self, "correct", tuple(self.correct))
        object.__setattr__(self, "pattern", Pattern.classify(*self.premises))

    @property
    def premise_keys(self) -> FrozenSet[StatementKey]:
        """Normalized premise triples; never offered as answers."""
        return frozenset(p.key for p in self.premises)

    @property
    def kinds(self) -> Tuple[QuantifierKind, QuantifierKind]:
        return (self.premises[0].kind, self.premises[1].kind)

    def normalized(self) -> Tuple[FrozenSet[StatementKey], FrozenSet[StatementKey]]:
        """Order-insensitive identity used for duplicate detection."""
        return (self.premise_keys, frozenset(c.key for c in self.correct))

    def validate(self):
        """
        Check the structural invariants of a single template.

        Raises:
            TemplateValidationError: On the first violated invariant
        """
        if len(self.premises) != 2:
            raise TemplateValidationError(f"Expected 2 premises, got {len(self.premises)}")
        for premise in self.premises:
            if not premise.kind.is_premise_kind:
                raise TemplateValidationError(f"Premise cannot be {premise.kind.value}: {premise}")
        if self.pattern is None:
            raise TemplateValidationError(
                f"Premises {self.premises[0]} and {self.premises[1]} match no pattern"
            )
        if not self.correct:
            raise TemplateValidationError(f"Template {self} has no conclusions")
        if len(self.correct) > MAX_CONCLUSIONS:
            raise TemplateValidationError(
                f"Template {self} has {len(self.correct)} conclusions (max {MAX_CONCLUSIONS})"
            )

        premise_vars = {v for p in self.premises for v in p.variables}
        for conclusion in self.correct:
            if conclusion.key in self.premise_keys:
                raise TemplateValidationError(f"Conclusion {conclusion} restates a premise")
            missing = set(conclusion.variables) - premise_vars
            if missing:
                raise TemplateValidationError(
                    f"Conclusion {conclusion} uses variables absent from premises: {sorted(v.value for v in missing)}"
                )

    def to_dict(self) -> Dict[str, list]:
        return {
            "statements": [p.to_dict() for p in self.premises],
            "correct": [c.to_dict() for c in self.correct],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, list]) -> 'Template':
        try:
            premises = tuple(Statement.from_dict(s) for s in data["statements"])
            correct = tuple(Statement.from_dict(c) for c in data["correct"])
        except (KeyError, TypeError, ValueError) as e:
            raise TemplateValidationError(f"Malformed template {data!r}: {e}") from e
        if len(premises) != 2:
            raise TemplateValidationError(f"Expected 2 premises, got {len(premises)}")
        return cls(premises, correct)

    def __str__(self) -> str:
        conclusions = ", ".join(str(c) for c in self.correct)
        return f"{self.premises[0]}; {self.premises[1]} => {conclusions}"


class TemplateLibrary:
    """
    Immutable, validated collection of templates.

    Construction validates every template and checks that each pattern
    is represented, so a broken library fails at startup rather than
    on the first request.
    """

    def __init__(self, templates: Iterable[Template]):
        self._templates: Tuple[Template, ...] = tuple(templates)
        self._validate()

    def _validate(self):
        if not self._templates:
            raise EmptyTemplateLibraryError("Template library is empty")

        seen = {}
        for index, template in enumerate(self._templates):
            template.validate()
            identity = template.normalized()
            if identity in seen:
                raise TemplateValidationError(
                    f"Template {index} duplicates template {seen[identity]}: {template}"
                )
            seen[identity] = index

        counts = self.pattern_counts()
        missing = [p.value for p in Pattern if counts.get(p, 0) == 0]
        if missing:
            raise EmptyTemplateLibraryError(f"No templates for pattern(s): {', '.join(missing)}")

    @property
    def templates(self) -> Tuple[Template, ...]:
        return self._templates

    def __len__(self) -> int:
        return len(self._templates)

    def __iter__(self):
        return iter(self._templates)

    def __getitem__(self, index: int) -> Template:
        return self._templates[index]

    def pattern_counts(self) -> Dict[Pattern, int]:
        """Number of templates per premise pattern."""
        return dict(Counter(t.pattern for t in self._templates))

    def combinations(self, pattern: Optional[Pattern] = None) -> Counter:
        """Count templates per premise-kind pair, optionally for one pattern."""
        return Counter(
            t.kinds for t in self._templates
            if pattern is None or t.pattern == pattern
        )

    def non_trivial(self) -> List[Template]:
        """Templates whose expansion holds at least one definite conclusion."""
        from .expansion import expand, is_non_trivial
        return [t for t in self._templates if is_non_trivial(expand(t))]

    def by_pattern(self, pattern: Pattern) -> List[Template]:
        return [t for t in self._templates if t.pattern == pattern]

    def find(self, first: QuantifierKind, second: QuantifierKind, pattern: Pattern) -> Optional[Template]:
        """Look up the template for a premise-kind pair within a pattern."""
        for template in self._templates:
            if template.pattern == pattern and template.kinds == (first, second):
                return template
        return None


def load_templates(path: Optional[Union[str, Path]] = None) -> List[Template]:
    """
    Read templates from a JSON file.

    Args:
        path: JSON file with a top-level ``data`` list; defaults to the
            bundled library

    Returns:
        Templates in file order (not yet validated as a library)
    """
    path = Path(path) if path is not None else DEFAULT_TEMPLATES_PATH
    with open(path, encoding="utf-8") as f:
        try:
            payload = json.load(f)
        except json.JSONDecodeError as e:
            raise TemplateValidationError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(payload, dict) or not isinstance(payload.get("data"), list):
        raise TemplateValidationError(f"{path} must contain a top-level 'data' list")

    templates = [Template.from_dict(item) for item in payload["data"]]
    logger.info("Loaded %d templates from %s", len(templates), path)
    return templates


def load_library(path: Optional[Union[str, Path]] = None) -> TemplateLibrary:
    """Load and validate a template library."""
    return TemplateLibrary(load_templates(path))
