"""
Quantifier algebra over three symbolic variables.

Categorical statements are (kind, subject, object) triples:
- ALL(A, B):      every A is B
- NONE(A, B):     no A is B
- SOME(A, B):     at least one A is B
- SOME_NOT(A, B): at least one A is not B
- UNKNOWN(A, B):  nothing follows about A and B (conclusions only)

Immediate inferences supported by this module:
- Conversion: SOME and NONE may swap subject and object.
- Subalternation: ALL(A, B) licenses SOME(A, B).
- SOME_NOT has neither.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple, Any


class Variable(Enum):
    """The three anonymous term slots of a syllogism."""
    X = "X"
    Y = "Y"
    Z = "Z"

    def __str__(self) -> str:
        return self.value


class QuantifierKind(Enum):
    """Quantifier kinds, valued by their wire codes."""
    ALL = "all"
    NONE = "none"
    SOME = "some"
    SOME_NOT = "some_none"
    UNKNOWN = "unknown"

    @property
    def is_premise_kind(self) -> bool:
        """Whether this kind may appear in a premise."""
        return self is not QuantifierKind.UNKNOWN

    @property
    def is_negative(self) -> bool:
        return self in (QuantifierKind.NONE, QuantifierKind.SOME_NOT)

    @property
    def is_particular(self) -> bool:
        return self in (QuantifierKind.SOME, QuantifierKind.SOME_NOT)

    @property
    def is_symmetric(self) -> bool:
        """Whether subject and object can be swapped without changing truth."""
        return self in (QuantifierKind.SOME, QuantifierKind.NONE)

    def __str__(self) -> str:
        return self.value


# Display order of the single-answer choices
ALL_KINDS: List[QuantifierKind] = [
    QuantifierKind.ALL,
    QuantifierKind.NONE,
    QuantifierKind.SOME,
    QuantifierKind.SOME_NOT,
    QuantifierKind.UNKNOWN,
]

PREMISE_KINDS: List[QuantifierKind] = [k for k in ALL_KINDS if k.is_premise_kind]

VARIABLES: List[Variable] = [Variable.X, Variable.Y, Variable.Z]

StatementKey = Tuple[QuantifierKind, Variable, Variable]


@dataclass(frozen=True)
class Statement:
    """
    A categorical statement over two distinct variables.

    Used both for premises and for conclusions; only conclusions may
    carry QuantifierKind.UNKNOWN.

    Attributes:
        kind: The quantifier
        subject: Variable in subject position
        object: Variable in object (predicate) position
    """
    kind: QuantifierKind
    subject: Variable
    object: Variable

    def __post_init__(self):
        if self.subject == self.object:
            raise ValueError(f"Reflexive statement: {self.kind.value}({self.subject}, {self.object})")

    @property
    def key(self) -> StatementKey:
        """The (kind, subject, object) triple used for equality checks."""
        return (self.kind, self.subject, self.object)

    @property
    def variables(self) -> Tuple[Variable, Variable]:
        return (self.subject, self.object)

    def reversed(self) -> 'Statement':
        """Same kind with subject and object swapped (no validity implied)."""
        return Statement(self.kind, self.object, self.subject)

    def with_kind(self, kind: QuantifierKind) -> 'Statement':
        return Statement(kind, self.subject, self.object)

    def to_dict(self) -> Dict[str, str]:
        return {"type": self.kind.value, "subject": self.subject.value, "object": self.object.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Statement':
        """Build from the JSON shape ``{"type", "subject", "object"}``."""
        return cls(
            QuantifierKind(data["type"]),
            Variable(data["subject"]),
            Variable(data["object"]),
        )

    def __str__(self) -> str:
        return f"{self.kind.value}({self.subject}, {self.object})"


# Conclusions share the statement representation
Conclusion = Statement


def equals(a: Statement, b: Statement) -> bool:
    """Syntactic equality: kind, subject and object all match."""
    return a.key == b.key


def converse(statement: Statement) -> Optional[Statement]:
    """
    Simple conversion of a statement.

    SOME(A, B) -> SOME(B, A) and NONE(A, B) -> NONE(B, A). ALL and
    SOME_NOT have no valid converse, so None is returned for them.
    """
    if statement.kind.is_symmetric:
        return statement.reversed()
    return None


def subaltern(statement: Statement) -> Optional[Statement]:
    """ALL(A, B) -> SOME(A, B); no other kind is weakened."""
    if statement.kind is QuantifierKind.ALL:
        return statement.with_kind(QuantifierKind.SOME)
    return None


def immediate_inferences(statement: Statement) -> List[Statement]:
    """
    All statements that follow from a single statement on its own.

    ALL(A, B) gives SOME(A, B) and SOME(B, A) (subalternation, then
    conversion of the subaltern). SOME and NONE give their converse.
    SOME_NOT and UNKNOWN give nothing.

    Args:
        statement: A premise or conclusion

    Returns:
        Derived statements, without the input itself
    """
    derived: List[Statement] = []
    weaker = subaltern(statement)
    if weaker is not None:
        derived.append(weaker)
        derived.append(converse(weaker))
    swapped = converse(statement)
    if swapped is not None:
        derived.append(swapped)
    return derived


def all_statements(kinds: Optional[List[QuantifierKind]] = None) -> List[Statement]:
    """Every statement over ordered pairs of distinct variables, by kind."""
    kinds = PREMISE_KINDS if kinds is None else kinds
    return [
        Statement(kind, subject, obj)
        for kind in kinds
        for subject in VARIABLES
        for obj in VARIABLES
        if subject != obj
    ]
