import pytest

from syllogism.quantifier import (
    ALL_KINDS,
    PREMISE_KINDS,
    QuantifierKind as K,
    Statement,
    Variable as V,
    all_statements,
    converse,
    equals,
    immediate_inferences,
    subaltern,
)


def test_statement_rejects_reflexive():
    with pytest.raises(ValueError):
        Statement(K.ALL, V.X, V.X)


def test_equals_is_syntactic():
    assert equals(Statement(K.SOME, V.X, V.Y), Statement(K.SOME, V.X, V.Y))
    # Semantically equivalent, syntactically different
    assert not equals(Statement(K.SOME, V.X, V.Y), Statement(K.SOME, V.Y, V.X))
    assert not equals(Statement(K.SOME, V.X, V.Y), Statement(K.ALL, V.X, V.Y))


def test_converse_of_symmetric_kinds():
    assert converse(Statement(K.SOME, V.X, V.Y)) == Statement(K.SOME, V.Y, V.X)
    assert converse(Statement(K.NONE, V.Y, V.Z)) == Statement(K.NONE, V.Z, V.Y)


@pytest.mark.parametrize("kind", [K.ALL, K.SOME_NOT, K.UNKNOWN])
def test_no_converse(kind):
    assert converse(Statement(kind, V.X, V.Y)) is None


def test_subaltern_only_for_all():
    assert subaltern(Statement(K.ALL, V.X, V.Y)) == Statement(K.SOME, V.X, V.Y)
    for kind in (K.NONE, K.SOME, K.SOME_NOT, K.UNKNOWN):
        assert subaltern(Statement(kind, V.X, V.Y)) is None


def test_immediate_inferences():
    assert immediate_inferences(Statement(K.ALL, V.X, V.Y)) == [
        Statement(K.SOME, V.X, V.Y),
        Statement(K.SOME, V.Y, V.X),
    ]
    assert immediate_inferences(Statement(K.SOME, V.X, V.Y)) == [Statement(K.SOME, V.Y, V.X)]
    assert immediate_inferences(Statement(K.NONE, V.X, V.Y)) == [Statement(K.NONE, V.Y, V.X)]
    assert immediate_inferences(Statement(K.SOME_NOT, V.X, V.Y)) == []


def test_kind_wire_codes():
    assert [k.value for k in ALL_KINDS] == ["all", "none", "some", "some_none", "unknown"]
    assert K.UNKNOWN not in PREMISE_KINDS


def test_all_statements_covers_ordered_pairs():
    statements = all_statements()
    assert len(statements) == 4 * 6
    assert len({s.key for s in statements}) == len(statements)
    assert all(s.kind is not K.UNKNOWN for s in statements)


def test_dict_round_trip_shape():
    statement = Statement.from_dict({"type": "some_none", "subject": "Z", "object": "X"})
    assert statement == Statement(K.SOME_NOT, V.Z, V.X)
    assert statement.to_dict() == {"type": "some_none", "subject": "Z", "object": "X"}
    assert str(statement) == "some_none(Z, X)"
