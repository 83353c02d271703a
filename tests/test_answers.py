import pytest

from syllogism.answers import AnswerSetBuilder, is_multi_correct
from syllogism.errors import QuizError
from syllogism.expansion import expand
from syllogism.localization import Localization
from syllogism.quantifier import QuantifierKind as K, Statement, Variable as V
from syllogism.randomness import RandomSource
from syllogism.renderer import SentenceRenderer
from syllogism.templates import Pattern, Template


def S(kind, subject, obj):
    return Statement(kind, subject, obj)


def keys(answers):
    return [a.statement.key for a in answers]


@pytest.fixture
def barbara(library):
    return library.find(K.ALL, K.ALL, Pattern.CHAIN)


class TestSingle:

    def test_identity_order(self, barbara, identity_source):
        answers = AnswerSetBuilder(identity_source).single(barbara)
        assert keys(answers) == [
            (K.ALL, V.X, V.Z),
            (K.NONE, V.X, V.Z),
            (K.SOME, V.X, V.Z),
            (K.SOME_NOT, V.X, V.Z),
            (K.UNKNOWN, V.X, V.Z),
        ]
        assert [a.is_correct for a in answers] == [True, False, False, False, False]

    def test_unknown_stays_last_when_shuffled(self, library, reversing_source):
        # Reversing source picks the last template's last conclusion
        template = library.find(K.SOME_NOT, K.SOME_NOT, Pattern.COMMON_OBJECT)
        answers = AnswerSetBuilder(reversing_source).single(template)
        assert keys(answers) == [
            (K.SOME_NOT, V.Z, V.Y),
            (K.SOME, V.Z, V.Y),
            (K.NONE, V.Z, V.Y),
            (K.ALL, V.Z, V.Y),
            (K.UNKNOWN, V.Z, V.Y),
        ]
        assert answers[-1].is_correct

    def test_invariants_over_library(self, library):
        builder = AnswerSetBuilder(RandomSource(seed=7))
        for template in library:
            for _ in range(5):
                answers = builder.single(template)
                assert len(answers) == 5
                assert sum(a.is_correct for a in answers) == 1
                assert answers[-1].statement.kind is K.UNKNOWN
                pairs = {a.statement.variables for a in answers}
                assert len(pairs) == 1
                correct = next(a for a in answers if a.is_correct)
                assert correct.statement in template.correct

    def test_render_fills_sentences(self, barbara, identity_source):
        answers = AnswerSetBuilder(identity_source).single(barbara, render=str)
        assert answers[0].sentence == "all(X, Z)"
        assert answers[0].to_dict() == {"sentence": "all(X, Z)", "isCorrect": True}


class TestMulti:

    def test_candidates_exclude_premises(self, barbara):
        candidates = AnswerSetBuilder().candidates(barbara)
        assert len(candidates) == 22
        assert not {a.statement.key for a in candidates} & barbara.premise_keys
        assert all(a.statement.kind is not K.UNKNOWN for a in candidates)

    def test_candidate_labels(self, barbara):
        labels = {a.statement.key: a.is_correct for a in AnswerSetBuilder().candidates(barbara)}
        correct = {key for key, ok in labels.items() if ok}
        assert correct == {
            (K.ALL, V.X, V.Z),
            (K.SOME, V.X, V.Y),
            (K.SOME, V.Y, V.X),
            (K.SOME, V.Y, V.Z),
            (K.SOME, V.Z, V.Y),
        }

    def test_identity_order(self, barbara, identity_source):
        answers = AnswerSetBuilder(identity_source).multi(barbara)
        assert keys(answers) == [
            (K.ALL, V.X, V.Z),
            (K.ALL, V.Y, V.X),
            (K.ALL, V.Z, V.X),
            (K.ALL, V.Z, V.Y),
            (K.NONE, V.X, V.Y),
            (K.NONE, V.X, V.Z),
        ]
        assert [a.is_correct for a in answers] == [True, False, False, False, False, False]

    def test_repairs_set_without_correct_answer(self, barbara, reversing_source):
        # Reversed candidates start with six incorrect SOME_NOT statements
        answers = AnswerSetBuilder(reversing_source).multi(barbara)
        assert keys(answers) == [
            (K.ALL, V.X, V.Z),
            (K.SOME_NOT, V.X, V.Z),
            (K.SOME_NOT, V.Y, V.X),
            (K.SOME_NOT, V.Y, V.Z),
            (K.SOME_NOT, V.Z, V.X),
            (K.SOME_NOT, V.Z, V.Y),
        ]
        assert sum(a.is_correct for a in answers) == 1

    def test_dedupes_by_rendered_sentence(self, barbara, identity_source):
        # Render ignores direction, so mirror images collapse
        def render(statement):
            return f"{statement.kind.value} {sorted(v.value for v in statement.variables)}"

        answers = AnswerSetBuilder(identity_source, max_answers=30).multi(barbara, render=render)
        sentences = [a.sentence for a in answers]
        assert len(sentences) == len(set(sentences))
        # 4 kinds x 3 pairs, minus the two texts the premises render to
        assert len(answers) == 10
        assert "all ['X', 'Y']" not in sentences
        assert "all ['Y', 'Z']" not in sentences

    @pytest.mark.parametrize("seed", range(30))
    def test_never_repeats_a_premise_sentence(self, barbara, seed):
        # Without an ALL pattern every ALL statement renders as the raw key
        loc = Localization({"en": {
            "terms": ["artists", "bakers", "cooks"],
            "templates": {"some": "Some {sub} are {obj}.", "none": "No {sub} are {obj}."},
        }})
        renderer = SentenceRenderer(loc, "en", {V.X: "artists", V.Y: "bakers", V.Z: "cooks"})
        answers = AnswerSetBuilder(RandomSource(seed=seed)).multi(barbara, render=renderer.render)
        premises = renderer.render_all(barbara.premises)
        assert premises == ["templates.all", "templates.all"]
        assert not {a.sentence for a in answers} & set(premises)
        assert any(a.is_correct for a in answers)

    @pytest.mark.parametrize("source", ["identity_source", "reversing_source"])
    def test_shared_sentence_keeps_correct_label(self, barbara, source, request):
        # SOME(X, Y) is correct, SOME_NOT(X, Y) is not; both render alike
        def render(statement):
            kind = "particular" if statement.kind.is_particular else statement.kind.value
            return f"{kind} {statement.subject.value} {statement.object.value}"

        builder = AnswerSetBuilder(request.getfixturevalue(source), max_answers=30)
        answers = builder.multi(barbara, render=render)
        labels = {a.sentence: a.is_correct for a in answers}
        assert labels["particular X Y"]
        assert labels["particular Z Y"]
        assert not labels["particular X Z"]

    def test_raises_when_every_correct_sentence_matches_a_premise(self, barbara):
        with pytest.raises(QuizError):
            AnswerSetBuilder().multi(barbara, render=lambda statement: "same")

    def test_max_answers(self, barbara):
        builder = AnswerSetBuilder(RandomSource(seed=3), max_answers=3)
        assert len(builder.multi(barbara)) == 3

    def test_invariants_over_library(self, library):
        builder = AnswerSetBuilder(RandomSource(seed=11))
        for template in library:
            expansion = expand(template)
            if all(c.kind is K.UNKNOWN for c in expansion):
                continue
            for _ in range(10):
                answers = builder.multi(template, expansion)
                assert 1 <= len(answers) <= 6
                assert any(a.is_correct for a in answers)
                assert not {a.statement.key for a in answers} & template.premise_keys

    def test_trivial_template_raises(self, library):
        template = library.find(K.SOME_NOT, K.SOME_NOT, Pattern.CHAIN)
        with pytest.raises(QuizError):
            AnswerSetBuilder().multi(template)

    def test_max_answers_must_be_positive(self):
        with pytest.raises(ValueError):
            AnswerSetBuilder(max_answers=0)


def test_mirror_rule_applies_to_some_only():
    some_keys = {(K.SOME, V.X, V.Z)}
    assert is_multi_correct(S(K.SOME, V.X, V.Z), some_keys)
    assert is_multi_correct(S(K.SOME, V.Z, V.X), some_keys)

    none_keys = {(K.NONE, V.X, V.Z)}
    assert is_multi_correct(S(K.NONE, V.X, V.Z), none_keys)
    assert not is_multi_correct(S(K.NONE, V.Z, V.X), none_keys)


def test_mirror_rule_in_candidates():
    # Canonical SOME(X, Z) without its mirror
    template = Template(
        (S(K.SOME_NOT, V.X, V.Y), S(K.SOME_NOT, V.Y, V.Z)),
        (S(K.SOME, V.X, V.Z),),
    )
    labels = {a.statement.key: a.is_correct for a in AnswerSetBuilder().candidates(template)}
    assert labels[(K.SOME, V.X, V.Z)]
    assert labels[(K.SOME, V.Z, V.X)]
