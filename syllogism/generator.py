"""
Quiz generation: template pick, answer set, rendering.

Two operations, one per quiz mode:
- generate_quiz(lang):       five choices, exactly one correct, UNKNOWN last
- generate_multi_quiz(lang): up to six choices, at least one correct

Both return a Quiz whose to_dict() is the transport shape:

    {"baseSentences": [s1, s2], "answers": [{"sentence": ..., "isCorrect": ...}]}
"""
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

import yaml

from .answers import DEFAULT_MAX_ANSWERS, Answer, AnswerSetBuilder
from .errors import ConfigError, EmptyTemplateLibraryError
from .expansion import expand, has_definite_conclusion, is_non_trivial
from .localization import DEFAULT_LANG, Localization
from .randomness import RandomSource
from .renderer import SentenceRenderer, assign_terms
from .templates import Template, TemplateLibrary, load_library

logger = logging.getLogger(__name__)

SINGLE = "single"
MULTI = "multi"


@dataclass
class QuizConfig:
    """
    Generation settings.

    Attributes:
        default_lang: Fallback language for translation lookups
        max_answers: Size cap of a multi-answer set
        max_resample_attempts: Template draws before giving up in multi mode
        strict_multi_templates: Also reject templates whose canonical
            conclusions are all UNKNOWN in multi mode
    """
    default_lang: str = DEFAULT_LANG
    max_answers: int = DEFAULT_MAX_ANSWERS
    max_resample_attempts: int = 100
    strict_multi_templates: bool = False

    def __post_init__(self):
        if self.max_answers < 1:
            raise ConfigError(f"max_answers must be positive, got {self.max_answers}")
        if self.max_resample_attempts < 1:
            raise ConfigError(f"max_resample_attempts must be positive, got {self.max_resample_attempts}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'QuizConfig':
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> 'QuizConfig':
        """Load settings from a YAML mapping; missing keys keep their defaults."""
        with open(path, encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Error parsing {path}: {e}") from e
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"{path} must contain a mapping")
        return cls.from_dict(data)


@dataclass
class Quiz:
    """A generated quiz instance."""
    base_sentences: List[str]
    answers: List[Answer]
    template: Template
    mode: str
    lang: str
    terms: Dict[str, str] = field(default_factory=dict)

    @property
    def correct_answers(self) -> List[Answer]:
        return [a for a in self.answers if a.is_correct]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "baseSentences": list(self.base_sentences),
            "answers": [a.to_dict() for a in self.answers],
        }


class QuizGenerator:
    """
    Generates quizzes from a template library and translation tables.

    All collaborators are injected; nothing is read from global state.

    Args:
        library: Validated template library
        localization: Translation tables
        config: Generation settings
        source: Random source for template picks, term assignment and
            answer shuffling
    """

    def __init__(
        self,
        library: TemplateLibrary,
        localization: Localization,
        config: Optional[QuizConfig] = None,
        source: Optional[RandomSource] = None,
    ):
        self.library = library
        self.localization = localization
        self.config = config or QuizConfig()
        self.source = source or RandomSource()
        self.builder = AnswerSetBuilder(self.source, max_answers=self.config.max_answers)
        self.multi_templates = [t for t in library.non_trivial() if self.multi_eligible(t)]
        if not self.multi_templates:
            logger.warning("No template is eligible for multi-answer quizzes")

    def multi_eligible(self, template: Template) -> bool:
        if self.config.strict_multi_templates and not has_definite_conclusion(template):
            return False
        return is_non_trivial(expand(template))

    def pick_template(self, accept: Optional[Callable[[Template], bool]] = None) -> Template:
        """
        Draw templates uniformly (with replacement) until one is accepted.

        After ``config.max_resample_attempts`` rejected draws the pick is
        made directly among the accepted templates.

        Raises:
            EmptyTemplateLibraryError: If no template in the library is
                accepted
        """
        for attempt in range(self.config.max_resample_attempts):
            template = self.source.choice(self.library.templates)
            if accept is None or accept(template):
                logger.debug("Picked template %s after %d resample(s)", template, attempt)
                return template
            logger.debug("Rejected template %s", template)

        eligible = [t for t in self.library if accept(t)]
        if not eligible:
            raise EmptyTemplateLibraryError("No template in the library is acceptable")
        logger.info(
            "No acceptable draw after %d attempts; picking among %d eligible template(s)",
            self.config.max_resample_attempts, len(eligible),
        )
        return self.source.choice(eligible)

    def _renderer(self, lang: str) -> SentenceRenderer:
        vocabulary = self.localization.lookup_vocabulary(lang)
        terms = assign_terms(vocabulary, self.source)
        return SentenceRenderer(self.localization, lang, terms)

    def _quiz(self, template: Template, answers: List[Answer], renderer: SentenceRenderer, mode: str) -> Quiz:
        return Quiz(
            base_sentences=renderer.render_all(template.premises),
            answers=answers,
            template=template,
            mode=mode,
            lang=renderer.lang,
            terms={v.value: term for v, term in renderer.terms.items()},
        )

    def generate_quiz(self, lang: str) -> Quiz:
        """
        Single-answer quiz: five choices, exactly one correct, UNKNOWN last.

        Raises:
            InvalidLanguageError: If ``lang`` is not configured
        """
        self.localization.require_language(lang)
        template = self.pick_template()
        renderer = self._renderer(lang)
        answers = self.builder.single(template, render=renderer.render)
        return self._quiz(template, answers, renderer, SINGLE)

    def generate_multi_quiz(self, lang: str) -> Quiz:
        """
        Multi-answer quiz over all valid conclusions.

        Templates whose expansion is trivial are resampled.

        Raises:
            InvalidLanguageError: If ``lang`` is not configured
            EmptyTemplateLibraryError: If no template is eligible
        """
        self.localization.require_language(lang)
        if not self.multi_templates:
            raise EmptyTemplateLibraryError("No template is eligible for multi-answer quizzes")
        template = self.pick_template(self.multi_eligible)
        renderer = self._renderer(lang)
        answers = self.builder.multi(template, expand(template), render=renderer.render)
        return self._quiz(template, answers, renderer, MULTI)

    def generate(self, lang: str, mode: str = SINGLE) -> Quiz:
        if mode == SINGLE:
            return self.generate_quiz(lang)
        if mode == MULTI:
            return self.generate_multi_quiz(lang)
        raise ValueError(f"Unknown quiz mode: {mode!r}")


def build_generator(
    templates_path: Optional[Union[str, Path]] = None,
    i18n_dir: Optional[Union[str, Path]] = None,
    config: Optional[QuizConfig] = None,
    seed: Optional[int] = None,
) -> QuizGenerator:
    """Build a generator from files (bundled data by default)."""
    config = config or QuizConfig()
    library = load_library(templates_path)
    localization = Localization.from_directory(i18n_dir, default_lang=config.default_lang)
    return QuizGenerator(library, localization, config, RandomSource(seed))


_default_generator: Optional[QuizGenerator] = None


def default_generator() -> QuizGenerator:
    """Process-wide generator over the bundled data, built on first use."""
    global _default_generator
    if _default_generator is None:
        _default_generator = build_generator()
    return _default_generator


def generate_quiz(lang: str = DEFAULT_LANG) -> Dict[str, Any]:
    """Single-answer quiz in transport shape."""
    return default_generator().generate_quiz(lang).to_dict()


def generate_multi_quiz(lang: str = DEFAULT_LANG) -> Dict[str, Any]:
    """Multi-answer quiz in transport shape."""
    return default_generator().generate_multi_quiz(lang).to_dict()
