"""
Syllogism quiz generation.

Builds single- and multi-answer quizzes from a fixed library of
premise-pair templates over three variables X, Y, Z.

Main components:
- quantifier: Quantifier kinds, statements, conversion and subalternation
- templates: 48 validated templates (chain, common-subject, common-object)
- expansion: Canonical conclusions plus per-premise immediate inferences
- answers: Answer-set builder shared by both quiz modes
- localization / renderer: YAML translation tables and term substitution
- generator: QuizGenerator, QuizConfig and the two quiz operations
"""

from .errors import (
    QuizError,
    InvalidLanguageError,
    TemplateValidationError,
    EmptyTemplateLibraryError,
    ConfigError,
)
from .quantifier import (
    Variable,
    QuantifierKind,
    Statement,
    Conclusion,
    ALL_KINDS,
    PREMISE_KINDS,
    VARIABLES,
    equals,
    converse,
    subaltern,
    immediate_inferences,
)
from .templates import Pattern, Template, TemplateLibrary, load_templates, load_library
from .expansion import expand, is_non_trivial
from .answers import Answer, AnswerSetBuilder
from .randomness import RandomSource
from .localization import Localization
from .renderer import SentenceRenderer, assign_terms, render
from .generator import (
    Quiz,
    QuizConfig,
    QuizGenerator,
    build_generator,
    default_generator,
    generate_quiz,
    generate_multi_quiz,
)

__all__ = [
    # Errors
    'QuizError',
    'InvalidLanguageError',
    'TemplateValidationError',
    'EmptyTemplateLibraryError',
    'ConfigError',
    # Quantifier algebra
    'Variable',
    'QuantifierKind',
    'Statement',
    'Conclusion',
    'ALL_KINDS',
    'PREMISE_KINDS',
    'VARIABLES',
    'equals',
    'converse',
    'subaltern',
    'immediate_inferences',
    # Templates
    'Pattern',
    'Template',
    'TemplateLibrary',
    'load_templates',
    'load_library',
    # Inference and answers
    'expand',
    'is_non_trivial',
    'Answer',
    'AnswerSetBuilder',
    'RandomSource',
    # Rendering
    'Localization',
    'SentenceRenderer',
    'assign_terms',
    'render',
    # Generation
    'Quiz',
    'QuizConfig',
    'QuizGenerator',
    'build_generator',
    'default_generator',
    'generate_quiz',
    'generate_multi_quiz',
]
