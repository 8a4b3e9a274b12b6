"""
Complexity sub-scores and the combined score.

Three independent sub-scores are derived from one ComplexityFeatures record,
each capped at 5.0:
- Structural: function and operator density plus squared nesting depth
- Cognitive: control flow, nesting and the cyclomatic estimate
- Maintainability: step functions over comments, names and file length

The combiner blends them 0.4/0.4/0.2 and caps the result at 10.0. With every
sub-score capped at 5.0 the blend cannot exceed 5.0, so the 10.0 ceiling is
never reached in practice.
"""

from typing import Optional, Union

from complexity_scorer.constants import (
    CognitiveWeights,
    CombinerWeights,
    MaintainabilityThresholds,
    ScoreBounds,
    StructuralWeights,
)
from complexity_scorer.core.logging import get_logger
from complexity_scorer.models.complexity import (
    ComplexityBreakdown,
    ComplexityFeatures,
    LanguageTag,
    PatternOverrides,
)

from .metrics import extract_features
from .patterns import resolve_language


def calculate_structural_complexity(features: ComplexityFeatures) -> float:
    """Score code organization: density of functions and operators, depth."""
    lines = max(features.non_empty_lines, 1)
    function_density = features.function_count / lines
    nesting_factor = features.nesting_depth ** 2 / StructuralWeights.NESTING_DIVISOR
    operator_density = features.operator_count / lines

    return min(
        ScoreBounds.SUB_SCORE_CAP,
        function_density * StructuralWeights.FUNCTION_DENSITY
        + nesting_factor
        + operator_density * StructuralWeights.OPERATOR_DENSITY,
    )


def calculate_cognitive_complexity(features: ComplexityFeatures) -> float:
    """Score the mental effort implied by branching and depth."""
    return min(
        ScoreBounds.SUB_SCORE_CAP,
        features.control_flow_count * CognitiveWeights.CONTROL_FLOW
        + features.nesting_depth * CognitiveWeights.NESTING
        + features.cyclomatic_complexity * CognitiveWeights.CYCLOMATIC,
    )


def calculate_maintainability_complexity(features: ComplexityFeatures) -> float:
    """Score maintainability penalties.

    Each factor is a step function with a strict threshold, so exactly
    100 non-empty lines still counts as a short file.

    Args:
        features: Extracted features

    Returns:
        Sum of the comment, identifier and length factors (max 5.0)
    """
    t = MaintainabilityThresholds
    comment_factor = t.WELL_COMMENTED if features.comment_ratio > t.COMMENT_RATIO else t.POORLY_COMMENTED
    identifier_factor = t.DESCRIPTIVE_NAMES if features.identifier_length_avg > t.IDENTIFIER_LENGTH else t.SHORT_NAMES
    length_factor = t.LONG_FILE if features.non_empty_lines > t.NON_EMPTY_LINES else t.SHORT_FILE

    return min(ScoreBounds.SUB_SCORE_CAP, comment_factor + identifier_factor + length_factor)


def combine_scores(structural: float, cognitive: float, maintainability: float) -> float:
    """Blend the three sub-scores into the final score (capped at 10.0)."""
    return min(
        ScoreBounds.FINAL_SCORE_CAP,
        structural * CombinerWeights.STRUCTURAL
        + cognitive * CombinerWeights.COGNITIVE
        + maintainability * CombinerWeights.MAINTAINABILITY,
    )


def score_features(features: ComplexityFeatures) -> float:
    """Compute the combined score for an already extracted record."""
    return combine_scores(
        calculate_structural_complexity(features),
        calculate_cognitive_complexity(features),
        calculate_maintainability_complexity(features),
    )


def calculate_complexity_breakdown(
    code: str,
    language: Union[LanguageTag, str],
    overrides: Optional[PatternOverrides] = None
) -> ComplexityBreakdown:
    """Score code and keep every intermediate value.

    Args:
        code: Source code text
        language: Programming language (tag or name)
        overrides: Optional pattern overrides

    Returns:
        ComplexityBreakdown with features, sub-scores and final score
    """
    tag = resolve_language(language)
    features = extract_features(code, tag, overrides)

    structural = calculate_structural_complexity(features)
    cognitive = calculate_cognitive_complexity(features)
    maintainability = calculate_maintainability_complexity(features)
    score = combine_scores(structural, cognitive, maintainability)

    get_logger("complexity.scoring").debug(
        "complexity_scored",
        language=tag.value,
        lines=features.total_lines,
        overridden=overrides is not None and not overrides.is_empty(),
        score=round(score, 4),
    )

    return ComplexityBreakdown(
        language=tag,
        features=features,
        structural=structural,
        cognitive=cognitive,
        maintainability=maintainability,
        score=score,
    )


def calculate_complexity_score(code: str, language: Union[LanguageTag, str]) -> float:
    """Calculate the complexity score (0.0 to 10.0) for code in a language.

    Args:
        code: Source code text
        language: Programming language (tag or name)

    Returns:
        Combined complexity score
    """
    return calculate_complexity_breakdown(code, language).score


def calculate_complexity_score_with_overrides(
    code: str,
    language: Union[LanguageTag, str],
    overrides: PatternOverrides
) -> float:
    """Calculate the complexity score using caller-supplied patterns.

    Args:
        code: Source code text
        language: Programming language (tag or name)
        overrides: Per-category pattern replacements

    Returns:
        Combined complexity score
    """
    return calculate_complexity_breakdown(code, language, overrides).score
