"""
Code complexity scoring feature.

This module provides a fast, text-based complexity score for code snippets:
- Language pattern registry
- Feature extraction (pattern counts, nesting depth, comment ratio, ...)
- Structural, cognitive and maintainability sub-scores
- Combined 0-10 score
- Supervision and actor heuristics for BEAM-style code
"""

from .beam import (
    calculate_actor_complexity,
    calculate_pattern_effectiveness,
    calculate_supervision_complexity,
)
from .metrics import (
    calculate_avg_identifier_length,
    calculate_comment_ratio,
    calculate_comment_ratio_with_patterns,
    calculate_cyclomatic_complexity_estimate,
    calculate_max_nesting_depth,
    calculate_max_nesting_depth_with_patterns,
    count_patterns,
    extract_features,
    extract_features_with_patterns,
)
from .patterns import (
    FALLBACK_PATTERNS,
    LANGUAGE_PATTERNS,
    get_closing_pattern,
    get_comment_patterns,
    get_control_flow_patterns,
    get_function_patterns,
    get_opening_pattern,
    get_operator_patterns,
    get_pattern_set,
    resolve_language,
)
from .scoring import (
    calculate_cognitive_complexity,
    calculate_complexity_breakdown,
    calculate_complexity_score,
    calculate_complexity_score_with_overrides,
    calculate_maintainability_complexity,
    calculate_structural_complexity,
    combine_scores,
    score_features,
)
from .tools import register_complexity_tools

__all__ = [
    # Patterns
    "FALLBACK_PATTERNS",
    "LANGUAGE_PATTERNS",
    "get_closing_pattern",
    "get_comment_patterns",
    "get_control_flow_patterns",
    "get_function_patterns",
    "get_opening_pattern",
    "get_operator_patterns",
    "get_pattern_set",
    "resolve_language",
    # Metrics
    "calculate_avg_identifier_length",
    "calculate_comment_ratio",
    "calculate_comment_ratio_with_patterns",
    "calculate_cyclomatic_complexity_estimate",
    "calculate_max_nesting_depth",
    "calculate_max_nesting_depth_with_patterns",
    "count_patterns",
    "extract_features",
    "extract_features_with_patterns",
    # Scoring
    "calculate_cognitive_complexity",
    "calculate_complexity_breakdown",
    "calculate_complexity_score",
    "calculate_complexity_score_with_overrides",
    "calculate_maintainability_complexity",
    "calculate_structural_complexity",
    "combine_scores",
    "score_features",
    # Auxiliary heuristics
    "calculate_actor_complexity",
    "calculate_pattern_effectiveness",
    "calculate_supervision_complexity",
    # Tools
    "register_complexity_tools",
]
