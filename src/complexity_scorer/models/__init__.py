"""Data models for the complexity scorer."""

from complexity_scorer.models.complexity import (
    ComplexityBreakdown,
    ComplexityFeatures,
    LanguageTag,
    PatternOverrides,
    PatternSet,
    get_complexity_level,
)
from complexity_scorer.models.config import (
    LanguagePatternConfig,
    ScorerConfig,
)

__all__ = [
    # Complexity models
    "ComplexityBreakdown",
    "ComplexityFeatures",
    "LanguageTag",
    "PatternOverrides",
    "PatternSet",
    "get_complexity_level",
    # Config models
    "LanguagePatternConfig",
    "ScorerConfig",
]
