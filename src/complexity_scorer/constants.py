"""Shared constants across the complexity-scorer codebase.

This module centralizes the weights, caps and thresholds used by the
scoring pipeline so the heuristics can be read in one place.
"""


class ScoreBounds:
    """Caps applied to sub-scores and to the combined score."""

    SUB_SCORE_CAP = 5.0
    FINAL_SCORE_CAP = 10.0
    AUX_SCORE_CAP = 10.0


class CombinerWeights:
    """Weights used to blend the three sub-scores (sum to 1.0)."""

    STRUCTURAL = 0.4
    COGNITIVE = 0.4
    MAINTAINABILITY = 0.2


class StructuralWeights:
    """Structural sub-score coefficients."""

    FUNCTION_DENSITY = 2.0
    OPERATOR_DENSITY = 1.5
    NESTING_DIVISOR = 10.0


class CognitiveWeights:
    """Cognitive sub-score coefficients."""

    CONTROL_FLOW = 0.5
    NESTING = 0.8
    CYCLOMATIC = 0.3


class MaintainabilityThresholds:
    """Step-function thresholds for the maintainability sub-score.

    All comparisons are strict (value > threshold).
    """

    COMMENT_RATIO = 0.2
    IDENTIFIER_LENGTH = 8.0
    NON_EMPTY_LINES = 100

    WELL_COMMENTED = 0.5
    POORLY_COMMENTED = 2.0
    DESCRIPTIVE_NAMES = 0.5
    SHORT_NAMES = 1.5
    LONG_FILE = 1.5
    SHORT_FILE = 0.5


class CyclomaticWeights:
    """Cyclomatic estimate: BASE + control flow + OPERATOR * operators."""

    BASE = 1.0
    OPERATOR = 0.5


class EffectivenessThresholds:
    """Thresholds and indicator values for pattern effectiveness."""

    CYCLOMATIC = 5.0
    COMMENT_RATIO = 0.2
    IDENTIFIER_LENGTH = 6.0

    COMPLEXITY_REDUCTION_HIGH = 0.8
    COMPLEXITY_REDUCTION_LOW = 0.3
    MAINTAINABILITY_BOOST_HIGH = 0.9
    MAINTAINABILITY_BOOST_LOW = 0.4
    READABILITY_HIGH = 0.7
    READABILITY_LOW = 0.5


class BeamWeights:
    """Weights for supervision and actor heuristics."""

    SUPERVISOR = 0.5
    GENSERVER = 0.3
    SPAWN = 0.4
    SEND = 0.3
    RECEIVE = 0.3


class ComplexityLevels:
    """Score boundaries for the qualitative complexity level."""

    MEDIUM = 1.5
    HIGH = 3.0


class LoggingDefaults:
    """Logging configuration defaults."""

    DEFAULT_LEVEL = "INFO"
    MAX_BREADCRUMBS = 50  # Maximum Sentry breadcrumbs to keep


CONFIG_ENV_VAR = "COMPLEXITY_SCORER_CONFIG"
