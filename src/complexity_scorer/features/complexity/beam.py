"""
Auxiliary heuristics that work on names instead of raw code.

Supervision and actor scores look for OTP/actor-model idioms (supervisors,
GenServers, spawn/send/receive) in lists of module or function names.
Pattern effectiveness turns one feature record into a 0-1 indicator.
"""

from typing import Iterable, Sequence

from complexity_scorer.constants import BeamWeights, EffectivenessThresholds, ScoreBounds
from complexity_scorer.models.complexity import ComplexityFeatures


def _count_containing(names: Iterable[str], *markers: str) -> int:
    return sum(1 for name in names if any(marker in name for marker in markers))


def calculate_pattern_effectiveness(pattern: str, metrics: ComplexityFeatures) -> float:
    """Rate how useful a pattern looks given the features of code using it.

    Averages three indicators: complexity reduction (cyclomatic > 5.0),
    maintainability boost (comment ratio > 0.2) and readability (average
    identifier length > 6.0). The pattern label does not affect the result.

    Args:
        pattern: Label of the pattern being rated
        metrics: Features of the code the pattern was applied to

    Returns:
        Effectiveness between 0.4 and 0.8
    """
    t = EffectivenessThresholds
    complexity_reduction = (
        t.COMPLEXITY_REDUCTION_HIGH if metrics.cyclomatic_complexity > t.CYCLOMATIC else t.COMPLEXITY_REDUCTION_LOW
    )
    maintainability_boost = (
        t.MAINTAINABILITY_BOOST_HIGH if metrics.comment_ratio > t.COMMENT_RATIO else t.MAINTAINABILITY_BOOST_LOW
    )
    readability = t.READABILITY_HIGH if metrics.identifier_length_avg > t.IDENTIFIER_LENGTH else t.READABILITY_LOW

    return (complexity_reduction + maintainability_boost + readability) / 3.0


def calculate_supervision_complexity(modules: Sequence[str]) -> float:
    """Score supervision-tree weight from module names.

    Args:
        modules: Module names

    Returns:
        0.5 per supervisor plus 0.3 per GenServer, capped at 10.0
    """
    if not modules:
        return 0.0

    supervisor_count = sum(1 for module in modules if "supervisor" in module.lower())
    genserver_count = _count_containing(modules, "GenServer", "gen_server")

    return min(
        ScoreBounds.AUX_SCORE_CAP,
        supervisor_count * BeamWeights.SUPERVISOR + genserver_count * BeamWeights.GENSERVER,
    )


def calculate_actor_complexity(functions: Sequence[str]) -> float:
    """Score message-passing weight from function references.

    Args:
        functions: Function names or call references (e.g. "Task.async/1")

    Returns:
        Weighted spawn/send/receive counts, capped at 10.0
    """
    if not functions:
        return 0.0

    spawn_count = _count_containing(functions, "spawn", "Task.async")
    send_count = _count_containing(functions, "send", "cast")
    receive_count = _count_containing(functions, "receive", "call")

    return min(
        ScoreBounds.AUX_SCORE_CAP,
        spawn_count * BeamWeights.SPAWN + send_count * BeamWeights.SEND + receive_count * BeamWeights.RECEIVE,
    )
