"""
Complexity scoring MCP tools.

This module exposes the scoring pipeline and the auxiliary heuristics as MCP
tools. The tool functions are plain callables so they can be used and
tested without a server.
"""

import time
from typing import Any, Dict, List, Optional

import sentry_sdk
from pydantic import Field

from complexity_scorer.core.config import get_configured_overrides
from complexity_scorer.core.logging import get_logger
from complexity_scorer.models.complexity import LanguageTag, PatternOverrides

from .beam import (
    calculate_actor_complexity,
    calculate_pattern_effectiveness,
    calculate_supervision_complexity,
)
from .metrics import extract_features
from .patterns import resolve_language
from .scoring import calculate_complexity_breakdown


def _merge_overrides(
    language: LanguageTag,
    explicit: PatternOverrides
) -> Optional[PatternOverrides]:
    """Combine explicit tool arguments with config-file overrides.

    Explicit arguments win category by category.

    Args:
        language: Resolved language
        explicit: Overrides built from tool arguments

    Returns:
        Merged overrides, or None when nothing is overridden
    """
    configured = get_configured_overrides(language)
    if configured is None:
        return None if explicit.is_empty() else explicit

    def _first(a: Optional[Any], b: Optional[Any]) -> Optional[Any]:
        return a if a is not None else b

    return PatternOverrides(
        function_patterns=_first(explicit.function_patterns, configured.function_patterns),
        control_flow_patterns=_first(explicit.control_flow_patterns, configured.control_flow_patterns),
        operator_patterns=_first(explicit.operator_patterns, configured.operator_patterns),
        opening_delimiters=_first(explicit.opening_delimiters, configured.opening_delimiters),
        closing_delimiters=_first(explicit.closing_delimiters, configured.closing_delimiters),
        comment_patterns=_first(explicit.comment_patterns, configured.comment_patterns),
    )


def _report_failure(tool: str, error: Exception, start_time: float, **extras: Any) -> None:
    execution_time = round(time.time() - start_time, 3)
    get_logger(f"tool.{tool}").error(
        "tool_failed",
        tool=tool,
        execution_time_seconds=execution_time,
        error=str(error)[:200],
        status="failed"
    )
    sentry_sdk.capture_exception(error, extras={"tool": tool, "execution_time_seconds": execution_time, **extras})


def score_complexity_tool(
    code: str,
    language: str,
    function_patterns: Optional[List[str]] = None,
    control_flow_patterns: Optional[List[str]] = None,
    operator_patterns: Optional[List[str]] = None,
    opening_delimiters: Optional[List[str]] = None,
    closing_delimiters: Optional[List[str]] = None,
    comment_patterns: Optional[List[str]] = None
) -> Dict[str, Any]:
    """
    Score the complexity of a code snippet.

    Returns the combined score (0-10, effectively 0-5), its qualitative
    level, the structural/cognitive/maintainability sub-scores and the
    extracted features. Any pattern argument replaces the built-in patterns
    for that category; omitted categories use config-file overrides for the
    language when present, then the built-in tables.

    Args:
        code: Source code text
        language: Language name (python, rust, go, elixir, ...); unknown names use generic patterns
        function_patterns: Function declaration markers
        control_flow_patterns: Control flow markers
        operator_patterns: Operator markers
        opening_delimiters: Tokens that open a nesting level
        closing_delimiters: Tokens that close a nesting level
        comment_patterns: Line-start comment prefixes

    Returns:
        Dictionary with score, level, sub_scores, features and language

    Example usage:
        score_complexity_tool(code="def f():\\n    return 1\\n", language="python")
    """
    logger = get_logger("tool.score_complexity")
    start_time = time.time()

    logger.info("tool_invoked", tool="score_complexity", language=language, code_length=len(code))

    try:
        tag = resolve_language(language)
        explicit = PatternOverrides(
            function_patterns=function_patterns,
            control_flow_patterns=control_flow_patterns,
            operator_patterns=operator_patterns,
            opening_delimiters=opening_delimiters,
            closing_delimiters=closing_delimiters,
            comment_patterns=comment_patterns,
        )
        overrides = _merge_overrides(tag, explicit)
        breakdown = calculate_complexity_breakdown(code, tag, overrides)

        result = breakdown.to_dict()
        result["overrides_applied"] = overrides is not None

        logger.info(
            "tool_completed",
            tool="score_complexity",
            language=tag.value,
            score=result["score"],
            execution_time_seconds=round(time.time() - start_time, 3),
            status="success"
        )
        return result

    except Exception as e:
        _report_failure("score_complexity", e, start_time, language=language)
        raise


def extract_complexity_features_tool(code: str, language: str) -> Dict[str, Any]:
    """Extract the raw complexity features of a code snippet.

    Args:
        code: Source code text
        language: Language name

    Returns:
        Dictionary with the resolved language and the feature values
    """
    logger = get_logger("tool.extract_complexity_features")
    start_time = time.time()
    logger.info("tool_invoked", tool="extract_complexity_features", language=language)

    try:
        tag = resolve_language(language)
        features = extract_features(code, tag, get_configured_overrides(tag))
        logger.info(
            "tool_completed",
            tool="extract_complexity_features",
            execution_time_seconds=round(time.time() - start_time, 3),
            status="success"
        )
        return {"language": tag.value, "features": features.to_dict()}
    except Exception as e:
        _report_failure("extract_complexity_features", e, start_time, language=language)
        raise


def score_pattern_effectiveness_tool(pattern: str, code: str, language: str) -> Dict[str, Any]:
    """Rate a pattern by the features of code that uses it.

    Args:
        pattern: Label of the pattern being rated
        code: Code the pattern was applied to
        language: Language name

    Returns:
        Dictionary with pattern, effectiveness and language
    """
    logger = get_logger("tool.score_pattern_effectiveness")
    start_time = time.time()
    logger.info("tool_invoked", tool="score_pattern_effectiveness", pattern=pattern, language=language)

    try:
        tag = resolve_language(language)
        features = extract_features(code, tag, get_configured_overrides(tag))
        effectiveness = calculate_pattern_effectiveness(pattern, features)
        logger.info(
            "tool_completed",
            tool="score_pattern_effectiveness",
            effectiveness=round(effectiveness, 4),
            execution_time_seconds=round(time.time() - start_time, 3),
            status="success"
        )
        return {"pattern": pattern, "language": tag.value, "effectiveness": round(effectiveness, 4)}
    except Exception as e:
        _report_failure("score_pattern_effectiveness", e, start_time, pattern=pattern)
        raise


def score_beam_complexity_tool(
    module_names: Optional[List[str]] = None,
    function_names: Optional[List[str]] = None
) -> Dict[str, Any]:
    """Score supervision and actor complexity from names.

    Args:
        module_names: Module names (for supervision complexity)
        function_names: Function references (for actor complexity)

    Returns:
        Dictionary with supervision_complexity and actor_complexity
    """
    logger = get_logger("tool.score_beam_complexity")
    start_time = time.time()
    module_names = module_names or []
    function_names = function_names or []
    logger.info(
        "tool_invoked",
        tool="score_beam_complexity",
        module_count=len(module_names),
        function_count=len(function_names)
    )

    try:
        result = {
            "supervision_complexity": round(calculate_supervision_complexity(module_names), 4),
            "actor_complexity": round(calculate_actor_complexity(function_names), 4),
        }
        logger.info(
            "tool_completed",
            tool="score_beam_complexity",
            execution_time_seconds=round(time.time() - start_time, 3),
            status="success"
        )
        return result
    except Exception as e:
        _report_failure("score_beam_complexity", e, start_time)
        raise


def register_complexity_tools(mcp: Any) -> None:
    """Register complexity scoring tools with the MCP server.

    Args:
        mcp: FastMCP server instance
    """

    @mcp.tool()  # type: ignore[misc]
    def score_complexity(
        code: str = Field(description="Source code snippet to score"),
        language: str = Field(description="Language name (python, rust, go, elixir, erlang, lua, ...)"),
        function_patterns: Optional[List[str]] = Field(default=None, description="Override function declaration markers"),
        control_flow_patterns: Optional[List[str]] = Field(default=None, description="Override control flow markers"),
        operator_patterns: Optional[List[str]] = Field(default=None, description="Override operator markers"),
        opening_delimiters: Optional[List[str]] = Field(default=None, description="Override nesting opening tokens"),
        closing_delimiters: Optional[List[str]] = Field(default=None, description="Override nesting closing tokens"),
        comment_patterns: Optional[List[str]] = Field(default=None, description="Override line comment prefixes")
    ) -> Dict[str, Any]:
        """Wrapper that calls the standalone score_complexity_tool function."""
        return score_complexity_tool(
            code=code,
            language=language,
            function_patterns=function_patterns,
            control_flow_patterns=control_flow_patterns,
            operator_patterns=operator_patterns,
            opening_delimiters=opening_delimiters,
            closing_delimiters=closing_delimiters,
            comment_patterns=comment_patterns
        )

    @mcp.tool()  # type: ignore[misc]
    def extract_complexity_features(
        code: str = Field(description="Source code snippet to analyze"),
        language: str = Field(description="Language name")
    ) -> Dict[str, Any]:
        """Wrapper that calls the standalone extract_complexity_features_tool function."""
        return extract_complexity_features_tool(code=code, language=language)

    @mcp.tool()  # type: ignore[misc]
    def score_pattern_effectiveness(
        pattern: str = Field(description="Label of the pattern being rated"),
        code: str = Field(description="Code the pattern was applied to"),
        language: str = Field(description="Language name")
    ) -> Dict[str, Any]:
        """Wrapper that calls the standalone score_pattern_effectiveness_tool function."""
        return score_pattern_effectiveness_tool(pattern=pattern, code=code, language=language)

    @mcp.tool()  # type: ignore[misc]
    def score_beam_complexity(
        module_names: List[str] = Field(default_factory=list, description="Module names, e.g. ['MyApp.Supervisor']"),
        function_names: List[str] = Field(default_factory=list, description="Function references, e.g. ['Task.async/1']")
    ) -> Dict[str, Any]:
        """Wrapper that calls the standalone score_beam_complexity_tool function."""
        return score_beam_complexity_tool(module_names=module_names, function_names=function_names)
