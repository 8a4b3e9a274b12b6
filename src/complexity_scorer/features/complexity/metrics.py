"""
Complexity feature extraction.

This module scans raw code text and produces a ComplexityFeatures record:
- Line counts (total and non-empty)
- Function, control flow and operator pattern counts
- Maximum nesting depth from delimiter balance
- Comment line ratio
- Average identifier length
- Cyclomatic complexity estimate

Everything is text based: substring counts and per-line scans, no parsing.
"""

from typing import List, Optional, Sequence, Union

from complexity_scorer.constants import CyclomaticWeights
from complexity_scorer.models.complexity import ComplexityFeatures, LanguageTag, PatternOverrides

from .patterns import (
    get_closing_pattern,
    get_comment_patterns,
    get_control_flow_patterns,
    get_function_patterns,
    get_opening_pattern,
    get_operator_patterns,
)

# =============================================================================
# TEXT HELPERS
# =============================================================================


def split_lines(code: str) -> List[str]:
    """Split code on newlines.

    A trailing newline does not produce an extra empty line, and a trailing
    carriage return is dropped from each line.

    Args:
        code: Source code text

    Returns:
        List of lines (empty for empty input)
    """
    lines = code.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _count_substring(text: str, pattern: str) -> int:
    # str.count("") is len(text) + 1; an empty pattern matches nothing here
    if not pattern:
        return 0
    return text.count(pattern)


def count_patterns(code: str, patterns: Sequence[str]) -> int:
    """Count non-overlapping occurrences of every pattern across the text.

    Args:
        code: Source code text
        patterns: Literal substrings to count

    Returns:
        Sum of per-pattern occurrence counts
    """
    total = 0
    for pattern in patterns:
        total += _count_substring(code, pattern)
    return total


# =============================================================================
# NESTING DEPTH
# =============================================================================


def calculate_max_nesting_depth_with_patterns(
    code: str,
    opening_patterns: Sequence[str],
    closing_patterns: Sequence[str]
) -> int:
    """Calculate maximum nesting depth from per-line delimiter balance.

    For each line the opening occurrences are added and the closing
    occurrences subtracted; the running depth never drops below zero.

    Args:
        code: Source code text
        opening_patterns: Tokens that open a level
        closing_patterns: Tokens that close a level

    Returns:
        Maximum depth observed on any line
    """
    max_depth = 0
    current_depth = 0

    for line in split_lines(code):
        trimmed = line.strip()
        current_depth += count_patterns(trimmed, opening_patterns)
        current_depth = max(0, current_depth - count_patterns(trimmed, closing_patterns))
        max_depth = max(max_depth, current_depth)

    return max_depth


def calculate_max_nesting_depth(code: str, language: Union[LanguageTag, str]) -> int:
    """Calculate maximum nesting depth using the language's delimiter pair.

    Args:
        code: Source code text
        language: Programming language

    Returns:
        Maximum nesting depth
    """
    return calculate_max_nesting_depth_with_patterns(
        code,
        [get_opening_pattern(language)],
        [get_closing_pattern(language)]
    )


# =============================================================================
# COMMENTS AND IDENTIFIERS
# =============================================================================


def _is_comment_line(stripped: str, comment_patterns: Sequence[str]) -> bool:
    return any(pattern and stripped.startswith(pattern) for pattern in comment_patterns)


def calculate_comment_ratio_with_patterns(code: str, comment_patterns: Sequence[str]) -> float:
    """Fraction of lines whose trimmed text starts with a comment prefix.

    Args:
        code: Source code text
        comment_patterns: Line-start comment prefixes

    Returns:
        Ratio in [0.0, 1.0]; 0.0 when there are no lines
    """
    lines = split_lines(code)
    if not lines:
        return 0.0

    comment_lines = sum(1 for line in lines if _is_comment_line(line.strip(), comment_patterns))
    return comment_lines / len(lines)


def calculate_comment_ratio(code: str, language: Union[LanguageTag, str]) -> float:
    """Comment line ratio using the language's comment prefixes."""
    return calculate_comment_ratio_with_patterns(code, get_comment_patterns(language))


def _is_identifier_token(token: str) -> bool:
    return all(char.isalnum() or char == "_" for char in token)


def calculate_avg_identifier_length(code: str, language: Union[LanguageTag, str, None] = None) -> float:
    """Average length of whitespace-separated identifier-like tokens.

    Only tokens made entirely of alphanumerics and underscores count. The
    language is accepted for signature symmetry and ignored.

    Args:
        code: Source code text
        language: Unused

    Returns:
        Mean token length, or 0.0 when no token qualifies
    """
    identifiers = [token for token in code.split() if _is_identifier_token(token)]
    if not identifiers:
        return 0.0
    return sum(len(token) for token in identifiers) / len(identifiers)


# =============================================================================
# CYCLOMATIC ESTIMATE
# =============================================================================


def calculate_cyclomatic_complexity_estimate(code: str, language: Union[LanguageTag, str]) -> float:
    """Estimate McCabe complexity from built-in pattern counts.

    Simplified: 1 + control flow markers + half the logical operators.
    Always uses the language's built-in patterns, never overrides.

    Args:
        code: Source code text
        language: Programming language

    Returns:
        Cyclomatic estimate (minimum 1.0)
    """
    control_flow_count = count_patterns(code, get_control_flow_patterns(language))
    operator_count = count_patterns(code, get_operator_patterns(language))
    return CyclomaticWeights.BASE + control_flow_count + operator_count * CyclomaticWeights.OPERATOR


# =============================================================================
# FEATURE EXTRACTION
# =============================================================================


def extract_features(
    code: str,
    language: Union[LanguageTag, str],
    overrides: Optional[PatternOverrides] = None
) -> ComplexityFeatures:
    """Extract complexity features from code.

    Overrides replace the function, control flow, operator, delimiter and
    comment patterns category by category. Identifier length and the
    cyclomatic estimate always come from the language's built-in logic.

    Args:
        code: Source code text
        language: Programming language (tag or name)
        overrides: Optional per-category pattern replacements

    Returns:
        ComplexityFeatures for the text
    """
    if overrides is None:
        overrides = PatternOverrides()

    def _pick(override: Optional[Sequence[str]], default: Sequence[str]) -> Sequence[str]:
        return default if override is None else override

    function_patterns = _pick(overrides.function_patterns, get_function_patterns(language))
    control_flow_patterns = _pick(overrides.control_flow_patterns, get_control_flow_patterns(language))
    operator_patterns = _pick(overrides.operator_patterns, get_operator_patterns(language))
    opening = _pick(overrides.opening_delimiters, [get_opening_pattern(language)])
    closing = _pick(overrides.closing_delimiters, [get_closing_pattern(language)])
    comment_patterns = _pick(overrides.comment_patterns, get_comment_patterns(language))

    lines = split_lines(code)

    return ComplexityFeatures(
        total_lines=len(lines),
        non_empty_lines=sum(1 for line in lines if line.strip()),
        function_count=count_patterns(code, function_patterns),
        control_flow_count=count_patterns(code, control_flow_patterns),
        nesting_depth=calculate_max_nesting_depth_with_patterns(code, opening, closing),
        operator_count=count_patterns(code, operator_patterns),
        comment_ratio=calculate_comment_ratio_with_patterns(code, comment_patterns),
        identifier_length_avg=calculate_avg_identifier_length(code, language),
        cyclomatic_complexity=calculate_cyclomatic_complexity_estimate(code, language),
    )


def extract_features_with_patterns(
    code: str,
    language: Union[LanguageTag, str],
    function_patterns: Sequence[str],
    control_flow_patterns: Sequence[str],
    operator_patterns: Sequence[str],
    opening_delimiters: Sequence[str],
    closing_delimiters: Sequence[str],
    comment_patterns: Sequence[str]
) -> ComplexityFeatures:
    """Extract features with every pattern category supplied explicitly."""
    return extract_features(
        code,
        language,
        PatternOverrides(
            function_patterns=tuple(function_patterns),
            control_flow_patterns=tuple(control_flow_patterns),
            operator_patterns=tuple(operator_patterns),
            opening_delimiters=tuple(opening_delimiters),
            closing_delimiters=tuple(closing_delimiters),
            comment_patterns=tuple(comment_patterns),
        )
    )
