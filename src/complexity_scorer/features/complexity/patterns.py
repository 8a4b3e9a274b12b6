"""
Language pattern registry.

Each supported language maps to literal substrings used as cheap proxies for
syntax: function declarations, control flow, logical/comparison operators,
line comments, and one opening/closing nesting delimiter pair. Matching is
plain substring counting, so markers inside strings or comments are counted
too.

Python uses ``:`` as its opening delimiter with an empty closing delimiter,
so its nesting depth never decreases within a file.
"""

from types import MappingProxyType
from typing import Mapping, Tuple, Union

from complexity_scorer.core.logging import get_logger
from complexity_scorer.models.complexity import LanguageTag, PatternSet

# =============================================================================
# SHARED PATTERN GROUPS
# =============================================================================

_C_STYLE_COMMENTS = ("//", "/*")
_C_STYLE_OPERATORS = ("&&", "||", "!", "==", "!=")
_JS_OPERATORS = ("&&", "||", "!", "===", "!==")
_C_STYLE_CONTROL_FLOW = ("if ", "else ", "for ", "while ", "switch ", "try ")
_JS_FUNCTIONS = ("function ", "=> ", "async function ")

# =============================================================================
# PATTERN TABLES
# =============================================================================

FALLBACK_PATTERNS = PatternSet(
    function_patterns=("def ", "function ", "fn "),
    control_flow_patterns=("if ", "else ", "for ", "while ", "case "),
    operator_patterns=_C_STYLE_OPERATORS,
    comment_patterns=("//", "#"),
    opening_delimiter="{",
    closing_delimiter="}",
)

LANGUAGE_PATTERNS: Mapping[LanguageTag, PatternSet] = MappingProxyType({
    LanguageTag.ELIXIR: PatternSet(
        function_patterns=("def ", "defp ", "defmacro "),
        control_flow_patterns=("if ", "unless ", "case ", "cond ", "with ", "for ", "while "),
        operator_patterns=("&&", "||", "and", "or", "|>", "->", "=>"),
        comment_patterns=("#",),
        opening_delimiter="{",
        closing_delimiter="}",
    ),
    LanguageTag.RUST: PatternSet(
        function_patterns=("fn ", "async fn "),
        control_flow_patterns=("if ", "match ", "while ", "for ", "loop "),
        operator_patterns=("&&", "||", "&", "|", "->", "=>"),
        comment_patterns=_C_STYLE_COMMENTS,
        opening_delimiter="{",
        closing_delimiter="}",
    ),
    LanguageTag.PYTHON: PatternSet(
        function_patterns=("def ", "async def "),
        control_flow_patterns=("if ", "elif ", "else ", "for ", "while ", "try "),
        operator_patterns=("and", "or", "not", "in", "is"),
        comment_patterns=("#",),
        opening_delimiter=":",
        closing_delimiter="",
    ),
    LanguageTag.JAVASCRIPT: PatternSet(
        function_patterns=_JS_FUNCTIONS,
        control_flow_patterns=_C_STYLE_CONTROL_FLOW,
        operator_patterns=_JS_OPERATORS,
        comment_patterns=_C_STYLE_COMMENTS,
        opening_delimiter="{",
        closing_delimiter="}",
    ),
    LanguageTag.TYPESCRIPT: PatternSet(
        function_patterns=_JS_FUNCTIONS,
        control_flow_patterns=_C_STYLE_CONTROL_FLOW,
        operator_patterns=_JS_OPERATORS,
        comment_patterns=_C_STYLE_COMMENTS,
        opening_delimiter="{",
        closing_delimiter="}",
    ),
    LanguageTag.JAVA: PatternSet(
        function_patterns=("public ", "private ", "protected "),
        control_flow_patterns=_C_STYLE_CONTROL_FLOW,
        operator_patterns=_C_STYLE_OPERATORS,
        comment_patterns=_C_STYLE_COMMENTS,
        opening_delimiter="{",
        closing_delimiter="}",
    ),
    LanguageTag.CPP: PatternSet(
        function_patterns=("void ", "int ", "bool ", "string ", "char ", "float "),
        control_flow_patterns=_C_STYLE_CONTROL_FLOW,
        operator_patterns=_C_STYLE_OPERATORS,
        comment_patterns=_C_STYLE_COMMENTS,
        opening_delimiter="{",
        closing_delimiter="}",
    ),
    LanguageTag.GO: PatternSet(
        function_patterns=("func ",),
        control_flow_patterns=("if ", "else ", "for ", "switch "),
        operator_patterns=_C_STYLE_OPERATORS,
        comment_patterns=_C_STYLE_COMMENTS,
        opening_delimiter="{",
        closing_delimiter="}",
    ),
    LanguageTag.KOTLIN: PatternSet(
        function_patterns=("fun ", "class ", "object "),
        control_flow_patterns=("if ", "else ", "for ", "while ", "when ", "try "),
        operator_patterns=("&&", "||", "!", "==", "!=", "===", "!=="),
        comment_patterns=_C_STYLE_COMMENTS,
        opening_delimiter="{",
        closing_delimiter="}",
    ),
    LanguageTag.CSHARP: PatternSet(
        function_patterns=("void ", "public ", "private ", "async "),
        control_flow_patterns=_C_STYLE_CONTROL_FLOW,
        operator_patterns=("&&", "||", "!", "==", "!=", "??"),
        comment_patterns=_C_STYLE_COMMENTS,
        opening_delimiter="{",
        closing_delimiter="}",
    ),
    LanguageTag.ERLANG: PatternSet(
        function_patterns=("-spec ", "when "),
        control_flow_patterns=("case ", "if ", "receive "),
        operator_patterns=("and", "or", "not", "andalso", "orelse"),
        comment_patterns=("%",),
        opening_delimiter="(",
        closing_delimiter=")",
    ),
    LanguageTag.GLEAM: PatternSet(
        function_patterns=("pub fn ", "fn "),
        control_flow_patterns=("case ", "if ", "try "),
        operator_patterns=_C_STYLE_OPERATORS,
        comment_patterns=("//",),
        opening_delimiter="{",
        closing_delimiter="}",
    ),
    LanguageTag.LUA: PatternSet(
        function_patterns=("function ",),
        control_flow_patterns=("if ", "elseif ", "for ", "while "),
        operator_patterns=("and", "or", "not"),
        comment_patterns=("--",),
        opening_delimiter="do",
        closing_delimiter="end",
    ),
})


def resolve_language(language: Union[LanguageTag, str]) -> LanguageTag:
    """Normalize a tag or language name to a LanguageTag.

    Unrecognized names resolve to LanguageTag.OTHER.

    Args:
        language: LanguageTag or a name/alias such as "python", "c++", "ts"

    Returns:
        The matching LanguageTag
    """
    if isinstance(language, LanguageTag):
        return language
    tag = LanguageTag.from_name(language)
    if tag is None:
        get_logger("complexity.patterns").debug("language_fallback", language=language)
        return LanguageTag.OTHER
    return tag


def get_pattern_set(language: Union[LanguageTag, str]) -> PatternSet:
    """Get the full built-in pattern set for a language.

    Args:
        language: LanguageTag or language name

    Returns:
        The language's PatternSet, or FALLBACK_PATTERNS when it has none
    """
    return LANGUAGE_PATTERNS.get(resolve_language(language), FALLBACK_PATTERNS)


def get_function_patterns(language: Union[LanguageTag, str]) -> Tuple[str, ...]:
    """Function declaration markers for a language."""
    return get_pattern_set(language).function_patterns


def get_control_flow_patterns(language: Union[LanguageTag, str]) -> Tuple[str, ...]:
    """Conditional, loop and exception markers for a language."""
    return get_pattern_set(language).control_flow_patterns


def get_operator_patterns(language: Union[LanguageTag, str]) -> Tuple[str, ...]:
    """Logical and comparison operator markers for a language."""
    return get_pattern_set(language).operator_patterns


def get_comment_patterns(language: Union[LanguageTag, str]) -> Tuple[str, ...]:
    """Line-start comment prefixes for a language."""
    return get_pattern_set(language).comment_patterns


def get_opening_pattern(language: Union[LanguageTag, str]) -> str:
    """Token that opens a nesting level."""
    return get_pattern_set(language).opening_delimiter


def get_closing_pattern(language: Union[LanguageTag, str]) -> str:
    """Token that closes a nesting level (empty for Python)."""
    return get_pattern_set(language).closing_delimiter
