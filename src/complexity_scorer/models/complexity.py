"""Data models for code complexity scoring."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from complexity_scorer.constants import ComplexityLevels


class LanguageTag(Enum):
    """Source languages with a dedicated pattern table."""

    ELIXIR = "elixir"
    RUST = "rust"
    PYTHON = "python"
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    JAVA = "java"
    CPP = "cpp"
    GO = "go"
    KOTLIN = "kotlin"
    CSHARP = "csharp"
    ERLANG = "erlang"
    GLEAM = "gleam"
    LUA = "lua"
    OTHER = "other"

    @classmethod
    def from_name(cls, name: str) -> Optional["LanguageTag"]:
        """Look up a tag by name or common alias (case-insensitive).

        Returns None for names that are not recognized.
        """
        key = name.strip().lower()
        try:
            return cls(key)
        except ValueError:
            return _LANGUAGE_ALIASES.get(key)


_LANGUAGE_ALIASES: Dict[str, LanguageTag] = {
    "ex": LanguageTag.ELIXIR,
    "exs": LanguageTag.ELIXIR,
    "rs": LanguageTag.RUST,
    "py": LanguageTag.PYTHON,
    "js": LanguageTag.JAVASCRIPT,
    "jsx": LanguageTag.JAVASCRIPT,
    "ts": LanguageTag.TYPESCRIPT,
    "tsx": LanguageTag.TYPESCRIPT,
    "c++": LanguageTag.CPP,
    "cxx": LanguageTag.CPP,
    "cc": LanguageTag.CPP,
    "golang": LanguageTag.GO,
    "kt": LanguageTag.KOTLIN,
    "kts": LanguageTag.KOTLIN,
    "c#": LanguageTag.CSHARP,
    "cs": LanguageTag.CSHARP,
    "erl": LanguageTag.ERLANG,
    "hrl": LanguageTag.ERLANG,
}


@dataclass(frozen=True)
class PatternSet:
    """Built-in textual patterns for one language."""

    function_patterns: Tuple[str, ...]
    control_flow_patterns: Tuple[str, ...]
    operator_patterns: Tuple[str, ...]
    comment_patterns: Tuple[str, ...]
    opening_delimiter: str
    closing_delimiter: str


@dataclass(frozen=True)
class PatternOverrides:
    """Caller-supplied replacements for pattern categories.

    A field left as None falls back to the language's built-in entry; any
    sequence (including an empty one) replaces that category entirely.
    Delimiters are lists here, unlike the single pair in PatternSet.
    """

    function_patterns: Optional[Tuple[str, ...]] = None
    control_flow_patterns: Optional[Tuple[str, ...]] = None
    operator_patterns: Optional[Tuple[str, ...]] = None
    opening_delimiters: Optional[Tuple[str, ...]] = None
    closing_delimiters: Optional[Tuple[str, ...]] = None
    comment_patterns: Optional[Tuple[str, ...]] = None

    def __post_init__(self) -> None:
        # Accept lists from callers but store tuples so instances stay hashable;
        # a bare string is one pattern, not a sequence of characters
        for name in (
            "function_patterns",
            "control_flow_patterns",
            "operator_patterns",
            "opening_delimiters",
            "closing_delimiters",
            "comment_patterns",
        ):
            value = getattr(self, name)
            if isinstance(value, str):
                object.__setattr__(self, name, (value,))
            elif value is not None and not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))

    def is_empty(self) -> bool:
        """True when no category is overridden."""
        return all(value is None for value in asdict(self).values())


@dataclass(frozen=True)
class ComplexityFeatures:
    """Measurements taken from one pass over one code text."""

    total_lines: int = 0
    non_empty_lines: int = 0
    function_count: int = 0
    control_flow_count: int = 0
    nesting_depth: int = 0
    operator_count: int = 0
    comment_ratio: float = 0.0
    identifier_length_avg: float = 0.0
    cyclomatic_complexity: float = 1.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ComplexityBreakdown:
    """Combined score together with the sub-scores and features behind it."""

    language: LanguageTag
    features: ComplexityFeatures
    structural: float
    cognitive: float
    maintainability: float
    score: float

    @property
    def level(self) -> str:
        return get_complexity_level(self.score)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "language": self.language.value,
            "score": round(self.score, 4),
            "level": self.level,
            "sub_scores": {
                "structural": round(self.structural, 4),
                "cognitive": round(self.cognitive, 4),
                "maintainability": round(self.maintainability, 4),
            },
            "features": self.features.to_dict(),
        }


def get_complexity_level(score: float) -> str:
    """Get complexity level from a combined score.

    Args:
        score: Combined complexity score

    Returns:
        Complexity level string: "low", "medium", or "high"
    """
    if score < ComplexityLevels.MEDIUM:
        return "low"
    elif score < ComplexityLevels.HIGH:
        return "medium"
    else:
        return "high"
