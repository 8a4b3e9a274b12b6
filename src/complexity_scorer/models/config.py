"""Pydantic models for the scorer configuration file."""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from complexity_scorer.models.complexity import LanguageTag, PatternOverrides


class LanguagePatternConfig(BaseModel):
    """Pattern overrides declared for one language in the config file."""

    model_config = ConfigDict(extra="forbid")

    function_patterns: Optional[List[str]] = None
    control_flow_patterns: Optional[List[str]] = None
    operator_patterns: Optional[List[str]] = None
    opening_delimiters: Optional[List[str]] = None
    closing_delimiters: Optional[List[str]] = None
    comment_patterns: Optional[List[str]] = None

    def to_overrides(self) -> PatternOverrides:
        return PatternOverrides(**self.model_dump())


class ScorerConfig(BaseModel):
    """Top-level configuration file (YAML)."""

    model_config = ConfigDict(extra="forbid")

    languages: Dict[str, LanguagePatternConfig] = Field(default_factory=dict)

    @field_validator("languages")
    @classmethod
    def _known_languages(cls, value: Dict[str, LanguagePatternConfig]) -> Dict[str, LanguagePatternConfig]:
        unknown = [name for name in value if LanguageTag.from_name(name) is None]
        if unknown:
            raise ValueError(f"Unknown language(s): {', '.join(sorted(unknown))}")

        seen: Dict[LanguageTag, str] = {}
        for name in value:
            tag = LanguageTag.from_name(name)
            if tag in seen:
                raise ValueError(f"Languages '{seen[tag]}' and '{name}' both configure {tag.value}")
            seen[tag] = name
        return value

    def overrides_for(self, language: LanguageTag) -> Optional[PatternOverrides]:
        """Return the overrides configured for ``language``, if any."""
        for name, patterns in self.languages.items():
            if LanguageTag.from_name(name) is language:
                return patterns.to_overrides()
        return None
