"""Unit tests for complexity feature extraction."""

import pytest

from complexity_scorer.features.complexity.metrics import (
    calculate_avg_identifier_length,
    calculate_comment_ratio,
    calculate_cyclomatic_complexity_estimate,
    calculate_max_nesting_depth,
    calculate_max_nesting_depth_with_patterns,
    count_patterns,
    extract_features,
    extract_features_with_patterns,
    split_lines,
)
from complexity_scorer.models.complexity import ComplexityFeatures, LanguageTag, PatternOverrides


class TestSplitLines:
    """Line splitting."""

    def test_trailing_newline_does_not_add_line(self):
        assert split_lines("a\nb\n") == ["a", "b"]

    def test_carriage_returns_dropped(self):
        assert split_lines("a\r\nb\r\n") == ["a", "b"]

    def test_empty(self):
        assert split_lines("") == []

    def test_single_newline_is_one_blank_line(self):
        assert split_lines("\n") == [""]


class TestCountPatterns:
    """Global substring counting."""

    def test_counts_across_whole_text(self):
        assert count_patterns("if a:\n    if b:\n", ["if "]) == 2

    def test_non_overlapping(self):
        assert count_patterns("aaaa", ["aa"]) == 2

    def test_sums_patterns(self):
        assert count_patterns("a && b || c && d", ["&&", "||"]) == 3

    def test_empty_pattern_counts_zero(self):
        assert count_patterns("abc", [""]) == 0

    def test_substring_false_positives_accepted(self):
        # "in" inside "print" still counts
        assert count_patterns("print(x)", ["in"]) == 1


class TestNestingDepth:
    """Per-line delimiter balance."""

    def test_go_nesting(self, sample_go_code):
        assert calculate_max_nesting_depth(sample_go_code, LanguageTag.GO) == 2
        assert count_patterns(sample_go_code, ["{"]) == 2
        assert count_patterns(sample_go_code, ["}"]) == 2

    def test_never_below_zero(self):
        assert calculate_max_nesting_depth("}\n}\n{\n", LanguageTag.GO) == 1

    def test_python_depth_never_decreases(self):
        """Known limitation: Python has no closing token, so depth only grows."""
        code = "if a:\n    x = 1\ny = 2\nif b:\n    z = 3\n"
        assert calculate_max_nesting_depth(code, LanguageTag.PYTHON) == 2

    def test_lua_do_end(self):
        code = "while a do\n  for i = 1, 3 do\n    x()\n  end\nend\n"
        assert calculate_max_nesting_depth(code, LanguageTag.LUA) == 2

    def test_multiple_patterns(self):
        code = "begin\n  begin {\n  end }\nend\n"
        assert calculate_max_nesting_depth_with_patterns(code, ["begin", "{"], ["end", "}"]) == 3

    def test_same_line_open_close_nets_out(self):
        assert calculate_max_nesting_depth("x = {}\n", LanguageTag.RUST) == 0


class TestCommentRatio:
    """Comment line ratio."""

    def test_python_comments(self):
        code = "# a\nx = 1\n  # b\ny = 2\n"
        assert calculate_comment_ratio(code, LanguageTag.PYTHON) == 0.5

    def test_only_line_start_counts(self):
        assert calculate_comment_ratio("x = 1  # trailing\n", LanguageTag.PYTHON) == 0.0

    def test_c_style_block_opener(self):
        code = "/* header */\nint x;\n// note\nint y;\n"
        assert calculate_comment_ratio(code, LanguageTag.CPP) == 0.5

    def test_no_lines(self):
        assert calculate_comment_ratio("", LanguageTag.ERLANG) == 0.0


class TestIdentifierLength:
    """Average identifier length."""

    def test_only_word_tokens_count(self):
        assert calculate_avg_identifier_length("foo bar_baz x+y") == 5.0

    def test_none_found(self):
        assert calculate_avg_identifier_length("+ - ( )") == 0.0

    def test_language_is_ignored(self):
        code = "let total_amount = compute ( )"
        assert calculate_avg_identifier_length(code, LanguageTag.RUST) == calculate_avg_identifier_length(
            code, LanguageTag.LUA
        )


class TestCyclomaticEstimate:
    """Cyclomatic complexity estimate."""

    def test_base_is_one(self):
        assert calculate_cyclomatic_complexity_estimate("", LanguageTag.GO) == 1.0

    def test_control_flow_and_operators(self):
        assert calculate_cyclomatic_complexity_estimate("if (a && b) {}", LanguageTag.JAVASCRIPT) == 2.5


class TestExtractFeatures:
    """Full feature extraction."""

    def test_empty_input(self):
        features = extract_features("", LanguageTag.PYTHON)
        assert features == ComplexityFeatures()
        assert features.total_lines == 0
        assert features.non_empty_lines == 0
        assert features.comment_ratio == 0.0
        assert features.cyclomatic_complexity == 1.0

    def test_python_function(self, sample_python_code):
        features = extract_features(sample_python_code, LanguageTag.PYTHON)
        assert features.total_lines == 3
        assert features.non_empty_lines == 3
        assert features.function_count == 1
        assert features.control_flow_count == 1
        assert features.nesting_depth == 2
        assert features.operator_count == 0
        assert features.comment_ratio == 0.0
        assert features.identifier_length_avg == 3.0
        assert features.cyclomatic_complexity == 2.0

    def test_go_function(self, sample_go_code):
        features = extract_features(sample_go_code, "go")
        assert features.function_count == 1
        assert features.control_flow_count == 1
        assert features.nesting_depth == 2

    def test_blank_lines_count_toward_total_only(self):
        features = extract_features("x = 1\n\n   \ny = 2\n", LanguageTag.PYTHON)
        assert features.total_lines == 4
        assert features.non_empty_lines == 2

    def test_record_is_immutable(self):
        features = extract_features("x", LanguageTag.OTHER)
        with pytest.raises(AttributeError):
            features.total_lines = 5  # type: ignore[misc]

    def test_invariants_hold_for_samples(self, sample_snippets):
        for code in sample_snippets.values():
            for tag in LanguageTag:
                features = extract_features(code, tag)
                assert features.total_lines >= features.non_empty_lines >= 0
                assert features.function_count >= 0
                assert features.control_flow_count >= 0
                assert features.operator_count >= 0
                assert features.nesting_depth >= 0
                assert 0.0 <= features.comment_ratio <= 1.0
                assert features.identifier_length_avg >= 0.0
                assert features.cyclomatic_complexity >= 1.0


class TestOverrides:
    """Caller-supplied pattern overrides."""

    LAMBDA_CODE = "square = lambda x: x * x\n"

    def test_function_pattern_override(self):
        assert extract_features(self.LAMBDA_CODE, LanguageTag.PYTHON).function_count == 0
        overridden = extract_features(
            self.LAMBDA_CODE, LanguageTag.PYTHON, PatternOverrides(function_patterns=["lambda "])
        )
        assert overridden.function_count == 1

    def test_unset_categories_use_registry(self):
        features = extract_features(
            self.LAMBDA_CODE, LanguageTag.PYTHON, PatternOverrides(function_patterns=["lambda "])
        )
        assert features.nesting_depth == 1

    def test_empty_list_replaces_category(self):
        features = extract_features("# c\nx\n", LanguageTag.PYTHON, PatternOverrides(comment_patterns=[]))
        assert features.comment_ratio == 0.0

    def test_cyclomatic_and_identifiers_ignore_overrides(self):
        overrides = PatternOverrides(control_flow_patterns=["square"], operator_patterns=["*"])
        features = extract_features(self.LAMBDA_CODE, LanguageTag.PYTHON, overrides)
        assert features.control_flow_count == 1
        assert features.operator_count == 1
        assert features.cyclomatic_complexity == 1.0
        assert features.identifier_length_avg == extract_features(
            self.LAMBDA_CODE, LanguageTag.PYTHON
        ).identifier_length_avg

    def test_delimiter_lists(self):
        code = "begin\n  begin {\n  end }\nend\n"
        overrides = PatternOverrides(opening_delimiters=["begin", "{"], closing_delimiters=["end", "}"])
        assert extract_features(code, LanguageTag.OTHER, overrides).nesting_depth == 3

    def test_explicit_pattern_variant(self):
        features = extract_features_with_patterns(
            self.LAMBDA_CODE,
            LanguageTag.PYTHON,
            function_patterns=["lambda "],
            control_flow_patterns=[],
            operator_patterns=[],
            opening_delimiters=[":"],
            closing_delimiters=[],
            comment_patterns=["#"],
        )
        assert features.function_count == 1
        assert features.control_flow_count == 0
        assert features.nesting_depth == 1

    def test_overrides_store_tuples(self):
        overrides = PatternOverrides(function_patterns=["a", "b"])
        assert overrides.function_patterns == ("a", "b")
        assert not overrides.is_empty()
        assert PatternOverrides().is_empty()

    def test_bare_string_is_one_pattern(self):
        overrides = PatternOverrides(function_patterns="lambda ")  # type: ignore[arg-type]
        assert overrides.function_patterns == ("lambda ",)
        assert extract_features(self.LAMBDA_CODE, LanguageTag.PYTHON, overrides).function_count == 1
