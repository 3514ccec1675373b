"""
Tests for nsdebug.patterns — enable-string compilation and matching.

Covers tokenizing, wildcard translation, literal escaping, negation
precedence, the trailing-'*' rule, and canonical serialization.
"""

import pytest

from nsdebug.patterns import (
    Matcher,
    PatternSet,
    compile_matcher,
    compile_patterns,
    is_namespace_enabled,
)


# =============================================================================
# Compilation
# =============================================================================

class TestCompilePatterns:
    """Test compile_patterns() tokenizing."""

    def test_positive_and_negative_split(self):
        """Tokens with '-' become negatives, the rest positives."""
        ps = compile_patterns("app:*,-app:noisy")
        assert [m.pattern for m in ps.positives] == ["app:*"]
        assert [m.pattern for m in ps.negatives] == ["app:noisy"]

    def test_mixed_separators(self):
        """Commas and whitespace both separate tokens."""
        ps = compile_patterns("a, b  c\t-d,\n e")
        assert [m.pattern for m in ps.positives] == ["a", "b", "c", "e"]
        assert [m.pattern for m in ps.negatives] == ["d"]

    def test_empty_tokens_skipped(self):
        """Leading, trailing and repeated separators add nothing."""
        ps = compile_patterns(",, a ,,")
        assert len(ps.positives) == 1
        assert ps.negatives == ()

    @pytest.mark.parametrize("raw", ["", "   ", ",,,", None])
    def test_empty_input_is_empty_set(self, raw):
        """Empty or missing enable-strings compile to an empty set."""
        ps = compile_patterns(raw)
        assert ps == PatternSet()
        assert not ps

    def test_non_string_input_is_empty_set(self):
        """Non-string input degrades to the empty set."""
        assert compile_patterns(42) == PatternSet()


class TestCompileMatcher:
    """Test glob translation for a single pattern."""

    def test_literal_full_match_only(self):
        """Literal patterns match the whole name, not a prefix."""
        m = compile_matcher("app")
        assert m.matches("app")
        assert not m.matches("app:db")
        assert not m.matches("myapp")

    def test_star_matches_empty(self):
        """'*' matches zero characters."""
        assert compile_matcher("app:*").matches("app:")

    def test_star_in_middle(self):
        """'*' may sit anywhere in the pattern."""
        m = compile_matcher("a*z")
        assert m.matches("az")
        assert m.matches("abcz")
        assert not m.matches("abc")

    def test_star_spans_newlines(self):
        """'*' matches any character, including newlines."""
        assert compile_matcher("a*").matches("a\nb")

    def test_regex_metacharacters_are_literal(self):
        """'.', '(' and friends match themselves only."""
        m = compile_matcher("a.b")
        assert m.matches("a.b")
        assert not m.matches("axb")
        assert compile_matcher("x(y").matches("x(y")
        assert compile_matcher("[db]+").matches("[db]+")

    def test_matcher_keeps_source(self):
        """The original pattern text is retained."""
        assert isinstance(compile_matcher("a:*"), Matcher)
        assert compile_matcher("a:*").pattern == "a:*"


# =============================================================================
# Matching
# =============================================================================

class TestIsNamespaceEnabled:
    """Test negation-first evaluation."""

    @pytest.mark.parametrize("name", ["app", "app:db", "x.y", "a-b"])
    def test_literal_pattern_enables_itself(self, name):
        """A literal pattern enables exactly that name."""
        assert is_namespace_enabled(compile_patterns(name), name)

    @pytest.mark.parametrize("raw", ["x,-x", "-x,x", "-x x", "x -x"])
    def test_negation_wins_regardless_of_order(self, raw):
        """'-x' beats 'x' in either declaration order."""
        assert is_namespace_enabled(compile_patterns(raw), "x") is False

    def test_wildcard_expansion(self):
        """'app:*' covers nested namespaces, not siblings."""
        ps = compile_patterns("app:*")
        assert is_namespace_enabled(ps, "app:db")
        assert is_namespace_enabled(ps, "app:http:client")
        assert not is_namespace_enabled(ps, "other:db")

    def test_trailing_star_always_enabled(self):
        """Names ending in '*' are enabled even with nothing configured."""
        assert is_namespace_enabled(compile_patterns(""), "anything*")

    def test_trailing_star_beats_negation(self):
        """The trailing-'*' rule is checked before negatives."""
        assert is_namespace_enabled(compile_patterns("-app*"), "app*")

    def test_unmatched_is_disabled(self):
        """No positive match means disabled."""
        assert not is_namespace_enabled(compile_patterns("a,b"), "c")

    def test_negative_only_disables_everything(self):
        """Negatives alone enable nothing."""
        assert not is_namespace_enabled(compile_patterns("-a"), "b")

    def test_api_scenario(self):
        """api:* with api:internal carved out."""
        ps = compile_patterns("api:*,-api:internal")
        assert ps.is_enabled("api:public") is True
        assert ps.is_enabled("api:internal") is False
        assert ps.is_enabled("billing") is False


# =============================================================================
# Serialization
# =============================================================================

class TestToString:
    """Test PatternSet.to_string() canonical form."""

    def test_positives_then_negatives(self):
        """Negatives are moved after positives and re-prefixed."""
        ps = compile_patterns("-db:* app:*, web")
        assert ps.to_string() == "app:*,web,-db:*"

    def test_empty_set(self):
        assert PatternSet().to_string() == ""

    @pytest.mark.parametrize("raw", [
        "app:*,-app:noisy",
        "-x x",
        "a b c",
        "*,-*:verbose",
        "a.b (c) -[d]",
        "",
    ])
    def test_round_trip_is_equivalent(self, raw):
        """Recompiling the canonical string gives the same outcomes."""
        names = ["app", "app:db", "app:noisy", "x", "a", "b", "c", "a.b",
                 "(c)", "[d]", "net:verbose", "other", ""]
        original = compile_patterns(raw)
        restored = compile_patterns(original.to_string())
        for name in names:
            assert original.is_enabled(name) == restored.is_enabled(name), name
