"""Tests for plural segment parsing and plural form selection."""

import pytest

from transchoice.runtime.selector import (
    ExactCondition,
    PluralSegment,
    RangeCondition,
    choose_plural_form,
    parse_segments,
    segment_matches,
)


class TestParseSegments:
    """Splitting templates into conditioned and plain segments."""

    def test_plain_alternatives(self) -> None:
        """Unmarked parts become unconditioned segments in order."""
        assert parse_segments("item|items") == (
            PluralSegment("item"),
            PluralSegment("items"),
        )

    def test_exact_and_range_markers(self) -> None:
        """{n} and [a,b] markers become conditions on the remainder."""
        segments = parse_segments("{0} No items|{1} One item|[2,*] :count items")
        assert segments == (
            PluralSegment("No items", ExactCondition(0)),
            PluralSegment("One item", ExactCondition(1)),
            PluralSegment(":count items", RangeCondition(2, None)),
        )

    def test_unbounded_lower_side(self) -> None:
        """[*,b] has no lower bound."""
        (segment,) = parse_segments("[*,5] up to five")
        assert segment.condition == RangeCondition(None, 5)

    def test_whitespace_trimmed(self) -> None:
        """Whitespace around each part is removed."""
        assert [s.value for s in parse_segments("  one  |  many  ")] == ["one", "many"]

    def test_marker_without_space(self) -> None:
        """Whitespace between marker and text is optional."""
        (segment,) = parse_segments("{3}three")
        assert segment == PluralSegment("three", ExactCondition(3))

    def test_negative_bounds(self) -> None:
        """Signed integers are accepted in markers."""
        (segment,) = parse_segments("[-5,-1] below zero")
        assert segment.condition == RangeCondition(-5, -1)

    def test_escaped_pipe_not_split(self) -> None:
        r"""A backslash-escaped pipe stays inside its segment as "|"."""
        segments = parse_segments(r"a\|b|c")
        assert [s.value for s in segments] == ["a|b", "c"]

    def test_escaped_pipe_in_conditioned_segment(self) -> None:
        r"""Escaped pipes are restored in conditioned values too."""
        (segment,) = parse_segments(r"{1} x \| y")
        assert segment == PluralSegment("x | y", ExactCondition(1))

    def test_empty_template(self) -> None:
        """The empty template is a single empty segment."""
        assert parse_segments("") == (PluralSegment(""),)

    def test_marker_without_text_is_plain(self) -> None:
        """A marker with nothing after it is literal text."""
        assert parse_segments("{0}") == (PluralSegment("{0}"),)

    def test_non_integer_exact_marker_demoted(self) -> None:
        """{x} that is not an integer leaves the whole part as plain text."""
        assert parse_segments("{abc} text|other") == (
            PluralSegment("{abc} text"),
            PluralSegment("other"),
        )

    @pytest.mark.parametrize(
        ("template", "condition"),
        [
            ("{1.5} x", ExactCondition(1)),
            ("{2abc} x", ExactCondition(2)),
            ("{ 3 } x", ExactCondition(3)),
            ("[1.5,2] x", RangeCondition(1, 2)),
            ("[ 2,5x] x", RangeCondition(2, 5)),
            ("[1,2,3] x", RangeCondition(1, 2)),
        ],
    )
    def test_marker_reads_leading_integer(self, template: str, condition: object) -> None:
        """Marker numbers keep their leading integer and ignore the rest."""
        (segment,) = parse_segments(template)
        assert segment == PluralSegment("x", condition)

    @pytest.mark.parametrize(
        "template",
        ["[a,5] bad|fine", "[1,b] bad|fine", "[1] bad|fine", "[2, *] bad|fine", "[* ,2] bad|fine"],
    )
    def test_malformed_range_dropped(self, template: str) -> None:
        """Ranges with a side that is not exactly * and has no leading integer are dropped."""
        assert parse_segments(template) == (PluralSegment("fine"),)

    def test_fractional_range_selects(self) -> None:
        """[1.5,2] acts as [1,2] during selection."""
        assert choose_plural_form("[1.5,2] range|other", 2) == "range"


class TestSegmentMatches:
    """Condition evaluation for a single segment."""

    def test_exact(self) -> None:
        """Exact conditions match one count."""
        segment = PluralSegment("x", ExactCondition(3))
        assert segment_matches(3, segment)
        assert not segment_matches(4, segment)

    def test_range_inclusive(self) -> None:
        """Both range bounds are inclusive."""
        segment = PluralSegment("x", RangeCondition(2, 10))
        assert segment_matches(2, segment)
        assert segment_matches(10, segment)
        assert not segment_matches(1, segment)
        assert not segment_matches(11, segment)

    def test_unbounded_range(self) -> None:
        """None bounds extend to infinity."""
        assert segment_matches(10**12, PluralSegment("x", RangeCondition(2, None)))
        assert segment_matches(-(10**12), PluralSegment("x", RangeCondition(None, 0)))

    def test_unconditioned_matches_above_one(self) -> None:
        """Plain segments match counts greater than one."""
        segment = PluralSegment("x")
        assert segment_matches(2, segment)
        assert not segment_matches(1, segment)
        assert not segment_matches(0, segment)


class TestChoosePluralForm:
    """Two-tier plural form selection."""

    def test_english_simple(self) -> None:
        """English picks singular for 1 and plural for 0."""
        assert choose_plural_form("item|items", 1, "en") == "item"
        assert choose_plural_form("item|items", 0, "en") == "items"

    def test_default_locale_is_english(self) -> None:
        """Without a locale English rules apply."""
        assert choose_plural_form("item|items", 1) == "item"
        assert choose_plural_form("item|items", 2) == "items"

    def test_french_zero_is_singular(self) -> None:
        """French treats 0 as singular."""
        assert choose_plural_form("article|articles", 0, "fr") == "article"

    def test_russian_three_forms(self) -> None:
        """Russian picks the few-form for 22."""
        assert choose_plural_form("яблоко|яблока|яблок", 22, "ru") == "яблока"

    def test_explicit_conditions_take_priority(self) -> None:
        """A matching condition wins over locale rules."""
        template = "{0} No items|{1} One item|[2,*] :count items"
        assert choose_plural_form(template, 0, "en") == "No items"
        assert choose_plural_form(template, 1, "en") == "One item"
        assert choose_plural_form(template, 5, "en") == ":count items"

    def test_conditions_ignore_locale(self) -> None:
        """Matching {n} segments are chosen for every locale."""
        for locale in ("en", "fr", "ru", "ja", "ar"):
            assert choose_plural_form("{0} none|{1} one|{2} two", 2, locale) == "two"

    def test_unmatched_conditions_fall_back_to_locale_rule(self) -> None:
        """With no matching condition the stripped values are indexed."""
        assert choose_plural_form("{0} none|{1} one|{2} two", 5, "en") == "one"
        assert choose_plural_form("{0} zero|{1} one", 5, "en") == "one"

    def test_first_matching_condition_wins(self) -> None:
        """Overlapping conditions resolve in source order."""
        assert choose_plural_form("[0,10] low|[5,*] high", 7) == "low"

    def test_ranges(self) -> None:
        """Range boundaries select the expected segment."""
        template = "[0,1] few|[2,10] some|[11,*] many"
        assert choose_plural_form(template, 0) == "few"
        assert choose_plural_form(template, 1) == "few"
        assert choose_plural_form(template, 2) == "some"
        assert choose_plural_form(template, 10) == "some"
        assert choose_plural_form(template, 11) == "many"
        assert choose_plural_form(template, 100) == "many"

    def test_open_lower_range(self) -> None:
        """[*,n] covers everything up to n."""
        template = "[*,5] up to five|[6,*] more than five"
        assert choose_plural_form(template, 3) == "up to five"
        assert choose_plural_form(template, 5) == "up to five"
        assert choose_plural_form(template, 6) == "more than five"

    def test_plain_segment_in_conditioned_template(self) -> None:
        """A plain alternative among conditions matches counts above one."""
        assert choose_plural_form("{0} none|several", 3, "en") == "several"
        assert choose_plural_form("{0} none|several", 0, "en") == "none"

    def test_single_form_language(self) -> None:
        """Japanese always uses the first alternative."""
        for n in (0, 1, 100):
            assert choose_plural_form("item|items", n, "ja") == "item"

    def test_index_beyond_alternatives(self) -> None:
        """Too few alternatives for the locale rule falls back to the first."""
        assert choose_plural_form("one|other", 5, "ru") == "one"
        assert choose_plural_form("one|other", 100, "ar") == "one"

    def test_no_separator_returns_template(self) -> None:
        """A template without pipes is returned as is."""
        for n in (0, 1, 5):
            assert choose_plural_form("items", n, "en") == "items"

    def test_empty_template(self) -> None:
        """The empty template selects the empty string."""
        assert choose_plural_form("", 5, "en") == ""

    def test_whitespace_around_segments(self) -> None:
        """Selected text is trimmed."""
        assert choose_plural_form("  one  |  many  ", 1) == "one"
        assert choose_plural_form("  one  |  many  ", 5) == "many"

    def test_escaped_pipe_in_selection(self) -> None:
        r"""An escaped pipe survives into the selected text."""
        assert choose_plural_form(r"a\|b|c", 1) == "a|b"
        assert choose_plural_form(r"a\|b|c", 2) == "c"

    def test_very_long_alternatives(self) -> None:
        """Long alternatives are selected intact."""
        long_text = "a" * 10_000
        template = f"{long_text}|{long_text}s"
        assert choose_plural_form(template, 1) == long_text
        assert choose_plural_form(template, 2) == f"{long_text}s"

    def test_validation_message_pattern(self) -> None:
        """Placeholders are left for the interpolator."""
        template = (
            "{0} The :attribute field is required.|"
            "[1,*] The :attribute field must have at least :min items."
        )
        assert choose_plural_form(template, 0) == "The :attribute field is required."
        assert choose_plural_form(template, 5) == (
            "The :attribute field must have at least :min items."
        )

    def test_malformed_markers_do_not_raise(self) -> None:
        """Malformed markers degrade instead of raising."""
        assert choose_plural_form("{x} odd|even", 1) == "{x} odd"
        assert choose_plural_form("[x,1] dropped|kept", 1) == "kept"
