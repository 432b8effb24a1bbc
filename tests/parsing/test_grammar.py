"""
Tests for parsing.grammar

Test Coverage:
- classify(): every element kind, rule priority, defaults from config
- RULES: fixed order and independently testable rules
- classify_field(): body lines routed to multiline kinds
- Row counts and widths: zero and oversized digit runs are malformed
"""
import pytest

from formspec_toolkit.config import MarkupConfig
from formspec_toolkit.core.errors import MalformedSpecError
from formspec_toolkit.core.models.fields import ElementKind
from formspec_toolkit.core.models.items import InputType, Item
from formspec_toolkit.parsing.grammar import MAX_COUNT_DIGITS, RULES, classify, classify_field
from formspec_toolkit.parsing.line_parser import parse_field_block


class TestRuleOrder:
    """The dispatcher tries rules in a fixed order."""

    def test_rules_when_listed_then_in_priority_order(self):
        assert [rule.name for rule in RULES] == [
            "textarea",
            "text",
            "radio_set",
            "checkbox_set",
            "select_inline",
            "select_multiline",
            "bare_list",
        ]

    def test_textarea_rule_when_applied_alone_then_independent(self):
        """Each rule can be exercised without the dispatcher."""
        textarea = RULES[0]
        assert textarea.apply("[ 4]", (), MarkupConfig()).rows == 4
        assert textarea.apply("[x] A", (), MarkupConfig()) is None


class TestClassifyText:

    def test_classify_when_width_given_then_text_with_width(self):
        match = classify("___[50]")
        assert match.kind is ElementKind.TEXT
        assert match.width == 50

    def test_classify_when_no_width_then_width_unspecified(self):
        match = classify("___")
        assert match.kind is ElementKind.TEXT
        assert match.width is None

    def test_classify_when_default_width_configured_then_used(self):
        match = classify("_____", config=MarkupConfig(default_text_width=20))
        assert match.width == 20

    def test_classify_when_two_underscores_then_unmatched(self):
        assert classify("__").kind is ElementKind.UNMATCHED


class TestClassifyTextarea:

    def test_classify_when_rows_given_then_textarea_rows(self):
        match = classify("[   5]")
        assert match.kind is ElementKind.TEXTAREA
        assert match.rows == 5

    @pytest.mark.parametrize("rhs", ["[ ]", "[]", "[    ]"])
    def test_classify_when_rows_blank_then_default_three(self, rhs):
        match = classify(rhs)
        assert match.kind is ElementKind.TEXTAREA
        assert match.rows == 3

    def test_classify_when_default_rows_configured_then_used(self):
        match = classify("[ ]", config=MarkupConfig(default_textarea_rows=6))
        assert match.rows == 6

    def test_classify_when_bracket_followed_by_text_then_checkbox_not_textarea(self):
        """Textarea must be the whole rhs; '[ ] A' is a checkbox set."""
        match = classify("[ ] A [x] B")
        assert match.kind is ElementKind.CHECKBOX_SET


class TestClassifyCounts:
    """Row counts and widths must be usable positive integers."""

    @pytest.mark.parametrize("rhs", ["[0]", "[ 000 ]", "___[0]"])
    def test_classify_when_count_zero_then_malformed(self, rhs):
        with pytest.raises(MalformedSpecError, match="must be positive"):
            classify(rhs)

    @pytest.mark.parametrize("rhs", ["[" + "9" * 5000 + "]", "___[" + "5" * 5000 + "]"])
    def test_classify_when_count_too_long_then_malformed(self, rhs):
        with pytest.raises(MalformedSpecError, match="Invalid"):
            classify(rhs)

    def test_classify_when_leading_zeros_then_value_kept(self):
        assert classify("[05]").rows == 5
        assert classify("___[" + "0" * 5000 + "7]").width == 7

    def test_classify_when_count_at_digit_limit_then_accepted(self):
        assert classify("___[" + "9" * MAX_COUNT_DIGITS + "]").width == int("9" * MAX_COUNT_DIGITS)


class TestClassifyChoiceSets:

    def test_classify_when_parenthesis_then_radio_set(self):
        match = classify("(x) A (=) B () C")

        assert match.kind is ElementKind.RADIO_SET
        assert match.items == (
            Item("A", "A", selected=True),
            Item("B", "B", correct=True),
            Item("C", "C"),
        )

    def test_classify_when_square_bracket_then_checkbox_set(self):
        match = classify("[x] one [] two")

        assert match.kind is ElementKind.CHECKBOX_SET
        assert [i.value for i in match.items] == ["one", "two"]

    def test_classify_when_parenthesis_not_leading_then_unmatched(self):
        assert classify("pick (x) A").kind is ElementKind.UNMATCHED


class TestClassifySelects:

    def test_classify_when_braces_on_one_line_then_select_inline(self):
        match = classify("{BOS, [SFO], (NYC)}")

        assert match.kind is ElementKind.SELECT_INLINE
        assert [(i.value, i.selected) for i in match.items] == [
            ("BOS", False),
            ("SFO", True),
            ("NYC", True),
        ]

    def test_classify_when_open_brace_then_select_multiline(self):
        match = classify("{", body=["   (NYC -> New York City)", "   [SFO -> San Francisco]", "   BOS -> Boston", "}"])

        assert match.kind is ElementKind.SELECT_MULTILINE
        assert match.items == (
            Item("NYC", "New York City", selected=True),
            Item("SFO", "San Francisco", correct=True),
            Item("BOS", "Boston"),
        )

    def test_classify_when_empty_braces_then_unmatched(self):
        assert classify("{}").kind is ElementKind.UNMATCHED


class TestClassifyBareList:

    def test_classify_when_empty_rhs_and_no_body_then_empty_bare_list(self):
        match = classify("")

        assert match.kind is ElementKind.BARE_LIST
        assert match.items == ()

    def test_classify_field_when_body_present_then_items_typed_per_line(self):
        field = parse_field_block("fruit =\n(x) apple\n[=] pear", "quiz")

        match = classify_field(field)

        assert match.kind is ElementKind.BARE_LIST
        assert [i.input_type for i in match.items] == [InputType.RADIO, InputType.CHECKBOX]


class TestClassifyUnmatched:

    @pytest.mark.parametrize("rhs", ["???", "some words", "___[abc]"])
    def test_classify_when_unknown_rhs_then_unmatched(self, rhs):
        match = classify(rhs)

        assert match.kind is ElementKind.UNMATCHED
        assert not match.matched
        assert match.items == ()
