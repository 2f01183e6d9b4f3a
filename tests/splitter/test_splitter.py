"""
Tests for the argument-list splitter.
"""

import pytest

from dirargs.errors import SplitError
from dirargs.model import ParsedArgument
from dirargs.splitter import ArgumentSplitter, split


class TestArgumentSplitter:

    def setup_method(self):
        self.splitter = ArgumentSplitter()

    def test_empty_input(self):
        assert self.splitter.split("") == []
        assert self.splitter.split("   \n\t") == []

    def test_simple_positional(self):
        result = self.splitter.split("'hello', 'world'")

        assert result == [ParsedArgument("'hello'"), ParsedArgument("'world'")]

    def test_nested_brackets_kept_verbatim(self):
        """Commas inside nested brackets do not split"""
        source = "'hello', 'world', [1,2,3,'four', 'five' => [1, env('something', 'default')]], 'six'"

        result = self.splitter.split(source)

        assert [a.value for a in result] == [
            "'hello'",
            "'world'",
            "[1,2,3,'four', 'five' => [1, env('something', 'default')]]",
            "'six'",
        ]
        assert all(a.name is None for a in result)

    def test_named_arguments(self):
        result = self.splitter.split('$a, key => fn(x, y), other => "q, r"')

        assert result == [
            ParsedArgument("$a"),
            ParsedArgument("fn(x, y)", "key"),
            ParsedArgument('"q, r"', "other"),
        ]

    def test_arrow_after_string_is_positional(self):
        """Only an identifier before '=>' names an argument"""
        result = self.splitter.split("'a' => 1")

        assert result == [ParsedArgument("'a' => 1")]

    def test_arrow_after_variable_is_positional(self):
        result = self.splitter.split("$key => 1")

        assert result == [ParsedArgument("$key => 1")]

    def test_values_are_trimmed(self):
        result = self.splitter.split("  x  ,\n  y + 1 ")

        assert [a.value for a in result] == ["x", "y + 1"]

    def test_trailing_comma_tolerated(self):
        assert [a.value for a in self.splitter.split("1, 2,")] == ["1", "2"]

    def test_strings_with_brackets(self):
        result = self.splitter.split("'(', \")\", '[{'")

        assert [a.value for a in result] == ["'('", '")"', "'[{'"]

    def test_multiline_argument(self):
        source = "[\n  'a' => 1,\n  'b' => 2,\n], flag => true"

        result = self.splitter.split(source)

        assert result[0].value == "[\n  'a' => 1,\n  'b' => 2,\n]"
        assert result[1] == ParsedArgument("true", "flag")

    def test_empty_argument_error(self):
        with pytest.raises(SplitError, match="Empty argument #2"):
            self.splitter.split("1,,2")

        with pytest.raises(SplitError, match="Empty argument #1"):
            self.splitter.split(",")

    def test_unclosed_bracket(self):
        with pytest.raises(SplitError, match=r"Unclosed '\('") as exc_info:
            self.splitter.split("1, f(2, 3")
        assert exc_info.value.position == 4

    def test_unexpected_closer(self):
        with pytest.raises(SplitError, match=r"Unexpected '\)'"):
            self.splitter.split("1)")

    def test_mismatched_closer(self):
        with pytest.raises(SplitError, match=r"Mismatched '\]', expected '\)'"):
            self.splitter.split("(1]")

    def test_positional_after_named(self):
        with pytest.raises(SplitError, match="cannot follow a named argument"):
            self.splitter.split("a => 1, 2")

    def test_missing_named_value(self):
        with pytest.raises(SplitError, match="Missing value for named argument 'a'"):
            self.splitter.split("a =>")

    def test_module_function(self):
        assert split("x, y => z") == [ParsedArgument("x"), ParsedArgument("z", "y")]
