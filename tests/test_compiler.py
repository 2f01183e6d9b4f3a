"""
Tests for the template compiler.
"""

import textwrap

from dirargs.compiler import SubstitutionContext, compile_template
from dirargs.dialect import Dialect


class TestCompileTemplate:

    def test_substitutes_bound_placeholder_only(self):
        template = "foreach ($value as $testVar) { echo $testVar; }"
        bindings = {"value": "array_merge(range('a','z'), [1,2,3])"}

        result = compile_template(template, bindings)

        assert result == (
            "foreach (array_merge(range('a','z'), [1,2,3]) as $testVar) { echo $testVar; }"
        )

    def test_escaped_placeholder_restored(self):
        template = textwrap.dedent("""\
            if (isset(\\$value)) { }
            foreach ($value as $item) {}
            $copy = $value;
        """)

        result = compile_template(template, {"value": "$items"})

        assert result == textwrap.dedent("""\
            if (isset($value)) { }
            foreach ($items as $item) {}
            $copy = $items;
        """)

    def test_expression_text_is_not_rescanned(self):
        """An expression mentioning another placeholder stays as written"""
        bindings = {"a": "$b + 1", "b": "B"}

        assert compile_template("$a; $b", bindings) == "$b + 1; B"

    def test_escape_in_expression_survives(self):
        bindings = {"a": "\\$b", "b": "B"}

        assert compile_template("$a $b \\$b", bindings) == "\\$b B $b"

    def test_escape_wins_regardless_of_order(self):
        template = "\\$ab $ab \\$a $a"

        first = compile_template(template, {"a": "X", "ab": "Y"})
        second = compile_template(template, {"ab": "Y", "a": "X"})

        assert first == second == "$ab Y $a X"

    def test_longest_placeholder_wins(self):
        assert compile_template("$value $v", {"v": "A", "value": "B"}) == "B A"

    def test_prefix_match_without_strict_boundaries(self):
        assert compile_template("$values", {"value": "X"}) == "Xs"

    def test_strict_boundaries(self):
        dialect = Dialect(strict_boundaries=True)

        result = compile_template("$values $value; $value_2", {"value": "X"}, dialect)

        assert result == "$values X; $value_2"

    def test_strict_boundaries_keep_escape_of_longer_name(self):
        """An escaped token that is not a placeholder in strict mode stays escaped"""
        dialect = Dialect(strict_boundaries=True)

        result = compile_template("\\$values \\$value $value", {"value": "X"}, dialect)

        assert result == "\\$values $value X"

    def test_empty_bindings_identity(self):
        template = "echo $a; echo \\$a;"

        assert compile_template(template, {}) == template

    def test_absent_parameter_keeps_placeholder(self):
        """A None binding is de-escaped but not substituted"""
        result = compile_template("$value \\$value $other", {"value": None, "other": "O"})

        assert result == "$value $value O"

    def test_doubled_sigil_escape(self):
        dialect = Dialect(sigil="@", escape="@")

        assert compile_template("@name @@name", {"name": "X"}, dialect) == "X @name"

    def test_no_placeholders(self):
        assert compile_template("plain text", {"a": "1"}) == "plain text"


class TestSubstitutionContext:

    def test_compile_with_mapping(self):
        context = SubstitutionContext(parameters={"x": "1"}, directive="test")

        assert context.compile("$x + \\$x") == "1 + $x"

    def test_positional_parameters_keyed_by_index(self):
        context = SubstitutionContext(parameters=["'a'", "'b'"])

        assert context.bindings == {"0": "'a'", "1": "'b'"}
        assert context.compile("f($0, $1)") == "f('a', 'b')"

    def test_context_uses_its_dialect(self):
        context = SubstitutionContext(parameters={"x": "1"}, dialect=Dialect(sigil="%", escape="%"))

        assert context.compile("%x %%x $x") == "1 %x $x"

    def test_defaults(self):
        context = SubstitutionContext()

        assert context.parameters == {}
        assert context.compile("$x") == "$x"
