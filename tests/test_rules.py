"""Tests for the per-type validation generators."""

from zodsmith.generators.formatting import escape_string, format_number
from zodsmith.generators.rules import (
    generate_array_methods,
    generate_boolean_methods,
    generate_date_methods,
    generate_enum_methods,
    generate_number_methods,
    generate_string_methods,
    generate_type_code,
    generate_type_methods,
)
from zodsmith.models import (
    ArrayValidations,
    BooleanField,
    DateValidations,
    EnumValidations,
    NumberValidations,
    StringValidations,
    make_field,
)


class TestStringMethods:
    """Tests for string rule order."""

    def test_empty(self):
        """Test a string field without rules."""
        assert generate_string_methods(StringValidations()) == ["z.string()"]

    def test_full_order(self):
        """Test the canonical order with every rule set."""
        rules = StringValidations(
            min=1,
            max=10,
            email=True,
            url=True,
            uuid=True,
            cuid=True,
            regex="^[a-z]+$",
            startsWith="a",
            endsWith="z",
            includes="m",
            trim=True,
            toLowerCase=True,
            toUpperCase=True,
        )
        assert generate_string_methods(rules) == [
            "z.string()",
            ".min(1)",
            ".max(10)",
            ".email()",
            ".url()",
            ".uuid()",
            ".cuid()",
            ".regex(/^[a-z]+$/)",
            ".startsWith('a')",
            ".endsWith('z')",
            ".includes('m')",
            ".trim()",
            ".toLowerCase()",
            ".toUpperCase()",
        ]

    def test_length_suppresses_range(self):
        """Test that length replaces min and max."""
        rules = StringValidations(min=1, max=10, length=2)
        assert generate_string_methods(rules) == ["z.string()", ".length(2)"]

    def test_zero_bounds_emitted(self):
        """Test that zero bounds are still emitted."""
        rules = StringValidations(min=0)
        assert generate_string_methods(rules) == ["z.string()", ".min(0)"]

    def test_substrings_escaped(self):
        """Test quoting of substring rules."""
        rules = StringValidations(startsWith="it's", endsWith="a\\b")
        assert generate_string_methods(rules)[1:] == [
            ".startsWith('it\\'s')",
            ".endsWith('a\\\\b')",
        ]

    def test_empty_substring_ignored(self):
        """Test that empty substrings emit nothing."""
        assert generate_string_methods(StringValidations(includes="")) == ["z.string()"]


class TestNumberMethods:
    """Tests for number rule order."""

    def test_int_min_max(self):
        """Test integer bounds."""
        rules = NumberValidations(min=0, max=150, int=True)
        assert "".join(generate_number_methods(rules)) == "z.number().int().min(0).max(150)"

    def test_full_order(self):
        """Test the canonical order with every rule set."""
        rules = NumberValidations(
            min=1,
            max=9,
            int=True,
            finite=True,
            multipleOf=3,
            positive=True,
            negative=True,
            nonnegative=True,
            nonpositive=True,
        )
        assert generate_number_methods(rules) == [
            "z.number()",
            ".int()",
            ".finite()",
            ".min(1)",
            ".max(9)",
            ".multipleOf(3)",
            ".positive()",
            ".nonnegative()",
            ".negative()",
            ".nonpositive()",
        ]

    def test_infinite_bounds(self):
        """Test that infinite bounds print as JavaScript Infinity."""
        rules = NumberValidations(min=float("-inf"), max=float("inf"))
        assert generate_number_methods(rules) == ["z.number()", ".min(-Infinity)", ".max(Infinity)"]

    def test_float_formatting(self):
        """Test float bounds print like JavaScript."""
        rules = NumberValidations(min=0.5, max=10.0, multipleOf=0.25)
        assert generate_number_methods(rules) == [
            "z.number()",
            ".min(0.5)",
            ".max(10)",
            ".multipleOf(0.25)",
        ]


class TestDateMethods:
    """Tests for date rules."""

    def test_min_max(self):
        """Test date bounds."""
        rules = DateValidations(min="2024-01-01", max="2024-12-31T23:59:59Z")
        assert generate_date_methods(rules) == [
            "z.date()",
            ".min(new Date('2024-01-01'))",
            ".max(new Date('2024-12-31T23:59:59Z'))",
        ]

    def test_empty(self):
        """Test a date field without rules."""
        assert generate_date_methods(DateValidations()) == ["z.date()"]


class TestArrayMethods:
    """Tests for array rules."""

    def test_item_types(self):
        """Test the item base for each item type."""
        for item_type, code in [
            ("string", "z.string()"),
            ("number", "z.number()"),
            ("boolean", "z.boolean()"),
            ("date", "z.date()"),
            ("enum", "z.unknown()"),
            ("array", "z.unknown()"),
        ]:
            methods = generate_array_methods(ArrayValidations(itemType=item_type))
            assert methods == [f"z.array({code})"]

    def test_nonempty_wins(self):
        """Test that nonempty suppresses length and range."""
        rules = ArrayValidations(nonempty=True, length=3, min=1, max=5)
        assert generate_array_methods(rules) == ["z.array(z.string())", ".nonempty()"]

    def test_length_wins_over_range(self):
        """Test that length suppresses min and max."""
        rules = ArrayValidations(length=3, min=1, max=5)
        assert generate_array_methods(rules) == ["z.array(z.string())", ".length(3)"]

    def test_range(self):
        """Test min and max items."""
        rules = ArrayValidations(itemType="number", min=1, max=5)
        assert generate_array_methods(rules) == ["z.array(z.number())", ".min(1)", ".max(5)"]

    def test_item_validations_ignored(self):
        """Test that item validations do not change the output."""
        rules = ArrayValidations(itemValidations={"min": 3})
        assert generate_array_methods(rules) == ["z.array(z.string())"]


class TestEnumMethods:
    """Tests for enum rules."""

    def test_values_in_order(self):
        """Test that enum values keep their order."""
        rules = EnumValidations(values=["active", "inactive", "pending"])
        assert generate_enum_methods(rules) == ["z.enum(['active', 'inactive', 'pending'])"]

    def test_empty_is_never(self):
        """Test an enum without values."""
        assert generate_enum_methods(EnumValidations()) == ["z.never()"]

    def test_values_escaped(self):
        """Test quoting of enum values."""
        rules = EnumValidations(values=["it's", "back\\slash"])
        assert generate_enum_methods(rules) == ["z.enum(['it\\'s', 'back\\\\slash'])"]


class TestDispatch:
    """Tests for field-level dispatch."""

    def test_boolean(self):
        """Test the boolean generator."""
        assert generate_boolean_methods() == ["z.boolean()"]
        assert generate_type_methods(BooleanField(name="ok")) == ["z.boolean()"]

    def test_type_code_joins(self):
        """Test joining method fragments."""
        field = make_field("string", "email", validations={"email": True, "max": 255})
        assert generate_type_code(field) == "z.string().max(255).email()"


class TestFormatting:
    """Tests for text helpers."""

    def test_escape_string(self):
        """Test escaping quotes and backslashes."""
        assert escape_string("a'b\\c") == "a\\'b\\\\c"

    def test_format_number(self):
        """Test JavaScript-style number printing."""
        assert format_number(0) == "0"
        assert format_number(float("inf")) == "Infinity"
        assert format_number(float("-inf")) == "-Infinity"
        assert format_number(float("nan")) == "NaN"
        assert format_number(2.0) == "2"
        assert format_number(-1.5) == "-1.5"
