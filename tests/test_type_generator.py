"""Tests for the TypeScript type generator."""

from zodsmith.generators import (
    generate_full_module,
    generate_inferred_type,
    generate_type_module,
    generate_typescript,
)
from zodsmith.generators.type_generator import generate_field_type, get_base_type
from zodsmith.models import OutputConfig, make_field

MIXED_FIELDS = [
    {"name": "id", "type": "string", "description": "Unique id"},
    {"name": "age", "type": "number", "required": False, "nullable": True},
    {"name": "active", "type": "boolean"},
    {"name": "born", "type": "date"},
    {"name": "tags", "type": "array", "validations": {"itemType": "number"}},
    {"name": "role", "type": "enum", "validations": {"values": ["admin", "user"]}},
]


def _members(text: str) -> list[str]:
    return [line for line in text.splitlines() if line.startswith("  ")]


class TestBaseTypes:
    """Tests for field type mapping."""

    def test_primitives(self):
        """Test primitive field types."""
        assert get_base_type(make_field("string", "a")) == "string"
        assert get_base_type(make_field("number", "a")) == "number"
        assert get_base_type(make_field("boolean", "a")) == "boolean"
        assert get_base_type(make_field("date", "a")) == "Date"

    def test_arrays(self):
        """Test array field types."""
        assert get_base_type(make_field("array", "a")) == "string[]"
        field = make_field("array", "a", validations={"itemType": "date"})
        assert get_base_type(field) == "Date[]"
        field = make_field("array", "a", validations={"itemType": "enum"})
        assert get_base_type(field) == "unknown[]"

    def test_enum_union(self):
        """Test enum literal unions."""
        field = make_field("enum", "a", validations={"values": ["b", "a", "it's"]})
        assert get_base_type(field) == "'b' | 'a' | 'it\\'s'"

    def test_empty_enum_is_never(self):
        """Test an enum without values."""
        assert get_base_type(make_field("enum", "a")) == "never"

    def test_nullable_union(self):
        """Test the null union for nullable fields."""
        field = make_field("array", "a", nullable=True)
        assert generate_field_type(field) == "string[] | null"


class TestGenerateTypeScript:
    """Tests for generate_typescript."""

    def test_interface(self, make_schema, default_config):
        """Test interface output."""
        schema = make_schema(MIXED_FIELDS)
        config = default_config.model_copy(update={"type_style": "interface"})

        assert generate_typescript(schema, config) == "\n".join([
            "/**",
            " * A user schema",
            " */",
            "export interface User {",
            "  /** Unique id */",
            "  id: string;",
            "  age?: number | null;",
            "  active: boolean;",
            "  born: Date;",
            "  tags: number[];",
            "  role: 'admin' | 'user';",
            "}",
        ])

    def test_type_alias(self, make_schema, default_config):
        """Test type alias output."""
        schema = make_schema(MIXED_FIELDS, description=None)
        config = default_config.model_copy(update={"type_style": "type", "include_exports": False})

        result = generate_typescript(schema, config)

        assert result.startswith("type User = {\n")
        assert result.endswith("\n};")

    def test_interface_and_type_share_members(self, make_schema, default_config):
        """Test that both styles render the same members."""
        schema = make_schema(MIXED_FIELDS)
        interface = generate_typescript(schema, default_config.model_copy(update={"type_style": "interface"}))
        alias = generate_typescript(schema, default_config.model_copy(update={"type_style": "type"}))

        assert _members(interface) == _members(alias)
        assert interface.splitlines()[3] == "export interface User {"
        assert alias.splitlines()[3] == "export type User = {"

    def test_infer(self, make_schema, default_config):
        """Test z.infer output."""
        schema = make_schema(MIXED_FIELDS)

        assert generate_typescript(schema, default_config) == "\n".join([
            "/**",
            " * A user schema",
            " * Inferred from UserSchema",
            " */",
            "export type User = z.infer<typeof UserSchema>;",
        ])

    def test_infer_without_comments(self, make_schema):
        """Test z.infer output without comments."""
        schema = make_schema(MIXED_FIELDS)
        config = OutputConfig(include_comments=False, semicolons=False, type_name_suffix="Type")

        assert generate_inferred_type(schema, config) == (
            "export type UserType = z.infer<typeof UserSchema>"
        )

    def test_matches_module_type_block(self, make_schema, default_config):
        """Test that the type matches the module's type block."""
        schema = make_schema(MIXED_FIELDS)
        for style in ("interface", "type", "infer"):
            config = default_config.model_copy(update={"type_style": style})
            module = generate_full_module(schema, config)
            assert module.endswith("\n\n" + generate_typescript(schema, config))


class TestGenerateTypeModule:
    """Tests for generate_type_module."""

    def test_interface(self, make_schema, default_config):
        """Test a type module with an interface."""
        schema = make_schema([{"name": "id", "type": "string"}])
        config = default_config.model_copy(update={"type_style": "interface"})

        result = generate_type_module(schema, config)

        assert result.startswith("// Explicit TypeScript type\n/**")
        assert "export interface User {" in result
        assert result.endswith(
            "// Alternative: Inferred from Zod schema\n"
            "// export type User = z.infer<typeof UserSchema>;"
        )

    def test_infer_falls_back_to_alias(self, make_schema, default_config):
        """Test that infer style falls back to a type alias."""
        schema = make_schema([{"name": "id", "type": "string"}])

        result = generate_type_module(schema, default_config)

        assert "export type User = {" in result
        assert "Inferred from UserSchema" not in result
