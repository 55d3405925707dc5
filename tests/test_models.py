"""Tests for ZodSmith data models."""

import pytest
from pydantic import TypeAdapter, ValidationError

from zodsmith.models import (
    ArrayField,
    ArrayValidations,
    BooleanValidations,
    EnumField,
    FieldDefinition,
    ImportResult,
    NumberField,
    NumberValidations,
    OutputConfig,
    SchemaDefinition,
    StringField,
    StringValidations,
    default_validations,
    make_field,
)


class TestFieldDefinition:
    """Tests for the field variants."""

    def test_basic_field(self):
        """Test creating a basic string field."""
        field = StringField(name="email")
        assert field.name == "email"
        assert field.type == "string"
        assert field.required is True
        assert field.nullable is False
        assert field.default_value is None
        assert isinstance(field.validations, StringValidations)

    def test_camel_case_aliases(self):
        """Test that editor JSON keys map onto the models."""
        field = TypeAdapter(FieldDefinition).validate_python({
            "name": "code",
            "type": "string",
            "defaultValue": "abc",
            "validations": {"min": 2, "startsWith": "a", "toUpperCase": True},
        })
        assert isinstance(field, StringField)
        assert field.default_value == "abc"
        assert field.validations.min_length == 2
        assert field.validations.starts_with == "a"
        assert field.validations.to_upper_case is True

    def test_discriminator_picks_variant(self):
        """Test that the type key selects the matching validation record."""
        field = TypeAdapter(FieldDefinition).validate_python({
            "name": "age",
            "type": "number",
            "validations": {"min": 0, "int": True},
        })
        assert isinstance(field, NumberField)
        assert isinstance(field.validations, NumberValidations)
        assert field.validations.integer is True

    def test_mismatched_validations_rejected(self):
        """Test that enum rules cannot be attached to a number field."""
        with pytest.raises(ValidationError):
            NumberField(name="age", validations={"values": ["a", "b"]})

    def test_invalid_name_rejected(self):
        """Test that field names must be identifiers."""
        with pytest.raises(ValidationError):
            StringField(name="1st-name")

    def test_number_keeps_ints(self):
        """Test that integer bounds stay integers."""
        rules = NumberValidations(min=0, max=1.5)
        assert isinstance(rules.minimum, int)
        assert rules.maximum == 1.5

    def test_array_defaults(self):
        """Test array defaults."""
        field = ArrayField(name="tags")
        assert field.validations.item_type == "string"
        assert field.validations.item_validations is None
        assert field.validations.nonempty is False


class TestFieldHelpers:
    """Tests for make_field and default_validations."""

    def test_make_field(self):
        """Test building a field by type name."""
        field = make_field("enum", "status", validations={"values": ["a", "b"]})
        assert isinstance(field, EnumField)
        assert field.validations.values == ["a", "b"]

    def test_make_field_unknown_type(self):
        """Test an unknown field type."""
        with pytest.raises(ValueError):
            make_field("object", "meta")

    def test_default_validations_are_fresh(self):
        """Test that each call returns a new rule record."""
        first = default_validations("array")
        second = default_validations("array")
        assert isinstance(first, ArrayValidations)
        assert first is not second

    def test_default_boolean_validations(self):
        """Test the empty boolean rule record."""
        assert isinstance(default_validations("boolean"), BooleanValidations)


class TestSchemaDefinition:
    """Tests for SchemaDefinition."""

    def test_field_order_preserved(self):
        """Test that fields keep their order."""
        schema = SchemaDefinition(
            name="User",
            fields=[StringField(name="b"), StringField(name="a"), StringField(name="c")],
        )
        assert schema.field_names == ["b", "a", "c"]

    def test_get_field(self):
        """Test looking up a field by name."""
        schema = SchemaDefinition(name="User", fields=[NumberField(name="age")])
        assert schema.get_field("age").type == "number"
        assert schema.get_field("missing") is None

    def test_from_json(self):
        """Test loading a schema from editor JSON."""
        schema = SchemaDefinition.model_validate_json(
            '{"name": "Post", "fields": [{"name": "tags", "type": "array",'
            ' "validations": {"itemType": "number", "nonempty": true}}]}'
        )
        assert schema.fields[0].validations.item_type == "number"
        assert schema.fields[0].validations.nonempty is True


class TestOutputConfig:
    """Tests for OutputConfig."""

    def test_defaults(self):
        """Test the default output settings."""
        config = OutputConfig()
        assert config.type_style == "infer"
        assert config.include_exports is True
        assert config.schema_name_suffix == "Schema"
        assert config.type_name_suffix == ""
        assert config.include_comments is True
        assert config.semicolons is True

    def test_aliases(self):
        """Test camelCase keys."""
        config = OutputConfig.model_validate({"typeStyle": "interface", "typeNameSuffix": "Type"})
        assert config.type_style == "interface"
        assert config.type_name_suffix == "Type"

    def test_names(self):
        """Test schema and type names with suffixes."""
        config = OutputConfig(schema_name_suffix="Validator", type_name_suffix="Type")
        schema = SchemaDefinition(name="User")
        assert config.schema_name(schema) == "UserValidator"
        assert config.type_name(schema) == "UserType"

    def test_invalid_style_rejected(self):
        """Test an unknown type style."""
        with pytest.raises(ValidationError):
            OutputConfig(type_style="class")


class TestImportResult:
    """Tests for ImportResult."""

    def test_failure(self):
        """Test a failed result."""
        result = ImportResult.failure("nope")
        assert not result.success
        assert result.error == "nope"
        assert result.field_count == 0

    def test_success(self):
        """Test a successful result."""
        schema = SchemaDefinition(name="User", fields=[StringField(name="id")])
        result = ImportResult(success=True, schema=schema)
        assert result.field_count == 1
        assert result.model_dump(by_alias=True)["schema"]["name"] == "User"
