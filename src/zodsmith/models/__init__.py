"""
Data models for ZodSmith.

This module contains Pydantic models for:
- Field definitions (one variant per field type)
- Schema definitions and output configuration
- Importer results
"""

from zodsmith.models.field_definitions import (
    FIELD_TYPES,
    ArrayField,
    ArrayValidations,
    BooleanField,
    BooleanValidations,
    DateField,
    DateValidations,
    EnumField,
    EnumValidations,
    FieldDefinition,
    FieldType,
    FieldValidations,
    NumberField,
    NumberValidations,
    StringField,
    StringValidations,
    default_validations,
    make_field,
)
from zodsmith.models.schema_definition import (
    DEFAULT_OUTPUT_CONFIG,
    OutputConfig,
    SchemaDefinition,
    SchemaTemplate,
    TypeOutputStyle,
)
from zodsmith.models.import_result import ImportResult

__all__ = [
    # Fields
    "FIELD_TYPES",
    "FieldType",
    "FieldDefinition",
    "StringField",
    "NumberField",
    "BooleanField",
    "DateField",
    "EnumField",
    "ArrayField",
    "make_field",
    # Validations
    "FieldValidations",
    "StringValidations",
    "NumberValidations",
    "BooleanValidations",
    "DateValidations",
    "EnumValidations",
    "ArrayValidations",
    "default_validations",
    # Schema
    "SchemaDefinition",
    "SchemaTemplate",
    "OutputConfig",
    "TypeOutputStyle",
    "DEFAULT_OUTPUT_CONFIG",
    # Import
    "ImportResult",
]
