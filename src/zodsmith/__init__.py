"""
ZodSmith: Zod schema and TypeScript type generation.

Describe an object schema once, get Zod validation code and the
matching TypeScript types. Pasted TypeScript declarations can be
imported back into a schema definition.

Simple Usage:
    from zodsmith import OutputConfig, SchemaDefinition, generate_full_module

    schema = SchemaDefinition.model_validate({
        "name": "User",
        "fields": [
            {"name": "id", "type": "string", "validations": {"uuid": True}},
            {"name": "age", "type": "number", "required": False,
             "validations": {"min": 0, "int": True}},
        ],
    })

    print(generate_full_module(schema, OutputConfig(type_style="interface")))

Importing TypeScript:
    from zodsmith import import_schema

    result = import_schema("interface User { id: string; age?: number }")
    if result.success:
        schema = result.schema_

Templates:
    from zodsmith import get_template_by_id, schema_from_template

    schema = schema_from_template(get_template_by_id("product"))
"""

from zodsmith.generators import (
    generate_full_module,
    generate_inferred_type,
    generate_type_module,
    generate_typescript,
    generate_zod_schema,
)
from zodsmith.importer import import_schema
from zodsmith.models import (
    DEFAULT_OUTPUT_CONFIG,
    ArrayField,
    BooleanField,
    DateField,
    EnumField,
    FieldDefinition,
    ImportResult,
    NumberField,
    OutputConfig,
    SchemaDefinition,
    SchemaTemplate,
    StringField,
    make_field,
)
from zodsmith.templates import (
    get_template_by_id,
    get_template_ids,
    get_templates,
    schema_from_template,
)

__all__ = [
    # Generators
    "generate_zod_schema",
    "generate_typescript",
    "generate_full_module",
    "generate_inferred_type",
    "generate_type_module",
    # Import
    "import_schema",
    "ImportResult",
    # Models
    "SchemaDefinition",
    "OutputConfig",
    "DEFAULT_OUTPUT_CONFIG",
    "FieldDefinition",
    "StringField",
    "NumberField",
    "BooleanField",
    "DateField",
    "EnumField",
    "ArrayField",
    "make_field",
    # Templates
    "SchemaTemplate",
    "get_templates",
    "get_template_ids",
    "get_template_by_id",
    "schema_from_template",
]

__version__ = "0.1.0"
