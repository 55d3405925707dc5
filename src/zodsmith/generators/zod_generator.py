"""
Zod schema generator.

Turns a SchemaDefinition into a `z.object({...})` declaration, and
combines it with a TypeScript type into a full module.
"""

import logging

from zodsmith.generators.formatting import doc_block, member_doc, quote
from zodsmith.generators.rules import generate_type_code
from zodsmith.generators.type_generator import render_explicit_type, render_inferred_type
from zodsmith.models.field_definitions import FieldDefinition
from zodsmith.models.schema_definition import OutputConfig, SchemaDefinition

logger = logging.getLogger(__name__)


def format_default_value(field: FieldDefinition) -> str | None:
    """
    Format a field's default value as a JS literal.

    Returns None when the field has no default. Array defaults always
    become an empty array, whatever text was stored.
    """
    default = field.default_value
    if default is None or default == "":
        return None

    if field.type in ("string", "enum"):
        return quote(default)
    if field.type == "number":
        return default
    if field.type == "boolean":
        return "true" if default.lower() == "true" else "false"
    if field.type == "date":
        return f"new Date('{default}')"
    if field.type == "array":
        return "[]"
    return None


def generate_field_code(field: FieldDefinition) -> str:
    """
    Generate the Zod expression for one field.

    Modifiers are appended after the type's own rules in a fixed order:
    `.nullable()`, `.optional()`, `.default(...)`.
    """
    code = generate_type_code(field)

    if field.nullable:
        code += ".nullable()"
    if not field.required:
        code += ".optional()"

    default = format_default_value(field)
    if default:
        code += f".default({default})"

    return code


def generate_zod_schema(schema: SchemaDefinition, config: OutputConfig) -> str:
    """
    Generate Zod schema code for a schema definition.

    Args:
        schema: The schema to render. It is not modified.
        config: Output style settings.

    Returns:
        Source text: the `zod` import, an optional doc comment, and the
        `const <Name><Suffix> = z.object({...})` declaration.
    """
    logger.debug("Generating Zod schema for %s (%d fields)", schema.name, len(schema.fields))

    semi = config.semi
    lines = [f"import {{ z }} from 'zod'{semi}", ""]

    if config.include_comments and schema.description:
        lines.extend(doc_block([schema.description]))

    lines.append(f"{config.export_keyword}const {config.schema_name(schema)} = z.object({{")

    last_index = len(schema.fields) - 1
    for index, field in enumerate(schema.fields):
        if config.include_comments and field.description:
            lines.append(member_doc(field.description))
        comma = "" if index == last_index else ","
        lines.append(f"  {field.name}: {generate_field_code(field)}{comma}")

    lines.append(f"}}){semi}")

    return "\n".join(lines)


def generate_full_module(schema: SchemaDefinition, config: OutputConfig) -> str:
    """
    Generate the Zod schema followed by its TypeScript type.

    For the "infer" style the type is a single `z.infer` alias; the
    field shapes are never repeated.
    """
    lines = [generate_zod_schema(schema, config), ""]

    if config.type_style == "infer":
        lines.extend(render_inferred_type(schema, config))
    else:
        lines.extend(render_explicit_type(schema, config, config.type_style))

    return "\n".join(lines)
