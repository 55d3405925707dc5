"""
TypeScript type generator.

Renders a SchemaDefinition as an `interface`, a `type` alias, or a
`z.infer<typeof ...>` alias. The explicit forms share one member-line
routine, so interface and type output only differ in the wrapper.
"""

import logging

from zodsmith.generators.formatting import doc_block, member_doc, quote
from zodsmith.models.field_definitions import FieldDefinition
from zodsmith.models.schema_definition import OutputConfig, SchemaDefinition

logger = logging.getLogger(__name__)

ITEM_BASE_TYPES = {
    "string": "string",
    "number": "number",
    "boolean": "boolean",
    "date": "Date",
}


def get_array_item_type(item_type: str) -> str:
    """Get the TypeScript type for an array item type."""
    return ITEM_BASE_TYPES.get(item_type, "unknown")


def get_base_type(field: FieldDefinition) -> str:
    """Get the TypeScript type for a field, ignoring nullability."""
    if field.type in ("string", "number", "boolean", "date"):
        return ITEM_BASE_TYPES[field.type]

    if field.type == "array":
        return f"{get_array_item_type(field.validations.item_type)}[]"

    if field.type == "enum":
        if not field.validations.values:
            return "never"
        return " | ".join(quote(value) for value in field.validations.values)

    return "unknown"


def generate_field_type(field: FieldDefinition) -> str:
    """Get the member type for a field, including `| null` when nullable."""
    base_type = get_base_type(field)
    if field.nullable:
        base_type = f"{base_type} | null"
    return base_type


def render_type_members(schema: SchemaDefinition, config: OutputConfig) -> list[str]:
    """Render the member lines of an interface or type literal."""
    lines: list[str] = []
    for field in schema.fields:
        if config.include_comments and field.description:
            lines.append(member_doc(field.description))
        optional = "" if field.required else "?"
        lines.append(f"  {field.name}{optional}: {generate_field_type(field)}{config.semi}")
    return lines


def render_explicit_type(
    schema: SchemaDefinition,
    config: OutputConfig,
    style: str,
) -> list[str]:
    """
    Render an explicit declaration.

    Args:
        schema: Schema to render.
        config: Output style settings.
        style: "interface" for an interface block; anything else
            renders a type alias.

    Returns:
        Source lines, without a trailing newline.
    """
    type_name = config.type_name(schema)
    lines: list[str] = []

    if config.include_comments and schema.description:
        lines.extend(doc_block([schema.description]))

    if style == "interface":
        lines.append(f"{config.export_keyword}interface {type_name} {{")
        lines.extend(render_type_members(schema, config))
        lines.append("}")
    else:
        lines.append(f"{config.export_keyword}type {type_name} = {{")
        lines.extend(render_type_members(schema, config))
        lines.append(f"}}{config.semi}")

    return lines


def render_inferred_type(schema: SchemaDefinition, config: OutputConfig) -> list[str]:
    schema_name = config.schema_name(schema)
    type_name = config.type_name(schema)
    lines: list[str] = []

    if config.include_comments and schema.description:
        lines.extend(doc_block([schema.description, f"Inferred from {schema_name}"]))

    lines.append(
        f"{config.export_keyword}type {type_name} = z.infer<typeof {schema_name}>{config.semi}"
    )
    return lines


def generate_inferred_type(schema: SchemaDefinition, config: OutputConfig) -> str:
    """Generate a type alias inferred from the Zod schema declaration."""
    return "\n".join(render_inferred_type(schema, config))


def generate_typescript(schema: SchemaDefinition, config: OutputConfig) -> str:
    """
    Generate the TypeScript type for a schema.

    The declaration form follows `config.type_style`: an interface, a
    type alias, or (for "infer") a single `z.infer` alias that relies
    on the schema declaration living in the same module.

    Example:
        >>> generate_typescript(schema, OutputConfig(type_style="interface"))
        'export interface User {\\n  id: string;\\n}'
    """
    logger.debug("Generating %s type for %s", config.type_style, schema.name)

    if config.type_style == "infer":
        return generate_inferred_type(schema, config)
    return "\n".join(render_explicit_type(schema, config, config.type_style))


def generate_type_module(schema: SchemaDefinition, config: OutputConfig) -> str:
    """
    Generate an explicit type followed by the commented `z.infer` alternative.

    With the "infer" style the explicit part falls back to a type alias.
    """
    style = "interface" if config.type_style == "interface" else "type"
    inferred = generate_inferred_type(schema, config.model_copy(update={"include_comments": False}))

    lines = ["// Explicit TypeScript type"]
    lines.extend(render_explicit_type(schema, config, style))
    lines.append("")
    lines.append("// Alternative: Inferred from Zod schema")
    lines.append(f"// {inferred}")
    return "\n".join(lines)
