"""
Framework-agnostic helpers behind the function tools, the MCP server
and the CLI.

They accept JSON-compatible input (strings or dicts), validate it into
models, and call the generators. Errors are raised here; the callers
decide how to report them.
"""

from typing import Any, Callable

from pydantic import ValidationError

from zodsmith.config import get_config
from zodsmith.generators import (
    generate_full_module,
    generate_type_module,
    generate_typescript,
    generate_zod_schema,
)
from zodsmith.importer import import_schema
from zodsmith.models.schema_definition import OutputConfig, SchemaDefinition
from zodsmith.templates import get_template_by_id, get_templates, schema_from_template

GENERATORS: dict[str, Callable[[SchemaDefinition, OutputConfig], str]] = {
    "schema": generate_zod_schema,
    "type": generate_typescript,
    "module": generate_full_module,
    "type-module": generate_type_module,
}

OUTPUT_KINDS = tuple(GENERATORS)


def build_output_config(**overrides: Any) -> OutputConfig:
    """
    Build an OutputConfig from the configured defaults.

    Keyword arguments override single settings; None values are ignored
    so optional tool arguments can be passed straight through.

    Example:
        >>> build_output_config(type_style="interface", semicolons=None)

    Raises:
        ValueError: If the configured defaults or the overrides are not a
            valid output configuration (e.g. a bad ZODSMITH_TYPE_STYLE).
    """
    config = get_config()
    base = {name: getattr(config, name) for name in OutputConfig.model_fields}
    base.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return OutputConfig.model_validate(base)
    except ValidationError as e:
        raise ValueError(f"Invalid output configuration: {e}") from e


def load_schema(schema: SchemaDefinition | dict[str, Any] | str) -> SchemaDefinition:
    """
    Validate a schema given as a model, a dict, or a JSON string.

    Raises:
        pydantic.ValidationError: If the input does not describe a schema.
    """
    if isinstance(schema, SchemaDefinition):
        return schema
    if isinstance(schema, str):
        return SchemaDefinition.model_validate_json(schema)
    return SchemaDefinition.model_validate(schema)


def generate_code(
    schema: SchemaDefinition | dict[str, Any] | str,
    output: str = "module",
    config: OutputConfig | None = None,
) -> str:
    """
    Generate code for a schema.

    Args:
        schema: Schema model, dict, or JSON string.
        output: One of "schema", "type", "module", "type-module".
        config: Output settings. Defaults to the configured defaults.

    Raises:
        ValueError: If `output` is not a known output kind.
    """
    if output not in GENERATORS:
        raise ValueError(f"Unknown output: {output}. Use one of: {', '.join(OUTPUT_KINDS)}")
    return GENERATORS[output](load_schema(schema), config or build_output_config())


def import_typescript(code: str) -> dict[str, Any]:
    """Import TypeScript and return the result as a JSON-compatible dict."""
    result = import_schema(code)
    return result.model_dump(mode="json", by_alias=True, exclude_none=True)


def list_templates() -> list[dict[str, Any]]:
    """Summaries of the built-in templates."""
    return [
        {
            "id": template.id,
            "name": template.name,
            "description": template.description,
            "fields": template.schema_.field_names,
        }
        for template in get_templates()
    ]


def load_template_schema(template_id: str) -> SchemaDefinition:
    """
    Get a fresh schema for a template.

    Raises:
        ValueError: If there is no template with this ID.
    """
    template = get_template_by_id(template_id)
    if template is None:
        raise ValueError(f"Unknown template: {template_id}")
    return schema_from_template(template)
