"""
Code generation tools.

Function tools that let an agent generate Zod/TypeScript code from a
schema definition, import TypeScript declarations and browse templates.
"""

import json
from typing import Any

from agents import RunContextWrapper, function_tool

from zodsmith.config import get_config
from zodsmith.tools.codegen import (
    build_output_config,
    generate_code,
    import_typescript,
    list_templates,
    load_template_schema,
)


def _error(e: Exception) -> str:
    return json.dumps({
        "error": True,
        "message": str(e),
    })


def _run_generator(
    output: str,
    schema_json: str,
    type_style: str | None,
    include_exports: bool | None,
    include_comments: bool | None,
    semicolons: bool | None,
) -> str:
    try:
        config = build_output_config(
            type_style=type_style,
            include_exports=include_exports,
            include_comments=include_comments,
            semicolons=semicolons,
        )
        return generate_code(schema_json, output=output, config=config)
    except Exception as e:
        return _error(e)


@function_tool
async def generate_schema_tool(
    ctx: RunContextWrapper[Any],
    schema_json: str,
    include_exports: bool | None = None,
    include_comments: bool | None = None,
    semicolons: bool | None = None,
) -> str:
    """
    Generate Zod schema code from a schema definition.

    Args:
        schema_json: Schema definition as JSON.
            Example: {"name": "User", "fields": [{"name": "id", "type": "string",
            "validations": {"uuid": true}}]}
        include_exports: Whether to export the declaration.
        include_comments: Whether to emit description doc comments.
        semicolons: Whether to terminate statements with semicolons.

    Returns:
        TypeScript source with the `z.object({...})` declaration, or a
        JSON error object.
    """
    return _run_generator("schema", schema_json, None, include_exports, include_comments, semicolons)


@function_tool
async def generate_type_tool(
    ctx: RunContextWrapper[Any],
    schema_json: str,
    type_style: str | None = None,
    include_exports: bool | None = None,
    include_comments: bool | None = None,
    semicolons: bool | None = None,
) -> str:
    """
    Generate a TypeScript type from a schema definition.

    Args:
        schema_json: Schema definition as JSON.
        type_style: "interface", "type", or "infer" (z.infer alias).
        include_exports: Whether to export the declaration.
        include_comments: Whether to emit description doc comments.
        semicolons: Whether to terminate statements with semicolons.

    Returns:
        TypeScript source, or a JSON error object.
    """
    return _run_generator("type", schema_json, type_style, include_exports, include_comments, semicolons)


@function_tool
async def generate_module_tool(
    ctx: RunContextWrapper[Any],
    schema_json: str,
    type_style: str | None = None,
    include_exports: bool | None = None,
    include_comments: bool | None = None,
    semicolons: bool | None = None,
) -> str:
    """
    Generate a module with the Zod schema followed by its TypeScript type.

    Use this when the user wants a ready-to-paste file.

    Args:
        schema_json: Schema definition as JSON.
        type_style: "interface", "type", or "infer" (z.infer alias).
        include_exports: Whether to export the declarations.
        include_comments: Whether to emit description doc comments.
        semicolons: Whether to terminate statements with semicolons.

    Returns:
        TypeScript source, or a JSON error object.
    """
    return _run_generator("module", schema_json, type_style, include_exports, include_comments, semicolons)


@function_tool
async def import_typescript_tool(
    ctx: RunContextWrapper[Any],
    code: str,
) -> str:
    """
    Convert a TypeScript interface or type declaration into a schema definition.

    Supported syntax: `interface Name { ... }`, `type Name = { ... }`,
    optional members (`field?: type`), `| null`, arrays (`type[]`) and
    string literal unions (`'a' | 'b'`). Other types become strings.

    Args:
        code: TypeScript source containing one declaration.

    Returns:
        JSON with `success`, and either `schema` or `error`.
    """
    return json.dumps(import_typescript(code), indent=get_config().indent_json_output)


@function_tool
async def list_templates_tool(ctx: RunContextWrapper[Any]) -> str:
    """
    List the built-in schema templates.

    Returns:
        JSON list of templates with id, name, description and field names.
    """
    return json.dumps(list_templates(), indent=get_config().indent_json_output)


@function_tool
async def generate_from_template_tool(
    ctx: RunContextWrapper[Any],
    template_id: str,
    type_style: str | None = None,
) -> str:
    """
    Generate a full module from a built-in template.

    Args:
        template_id: Template ID, e.g. "user", "product", "login".
        type_style: "interface", "type", or "infer".

    Returns:
        TypeScript source, or a JSON error object.
    """
    try:
        schema = load_template_schema(template_id)
        return generate_code(schema, output="module", config=build_output_config(type_style=type_style))
    except Exception as e:
        return _error(e)
