"""
MCP Tool definitions for ZodSmith.

Wraps the code generation helpers as MCP tools.
"""

import json
import logging
from typing import Any

from zodsmith.config import get_config
from zodsmith.tools.codegen import (
    build_output_config,
    generate_code,
    import_typescript,
    list_templates,
    load_template_schema,
)

logger = logging.getLogger("zodsmith-mcp")

# MCP tool name -> generate_code output kind
OUTPUT_BY_TOOL = {
    "generate_zod_schema": "schema",
    "generate_typescript": "type",
    "generate_module": "module",
}

_SCHEMA_PROPERTY = {
    "type": "object",
    "description": (
        "Schema definition: {name, description?, fields: [{name, type, required?, "
        "nullable?, defaultValue?, description?, validations?}]}. Field type is one of "
        "string, number, boolean, date, enum, array."
    ),
}

_STYLE_PROPERTIES = {
    "type_style": {
        "type": "string",
        "enum": ["infer", "interface", "type"],
        "description": "How to declare the TypeScript type",
    },
    "include_exports": {"type": "boolean", "description": "Export the declarations"},
    "include_comments": {"type": "boolean", "description": "Emit description doc comments"},
    "semicolons": {"type": "boolean", "description": "Terminate statements with semicolons"},
    "schema_name_suffix": {"type": "string", "description": 'Schema name suffix (default "Schema")'},
    "type_name_suffix": {"type": "string", "description": 'Type name suffix (default "")'},
}

_STYLE_KEYS = tuple(_STYLE_PROPERTIES)


def _config_from_arguments(arguments: dict[str, Any]):
    return build_output_config(**{key: arguments.get(key) for key in _STYLE_KEYS})


def handle_tool_call(name: str, arguments: dict[str, Any]) -> str:
    """
    Run an MCP tool and return its text payload.

    Tool failures are returned as a JSON error object instead of raised.
    """
    indent = get_config().indent_json_output
    try:
        if name in OUTPUT_BY_TOOL:
            return generate_code(
                arguments.get("schema", {}),
                output=OUTPUT_BY_TOOL[name],
                config=_config_from_arguments(arguments),
            )
        if name == "generate_from_template":
            schema = load_template_schema(arguments.get("template_id", ""))
            return generate_code(schema, output="module", config=_config_from_arguments(arguments))
        if name == "import_typescript":
            return json.dumps(import_typescript(arguments.get("code", "")), indent=indent)
        if name == "list_templates":
            return json.dumps(list_templates(), indent=indent)
    except Exception as e:
        logger.error(f"Error in {name}: {e}")
        return json.dumps({"error": str(e)})

    return json.dumps({"error": f"Unknown tool: {name}"})


def get_mcp_tools() -> list[dict]:
    """
    Get MCP tool definitions for registration with MCP server.

    Returns list of tool schemas compatible with MCP protocol.
    """
    return [
        {
            "name": "generate_zod_schema",
            "description": "Generate Zod schema code (z.object) from a schema definition.",
            "inputSchema": {
                "type": "object",
                "properties": {"schema": _SCHEMA_PROPERTY, **_STYLE_PROPERTIES},
                "required": ["schema"],
            },
        },
        {
            "name": "generate_typescript",
            "description": (
                "Generate a TypeScript interface, type alias, or z.infer alias "
                "from a schema definition."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {"schema": _SCHEMA_PROPERTY, **_STYLE_PROPERTIES},
                "required": ["schema"],
            },
        },
        {
            "name": "generate_module",
            "description": """
Generate a complete TypeScript module: the Zod schema followed by its type.

Use this when the user wants a file they can paste into a project.
With type_style "infer" the type is a single z.infer alias.
""".strip(),
            "inputSchema": {
                "type": "object",
                "properties": {"schema": _SCHEMA_PROPERTY, **_STYLE_PROPERTIES},
                "required": ["schema"],
            },
        },
        {
            "name": "generate_from_template",
            "description": "Generate a complete module from a built-in template (see list_templates).",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "template_id": {"type": "string", "description": "Template ID, e.g. user"},
                    **_STYLE_PROPERTIES,
                },
                "required": ["template_id"],
            },
        },
        {
            "name": "import_typescript",
            "description": """
Convert a TypeScript interface or type declaration into a schema definition.

SUPPORTED SYNTAX:
- interface Name { ... } and type Name = { ... }
- Optional members: field?: type
- Nullable members: field: type | null
- Arrays: field: type[]
- String literal unions: 'a' | 'b' | 'c'

Anything else is imported as a string field.
""".strip(),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "code": {"type": "string", "description": "TypeScript source"},
                },
                "required": ["code"],
            },
        },
        {
            "name": "list_templates",
            "description": "List the built-in schema templates.",
            "inputSchema": {"type": "object", "properties": {}},
        },
    ]
