"""
Function tools for ZodSmith.

These tools can be used by agents for delegation.
"""

from zodsmith.tools.codegen import (
    build_output_config,
    generate_code,
    import_typescript,
    list_templates,
    load_schema,
    load_template_schema,
)
from zodsmith.tools.schema_tools import (
    generate_from_template_tool,
    generate_module_tool,
    generate_schema_tool,
    generate_type_tool,
    import_typescript_tool,
    list_templates_tool,
)

__all__ = [
    # Core helpers
    "build_output_config",
    "generate_code",
    "import_typescript",
    "list_templates",
    "load_schema",
    "load_template_schema",
    # Function tools
    "generate_schema_tool",
    "generate_type_tool",
    "generate_module_tool",
    "import_typescript_tool",
    "list_templates_tool",
    "generate_from_template_tool",
]
