"""
TypeScript import for ZodSmith.
"""

from zodsmith.importer.typescript_importer import (
    import_schema,
    map_type_string,
    parse_typescript,
)

__all__ = [
    "import_schema",
    "parse_typescript",
    "map_type_string",
]
