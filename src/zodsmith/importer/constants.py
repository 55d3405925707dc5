"""
Patterns used by the TypeScript importer.

Centralizing these keeps the recognised syntax in one place:
interface/type blocks, the optional marker, `| null` unions,
`T[]` arrays and string-literal unions. Everything else is read
as a string field.
"""

import re

# First `interface Name { ... }` or `type Name = { ... }` in the input
DECLARATION_PATTERN = re.compile(r"(?:interface|type)\s+(\w+)\s*(?:=\s*)?\{([^}]+)\}", re.DOTALL | re.ASCII)

# One member: ASCII name, optional "?", raw type up to ; , or newline.
# Members with non-ASCII names are skipped.
MEMBER_PATTERN = re.compile(r"(\w+)(\?)?:\s*([^;,\n]+)", re.ASCII)

# A null member anywhere in a union
NULL_UNION_PATTERN = re.compile(r"\s*\|\s*null\b|\bnull\s*\|\s*")

ARRAY_SUFFIX = "[]"

QUOTE_CHARS = ("'", '"')

NUMBER_KEYWORDS = ("number", "int", "float")
BOOLEAN_KEYWORDS = ("boolean", "bool")

IMPORTED_DESCRIPTION = "Imported from TypeScript"
