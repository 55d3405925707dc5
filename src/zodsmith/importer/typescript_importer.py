"""
TypeScript importer.

Best-effort extraction of a SchemaDefinition from a pasted TypeScript
`interface` or `type` declaration. This is pattern matching, not a
parser: only the constructs listed in `importer.constants` are
understood, and unknown types are read as strings.
"""

import logging
from typing import Any

from zodsmith.importer.constants import (
    ARRAY_SUFFIX,
    BOOLEAN_KEYWORDS,
    DECLARATION_PATTERN,
    IMPORTED_DESCRIPTION,
    MEMBER_PATTERN,
    NULL_UNION_PATTERN,
    NUMBER_KEYWORDS,
    QUOTE_CHARS,
)
from zodsmith.models.field_definitions import (
    FieldDefinition,
    default_validations,
    make_field,
)
from zodsmith.models.import_result import ImportResult
from zodsmith.models.schema_definition import SchemaDefinition

logger = logging.getLogger(__name__)


def map_type_string(type_str: str) -> str:
    """Map a TypeScript type name to a field type, defaulting to "string"."""
    lower = type_str.strip().lower()

    if lower == "string":
        return "string"
    if lower in NUMBER_KEYWORDS:
        return "number"
    if lower in BOOLEAN_KEYWORDS:
        return "boolean"
    if "date" in lower:
        return "date"
    return "string"


def _extract_enum_values(type_str: str) -> list[str]:
    values = []
    for part in type_str.split("|"):
        value = part.strip()
        for char in QUOTE_CHARS:
            value = value.replace(char, "")
        if value:
            values.append(value)
    return values


def parse_member_type(name: str, type_str: str, required: bool) -> FieldDefinition:
    """
    Build a field from one member's raw type text.

    Args:
        name: Member name.
        type_str: Raw type text, e.g. ``"'a' | 'b' | null"``.
        required: False when the member carried a `?` marker.
    """
    nullable = NULL_UNION_PATTERN.search(type_str) is not None
    clean_type = NULL_UNION_PATTERN.sub("", type_str).strip()

    common: dict[str, Any] = {"required": required, "nullable": nullable}

    if clean_type.endswith(ARRAY_SUFFIX):
        item_type = map_type_string(clean_type[: -len(ARRAY_SUFFIX)])
        return make_field("array", name, validations={"item_type": item_type}, **common)

    if any(char in clean_type for char in QUOTE_CHARS):
        values = _extract_enum_values(clean_type)
        if values:
            return make_field("enum", name, validations={"values": values}, **common)

    field_type = map_type_string(clean_type)
    return make_field(field_type, name, validations=default_validations(field_type), **common)


def parse_typescript(code: str) -> SchemaDefinition | None:
    """
    Parse the first interface/type declaration in `code`.

    Returns:
        The imported schema, or None when no declaration is found.

    Raises:
        pydantic.ValidationError: If the declaration name or a member
            name is not a valid identifier.
    """
    match = DECLARATION_PATTERN.search(code)
    if not match:
        return None

    name, body = match.group(1), match.group(2)
    fields = [
        parse_member_type(member.group(1), member.group(3).strip(), not member.group(2))
        for member in MEMBER_PATTERN.finditer(body)
    ]

    logger.debug("Recognised declaration %s with %d members", name, len(fields))
    return SchemaDefinition(name=name, description=IMPORTED_DESCRIPTION, fields=fields)


def import_schema(code: str) -> ImportResult:
    """
    Import a schema from TypeScript source text.

    Never raises: empty input, text without a recognisable declaration,
    and unexpected faults all come back as a failed ImportResult. A
    successful result always carries a fresh schema.

    Example:
        >>> result = import_schema("interface User { id: string; age?: number }")
        >>> result.success, [f.name for f in result.schema_.fields]
        (True, ['id', 'age'])
    """
    if not code or not code.strip():
        return ImportResult.failure("No TypeScript code provided")

    try:
        schema = parse_typescript(code)
    except Exception as e:
        logger.error(f"Failed to import TypeScript: {type(e).__name__}: {e}")
        return ImportResult.failure(f"Could not parse TypeScript: {e}")

    if schema is None:
        return ImportResult.failure("No interface or type declaration found")

    return ImportResult(success=True, schema=schema)
