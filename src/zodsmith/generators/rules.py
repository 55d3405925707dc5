"""
Per-type validation generators.

Each generator maps a validation record to the ordered list of Zod
method fragments, starting with the base constructor call. The order
is fixed per type; joining the fragments gives the field's schema
expression before modifiers (nullable/optional/default).

Generators never raise: a rule that is not set simply emits nothing.
"""

from zodsmith.generators.formatting import format_number, quote
from zodsmith.models.field_definitions import (
    ArrayValidations,
    DateValidations,
    EnumValidations,
    FieldDefinition,
    NumberValidations,
    StringValidations,
)

# Base Zod calls for array items; anything else becomes z.unknown()
ITEM_BASE_CODE = {
    "string": "z.string()",
    "number": "z.number()",
    "boolean": "z.boolean()",
    "date": "z.date()",
}

UNKNOWN_CODE = "z.unknown()"
NEVER_CODE = "z.never()"


def generate_string_methods(validations: StringValidations) -> list[str]:
    methods = ["z.string()"]

    # Length
    if validations.length is not None:
        methods.append(f".length({validations.length})")
    else:
        if validations.min_length is not None:
            methods.append(f".min({validations.min_length})")
        if validations.max_length is not None:
            methods.append(f".max({validations.max_length})")

    # Formats
    if validations.email:
        methods.append(".email()")
    if validations.url:
        methods.append(".url()")
    if validations.uuid:
        methods.append(".uuid()")
    if validations.cuid:
        methods.append(".cuid()")

    # Patterns
    if validations.regex:
        methods.append(f".regex(/{validations.regex}/)")
    if validations.starts_with:
        methods.append(f".startsWith({quote(validations.starts_with)})")
    if validations.ends_with:
        methods.append(f".endsWith({quote(validations.ends_with)})")
    if validations.includes:
        methods.append(f".includes({quote(validations.includes)})")

    # Transforms
    if validations.trim:
        methods.append(".trim()")
    if validations.to_lower_case:
        methods.append(".toLowerCase()")
    if validations.to_upper_case:
        methods.append(".toUpperCase()")

    return methods


def generate_number_methods(validations: NumberValidations) -> list[str]:
    methods = ["z.number()"]

    if validations.integer:
        methods.append(".int()")
    if validations.finite:
        methods.append(".finite()")

    if validations.minimum is not None:
        methods.append(f".min({format_number(validations.minimum)})")
    if validations.maximum is not None:
        methods.append(f".max({format_number(validations.maximum)})")
    if validations.multiple_of is not None:
        methods.append(f".multipleOf({format_number(validations.multiple_of)})")

    # Sign flags are emitted as given, even when they contradict each other
    if validations.positive:
        methods.append(".positive()")
    if validations.nonnegative:
        methods.append(".nonnegative()")
    if validations.negative:
        methods.append(".negative()")
    if validations.nonpositive:
        methods.append(".nonpositive()")

    return methods


def generate_date_methods(validations: DateValidations) -> list[str]:
    methods = ["z.date()"]

    if validations.min_date:
        methods.append(f".min(new Date('{validations.min_date}'))")
    if validations.max_date:
        methods.append(f".max(new Date('{validations.max_date}'))")

    return methods


def generate_item_type_code(item_type: str) -> str:
    """Get the base Zod call for an array item type."""
    return ITEM_BASE_CODE.get(item_type, UNKNOWN_CODE)


def generate_array_methods(validations: ArrayValidations) -> list[str]:
    methods = [f"z.array({generate_item_type_code(validations.item_type)})"]

    if validations.nonempty:
        methods.append(".nonempty()")
    elif validations.length is not None:
        methods.append(f".length({validations.length})")
    else:
        if validations.min_items is not None:
            methods.append(f".min({validations.min_items})")
        if validations.max_items is not None:
            methods.append(f".max({validations.max_items})")

    return methods


def generate_enum_methods(validations: EnumValidations) -> list[str]:
    if not validations.values:
        return [NEVER_CODE]

    values = ", ".join(quote(value) for value in validations.values)
    return [f"z.enum([{values}])"]


def generate_boolean_methods() -> list[str]:
    return ["z.boolean()"]


def generate_type_methods(field: FieldDefinition) -> list[str]:
    """
    Get the ordered Zod method fragments for a field's type and rules.

    Args:
        field: Any field variant.

    Returns:
        Fragments such as ``["z.number()", ".int()", ".min(0)"]``.
    """
    if field.type == "string":
        return generate_string_methods(field.validations)
    if field.type == "number":
        return generate_number_methods(field.validations)
    if field.type == "boolean":
        return generate_boolean_methods()
    if field.type == "date":
        return generate_date_methods(field.validations)
    if field.type == "array":
        return generate_array_methods(field.validations)
    if field.type == "enum":
        return generate_enum_methods(field.validations)
    return [UNKNOWN_CODE]


def generate_type_code(field: FieldDefinition) -> str:
    """Get the Zod expression for a field's type and rules, without modifiers."""
    return "".join(generate_type_methods(field))
