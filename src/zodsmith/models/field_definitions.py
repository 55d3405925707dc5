"""
Field definition models for schema generation.

Each field kind carries its own validation record, so a field's
`validations` always matches its `type`. Aliases follow the camelCase
keys used by the schema editor (``startsWith``, ``itemType``, ...).
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field

# Property and schema names: JS identifiers.
VALID_IDENTIFIER_PATTERN = r"^[A-Za-z_$][A-Za-z0-9_$]*$"

FieldType = Literal["string", "number", "boolean", "date", "enum", "array"]

FIELD_TYPES: tuple[str, ...] = ("string", "number", "boolean", "date", "enum", "array")

Number = int | float


class _Validations(BaseModel):
    model_config = {"populate_by_name": True, "extra": "forbid"}


class StringValidations(_Validations):
    """Constraints for string fields."""

    min_length: int | None = Field(default=None, alias="min")
    max_length: int | None = Field(default=None, alias="max")
    length: int | None = Field(default=None, description="Exact length, wins over min/max")

    email: bool = False
    url: bool = False
    uuid: bool = False
    cuid: bool = False

    regex: str | None = Field(default=None, description="Pattern body, without slashes")
    starts_with: str | None = Field(default=None, alias="startsWith")
    ends_with: str | None = Field(default=None, alias="endsWith")
    includes: str | None = None

    trim: bool = False
    to_lower_case: bool = Field(default=False, alias="toLowerCase")
    to_upper_case: bool = Field(default=False, alias="toUpperCase")


class NumberValidations(_Validations):
    """
    Constraints for number fields.

    The sign flags are independent; nothing stops all four being set.
    """

    minimum: Number | None = Field(default=None, alias="min")
    maximum: Number | None = Field(default=None, alias="max")
    integer: bool = Field(default=False, alias="int")
    positive: bool = False
    negative: bool = False
    nonpositive: bool = False
    nonnegative: bool = False
    multiple_of: Number | None = Field(default=None, alias="multipleOf")
    finite: bool = False


class DateValidations(_Validations):
    """Date bounds as ISO-8601 strings."""

    min_date: str | None = Field(default=None, alias="min")
    max_date: str | None = Field(default=None, alias="max")


class ArrayValidations(_Validations):
    """Constraints for array fields."""

    min_items: int | None = Field(default=None, alias="min")
    max_items: int | None = Field(default=None, alias="max")
    length: int | None = None
    nonempty: bool = False
    item_type: FieldType = Field(default="string", alias="itemType")
    # Stored for the editor; the generators do not read it.
    item_validations: dict[str, Any] | None = Field(default=None, alias="itemValidations")


class EnumValidations(_Validations):
    """Permitted literal values, in declaration order."""

    values: list[str] = Field(default_factory=list)


class BooleanValidations(_Validations):
    """Booleans take no constraints."""


class _FieldBase(BaseModel):
    name: str = Field(..., pattern=VALID_IDENTIFIER_PATTERN, description="Property name")
    required: bool = Field(default=True, description="Whether the property must be present")
    nullable: bool = Field(default=False, description="Whether null is accepted")
    default_value: str | None = Field(
        default=None,
        alias="defaultValue",
        description="Raw default as typed in the editor",
    )
    description: str | None = Field(default=None, description="Doc comment text")

    model_config = {"populate_by_name": True}


class StringField(_FieldBase):
    type: Literal["string"] = "string"
    validations: StringValidations = Field(default_factory=StringValidations)


class NumberField(_FieldBase):
    type: Literal["number"] = "number"
    validations: NumberValidations = Field(default_factory=NumberValidations)


class BooleanField(_FieldBase):
    type: Literal["boolean"] = "boolean"
    validations: BooleanValidations = Field(default_factory=BooleanValidations)


class DateField(_FieldBase):
    type: Literal["date"] = "date"
    validations: DateValidations = Field(default_factory=DateValidations)


class EnumField(_FieldBase):
    type: Literal["enum"] = "enum"
    validations: EnumValidations = Field(default_factory=EnumValidations)


class ArrayField(_FieldBase):
    type: Literal["array"] = "array"
    validations: ArrayValidations = Field(default_factory=ArrayValidations)


FieldDefinition = Annotated[
    Union[StringField, NumberField, BooleanField, DateField, EnumField, ArrayField],
    Field(discriminator="type"),
]

FieldValidations = Union[
    StringValidations,
    NumberValidations,
    BooleanValidations,
    DateValidations,
    EnumValidations,
    ArrayValidations,
]

_FIELD_CLASSES: dict[str, type[_FieldBase]] = {
    "string": StringField,
    "number": NumberField,
    "boolean": BooleanField,
    "date": DateField,
    "enum": EnumField,
    "array": ArrayField,
}

_VALIDATION_CLASSES: dict[str, type[_Validations]] = {
    "string": StringValidations,
    "number": NumberValidations,
    "boolean": BooleanValidations,
    "date": DateValidations,
    "enum": EnumValidations,
    "array": ArrayValidations,
}


def default_validations(field_type: str) -> FieldValidations:
    """Get a fresh, empty validation record for a field type."""
    if field_type not in _VALIDATION_CLASSES:
        raise ValueError(f"Unknown field type: {field_type}")
    return _VALIDATION_CLASSES[field_type]()


def make_field(field_type: str, name: str, **kwargs: Any) -> FieldDefinition:
    """
    Build the field variant for `field_type`.

    Example:
        >>> make_field("number", "age", required=False, validations={"min": 0})
    """
    if field_type not in _FIELD_CLASSES:
        raise ValueError(f"Unknown field type: {field_type}")
    return _FIELD_CLASSES[field_type](name=name, **kwargs)
