"""
Schema-level models.

A `SchemaDefinition` is what the editor hands to the generators, an
`OutputConfig` says how the generated code should look.
"""

from typing import Literal

from pydantic import BaseModel, Field

from zodsmith.models.field_definitions import VALID_IDENTIFIER_PATTERN, FieldDefinition

TypeOutputStyle = Literal["infer", "interface", "type"]


class SchemaDefinition(BaseModel):
    """
    A named object schema.

    Field order is significant: it is the order members are emitted in.
    """

    name: str = Field(..., pattern=VALID_IDENTIFIER_PATTERN, description="Schema/type base name")
    description: str | None = Field(default=None, description="Schema doc comment")
    fields: list[FieldDefinition] = Field(default_factory=list, description="Ordered fields")

    def get_field(self, name: str) -> FieldDefinition | None:
        """Get a field by name."""
        for field in self.fields:
            if field.name == name:
                return field
        return None

    @property
    def field_names(self) -> list[str]:
        return [field.name for field in self.fields]


class OutputConfig(BaseModel):
    """Code style settings for generated output."""

    type_style: TypeOutputStyle = Field(default="infer", alias="typeStyle")
    include_exports: bool = Field(default=True, alias="includeExports")
    schema_name_suffix: str = Field(
        default="Schema",
        alias="schemaNameSuffix",
        description='Appended to the schema name, e.g. "Schema" -> UserSchema',
    )
    type_name_suffix: str = Field(
        default="",
        alias="typeNameSuffix",
        description='Appended to the type name, e.g. "Type" -> UserType',
    )
    include_comments: bool = Field(default=True, alias="includeComments")
    semicolons: bool = True

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def semi(self) -> str:
        return ";" if self.semicolons else ""

    @property
    def export_keyword(self) -> str:
        return "export " if self.include_exports else ""

    def schema_name(self, schema: SchemaDefinition) -> str:
        return f"{schema.name}{self.schema_name_suffix}"

    def type_name(self, schema: SchemaDefinition) -> str:
        return f"{schema.name}{self.type_name_suffix}"


DEFAULT_OUTPUT_CONFIG = OutputConfig()


class SchemaTemplate(BaseModel):
    """A ready-made schema offered as a starting point."""

    id: str = Field(..., description="Template identifier")
    name: str = Field(..., description="Display name")
    description: str = Field(..., description="What the template is for")
    icon: str = Field(default="FileCode", description="Lucide icon name")
    schema_: SchemaDefinition = Field(..., alias="schema")

    model_config = {"populate_by_name": True}
