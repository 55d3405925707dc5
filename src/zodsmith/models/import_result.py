"""
Result model for the TypeScript importer.
"""

from pydantic import BaseModel, Field

from zodsmith.models.schema_definition import SchemaDefinition


class ImportResult(BaseModel):
    """Outcome of importing a TypeScript declaration."""

    success: bool = Field(..., description="Whether a declaration was recognised")
    schema_: SchemaDefinition | None = Field(
        default=None, alias="schema", description="Imported schema if successful"
    )
    error: str | None = Field(default=None, description="Why the import failed")

    model_config = {"populate_by_name": True}

    @property
    def field_count(self) -> int:
        """Get the number of imported fields."""
        if self.schema_ is None:
            return 0
        return len(self.schema_.fields)

    @classmethod
    def failure(cls, error: str) -> "ImportResult":
        return cls(success=False, error=error)
