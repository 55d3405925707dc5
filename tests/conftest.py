"""Shared fixtures for ZodSmith tests."""

import pytest

from zodsmith.models import OutputConfig, SchemaDefinition


@pytest.fixture
def default_config() -> OutputConfig:
    return OutputConfig(
        type_style="infer",
        include_exports=True,
        schema_name_suffix="Schema",
        type_name_suffix="",
        include_comments=True,
        semicolons=True,
    )


@pytest.fixture
def make_schema():
    """Build a `User` schema from field dicts."""

    def _make(fields: list[dict], description: str | None = "A user schema") -> SchemaDefinition:
        return SchemaDefinition.model_validate({
            "name": "User",
            "description": description,
            "fields": fields,
        })

    return _make
