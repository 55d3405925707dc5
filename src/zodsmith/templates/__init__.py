"""
Ready-made schema templates.
"""

from zodsmith.templates.schemas import (
    get_template_by_id,
    get_template_ids,
    get_templates,
    schema_from_template,
)

__all__ = [
    "get_templates",
    "get_template_ids",
    "get_template_by_id",
    "schema_from_template",
]
