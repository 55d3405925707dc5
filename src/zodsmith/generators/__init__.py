"""
Code generators.

- rules: per-type Zod method fragments
- zod_generator: Zod schema and full module output
- type_generator: TypeScript interface / type / inferred output
"""

from zodsmith.generators.rules import (
    generate_type_code,
    generate_type_methods,
)
from zodsmith.generators.type_generator import (
    generate_inferred_type,
    generate_type_module,
    generate_typescript,
)
from zodsmith.generators.zod_generator import (
    format_default_value,
    generate_field_code,
    generate_full_module,
    generate_zod_schema,
)

__all__ = [
    "generate_zod_schema",
    "generate_full_module",
    "generate_field_code",
    "format_default_value",
    "generate_typescript",
    "generate_inferred_type",
    "generate_type_module",
    "generate_type_methods",
    "generate_type_code",
]
