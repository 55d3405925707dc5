"""
Small text helpers shared by the Zod and TypeScript generators.
"""

import math
from typing import Iterable


def escape_string(value: str) -> str:
    """Escape backslashes and single quotes for a single-quoted JS string."""
    return value.replace("\\", "\\\\").replace("'", "\\'")


def quote(value: str) -> str:
    return f"'{escape_string(value)}'"


def format_number(value: int | float) -> str:
    """Render a number the way JavaScript prints it (2.0 -> "2", inf -> "Infinity")."""
    if isinstance(value, float) and math.isnan(value):
        return "NaN"
    if isinstance(value, float) and math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def doc_block(lines: Iterable[str]) -> list[str]:
    """Wrap lines in a top-level JSDoc block."""
    block = ["/**"]
    block.extend(f" * {line}" for line in lines)
    block.append(" */")
    return block


def member_doc(description: str) -> str:
    """One-line JSDoc for an object member."""
    return f"  /** {description} */"
