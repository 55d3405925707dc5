"""
ZodSmith command line interface.

Usage:
    # Generate a module from a schema definition (JSON)
    zodsmith generate user.schema.json --style interface

    # Only the Zod schema, no semicolons
    zodsmith generate user.schema.json --output schema --no-semicolons

    # Import a TypeScript declaration (prints the schema definition JSON)
    zodsmith import user.ts

    # Built-in templates
    zodsmith templates
    zodsmith template product --style type
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from zodsmith.config import get_config
from zodsmith.tools.codegen import (
    OUTPUT_KINDS,
    build_output_config,
    generate_code,
    import_typescript,
    list_templates,
    load_template_schema,
)

logger = logging.getLogger(__name__)


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    config = get_config()

    parser.add_argument(
        "--output",
        choices=OUTPUT_KINDS,
        default="module",
        help="What to generate (default: module)",
    )
    parser.add_argument(
        "--style",
        choices=["infer", "interface", "type"],
        default=None,
        help=f"TypeScript type style (default: {config.type_style})",
    )
    parser.add_argument("--schema-suffix", default=None, help="Schema name suffix")
    parser.add_argument("--type-suffix", default=None, help="Type name suffix")
    parser.add_argument("--no-exports", action="store_true", help="Do not export declarations")
    parser.add_argument("--no-comments", action="store_true", help="Omit doc comments")
    parser.add_argument("--no-semicolons", action="store_true", help="Omit semicolons")


def _output_config(args: argparse.Namespace):
    return build_output_config(
        type_style=args.style,
        schema_name_suffix=args.schema_suffix,
        type_name_suffix=args.type_suffix,
        include_exports=False if args.no_exports else None,
        include_comments=False if args.no_comments else None,
        semicolons=False if args.no_semicolons else None,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zodsmith",
        description="Generate Zod schemas and TypeScript types from schema definitions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables:
  ZODSMITH_TYPE_STYLE        Default type style: infer, interface or type
  ZODSMITH_SCHEMA_SUFFIX     Default schema name suffix (default: Schema)
  ZODSMITH_TYPE_SUFFIX       Default type name suffix (default: empty)
  ZODSMITH_INCLUDE_EXPORTS   true/false
  ZODSMITH_INCLUDE_COMMENTS  true/false
  ZODSMITH_SEMICOLONS        true/false
  ZODSMITH_LOG_LEVEL         Logging level (default: INFO)
        """,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate code from a schema JSON file")
    generate.add_argument("file", help="Schema definition JSON file, or - for stdin")
    _add_output_arguments(generate)

    import_parser = subparsers.add_parser("import", help="Import a TypeScript declaration")
    import_parser.add_argument("file", help="TypeScript file, or - for stdin")

    template = subparsers.add_parser("template", help="Generate code from a built-in template")
    template.add_argument("template_id", help="Template ID (see 'templates')")
    _add_output_arguments(template)

    subparsers.add_parser("templates", help="List built-in templates")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    config = get_config()
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    args = build_parser().parse_args(argv)

    try:
        if args.command == "generate":
            print(generate_code(_read_source(args.file), output=args.output, config=_output_config(args)))
        elif args.command == "template":
            schema = load_template_schema(args.template_id)
            print(generate_code(schema, output=args.output, config=_output_config(args)))
        elif args.command == "templates":
            for template in list_templates():
                print(f"{template['id']:<14} {template['description']}")
        elif args.command == "import":
            result = import_typescript(_read_source(args.file))
            if not result["success"]:
                print(f"Error: {result['error']}", file=sys.stderr)
                return 1
            print(json.dumps(result["schema"], indent=config.indent_json_output))
    except ValidationError as e:
        print(f"Invalid schema definition:\n{e}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
