#!/usr/bin/env python3
"""
rulekit CLI Entry Point

Handles:
- Listing, showing and searching rule templates
- Printing template locations
- Running the MCP server (stdio)
"""

import argparse
import asyncio
import json
import re
import sys
from pathlib import Path
from typing import Optional

from rulekit import __package_name__, __version__
from rulekit.config import ConfigManager
from rulekit.templates import TEMPLATE_PATHS, TemplateError, TemplateMetadata, TemplateRegistry
from rulekit.utils import Logger


def build_registry(templates_dir: Optional[str]) -> TemplateRegistry:
    """Registry over --templates-dir, or the configured root."""
    config = ConfigManager.get_instance().get()
    root = Path(templates_dir).expanduser() if templates_dir else config.templates_dir
    return TemplateRegistry(
        root,
        skip_directories=config.skip_directories,
        extension=config.template_extension,
    )


def print_templates(templates: list[TemplateMetadata], as_json: bool):
    if as_json:
        print(json.dumps([t.to_dict() for t in templates], indent=2, ensure_ascii=False))
        return

    if not templates:
        print("No templates found.")
        return

    width = max(len(t.key) for t in templates)
    for t in templates:
        flag = " [always]" if t.always_apply else ""
        print(f"{t.key.ljust(width)}  {t.name}{flag}")
        print(f"{' ' * width}  {t.description} ({t.globs})")


def cmd_list(registry: TemplateRegistry, args) -> int:
    print_templates(registry.list(), args.json)
    return 0


def cmd_show(registry: TemplateRegistry, args) -> int:
    template = registry.get(args.key)
    if args.json:
        print(json.dumps(template.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(template.content, end="" if template.content.endswith("\n") else "\n")
    return 0


def cmd_find(registry: TemplateRegistry, args) -> int:
    flags = re.IGNORECASE if args.ignore_case else 0
    try:
        pattern = re.compile(args.pattern, flags)
    except re.error as e:
        print(f"Invalid pattern '{args.pattern}': {e}", file=sys.stderr)
        return 2
    print_templates(registry.find(pattern), args.json)
    return 0


def cmd_paths(registry: TemplateRegistry, args) -> int:
    print(f"templates: {registry.templates_root}")
    for label, path in TEMPLATE_PATHS.items():
        print(f"{label.lower()}: {path}")
    return 0


def cmd_serve(registry: TemplateRegistry, args) -> int:
    from rulekit.server import RuleKitMCPServer
    asyncio.run(RuleKitMCPServer(registry).start())
    return 0


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=__package_name__,
        description="Discover .mdc.liquid rule templates and their metadata",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  rulekit list                   List bundled templates
  rulekit show auth              Print the raw template for key "auth"
  rulekit find "react|api" -i    Search name, description and key
  rulekit --templates-dir ./rules list
  rulekit serve                  Run the MCP server on stdio

MCP Configuration (.cursor/mcp.json):

  {
    "mcpServers": {
      "rulekit": {
        "command": "rulekit",
        "args": ["serve"]
      }
    }
  }
"""
    )
    parser.add_argument("--version", "-v", action="store_true", help="Show version and exit")
    parser.add_argument("--templates-dir", "-d", help="Template root (default: RULEKIT_TEMPLATES_DIR or bundled rules)")

    subparsers = parser.add_subparsers(dest="command")

    list_parser = subparsers.add_parser("list", help="List templates")
    list_parser.add_argument("--json", action="store_true", help="Print JSON")
    list_parser.set_defaults(handler=cmd_list)

    show_parser = subparsers.add_parser("show", help="Show one template")
    show_parser.add_argument("key", help="Template key")
    show_parser.add_argument("--json", action="store_true", help="Print metadata and content as JSON")
    show_parser.set_defaults(handler=cmd_show)

    find_parser = subparsers.add_parser("find", help="Search templates by regex")
    find_parser.add_argument("pattern", help="Regular expression")
    find_parser.add_argument("--ignore-case", "-i", action="store_true", help="Case-insensitive match")
    find_parser.add_argument("--json", action="store_true", help="Print JSON")
    find_parser.set_defaults(handler=cmd_find)

    paths_parser = subparsers.add_parser("paths", help="Print template locations")
    paths_parser.set_defaults(handler=cmd_paths)

    serve_parser = subparsers.add_parser("serve", help="Run the MCP server (stdio)")
    serve_parser.set_defaults(handler=cmd_serve)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"{__package_name__} v{__version__}")
        return 0

    if not args.command:
        parser.print_help()
        return 1

    config = ConfigManager.get_instance().get()
    Logger(name=__package_name__, level=config.log_level)

    registry = build_registry(args.templates_dir)
    try:
        return args.handler(registry, args)
    except TemplateError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
