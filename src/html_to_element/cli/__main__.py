"""
Main Entry Point for html-to-element CLI.

This module handles argument parsing and dispatches to command handlers
defined in `html_to_element.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from html_to_element.cli import commands
from html_to_element import __version__


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(
    prog="html-to-element", description="html-to-element: Convert HTML/SVG markup to createElement calls"
  )
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: CONVERT ---
  cmd_conv = subparsers.add_parser("convert", help="Convert markup in a file (or stdin) to createElement calls")
  cmd_conv.add_argument("path", type=Path, nargs="?", default=None, help="Input document ('-' or omitted for stdin)")
  cmd_conv.add_argument("--out", type=Path, default=None, help="Write the updated document to this file")
  cmd_conv.add_argument(
    "--lines",
    default=None,
    metavar="START:END",
    help="Convert only these 1-based lines (inclusive) and substitute the result in place of them",
  )
  cmd_conv.add_argument("--in-place", action="store_true", help="Overwrite the input file with the result")
  cmd_conv.add_argument("--factory", default=None, help="Element factory callee (default: from toml or createElement)")
  cmd_conv.add_argument("--indent", type=int, default=None, help="Spaces per nesting level (default: from toml or 2)")

  args = parser.parse_args(argv)

  if args.command == "convert":
    return commands.handle_convert(
      args.path,
      output_path=args.out,
      lines=args.lines,
      in_place=args.in_place,
      factory=args.factory,
      indent_width=args.indent,
    )

  return 0


if __name__ == "__main__":
  sys.exit(main())
