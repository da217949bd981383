"""
CLI Command Handlers Facade.

Re-exports handlers from `html_to_element.cli.handlers` so the entry point
dispatches through a single patchable module.
"""

from html_to_element.cli.handlers.convert import handle_convert, parse_line_range, replace_selection

__all__ = [
  "handle_convert",
  "parse_line_range",
  "replace_selection",
]
