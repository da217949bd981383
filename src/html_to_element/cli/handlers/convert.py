"""
Convert Command Handler.

This module implements the logic for the `html-to-element convert` command.
It orchestrates:
1. Configuration loading (pyproject.toml + CLI overrides).
2. Reading the document (file or stdin) and selecting the region to convert.
3. Conversion via the Engine.
4. Substituting the result back into the document and writing it out.

On failure the document is left untouched and the error is logged.
"""

import sys
from pathlib import Path
from typing import Optional, Tuple

from rich.markup import escape

from html_to_element.config import RuntimeConfig
from html_to_element.core.engine import ConversionEngine
from html_to_element.utils.console import log_error, log_info, log_success


def parse_line_range(text: str) -> Tuple[int, int]:
  """
  Parses a 1-based inclusive 'START:END' line range.

  Args:
      text (str): e.g. '3:7', or '5' for a single line.

  Returns:
      Tuple[int, int]: (start, end).

  Raises:
      ValueError: If the range is malformed or empty.
  """
  start_str, sep, end_str = text.partition(":")
  try:
    start = int(start_str)
    end = int(end_str) if sep else start
  except ValueError:
    raise ValueError(f"Invalid line range '{text}': expected START:END")
  if start < 1 or end < start:
    raise ValueError(f"Invalid line range '{text}': START must be >= 1 and <= END")
  return start, end


def replace_selection(document: str, line_range: Optional[Tuple[int, int]], engine: ConversionEngine) -> str:
  """
  Converts the selected lines of a document and returns the updated document.

  Without a range the whole document is the selection. A trailing newline on
  the selection is kept after the generated code.

  Args:
      document (str): Full document text.
      line_range (Optional[Tuple[int, int]]): 1-based inclusive line range.
      engine (ConversionEngine): Engine performing the conversion.

  Returns:
      str: The document with the selection replaced.

  Raises:
      ValueError: If the range lies outside the document.
      ConversionError: If the selection cannot be converted.
  """
  if line_range is None:
    selected = document
    before, after = "", ""
  else:
    lines = document.splitlines(keepends=True)
    start, end = line_range
    if end > len(lines):
      raise ValueError(f"Line range {start}:{end} exceeds document length ({len(lines)} lines)")
    before = "".join(lines[: start - 1])
    selected = "".join(lines[start - 1 : end])
    after = "".join(lines[end:])

  converted = engine.convert(selected)
  if selected.endswith("\n"):
    converted += "\n"
  return before + converted + after


def handle_convert(
  input_path: Optional[Path],
  output_path: Optional[Path] = None,
  lines: Optional[str] = None,
  in_place: bool = False,
  factory: Optional[str] = None,
  indent_width: Optional[int] = None,
) -> int:
  """
  Handles the 'convert' command execution.

  Args:
      input_path: Document to read. None or '-' reads stdin.
      output_path: Where to write the updated document.
      lines: Optional 'START:END' selection to convert instead of the whole document.
      in_place: If True, write the updated document back to `input_path`.
      factory: Override for the element factory callee.
      indent_width: Override for indentation width.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  from_stdin = input_path is None or str(input_path) == "-"

  if in_place and from_stdin:
    log_error("--in-place requires an input file.")
    return 1
  if not from_stdin and not input_path.is_file():
    log_error(f"Input not found: {input_path}")
    return 1

  try:
    line_range = parse_line_range(lines) if lines else None
    search_path = Path.cwd() if from_stdin else input_path.parent
    config = RuntimeConfig.load(factory=factory, indent_width=indent_width, search_path=search_path)
  except ValueError as e:
    log_error(escape(str(e)))
    return 1

  try:
    if from_stdin:
      document = sys.stdin.read()
    else:
      document = input_path.read_text(encoding="utf-8")

    engine = ConversionEngine(config=config)
    updated = replace_selection(document, line_range, engine)
  except Exception as e:
    log_error(f"Conversion failed: {escape(str(e))}")
    return 1

  source_label = "stdin" if from_stdin else str(input_path)
  destination = input_path if in_place else output_path

  if destination is None:
    sys.stdout.write(updated if updated.endswith("\n") else updated + "\n")
    log_success(f"Converted [path]{source_label}[/path]")
    return 0

  try:
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(updated, encoding="utf-8")
  except OSError as e:
    log_error(f"Failed to write {destination}: {escape(str(e))}")
    return 1

  if line_range:
    log_info(f"Replaced lines {line_range[0]}-{line_range[1]}")
  log_success(f"Converted: [path]{source_label}[/path] -> [path]{destination}[/path]")
  return 0
