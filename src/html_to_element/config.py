"""
Runtime Configuration Store.

Settings are read from the `[tool.html_to_element]` table of the nearest
`pyproject.toml` and overridden by explicit (CLI) arguments.
"""

import re
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

if sys.version_info >= (3, 11):
  import tomllib
else:
  try:
    import tomli as tomllib
  except ImportError:
    tomllib = None  # type: ignore

TOOL_SECTION = "html_to_element"

_DOTTED_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][\w$]*(\.[A-Za-z_$][\w$]*)*$")


class RuntimeConfig(BaseModel):
  """
  Global configuration container for the conversion engine.
  """

  factory: str = Field(
    "createElement",
    description="Callee emitted for every element (e.g. 'React.createElement', 'h').",
  )
  indent_width: int = Field(2, ge=1, description="Spaces per nesting level in generated code.")

  @field_validator("factory")
  @classmethod
  def validate_factory(cls, v: str) -> str:
    """
    Ensures the factory is a (dotted) JavaScript identifier path.

    Args:
        v (str): The configured callee.

    Returns:
        str: The stripped callee.

    Raises:
        ValueError: If the value cannot be used as a callee.
    """
    v_clean = v.strip()
    if not _DOTTED_IDENTIFIER_RE.match(v_clean):
      raise ValueError(f"Invalid factory '{v}': expected an identifier such as 'React.createElement'")
    return v_clean

  @property
  def indent(self) -> str:
    return " " * self.indent_width

  @classmethod
  def load(
    cls,
    factory: Optional[str] = None,
    indent_width: Optional[int] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Args:
        factory (Optional[str]): Override for the element factory.
        indent_width (Optional[int]): Override for the indentation width.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.

    Raises:
        ValueError: If a resolved value fails validation.
    """
    toml_config, _ = _load_toml_settings(search_path or Path.cwd())

    settings: Dict[str, Any] = {}
    final_factory = factory or toml_config.get("factory")
    if final_factory is not None:
      settings["factory"] = final_factory

    final_indent = indent_width if indent_width is not None else toml_config.get("indent_width")
    if final_indent is not None:
      settings["indent_width"] = final_indent

    return cls(**settings)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches the directory and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  if not tomllib:
    return {}, None

  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError):
        return {}, None

      tool_section = data.get("tool", {})
      return tool_section.get(TOOL_SECTION, {}), parent

  return {}, None
