"""
Conversion Engine.

Couples a markup parser with the `TreeConverter`:

1.  **Parse**: markup text -> node tree (`HtmlTreeParser` unless injected).
    Parser failures are wrapped into a single `ConversionError`.
2.  **Convert**: node tree -> element-construction source text.

`ConversionEngine.run` returns a `ConversionResult` instead of raising, for
hosts that report outcomes rather than handle exceptions.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from html_to_element.config import RuntimeConfig
from html_to_element.core.converter import TreeConverter
from html_to_element.core.parser import HtmlTreeParser, MarkupParser
from html_to_element.errors import ConversionError


def load_config(factory: Optional[str] = None, indent_width: Optional[int] = None) -> RuntimeConfig:
  """
  Loads configuration for an implicit (host-driven) conversion.

  Args:
      factory (Optional[str]): Override for the element factory.
      indent_width (Optional[int]): Override for the indentation width.

  Returns:
      RuntimeConfig: The resolved configuration.

  Raises:
      ConversionError: If pyproject.toml or the overrides hold invalid values.
  """
  try:
    return RuntimeConfig.load(factory=factory, indent_width=indent_width)
  except ValueError as e:
    raise ConversionError(f"Invalid configuration: {e}") from e


class ConversionResult(BaseModel):
  """
  Structured result of a single conversion.
  """

  code: str = Field(default="", description="The generated source code.")
  errors: List[str] = Field(default_factory=list, description="Error messages recorded during conversion.")
  success: bool = Field(default=True, description="True if the conversion produced code.")

  @property
  def has_errors(self) -> bool:
    return len(self.errors) > 0


class ConversionEngine:
  """
  The main conversion unit.
  """

  def __init__(self, config: Optional[RuntimeConfig] = None, parser: Optional[MarkupParser] = None):
    """
    Initializes the Engine.

    Args:
        config (RuntimeConfig, optional): Runtime configuration. Loaded from pyproject.toml if None.
        parser (MarkupParser, optional): Markup parser. Defaults to `HtmlTreeParser`.

    Raises:
        ConversionError: If configuration has to be loaded and is invalid.
    """
    self.config = config or load_config()
    self.parser = parser or HtmlTreeParser()
    self.converter = TreeConverter(factory=self.config.factory, indent=self.config.indent)

  def convert(self, text: str) -> str:
    """
    Converts markup text to element-construction code.

    Args:
        text (str): HTML or SVG fragment.

    Returns:
        str: Generated source text.

    Raises:
        ConversionError: If parsing or conversion fails. No partial output is produced.
    """
    try:
      root = self.parser.parse(text)
    except Exception as e:
      raise ConversionError(f"Failed to parse markup: {e}") from e
    return self.converter.convert(root)

  def run(self, text: str) -> ConversionResult:
    """
    Converts markup text, reporting failure in the result rather than raising.

    Args:
        text (str): HTML or SVG fragment.

    Returns:
        ConversionResult: Generated code or the error message.
    """
    try:
      code = self.convert(text)
    except ConversionError as e:
      return ConversionResult(success=False, errors=[str(e)])
    return ConversionResult(code=code)


def convert_markup_to_code(text: str, config: Optional[RuntimeConfig] = None) -> str:
  """
  Host entry point: converts a markup string to source text.

  Args:
      text (str): HTML or SVG fragment.
      config (RuntimeConfig, optional): Runtime configuration.

  Returns:
      str: Generated source text.

  Raises:
      ConversionError: If the markup cannot be parsed or converted.
  """
  return ConversionEngine(config=config).convert(text)
