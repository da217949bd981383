"""
Exception types raised by html-to-element.

Only `ConversionError` escapes the public entry points. `ParseError` is raised
by the markup parser and wrapped into a `ConversionError` by the engine.
"""


class ParseError(ValueError):
  """Raised when markup text cannot be turned into a node tree."""


class ConversionError(Exception):
  """
  Raised when a markup tree cannot be converted to element-construction code.

  The original exception is chained as ``__cause__``; its message is
  included in ``str(error)``.
  """
