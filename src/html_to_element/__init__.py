"""
html-to-element Package.

Converts HTML/SVG fragments into nested element-construction calls
(the `createElement(type, props, ...children)` idiom of virtual-DOM libraries).

Usage
-----

Simple String Conversion
^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import html_to_element as hte
    print(hte.convert('<p class="lead">Hi</p>'))
    # createElement("p", {
    #   className: "lead"
    # },
    #   "Hi"
    # )

Engine Usage
^^^^^^^^^^^^

.. code-block:: python

    from html_to_element import ConversionEngine, RuntimeConfig

    engine = ConversionEngine(config=RuntimeConfig(factory="React.createElement"))
    res = engine.run("<br>")

    if res.success:
        print(res.code)
    else:
        print(f"Errors: {res.errors}")
"""

from typing import Optional

from html_to_element.config import RuntimeConfig
from html_to_element.core.engine import ConversionEngine, ConversionResult, convert_markup_to_code, load_config
from html_to_element.errors import ConversionError, ParseError

__version__ = "0.1.0"


def convert(text: str, factory: Optional[str] = None, indent_width: Optional[int] = None) -> str:
  """
  Converts a markup string to element-construction code.

  Args:
      text (str): HTML or SVG fragment.
      factory (Optional[str]): Callee to emit. Defaults to config/`createElement`.
      indent_width (Optional[int]): Spaces per nesting level. Defaults to config/2.

  Returns:
      str: Generated source text.

  Raises:
      ConversionError: If the markup cannot be converted or the configuration is invalid.
  """
  config = load_config(factory=factory, indent_width=indent_width)
  return convert_markup_to_code(text, config=config)


__all__ = [
  "ConversionEngine",
  "ConversionError",
  "ConversionResult",
  "ParseError",
  "RuntimeConfig",
  "convert",
  "convert_markup_to_code",
  "__version__",
]
