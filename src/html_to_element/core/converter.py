"""
Tree Converter.

Walks a parsed markup tree and emits nested element-construction calls:

.. code-block:: text

    createElement("div", {
      className: "a",
      style: { color: "red" }
    },
      createElement("span", null,
        "Hi"
      )
    )

Attribute handling:

1.  `class` becomes `className`, except on SVG elements.
2.  `style` strings are parsed into an object literal with camelCase keys.
    Declarations missing a key or a value are dropped.
3.  Hyphenated/namespaced names (and every attribute of an SVG element) are
    mapped through `ATTRIBUTE_NAME_MAP`, falling back to generic camelCase.
4.  Values that are exactly `"true"` or `"false"` become boolean literals.

Whitespace-only text and non-element nodes (comments) produce no output.
"""

import json
import re
from typing import Dict, List, Optional

from html_to_element.core.nodes import ElementNode, ParsedNode, TextNode
from html_to_element.core.tables import ATTRIBUTE_NAME_MAP, SVG_TAGS
from html_to_element.errors import ConversionError

DEFAULT_FACTORY = "createElement"
DEFAULT_TAG = "div"

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_HYPHEN_RE = re.compile(r"-(.?)")
_SEPARATOR_RE = re.compile(r"[-:](.?)")


def quote(value: str) -> str:
  """Renders a double-quoted string literal with JSON escaping."""
  return json.dumps(value, ensure_ascii=False)


def camel_case_style_key(key: str) -> str:
  """
  Converts a CSS property name to camelCase (`margin-top` -> `marginTop`).

  Args:
      key (str): Kebab-case property name.

  Returns:
      str: The camelCase name.
  """
  return _HYPHEN_RE.sub(lambda m: m.group(1).upper(), key)


def camel_case_attribute(name: str) -> str:
  """
  Generic camelCase for attribute names, treating `-` and `:` as word breaks.

  Args:
      name (str): Attribute name, e.g. 'data-user-id' or 'xml:foo'.

  Returns:
      str: e.g. 'dataUserId' or 'xmlFoo'.
  """
  return _SEPARATOR_RE.sub(lambda m: m.group(1).upper(), name)


def parse_style(style: str) -> Dict[str, str]:
  """
  Parses an inline CSS declaration list into an ordered mapping.

  Each `;`-separated declaration is split at its first `:`. Declarations
  with an empty key or value are skipped. A repeated property keeps its
  first position and its last value.

  Args:
      style (str): Raw `style` attribute value.

  Returns:
      Dict[str, str]: camelCase property name to value.
  """
  styles: Dict[str, str] = {}
  for declaration in style.split(";"):
    key, _, value = declaration.partition(":")
    key = key.strip()
    value = value.strip()
    if key and value:
      styles[camel_case_style_key(key)] = value
  return styles


def _format_key(name: str) -> str:
  return name if _IDENTIFIER_RE.match(name) else quote(name)


def _format_value(value: Optional[str]) -> str:
  if value is None or value == "true":
    return "true"
  if value == "false":
    return "false"
  return quote(value)


class TreeConverter:
  """
  Converts a markup tree into element-construction source text.

  The converter is stateless between calls; indentation depth travels as a
  recursion argument.
  """

  def __init__(self, factory: str = DEFAULT_FACTORY, indent: str = "  ") -> None:
    """
    Initializes the converter.

    Args:
        factory (str): Callee emitted for every element, e.g. 'React.createElement'.
        indent (str): Indentation unit for one nesting level.
    """
    self.factory = factory
    self.indent = indent

  def convert(self, root: ParsedNode) -> str:
    """
    Converts a tree to source text.

    Args:
        root (ParsedNode): Root node produced by a markup parser.

    Returns:
        str: The generated expression, without surrounding whitespace.

    Raises:
        ConversionError: If any node or attribute cannot be converted.
    """
    try:
      return self._convert_node(root, 0).strip()
    except Exception as e:
      raise ConversionError(f"Failed to convert markup: {e}") from e

  def _convert_node(self, node: ParsedNode, level: int) -> str:
    pad = self.indent * level

    if isinstance(node, TextNode):
      text = node.text.strip()
      if not text:
        return ""
      return f"{pad}{quote(text)}"

    if not isinstance(node, ElementNode):
      return ""

    tag = (node.tag or DEFAULT_TAG).lower()
    is_svg = tag in SVG_TAGS

    props = [self._convert_attribute(name, value, is_svg) for name, value in node.attrs.items()]
    # Plain loop: one stack frame per nesting level
    children: List[str] = []
    for child in node.children:
      out = self._convert_node(child, level + 1)
      if out:
        children.append(out)

    call = f"{self.factory}({quote(tag)}"
    if not props and not children:
      return f"{pad}{call})"

    if props:
      inner = self.indent * (level + 1)
      body = ",\n".join(f"{inner}{prop}" for prop in props)
      props_literal = f"{{\n{body}\n{pad}}}"
    else:
      props_literal = "null"

    if not children:
      return f"{pad}{call}, {props_literal})"

    return f"{pad}{call}, {props_literal},\n" + ",\n".join(children) + f"\n{pad})"

  def _convert_attribute(self, name: str, value: Optional[str], is_svg: bool) -> str:
    lowered = name.lower()

    if lowered == "class" and not is_svg:
      return f"className: {quote(value or '')}"

    if lowered == "style":
      return f"style: {self._style_literal(value or '')}"

    prop = name
    if is_svg or ":" in name or "-" in name:
      prop = ATTRIBUTE_NAME_MAP.get(name) or camel_case_attribute(name)
    return f"{_format_key(prop)}: {_format_value(value)}"

  def _style_literal(self, style: str) -> str:
    styles = parse_style(style)
    if not styles:
      return "{}"
    entries: List[str] = [f"{_format_key(key)}: {quote(value)}" for key, value in styles.items()]
    return "{ " + ", ".join(entries) + " }"
