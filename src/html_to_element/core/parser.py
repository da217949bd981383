"""
Markup Parser.

Builds a node tree from an HTML/SVG fragment using the standard library
`html.parser`.

`HTMLParser` lowercases attribute names, which would lose SVG spellings such
as `viewBox`. The builder recovers the written spelling from the raw start
tag text before storing each attribute.
"""

import re
from html.parser import HTMLParser
from typing import Dict, List, Optional, Protocol, Tuple

from html_to_element.core.nodes import CommentNode, ElementNode, ParsedNode, TextNode
from html_to_element.errors import ParseError

VOID_ELEMENTS = frozenset(
  {
    "area",
    "base",
    "br",
    "col",
    "embed",
    "hr",
    "img",
    "input",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
  }
)

_TAG_OPEN_RE = re.compile(r"<[^\s/>]*")
_ATTR_NAME_RE = re.compile(r"""([^\s"'>/=]+)(?:\s*=\s*(?:"[^"]*"|'[^']*'|[^\s"'>]*))?""")


class MarkupParser(Protocol):
  """
  Capability interface for anything that turns markup text into a node tree.
  """

  def parse(self, text: str) -> ElementNode: ...


class _TreeBuilder(HTMLParser):
  """
  HTML Parser callback handler.
  Maintains an open-element stack and appends nodes as the token stream arrives.
  """

  def __init__(self) -> None:
    super().__init__(convert_charrefs=True)
    self.root = ElementNode(tag=None)
    self._stack: List[ElementNode] = [self.root]

  @property
  def _current(self) -> ElementNode:
    return self._stack[-1]

  def handle_starttag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
    element = self._make_element(tag, attrs)
    self._current.children.append(element)
    if tag not in VOID_ELEMENTS:
      self._stack.append(element)

  def handle_startendtag(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> None:
    # <circle /> style: never opens a scope
    self._current.children.append(self._make_element(tag, attrs))

  def handle_endtag(self, tag: str) -> None:
    # Close the nearest matching open element; stray end tags are ignored.
    for depth in range(len(self._stack) - 1, 0, -1):
      if self._stack[depth].tag == tag:
        del self._stack[depth:]
        return

  def handle_data(self, data: str) -> None:
    children = self._current.children
    if children and isinstance(children[-1], TextNode):
      children[-1].text += data
    else:
      children.append(TextNode(data))

  def handle_comment(self, data: str) -> None:
    # Parsers that do not recognize CDATA report it as a bogus comment
    if data.startswith("[CDATA[") and data.endswith("]]"):
      self.handle_data(data[len("[CDATA[") : -2])
      return
    self._current.children.append(CommentNode(data))

  def unknown_decl(self, data: str) -> None:
    if data.startswith("CDATA["):
      self.handle_data(data[len("CDATA[") :])

  def _make_element(self, tag: str, attrs: List[Tuple[str, Optional[str]]]) -> ElementNode:
    spelling = self._written_attr_names()
    ordered: Dict[str, Optional[str]] = {}
    for name, value in attrs:
      original = spelling.get(name, name)
      # First occurrence wins for duplicated attributes
      if original not in ordered:
        ordered[original] = value
    return ElementNode(tag=tag, attrs=ordered)

  def _written_attr_names(self) -> Dict[str, str]:
    """
    Maps lowercased attribute names to their spelling in the raw start tag.

    Returns:
        Dict[str, str]: e.g. {'viewbox': 'viewBox'}.
    """
    raw = self.get_starttag_text() or ""
    head = _TAG_OPEN_RE.match(raw)
    body = raw[head.end() :] if head else raw
    names: Dict[str, str] = {}
    for match in _ATTR_NAME_RE.finditer(body):
      name = match.group(1)
      names.setdefault(name.lower(), name)
    return names


def _is_blank(node: ParsedNode) -> bool:
  if isinstance(node, TextNode):
    return not node.text.strip()
  return isinstance(node, CommentNode)


class HtmlTreeParser:
  """
  Default `MarkupParser` implementation backed by `html.parser`.

  A fragment with exactly one top-level element is returned as that element.
  Anything else (several siblings, bare text) is returned under a synthetic
  root ElementNode whose tag is None.
  """

  def parse(self, text: str) -> ElementNode:
    """
    Parses a markup fragment.

    Args:
        text (str): HTML or SVG source.

    Returns:
        ElementNode: The root of the parsed tree.

    Raises:
        ParseError: If the input is not a string or contains no markup.
    """
    if not isinstance(text, str):
      raise ParseError(f"Expected markup text, got {type(text).__name__}")
    if not text.strip():
      raise ParseError("No markup to parse: input is empty")

    builder = _TreeBuilder()
    builder.feed(text)
    builder.close()

    root = builder.root
    significant = [child for child in root.children if not _is_blank(child)]
    if len(significant) == 1 and isinstance(significant[0], ElementNode):
      return significant[0]
    return root
