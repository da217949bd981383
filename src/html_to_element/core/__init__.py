"""
Conversion Core Package.

Parses markup into a node tree and emits element-construction code from it.
"""

from html_to_element.core.converter import TreeConverter
from html_to_element.core.engine import ConversionEngine, ConversionResult, convert_markup_to_code
from html_to_element.core.nodes import CommentNode, ElementNode, ParsedNode, TextNode
from html_to_element.core.parser import HtmlTreeParser, MarkupParser

__all__ = [
  "CommentNode",
  "ConversionEngine",
  "ConversionResult",
  "ElementNode",
  "HtmlTreeParser",
  "MarkupParser",
  "ParsedNode",
  "TextNode",
  "TreeConverter",
  "convert_markup_to_code",
]
