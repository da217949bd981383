"""
Markup Tree Nodes.

Defines the parsed representation of an HTML/SVG fragment consumed by the
converter:
- TextNode: Raw character data between tags.
- ElementNode: A tag with ordered attributes and child nodes.
- CommentNode: Markup comments; kept in the tree but never emitted.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union


@dataclass
class TextNode:
  """
  Character data found between tags.

  Attributes:
      text (str): The raw text, entities already decoded.
  """

  text: str


@dataclass
class CommentNode:
  """
  A `<!-- ... -->` comment.

  Attributes:
      text (str): Comment body without delimiters.
  """

  text: str


@dataclass
class ElementNode:
  """
  An element with ordered attributes and children.

  Attributes:
      tag (Optional[str]): Tag name. None for the synthetic fragment root.
      attrs (Dict[str, Optional[str]]): Attribute name to raw value, in source order.
                                        A None value means the attribute had no value (`<input disabled>`).
      children (List[ParsedNode]): Child nodes in document order.
  """

  tag: Optional[str] = None
  attrs: Dict[str, Optional[str]] = field(default_factory=dict)
  children: List["ParsedNode"] = field(default_factory=list)


ParsedNode = Union[TextNode, ElementNode, CommentNode]
