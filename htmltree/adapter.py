"""Adapter that turns HTML text into a raw parse tree using BeautifulSoup."""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from bs4 import (
    BeautifulSoup,
    CData,
    Comment,
    Declaration,
    Doctype,
    FeatureNotFound,
    MarkupResemblesLocatorWarning,
    NavigableString,
    ProcessingInstruction,
    Tag,
)
from bs4.builder import ParserRejectedMarkup

from .errors import ParseAdapterError

logger = logging.getLogger(__name__)

PARSER_FEATURES = "html.parser"

ELEMENT_TYPES = frozenset({"tag", "script", "style"})

# Tags htmlparser-style trees give a dedicated node type.
_TYPED_TAGS = {"script": "script", "style": "style"}

_DIRECTIVE_STRINGS = (Doctype, Declaration, ProcessingInstruction)


@dataclass
class RawNode:
    """A node of the low-level parse tree.

    ``name``, ``attribs`` and ``children`` are meaningful for element-like
    nodes, ``data`` for text and the other string-bearing node types.
    """

    type: str
    name: Optional[str] = None
    attribs: Dict[str, str] = field(default_factory=dict)
    data: Optional[str] = None
    children: List["RawNode"] = field(default_factory=list)

    @property
    def is_element(self) -> bool:
        return self.type in ELEMENT_TYPES


def _string_type(value: NavigableString) -> str:
    if isinstance(value, Comment):
        return "comment"
    if isinstance(value, CData):
        return "cdata"
    if isinstance(value, _DIRECTIVE_STRINGS):
        return "directive"
    return "text"


def _attribs(tag: Tag) -> Dict[str, str]:
    attribs: Dict[str, str] = {}
    for key, value in tag.attrs.items():
        if isinstance(value, (list, tuple)):
            value = " ".join(value)
        attribs[key] = "" if value is None else str(value)
    return attribs


def _convert_leaf(element) -> Optional[RawNode]:
    if isinstance(element, Tag):
        return RawNode(
            type=_TYPED_TAGS.get(element.name, "tag"),
            name=element.name,
            attribs=_attribs(element),
        )
    if isinstance(element, NavigableString):
        return RawNode(type=_string_type(element), data=str(element))
    return None


def _convert(soup: BeautifulSoup) -> RawNode:
    # Explicit stack so nesting depth does not consume Python frames.
    root = RawNode(type="root")
    pending = [(soup, root)]
    while pending:
        element, parent = pending.pop()
        for child in element.contents:
            node = _convert_leaf(child)
            if node is None:
                continue
            parent.children.append(node)
            if isinstance(child, Tag):
                pending.append((child, node))
    return root


def parse(html: Union[str, bytes]) -> RawNode:
    """Parse HTML into a raw tree rooted at a ``"root"`` node.

    Raises :class:`ParseAdapterError` when the parser cannot handle the input.
    """
    if not isinstance(html, (str, bytes)):
        raise ParseAdapterError(f"Expected HTML text, got {type(html).__name__}")
    try:
        with warnings.catch_warnings():
            # Short inputs such as "index.html" are markup here, never paths.
            warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)
            soup = BeautifulSoup(html, PARSER_FEATURES, multi_valued_attributes=None)
        root = _convert(soup)
    except (ParserRejectedMarkup, FeatureNotFound, RecursionError) as exc:
        raise ParseAdapterError(f"HTML parser rejected the input: {exc}") from exc
    logger.debug("Parsed %d top-level nodes", len(root.children))
    return root


__all__ = ["ELEMENT_TYPES", "RawNode", "parse"]
