"""Conversion between HTML text and the canonical tree."""

from __future__ import annotations

import logging
from typing import Dict, Optional

from .adapter import RawNode, parse
from .dom_model import Element, Node

logger = logging.getLogger(__name__)

VOID_ELEMENTS = frozenset({"meta", "base", "link", "img", "br", "hr", "input", "area", "source"})


def _raw_to_node(raw: RawNode) -> Optional[Node]:
    if raw.type == "text":
        data = raw.data or ""
        return data if data.strip() else None
    if not raw.is_element:
        logger.debug("Dropping %s node", raw.type)
        return None
    return Element(name=raw.name or "", attribs=dict(raw.attribs or {}))


def _raw_to_tree(raw: RawNode) -> Element:
    root = _raw_to_node(raw)
    pending = [(raw, root)]
    while pending:
        source, element = pending.pop()
        for child in source.children or []:
            node = _raw_to_node(child)
            if node is None:
                continue
            element.children.append(node)
            if isinstance(node, Element):
                pending.append((child, node))
    return root


def to_tree(html) -> Optional[Element]:
    """Parse HTML and return the tree under its top-level ``<html>`` element.

    Whitespace-only text is dropped, as are comments, doctypes and other
    non-element nodes. Returns ``None`` when the document has no top-level
    ``<html>`` element.
    """
    document = parse(html)
    for raw in document.children:
        if raw.is_element and raw.name == "html":
            return _raw_to_tree(raw)
    logger.debug("No top-level <html> element found")
    return None


def _render_attrs(attribs: Dict[str, str]) -> str:
    # Values are interpolated as-is.
    return " ".join(f'{key}="{value}"' for key, value in attribs.items())


def to_html(node: Node) -> str:
    """Serialize a node back to HTML.

    Text is emitted verbatim; childless void elements use the ``<name />`` form.
    """
    if isinstance(node, str):
        return node
    attrs = _render_attrs(node.attribs or {})
    children = node.children or []
    opening = f"{node.name} {attrs}" if attrs else node.name
    if node.name in VOID_ELEMENTS and not children:
        return f"<{opening} />"
    return f"<{opening}>{''.join(to_html(child) for child in children)}</{node.name}>"


__all__ = ["VOID_ELEMENTS", "to_html", "to_tree"]
