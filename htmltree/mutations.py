"""In-place edits of the document head and resource extraction."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .document import DEFAULT_CHARSET, DEFAULT_VIEWPORT
from .dom_model import Element, Node, Resource
from .traversal import NodeView, exists, traverse

logger = logging.getLogger(__name__)

RESOURCE_ATTRS = ("src", "href", "data", "action")


def _child_index(root: Element, name: str) -> int:
    for index, child in enumerate(root.children):
        if isinstance(child, Element) and child.name == name:
            return index
    return -1


def ensure_head(root: Element) -> Element:
    """Return the ``<head>`` child of ``root``, creating it if needed.

    A new head goes right before ``<body>`` when there is one, otherwise first.
    """
    if root.children is None:
        root.children = []
    head_index = _child_index(root, "head")
    if head_index > -1:
        return root.children[head_index]

    head = Element("head")
    index = max(_child_index(root, "body"), 0)
    root.children.insert(index, head)
    logger.debug("Inserted <head> at index %d", index)
    return head


def _replace_titles(node: Node, text: str) -> None:
    if not isinstance(node, Element):
        return
    if node.name == "title":
        node.children = [text]
        return
    for child in node.children or []:
        _replace_titles(child, text)


def set_title(root: Element, text: str) -> None:
    """Rewrite every ``<title>``, or prepend one to the head if there is none."""
    if exists(root, lambda view: view.name == "title"):
        _replace_titles(root, text)
        return
    ensure_head(root).children.insert(0, Element("title", children=[text]))


def _signals_charset(view: NodeView) -> bool:
    if view.name != "meta":
        return False
    attribs = view.attribs or {}
    if attribs.get("charset"):
        return True
    http_equiv = attribs.get("http-equiv", "")
    content = attribs.get("content", "")
    if http_equiv.lower() == "content-type" and "charset" in content.lower():
        return True
    return attribs.get("name", "").lower() == "charset"


def set_charset(root: Element, charset: str = DEFAULT_CHARSET) -> None:
    """Prepend ``<meta charset>`` to the head unless some meta already declares one."""
    if exists(root, _signals_charset):
        return
    ensure_head(root).children.insert(0, Element("meta", {"charset": charset}))


def set_viewport(root: Element, content: str = DEFAULT_VIEWPORT) -> None:
    """Append a viewport meta to the head unless one exists."""
    if exists(root, lambda view: view.name == "meta" and (view.attribs or {}).get("name") == "viewport"):
        return
    ensure_head(root).children.append(Element("meta", {"name": "viewport", "content": content}))


def insert_link(
    root: Element,
    href: str,
    rel: str = "stylesheet",
    extra_attribs: Optional[Dict[str, str]] = None,
) -> None:
    """Append a ``<link>`` to the head. Repeated calls add repeated links."""
    attribs = {"rel": rel, "href": href}
    attribs.update(extra_attribs or {})
    ensure_head(root).children.append(Element("link", attribs))


def insert_inline_script(root: Element, text: str) -> None:
    ensure_head(root).children.append(Element("script", children=[text]))


def extract_all_resources(root) -> List[Resource]:
    """Collect src/href/data/action attributes in document order."""
    resources: List[Resource] = []

    def collect(node: Node) -> None:
        if not isinstance(node, Element) or not node.attribs:
            return
        for attribute in RESOURCE_ATTRS:
            value = node.attribs.get(attribute)
            if value:
                resources.append(Resource(name=node.name, attribute=attribute, value=value))

    traverse(root, collect)
    return resources


__all__ = [
    "RESOURCE_ATTRS",
    "ensure_head",
    "extract_all_resources",
    "insert_inline_script",
    "insert_link",
    "set_charset",
    "set_title",
    "set_viewport",
]
