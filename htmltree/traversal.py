"""Depth-first traversal, search and pruning over canonical trees.

Every function accepts ``None``, a single node or a list of nodes. Anything
that is neither text nor an :class:`Element` contributes nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Union

from .dom_model import Element, Node

NodeOrNodes = Union[Node, Iterable[Node], None]


@dataclass(frozen=True)
class NodeView:
    """What a predicate sees of a node.

    For text, ``name`` and ``attribs`` are ``None`` and ``content`` is the
    text. For an element, ``content`` is its text only when the element has
    exactly one child and that child is text.
    """

    name: Optional[str]
    attribs: Optional[Dict[str, str]]
    content: Optional[str]


Predicate = Callable[[NodeView], bool]


def node_view(node: Node) -> NodeView:
    if isinstance(node, str):
        return NodeView(name=None, attribs=None, content=node)
    children = node.children or []
    content = children[0] if len(children) == 1 and isinstance(children[0], str) else None
    return NodeView(name=node.name, attribs=node.attribs, content=content)


def _is_sequence(node: object) -> bool:
    return isinstance(node, (list, tuple))


def traverse(node: NodeOrNodes, visit: Callable[[Node], None]) -> None:
    """Call ``visit`` on every node in pre-order, text nodes included."""
    if node is None:
        return
    if _is_sequence(node):
        for item in node:
            traverse(item, visit)
        return
    if isinstance(node, str):
        visit(node)
        return
    if not isinstance(node, Element):
        return
    visit(node)
    for child in node.children or []:
        traverse(child, visit)


def exists(node: NodeOrNodes, predicate: Predicate) -> bool:
    """Return True as soon as a node in pre-order satisfies ``predicate``."""
    if node is None:
        return False
    if _is_sequence(node):
        return any(exists(item, predicate) for item in node)
    if not isinstance(node, (Element, str)):
        return False
    if predicate(node_view(node)):
        return True
    if isinstance(node, str):
        return False
    return any(exists(child, predicate) for child in node.children or [])


def prune(node: NodeOrNodes, predicate: Predicate) -> None:
    """Remove every descendant matching ``predicate``, in place.

    The starting node itself is never tested, and removed subtrees are not
    visited.
    """
    if node is None:
        return
    if _is_sequence(node):
        for item in node:
            prune(item, predicate)
        return
    if not isinstance(node, Element):
        return
    node.children = [child for child in node.children or [] if not predicate(node_view(child))]
    for child in node.children:
        prune(child, predicate)


__all__ = ["NodeView", "Predicate", "exists", "node_view", "prune", "traverse"]
