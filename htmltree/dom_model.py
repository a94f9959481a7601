"""Canonical tree model for parsed HTML documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from .errors import TreeFormatError


@dataclass
class Element:
    name: str
    attribs: Dict[str, str] = field(default_factory=dict)
    children: List["Node"] = field(default_factory=list)


# Text is stored as a bare string child.
Node = Element | str


@dataclass(frozen=True)
class Resource:
    """An attribute on an element that points at an external resource."""

    name: str
    attribute: str
    value: str


def node_to_dict(node: Node) -> Any:
    """Convert a node into plain JSON-compatible data."""
    if isinstance(node, str):
        return node
    return {
        "name": node.name,
        "attribs": dict(node.attribs),
        "children": [node_to_dict(child) for child in node.children],
    }


def node_from_dict(data: Any) -> Node:
    """Rebuild a node from data produced by :func:`node_to_dict`.

    Missing ``attribs`` and ``children`` keys default to empty values.
    """
    if isinstance(data, str):
        return data
    if not isinstance(data, Mapping):
        raise TreeFormatError(f"Expected a string or an object, got {type(data).__name__}")
    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise TreeFormatError(f"Element is missing a tag name: {data!r}")
    attribs = data.get("attribs") or {}
    if not isinstance(attribs, Mapping):
        raise TreeFormatError(f"attribs of <{name}> must be an object")
    children = data.get("children") or []
    if not isinstance(children, list):
        raise TreeFormatError(f"children of <{name}> must be a list")
    return Element(
        name=name,
        attribs={str(key): str(value) for key, value in attribs.items()},
        children=[node_from_dict(child) for child in children],
    )


__all__ = ["Element", "Node", "Resource", "node_from_dict", "node_to_dict"]
