"""Convert HTML to a simple tree of elements and text, edit it, and render it back."""

from .codec import VOID_ELEMENTS, to_html, to_tree
from .document import DEFAULT_CHARSET, DEFAULT_VIEWPORT, create_html_document
from .dom_model import Element, Node, Resource, node_from_dict, node_to_dict
from .errors import ConfigError, HtmlTreeError, ParseAdapterError, TreeFormatError
from .mutations import (
    RESOURCE_ATTRS,
    ensure_head,
    extract_all_resources,
    insert_inline_script,
    insert_link,
    set_charset,
    set_title,
    set_viewport,
)
from .traversal import NodeView, exists, node_view, prune, traverse

__all__ = [
    "ConfigError",
    "DEFAULT_CHARSET",
    "DEFAULT_VIEWPORT",
    "Element",
    "HtmlTreeError",
    "Node",
    "NodeView",
    "ParseAdapterError",
    "RESOURCE_ATTRS",
    "Resource",
    "TreeFormatError",
    "VOID_ELEMENTS",
    "create_html_document",
    "ensure_head",
    "exists",
    "extract_all_resources",
    "insert_inline_script",
    "insert_link",
    "node_from_dict",
    "node_to_dict",
    "node_view",
    "prune",
    "set_charset",
    "set_title",
    "set_viewport",
    "to_html",
    "to_tree",
    "traverse",
]
