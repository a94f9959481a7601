"""Builders for new documents."""

from __future__ import annotations

from typing import Optional

from .dom_model import Element

DEFAULT_CHARSET = "utf-8"
DEFAULT_VIEWPORT = "width=device-width, initial-scale=1.0"


def create_html_document(
    title: str = "",
    *,
    lang: Optional[str] = None,
    charset: str = DEFAULT_CHARSET,
    viewport: str = DEFAULT_VIEWPORT,
) -> Element:
    """Return a minimal ``<html>`` tree with charset, viewport and title set."""

    head = Element(
        "head",
        children=[
            Element("meta", {"charset": charset}),
            Element("meta", {"name": "viewport", "content": viewport}),
            Element("title", children=[title]),
        ],
    )
    attribs = {"lang": lang} if lang else {}
    return Element("html", attribs, [head, Element("body")])


__all__ = ["DEFAULT_CHARSET", "DEFAULT_VIEWPORT", "create_html_document"]
