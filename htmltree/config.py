"""YAML-backed options for building and patching documents."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from .document import DEFAULT_CHARSET, DEFAULT_VIEWPORT
from .dom_model import Element
from .errors import ConfigError
from .mutations import insert_inline_script, insert_link, set_charset, set_title, set_viewport


class LinkSpec(BaseModel):
    """A ``<link>`` element to add to the head."""

    href: str = Field(..., description="Target of the link.")
    rel: str = Field("stylesheet", description="Relationship of the linked resource.")
    attribs: Dict[str, str] = Field(
        default_factory=dict, description="Extra attributes such as media or integrity."
    )


class DocumentOptions(BaseModel):
    """Head settings applied to new or existing documents."""

    title: str = Field("", description="Document title; left untouched when empty.")
    lang: Optional[str] = Field(None, description="Value of the lang attribute on <html>.")
    charset: str = Field(DEFAULT_CHARSET, description="Charset declared when none is present.")
    viewport: str = Field(DEFAULT_VIEWPORT, description="Viewport meta content.")
    stylesheets: List[LinkSpec] = Field(
        default_factory=list, description="Links appended to the head in order."
    )
    scripts: List[str] = Field(
        default_factory=list, description="Inline script bodies appended to the head."
    )


def load_options(path: Path) -> DocumentOptions:
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping of document options.")
    try:
        return DocumentOptions.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid document options in {path}: {exc}") from exc


def apply_options(root: Element, options: DocumentOptions) -> None:
    """Apply head settings to an existing tree in place."""

    set_charset(root, options.charset)
    set_viewport(root, options.viewport)
    if options.title:
        set_title(root, options.title)
    for link in options.stylesheets:
        insert_link(root, link.href, link.rel, link.attribs)
    for script in options.scripts:
        insert_inline_script(root, script)


__all__ = ["DocumentOptions", "LinkSpec", "apply_options", "load_options"]
