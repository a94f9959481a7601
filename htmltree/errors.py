"""Exception types raised by htmltree."""

from __future__ import annotations


class HtmlTreeError(Exception):
    """Base class for htmltree errors."""


class ParseAdapterError(HtmlTreeError):
    """The underlying HTML parser could not process the input."""


class TreeFormatError(HtmlTreeError, ValueError):
    """A serialized tree does not have the expected shape."""


class ConfigError(HtmlTreeError):
    """A configuration file could not be loaded or validated."""


__all__ = ["ConfigError", "HtmlTreeError", "ParseAdapterError", "TreeFormatError"]
