"""File helpers shared by the command-line tools."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Union

PathLike = Union[str, Path]


def json_text(data: Any) -> str:
    """Render ``data`` as indented JSON ending in a newline.

    Mapping order is kept as-is so element attributes stay in document order.
    """
    return json.dumps(data, ensure_ascii=False, indent=2) + "\n"


def read_text(path: PathLike) -> str:
    return Path(path).read_text(encoding="utf-8")


def write_text(path: PathLike, content: str) -> Path:
    """Save UTF-8 ``content`` at ``path``; missing parent folders are made."""

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
    return target


def load_json(path: PathLike) -> Any:
    return json.loads(read_text(path))


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)


__all__ = ["json_text", "load_json", "read_text", "warn", "write_text"]
