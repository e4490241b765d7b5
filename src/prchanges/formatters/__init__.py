from __future__ import annotations

from collections.abc import Callable

from .json_fmt import format_json
from .text_fmt import format_text
from ..models import Change


def get_formatter(fmt: str) -> Callable[[list[Change]], str]:
    if fmt == "json":
        return format_json
    if fmt == "text":
        return format_text
    raise ValueError(f"Unknown format: {fmt!r}")
