from __future__ import annotations

import re
from collections.abc import Callable
from typing import TypeVar

T = TypeVar("T")

_PAGE_RE = re.compile(r"[?&]page=([0-9]+)")


def parse_next_page(link: str | None) -> int | None:
    """Extract the page number of the ``rel="next"`` entry of a Link header.

    ``<https://api.github.com/...&page=2>; rel="next", <...&page=5>; rel="last"``
    """
    if not link:
        return None
    for part in link.split(","):
        url, _, params = part.partition(";")
        rels = [p.strip() for p in params.split(";")]
        if 'rel="next"' not in rels:
            continue
        match = _PAGE_RE.search(url.strip().strip("<>"))
        if match:
            return int(match.group(1))
    return None


def walk_pages(fetch_page: Callable[[int], tuple[list[T], int | None]]) -> list[T]:
    """Fetch pages starting at 1 until a page carries no next-page link.

    An empty page does not stop the walk; only a missing ``next`` relation does.
    """
    items: list[T] = []
    page: int | None = 1
    while page is not None:
        page_items, page = fetch_page(page)
        items.extend(page_items)
    return items
