from __future__ import annotations

from ..models import Change


def format_text(changes: list[Change]) -> str:
    lines = []
    for change in changes:
        labels = f" [{', '.join(change.labels)}]" if change.labels else ""
        lines.append(f"#{change.sorting_number}{labels} {change}")
    return "\n".join(lines)
