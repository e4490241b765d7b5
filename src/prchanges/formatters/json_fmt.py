from __future__ import annotations

import dataclasses
import json

from ..models import Change


def format_json(changes: list[Change]) -> str:
    return json.dumps([dataclasses.asdict(change) for change in changes], indent=2)
