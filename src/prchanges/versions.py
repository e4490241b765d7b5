from __future__ import annotations

import re
from collections.abc import Iterable

from .models import PRIssue

_SEMVER_RE = re.compile(r"^\d+(\.\d+){0,2}(-[0-9A-Za-z.-]+)?$")


def is_semantic_version(value: str) -> bool:
    return bool(_SEMVER_RE.match(value))


def version_labels(labels: Iterable[str]) -> tuple[str, ...]:
    return tuple(label for label in labels if is_semantic_version(label))


def is_included_in_version(pr: PRIssue, changelog_version: str) -> bool:
    """Return True if *pr* belongs in the changelog for *changelog_version*.

    Matching is by string prefix: a PR labelled ``3.4`` belongs to ``3.4``,
    ``3.4.1`` and ``3.4.0-beta``. A PR without version labels, or an empty
    changelog version, always matches.
    """
    if not pr.version_filter or not changelog_version:
        return True
    return any(changelog_version.startswith(version) for version in pr.version_filter)
