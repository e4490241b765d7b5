"""Cheap label checks run on listing items before any detail fetch.

The checks run in a fixed order and stop at the first failure, so an item
rejected early never reaches the later checks or the detail endpoint.
"""
from __future__ import annotations

from collections.abc import Callable

from .config import LabelPolicy
from .models import ListingItem

Check = Callable[[ListingItem, LabelPolicy], bool]


def is_pull_request(item: ListingItem, policy: LabelPolicy) -> bool:
    return item.is_pull_request


def has_no_excluded_label(item: ListingItem, policy: LabelPolicy) -> bool:
    return policy.exclude.isdisjoint(item.labels)


def is_labeled_if_required(item: ListingItem, policy: LabelPolicy) -> bool:
    return not (policy.exclude_unlabeled and not item.labels)


def has_included_label(item: ListingItem, policy: LabelPolicy) -> bool:
    return not policy.include or not policy.include.isdisjoint(item.labels)


CHECKS: tuple[tuple[str, Check], ...] = (
    ("type", is_pull_request),
    ("exclude", has_no_excluded_label),
    ("unlabeled", is_labeled_if_required),
    ("include", has_included_label),
)


class FilterPipeline:
    def __init__(self, policy: LabelPolicy, checks: tuple[tuple[str, Check], ...] = CHECKS) -> None:
        self._policy = policy
        self._checks = checks

    def rejection(self, item: ListingItem) -> str | None:
        """Name of the first check *item* fails, or None if it passes them all."""
        for name, check in self._checks:
            if not check(item, self._policy):
                return name
        return None

    def accepts(self, item: ListingItem) -> bool:
        return self.rejection(item) is None

    def apply(self, items: list[ListingItem]) -> list[ListingItem]:
        return [item for item in items if self.accepts(item)]
