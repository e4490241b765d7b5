from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ListingItem:
    number: int
    labels: tuple[str, ...]
    is_pull_request: bool
    author: str | None = None


@dataclass(frozen=True)
class BaseRef:
    ref: str
    sha: str


@dataclass(frozen=True)
class DetailRecord:
    number: int
    title: str
    body: str
    url: str
    merged_at: str | None
    merge_commit_sha: str | None
    base: BaseRef

    @property
    def is_merged(self) -> bool:
        return self.merged_at is not None


@dataclass(frozen=True)
class PRIssue:
    """A listing item merged with its pull request details.

    ``category`` is ``None`` when none of the labels map to a category;
    the renderer decides how to present uncategorized entries.
    """

    number: int
    title: str
    author: str | None
    url: str
    merged_at: str | None
    labels: tuple[str, ...]
    category: str | None
    version_filter: tuple[str, ...]
    label_filter: tuple[str, ...]
    change_text_header: str

    @property
    def sorting_number(self) -> int:
        return self.number


@dataclass(frozen=True)
class Change:
    sorting_number: int
    labels: tuple[str, ...]
    version: str
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class RateLimit:
    limit: int
    remaining: int
    reset: int  # UTC epoch seconds
