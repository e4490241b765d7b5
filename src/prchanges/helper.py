from __future__ import annotations

from collections.abc import Mapping
from functools import partial

from rich.console import Console

from .client import GitHubClient
from .config import LabelPolicy
from .errors import ApiError, PrChangesError
from .filters import FilterPipeline
from .models import Change, DetailRecord, ListingItem, PRIssue
from .pagination import walk_pages
from .ratelimit import RateLimitGuard
from .versions import is_included_in_version, version_labels

_stderr = Console(stderr=True)


def categorize(labels: tuple[str, ...], categories: Mapping[str, str]) -> str | None:
    """Category of the first label, in label order, that has one."""
    for label in labels:
        if label in categories:
            return categories[label]
    return None


def change_text_header(
    detail: DetailRecord, author: str | None, include_author: bool, include_link: bool
) -> str:
    header = detail.title
    if include_author and author:
        header += f" (@{author})"
    if include_link:
        header += f" [#{detail.number}]({detail.url})"
    return header


def merge_issue(
    item: ListingItem,
    detail: DetailRecord,
    policy: LabelPolicy,
    include_author: bool = False,
    include_link: bool = False,
) -> PRIssue:
    versions = version_labels(item.labels)
    return PRIssue(
        number=item.number,
        title=detail.title,
        author=item.author,
        url=detail.url,
        merged_at=detail.merged_at,
        labels=item.labels,
        category=categorize(item.labels, policy.categories),
        version_filter=versions,
        label_filter=tuple(label for label in item.labels if label not in versions),
        change_text_header=change_text_header(detail, item.author, include_author, include_link),
    )


def convert_to_change(pr: PRIssue, version: str) -> Change:
    return Change(
        sorting_number=pr.sorting_number,
        labels=pr.label_filter,
        version=version,
        text=pr.change_text_header,
    )


class ChangeLogHelper:
    """Collects the pull requests that belong in a changelog.

    The rate limit is checked once, on construction, before any other
    request. Each account is then scanned in turn: all listing pages are
    fetched, the label checks run, and only the surviving items cost a
    detail request. Any failure aborts the whole run.
    """

    def __init__(
        self,
        client: GitHubClient,
        users: list[str],
        repo: str,
        labels: LabelPolicy,
        include_author: bool = False,
        include_link: bool = False,
    ) -> None:
        labels.validate()
        self._client = client
        self.users = users
        self.repo = repo
        self.labels = labels
        self.include_author = include_author
        self.include_link = include_link
        self._filters = FilterPipeline(labels)
        self._guard = RateLimitGuard(client)
        self._guard.check()

    def get_changelog_pull_requests(self) -> list[PRIssue]:
        issues: list[PRIssue] = []
        for user in self.users:
            collected: list[PRIssue] = []
            for item in self._filters.apply(self._list_changelog_issues(user)):
                pr = merge_issue(
                    item,
                    self._get_pr(user, item.number),
                    self.labels,
                    self.include_author,
                    self.include_link,
                )
                if is_included_in_version(pr, self.labels.version_prefix):
                    collected.append(pr)
            _stderr.print(f"Fetched {len(collected)} issues from {user}")
            issues.extend(collected)

        _stderr.print(f"Fetched {len(issues)} issues")
        return issues

    def get_changes(self, version: str) -> list[Change]:
        prs = self.get_changelog_pull_requests()
        return [convert_to_change(pr, version) for pr in sorted(prs, key=lambda pr: pr.sorting_number)]

    def _list_changelog_issues(self, user: str) -> list[ListingItem]:
        return walk_pages(partial(self._list_changelog_page, user))

    def _list_changelog_page(self, user: str, page: int) -> tuple[list[ListingItem], int | None]:
        try:
            return self._client.list_issues_page(user, self.repo, page, label=self.labels.required)
        except ApiError:
            _stderr.print(
                f"[red]Error:[/red] listing issues failed for user {user}, repo {self.repo} and page {page}"
            )
            self._report_quota()
            raise

    def _get_pr(self, user: str, number: int) -> DetailRecord:
        try:
            return self._client.get_pull(user, self.repo, number)
        except ApiError:
            _stderr.print(
                f"[red]Error:[/red] fetching PR failed for user {user}, repo {self.repo} and number {number}"
            )
            self._report_quota()
            raise

    def _report_quota(self) -> None:
        try:
            self._guard.report()
        except PrChangesError as exc:
            _stderr.print(f"[yellow]Warning:[/yellow] could not read rate limit: {exc}")
