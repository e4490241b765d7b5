"""Shared factories and fixtures for the test suite."""
from __future__ import annotations

import pytest

from prchanges.config import LabelPolicy
from prchanges.models import BaseRef, DetailRecord, ListingItem, PRIssue

API = "https://api.github.com"

# ---------------------------------------------------------------------------
# REST payload factories — return raw dicts that mirror API responses
# ---------------------------------------------------------------------------


def rate_limit_body(remaining: int = 4999, limit: int = 5000, reset: int = 1_700_000_000) -> dict:
    core = {"limit": limit, "remaining": remaining, "reset": reset, "used": limit - remaining}
    return {"resources": {"core": core}, "rate": core}


def issue_node(
    number: int = 1,
    labels: list[str] | None = None,
    pull_request: bool = True,
    author: str | None = "alice",
) -> dict:
    node = {
        "number": number,
        "title": f"Issue {number}",
        "state": "closed",
        "user": {"login": author} if author else None,
        "labels": [{"name": lbl} for lbl in (labels or [])],
    }
    if pull_request:
        node["pull_request"] = {"url": f"{API}/repos/alice/repo/pulls/{number}"}
    return node


def pull_node(
    number: int = 1,
    title: str | None = None,
    body: str | None = "Body",
    merged_at: str | None = "2024-01-02T00:00:00Z",
) -> dict:
    return {
        "number": number,
        "title": title or f"Fix {number}",
        "body": body,
        "html_url": f"https://github.com/alice/repo/pull/{number}",
        "merged_at": merged_at,
        "merge_commit_sha": "abc123" if merged_at else None,
        "base": {"ref": "main", "sha": "def456"},
    }


def link_header(next_page: int | None, last_page: int | None = None) -> dict:
    base = f"{API}/repositories/1/issues?state=closed&per_page=100"
    parts = []
    if next_page is not None:
        parts.append(f'<{base}&page={next_page}>; rel="next"')
    if last_page is not None:
        parts.append(f'<{base}&page={last_page}>; rel="last"')
    return {"Link": ", ".join(parts)} if parts else {}


# ---------------------------------------------------------------------------
# Model object factories
# ---------------------------------------------------------------------------


def make_item(
    number: int = 1,
    labels: tuple[str, ...] = (),
    is_pull_request: bool = True,
    author: str | None = "alice",
) -> ListingItem:
    return ListingItem(number=number, labels=labels, is_pull_request=is_pull_request, author=author)


def make_detail(number: int = 1, title: str = "Fix bug", merged_at: str | None = "2024-01-02T00:00:00Z") -> DetailRecord:
    return DetailRecord(
        number=number,
        title=title,
        body="",
        url=f"https://github.com/alice/repo/pull/{number}",
        merged_at=merged_at,
        merge_commit_sha="abc123",
        base=BaseRef(ref="main", sha="def456"),
    )


def make_policy(**kwargs) -> LabelPolicy:
    for key in ("exclude", "include"):
        if key in kwargs:
            kwargs[key] = frozenset(kwargs[key])
    return LabelPolicy(**kwargs)


def make_pr_issue(
    number: int = 1,
    labels: tuple[str, ...] = (),
    version_filter: tuple[str, ...] = (),
    category: str | None = None,
    header: str = "Fix bug",
) -> PRIssue:
    return PRIssue(
        number=number,
        title="Fix bug",
        author="alice",
        url=f"https://github.com/alice/repo/pull/{number}",
        merged_at="2024-01-02T00:00:00Z",
        labels=labels + version_filter,
        category=category,
        version_filter=version_filter,
        label_filter=labels,
        change_text_header=header,
    )


# ---------------------------------------------------------------------------
# Autouse fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def no_dotenv(mocker):
    """Prevent tests from loading a real .env file."""
    mocker.patch("prchanges.cli.load_dotenv")
