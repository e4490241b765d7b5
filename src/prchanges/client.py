from __future__ import annotations

from typing import Any

import httpx

from .config import DEFAULT_API_URL
from .errors import ApiError, AuthError, NetworkError, NotFoundError
from .models import BaseRef, DetailRecord, ListingItem, RateLimit
from .pagination import parse_next_page

_PER_PAGE = 100


class GitHubClient:
    """Blocking REST client; one request per call, no retries."""

    def __init__(
        self,
        token: str = "",
        base_url: str = DEFAULT_API_URL,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not base_url.endswith("/"):
            base_url += "/"
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.Client(
            base_url=base_url,
            headers=headers,
            timeout=httpx.Timeout(30.0),
            transport=transport,
        )

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def get(self, path: str, params: dict[str, Any] | None = None) -> httpx.Response:
        try:
            response = self._client.get(path, params=params)
        except httpx.RequestError as exc:
            raise NetworkError(str(exc)) from exc

        if response.is_success:
            return response
        if response.status_code == 401:
            raise AuthError("GitHub token is invalid or missing required scopes.", 401)
        if response.status_code == 404:
            raise NotFoundError(f"GitHub API returned HTTP 404 for {path}", 404)
        raise ApiError(
            f"GitHub API returned HTTP {response.status_code}: {response.reason_phrase}",
            response.status_code,
        )

    def get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self._decode(self.get(path, params=params), path)

    @staticmethod
    def _decode(response: httpx.Response, path: str) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise ApiError(
                f"GitHub API returned a non-JSON body for {path}", response.status_code
            ) from exc

    def rate_limit(self) -> RateLimit:
        data = self.get_json("rate_limit")
        core = data.get("resources", {}).get("core") or data.get("rate", {})
        return RateLimit(
            limit=int(core.get("limit", 0)),
            remaining=int(core.get("remaining", 0)),
            reset=int(core.get("reset", 0)),
        )

    def list_issues_page(
        self, user: str, repo: str, page: int, label: str = ""
    ) -> tuple[list[ListingItem], int | None]:
        params: dict[str, Any] = {"state": "closed", "per_page": _PER_PAGE, "page": page}
        if label:
            params["labels"] = label
        path = f"repos/{user}/{repo}/issues"
        response = self.get(path, params=params)
        items = [self._parse_listing_item(node) for node in self._decode(response, path)]
        return items, parse_next_page(response.headers.get("Link"))

    def get_pull(self, user: str, repo: str, number: int) -> DetailRecord:
        node = self.get_json(f"repos/{user}/{repo}/pulls/{number}")
        base = node.get("base") or {}
        return DetailRecord(
            number=node["number"],
            title=node["title"],
            body=node.get("body") or "",
            url=node["html_url"],
            merged_at=node.get("merged_at"),
            merge_commit_sha=node.get("merge_commit_sha"),
            base=BaseRef(ref=base.get("ref", ""), sha=base.get("sha", "")),
        )

    @staticmethod
    def _parse_listing_item(node: dict[str, Any]) -> ListingItem:
        return ListingItem(
            number=node["number"],
            labels=tuple(lbl["name"] for lbl in node.get("labels") or []),
            is_pull_request=node.get("pull_request") is not None,
            author=node["user"]["login"] if node.get("user") else None,
        )
