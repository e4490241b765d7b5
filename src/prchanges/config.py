from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError
from .versions import is_semantic_version

DEFAULT_API_URL = "https://api.github.com"


@dataclass(frozen=True)
class LabelPolicy:
    """Label rules deciding which pull requests become changelog entries."""

    exclude: frozenset[str] = frozenset()
    exclude_unlabeled: bool = False
    include: frozenset[str] = frozenset()
    required: str = ""
    categories: dict[str, str] = field(default_factory=dict)
    version_prefix: str = ""

    def validate(self) -> None:
        if self.version_prefix and not is_semantic_version(self.version_prefix):
            raise ConfigError(f"version_prefix is not a semantic version: {self.version_prefix!r}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LabelPolicy:
        categories = data.get("categories") or {}
        if not isinstance(categories, dict):
            raise ConfigError("labels.categories must be a mapping of label to category.")
        return cls(
            exclude=frozenset(_str_list(data, "exclude")),
            exclude_unlabeled=_flag(data, "exclude_unlabeled"),
            include=frozenset(_str_list(data, "include")),
            required=str(data.get("required") or ""),
            categories={str(k): str(v) for k, v in categories.items()},
            version_prefix=str(data.get("version_prefix") or ""),
        )


@dataclass(frozen=True)
class Settings:
    users: list[str]
    repo: str
    token: str = ""
    include_author: bool = False
    include_link: bool = False
    labels: LabelPolicy = field(default_factory=LabelPolicy)
    api_url: str = DEFAULT_API_URL


def _str_list(data: dict[str, Any], key: str) -> list[str]:
    value = data.get(key) or []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        raise ConfigError(f"{key} must be a list of strings.")
    return [str(v) for v in value]


def _flag(data: dict[str, Any], key: str) -> bool:
    value = data.get(key, False)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ConfigError(f"{key} must be true or false, not {value!r}.")
    return value


def _section(raw: dict[str, Any], key: str) -> dict[str, Any]:
    value = raw.get(key) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"{key} must be a mapping.")
    return value


def load_settings(path: Path) -> Settings:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"{path} must contain a mapping at the top level.")

    github = _section(raw, "github")
    users = _str_list(github, "users")
    repo = github.get("repo")
    if not users:
        raise ConfigError("github.users must name at least one account.")
    if not repo:
        raise ConfigError("github.repo is required.")

    labels = LabelPolicy.from_dict(_section(raw, "labels"))
    labels.validate()

    return Settings(
        users=users,
        repo=str(repo),
        # config wins over the environment
        token=str(github.get("token") or os.environ.get("GITHUB_TOKEN", "")),
        include_author=_flag(github, "include_author"),
        include_link=_flag(github, "include_link"),
        labels=labels,
        api_url=str(github.get("api_url") or DEFAULT_API_URL),
    )
