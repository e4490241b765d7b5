"""Tests for the ordered label checks applied before any detail fetch."""
from __future__ import annotations

import pytest

from prchanges.filters import CHECKS, FilterPipeline

from .conftest import make_item, make_policy


class TestChecks:
    def test_plain_issue_is_rejected(self):
        pipeline = FilterPipeline(make_policy())
        assert pipeline.rejection(make_item(is_pull_request=False)) == "type"

    def test_excluded_label_is_rejected(self):
        pipeline = FilterPipeline(make_policy(exclude=["wontfix"]))
        assert pipeline.rejection(make_item(labels=("bug", "wontfix"))) == "exclude"

    def test_unlabeled_rejected_when_required(self):
        pipeline = FilterPipeline(make_policy(exclude_unlabeled=True))
        assert pipeline.rejection(make_item()) == "unlabeled"

    def test_unlabeled_accepted_by_default(self):
        assert FilterPipeline(make_policy()).accepts(make_item())

    def test_include_requires_a_matching_label(self):
        pipeline = FilterPipeline(make_policy(include=["feature", "bug"]))
        assert pipeline.accepts(make_item(labels=("bug",)))
        assert pipeline.rejection(make_item(labels=("docs",))) == "include"

    def test_empty_include_accepts_anything(self):
        assert FilterPipeline(make_policy()).accepts(make_item(labels=("docs",)))


class TestOrdering:
    def test_check_order(self):
        assert [name for name, _ in CHECKS] == ["type", "exclude", "unlabeled", "include"]

    def test_stops_at_first_failure(self, mocker):
        first = mocker.Mock(return_value=False)
        second = mocker.Mock(return_value=True)
        pipeline = FilterPipeline(make_policy(), checks=(("first", first), ("second", second)))
        assert pipeline.rejection(make_item()) == "first"
        second.assert_not_called()

    def test_exclusion_reported_before_inclusion(self):
        pipeline = FilterPipeline(make_policy(exclude=["wontfix"], include=["feature"]))
        assert pipeline.rejection(make_item(labels=("wontfix",))) == "exclude"

    def test_type_reported_before_labels(self):
        pipeline = FilterPipeline(make_policy(exclude=["wontfix"]))
        assert pipeline.rejection(make_item(labels=("wontfix",), is_pull_request=False)) == "type"


@pytest.mark.parametrize("exclude_unlabeled", [False, True])
@pytest.mark.parametrize("include", [[], ["bug"]])
@pytest.mark.parametrize("exclude", [[], ["wontfix"]])
def test_unlabeled_item_passes_iff_unlabeled_allowed_and_no_include(exclude_unlabeled, include, exclude):
    pipeline = FilterPipeline(
        make_policy(exclude=exclude, include=include, exclude_unlabeled=exclude_unlabeled)
    )
    expected = not exclude_unlabeled and not include
    assert pipeline.accepts(make_item(labels=())) is expected


def test_apply_keeps_order():
    pipeline = FilterPipeline(make_policy(exclude=["wontfix"]))
    items = [make_item(3), make_item(1, labels=("wontfix",)), make_item(2)]
    assert [i.number for i in pipeline.apply(items)] == [3, 2]
