"""Tests for healthcheck.category module."""

from __future__ import annotations

import dataclasses
from datetime import datetime, timedelta, timezone

import pytest

from healthcheck.category import (
    Category,
    Checker,
    new_category,
    new_category_with_context,
    retry_for,
)
from healthcheck.context import ExecutionContext


class TestChecker:
    def test_defaults(self):
        checker = Checker("desc")
        assert checker.hint_anchor == ""
        assert checker.fatal is False
        assert checker.warning is False
        assert checker.retry_deadline is None
        assert checker.surface_error_on_retry is False
        assert checker.check is None

    def test_is_immutable(self):
        checker = Checker("desc")
        with pytest.raises(dataclasses.FrozenInstanceError):
            checker.fatal = True  # type: ignore[misc]

    def test_should_retry_without_deadline(self):
        assert Checker("desc").should_retry() is False

    def test_should_retry_before_and_after_deadline(self):
        deadline = datetime(2030, 1, 1, tzinfo=timezone.utc)
        checker = Checker("desc", retry_deadline=deadline)
        assert checker.should_retry(deadline - timedelta(seconds=1)) is True
        assert checker.should_retry(deadline) is False
        assert checker.should_retry(deadline + timedelta(seconds=1)) is False

    def test_retry_for(self):
        before = datetime.now(timezone.utc)
        deadline = retry_for(10)
        assert deadline.tzinfo is not None
        assert before + timedelta(seconds=9) < deadline <= before + timedelta(seconds=11)
        assert retry_for(timedelta(minutes=1)) > deadline


class TestCategory:
    def test_new_category(self):
        checkers = [Checker("a"), Checker("b")]
        cat = new_category("cat1", checkers, True, "http://test.com/")

        assert cat.id == "cat1"
        assert cat.enabled is True
        assert cat.hint_base_url == "http://test.com/"
        assert [c.description for c in cat.checkers] == ["a", "b"]
        assert cat.context.deadline is None
        assert cat.context.done() is False

    def test_checkers_copied_to_tuple(self):
        checkers = [Checker("a")]
        cat = new_category("cat1", checkers, True, "")
        checkers.append(Checker("b"))
        assert len(cat.checkers) == 1

    def test_new_category_with_context(self):
        ctx = ExecutionContext.background().with_timeout(30)
        cat = new_category_with_context("cat1", [], False, "", ctx)
        assert cat.context is ctx
        assert cat.enabled is False

    def test_with_context_returns_copy(self):
        cat = new_category("cat1", [Checker("a")], True, "")
        ctx = ExecutionContext.background().with_cancel()
        updated = cat.with_context(ctx)

        assert updated.context is ctx
        assert cat.context is not ctx
        assert updated.checkers == cat.checkers

    def test_hint_url(self):
        cat = Category(id="c", hint_base_url="https://docs/#")  # type: ignore[arg-type]
        assert cat.hint_url(Checker("x", "anchor")) == "https://docs/#anchor"
        assert cat.hint_url(Checker("y")) == "https://docs/#"
