"""Aggregation invariants of HealthChecker.run_checks over small suites."""

from __future__ import annotations

import itertools

import pytest

from healthcheck.category import Checker, new_category
from healthcheck.engine import HealthChecker
from healthcheck.outcomes import Failure, Skip
from healthcheck.reporter import SimpleReporter

# (falha?, warning?, fatal?, skip?)
BEHAVIOURS = [
    (False, False, False, False),
    (True, False, False, False),
    (True, True, False, False),
    (True, False, True, False),
    (True, True, True, False),
    (False, False, True, False),
    (False, False, True, True),
]


def _checker(index: int, behaviour: tuple[bool, bool, bool, bool]) -> Checker:
    fails, warning, fatal, skipped = behaviour

    def check(ctx, state):
        if skipped:
            return Skip("n/a")
        return Failure(f"check {index} failed") if fails else None

    return Checker(f"check {index}", warning=warning, fatal=fatal, check=check)


def _expected(behaviours):
    success, warning, executed = True, False, []
    for index, (fails, warn, fatal, skipped) in enumerate(behaviours):
        if skipped:
            continue
        executed.append(index)
        if fails:
            if warn:
                warning = True
            else:
                success = False
            if fatal:
                break
    return success, warning, executed


@pytest.mark.parametrize("behaviours", list(itertools.product(BEHAVIOURS, repeat=3)))
def test_aggregation_rules(behaviours, fast_config):
    checkers = [_checker(i, b) for i, b in enumerate(behaviours)]
    hc = HealthChecker(
        [
            new_category("first", checkers[:2], True, ""),
            new_category("second", checkers[2:], True, ""),
        ],
        fast_config,
    )
    reporter = SimpleReporter()

    success, warning = hc.run_checks(reporter.observer)
    expected_success, expected_warning, executed = _expected(behaviours)

    assert (success, warning) == (expected_success, expected_warning)
    assert [r.description for r in reporter.get_results()] == [f"check {i}" for i in executed]
    assert reporter.replay(lambda _: None) == (success, warning)
