"""Tests for healthcheck.outcomes module."""

from __future__ import annotations

import pytest

from healthcheck.exceptions import HealthCheckError
from healthcheck.outcomes import (
    Failure,
    Ok,
    Skip,
    VerboseSuccess,
    as_outcome,
    fail,
    ok,
    skip,
    verbose,
)


class TestHelpers:
    def test_constructors(self):
        assert ok() == Ok()
        assert skip("n/a") == Skip("n/a")
        assert verbose("Hello") == VerboseSuccess("Hello")
        assert fail("boom") == Failure("boom")


class TestFailure:
    def test_error_from_string(self):
        err = Failure("boom").error()
        assert isinstance(err, HealthCheckError)
        assert str(err) == "boom"

    def test_error_keeps_exception(self):
        cause = OSError("disk")
        assert Failure(cause).error() is cause


class TestAsOutcome:
    def test_none_is_ok(self):
        assert as_outcome(None) == Ok()

    def test_variants_pass_through(self):
        for value in (Ok(), Skip("x"), VerboseSuccess("y"), Failure("z")):
            assert as_outcome(value) is value

    def test_exception_is_failure(self):
        cause = ValueError("bad")
        outcome = as_outcome(cause)
        assert isinstance(outcome, Failure)
        assert outcome.cause is cause

    def test_unsupported_value(self):
        with pytest.raises(TypeError, match="str"):
            as_outcome("not an outcome")
