# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Tests for Interactor — execution, failure handling and rollback."""

from __future__ import annotations

import logging

import pytest

from pyinteractor.context.base import Context
from pyinteractor.core.config import Config
from pyinteractor.interactor.base import Interactor
from pyinteractor.interactor.properties import configure
from pyinteractor.kernel.exceptions import ContextFailure


# ── helpers ───────────────────────────────────────────────────


class Double(Interactor):
    def perform(self) -> None:
        self.context.value = self.context.value * 2

    def rollback(self) -> None:
        self.context.rolled_back_double = True


class Reject(Interactor):
    def perform(self) -> None:
        self.fail({"value": "is rejected"})


class ExplodingRollback(Interactor):
    def perform(self) -> None:
        self.fail("nope")

    def rollback(self) -> None:
        raise RuntimeError("should not run")


# ── construction ──────────────────────────────────────────────


class TestInteractorConstruction:
    def test_builds_context_from_fields(self) -> None:
        interactor = Double(value=2)
        assert isinstance(interactor.context, Context)
        assert interactor.context.value == 2

    def test_shares_context_of_matching_type(self) -> None:
        ctx = Context(value=2)
        interactor = Double(ctx, extra=1)
        assert interactor.context is ctx
        assert ctx.extra == 1

    def test_derives_context_of_declared_type(self) -> None:
        class DoubleContext(Context, attributes=("value",)):
            pass

        class TypedDouble(Double):
            context_class = DoubleContext

        ctx = Context(value=2)
        interactor = TypedDouble(ctx)
        assert isinstance(interactor.context, DoubleContext)
        assert interactor.context is not ctx
        assert interactor.context.attributes == {"value": 2}

    def test_perform_must_be_implemented(self) -> None:
        with pytest.raises(NotImplementedError):
            Interactor().execute()


# ── execute ───────────────────────────────────────────────────


class TestInteractorExecute:
    def test_records_itself_on_success(self) -> None:
        interactor = Double(value=2)
        ctx = interactor.execute()
        assert ctx.value == 4
        assert ctx.called_stack == (interactor,)

    def test_failure_propagates_and_is_not_recorded(self) -> None:
        interactor = Reject(value=2)
        with pytest.raises(ContextFailure):
            interactor.execute()
        assert interactor.context.called_stack == ()
        assert interactor.context.is_failure


# ── run ───────────────────────────────────────────────────────


class TestInteractorRun:
    def test_returns_successful_context(self) -> None:
        ctx = Double.run(value=3)
        assert ctx.is_success
        assert ctx.value == 6

    def test_returns_failed_context(self) -> None:
        ctx = Reject.run(value=3)
        assert ctx.is_failure
        assert ctx.errors["value"] == ["is rejected"]

    def test_rolls_back_prior_interactors_on_failure(self) -> None:
        ctx = Context(value=1)
        Double.run(ctx)
        Reject.run(ctx)
        assert ctx.is_rolled_back
        assert ctx.rolled_back_double is True

    def test_does_not_roll_back_when_disabled(self) -> None:
        configure(Config({"pyinteractor": {"interactor": {"rollback_on_failure": False}}}))
        ctx = Context(value=1)
        Double.run(ctx)
        Reject.run(ctx)
        assert not ctx.is_rolled_back
        assert "rolled_back_double" not in ctx

    def test_failed_interactor_itself_is_not_rolled_back(self) -> None:
        ctx = ExplodingRollback.run()
        assert ctx.is_rolled_back
        assert ctx.errors["context"] == ["nope"]

    def test_logs_warning_on_failure(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="pyinteractor"):
            Reject.run(value=1)
        assert "Reject failed: value is rejected" in caplog.text

    def test_no_warning_when_logging_disabled(self, caplog: pytest.LogCaptureFixture) -> None:
        configure(Config({"pyinteractor": {"interactor": {"log_failures": False}}}))
        with caplog.at_level(logging.WARNING, logger="pyinteractor"):
            Reject.run(value=1)
        assert caplog.records == []


class TestInteractorRunOrRaise:
    def test_returns_context_on_success(self) -> None:
        assert Double.run_or_raise(value=1).value == 2

    def test_raises_after_rollback(self) -> None:
        ctx = Context(value=1)
        Double.run(ctx)
        with pytest.raises(ContextFailure) as exc_info:
            Reject.run_or_raise(ctx)
        assert exc_info.value.context is ctx
        assert ctx.is_rolled_back

    def test_compensation_error_is_logged_and_propagates(self, caplog: pytest.LogCaptureFixture) -> None:
        class BrokenRollback(Interactor):
            def perform(self) -> None:
                pass

            def rollback(self) -> None:
                raise RuntimeError("refund failed")

        ctx = Context()
        BrokenRollback.run(ctx)
        with caplog.at_level(logging.ERROR, logger="pyinteractor"):
            with pytest.raises(RuntimeError, match="refund failed"):
                Reject.run_or_raise(ctx)
        assert "Rollback of Context raised" in caplog.text
