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
"""Interactor — a single unit of business logic run against a context."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, ClassVar

from pyinteractor.context.base import Context
from pyinteractor.interactor.properties import get_properties
from pyinteractor.kernel.exceptions import ContextFailure

logger = logging.getLogger(__name__)


class Interactor:
    """Base class for interactors.

    Subclasses implement :meth:`perform` and, when their work can be undone,
    :meth:`rollback`. Inside ``perform`` the context is available as
    ``self.context``; calling :meth:`fail` aborts the chain.

    Usage::

        class ChargeCard(Interactor):
            context_class = PaymentContext

            def perform(self) -> None:
                if self.context.amount <= 0:
                    self.fail({"amount": "must be positive"})
                self.context.charge_id = gateway.charge(self.context.amount)

            def rollback(self) -> None:
                gateway.refund(self.context.charge_id)

        ctx = ChargeCard.run(amount=10)
        ctx.is_success
    """

    context_class: ClassVar[type[Context]] = Context

    def __init__(self, context: Context | Mapping[str, Any] | None = None, /, **fields: Any) -> None:
        # A context of the right type is shared so the chain keeps one call-stack.
        if isinstance(context, self.context_class):
            context.update(fields)
            self.context = context
        else:
            self.context = self.context_class(context, **fields)

    # -- Hooks ---------------------------------------------------------------

    def perform(self) -> None:
        raise NotImplementedError(f"{type(self).__name__} must implement perform()")

    def rollback(self) -> None:
        """Undo the effect of :meth:`perform`. Does nothing by default."""

    # -- Execution -----------------------------------------------------------

    def fail(self, errors: Any = None) -> None:
        self.context.fail(errors)

    def execute(self) -> Context:
        """Run :meth:`perform` and record this interactor on success.

        :class:`ContextFailure` propagates to the caller untouched.
        """
        logger.debug("Performing %s", type(self).__name__)
        self.perform()
        self.context.called(self)
        return self.context

    @classmethod
    def run(cls, context: Context | Mapping[str, Any] | None = None, /, **fields: Any) -> Context:
        """Execute a new interactor and return its context, failed or not."""
        interactor = cls(context, **fields)
        try:
            interactor.execute()
        except ContextFailure as exc:
            interactor._handle_failure(exc)
        return interactor.context

    @classmethod
    def run_or_raise(cls, context: Context | Mapping[str, Any] | None = None, /, **fields: Any) -> Context:
        """Like :meth:`run`, but re-raise :class:`ContextFailure` after rollback."""
        interactor = cls(context, **fields)
        try:
            interactor.execute()
        except ContextFailure as exc:
            interactor._handle_failure(exc)
            raise
        return interactor.context

    def _handle_failure(self, exc: ContextFailure) -> None:
        properties = get_properties()
        if properties.log_failures:
            logger.warning("Interactor %s failed: %s", type(self).__name__, exc)
        if properties.rollback_on_failure:
            rollback_context(exc.context)


def rollback_context(context: Context) -> None:
    """Roll back *context*, logging any compensation error before re-raising it."""
    try:
        context.rollback()
    except Exception:
        logger.exception("Rollback of %s raised", type(context).__name__)
        raise
