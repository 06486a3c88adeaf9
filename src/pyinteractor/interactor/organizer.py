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
"""Organizer — runs a fixed sequence of interactors over one context."""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from pyinteractor.interactor.base import Interactor, rollback_context
from pyinteractor.interactor.properties import get_properties
from pyinteractor.kernel.exceptions import ContextFailure

logger = logging.getLogger(__name__)


class Organizer(Interactor):
    """An interactor whose ``perform`` runs the interactors in :attr:`organized`.

    Steps whose ``context_class`` accepts the organizer's context share it,
    so every completed step lands on the same call-stack and one
    ``rollback()`` compensates the whole chain in reverse. A step that needs
    a different context type gets a context derived from the organizer's;
    its fields are copied back when it completes and it is recorded on the
    organizer's call-stack itself.

    Usage::

        class PlaceOrder(Organizer):
            organized = (ReserveStock, ChargeCard, SendReceipt)

        ctx = PlaceOrder.run(order_id=42)
    """

    organized: ClassVar[tuple[type[Interactor], ...]] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.organized = tuple(cls.organized)
        for step in cls.organized:
            if not (isinstance(step, type) and issubclass(step, Interactor)):
                raise TypeError(f"{cls.__qualname__}.organized entries must be Interactor classes, got {step!r}")

    def perform(self) -> None:
        for step_class in self.organized:
            step = step_class(self.context)
            shared = step.context is self.context
            try:
                step.execute()
            except ContextFailure as exc:
                if shared and exc.context is self.context:
                    raise
                self._fail_from(exc)
            if not shared:
                self.context.update(step.context.to_dict())
                self.context.called(step)

    def rollback(self) -> None:
        # A no-op when steps share this context: it is already rolling back.
        self.context.rollback()

    def _fail_from(self, exc: ContextFailure) -> None:
        failed = exc.context
        logger.debug("Step context %s failed inside %s", type(failed).__name__, type(self).__name__)
        if get_properties().rollback_on_failure:
            rollback_context(failed)
        self.context.update(failed.to_dict())
        self.context.fail(failed.errors)
