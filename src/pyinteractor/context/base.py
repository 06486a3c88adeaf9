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
"""Context — mutable state carrier threaded through an interactor chain."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable

from pyinteractor.context.attributes import attribute_registry
from pyinteractor.context.errors import CONTEXT_KEY, ErrorCollection
from pyinteractor.kernel.exceptions import ContextFailure
from pyinteractor.kernel.types import ContextState, ContextStatus

logger = logging.getLogger(__name__)


@runtime_checkable
class Compensable(Protocol):
    """Anything that can be recorded on a context's call-stack."""

    def rollback(self) -> Any: ...


class Context:
    """Open bag of named fields plus the bookkeeping of one chain execution.

    Fields are read and written as attributes (``ctx.order_id``) or items
    (``ctx["order_id"]``); any name may be stored. Declared attributes only
    shape the :attr:`attributes` view, they never restrict storage.

    Alongside the fields a context tracks the interactors that completed
    against it, whether it has failed, whether it has been rolled back, and
    the errors collected on the way. Failing and rolling back are one-way.

    Usage::

        class PlaceOrderContext(Context, attributes=("order_id", "total")):
            pass

        ctx = PlaceOrderContext(order_id=42, total=10, note="gift")
        ctx.attributes  # {"order_id": 42, "total": 10}
    """

    __reserved_attributes__: frozenset[str] = frozenset()

    def __init_subclass__(cls, attributes: Iterable[str] | str = (), **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if isinstance(attributes, str):
            attributes = (attributes,)
        if attributes:
            attribute_registry.declare(cls, *attributes)

    def __init__(self, source: Context | Mapping[str, Any] | None = None, /, **fields: Any) -> None:
        object.__setattr__(self, "_fields", {})
        object.__setattr__(self, "_called", [])
        object.__setattr__(self, "_state", ContextState.FRESH)
        object.__setattr__(self, "_errors", ErrorCollection())

        # Only field values carry over from another context; its call-stack,
        # state and errors stay with it.
        if isinstance(source, Context):
            self._fields.update(source._fields)
        elif isinstance(source, Mapping):
            self._fields.update({str(key): value for key, value in source.items()})
        elif source is not None:
            raise TypeError(f"Cannot build {type(self).__name__} from {type(source).__name__}")
        self._fields.update(fields)

    # ── attribute declaration ─────────────────────────────────

    @classmethod
    def declare(cls, *names: str) -> tuple[str, ...]:
        """Declare attribute names for this context type and return the declared set."""
        return attribute_registry.declare(cls, *names)

    @classmethod
    def declared_attributes(cls) -> tuple[str, ...]:
        return attribute_registry.declared(cls)

    @property
    def attributes(self) -> dict[str, Any]:
        """Fields restricted to the declared attributes; empty when none are declared."""
        return attribute_registry.extract(self)

    # ── field access ──────────────────────────────────────────

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        fields = self._fields
        if name in fields:
            return fields[name]
        if name in attribute_registry.declared(type(self)):
            return None
        raise AttributeError(f"{type(self).__name__!r} has no field {name!r}")

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_") or hasattr(type(self), name):
            object.__setattr__(self, name, value)
        else:
            self._fields[name] = value

    def __delattr__(self, name: str) -> None:
        if name in self._fields:
            del self._fields[name]
        else:
            object.__delattr__(self, name)

    def __getitem__(self, key: str) -> Any:
        return self._fields[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._fields[str(key)] = value

    def __contains__(self, key: object) -> bool:
        return key in self._fields

    def get(self, key: str, default: Any = None) -> Any:
        return self._fields.get(key, default)

    def update(self, values: Mapping[str, Any] | None = None, /, **fields: Any) -> None:
        if values is not None:
            self._fields.update({str(key): value for key, value in values.items()})
        self._fields.update(fields)

    def to_dict(self) -> dict[str, Any]:
        """Return a shallow copy of every stored field."""
        return dict(self._fields)

    # ── bookkeeping ───────────────────────────────────────────

    @property
    def errors(self) -> ErrorCollection:
        return self._errors

    @property
    def called_stack(self) -> tuple[Any, ...]:
        """Interactors recorded by :meth:`called`, oldest first."""
        return tuple(self._called)

    @property
    def state(self) -> ContextState:
        return self._state

    @property
    def status(self) -> ContextStatus:
        if ContextState.ROLLED_BACK in self._state:
            return ContextStatus.ROLLED_BACK
        if ContextState.FAILED in self._state:
            return ContextStatus.FAILED
        if self._called:
            return ContextStatus.RUNNING
        return ContextStatus.FRESH

    @property
    def is_failure(self) -> bool:
        return ContextState.FAILED in self._state

    @property
    def is_success(self) -> bool:
        return not self.is_failure

    @property
    def is_rolled_back(self) -> bool:
        return ContextState.ROLLED_BACK in self._state

    def called(self, interactor: Compensable) -> None:
        """Record *interactor* as having completed against this context."""
        self._called.append(interactor)
        logger.debug("Context %s recorded %r (depth=%d)", type(self).__name__, interactor, len(self._called))

    def fail(self, errors: ErrorCollection | Mapping[str, Any] | Any = None) -> None:
        """Mark the context as failed and raise :class:`ContextFailure`.

        *errors* may be another context's :class:`ErrorCollection` or a
        mapping of field to message(s), both merged into :attr:`errors`; a
        list or other non-string iterable, each item recorded on the
        ``"context"`` key; or any other value, recorded there as one message.
        This method never returns.
        """
        if isinstance(errors, (ErrorCollection, Mapping)):
            self._errors.merge(errors)
        elif isinstance(errors, Iterable) and not isinstance(errors, (str, bytes)):
            for message in errors:
                if message:
                    self._errors.add(CONTEXT_KEY, message)
        elif errors:
            self._errors.add(CONTEXT_KEY, errors)

        self._state |= ContextState.FAILED
        logger.debug("Context %s failed with errors %s", type(self).__name__, self._errors.to_dict())
        raise ContextFailure(self)

    def rollback(self) -> bool:
        """Roll back every recorded interactor, most recent first.

        Runs at most once per context; later calls return ``False`` without
        doing anything. The context is marked rolled back before the first
        compensation runs. Exceptions raised by a compensation propagate
        unchanged and stop the walk.
        """
        if ContextState.ROLLED_BACK in self._state:
            logger.debug("Context %s already rolled back, skipping", type(self).__name__)
            return False

        self._state |= ContextState.ROLLED_BACK
        logger.debug("Rolling back %d interactor(s) on %s", len(self._called), type(self).__name__)
        for interactor in list(reversed(self._called)):
            interactor.rollback()
        return True

    def __repr__(self) -> str:
        return f"<{type(self).__name__} status={self.status} fields={self._fields!r}>"


Context.__reserved_attributes__ = frozenset(name for name in dir(Context) if not name.startswith("_"))
