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
"""Attribute registry — declared attribute names per context type."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pyinteractor.kernel.exceptions import AttributeDeclarationError

if TYPE_CHECKING:
    from pyinteractor.context.base import Context

logger = logging.getLogger(__name__)


class AttributeRegistry:
    """Stores the attribute names declared by each context type.

    Declarations are keyed by type identity. A type's declared set is the
    union of its own declarations and those of its base classes, so
    declaring on a subclass never changes what the parent exposes.
    """

    def __init__(self) -> None:
        # dict keys act as an insertion-ordered set
        self._declared: dict[type, dict[str, None]] = {}

    # -- Public API ----------------------------------------------------------

    def declare(self, context_type: type, *names: str) -> tuple[str, ...]:
        """Declare *names* on *context_type* and return its declared set.

        With no names the current set is returned unchanged. Repeated names,
        within one call or across calls, are stored once.

        Raises:
            AttributeDeclarationError: If a name is not an identifier, is
                private, or collides with a member of *context_type*.
        """
        if names:
            reserved: frozenset[str] = getattr(context_type, "__reserved_attributes__", frozenset())
            for name in names:
                self._validate(context_type, name, reserved)
            own = self._declared.setdefault(context_type, {})
            added = [name for name in names if name not in own]
            own.update(dict.fromkeys(names))
            if added:
                logger.debug("Declared attributes %s on %s", added, context_type.__qualname__)
        return self.declared(context_type)

    def declared(self, context_type: type) -> tuple[str, ...]:
        """Return the declared set of *context_type*, including inherited names."""
        names: dict[str, None] = {}
        for klass in reversed(context_type.__mro__):
            names.update(self._declared.get(klass, {}))
        return tuple(sorted(names))

    def extract(self, context: Context) -> dict[str, Any]:
        """Return the fields of *context* restricted to its type's declared set.

        Declared names that hold no value are left out.
        """
        fields = context.to_dict()
        return {name: fields[name] for name in self.declared(type(context)) if name in fields}

    def reset(self, context_type: type | None = None) -> None:
        """Forget the declarations of *context_type*, or of every type."""
        if context_type is None:
            self._declared.clear()
        else:
            self._declared.pop(context_type, None)

    # -- Internals -----------------------------------------------------------

    @staticmethod
    def _validate(context_type: type, name: Any, reserved: frozenset[str]) -> None:
        if not isinstance(name, str) or not name.isidentifier():
            raise AttributeDeclarationError(name, "attribute names must be identifiers")
        if name.startswith("_"):
            raise AttributeDeclarationError(name, "attribute names must not start with an underscore")
        if name in reserved:
            raise AttributeDeclarationError(name, "name is reserved by the context API")
        if hasattr(context_type, name):
            raise AttributeDeclarationError(name, f"name clashes with a member of {context_type.__qualname__}")


attribute_registry = AttributeRegistry()
"""Process-wide registry used by :class:`~pyinteractor.context.base.Context`."""
