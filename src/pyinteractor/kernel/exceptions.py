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
"""Exception hierarchy for pyinteractor.

All library exceptions inherit from PyInteractorException, so callers can
catch the base type to handle everything raised here, or a subclass for
targeted handling.

- ContextFailure: a context was failed; aborts the remaining chain
- AttributeDeclarationError: an invalid attribute name was declared
- ConfigurationError: configuration could not be loaded or bound
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pyinteractor.context.base import Context


class PyInteractorException(Exception):
    """Base exception for all pyinteractor errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "CONTEXT_FAILURE").
        details: Arbitrary key-value pairs for debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details: dict[str, Any] = details if details is not None else {}


class ContextFailure(PyInteractorException):
    """Raised by :meth:`Context.fail` to abort an interactor chain.

    The failed context travels with the exception so a handler can inspect
    its errors and fields, and trigger its rollback.
    """

    def __init__(self, context: Context, message: str | None = None) -> None:
        messages = context.errors.full_messages()
        if message is None:
            message = "; ".join(messages) if messages else "Context failed"
        super().__init__(
            message,
            code="CONTEXT_FAILURE",
            details={"errors": context.errors.to_dict()},
        )
        self.context = context


class AttributeDeclarationError(PyInteractorException):
    """Raised when a context type declares an unusable attribute name."""

    def __init__(self, name: Any, reason: str) -> None:
        super().__init__(
            f"Cannot declare attribute {name!r}: {reason}",
            code="INVALID_ATTRIBUTE",
            details={"name": name},
        )
        self.name = name


class ConfigurationError(PyInteractorException):
    """Raised when configuration cannot be resolved or bound."""
