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
"""ErrorCollection — field-keyed error messages carried by a context."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from pyinteractor.kernel.types import FieldError

CONTEXT_KEY = "context"
"""Key used for errors that belong to the context as a whole."""


class ErrorCollection:
    """Mapping of field name to the list of messages recorded against it.

    Reading a key that has no errors returns an empty list without storing
    it. Messages accumulate; adding or merging never replaces what is
    already there.
    """

    __slots__ = ("_messages",)

    def __init__(self, errors: ErrorCollection | Mapping[str, Any] | None = None) -> None:
        self._messages: dict[str, list[str]] = {}
        if errors is not None:
            self.merge(errors)

    # ── mutation ──────────────────────────────────────────────

    def add(self, key: str, message: Any) -> None:
        """Record *message* under *key*, after any messages already there."""
        self._messages.setdefault(str(key), []).append(str(message))

    def merge(self, other: ErrorCollection | Mapping[str, Any]) -> None:
        """Add every message of *other* to this collection.

        *other* may be another collection or a mapping whose values are a
        single message or an iterable of messages.
        """
        items: Iterable[tuple[Any, Any]]
        if isinstance(other, ErrorCollection):
            # snapshot, so merging a collection into itself terminates
            items = [(key, list(messages)) for key, messages in other._messages.items()]
        elif isinstance(other, Mapping):
            items = list(other.items())
        else:
            raise TypeError(f"Cannot merge errors from {type(other).__name__}")

        for key, messages in items:
            if isinstance(messages, str) or not isinstance(messages, Iterable):
                messages = [messages]
            for message in messages:
                self.add(key, message)

    def clear(self) -> None:
        self._messages.clear()

    # ── queries ───────────────────────────────────────────────

    def __getitem__(self, key: str) -> list[str]:
        return list(self._messages.get(str(key), []))

    def __contains__(self, key: object) -> bool:
        return str(key) in self._messages

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __len__(self) -> int:
        return sum(len(messages) for messages in self._messages.values())

    def __bool__(self) -> bool:
        return bool(self._messages)

    @property
    def is_empty(self) -> bool:
        return not self._messages

    def keys(self) -> list[str]:
        return list(self._messages)

    def items(self) -> list[tuple[str, list[str]]]:
        return [(key, list(messages)) for key, messages in self._messages.items()]

    def to_dict(self) -> dict[str, list[str]]:
        return {key: list(messages) for key, messages in self._messages.items()}

    def full_messages(self) -> list[str]:
        """Human-readable messages, prefixed with their field name.

        Messages recorded against the whole context are returned bare.
        """
        result: list[str] = []
        for key, messages in self._messages.items():
            for message in messages:
                result.append(message if key == CONTEXT_KEY else f"{key} {message}")
        return result

    def field_errors(self) -> list[FieldError]:
        return [FieldError(field=key, message=message) for key, messages in self._messages.items() for message in messages]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ErrorCollection):
            return self._messages == other._messages
        if isinstance(other, Mapping):
            return self._messages == {str(k): list(v) for k, v in other.items()}
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ErrorCollection({self._messages!r})"
