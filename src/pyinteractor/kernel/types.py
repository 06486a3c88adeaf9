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
"""Shared state and error types for contexts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Flag, StrEnum, auto


class ContextState(Flag):
    """Sticky bookkeeping bits of a context.

    Bits are only ever added; a context that has failed or rolled back
    stays that way for the rest of its life.
    """

    FRESH = 0
    FAILED = auto()
    ROLLED_BACK = auto()


class ContextStatus(StrEnum):
    """Lifecycle phase of a context, derived from its state and call-stack."""

    FRESH = "FRESH"
    RUNNING = "RUNNING"
    FAILED = "FAILED"
    ROLLED_BACK = "ROLLED_BACK"


@dataclass(frozen=True)
class FieldError:
    """A single error message attached to a context field."""

    field: str
    message: str
