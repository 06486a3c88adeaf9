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
"""LoggingPort — how an application plugs its logging setup into pyinteractor.

Contexts, interactors and organizers never configure logging themselves;
they emit lifecycle events through ``logging.getLogger(__name__)`` under the
``pyinteractor`` logger tree. An adapter satisfying this port turns the
``pyinteractor.logging`` config section into handlers and levels for that
tree. :class:`~pyinteractor.logging.structlog_adapter.StructlogAdapter` is the
bundled implementation.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from pyinteractor.core.config import Config


@runtime_checkable
class LoggingPort(Protocol):
    """Configures output for pyinteractor's lifecycle events.

    ``configure`` reads ``pyinteractor.logging.level.*`` and
    ``pyinteractor.logging.format``; ``set_level`` adjusts one logger, e.g.
    ``"pyinteractor.context"`` to trace call-stack and rollback events.
    """

    def configure(self, config: Config) -> None: ...
    def get_logger(self, name: str) -> Any: ...
    def set_level(self, name: str, level: str) -> None: ...
