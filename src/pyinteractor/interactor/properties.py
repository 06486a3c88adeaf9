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
"""Interactor configuration properties.

YAML structure::

    pyinteractor:
      interactor:
        rollback_on_failure: true
        log_failures: true
"""

from __future__ import annotations

from dataclasses import dataclass

from pyinteractor.core.config import Config, config_properties


@config_properties(prefix="pyinteractor.interactor")
@dataclass
class InteractorProperties:
    """Configuration for running interactors."""

    rollback_on_failure: bool = True
    log_failures: bool = True


_active = InteractorProperties()


def configure(config: Config) -> InteractorProperties:
    """Bind :class:`InteractorProperties` from *config* and make them active."""
    global _active
    _active = config.bind(InteractorProperties)
    return _active


def get_properties() -> InteractorProperties:
    return _active


def reset_properties() -> None:
    """Restore the default properties."""
    global _active
    _active = InteractorProperties()
