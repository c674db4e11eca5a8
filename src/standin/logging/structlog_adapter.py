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
"""StructlogAdapter — renders standin's stdlib log records through structlog."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from standin.core.config import Config


class StructlogAdapter:
    """Configures structlog from the ``standin.logging`` section.

    standin's own modules log through ``logging.getLogger(__name__)`` and stay
    silent until an application configures logging. ``configure()`` installs a
    root handler whose ``ProcessorFormatter`` renders those records, and
    structlog loggers from ``get_logger()``, with the same processor chain.

    ``standin.logging.format`` selects ``console`` or ``json`` rendering and
    ``standin.logging.level`` maps logger names to levels, with ``root``
    applying to everything else::

        standin:
          logging:
            format: json
            level:
              root: WARNING
              standin.registry: DEBUG
    """

    def __init__(self) -> None:
        self._root_level: str = "INFO"
        self._format: str = "console"
        self._module_levels: dict[str, str] = {}
        self._handler: logging.Handler | None = None

    def configure(self, config: Config) -> None:
        level_section = config.get_section("standin.logging.level")
        self._root_level = str(level_section.pop("root", "INFO")).upper()
        self._module_levels = {k: str(v).upper() for k, v in level_section.items()}
        self._format = str(config.get("standin.logging.format", "console")).lower()

        self._install_handler()
        for module, level in self._module_levels.items():
            self.set_level(module, level)

    def get_logger(self, name: str) -> Any:
        return structlog.stdlib.get_logger(name)

    def set_level(self, name: str, level: str) -> None:
        logging.getLogger(name).setLevel(getattr(logging, level.upper(), logging.INFO))

    @property
    def handler(self) -> logging.Handler | None:
        """The root handler installed by the last ``configure()`` call."""
        return self._handler

    def _renderer(self) -> structlog.types.Processor:
        if self._format == "json":
            return structlog.processors.JSONRenderer()
        return structlog.dev.ConsoleRenderer()

    def _install_handler(self) -> None:
        shared: list[structlog.types.Processor] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
        ]

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                *shared,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                foreign_pre_chain=shared,
                processors=[
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    self._renderer(),
                ],
            )
        )
        logging.basicConfig(
            handlers=[handler],
            level=getattr(logging, self._root_level, logging.INFO),
            force=True,
        )
        self._handler = handler
