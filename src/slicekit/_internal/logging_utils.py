# Copyright 2025 CrownOps Engineering
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

"""Logging configuration shared across slicekit components."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Final, override

from slicekit.config import LOG_LEVELS, resolve_logging_settings
from slicekit.core.model_types import LogFormat

from .log_extras import STRUCTURED_FIELDS, StructuredLogExtra, structured_extra

ROOT_LOGGER_NAME: Final[str] = "slicekit"

LOG_FORMATS: Final[tuple[str, ...]] = tuple(format_.value for format_ in LogFormat)
CHILD_LOGGERS: Final[tuple[str, ...]] = (
    "slicekit.sequences",
    "slicekit.config",
)


@dataclass(slots=True, frozen=True)
class LogConfig:
    """Resolved logging configuration for diagnostics and debugging."""

    format: LogFormat
    level: int
    level_name: str


class JSONLogFormatter(logging.Formatter):
    """Render log records as structured JSON objects."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as a JSON string.

        Args:
            record: Log record to serialise.

        Returns:
            JSON-formatted string containing standard and structured fields.
        """
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "message": record.getMessage(),
            "logger": record.name,
        }
        for field in STRUCTURED_FIELDS:
            if hasattr(record, field):
                payload[field] = getattr(record, field)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


class TextLogFormatter(logging.Formatter):
    """Readable, single-line formatter."""

    def __init__(self) -> None:
        super().__init__("[%(levelname)s] %(message)s")


def _configure_handler(log_format: LogFormat) -> logging.Handler:
    handler = logging.StreamHandler()
    if log_format is LogFormat.JSON:
        handler.setFormatter(JSONLogFormatter())
    else:
        handler.setFormatter(TextLogFormatter())
    return handler


def _apply_child_levels(level: int, children: Iterable[str]) -> None:
    for child in children:
        logging.getLogger(child).setLevel(level)


def configure_logging(
    log_format: LogFormat | str | None = None,
    *,
    log_level: str | int | None = None,
) -> LogConfig:
    """Install a stream handler on the ``slicekit`` logger.

    Args:
        log_format: Desired log output format. ``None`` falls back to the
            ``SLICEKIT_LOG_FORMAT`` environment variable or ``text``.
        log_level: Level name from ``LOG_LEVELS`` or the matching ``logging``
            constant. ``None`` consults ``SLICEKIT_LOG_LEVEL`` or defaults to
            ``warning``.

    Returns:
        A ``LogConfig`` describing the selected formatter and resolved numeric
        log level, which is also applied to the root and child loggers.

    Raises:
        ConfigValidationError: If an explicit or environment value is unsupported.
    """
    settings = resolve_logging_settings(log_format, log_level)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.addHandler(_configure_handler(settings.log_format))
    root_logger.setLevel(settings.level)
    root_logger.propagate = False

    _apply_child_levels(settings.level, CHILD_LOGGERS)
    return LogConfig(
        format=settings.log_format,
        level=settings.level,
        level_name=settings.log_level,
    )


__all__ = [
    "LOG_FORMATS",
    "LOG_LEVELS",
    "ROOT_LOGGER_NAME",
    "JSONLogFormatter",
    "LogConfig",
    "StructuredLogExtra",
    "TextLogFormatter",
    "configure_logging",
    "structured_extra",
]
