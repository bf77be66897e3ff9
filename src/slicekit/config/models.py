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

"""Configuration models for slicekit runtime settings.

Settings come from explicit arguments or environment variables, are validated
with a Pydantic model and converted into a frozen dataclass for runtime use.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final, Literal

from pydantic import BaseModel, ConfigDict, field_validator

from slicekit.core.model_types import LogFormat

LOG_FORMAT_ENV: Final[str] = "SLICEKIT_LOG_FORMAT"
LOG_LEVEL_ENV: Final[str] = "SLICEKIT_LOG_LEVEL"

LogLevelName = Literal["debug", "info", "warning", "error"]
LOG_LEVELS: Final[tuple[LogLevelName, ...]] = ("debug", "info", "warning", "error")
DEFAULT_LOG_LEVEL: Final[LogLevelName] = "warning"
LOG_LEVEL_VALUES: Final[dict[LogLevelName, int]] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}
_LOG_LEVEL_NAMES: Final[dict[int, LogLevelName]] = {
    value: name for name, value in LOG_LEVEL_VALUES.items()
}


class LoggingSettingsModel(BaseModel):
    """Schema for the logging settings.

    ``log_level`` accepts one of ``LOG_LEVELS`` or the matching ``logging``
    constant; any other number is rejected.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    log_format: LogFormat = LogFormat.TEXT
    log_level: LogLevelName = DEFAULT_LOG_LEVEL

    @field_validator("log_format", mode="before")
    @classmethod
    def _normalise_format(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_level(cls, value: object) -> object:
        if isinstance(value, bool):
            return value
        if isinstance(value, int):
            return _LOG_LEVEL_NAMES.get(value, value)
        if isinstance(value, str):
            return value.strip().lower()
        return value


@dataclass(slots=True, frozen=True)
class LoggingSettings:
    """Resolved logging settings.

    Attributes:
        log_format: Output format for the slicekit log handler.
        log_level: Lower-case level name applied to slicekit loggers.
    """

    log_format: LogFormat
    log_level: LogLevelName

    @property
    def level(self) -> int:
        """Numeric ``logging`` level for ``log_level``."""
        return LOG_LEVEL_VALUES[self.log_level]

    @classmethod
    def from_model(cls, model: LoggingSettingsModel) -> LoggingSettings:
        return cls(log_format=model.log_format, log_level=model.log_level)


__all__ = [
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT_ENV",
    "LOG_LEVELS",
    "LOG_LEVEL_ENV",
    "LOG_LEVEL_VALUES",
    "LogLevelName",
    "LoggingSettings",
    "LoggingSettingsModel",
]
