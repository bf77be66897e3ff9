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

"""Resolve slicekit settings from explicit values and the process environment."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from pydantic import ValidationError

from slicekit._internal.exceptions import ConfigValidationError
from slicekit._internal.log_extras import structured_extra
from slicekit.core.model_types import LogComponent, LogFormat

from .models import LOG_FORMAT_ENV, LOG_LEVEL_ENV, LoggingSettings, LoggingSettingsModel

if TYPE_CHECKING:
    from collections.abc import Mapping

logger: logging.Logger = logging.getLogger("slicekit.config")

_ENV_FIELDS: dict[str, str] = {
    LOG_FORMAT_ENV: "log_format",
    LOG_LEVEL_ENV: "log_level",
}


def _collect_env(environ: Mapping[str, str]) -> dict[str, object]:
    raw: dict[str, object] = {}
    for env_name, field_name in _ENV_FIELDS.items():
        value = environ.get(env_name)
        if value is None or not value.strip():
            continue
        raw[field_name] = value
    return raw


def resolve_logging_settings(
    log_format: LogFormat | str | None = None,
    log_level: str | int | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> LoggingSettings:
    """Validate logging settings, preferring explicit values over the environment.

    Args:
        log_format: Explicit output format. ``None`` reads ``SLICEKIT_LOG_FORMAT``.
        log_level: Explicit level name or ``logging`` constant. ``None`` reads
            ``SLICEKIT_LOG_LEVEL``.
        environ: Mapping to read from. ``None`` uses ``os.environ``. Unset or
            blank variables fall back to the model defaults.

    Returns:
        Validated ``LoggingSettings``.

    Raises:
        ConfigValidationError: If any resolved value is unsupported.
    """
    raw = _collect_env(os.environ if environ is None else environ)
    if log_format is not None:
        raw["log_format"] = log_format
    if log_level is not None:
        raw["log_level"] = log_level
    try:
        model = LoggingSettingsModel.model_validate(raw)
    except ValidationError as exc:
        env_names = ", ".join(sorted(_ENV_FIELDS))
        message = f"Invalid slicekit logging settings (arguments or {env_names}): {exc}"
        raise ConfigValidationError(message) from exc
    settings = LoggingSettings.from_model(model)
    logger.debug(
        "Resolved logging settings format=%s level=%s",
        settings.log_format,
        settings.log_level,
        extra=structured_extra(
            LogComponent.CONFIG,
            details={"log_format": settings.log_format.value, "log_level": settings.log_level},
        ),
    )
    return settings


def load_logging_settings(environ: Mapping[str, str] | None = None) -> LoggingSettings:
    """Resolve logging settings from environment variables alone."""
    return resolve_logging_settings(environ=environ)


__all__ = ["load_logging_settings", "resolve_logging_settings"]
