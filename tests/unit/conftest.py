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

"""Fixtures shared across all unit tests."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from slicekit.config import LOG_FORMAT_ENV, LOG_LEVEL_ENV

if TYPE_CHECKING:
    from collections.abc import Generator

_LOGGER_NAMES: tuple[str, ...] = ("slicekit", "slicekit.sequences", "slicekit.config")


@pytest.fixture(autouse=True)
def reset_slicekit_logging(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Restore slicekit loggers and clear logging env vars around each test."""
    monkeypatch.delenv(LOG_FORMAT_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    loggers = [logging.getLogger(name) for name in _LOGGER_NAMES]
    saved = [(list(logger.handlers), logger.level, logger.propagate) for logger in loggers]
    yield
    for logger, (handlers, level, propagate) in zip(loggers, saved, strict=True):
        logger.handlers.clear()
        logger.handlers.extend(handlers)
        logger.setLevel(level)
        logger.propagate = propagate
