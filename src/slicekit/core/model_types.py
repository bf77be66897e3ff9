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

"""Shared enumerations used by slicekit logging and configuration."""

from __future__ import annotations

from enum import StrEnum


class LogFormat(StrEnum):
    """Enumeration of log output formats.

    Attributes:
        TEXT: Human-readable text format.
        JSON: Machine-readable JSON format.
    """

    TEXT = "text"
    JSON = "json"


class LogComponent(StrEnum):
    """Library areas that emit structured log records."""

    SEQUENCES = "sequences"
    CONFIG = "config"


class SequenceOperation(StrEnum):
    """Sequence operations that report failures in structured logs."""

    TRANSFORM_ERR = "transform_err"
    ZIP = "zip_values"


__all__ = ["LogComponent", "LogFormat", "SequenceOperation"]
