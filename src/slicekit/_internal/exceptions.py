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

"""Common exception hierarchy for slicekit."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = [
    "ConfigValidationError",
    "SequenceLengthMismatchError",
    "SlicekitError",
    "SlicekitTypeError",
    "SlicekitValidationError",
    "TransformError",
]


class SlicekitError(Exception):
    """Base error for all slicekit exceptions."""


class SlicekitValidationError(SlicekitError, ValueError):
    """Raised when input data fails validation checks."""


class SlicekitTypeError(SlicekitError, TypeError):
    """Raised when input data has an unexpected type."""


class ConfigValidationError(SlicekitValidationError):
    """Raised when runtime configuration contains invalid values."""


class TransformError(SlicekitError):
    """Raised when a fallible transform aborts on its first failing element.

    Attributes:
        index: Position of the element whose transform raised.
        value: The input element that could not be transformed.
        error: The exception raised by the transform function.
    """

    def __init__(self, index: int, value: object, error: Exception) -> None:
        """Initialize the exception with the failing position and cause.

        Args:
            index: Zero-based index of the failing element.
            value: The element passed to the transform function.
            error: Exception raised by the transform function.
        """
        self.index = index
        self.value = value
        self.error = error
        super().__init__(f"transform failed at index {index}: {error}")


class SequenceLengthMismatchError(SlicekitValidationError):
    """Raised when a strict zip receives sequences of differing lengths."""

    def __init__(self, lengths: Sequence[int]) -> None:
        """Initialize the exception with the observed sequence lengths.

        Args:
            lengths: Length of each input sequence, in argument order.
        """
        self.lengths = tuple(lengths)
        lengths_text = ", ".join(str(length) for length in self.lengths)
        super().__init__(f"sequences differ in length: {lengths_text}")
