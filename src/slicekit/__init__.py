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

"""slicekit - eager, typed helpers for ordered sequences.

Provides deduplication, filtering, flattening, folds, mapping construction,
element-wise transforms (including a fail-fast variant) and truncating zips.
"""

from __future__ import annotations

from slicekit.exceptions import (
    ConfigValidationError,
    SequenceLengthMismatchError,
    SlicekitError,
    SlicekitTypeError,
    SlicekitValidationError,
    TransformError,
)

from .logging import configure_logging
from .sequences import (
    dedupe,
    filter_values,
    flatten,
    last,
    reduce_values,
    to_map,
    transform,
    transform_err,
    zip_values,
)

__all__ = [
    "ConfigValidationError",
    "SequenceLengthMismatchError",
    "SlicekitError",
    "SlicekitTypeError",
    "SlicekitValidationError",
    "TransformError",
    "__version__",
    "configure_logging",
    "dedupe",
    "filter_values",
    "flatten",
    "last",
    "reduce_values",
    "to_map",
    "transform",
    "transform_err",
    "zip_values",
]

__version__ = "0.1.0"
