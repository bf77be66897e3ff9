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

"""Typed ``extra=`` payloads for slicekit log records."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Final, TypedDict, Unpack, cast

from slicekit.core.model_types import LogComponent, SequenceOperation

STRUCTURED_FIELDS: Final[tuple[str, ...]] = (
    "component",
    "operation",
    "index",
    "lengths",
    "error_code",
    "details",
)


class _StructuredLogBase(TypedDict):
    component: LogComponent


class StructuredLogExtra(_StructuredLogBase, total=False):
    """Structured logging extras accepted by slicekit log records."""

    operation: SequenceOperation
    index: int
    lengths: list[int]
    error_code: str
    details: Mapping[str, object]


class _StructuredLogKwargs(TypedDict, total=False):
    operation: SequenceOperation | str
    index: int
    lengths: Sequence[int]
    error_code: str
    details: Mapping[str, object]


def _maybe_assign(
    extra: StructuredLogExtra,
    *,
    key: str,
    kwargs: dict[str, object],
    transform: Callable[[object], object],
) -> None:
    value = kwargs.get(key)
    if value is None:
        return
    cast("dict[str, object]", extra)[key] = transform(value)


def structured_extra(
    component: LogComponent,
    **kwargs: Unpack[_StructuredLogKwargs],
) -> StructuredLogExtra:
    """Return a consistently typed ``logging.extra`` payload.

    Args:
        component: Library area emitting the record.
        **kwargs: Optional structured fields (operation, index, lengths, etc.).

    Returns:
        Mapping suitable for the ``extra`` parameter when emitting log records.
        Empty ``details`` mappings and ``None`` values are left out.

    Raises:
        ValueError: If ``operation`` names no known ``SequenceOperation``.
    """
    extra: StructuredLogExtra = {"component": component}
    payload_kwargs = cast("dict[str, object]", kwargs)
    _maybe_assign(
        extra,
        key="operation",
        kwargs=payload_kwargs,
        transform=lambda value: SequenceOperation(str(value).strip().lower()),
    )
    _maybe_assign(
        extra,
        key="index",
        kwargs=payload_kwargs,
        transform=lambda value: int(cast("int", value)),
    )
    lengths = payload_kwargs.get("lengths")
    if isinstance(lengths, Sequence):
        extra["lengths"] = [int(length) for length in cast("Sequence[int]", lengths)]
    _maybe_assign(extra, key="error_code", kwargs=payload_kwargs, transform=str)
    details = payload_kwargs.get("details")
    if isinstance(details, Mapping) and details:
        extra["details"] = dict(cast("Mapping[str, object]", details))
    return extra


__all__ = ["STRUCTURED_FIELDS", "StructuredLogExtra", "structured_extra"]
