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

"""Eager helpers over ordered sequences.

Every helper performs a single left-to-right pass over its input, never mutates
it, and returns a newly allocated ``list`` or ``dict``. Empty input always
produces an empty container rather than ``None``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import TypeVar, overload

from slicekit.core.model_types import LogComponent, SequenceOperation

from .error_codes import error_code_for
from .exceptions import SequenceLengthMismatchError, SlicekitTypeError, TransformError
from .log_extras import structured_extra

T = TypeVar("T")
R = TypeVar("R")
A = TypeVar("A")
D = TypeVar("D")
H = TypeVar("H", bound=Hashable)
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

logger: logging.Logger = logging.getLogger("slicekit.sequences")


def dedupe(values: Iterable[H]) -> list[H]:
    """Keep the first occurrence of every distinct value.

    Later repeats are skipped, so applying ``dedupe`` to its own output is a
    no-op.

    Args:
        values: Hashable items, compared by equality.

    Returns:
        Each distinct value once, positioned where it first appeared.
    """
    seen: set[H] = set()
    result: list[H] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        result.append(value)
    return result


def filter_values(values: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """Return the items for which ``predicate`` is truthy, in their original order."""
    return [value for value in values if predicate(value)]


def flatten(groups: Iterable[Iterable[T]]) -> list[T]:
    """Concatenate nested iterables into a single list.

    Args:
        groups: Outer iterable whose inner iterables are joined in order.

    Returns:
        A list holding every inner element, outer order first, inner order second.
    """
    result: list[T] = []
    for group in groups:
        result.extend(group)
    return result


@overload
def last(values: Iterable[T]) -> T | None: ...


@overload
def last(values: Iterable[T], default: D) -> T | D: ...


def last(values: Iterable[T], default: object = None) -> object:
    """Return the final item of ``values``, or ``default`` when there is none.

    A result equal to ``default`` is ambiguous: it may come from an empty input
    or from a trailing item equal to ``default``. Check the length first when
    the distinction matters.

    Args:
        values: Items to inspect. Sequences are indexed directly; other
            iterables are consumed.
        default: Value returned for empty input.

    Returns:
        The last item, or ``default``.
    """
    if isinstance(values, Sequence):
        return values[-1] if values else default
    result: object = default
    for value in values:
        result = value
    return result


def reduce_values(
    values: Iterable[T],
    func: Callable[[A, T], A],
    zero: Callable[[], A],
) -> A:
    """Fold ``values`` from the left, seeding the accumulator with ``zero()``.

    Args:
        values: Items to fold, in order.
        func: Combining function called as ``func(accumulator, item)``.
        zero: Factory for the empty accumulator, e.g. ``int``, ``list`` or
            ``str``. It is called once per invocation, so mutable seeds are
            never shared between calls.

    Returns:
        The final accumulator. Empty input returns ``zero()`` unchanged.
    """
    accumulator = zero()
    for value in values:
        accumulator = func(accumulator, value)
    return accumulator


def to_map(values: Iterable[T], func: Callable[[T], tuple[K, V]]) -> dict[K, V]:
    """Build a dict from the ``(key, value)`` pairs derived from each item.

    Later items overwrite earlier ones that derive the same key.
    """
    result: dict[K, V] = {}
    for value in values:
        key, mapped = func(value)
        result[key] = mapped
    return result


def transform(values: Iterable[T], func: Callable[[T], R]) -> list[R]:
    """Apply ``func`` to every item and return the results in order."""
    return [func(value) for value in values]


def transform_err(values: Iterable[T], func: Callable[[T], R]) -> list[R]:
    """Apply ``func`` to every item, aborting on the first failure.

    ``func`` signals failure by raising. Items after the failing one are never
    passed to ``func`` and results computed so far are discarded, so callers
    either receive every result or none.

    Args:
        values: Items to transform, in order.
        func: Transform applied to each item.

    Returns:
        The transformed items, when every call succeeds.

    Raises:
        TransformError: Wrapping the first exception raised by ``func``, with
            the failing index and item attached.
    """
    results: list[R] = []
    for index, value in enumerate(values):
        try:
            mapped = func(value)
        except Exception as exc:  # noqa: BLE001
            error = TransformError(index, value, exc)
            logger.debug(
                "transform_err aborted at index %d: %s",
                index,
                exc,
                extra=structured_extra(
                    LogComponent.SEQUENCES,
                    operation=SequenceOperation.TRANSFORM_ERR,
                    index=index,
                    error_code=error_code_for(error),
                    details={"error_type": type(exc).__name__},
                ),
            )
            raise error from exc
        results.append(mapped)
    return results


def zip_values(*sequences: Sequence[T], strict: bool = False) -> list[list[T]]:
    """Combine the items at each index of ``sequences`` into rows.

    Rows are produced for indices ``0`` up to the length of the shortest
    sequence; longer sequences are truncated. Each row lists one item per input
    sequence, in argument order. Calling without sequences returns ``[]``.

    Args:
        *sequences: Sequences to combine.
        strict: When ``True``, require all sequences to share one length
            instead of truncating.

    Returns:
        A list of rows, each a new list.

    Raises:
        SlicekitTypeError: If an argument is not a sequence.
        SequenceLengthMismatchError: If ``strict`` is set and the lengths differ.
    """
    if not sequences:
        return []
    for position, sequence in enumerate(sequences):
        if not isinstance(sequence, Sequence):
            message = (
                f"zip_values argument {position} must be a sequence, "
                f"got {type(sequence).__name__}"
            )
            raise SlicekitTypeError(message)
    lengths = [len(sequence) for sequence in sequences]
    if strict and len(set(lengths)) > 1:
        error = SequenceLengthMismatchError(lengths)
        logger.debug(
            "zip_values rejected sequences of differing lengths",
            extra=structured_extra(
                LogComponent.SEQUENCES,
                operation=SequenceOperation.ZIP,
                lengths=lengths,
                error_code=error_code_for(error),
            ),
        )
        raise error
    size = min(lengths)
    return [[sequence[index] for sequence in sequences] for index in range(size)]


__all__ = [
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
