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

"""Unit tests for the total sequence helpers."""

from __future__ import annotations

import operator

import pytest

from slicekit.sequences import (
    dedupe,
    filter_values,
    flatten,
    last,
    reduce_values,
    to_map,
    transform,
)

pytestmark = pytest.mark.unit


def _is_even(value: int) -> bool:
    return value % 2 == 0


def test_dedupe_preserves_first_occurrence_order() -> None:
    assert dedupe([1, 2, 1, 3, 2]) == [1, 2, 3]


def test_dedupe_returns_empty_list_for_empty_input() -> None:
    assert dedupe([]) == []


def test_dedupe_is_idempotent() -> None:
    once = dedupe(["x", "y", "x"])
    assert dedupe(once) == once == ["x", "y"]


def test_dedupe_accepts_generators_and_leaves_input_untouched() -> None:
    source = ["b", "a", "b", "c", "a"]
    assert dedupe(item for item in source) == ["b", "a", "c"]
    assert source == ["b", "a", "b", "c", "a"]


def test_filter_values_keeps_matching_items_in_order() -> None:
    assert filter_values([1, 2, 3, 4], _is_even) == [2, 4]


def test_filter_values_returns_new_list() -> None:
    source = [2, 4]
    result = filter_values(source, _is_even)
    assert result == source
    assert result is not source


def test_filter_values_propagates_predicate_errors() -> None:
    def _explode(value: int) -> bool:
        message = f"bad {value}"
        raise RuntimeError(message)

    with pytest.raises(RuntimeError, match="bad 1"):
        _ = filter_values([1], _explode)


def test_flatten_joins_inner_sequences_in_order() -> None:
    assert flatten([[1, 2], [], [3]]) == [1, 2, 3]


def test_flatten_handles_empty_outer_sequence() -> None:
    assert flatten([]) == []


def test_flatten_accepts_mixed_iterables() -> None:
    assert flatten([(1, 2), range(3, 5), iter([5])]) == [1, 2, 3, 4, 5]


def test_last_returns_final_item() -> None:
    assert last([5, 6, 7]) == 7


def test_last_returns_default_for_empty_input() -> None:
    assert last([], 0) == 0
    assert last([]) is None


def test_last_cannot_distinguish_trailing_default() -> None:
    assert last([3, 0], 0) == last([], 0)


def test_last_consumes_non_sequence_iterables() -> None:
    assert last(value * 2 for value in range(4)) == 6
    assert last(iter(()), "none") == "none"


def test_reduce_values_folds_left_from_zero() -> None:
    assert reduce_values([1, 2, 3], operator.add, int) == 6


def test_reduce_values_applies_left_to_right() -> None:
    assert reduce_values(["a", "b", "c"], lambda acc, item: item + acc, str) == "cba"


def test_reduce_values_returns_zero_for_empty_input() -> None:
    assert reduce_values([], operator.add, int) == 0


def test_reduce_values_uses_fresh_seed_per_call() -> None:
    def _append(acc: list[int], item: int) -> list[int]:
        acc.append(item)
        return acc

    first = reduce_values([1], _append, list)
    second = reduce_values([2], _append, list)
    assert first == [1]
    assert second == [2]


def test_to_map_last_duplicate_key_wins() -> None:
    assert to_map([("a", 1), ("a", 2)], lambda pair: pair) == {"a": 2}


def test_to_map_derives_keys_and_values() -> None:
    words = ["apple", "kiwi", "banana"]
    assert to_map(words, lambda word: (word[0], len(word))) == {"a": 5, "k": 4, "b": 6}


def test_to_map_returns_empty_dict_for_empty_input() -> None:
    result = to_map([], lambda pair: pair)
    assert result == {}
    assert isinstance(result, dict)


def test_transform_maps_each_item() -> None:
    assert transform([1, 2, 3], lambda value: value * 2) == [2, 4, 6]


def test_transform_can_change_item_type() -> None:
    assert transform([1, 22], str) == ["1", "22"]
    assert transform([], str) == []
