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

"""Shared Hypothesis strategies for property-based tests."""

from __future__ import annotations

from hypothesis import strategies as st

__all__ = [
    "int_lists",
    "nested_int_lists",
    "parallel_int_lists",
]


def int_lists(max_size: int = 30) -> st.SearchStrategy[list[int]]:
    """Return a strategy that yields short lists of small integers.

    The value range is kept narrow so duplicates show up often.
    """
    return st.lists(st.integers(min_value=-10, max_value=10), max_size=max_size)


def nested_int_lists(max_groups: int = 8) -> st.SearchStrategy[list[list[int]]]:
    """Return a strategy that yields lists of integer lists, some of them empty."""
    return st.lists(int_lists(max_size=6), max_size=max_groups)


def parallel_int_lists(max_sequences: int = 5) -> st.SearchStrategy[list[list[int]]]:
    """Strategy for the arguments of a zip: several lists of varying length.

    Args:
        max_sequences: Maximum number of parallel lists emitted.

    Returns:
        Hypothesis strategy producing between one and ``max_sequences`` lists.
    """
    return st.lists(int_lists(max_size=8), min_size=1, max_size=max_sequences)
