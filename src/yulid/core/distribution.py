# Copyright 2025 Google LLC
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

"""Statistics for checking that generated suffixes are uniformly distributed."""

from typing import Iterable

import numpy as np

from yulid.core.defaults import ALPHABET, GENERATED_SUFFIX_LEN

CHI_SQUARE_CRITICAL_35DOF_P001 = 66.62
"""Chi-square critical value for 35 degrees of freedom (36 symbols) at p = 0.001."""

_ALPHABET_INDEX = {ch: i for i, ch in enumerate(ALPHABET)}


def suffix_position_counts(suffixes: Iterable[str], suffix_len: int = GENERATED_SUFFIX_LEN) -> np.ndarray:
    """Counts how often each alphabet character occurs at each suffix position.

    Args:
        suffixes: Suffixes of exactly `suffix_len` characters.
        suffix_len: The number of positions to count.

    Returns:
        An integer array of shape (suffix_len, len(ALPHABET)).

    Raises:
        ValueError: If a suffix has the wrong length or a character outside ALPHABET.
    """
    counts = np.zeros((suffix_len, len(ALPHABET)), dtype=np.int64)
    for suffix in suffixes:
        if len(suffix) != suffix_len:
            raise ValueError(f"Expected a suffix of length {suffix_len}, got '{suffix}'.")
        for pos, ch in enumerate(suffix):
            idx = _ALPHABET_INDEX.get(ch)
            if idx is None:
                raise ValueError(f"Character '{ch}' in suffix '{suffix}' is not in the alphabet.")
            counts[pos, idx] += 1
    return counts


def chi_square_per_position(counts: np.ndarray) -> np.ndarray:
    """Returns the chi-square statistic of each row of `counts` against a uniform distribution."""
    counts = np.asarray(counts, dtype=np.float64)
    totals = counts.sum(axis=1, keepdims=True)
    if np.any(totals == 0):
        raise ValueError("Every position needs at least one sample.")
    expected = totals / counts.shape[1]
    return ((counts - expected) ** 2 / expected).sum(axis=1)


def non_uniform_positions(
    counts: np.ndarray, critical_value: float = CHI_SQUARE_CRITICAL_35DOF_P001
) -> list[int]:
    """Returns the suffix positions whose chi-square statistic exceeds `critical_value`."""
    stats = chi_square_per_position(counts)
    return [int(pos) for pos in np.flatnonzero(stats > critical_value)]
