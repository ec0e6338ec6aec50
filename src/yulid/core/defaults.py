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

from typing import Union

PREFIX_LEN = 4
SEPARATOR = "-"
SEPARATOR_LEN = len(SEPARATOR)
MIN_SUFFIX_LEN = 4
MAX_SUFFIX_LEN = 6
GENERATED_SUFFIX_LEN = MAX_SUFFIX_LEN
"""Freshly generated identifiers always carry the longest suffix; shorter ones are only accepted on validation."""

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"

CAPACITY = PREFIX_LEN + SEPARATOR_LEN + MAX_SUFFIX_LEN
MIN_RENDERED_LEN = PREFIX_LEN + SEPARATOR_LEN + MIN_SUFFIX_LEN
MAX_RENDERED_LEN = CAPACITY

_ALPHABET_BYTES = frozenset(ALPHABET.encode("ascii"))


def is_alphanumeric(ch: Union[str, int]) -> bool:
    """Returns whether a single character (or its byte value) belongs to ALPHABET.

    Only uppercase Latin letters and ASCII digits qualify; lowercase letters
    and non-ASCII letters or digits do not.
    """
    if isinstance(ch, int):
        return ch in _ALPHABET_BYTES
    return len(ch) == 1 and ch in ALPHABET
