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

"""Derives a YULID prefix from a person's name."""

from yulid.core.defaults import PREFIX_LEN, is_alphanumeric
from yulid.core.errors import InvalidInputError


def _clean_words(name: str) -> list[str]:
    words = []
    for word in name.upper().split():
        cleaned = "".join(ch for ch in word if is_alphanumeric(ch))
        if cleaned:
            words.append(cleaned)
    return words


def prefix_from_name(name: str) -> str:
    """Returns a 4-character prefix for the given name.

    For two or more words, takes the first and last characters of the first
    and of the last word ("John Doe" -> "JNDE"); middle words are ignored.
    A single word of at least 4 characters gives its first two and last two
    characters ("Madonna" -> "MANA"). Characters outside A-Z, 0-9 are dropped
    after uppercasing, without transliteration.

    Args:
        name: The person's name.

    Returns:
        A prefix accepted by `Yulid.new`.

    Raises:
        InvalidInputError: If no prefix can be formed from the name.
    """
    if not isinstance(name, str):
        raise InvalidInputError(f"name must be a string, got {type(name).__name__}")

    words = _clean_words(name)
    if len(words) >= 2:
        first, last = words[0], words[-1]
        prefix = first[0] + first[-1] + last[0] + last[-1]
    elif len(words) == 1 and len(words[0]) >= PREFIX_LEN:
        word = words[0]
        prefix = word[:2] + word[-2:]
    else:
        raise InvalidInputError(f"cannot derive a {PREFIX_LEN}-character prefix from name '{name}'")
    return prefix
