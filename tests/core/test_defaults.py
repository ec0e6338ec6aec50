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

import pytest

from yulid.core import defaults
from yulid.core.defaults import ALPHABET, is_alphanumeric


def test_alphabet():
    assert len(ALPHABET) == 36
    assert len(set(ALPHABET)) == 36
    assert ALPHABET == "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"


def test_lengths():
    assert defaults.CAPACITY == 11
    assert defaults.MIN_RENDERED_LEN == 9
    assert defaults.MAX_RENDERED_LEN == 11
    assert defaults.GENERATED_SUFFIX_LEN == defaults.MAX_SUFFIX_LEN


class TestIsAlphanumeric:
    @pytest.mark.parametrize("ch", list(ALPHABET))
    def test_alphabet_characters(self, ch):
        assert is_alphanumeric(ch)
        assert is_alphanumeric(ord(ch))

    @pytest.mark.parametrize("ch", ["a", "z", "-", "_", " ", "!", "É", "٣", "", "AB"])
    def test_other_characters(self, ch):
        assert not is_alphanumeric(ch)

    @pytest.mark.parametrize("b", [0, 45, 97, 0xC3, 255])
    def test_other_bytes(self, b):
        assert not is_alphanumeric(b)
