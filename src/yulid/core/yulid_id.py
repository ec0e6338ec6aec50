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

import dataclasses
from typing import Union

from typing_extensions import override

from yulid.core.defaults import (
    MAX_RENDERED_LEN,
    MIN_RENDERED_LEN,
    PREFIX_LEN,
    SEPARATOR,
    SEPARATOR_LEN,
    is_alphanumeric,
)
from yulid.core.errors import (
    InvalidInputError,
    InvalidLengthError,
    InvalidPrefixError,
    InvalidSeparatorError,
    InvalidSuffixError,
    YulidError,
)
from yulid.core.random_source import random_suffix

_SEPARATOR_BYTE = SEPARATOR.encode("ascii")[0]


@dataclasses.dataclass(frozen=True, eq=False)
class Yulid:
    """
    A short, human-readable identifier: a 4-character prefix, a '-' separator and a random suffix.

    The textual form is `PPPP-SSSSSS`, where both parts are drawn from the uppercase Latin letters and digits.
    The prefix is usually derived from a person's name (see `yulid.core.prefix`), and the suffix supplies the
    uniqueness. New identifiers always get a 6-character suffix, while validation also accepts 4 or 5.

    Example: for "John Doe" a YULID might be `JNDE-ED24HS`.

    The identifier wraps an immutable byte buffer. A zero byte ends the meaningful content, so a zero-padded
    buffer renders, compares and hashes the same as its unpadded form. Instances built with `from_bytes` or
    `from_string` are not checked on construction; call `validate` for that.
    """

    raw: bytes

    def __post_init__(self):
        if isinstance(self.raw, str):
            raise TypeError(f"Yulid expects bytes, got str '{self.raw}'; use Yulid.from_string for text.")
        if not isinstance(self.raw, bytes):
            object.__setattr__(self, "raw", bytes(self.raw))

    @classmethod
    def new(cls, prefix: str) -> "Yulid":
        """Generates a new YULID for the given prefix.

        Args:
            prefix: Exactly 4 characters, each an uppercase Latin letter or a digit.

        Returns:
            A YULID with the given prefix and a fresh 6-character random suffix.

        Raises:
            InvalidInputError: If the prefix has the wrong length or contains a character outside A-Z, 0-9.
        """
        if not isinstance(prefix, str) or len(prefix) != PREFIX_LEN:
            raise InvalidInputError()
        for ch in prefix:
            if not is_alphanumeric(ch):
                raise InvalidInputError()

        return cls(f"{prefix}{SEPARATOR}{random_suffix()}".encode("ascii"))

    @classmethod
    def from_bytes(cls, raw: bytes) -> "Yulid":
        """Wraps raw bytes, e.g. a zero-padded fixed-width field, without validating them."""
        return cls(bytes(raw))

    @classmethod
    def from_string(cls, text: str) -> "Yulid":
        """Wraps the UTF-8 encoding of `text` as-is, without validating or normalizing it."""
        return cls(text.encode("utf-8"))

    def _content(self) -> bytes:
        end = self.raw.find(0)
        return self.raw if end < 0 else self.raw[:end]

    def render(self) -> str:
        """Returns the textual form, i.e. the buffer up to its first zero byte.

        Never fails; undecodable bytes are rendered as U+FFFD.
        """
        return self._content().decode("ascii", errors="replace")

    @property
    def prefix(self) -> str:
        return self.render()[:PREFIX_LEN]

    @property
    def suffix(self) -> str:
        return self.render()[PREFIX_LEN + SEPARATOR_LEN :]

    def validate(self) -> None:
        """Raises the first failing structural check, see `validate`."""
        validate(self)

    @override
    def __eq__(self, other) -> bool:
        if not isinstance(other, Yulid):
            return NotImplemented
        return self._content() == other._content()

    @override
    def __hash__(self) -> int:
        return hash(self._content())

    @override
    def __str__(self) -> str:
        return self.render()

    @override
    def __repr__(self) -> str:
        return f"Yulid({self.render()!r})"


def new_yulid(prefix: str) -> Yulid:
    """Generates a new YULID for the given prefix. See `Yulid.new`."""
    return Yulid.new(prefix)


def render(yulid: Yulid) -> str:
    """Returns the textual form of the given YULID."""
    return yulid.render()


def validate(yulid: Yulid) -> None:
    """Checks that a YULID is correctly formatted.

    Rules are checked in order and the first one to fail is raised:
    the rendered length must be within [9, 11], the first 4 bytes must be
    alphanumeric, byte 4 must be '-', and every remaining rendered byte must be
    alphanumeric. Bytes past the first zero byte are never inspected.

    Args:
        yulid: The identifier to check.

    Raises:
        InvalidLengthError: If the rendered length is outside [9, 11].
        InvalidPrefixError: If the prefix contains a character outside A-Z, 0-9.
        InvalidSeparatorError: If the separator is not '-'.
        InvalidSuffixError: If the suffix contains a character outside A-Z, 0-9.
    """
    content = yulid._content()
    content_len = len(content)
    if content_len < MIN_RENDERED_LEN or content_len > MAX_RENDERED_LEN:
        raise InvalidLengthError()

    if not all(is_alphanumeric(b) for b in content[:PREFIX_LEN]):
        raise InvalidPrefixError()

    if content[PREFIX_LEN] != _SEPARATOR_BYTE:
        raise InvalidSeparatorError()

    if not all(is_alphanumeric(b) for b in content[PREFIX_LEN + SEPARATOR_LEN :]):
        raise InvalidSuffixError()


def is_valid(candidate: Union[Yulid, str, bytes]) -> bool:
    """Returns whether the candidate passes `validate`.

    Args:
        candidate: A Yulid, its textual form, or its raw bytes.
    """
    if isinstance(candidate, str):
        candidate = Yulid.from_string(candidate)
    elif isinstance(candidate, (bytes, bytearray)):
        candidate = Yulid.from_bytes(candidate)
    try:
        validate(candidate)
    except YulidError:
        return False
    return True
