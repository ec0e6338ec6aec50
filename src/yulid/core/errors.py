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

"""Errors raised while constructing or validating a YULID."""


class YulidError(ValueError):
    """Base class for all YULID errors."""


class InvalidInputError(YulidError):
    """The prefix handed to the constructor is not exactly four alphanumeric characters."""

    def __init__(self, message: str = "input should be exactly four alphanumeric characters"):
        super().__init__(message)


class YulidFormatError(YulidError):
    """Base class for structural validation failures.

    Each subclass names the single rule that failed, checked in order:
    length, prefix, separator, suffix.
    """

    default_message = "YULID is malformed"

    def __init__(self, message: str = ""):
        super().__init__(message or self.default_message)


class InvalidLengthError(YulidFormatError):
    default_message = "YULID has an invalid length"


class InvalidPrefixError(YulidFormatError):
    default_message = "YULID has an invalid prefix"


class InvalidSeparatorError(YulidFormatError):
    default_message = "YULID separator is invalid"


class InvalidSuffixError(YulidFormatError):
    default_message = "YULID random part contains invalid characters"
