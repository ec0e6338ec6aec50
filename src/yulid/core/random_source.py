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

"""Cryptographically secure suffix generation.

Draws go through `secrets.randbelow`, which rejection-samples the OS random
source, so every alphabet index in [0, bound) is equally likely.

A failing OS random source is fatal: the failure is logged and the process
is aborted.
"""

import os
import secrets
from typing import NoReturn

from yulid.core.defaults import ALPHABET, GENERATED_SUFFIX_LEN
from yulid.core.yulid_logging import get_logger

_LOGGER = get_logger(__name__)


def abort_on_random_failure(exc: BaseException) -> NoReturn:
    """Logs the random source failure and aborts the process.

    Args:
        exc: The error raised by the random source.
    """
    _LOGGER.critical("Secure random source failed, aborting: %r", exc, exc_info=exc)
    for handler in _LOGGER.handlers:
        handler.flush()
    os.abort()


def random_index(bound: int) -> int:
    """Returns a uniformly distributed integer in [0, bound).

    Args:
        bound: The exclusive upper bound. Must be positive.

    Returns:
        The drawn index.

    Raises:
        ValueError: If bound is not positive.
    """
    if bound <= 0:
        raise ValueError(f"bound must be positive, got {bound}.")
    try:
        return secrets.randbelow(bound)
    except (OSError, NotImplementedError) as e:
        abort_on_random_failure(e)


def random_suffix(length: int = GENERATED_SUFFIX_LEN) -> str:
    """Returns `length` characters drawn independently and uniformly from ALPHABET."""
    return "".join(ALPHABET[random_index(len(ALPHABET))] for _ in range(length))
