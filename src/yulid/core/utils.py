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

import logging
import os
import time
from contextlib import contextmanager


def get_env_var_prefix() -> str:
    """Returns "YULID", the prefix shared by every setting, e.g. YULID_LOG_LEVEL."""
    return "YULID"


def get_env_val_str(env_var_name: str, default_val: str) -> str:
    """Reads the YULID_<env_var_name> setting as text.

    An empty value is returned as-is; only a missing variable falls back to default_val.

    Args:
        env_var_name: The setting name without the YULID_ prefix, e.g. "LOG_LEVEL".
        default_val: The value used when the variable is not set.
    """
    return os.environ.get(f"{get_env_var_prefix()}_{env_var_name}", default_val)


def get_env_val_int(env_var_name: str, default_val: int) -> int:
    """Reads the YULID_<env_var_name> setting as an integer, e.g. YULID_REPORT_SAMPLE_COUNT.

    Falls back to default_val when the variable is missing, empty or not an integer.
    """
    env_val = os.environ.get(f"{get_env_var_prefix()}_{env_var_name}")
    if env_val is None:
        return default_val
    try:
        return int(env_val)
    except ValueError:
        return default_val


@contextmanager
def log_execution_time(logger: logging.Logger, name: str, level: int = logging.DEBUG):
    """Logs "<name> took <seconds>s" when the block exits, even if it raised.

    Used by the suffix distribution report to time bulk generation.

    Args:
        logger: Receives the timing record.
        name: Describes the timed work, e.g. "Generating 100000 YULIDs".
        level: The record's level. Defaults to logging.DEBUG.
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        logger.log(level, "%s took %.4fs", name, time.perf_counter() - start)
