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

"""YULID logging configuration."""

import logging
import os
import sys

from typing_extensions import override

from yulid.core import utils

_DEFAULT_LOG_LEVEL = "INFO"


class YulidContextFormatter(logging.Formatter):
    """A logging formatter that stamps each record with the emitting process id."""

    @override
    def format(self, record):
        """Formats the log record to include the current process id.

        Args:
            record: The log record to format.

        Returns:
            The formatted log record as a string.
        """
        record.pid = os.getpid()
        return super().format(record)


def get_logger(name: str, stream=sys.stderr) -> logging.Logger:
    """Get a logger with the YULID record format.

    The level is read from the YULID_LOG_LEVEL environment variable, and
    unknown level names fall back to INFO.

    Args:
        name: The name of the logger.
        stream: The stream to write log records to. Defaults to sys.stderr.

    Returns:
        A configured, non-propagating logger.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(stream=stream)
        formatter = YulidContextFormatter(
            "[YULID %(asctime)s %(levelname)s Pid=%(pid)s %(name)s:%(lineno)d] %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        log_level_str = utils.get_env_val_str("LOG_LEVEL", _DEFAULT_LOG_LEVEL)
        log_level = logging.getLevelName(log_level_str.upper())
        if not isinstance(log_level, int):
            log_level = logging.INFO
        logger.setLevel(log_level)
    logger.propagate = False
    return logger
