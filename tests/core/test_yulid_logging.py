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

import io
import logging
import os
import re

import pytest

from yulid.core.yulid_logging import YulidContextFormatter, get_logger


class TestYulidContextFormatter:
    @pytest.fixture
    def formatter(self):
        return YulidContextFormatter("[%(levelname)s] [Pid %(pid)s] [%(name)s:%(lineno)d] %(message)s")

    @pytest.fixture
    def record(self):
        return logging.LogRecord(
            name="test_logger",
            level=logging.INFO,
            pathname="test_module.py",
            lineno=10,
            msg="Test message",
            args=(),
            exc_info=None,
        )

    def test_format_includes_pid(self, formatter, record):
        formatted_message = formatter.format(record)
        assert formatted_message == f"[INFO] [Pid {os.getpid()}] [test_logger:10] Test message"

    def test_format_uses_current_pid(self, mocker, formatter, record):
        # Given
        mocker.patch("os.getpid", return_value=4242)

        # When
        formatted_message = formatter.format(record)

        # Then
        assert "[Pid 4242]" in formatted_message


class TestGetLogger:
    @pytest.fixture(autouse=True)
    def cleanup_loggers(self):
        yield
        for logger_name in list(logging.Logger.manager.loggerDict.keys()):
            if logger_name.startswith("test_logger"):
                logger = logging.getLogger(logger_name)
                for handler in list(logger.handlers):
                    logger.removeHandler(handler)
                del logging.Logger.manager.loggerDict[logger_name]

    def test_get_logger_configures_handler_and_formatter(self, monkeypatch):
        # Given
        monkeypatch.delenv("YULID_LOG_LEVEL", raising=False)
        mock_stream = io.StringIO()

        # When
        logger = get_logger("test_logger_config_unique", stream=mock_stream)

        # Then
        assert len(logger.handlers) == 1
        handler = logger.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert isinstance(handler.formatter, YulidContextFormatter)
        assert not logger.propagate
        assert logger.level == logging.INFO

        logger.info("Test message from logger")
        match = re.search(
            r"\[YULID \d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2},\d{3} INFO "
            r"Pid=\d+ test_logger_config_unique:\d+\] Test message from logger",
            mock_stream.getvalue(),
        )
        assert match is not None, f"got {mock_stream.getvalue()}"

    def test_get_logger_does_not_add_duplicate_handlers(self):
        logger1 = get_logger("test_logger_duplicate")
        logger2 = get_logger("test_logger_duplicate")
        assert logger1 is logger2
        assert len(logger2.handlers) == 1

    @pytest.mark.parametrize(
        "env_level, expected_level",
        [
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("Error", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
            ("NOT_A_LEVEL", logging.INFO),
        ],
    )
    def test_get_logger_level_from_env(self, monkeypatch, env_level, expected_level):
        # Given
        monkeypatch.setenv("YULID_LOG_LEVEL", env_level)

        # When
        logger = get_logger(f"test_logger_level_{env_level}")

        # Then
        assert logger.level == expected_level

    def test_debug_is_filtered_at_default_level(self, monkeypatch):
        # Given
        monkeypatch.delenv("YULID_LOG_LEVEL", raising=False)
        mock_stream = io.StringIO()
        logger = get_logger("test_logger_filtered", stream=mock_stream)

        # When
        logger.debug("hidden")

        # Then
        assert mock_stream.getvalue() == ""
