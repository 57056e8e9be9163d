# Copyright (c) 2025 Ming Yu (yuming@oppo.com)
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

"""
Tests for package logging: nothing outside the package logger is touched
"""

import logging

from fst_date_parsers import DateParser
from fst_date_parsers.core import logger as logger_module
from fst_date_parsers.core.logger import PACKAGE_LOGGER, get_logger, setup_logging


def test_package_leaves_root_logger_alone():
    root = logging.getLogger()
    handler = logging.StreamHandler()
    saved_level = root.level
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)
    try:
        before = list(root.handlers)
        get_logger("fst_date_parsers.sample")
        DateParser(features=["numeric"])
        assert root.handlers == before
        assert root.level == logging.DEBUG
    finally:
        root.removeHandler(handler)
        root.setLevel(saved_level)


def test_package_logger_has_null_handler():
    handlers = logging.getLogger(PACKAGE_LOGGER).handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_get_logger_names():
    assert get_logger("__main__").name == "fst_date_parsers.__main__"
    assert get_logger("fst_date_parsers.core.types").name == "fst_date_parsers.core.types"
    assert get_logger(PACKAGE_LOGGER).name == PACKAGE_LOGGER


def test_setup_logging_writes_to_file(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_module, "_configured", False)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    root = logging.getLogger()
    saved = (list(package_logger.handlers), package_logger.level, package_logger.propagate)
    root_before = (list(root.handlers), root.level)
    log_file = tmp_path / "dates.log"
    try:
        setup_logging(level="debug", log_file=str(log_file), console_output=False)
        get_logger("fst_date_parsers.sample").debug("resolved 2024-03-15")
        assert (list(root.handlers), root.level) == root_before
        assert package_logger.level == logging.DEBUG
        assert package_logger.propagate is False
    finally:
        for handler in package_logger.handlers:
            if handler not in saved[0]:
                handler.close()
        package_logger.handlers = saved[0]
        package_logger.setLevel(saved[1])
        package_logger.propagate = saved[2]
    assert "resolved 2024-03-15" in log_file.read_text(encoding="utf-8")
