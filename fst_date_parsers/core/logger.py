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
Logging for the date parsers.

Importing the package configures nothing: records go to the
``fst_date_parsers`` logger, which only carries a ``NullHandler`` until an
application calls ``setup_logging`` or ``auto_setup`` (``main.py`` and
``app.py`` do). Those attach handlers to the package logger alone and leave
the root logger to the host application.
"""

import logging
import os
import sys
from typing import Optional

PACKAGE_LOGGER = "fst_date_parsers"

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
# FST_DATE_LOG_FORMAT=simple
SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())

_configured = False


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    format_string: str = DEFAULT_FORMAT,
    console_output: bool = True,
):
    """
    Attach console and file handlers to the package logger, once per process.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL; falls back to
               FST_DATE_LOG_LEVEL, then WARNING
        log_file: optional file receiving the same records
        format_string: logging format string
        console_output: whether to log to stdout
    """
    global _configured
    if _configured:
        return

    level = (level or os.environ.get("FST_DATE_LOG_LEVEL", "WARNING")).upper()
    log_level = LOG_LEVELS.get(level, logging.WARNING)
    formatter = logging.Formatter(format_string)

    handlers = []
    if console_output:
        handlers.append(logging.StreamHandler(sys.stdout))
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)
    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
    # Own handlers print the records; do not hand them to the root logger too
    if handlers:
        package_logger.propagate = False

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Logger for a module of the package; configures nothing.

    Names outside the ``fst_date_parsers`` hierarchy (``__main__`` in a
    script) are placed under it, so ``setup_logging`` covers them.
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def auto_setup():
    """
    ``setup_logging`` from the environment.

    Environment variables:
        FST_DATE_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL
        FST_DATE_LOG_FILE: log file path
        FST_DATE_LOG_FORMAT: default or simple
    """
    log_format = os.environ.get("FST_DATE_LOG_FORMAT", "default")
    setup_logging(
        level=os.environ.get("FST_DATE_LOG_LEVEL", "WARNING"),
        log_file=os.environ.get("FST_DATE_LOG_FILE"),
        format_string=SIMPLE_FORMAT if log_format == "simple" else DEFAULT_FORMAT,
    )
