# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import logging
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """
    Enum class mapping the logging levels to numeric values.
    """

    ERROR = 40
    WARNING = 30
    INFO = 20
    DEBUG_UPDATES = 16
    DEBUG_EVICTIONS = 14


def get_countedset_logger(
    console_level: LogLevel = LogLevel.WARNING,
    file_level: Optional[LogLevel] = None,
    filename: str = "countedset.log",
) -> logging.Logger:
    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level.value)

    logger = logging.getLogger("countedset")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.addHandler(console_handler)
    if file_level is None:
        logger.setLevel(console_level.value)
        return logger

    file_handler = logging.FileHandler(filename)
    file_handler.setLevel(file_level.value)
    logger.setLevel(
        file_level.value
        if file_level.value < console_level.value
        else console_level.value
    )
    logger.addHandler(file_handler)
    return logger
