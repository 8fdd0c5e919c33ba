# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_countedset_logger():
    """Undo any handler or level changes a test makes to the countedset logger."""
    logger = logging.getLogger("countedset")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
