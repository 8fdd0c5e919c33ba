# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from countedset.counted_set import (
    BaseCountedSet,
    CountedSet,
    ElementWithCount,
    FrozenCountedSet,
)
from countedset.exceptions import CountedSetError, NegativeCountError
from countedset.utils import get_countedset_logger, LogLevel


__version__ = "0.1.0"

__all__ = [
    "BaseCountedSet",
    "CountedSet",
    "CountedSetError",
    "ElementWithCount",
    "FrozenCountedSet",
    "LogLevel",
    "NegativeCountError",
    "get_countedset_logger",
]
