# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.


class CountedSetError(Exception):
    """Base class for errors raised by counted sets"""

    pass


class NegativeCountError(CountedSetError, ValueError):
    """Raised when a counted set is asked to store a negative count for an
    element, for example through set_count or when built from a mapping."""

    pass
