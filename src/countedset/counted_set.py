# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

"""
A counted set, also known as a multiset or bag, remembers how many times each
distinct element has been inserted while still behaving like a set: membership
tests and iteration see every distinct element exactly once.
"""

import collections.abc
import logging
import numbers
from typing import (
    Any,
    Dict,
    Generic,
    Hashable,
    ItemsView,
    Iterable,
    Iterator,
    Mapping,
    NamedTuple,
    Optional,
    TypeVar,
    Union,
)

from countedset.exceptions import NegativeCountError
from countedset.utils import LogLevel


_T = TypeVar("_T", bound=Hashable)

LOGGER = logging.getLogger("countedset")


class ElementWithCount(NamedTuple):
    """A member returned by most_frequent together with its count. The
    element is typed Any because NamedTuple cannot be generic here."""

    element: Any
    count: int


def _check_count(element: Any, count: Any) -> None:
    if not isinstance(count, numbers.Integral):
        LOGGER.error("Rejected non-integer count %r for %r", count, element)
        raise TypeError(
            f"Count has to be an integer, got {type(count).__name__} for {element!r}"
        )
    if count < 0:
        LOGGER.error("Rejected negative count %d for %r", count, element)
        raise NegativeCountError(
            f"Count has to be non-negative, got {count} for {element!r}"
        )


class BaseCountedSet(collections.abc.Collection, Generic[_T]):
    """Read-only operations shared by the mutable and the frozen counted set.

    Counts are stored in a single dictionary keyed by the elements themselves,
    so two elements that merely share a hash are still counted separately.
    An element is a member iff it is a key of that dictionary; keys whose
    count would drop to zero are deleted, so every stored count is positive.
    """

    _counts: Dict[_T, int]

    def __init__(
        self, elements: Optional[Union[Iterable[_T], Mapping[_T, int]]] = None
    ) -> None:
        self._counts = {}
        if elements is None:
            return
        if isinstance(elements, BaseCountedSet):
            self._counts = dict(elements._counts)
        elif isinstance(elements, collections.abc.Mapping):
            for element, count in elements.items():
                _check_count(element, count)
                if count > 0:
                    self._counts[element] = int(count)
        else:
            for element in elements:
                self._increment(element)

    def _increment(self, element: _T) -> None:
        self._counts[element] = self._counts.get(element, 0) + 1

    def count(self, element: _T) -> int:
        """Returns how many times element occurs, 0 if it is not a member."""
        return self._counts.get(element, 0)

    def __getitem__(self, element: _T) -> int:
        return self.count(element)

    def __contains__(self, element: object) -> bool:
        return element in self._counts

    def __iter__(self) -> Iterator[_T]:
        return iter(self._counts)

    def __len__(self) -> int:
        # Number of distinct members, not the number of occurrences.
        return len(self._counts)

    def total(self) -> int:
        return sum(self._counts.values())

    def items(self) -> ItemsView[_T, int]:
        return self._counts.items()

    def most_frequent(self) -> Optional[ElementWithCount]:
        """Returns a member with the highest count together with that count,
        or None if the counted set is empty. When several members share the
        highest count, which one is returned is not part of the contract."""
        if not self._counts:
            return None
        element = max(self._counts, key=self._counts.__getitem__)
        return ElementWithCount(element, self._counts[element])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseCountedSet):
            return NotImplemented
        return self._counts == other._counts

    def copy(self):
        return self.__class__(self)

    __copy__ = copy

    def description(self) -> str:
        return f"<{self.__class__.__name__}>:\n" + "".join(
            f"\t- {element} : {count}x\n" for element, count in self._counts.items()
        )

    def __str__(self) -> str:
        return self.description()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._counts!r})"


class CountedSet(BaseCountedSet[_T]):
    """A mutable counted set. Copies never share state with the original."""

    __hash__ = None  # pyre-ignore

    def insert(self, element: _T) -> None:
        self._increment(element)

    def remove(self, element: _T) -> Optional[_T]:
        """Removes one occurrence of element and returns it, or returns None
        without changing anything if element is not a member."""
        count = self._counts.get(element, 0)
        if count <= 0:
            return None
        if count <= 1:
            self._evict(element)
        else:
            self._counts[element] = count - 1
        return element

    def set_count(self, element: _T, count: int) -> bool:
        """Overwrites the count of element, inserting it if it is not a member.

        Returns False if the count was already equal to count, True otherwise.
        A count of zero evicts the element. Negative counts are rejected with
        NegativeCountError and non-integer counts with TypeError; either way
        the counted set is left untouched.
        """
        _check_count(element, count)
        count = int(count)
        previous = self._counts.get(element, 0)
        if count == previous:
            return False
        if count == 0:
            self._evict(element)
            return True
        self._counts[element] = count
        LOGGER.log(
            LogLevel.DEBUG_UPDATES.value,
            "Count of %r changed from %d to %d",
            element,
            previous,
            count,
        )
        return True

    def __setitem__(self, element: _T, count: int) -> None:
        self.set_count(element, count)

    def __delitem__(self, element: _T) -> None:
        if element in self._counts:
            self._evict(element)

    def _evict(self, element: _T) -> None:
        del self._counts[element]
        LOGGER.log(LogLevel.DEBUG_EVICTIONS.value, "Evicted %r", element)

    def clear(self) -> None:
        self._counts.clear()

    def freeze(self) -> "FrozenCountedSet[_T]":
        return FrozenCountedSet(self)


class FrozenCountedSet(BaseCountedSet[_T]):
    """An immutable, hashable counted set. Equal frozen counted sets hash
    equally no matter in which order their elements were inserted."""

    def __hash__(self) -> int:
        return hash(frozenset(self._counts.items()))
