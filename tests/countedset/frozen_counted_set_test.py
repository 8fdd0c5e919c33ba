# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import unittest

from countedset import CountedSet, ElementWithCount, FrozenCountedSet


class FrozenCountedSetTest(unittest.TestCase):
    def test_equal_frozen_sets_hash_equally(self) -> None:
        first = FrozenCountedSet(["Foo", "Bar", "Foo"])
        second = FrozenCountedSet(["Foo", "Foo", "Bar"])
        third = FrozenCountedSet(["Foo", "Bar"])
        self.assertEqual(first, second)
        self.assertEqual(hash(first), hash(second))
        self.assertNotEqual(second, third)
        self.assertEqual(len({first, second, third}), 2)

    def test_frozen_sets_have_no_mutators(self) -> None:
        sut = FrozenCountedSet(["Foo"])
        self.assertFalse(hasattr(sut, "insert"))
        self.assertFalse(hasattr(sut, "remove"))
        self.assertFalse(hasattr(sut, "set_count"))
        with self.assertRaises(TypeError):
            sut["Foo"] = 2
        with self.assertRaises(TypeError):
            del sut["Foo"]

    def test_read_operations(self) -> None:
        sut = FrozenCountedSet(["Foo", "Bar", "Baz", "Foo", "Foo", "Bar"])
        self.assertEqual(sut["Foo"], 3)
        self.assertEqual(sut.count("Qux"), 0)
        self.assertTrue("Baz" in sut)
        self.assertEqual(set(sut), {"Foo", "Bar", "Baz"})
        self.assertEqual(sut.total(), 6)
        self.assertEqual(sut.most_frequent(), ElementWithCount("Foo", 3))
        self.assertEqual(
            sut.description(),
            "<FrozenCountedSet>:\n\t- Foo : 3x\n\t- Bar : 2x\n\t- Baz : 1x\n",
        )

    def test_freeze_and_thaw(self) -> None:
        mutable = CountedSet(["Foo", "Bar", "Foo"])
        frozen = mutable.freeze()
        self.assertIsInstance(frozen, FrozenCountedSet)
        self.assertEqual(frozen, mutable)

        # The snapshot does not follow later changes.
        mutable.insert("Baz")
        self.assertTrue("Baz" not in frozen)
        self.assertNotEqual(frozen, mutable)

        thawed = CountedSet(frozen)
        thawed.insert("Foo")
        self.assertEqual(thawed["Foo"], 3)
        self.assertEqual(frozen["Foo"], 2)

    def test_empty_frozen_set(self) -> None:
        sut = FrozenCountedSet()
        self.assertEqual(len(sut), 0)
        self.assertIsNone(sut.most_frequent())
        self.assertEqual(sut, CountedSet())
        self.assertEqual(hash(sut), hash(FrozenCountedSet([])))
