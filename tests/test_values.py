"""Tests for ndutil.values and ndutil.ident."""

import uuid

import numpy as np

from ndutil import Empty, NodeKind, classify, is_missing, is_sequence, random_uuid
from ndutil.values import _Empty


class TestEmpty:
    def test_singleton(self):
        assert Empty is _Empty()

    def test_falsy(self):
        assert not Empty

    def test_repr(self):
        assert repr(Empty) == "Empty"

    def test_str(self):
        assert str(Empty) == "Empty"


class TestClassify:
    def test_list_and_tuple(self):
        assert classify([1]) is NodeKind.Sequence
        assert classify(()) is NodeKind.Sequence

    def test_numpy(self):
        assert classify(np.arange(3)) is NodeKind.Sequence
        assert classify(np.array(1)) is NodeKind.Scalar

    def test_scalars(self):
        for value in (1, 2.5, "text", b"raw", {"a": 1}, None, Empty):
            assert classify(value) is NodeKind.Scalar

    def test_is_sequence(self):
        assert is_sequence([[]])
        assert not is_sequence("ab")

    def test_is_missing(self):
        assert is_missing(None)
        assert is_missing(Empty)
        assert not is_missing(0)


def test_random_uuid_is_version_4():
    value = random_uuid()
    assert uuid.UUID(value).version == 4
    assert value != random_uuid()
