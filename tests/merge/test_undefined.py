"""Tests for the UNDEFINED sentinel."""

import copy as _copy
import pickle as _pickle

import oocompose.merge as merge
import oocompose.merge._undefined as _undefined


class TestUndefined:
    """UNDEFINED is a falsy, pickle-stable singleton."""

    def test_singleton(self) -> None:
        """Constructing the type again returns the same object."""
        assert _undefined._UndefinedType() is merge.UNDEFINED

    def test_survives_pickle_and_copy(self) -> None:
        """Pickling and copying preserve identity."""
        assert _pickle.loads(_pickle.dumps(merge.UNDEFINED)) is merge.UNDEFINED
        assert _copy.deepcopy(merge.UNDEFINED) is merge.UNDEFINED

    def test_falsy_and_repr(self) -> None:
        """It is falsy and shows as UNDEFINED."""
        assert not merge.UNDEFINED
        assert repr(merge.UNDEFINED) == "UNDEFINED"

    def test_is_undefined(self) -> None:
        """is_undefined only matches the sentinel."""
        assert merge.is_undefined(merge.UNDEFINED)
        assert not merge.is_undefined(None)
        assert not merge.is_undefined(0)
