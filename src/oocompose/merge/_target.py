"""
Helpers shared by extend() and deep_extend().

WriteTarget carries the copy-on-write decision for one merge call. Each call
(including each recursive deep_extend call) owns its own WriteTarget, so a
clone made for a nested bag never leaks into its parent's bookkeeping.
"""

from __future__ import annotations

import collections.abc as _abc
import copy as _copy
import typing as _typing

import oocompose.merge._undefined as _undefined

# Immutable scalars compared by value, like JavaScript's === on primitives
SCALAR_TYPES = (str, bytes, int, float, bool, complex)


def lookup(bag: _abc.Mapping[str, _typing.Any], key: str) -> _typing.Any:
    """Return bag[key], or UNDEFINED if the key is missing."""
    return bag.get(key, _undefined.UNDEFINED)


def is_defined(value: _typing.Any) -> bool:
    """True for every value except UNDEFINED."""
    return value is not _undefined.UNDEFINED


def same_value(left: _typing.Any, right: _typing.Any) -> bool:
    """
    Identity comparison used to skip no-op writes.

    Containers and other objects compare by identity. Immutable scalars of
    the same type compare by value so that equal numbers and strings are
    never rewritten.
    """
    if left is right:
        return True
    return (
        type(left) is type(right)
        and isinstance(left, SCALAR_TYPES)
        and bool(left == right)
    )


def iter_parent(parent: _typing.Any) -> _abc.Iterator[tuple[str, _typing.Any]]:
    """
    Iterate (key, value) pairs of a parent bag, skipping absent values.

    Anything that is not a mapping (None included) behaves as an empty bag.
    """
    if not isinstance(parent, _abc.Mapping):
        return
    for key in list(parent):
        value = parent[key]
        if is_defined(value):
            yield key, value


def shallow_clone(bag: _abc.MutableMapping[str, _typing.Any]) -> _abc.MutableMapping[str, _typing.Any]:
    """Return a shallow copy of a bag, keeping its concrete type."""
    return _copy.copy(bag)


class WriteTarget:
    """
    Resolves where a merge call writes.

    Without copy-on-write every write goes to the child. With copy-on-write
    the first write clones the child and every later write of the same call
    reuses that clone.
    """

    __slots__ = ("_child", "_copy_on_write", "_clone")

    def __init__(
        self,
        child: _abc.MutableMapping[str, _typing.Any],
        copy_on_write: bool,
    ) -> None:
        self._child = child
        self._copy_on_write = copy_on_write
        self._clone: _abc.MutableMapping[str, _typing.Any] | None = None

    def bag(self) -> _abc.MutableMapping[str, _typing.Any]:
        """Return the bag to write into, cloning the child on first use."""
        if not self._copy_on_write:
            return self._child
        if self._clone is None:
            self._clone = shallow_clone(self._child)
        return self._clone

    def result(self) -> _abc.MutableMapping[str, _typing.Any]:
        """The merge result: the clone if one was made, else the child."""
        return self._clone if self._clone is not None else self._child


def leaf_write(
    dst: _abc.MutableMapping[str, _typing.Any],
    key: str,
    value: _typing.Any,
    overwrite: bool,
) -> None:
    """Write value unless overwrite is off and dst already holds a defined value."""
    if not overwrite and is_defined(lookup(dst, key)):
        return
    dst[key] = value
