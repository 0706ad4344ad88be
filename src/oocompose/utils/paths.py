"""Path lookup through nested property bags."""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

import oocompose.constants as constants
import oocompose.merge as merge

PathLike = str | _abc.Sequence[_typing.Any] | None

_NOT_SEQUENCES = (str, bytes, bytearray, memoryview)


def split_path(path: PathLike) -> tuple[_typing.Any, ...]:
    """
    Normalize a path into a tuple of keys.

    A string is split on dots ("a.b.c"); the empty string and None are the
    empty path. Any other sequence is used as given.
    """
    if path is None:
        return ()
    if isinstance(path, str):
        return tuple(path.split(constants.PATH_SEPARATOR)) if path else ()
    return tuple(path)


def traverse(obj: _typing.Any, path: PathLike) -> _typing.Any:
    """
    Follow a path of keys into nested mappings and lists.

    Args:
        obj: The root value.
        path: Keys to follow, as a sequence or a dotted string. Lists are
              indexed by non-negative int or digit string.

    Returns:
        - `obj` itself for an empty path
        - the value at the end of the path
        - UNDEFINED if the last key is missing
        - None if a non-container is reached before the path is exhausted
          (which includes a missing intermediate key)

    Example:
        >>> traverse({"a": {"b": 1}}, ["a", "b"])
        1
        >>> traverse({"a": 1}, "a.b") is None
        True
    """
    current = obj
    for key in split_path(path):
        if isinstance(current, _abc.Mapping):
            current = current.get(key, merge.UNDEFINED)
        elif isinstance(current, _abc.Sequence) and not isinstance(current, _NOT_SEQUENCES):
            index = as_index(key)
            if index is None or index >= len(current):
                current = merge.UNDEFINED
            else:
                current = current[index]
        else:
            return None
    return current


def as_index(key: _typing.Any) -> int | None:
    """Convert a path key to a list index, or None if it isn't one."""
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key if key >= 0 else None
    if isinstance(key, str) and key.isdigit():
        return int(key)
    return None
