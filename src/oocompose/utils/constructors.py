"""Bulk application of constructors to values inside property bags."""

from __future__ import annotations

import collections.abc as _abc
import logging as _logging
import typing as _typing

import oocompose.merge as merge
import oocompose.utils.paths as paths

_logger = _logging.getLogger(__name__)

Constructor = _typing.Callable[[_typing.Any], _typing.Any]


def objectify(
    objects: _typing.Any,
    path: paths.PathLike = None,
    constructors: Constructor | _abc.Sequence[Constructor] | None = None,
) -> _typing.Any:
    """
    Replace the value at `path` in each object with `constructor(value)`.

    Args:
        objects: A single bag, or a list of bags.
        path: Location of the slot inside each object. With an empty path the
              list items themselves are converted in place.
        constructors: One callable, or a sequence applied round-robin: object
              ``i`` uses ``constructors[i % len(constructors)]``.

    Returns:
        `objects`, converted in place. For a single object and an empty
        path there is no slot to write, so the constructed value is returned.

    Raises:
        TypeError: If no constructor is given.

    Objects whose slot cannot be reached or holds no value are left alone.

    Example:
        >>> rows = [{"when": "2024-01-01"}, {"when": "2024-02-01"}]
        >>> objectify(rows, "when", str.upper) is rows
        True
    """
    ctors = _constructor_list(constructors)
    keys = paths.split_path(path)

    if isinstance(objects, _abc.MutableSequence):
        for index, obj in enumerate(objects):
            ctor = ctors[index % len(ctors)]
            if keys:
                _convert_slot(obj, keys, ctor)
            else:
                objects[index] = ctor(obj)
        return objects

    if not keys:
        return ctors[0](objects)
    _convert_slot(objects, keys, ctors[0])
    return objects


def _constructor_list(
    constructors: Constructor | _abc.Sequence[Constructor] | None,
) -> list[Constructor]:
    if constructors is None:
        raise TypeError("objectify() requires at least one constructor")
    if callable(constructors):
        return [constructors]
    ctors = list(constructors)
    if not ctors:
        raise TypeError("objectify() requires at least one constructor")
    return ctors


def _convert_slot(obj: _typing.Any, keys: tuple[_typing.Any, ...], ctor: Constructor) -> None:
    holder = paths.traverse(obj, keys[:-1])
    key = keys[-1]

    if isinstance(holder, _abc.MutableMapping):
        old = holder.get(key, merge.UNDEFINED)
        if merge.is_undefined(old):
            _logger.debug("objectify: no value at %r, skipped", keys)
            return
        holder[key] = ctor(old)
        return

    if isinstance(holder, _abc.MutableSequence):
        index = paths.as_index(key)
        if index is not None and index < len(holder):
            holder[index] = ctor(holder[index])
            return

    _logger.debug("objectify: slot %r not reachable, skipped", keys)
