"""One-level merge of a parent bag into a child bag."""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

import oocompose.config.types as types
import oocompose.merge._target as _target


def extend(
    child: _abc.MutableMapping[str, _typing.Any],
    parent: _abc.Mapping[str, _typing.Any] | None,
    policy: types.MergePolicy | _abc.Mapping[str, _typing.Any] | None = None,
) -> _abc.MutableMapping[str, _typing.Any]:
    """
    Copy the parent's keys into the child, one level deep.

    Keys whose parent value is absent (missing or UNDEFINED) or identical to
    the child's value are skipped. Otherwise the parent value is written
    unless overwrite is off and the child already holds a defined value.

    Args:
        child: The bag to merge into.
        parent: The bag to copy from. None or a non-mapping is an empty bag.
        policy: MergePolicy, a mapping of policy options, or None.

    Returns:
        `child`, or its copy-on-write clone if one was created. Always use
        the returned value.

    Example:
        >>> extend({"a": 1}, {"a": 2, "b": 3})
        {'a': 1, 'b': 3}
        >>> extend({"a": 1}, {"a": 2, "b": 3}, {"overwrite": True})
        {'a': 2, 'b': 3}
    """
    policy = types.MergePolicy.coerce(policy)
    target = _target.WriteTarget(child, policy.copy_on_write)

    for key, value in _target.iter_parent(parent):
        if _target.same_value(value, _target.lookup(child, key)):
            continue
        _target.leaf_write(target.bag(), key, value, policy.overwrite)

    return target.result()
