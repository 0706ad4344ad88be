"""
Recursive merge of a parent bag into a child bag.

Rules per parent key (absent and identical values are skipped first):

1. Nested mapping: when the child slot holds a mapping, None, or nothing,
   merge recursively into it (creating an empty bag of the parent's dict
   type when needed).
2. List: elements of the parent list are deep-cloned and appended to the
   child list. Nested mappings become fresh bags, nested sequences are
   rebuilt, scalars are kept and other objects go through copy.deepcopy.
   Lists are concatenated, never merged by position, so merging the same
   parent twice appends its elements twice.
3. Anything else: leaf write under the overwrite policy.

There is no cycle detection. Cyclic input recurses until RecursionError
unless a max_depth is configured, in which case MergeDepthError is raised.
"""

from __future__ import annotations

import collections.abc as _abc
import copy as _copy
import logging as _logging
import typing as _typing

import oocompose.config.settings as settings
import oocompose.config.types as types
import oocompose.errors as errors
import oocompose.merge._target as _target

_logger = _logging.getLogger(__name__)

_NOT_SEQUENCES = (str, bytes, bytearray, memoryview)


def deep_extend(
    child: _abc.MutableMapping[str, _typing.Any],
    parent: _abc.Mapping[str, _typing.Any] | None,
    policy: types.MergePolicy | _abc.Mapping[str, _typing.Any] | None = None,
) -> _abc.MutableMapping[str, _typing.Any]:
    """
    Merge the parent into the child recursively.

    Args:
        child: The bag to merge into.
        parent: The bag to copy from. None or a non-mapping is an empty bag.
        policy: MergePolicy, a mapping of policy options, or None.

    Returns:
        `child`, or its copy-on-write clone if one was created. Nested bags
        follow the same rule independently, so under copy-on-write every
        nested bag that changes is cloned and the original tree is left
        untouched.

    Raises:
        MergeDepthError: If nesting exceeds the effective max_depth.

    Example:
        >>> deep_extend({"arr": [1]}, {"arr": [{"v": 2}]})
        {'arr': [1, {'v': 2}]}
    """
    policy = types.MergePolicy.coerce(policy)
    max_depth = policy.max_depth
    if max_depth is None:
        max_depth = settings.get_settings().max_depth
    return _merge(child, parent, policy, max_depth, 0)


def _merge(
    child: _abc.MutableMapping[str, _typing.Any],
    parent: _typing.Any,
    policy: types.MergePolicy,
    max_depth: int | None,
    depth: int,
) -> _abc.MutableMapping[str, _typing.Any]:
    if max_depth is not None and depth > max_depth:
        _logger.debug("deep_extend stopped at depth %d (max_depth=%d)", depth, max_depth)
        raise errors.MergeDepthError(depth, max_depth)

    target = _target.WriteTarget(child, policy.copy_on_write)

    for key, value in _target.iter_parent(parent):
        if _target.same_value(value, _target.lookup(child, key)):
            continue

        dst = target.bag()
        current = _target.lookup(dst, key)

        if isinstance(value, _abc.Mapping) and _accepts_mapping(current):
            if not isinstance(current, _abc.Mapping):
                current = _empty_like(value)
            dst[key] = _merge(current, value, policy, max_depth, depth + 1)
        elif _is_sequence(value):
            _append_clones(dst, key, current, value, policy, max_depth, depth)
        else:
            _target.leaf_write(dst, key, value, policy.overwrite)

    return target.result()


def _append_clones(
    dst: _abc.MutableMapping[str, _typing.Any],
    key: str,
    current: _typing.Any,
    items: _abc.Sequence[_typing.Any],
    policy: types.MergePolicy,
    max_depth: int | None,
    depth: int,
) -> None:
    """Append clones of items to dst[key], creating or replacing the list first if allowed."""
    if not isinstance(current, _abc.MutableSequence):
        if current is not None and _target.is_defined(current) and not policy.overwrite:
            # A defined non-list value is kept when overwrite is off
            return
        current = []
        dst[key] = current
    elif policy.copy_on_write:
        # The shallow clone still shares the child's list
        current = _copy.copy(current)
        dst[key] = current

    for item in items:
        current.append(_clone_item(item, policy, max_depth, depth + 1))


def _clone_item(
    item: _typing.Any,
    policy: types.MergePolicy,
    max_depth: int | None,
    depth: int,
) -> _typing.Any:
    """Clone one list element so the result shares no mutable state with the parent."""
    if item is None or not _target.is_defined(item) or isinstance(item, _target.SCALAR_TYPES):
        return item
    if isinstance(item, _abc.Mapping):
        return _merge({}, item, policy, max_depth, depth)
    if _is_sequence(item):
        clones = [_clone_item(element, policy, max_depth, depth + 1) for element in item]
        return tuple(clones) if isinstance(item, tuple) else clones
    return _copy.deepcopy(item)


def _accepts_mapping(current: _typing.Any) -> bool:
    """Whether a child slot can be merged into as a nested bag."""
    return current is None or not _target.is_defined(current) or isinstance(current, _abc.Mapping)


def _is_sequence(value: _typing.Any) -> bool:
    return isinstance(value, _abc.Sequence) and not isinstance(value, _NOT_SEQUENCES)


def _empty_like(value: _abc.Mapping[str, _typing.Any]) -> _abc.MutableMapping[str, _typing.Any]:
    """A new empty bag of the same dict type as value (plain dict otherwise)."""
    if isinstance(value, dict):
        return type(value)()
    return {}
