"""Inheritance wiring between kinds."""

from __future__ import annotations

import collections.abc as _abc
import logging as _logging
import typing as _typing

import oocompose.config.types as types
import oocompose.kinds._kind as _kind
import oocompose.kinds._prototype as _prototype
import oocompose.merge as merge

_logger = _logging.getLogger(__name__)


def inherit(
    child: _kind.Kind,
    parent: _kind.Kind,
    options: types.InheritOptions | _abc.Mapping[str, _typing.Any] | None = None,
) -> None:
    """
    Make child inherit parent's static members and prototype.

    1. Static members of parent are copied onto child with extend() (or
       deep_extend() when options.deep_merge is set). Statics the child
       already defines are kept.
    2. child.prototype is replaced by a fresh prototype whose parent is
       parent.prototype, with ``constructor`` pointing at child. The child's
       existing own prototype members are copied onto it with overwrite on,
       so child methods take precedence over inherited ones.
    3. child.superclass is set to parent.

    Only child is mutated. Instances created before the call keep the old
    prototype.

    Args:
        child: The deriving kind.
        parent: The base kind.
        options: InheritOptions, a mapping (deep_merge / deepMerge), or None.
    """
    options = types.InheritOptions.coerce(options)

    if options.deep_merge:
        merge.deep_extend(child, parent)
    else:
        merge.extend(child, parent)

    scaffold = _prototype.Prototype({"constructor": child}, parent=parent.prototype)
    wired = merge.extend(scaffold, child.prototype, types.MergePolicy(overwrite=True))
    child.prototype = _typing.cast(_prototype.Prototype, wired)
    child.superclass = parent

    _logger.debug(
        "Wired kind %s onto %s (deep_merge=%s, own members=%d)",
        child.name,
        parent.name,
        options.deep_merge,
        len(child.prototype),
    )
