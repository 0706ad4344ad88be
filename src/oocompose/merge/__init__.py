"""
Policy-driven merging of property bags.

extend() copies one level of keys from a parent bag into a child bag;
deep_extend() recurses through nested mappings and concatenates lists.
Both honour MergePolicy.overwrite and MergePolicy.copy_on_write.

Example:
    >>> from oocompose.merge import deep_extend
    >>> deep_extend({"x": {"a": 1}}, {"x": {"b": 2}})
    {'x': {'a': 1, 'b': 2}}
"""

from oocompose.merge._deep import deep_extend
from oocompose.merge._shallow import extend
from oocompose.merge._undefined import UNDEFINED, is_undefined

__all__ = ["UNDEFINED", "deep_extend", "extend", "is_undefined"]
