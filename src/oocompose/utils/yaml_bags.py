"""
YAML loading for property bags.

Adds one tag to the safe loader:
- !undefined — load the value as UNDEFINED, so merges treat the key as absent

Example:
    >>> bag = load_bag('''
    ... name: widget
    ... color: !undefined
    ... ''')
    >>> bag["color"]
    UNDEFINED
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

import yaml as _yaml

import oocompose.errors as errors
import oocompose.merge as merge


def _undefined_constructor(
    loader: _yaml.Loader,  # noqa: ARG001 - required by YAML constructor API
    node: _yaml.Node,  # noqa: ARG001 - required by YAML constructor API
) -> _typing.Any:
    """Construct UNDEFINED from the !undefined tag; any tagged value is ignored."""
    return merge.UNDEFINED


class BagLoader(_yaml.SafeLoader):
    """
    YAML loader for property bags.

    Extends SafeLoader with the `!undefined` tag.

    Usage:
        >>> import yaml
        >>> data = yaml.load(content, Loader=BagLoader)
    """

    pass


BagLoader.add_constructor("!undefined", _undefined_constructor)


def load_bag(stream: _typing.Any) -> dict[str, _typing.Any]:
    """
    Load a single YAML document as a property bag.

    Args:
        stream: YAML content (string, bytes, or file-like object).

    Returns:
        The loaded mapping; an empty document gives an empty dict.

    Raises:
        BagFormatError: If the document is not a mapping.
    """
    data = _yaml.load(stream, Loader=BagLoader)
    if data is None:
        return {}
    if not isinstance(data, _abc.Mapping):
        raise errors.BagFormatError(
            f"expected a mapping at the top level, got {type(data).__name__}"
        )
    return dict(data)
