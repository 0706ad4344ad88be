"""
Prototype: a mapping of own members that delegates lookups to a parent.

Iteration and len() see own members only, which is what the merge
operations copy. Item access, get() and `in` resolve through the chain.
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing


class Prototype(_abc.MutableMapping[str, _typing.Any]):
    """
    Mapping of members with delegation to a parent prototype.

    Writes and deletes only touch own members; the parent chain is never
    modified through a child prototype.

    Example:
        >>> base = Prototype({"greet": "hello"})
        >>> derived = Prototype({"name": "derived"}, parent=base)
        >>> derived["greet"]
        'hello'
        >>> list(derived)
        ['name']
    """

    __slots__ = ("_members", "_parent")

    def __init__(
        self,
        members: _abc.Mapping[str, _typing.Any] | None = None,
        parent: Prototype | None = None,
    ) -> None:
        self._members: dict[str, _typing.Any] = dict(members or {})
        self._parent = parent

    @property
    def parent(self) -> Prototype | None:
        """The prototype lookups fall back to."""
        return self._parent

    def chain(self) -> _typing.Iterator[Prototype]:
        """Yield this prototype followed by each ancestor."""
        proto: Prototype | None = self
        while proto is not None:
            yield proto
            proto = proto._parent

    def owns(self, key: str) -> bool:
        """Check if key is an own member (not inherited)."""
        return key in self._members

    def __getitem__(self, key: str) -> _typing.Any:
        """Resolve key through the chain, nearest prototype first."""
        for proto in self.chain():
            if key in proto._members:
                return proto._members[key]
        raise KeyError(key)

    def __setitem__(self, key: str, value: _typing.Any) -> None:
        self._members[key] = value

    def __delitem__(self, key: str) -> None:
        del self._members[key]

    def __iter__(self) -> _typing.Iterator[str]:
        """Iterate over own keys."""
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, key: object) -> bool:
        return any(key in proto._members for proto in self.chain())

    def __copy__(self) -> Prototype:
        """Copy own members; the copy keeps the same parent."""
        return Prototype(self._members, self._parent)

    def __repr__(self) -> str:
        return f"Prototype({self._members!r}, parent={self._parent!r})"
