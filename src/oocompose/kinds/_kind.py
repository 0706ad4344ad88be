"""
Kind and Instance.

A Kind is the constructor: calling it creates an Instance linked to the
kind's current prototype and runs the kind's init callable on it. The kind
itself is a mutable mapping of its static members, so extend() and
deep_extend() can copy statics between kinds directly.
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

import oocompose.kinds._prototype as _prototype

InitFunc = _typing.Callable[..., None]


class Kind(_abc.MutableMapping[str, _typing.Any]):
    """
    Named constructor with static members and a prototype.

    Static members are available as items (``Kind["VERSION"]``) and, when
    they don't clash with a real attribute, as attributes (``Kind.VERSION``).
    Kinds compare and hash by identity.

    Args:
        name: Kind name, used in reprs and logs.
        init: Called as ``init(instance, *args, **kwargs)`` for each new instance.
        prototype: Initial prototype members.
        statics: Initial static members.
    """

    def __init__(
        self,
        name: str,
        init: InitFunc | None = None,
        *,
        prototype: _abc.Mapping[str, _typing.Any] | None = None,
        statics: _abc.Mapping[str, _typing.Any] | None = None,
    ) -> None:
        self.name = name
        self.init = init
        self.superclass: Kind | None = None
        self._statics: dict[str, _typing.Any] = dict(statics or {})
        self.prototype = _prototype.Prototype(prototype)
        self.prototype["constructor"] = self

    def __call__(self, *args: _typing.Any, **kwargs: _typing.Any) -> Instance:
        """Create an instance and run init on it."""
        instance = Instance(self.prototype)
        if self.init is not None:
            self.init(instance, *args, **kwargs)
        return instance

    def is_instance(self, obj: object) -> bool:
        """True if this kind's prototype is on obj's prototype chain."""
        if not isinstance(obj, Instance):
            return False
        return any(proto is self.prototype for proto in obj._prototype.chain())

    def ancestors(self) -> _typing.Iterator[Kind]:
        """Yield superclass, its superclass, and so on."""
        kind = self.superclass
        while kind is not None:
            yield kind
            kind = kind.superclass

    def __getattr__(self, name: str) -> _typing.Any:
        # Only reached when normal attribute lookup fails
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._statics[name]
        except KeyError:
            raise AttributeError(
                f"Kind {self.name!r} has no attribute or static member {name!r}"
            ) from None

    def __getitem__(self, key: str) -> _typing.Any:
        return self._statics[key]

    def __setitem__(self, key: str, value: _typing.Any) -> None:
        self._statics[key] = value

    def __delitem__(self, key: str) -> None:
        del self._statics[key]

    def __iter__(self) -> _typing.Iterator[str]:
        return iter(self._statics)

    def __len__(self) -> int:
        return len(self._statics)

    def __copy__(self) -> Kind:
        """Shallow copy: own statics dict, shared prototype."""
        new = type(self).__new__(type(self))
        new.name = self.name
        new.init = self.init
        new.superclass = self.superclass
        new._statics = dict(self._statics)
        new.prototype = self.prototype
        return new

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __repr__(self) -> str:
        return f"Kind({self.name!r})"


class Instance:
    """
    An object created by calling a Kind.

    Attribute lookup checks the instance's own attributes first, then the
    prototype chain. Prototype members that are descriptors (plain functions,
    properties) are bound to the instance, so prototype functions act as
    methods.
    """

    def __init__(self, prototype: _prototype.Prototype) -> None:
        self._prototype = prototype

    def __getattr__(self, name: str) -> _typing.Any:
        if name == "_prototype" or (name.startswith("__") and name.endswith("__")):
            raise AttributeError(name)
        try:
            value = self._prototype[name]
        except KeyError:
            raise AttributeError(
                f"{self._kind_name()} instance has no attribute {name!r}"
            ) from None
        getter = getattr(type(value), "__get__", None)
        if getter is not None:
            return getter(value, self, type(self))
        return value

    def _kind_name(self) -> str:
        constructor = self._prototype.get("constructor")
        return constructor.name if isinstance(constructor, Kind) else "Anonymous"

    def __repr__(self) -> str:
        return f"<{self._kind_name()} instance>"
