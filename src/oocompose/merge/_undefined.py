"""
The UNDEFINED sentinel.

`None` is an ordinary value in a property bag. UNDEFINED marks a value that
is explicitly absent: merges never copy it and treat a key holding it as if
the key were missing.
"""

from __future__ import annotations

import typing as _typing


class _UndefinedType:
    """
    Sentinel type for absent values.

    This is a singleton — use the UNDEFINED constant, not the class.
    """

    __slots__ = ()

    _instance: _typing.ClassVar[_UndefinedType | None] = None

    def __new__(cls) -> _UndefinedType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple[_typing.Callable[[], _UndefinedType], tuple[()]]:
        """Pickle support: ensure singleton is preserved."""
        return (_get_undefined_singleton, ())


def _get_undefined_singleton() -> _UndefinedType:
    """Return the UNDEFINED singleton. Called by pickle to reconstruct."""
    return UNDEFINED


UNDEFINED = _UndefinedType()


def is_undefined(value: _typing.Any) -> bool:
    """Check if a value is the UNDEFINED sentinel."""
    return value is UNDEFINED
