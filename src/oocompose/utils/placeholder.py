"""Placeholder callables for abstract members."""

import typing as _typing

import oocompose.errors as errors


def unimplemented(name: str) -> _typing.Callable[..., _typing.NoReturn]:
    """
    Create a callable that always raises UnimplementedError.

    Put it on a prototype (or anywhere a callable is expected) to mark a
    member that derived kinds must provide.

    Args:
        name: Name reported in the error message.

    Example:
        >>> area = unimplemented("area")
        >>> area()
        Traceback (most recent call last):
        ...
        oocompose.errors.UnimplementedError: unimplemented function area()
    """

    def placeholder(*args: _typing.Any, **kwargs: _typing.Any) -> _typing.NoReturn:
        raise errors.UnimplementedError(name)

    placeholder.__name__ = name
    placeholder.__qualname__ = name
    placeholder.__doc__ = f"Placeholder for {name}(); always raises UnimplementedError."
    return placeholder
