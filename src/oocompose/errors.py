"""
Exception types raised by oocompose.

Merge operations tolerate malformed input wherever they can, so the set of
errors is small: an opt-in depth guard, placeholder methods and YAML bags
that are not mappings.
"""


class OocomposeError(Exception):
    """Base class for all oocompose errors."""

    pass


class MergeDepthError(OocomposeError):
    """Raised when deep_extend nests deeper than the configured max_depth."""

    def __init__(self, depth: int, max_depth: int) -> None:
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(
            f"deep merge exceeded max_depth={max_depth} (reached depth {depth}); "
            "the input is likely cyclic"
        )


class UnimplementedError(OocomposeError, NotImplementedError):
    """Raised by placeholder callables created with unimplemented()."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unimplemented function {name}()")


class BagFormatError(OocomposeError):
    """Raised when a YAML document does not describe a property bag."""

    pass
