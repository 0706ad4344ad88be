"""
Prototype-style kinds.

A Kind is a named constructor that carries static members (it is a mapping
of them) and a Prototype shared by the Instances it creates. inherit() wires
one kind onto another so the child's instances fall back to the parent's
prototype while the child's own members keep precedence.

Example:
    >>> from oocompose.kinds import Kind, inherit
    >>> Animal = Kind("Animal", prototype={"speak": lambda self: "..."})
    >>> Dog = Kind("Dog", prototype={"fetch": lambda self: "ball"})
    >>> inherit(Dog, Animal)
    >>> Dog().speak()
    '...'
"""

from oocompose.kinds._inherit import inherit
from oocompose.kinds._kind import Instance, Kind
from oocompose.kinds._prototype import Prototype

__all__ = ["Instance", "Kind", "Prototype", "inherit"]
