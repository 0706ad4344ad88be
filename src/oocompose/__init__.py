"""
oocompose - object composition helpers.

Shallow and deep property merging under overwrite / copy-on-write policies,
prototype-style inheritance between kinds, path traversal and bulk
constructor application.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("oocompose")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)

from oocompose.config import InheritOptions, MergePolicy, Settings, get_settings, reload_settings  # noqa: E402
from oocompose.errors import (  # noqa: E402
    BagFormatError,
    MergeDepthError,
    OocomposeError,
    UnimplementedError,
)
from oocompose.kinds import Instance, Kind, Prototype, inherit  # noqa: E402
from oocompose.merge import UNDEFINED, deep_extend, extend, is_undefined  # noqa: E402
from oocompose.utils import objectify, traverse, unimplemented  # noqa: E402

__all__ = [
    "__version__",
    "__version_info__",
    "UNDEFINED",
    "BagFormatError",
    "InheritOptions",
    "Instance",
    "Kind",
    "MergeDepthError",
    "MergePolicy",
    "OocomposeError",
    "Prototype",
    "Settings",
    "UnimplementedError",
    "deep_extend",
    "extend",
    "get_settings",
    "inherit",
    "is_undefined",
    "objectify",
    "reload_settings",
    "traverse",
    "unimplemented",
]
