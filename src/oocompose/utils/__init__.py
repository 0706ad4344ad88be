"""
Utility functions for oocompose.

Small helpers that work alongside the merge engine: path traversal, bulk
constructor application, placeholder methods and YAML property bags.
"""

from oocompose.utils.constructors import objectify
from oocompose.utils.placeholder import unimplemented
from oocompose.utils.paths import split_path, traverse
from oocompose.utils.yaml_bags import BagLoader, load_bag

__all__ = ["BagLoader", "load_bag", "objectify", "split_path", "traverse", "unimplemented"]
