"""
Shared constants for oocompose.

This module provides a single source of truth for default values
that are used across multiple modules.
"""

ENV_PREFIX = "OOCOMPOSE_"
"""Prefix for environment variables read by Settings."""

DEFAULT_OVERWRITE = False
"""Parent values only fill absent keys unless overwrite is requested."""

DEFAULT_COPY_ON_WRITE = False
"""Merges mutate the child in place unless copy-on-write is requested."""

DEFAULT_DEEP_MERGE = False
"""inherit() copies static members with a shallow merge by default."""

PATH_SEPARATOR = "."
"""Separator used when traverse() / objectify() receive a dotted string path."""
