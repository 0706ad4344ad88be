"""Option records accepted by the merge and inheritance operations.

These are plain configuration records: callers may pass an instance, a
mapping (snake_case or camelCase keys) or None for the defaults.

- MergePolicy: overwrite, copy_on_write, max_depth
- InheritOptions: deep_merge

Design decision: unknown keys are ignored so one options mapping can be
shared between calls that read different subsets of it.
"""

import collections.abc as _abc
import typing as _typing

import pydantic as _pydantic
import pydantic.alias_generators as _alias_generators

import oocompose.constants as constants

_OptionsT = _typing.TypeVar("_OptionsT", bound="OptionsBase")


class OptionsBase(_pydantic.BaseModel):
    """
    Base class for option records.

    Records are frozen; derive a variant with `coerce(base, **overrides)`.
    Fields are accepted under their snake_case name or its camelCase alias.
    """

    model_config = _pydantic.ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=_alias_generators.to_camel,
    )

    @classmethod
    def coerce(
        cls: type[_OptionsT],
        value: "_OptionsT | _abc.Mapping[str, _typing.Any] | None" = None,
        **overrides: _typing.Any,
    ) -> _OptionsT:
        """
        Normalize an options argument into an instance of this record.

        Args:
            value: An instance, a mapping of options, or None for defaults.
            **overrides: Field values (snake_case) that take precedence.

        Returns:
            An instance of this record.
        """
        if value is None:
            options = cls()
        elif isinstance(value, cls):
            options = value
        else:
            options = cls.model_validate(dict(value))

        if overrides:
            options = options.model_copy(update=overrides)
        return options


class MergePolicy(OptionsBase):
    """
    Policy shared by extend() and deep_extend().

    YAML / mapping keys: overwrite, copyOnWrite (or copy_on_write), maxDepth.
    """

    overwrite: bool = constants.DEFAULT_OVERWRITE
    """Parent values replace existing child values instead of only filling gaps."""

    copy_on_write: bool = constants.DEFAULT_COPY_ON_WRITE
    """Write into a lazily created shallow copy of the child."""

    max_depth: int | None = _pydantic.Field(default=None, ge=1)
    """Depth guard for deep_extend(); None defers to Settings.max_depth."""


class InheritOptions(OptionsBase):
    """Options for inherit()."""

    deep_merge: bool = _pydantic.Field(
        default=constants.DEFAULT_DEEP_MERGE,
        validation_alias=_pydantic.AliasChoices("deep_merge", "deepMerge", "deepExtend"),
    )
    """Copy static members with deep_extend() instead of extend()."""
