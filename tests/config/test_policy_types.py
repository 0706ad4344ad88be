"""Tests for MergePolicy and InheritOptions."""

import pydantic as _pydantic
import pytest as _pytest

import oocompose.config as config


class TestMergePolicy:
    """MergePolicy defaults, aliases and validation."""

    def test_defaults(self) -> None:
        """Both flags are off and no depth guard is set."""
        policy = config.MergePolicy()

        assert policy.overwrite is False
        assert policy.copy_on_write is False
        assert policy.max_depth is None

    def test_camel_case_aliases(self) -> None:
        """Mappings may use camelCase keys."""
        policy = config.MergePolicy.model_validate({"copyOnWrite": True, "maxDepth": 8})

        assert policy.copy_on_write is True
        assert policy.max_depth == 8

    def test_frozen(self) -> None:
        """Policies are immutable."""
        policy = config.MergePolicy()

        with _pytest.raises(_pydantic.ValidationError):
            policy.overwrite = True  # type: ignore[misc]

    def test_max_depth_must_be_positive(self) -> None:
        """max_depth below 1 is rejected."""
        with _pytest.raises(_pydantic.ValidationError):
            config.MergePolicy(max_depth=0)

    def test_unknown_keys_ignored(self) -> None:
        """Options meant for other calls don't break validation."""
        policy = config.MergePolicy.model_validate({"overwrite": True, "deepMerge": True})

        assert policy.overwrite is True


class TestCoerce:
    """OptionsBase.coerce normalizes option arguments."""

    def test_none_gives_defaults(self) -> None:
        """None means the default record."""
        assert config.MergePolicy.coerce(None) == config.MergePolicy()

    def test_instance_passed_through(self) -> None:
        """An existing record is returned as-is."""
        policy = config.MergePolicy(overwrite=True)

        assert config.MergePolicy.coerce(policy) is policy

    def test_mapping_validated(self) -> None:
        """A mapping is validated into a record."""
        policy = config.MergePolicy.coerce({"overwrite": True, "copyOnWrite": True})

        assert policy.overwrite is True
        assert policy.copy_on_write is True

    def test_overrides_win(self) -> None:
        """Keyword overrides replace values from the base."""
        policy = config.MergePolicy.coerce({"overwrite": False}, overwrite=True)

        assert policy.overwrite is True


class TestInheritOptions:
    """InheritOptions accepts every spelling of deep_merge."""

    @_pytest.mark.parametrize("key", ["deep_merge", "deepMerge", "deepExtend"])
    def test_deep_merge_spellings(self, key: str) -> None:
        """All spellings enable deep merging."""
        assert config.InheritOptions.coerce({key: True}).deep_merge is True

    def test_default_is_shallow(self) -> None:
        """Static members are copied shallowly by default."""
        assert config.InheritOptions().deep_merge is False
