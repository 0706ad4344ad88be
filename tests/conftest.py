"""
Shared pytest fixtures for oocompose tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import typing as _typing

import pytest as _pytest

import oocompose.config.settings as settings
import oocompose.kinds as kinds

# Environment keys that should be cleared for isolated tests
ENV_KEYS_TO_CLEAR = [
    "OOCOMPOSE_MAX_DEPTH",
    "OOCOMPOSE_ENV_FILE",
]


@_pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: _pytest.MonkeyPatch) -> _typing.Iterator[None]:
    """Run every test against default settings and a fresh settings cache."""
    for key in ENV_KEYS_TO_CLEAR:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(settings, "_settings", None)
    yield
    settings._settings = None


@_pytest.fixture
def nested_bag() -> dict[str, _typing.Any]:
    """Child bag with nested mappings and a list."""
    return {
        "name": "widget",
        "size": {"width": 10, "height": 20},
        "tags": ["a"],
    }


@_pytest.fixture
def animal_kinds() -> tuple[kinds.Kind, kinds.Kind]:
    """An Animal base kind and an unwired Dog kind."""

    def animal_init(self: kinds.Instance, name: str) -> None:
        self.name = name

    animal = kinds.Kind(
        "Animal",
        animal_init,
        prototype={
            "speak": lambda self: f"{self.name} makes a sound",
            "describe": lambda self: f"{self.name} is an animal",
        },
        statics={"KINGDOM": "animalia", "LEGS": 4},
    )
    dog = kinds.Kind(
        "Dog",
        animal_init,
        prototype={"speak": lambda self: f"{self.name} barks"},
        statics={"LEGS": 4, "SOUND": "woof"},
    )
    return animal, dog
