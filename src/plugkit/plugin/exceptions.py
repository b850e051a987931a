"""Plugin data exceptions."""

from __future__ import annotations

from typing import Any


class PluginError(Exception):
    """Base exception for plugin errors."""


class InvalidVersionComponentError(PluginError, ValueError):
    """A version component is missing, negative, or not an integer."""

    def __init__(self, component: str, value: Any) -> None:
        self.component = component
        self.value = value
        super().__init__(f"Invalid version component '{component}': {value!r}")
