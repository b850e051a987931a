"""Plugin version identifiers.

This module provides the version value attached to a plugin release: a
major and minor number plus an optional build number, with a total ordering
and a canonical display form such as ``v1.2`` or ``v1.2.7``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import total_ordering
from typing import Any

from plugkit.plugin.exceptions import InvalidVersionComponentError


@total_ordering
@dataclass(frozen=True)
class PluginVersion:
    """Version of a plugin release.

    Ordering precedence, highest first:
    - major
    - minor
    - build presence (a version with a build ranks above one without)
    - build value

    ``build=None`` means no build component was specified. It is not the same
    version as build ``0``.
    """

    major: int
    minor: int
    build: int | None = None

    @classmethod
    def default(cls) -> PluginVersion:
        """Version assumed when a plugin does not declare one (``v1.0``)."""
        return DEFAULT_PLUGIN_VERSION

    @classmethod
    def of(cls, major: int, minor: int, build: int | None = None) -> PluginVersion:
        """Create a version from explicit numbers."""
        return cls(major, minor, build)

    @classmethod
    def checked(
        cls, major: Any, minor: Any, build: Any = None
    ) -> PluginVersion:
        """Create a version, rejecting anything but non-negative integers.

        Args:
            major: Major version number.
            minor: Minor version number.
            build: Build number, or None for no build component.

        Returns:
            The validated PluginVersion.

        Raises:
            InvalidVersionComponentError: If a component is negative or not
                an integer.

        """
        _check_component("major", major)
        _check_component("minor", minor)
        if build is not None:
            _check_component("build", build)
        return cls(major, minor, build)

    @property
    def has_build(self) -> bool:
        """Whether a build component is present."""
        return self.build is not None

    def with_major(self, major: int) -> PluginVersion:
        """Return a copy with a different major number."""
        return replace(self, major=major)

    def with_minor(self, minor: int) -> PluginVersion:
        """Return a copy with a different minor number."""
        return replace(self, minor=minor)

    def with_build(self, build: int | None) -> PluginVersion:
        """Return a copy with a different build number."""
        return replace(self, build=build)

    def without_build(self) -> PluginVersion:
        """Return a copy with no build component."""
        return replace(self, build=None)

    def _sort_key(self) -> tuple[int, int, bool, int]:
        return (
            self.major,
            self.minor,
            self.build is not None,
            self.build if self.build is not None else 0,
        )

    def is_newer_than(self, other: PluginVersion) -> bool:
        """Check whether this version ranks above ``other``."""
        return self._sort_key() > other._sort_key()

    def is_older_than(self, other: PluginVersion) -> bool:
        """Check whether this version ranks below ``other``."""
        return self._sort_key() < other._sort_key()

    def is_same(self, other: PluginVersion) -> bool:
        """Check whether both versions have identical components."""
        return (
            self.major == other.major
            and self.minor == other.minor
            and self.build == other.build
        )

    def compare(self, other: PluginVersion) -> int:
        """Compare with another version.

        Returns:
            1 if this version is newer, -1 if older, 0 if the same.

        """
        if self.is_newer_than(other):
            return 1
        if self.is_older_than(other):
            return -1
        return 0

    def __lt__(self, other: object) -> bool:
        """Compare versions for ordering."""
        if not isinstance(other, PluginVersion):
            return NotImplemented
        return self.is_older_than(other)

    def __str__(self) -> str:
        """Format as ``v{major}.{minor}`` with an optional ``.{build}``."""
        if self.build is None:
            return f"v{self.major}.{self.minor}"
        return f"v{self.major}.{self.minor}.{self.build}"


def _check_component(name: str, value: Any) -> None:
    # bool is an int subclass but never a meaningful version number
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidVersionComponentError(name, value)


DEFAULT_PLUGIN_VERSION = PluginVersion(1, 0)
