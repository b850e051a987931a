"""Mapping between PluginVersion and structured documents.

A document is a plain mapping with the keys ``major``, ``minor`` and,
optionally, ``build``, as found in a plugin descriptor loaded from JSON,
YAML or similar. Missing ``build`` means no build component; it is never
written out as ``0`` or ``null``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from plugkit.plugin.exceptions import InvalidVersionComponentError
from plugkit.plugin.version import PluginVersion

logger = logging.getLogger(__name__)


class PluginVersionDocument(BaseModel):
    """Pydantic model for the version fields of a plugin descriptor."""

    model_config = ConfigDict(extra="forbid", frozen=True, strict=True)

    major: int = Field(ge=0)
    minor: int = Field(ge=0)
    build: int | None = Field(default=None, ge=0)

    def to_version(self) -> PluginVersion:
        """Convert to a PluginVersion."""
        return PluginVersion(self.major, self.minor, self.build)


def version_from_document(data: Mapping[str, Any]) -> PluginVersion:
    """Read a PluginVersion from a structured document.

    Args:
        data: Mapping with ``major``, ``minor`` and optional ``build`` keys.

    Returns:
        The PluginVersion described by the document.

    Raises:
        InvalidVersionComponentError: If a field is missing, unknown,
            negative or not an integer. Reports the first offending field.

    """
    try:
        document = PluginVersionDocument.model_validate(dict(data))
    except ValidationError as e:
        logger.debug("Rejected plugin version document %r: %s", data, e)
        first = e.errors()[0]
        component = str(first["loc"][0])
        value = None if first.get("type") == "missing" else first.get("input")
        raise InvalidVersionComponentError(component, value) from e

    return document.to_version()


def version_to_document(version: PluginVersion) -> dict[str, int]:
    """Write a PluginVersion as a structured document.

    Fields are written as they are, without validation, so any version
    that exists can be written.

    Returns:
        Dict with ``major`` and ``minor``, plus ``build`` when present.

    """
    document = {"major": version.major, "minor": version.minor}
    if version.build is not None:
        document["build"] = version.build
    return document
