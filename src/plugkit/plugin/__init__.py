"""Plugin data for plugkit.

This package provides the plugin version value type, its error types and
the mapping of versions to and from structured documents.
"""

from plugkit.plugin.document import (
    PluginVersionDocument,
    version_from_document,
    version_to_document,
)
from plugkit.plugin.exceptions import (
    InvalidVersionComponentError,
    PluginError,
)
from plugkit.plugin.version import (
    DEFAULT_PLUGIN_VERSION,
    PluginVersion,
)

__all__ = [
    # Version
    "DEFAULT_PLUGIN_VERSION",
    "PluginVersion",
    # Documents
    "PluginVersionDocument",
    "version_from_document",
    "version_to_document",
    # Exceptions
    "PluginError",
    "InvalidVersionComponentError",
]
