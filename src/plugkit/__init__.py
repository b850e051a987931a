"""plugkit: plugin version identifiers and their ordering."""

__version__ = "0.1.0"
