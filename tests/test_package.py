"""Tests for plugkit package."""


def test_package_imports():
    """Test that the package can be imported successfully."""
    import plugkit

    assert plugkit is not None


def test_package_version():
    """Test that the package has a version string."""
    from plugkit import __version__

    assert __version__ == "0.1.0"


def test_plugin_exports():
    """Test that the plugin package re-exports its public API."""
    from plugkit.plugin import DEFAULT_PLUGIN_VERSION, PluginVersion

    assert PluginVersion.default() == DEFAULT_PLUGIN_VERSION
