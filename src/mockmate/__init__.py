"""Top-level package for MockMate.

Provides subpackages:
- mockmate.core – question/chapter models and record validation
- mockmate.common – exam-code metadata and console text helpers
- mockmate.loading – exam and chapter loading from bundled JSON resources
"""

def _get_version() -> str:
    """Get version from importlib.metadata (installed) or fall back to 0.0.0."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        return pkg_version("mockmate")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
