# link_scout/__init__.py
"""
LinkScout package initializer.
Defines the package version and exposes the CLI group.
"""
__version__ = "0.1.0"

from link_scout.cli import cli  # noqa: E402

__all__ = ["__version__", "cli"]
