"""
Top-level package for commitwizard.

This package exposes the interactive Conventional Commit wizard via the
``commitwizard.cli`` module.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
