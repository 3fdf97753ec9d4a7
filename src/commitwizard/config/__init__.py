"""
Configuration loading for commitwizard.

See :mod:`commitwizard.config.loader` for the file locations and the
supported keys.
"""

from .loader import DEFAULT_CONFIG, ConfigError, load_config  # noqa: F401
