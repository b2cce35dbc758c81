"""Core infrastructure: paths, configuration and version lookup."""

from .config import Settings
from .global_paths import GlobalPath
from .version import resolve_version

__all__ = ["GlobalPath", "Settings", "resolve_version"]
