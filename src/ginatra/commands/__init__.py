"""CLI commands for ginatra."""

from .version import version
from .config_cmd import config
from .render import render

__all__ = [
    "version",
    "config",
    "render",
]
