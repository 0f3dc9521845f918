"""
mssh - Multi-host SSH launcher

Resolves host name filters against a layered YAML host list and opens an SSH
session for every match, directly or through a gateway host, optionally fanned
out into tmux windows.
"""

from .cli import main as cli_main
from .version import __version__

__author__ = "suchunsv"
__email__ = "suchunsv@outlook.com"
__license__ = "MIT"
__description__ = "Multi-host SSH launcher with tmux fan-out and gateway hosts"

__all__ = [
    "cli_main",
]
