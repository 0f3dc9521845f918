#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Version information for mssh
"""

__version__ = "0.2.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history
VERSION_HISTORY = [
    "0.2.0 - Include cycle detection, --list-hosts and MSSH_CONFIG",
    "0.1.0 - Initial release with tmux fan-out and gateway hosts",
]
