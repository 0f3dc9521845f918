#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Launch orchestration

Applies the guard and confirmation policy to a resolved target list, then
hands each target's command to the run-wide launcher one after another.
"""

import sys
from typing import Callable, IO, List, Optional

import rich
from loguru import logger

from mssh.config import MergedConfig
from mssh.errors import ConfirmationAborted, LaunchWarning, UsageError
from .command import build_command
from .launcher import Launcher

# Above this many targets the user has to confirm the launch
CONFIRM_THRESHOLD = 2


def ask_yes_no(stream: Optional[IO] = None) -> bool:
    """Read a single character; only ``y`` or ``Y`` counts as yes."""
    stream = stream or sys.stdin
    try:
        answer = stream.read(1)
    except (OSError, ValueError) as e:
        logger.error(f"Error in askyn: {e}")
        return False
    return answer in ("y", "Y")


class LaunchOrchestrator:
    def __init__(
        self,
        config: MergedConfig,
        launcher: Launcher,
        assume_yes: bool = False,
        confirm: Callable[[], bool] = ask_yes_no,
    ):
        self.config = config
        self.launcher = launcher
        self.assume_yes = assume_yes
        self.confirm = confirm

    def check_guard(self, targets: List[str]):
        """Refuse what cannot be launched and ask before opening many windows."""
        if not self.launcher.multiplexed and len(targets) > 1:
            raise UsageError("Can't open multiple hosts. please use tmux mode.")

        if len(targets) > CONFIRM_THRESHOLD and not self.assume_yes:
            rich.print("Too many hosts selected\nInput `y` to continue: ", end="", flush=True)
            if not self.confirm():
                raise ConfirmationAborted("Interrupted")

    def run(self, targets: List[str]) -> List[str]:
        """Launch every target in order and return the ones that failed."""
        self.check_guard(targets)

        failed = []
        for host in targets:
            command = build_command(host, self.config)
            try:
                self.launcher.launch(command)
            except LaunchWarning as e:
                logger.error(f"[{host}] {e}")
                failed.append(host)
        return failed
