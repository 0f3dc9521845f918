import subprocess
from typing import List

from loguru import logger

from mssh.errors import LaunchWarning
from .base import Launcher


class TmuxLauncher(Launcher):
    """Opens each command in a new window of the current tmux session, without waiting"""

    multiplexed = True

    def window_command(self, command: List[str]) -> List[str]:
        return ["tmux", "new-window", " ".join(command)]

    def _launch(self, command: List[str]):
        tmux_cmd = self.window_command(command)
        logger.debug(f"Opening tmux window: {tmux_cmd}")
        try:
            subprocess.Popen(tmux_cmd)
        except OSError as e:
            raise LaunchWarning(f"failed to start tmux: {e}") from e
