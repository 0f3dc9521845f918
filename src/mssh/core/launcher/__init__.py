from .base import Launcher
from .direct import DirectLauncher
from .tmux import TmuxLauncher


def load_launcher(multiplexed: bool) -> Launcher:
    if multiplexed:
        return TmuxLauncher()
    return DirectLauncher()


__all__ = ["Launcher", "DirectLauncher", "TmuxLauncher", "load_launcher"]
