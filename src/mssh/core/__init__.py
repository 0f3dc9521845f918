from .command import build_command
from .launcher import DirectLauncher, Launcher, TmuxLauncher, load_launcher
from .orchestrator import LaunchOrchestrator, ask_yes_no
from .resolver import Composition, FilterSpec, MatchMode, resolve_targets

__all__ = [
    "build_command",
    "Launcher",
    "DirectLauncher",
    "TmuxLauncher",
    "load_launcher",
    "LaunchOrchestrator",
    "ask_yes_no",
    "Composition",
    "FilterSpec",
    "MatchMode",
    "resolve_targets",
]
