"""
Exception types raised by mssh.

Everything derived from MsshError is fatal for a run except LaunchWarning,
which only concerns a single target.
"""


class MsshError(Exception):
    """Base class for all mssh errors"""


class ConfigError(MsshError):
    """A config file or one of its includes cannot be read or decoded"""


class PatternError(MsshError):
    """A filter is not a valid regular expression"""


class UsageError(MsshError):
    """The requested combination of targets and options cannot be launched"""


class ConfirmationAborted(MsshError):
    """The user did not confirm a launch of many targets"""


class LaunchWarning(MsshError):
    """A single target failed to start or exited with an error"""
