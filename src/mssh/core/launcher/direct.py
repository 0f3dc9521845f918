import subprocess
import sys
import threading
from typing import IO, List, Optional

from loguru import logger

from mssh.errors import LaunchWarning
from .base import Launcher

CHUNK_SIZE = 4096


def copy_stream(source: IO[bytes], target: IO):
    """Copy ``source`` into ``target`` until EOF, flushing after every chunk."""
    sink = getattr(target, "buffer", target)
    try:
        for chunk in iter(lambda: source.read1(CHUNK_SIZE), b""):
            sink.write(chunk)
            sink.flush()
    except (OSError, ValueError) as e:
        logger.debug(f"Stream copy stopped: {e}")


class DirectLauncher(Launcher):
    """
    Runs the command attached to this terminal and waits for it to exit.

    stdin is inherited. stdout and stderr are piped and copied back to our own
    streams by two daemon threads; only the process exit is waited on, the
    copy threads are never joined.
    """

    def __init__(self, stdout: Optional[IO] = None, stderr: Optional[IO] = None):
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr

    def _launch(self, command: List[str]):
        try:
            proc = subprocess.Popen(command, stdout=subprocess.PIPE, stderr=subprocess.PIPE)
        except OSError as e:
            raise LaunchWarning(f"failed to start ssh: {e}") from e

        for source, target in ((proc.stdout, self.stdout), (proc.stderr, self.stderr)):
            threading.Thread(target=copy_stream, args=(source, target), daemon=True).start()

        returncode = proc.wait()
        if returncode != 0:
            raise LaunchWarning(f"failed to wait ssh: {command[0]} exited with status {returncode}")
        return returncode
