from abc import ABC, abstractmethod
from typing import List


class Launcher(ABC):
    """Runs one connection command; ``multiplexed`` launchers can take many targets"""

    multiplexed = False

    @abstractmethod
    def _launch(self, command: List[str]):
        pass

    def launch(self, command: List[str]):
        return self._launch(command)
