"""
Console output for the wrapper.

Everything goes to stderr so the delegate owns stdout.
"""
import sys


class Console:
    """Level-filtered console output.

    Levels: none < error < info < debug
    Default: 'none' (no output)
    """

    LEVELS = {
        "none": 0,
        "error": 1,
        "info": 2,
        "debug": 3,
    }

    def __init__(self, level: str = "none"):
        self.level_name = level
        self.level = self.LEVELS.get(level, 0)

    @staticmethod
    def _emit(tag: str, message: str) -> None:
        print(f"cfbuild [{tag}] {message}", file=sys.stderr)

    def error(self, message: str) -> None:
        if self.level >= self.LEVELS["error"]:
            self._emit("ERROR", message)

    def info(self, message: str) -> None:
        if self.level >= self.LEVELS["info"]:
            self._emit("INFO", message)

    def debug(self, message: str) -> None:
        if self.level >= self.LEVELS["debug"]:
            self._emit("DEBUG", message)
