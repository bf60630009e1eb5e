"""Fatal failures raised before control is handed to the delegate."""
from __future__ import annotations


class WrapperError(RuntimeError):
    """Base class for failures that stop the wrapper before handoff."""

    exit_code = 1

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class PathResolutionError(WrapperError):
    """The wrapper location or the project root derived from it is unusable."""

    exit_code = 72  # EX_OSFILE


class DelegateLaunchError(WrapperError):
    """The delegate build entry point cannot be launched."""

    MISSING = 127
    NOT_RUNNABLE = 126

    exit_code = MISSING


__all__ = [
    "DelegateLaunchError",
    "PathResolutionError",
    "WrapperError",
]
