"""Resolve the delegate build entry point and hand the process over to it."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping, Sequence, Tuple
import os
import shutil

from core.command_runner import CommandRunner

from .errors import DelegateLaunchError
from .settings import WrapperSettings


@dataclass(frozen=True, slots=True)
class DelegateCommand:
    """Argument vector handed to the delegate, split by origin."""

    interpreter: str | None
    script: str
    arguments: Tuple[str, ...]

    @property
    def argv(self) -> List[str]:
        prefix = [self.interpreter] if self.interpreter else []
        return [*prefix, self.script, *self.arguments]


def resolve_delegate(root: Path, settings: WrapperSettings) -> Path:
    """Locate the delegate under ``root`` and make sure it can be launched."""
    script = root / settings.delegate
    if not script.exists():
        raise DelegateLaunchError(
            f"Delegate '{script}' does not exist",
            exit_code=DelegateLaunchError.MISSING,
        )
    if not script.is_file():
        raise DelegateLaunchError(
            f"Delegate '{script}' is not a regular file",
            exit_code=DelegateLaunchError.NOT_RUNNABLE,
        )

    if settings.interpreter:
        if shutil.which(settings.interpreter) is None:
            raise DelegateLaunchError(
                f"Interpreter '{settings.interpreter}' for '{script}' was not found on PATH",
                exit_code=DelegateLaunchError.MISSING,
            )
        if not os.access(script, os.R_OK):
            raise DelegateLaunchError(
                f"Delegate '{script}' is not readable",
                exit_code=DelegateLaunchError.NOT_RUNNABLE,
            )
    elif not os.access(script, os.X_OK):
        raise DelegateLaunchError(
            f"Delegate '{script}' is not executable",
            exit_code=DelegateLaunchError.NOT_RUNNABLE,
        )
    return script


def build_command(script: Path, argv: Sequence[str], settings: WrapperSettings) -> DelegateCommand:
    # Relative to the project root, like `./build.sh`, so the delegate sees the
    # same $0 it would when run by hand.
    if Path(settings.delegate).is_absolute():
        relative = str(script)
    else:
        relative = f".{os.sep}{settings.delegate}"
    return DelegateCommand(
        interpreter=settings.interpreter,
        script=relative,
        arguments=tuple(argv),
    )


def invoke_delegate(
    command: DelegateCommand,
    runner: CommandRunner,
    *,
    env: Mapping[str, str] | None = None,
) -> int:
    """Replace the current process with the delegate.

    Returns only when ``runner`` cannot replace the process (or records instead
    of executing); the value is then the delegate's exit status.
    """
    try:
        return runner.replace(command.argv, env=env, note="Hand off to delegate")
    except OSError as exc:
        raise DelegateLaunchError(
            f"Cannot launch '{command.script}': {exc.strerror or exc}",
            exit_code=(
                DelegateLaunchError.MISSING
                if isinstance(exc, FileNotFoundError)
                else DelegateLaunchError.NOT_RUNNABLE
            ),
        ) from exc
