"""Utilities for handing the current process over to another command."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Sequence
import os
import shlex
import subprocess
import sys


@dataclass
class CommandResult:
    """Represents the outcome of a command that ran to completion."""

    command: Sequence[str]
    returncode: int


class CommandRunner:
    """Abstract command runner interface."""

    def run(
        self,
        command: Sequence[str],
        *,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
        note: str | None = None,
    ) -> CommandResult:
        raise NotImplementedError

    def replace(
        self,
        command: Sequence[str],
        *,
        env: Mapping[str, str] | None = None,
        note: str | None = None,
    ) -> int:
        """Hand the current process over to ``command``.

        Implementations that can replace the process image never return.
        Others run the command to completion and return its exit code.
        """
        raise NotImplementedError

    def format_command(self, command: Sequence[str]) -> str:
        return " ".join(shlex.quote(part) for part in command)


class SubprocessCommandRunner(CommandRunner):
    """Command runner backed by :func:`os.execvpe`, or :mod:`subprocess` where exec is unavailable."""

    def __init__(self, *, use_exec: bool | None = None) -> None:
        self.use_exec = os.name == "posix" if use_exec is None else use_exec

    @staticmethod
    def _merge_environment(env: Mapping[str, str] | None) -> Dict[str, str]:
        merged = os.environ.copy()
        if env:
            merged.update(env)
        return merged

    def run(
        self,
        command: Sequence[str],
        *,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
        note: str | None = None,
    ) -> CommandResult:
        # Standard streams are inherited, never captured.
        process = subprocess.run(
            list(command),
            cwd=str(cwd) if cwd else None,
            env=self._merge_environment(env),
            check=False,
        )
        return CommandResult(command=command, returncode=process.returncode)

    def replace(
        self,
        command: Sequence[str],
        *,
        env: Mapping[str, str] | None = None,
        note: str | None = None,
    ) -> int:
        if not self.use_exec:
            return self.run(command, env=env, note=note).returncode
        sys.stdout.flush()
        sys.stderr.flush()
        os.execvpe(command[0], list(command), self._merge_environment(env))
        raise AssertionError("unreachable")  # pragma: no cover


@dataclass(slots=True)
class RecordedCommand:
    command: List[str]
    cwd: str | None
    env: Dict[str, str]
    note: str | None
    replaced: bool


class RecordingCommandRunner(CommandRunner):
    """Command runner that records commands instead of executing them, for callers that inject a runner."""

    def __init__(self) -> None:
        self.commands: List[RecordedCommand] = []

    def _record(
        self,
        command: Sequence[str],
        *,
        cwd: Path | None,
        env: Mapping[str, str] | None,
        note: str | None,
        replaced: bool,
    ) -> None:
        self.commands.append(
            RecordedCommand(
                command=list(command),
                cwd=str(cwd) if cwd else None,
                env=dict(env) if env else {},
                note=note,
                replaced=replaced,
            )
        )

    def run(
        self,
        command: Sequence[str],
        *,
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
        note: str | None = None,
    ) -> CommandResult:
        self._record(command, cwd=cwd, env=env, note=note, replaced=False)
        return CommandResult(command=command, returncode=0)

    def replace(
        self,
        command: Sequence[str],
        *,
        env: Mapping[str, str] | None = None,
        note: str | None = None,
    ) -> int:
        self._record(command, cwd=Path.cwd(), env=env, note=note, replaced=True)
        return 0


__all__ = [
    "CommandResult",
    "CommandRunner",
    "RecordedCommand",
    "RecordingCommandRunner",
    "SubprocessCommandRunner",
]
