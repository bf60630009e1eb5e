"""Entry point: select the tool-versions manifest, enter the project root, hand off to the delegate."""
from __future__ import annotations

from typing import Iterable, MutableMapping
import os
import sys

from core.command_runner import CommandRunner, SubprocessCommandRunner

from .console import Console
from .delegate import build_command, invoke_delegate, resolve_delegate
from .environment import MANIFEST_PATH, TOOL_VERSIONS_KEY, configure_environment
from .errors import WrapperError
from .settings import WrapperSettings, load_settings
from .workdir import locate_wrapper, normalize_working_directory


def main(
    argv: Iterable[str] | None = None,
    *,
    main_file: str | os.PathLike[str] | None = None,
    environ: MutableMapping[str, str] | None = None,
    runner: CommandRunner | None = None,
    settings: WrapperSettings | None = None,
) -> int:
    """Run the wrapper once and return the exit status to report.

    ``argv`` is never parsed: every element reaches the delegate unchanged and
    in order. On POSIX a successful handoff does not return at all.
    """
    arguments = list(sys.argv[1:] if argv is None else argv)
    target_env = os.environ if environ is None else environ
    if settings is None:
        settings = load_settings(target_env)
    console = Console(settings.log_level)
    if runner is None:
        runner = SubprocessCommandRunner()

    try:
        wrapper = locate_wrapper(main_file)

        configure_environment(target_env)
        console.debug(f"Set {TOOL_VERSIONS_KEY}={MANIFEST_PATH}")

        root = normalize_working_directory(wrapper)
        console.debug(f"Project root: {root}")

        script = resolve_delegate(root, settings)
        command = build_command(script, arguments, settings)
        console.info(f"Handing off to {runner.format_command(command.argv)}")
        returncode = invoke_delegate(
            command,
            runner,
            env=None if target_env is os.environ else dict(target_env),
        )
    except WrapperError as exc:
        print(f"cfbuild: {exc}", file=sys.stderr)
        console.error(f"{type(exc).__name__}: exiting with status {exc.exit_code}")
        return exc.exit_code

    console.debug(f"Delegate exited with {returncode}")
    return returncode
