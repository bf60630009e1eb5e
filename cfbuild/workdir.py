"""Locate the wrapper and move the process into the project root."""
from __future__ import annotations

from pathlib import Path
import os
import sys

from .errors import PathResolutionError


def locate_wrapper(main_file: str | os.PathLike[str] | None = None) -> Path:
    """Return the absolute location of the running wrapper script.

    Without ``main_file`` the location comes from the ``__main__`` module, i.e.
    the script the interpreter was started with. Symlinks are not followed: a
    linked wrapper belongs to the project it is linked into.
    """
    if main_file is None:
        main_module = sys.modules.get("__main__")
        main_file = getattr(main_module, "__file__", None)
        if not main_file:
            raise PathResolutionError("Cannot determine the wrapper location: no __main__ file")
    wrapper = Path(os.path.abspath(main_file))
    if not wrapper.exists():
        raise PathResolutionError(f"Cannot resolve wrapper location '{main_file}': no such file")
    return wrapper


def project_root(wrapper: Path) -> Path:
    """Parent of the directory holding ``wrapper``."""
    return wrapper.parent.parent


def normalize_working_directory(wrapper: Path) -> Path:
    root = project_root(wrapper)
    if not root.is_dir():
        raise PathResolutionError(f"Project root '{root}' does not exist or is not a directory")
    try:
        os.chdir(root)
    except OSError as exc:
        raise PathResolutionError(f"Cannot enter project root '{root}': {exc}") from exc
    return root
