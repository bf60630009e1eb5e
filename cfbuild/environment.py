"""Point the version manager at the alternate tool-versions manifest."""
from __future__ import annotations

from typing import MutableMapping
import os

TOOL_VERSIONS_KEY = "ASDF_TOOL_VERSIONS_FILENAME"
MANIFEST_PATH = ".cf/tool-versions"


def configure_environment(environ: MutableMapping[str, str] | None = None) -> None:
    """Bind ``ASDF_TOOL_VERSIONS_FILENAME`` to ``.cf/tool-versions``.

    The binding goes into the live process environment by default so that the
    delegate and anything it spawns inherit it. It is never restored: the
    process is replaced right after.
    """
    target = os.environ if environ is None else environ
    target[TOOL_VERSIONS_KEY] = MANIFEST_PATH
