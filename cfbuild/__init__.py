"""Select the CI tool-versions manifest and hand off to the project's build script."""
from __future__ import annotations

from .cli import main

__all__ = ["main"]
