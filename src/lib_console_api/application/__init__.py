"""Application layer: the console dispatch surface and the default client pipeline."""

from __future__ import annotations

from .client import BaseConsoleClient
from .console import Console
from .values import PythonValues

__all__ = ["BaseConsoleClient", "Console", "PythonValues"]
