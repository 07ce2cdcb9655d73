"""Port exposing the host's active call frames to ``console.trace()``."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class CallStackPort(Protocol):
    """Report the names of the currently active frames.

    Names are ordered entry point first; the innermost entry is the frame of
    the ``trace()`` invocation. Empty strings mark anonymous frames.
    """

    def function_names(self) -> Sequence[str]: ...


__all__ = ["CallStackPort"]
