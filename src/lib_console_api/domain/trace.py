"""Structured record produced by ``console.trace()``.

Purpose
-------
Carry an optional label and the call-frame names active when ``trace()`` was
invoked, so sinks can render stack listings without re-walking the stack.

System Role
-----------
Built fresh by :meth:`lib_console_api.application.console.Console.trace` and
handed straight to a client's ``printer``; never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

ANONYMOUS_FRAME = "<anonymous>"


@dataclass(frozen=True)
class Trace:
    """Immutable snapshot of a ``trace()`` call.

    Attributes
    ----------
    label:
        Formatted trace arguments joined by single spaces, or ``None`` when
        ``trace()`` received no arguments.
    stack:
        Frame names, most recent caller first. The ``trace()`` frame itself
        is never part of the sequence.
    """

    label: str | None = None
    stack: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "stack", tuple(self.stack))

    @classmethod
    def from_frames(cls, names: Iterable[str], *, label: str | None = None) -> "Trace":
        """Build a trace from frame names, naming empty frames ``<anonymous>``.

        Examples
        --------
        >>> Trace.from_frames(["inner", "", "main"]).stack
        ('inner', '<anonymous>', 'main')
        """
        return cls(label=label, stack=tuple(name or ANONYMOUS_FRAME for name in names))

    def render_lines(self) -> list[str]:
        """Return a heading line followed by one line per frame.

        Examples
        --------
        >>> Trace(label="here", stack=("f", "g")).render_lines()
        ['Trace: here', '  f', '  g']
        """
        heading = f"Trace: {self.label}" if self.label else "Trace"
        return [heading, *(f"  {name}" for name in self.stack)]

    def to_dict(self) -> dict[str, Any]:
        """Serialize the trace for structured sinks."""

        return {"label": self.label, "stack": list(self.stack)}


__all__ = ["ANONYMOUS_FRAME", "Trace"]
