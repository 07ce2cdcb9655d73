"""Call-stack adapters implementing :class:`CallStackPort`.

Purpose
-------
Give :meth:`Console.trace` the active frame names, either from the live Python
interpreter or from a frame stack maintained by an embedding host.

Contents
--------
* :class:`PythonCallStack` – walks interpreter frames via :mod:`inspect`.
* :class:`ScriptedCallStack` – explicit stack driven by ``push``/``pop``.

System Role
-----------
Infrastructure edge of the trace feature; the console only sees ordered
names, entry point first and the ``trace()`` frame last.
"""

from __future__ import annotations

import inspect
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from lib_console_api.application.ports.call_stack import CallStackPort


def _frame_name(code_name: str) -> str:
    """Return ``code_name`` or ``""`` for synthetic names such as ``<module>``.

    Examples
    --------
    >>> _frame_name("main"), _frame_name("<lambda>")
    ('main', '')
    """
    return "" if code_name.startswith("<") else code_name


class PythonCallStack(CallStackPort):
    """Report the Python frames that led to the caller of :meth:`function_names`.

    The innermost reported frame is the one calling :meth:`function_names`
    (``Console.trace`` in practice); this adapter's own frame is excluded.
    Module-level code and lambdas are reported as anonymous. ``limit`` caps the
    number of caller frames; the calling frame itself is reported on top of it.
    """

    def __init__(self, *, limit: int | None = None) -> None:
        if limit is not None and limit <= 0:
            raise ValueError("limit must be positive")
        self._limit = limit

    def function_names(self) -> list[str]:
        current = inspect.currentframe()
        frame = current.f_back if current is not None else None
        del current
        names: list[str] = []
        cap = self._limit + 1 if self._limit is not None else None
        try:
            while frame is not None:
                names.append(_frame_name(frame.f_code.co_name))
                if cap is not None and len(names) >= cap:
                    break
                frame = frame.f_back
        finally:
            del frame
        names.reverse()
        return names


class ScriptedCallStack(CallStackPort):
    """Frame stack maintained explicitly by a host interpreter.

    Parameters
    ----------
    frames:
        Initial frame names, entry point first.
    native_frame:
        Name reported for the ``trace()`` invocation itself; ``None`` when the
        host pushes that frame on its own.

    Examples
    --------
    >>> stack = ScriptedCallStack(["main"])
    >>> with stack.frame("handler"):
    ...     stack.function_names()
    ['main', 'handler', 'trace']
    >>> stack.function_names()
    ['main', 'trace']
    """

    def __init__(self, frames: Iterable[str] = (), *, native_frame: str | None = "trace") -> None:
        self._frames = list(frames)
        self._native_frame = native_frame

    def push(self, name: str) -> None:
        self._frames.append(name)

    def pop(self) -> str:
        if not self._frames:
            raise IndexError("pop from empty call stack")
        return self._frames.pop()

    @contextmanager
    def frame(self, name: str) -> Iterator[None]:
        """Keep ``name`` on the stack for the duration of the block."""

        self.push(name)
        try:
            yield
        finally:
            self.pop()

    def __len__(self) -> int:
        return len(self._frames)

    def function_names(self) -> list[str]:
        names = list(self._frames)
        if self._native_frame is not None:
            names.append(self._native_frame)
        return names


__all__ = ["PythonCallStack", "ScriptedCallStack"]
