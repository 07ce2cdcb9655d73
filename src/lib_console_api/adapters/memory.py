"""In-memory client retaining the most recent console records.

Purpose
-------
Capture console output in headless environments (embedded interpreters, test
suites, request-scoped sandboxes) so the host can inspect or replay it later.

Contents
--------
* :class:`ConsoleRecord` – one printed record.
* :class:`MemoryConsoleClient` – bounded buffer implementing the client port.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, Iterator

from lib_console_api.application.client import BaseConsoleClient
from lib_console_api.application.ports.client import PrinterPayload
from lib_console_api.application.ports.values import ValuePort
from lib_console_api.domain.levels import LogLevel
from lib_console_api.domain.trace import Trace


@dataclass(frozen=True)
class ConsoleRecord:
    """A record as it reached the printer.

    Attributes
    ----------
    level:
        Category of the record.
    data:
        Printed values for flat records; empty for traces.
    trace:
        The :class:`Trace` for ``trace()`` records, otherwise ``None``.
    """

    level: LogLevel
    data: tuple[Any, ...] = field(default_factory=tuple)
    trace: Trace | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", tuple(self.data))


class MemoryConsoleClient(BaseConsoleClient):
    """Fixed-size buffer of printed records, oldest first.

    Examples
    --------
    >>> client = MemoryConsoleClient(max_records=2)
    >>> for word in ("a", "b", "c"):
    ...     _ = client.logger(LogLevel.LOG, [word])
    >>> client.messages()
    ['b', 'c']
    """

    def __init__(self, *, max_records: int = 1000, values: ValuePort | None = None) -> None:
        super().__init__(values=values)
        if max_records <= 0:
            raise ValueError("max_records must be positive")
        self._max_records = max_records
        self._records: Deque[ConsoleRecord] = deque(maxlen=max_records)
        self._clear_count = 0

    @property
    def max_records(self) -> int:
        return self._max_records

    @property
    def records(self) -> list[ConsoleRecord]:
        """Return a copy of the buffered records."""

        return list(self._records)

    @property
    def clear_count(self) -> int:
        """Return how many times :meth:`clear` ran."""

        return self._clear_count

    def printer(self, level: LogLevel, payload: PrinterPayload) -> None:
        if isinstance(payload, Trace):
            self._records.append(ConsoleRecord(level=level, trace=payload))
        else:
            self._records.append(ConsoleRecord(level=level, data=tuple(payload)))

    def clear(self) -> None:
        self._records.clear()
        self._clear_count += 1

    def messages(self, level: LogLevel | None = None) -> list[str]:
        """Return records rendered as space-joined strings, optionally filtered."""

        rendered: list[str] = []
        for record in self._records:
            if level is not None and record.level is not level:
                continue
            if record.trace is not None:
                rendered.append("\n".join(record.trace.render_lines()))
            else:
                rendered.append(" ".join(self.values.to_string(item) for item in record.data))
        return rendered

    def __iter__(self) -> Iterator[ConsoleRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)


__all__ = ["ConsoleRecord", "MemoryConsoleClient"]
