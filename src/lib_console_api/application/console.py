"""Console dispatch surface translating API calls into client records.

Purpose
-------
Expose one method per console API entry point (``log``, ``warn``, ``count``,
``assert`` …). Each gathers its positional arguments, applies the per-method
composition rule, and forwards the result to the attached client.

Contents
--------
* :class:`Console` – per-execution-context dispatcher owning a
  :class:`CounterTable` and a weak reference to an optional client.

System Role
-----------
Application-layer entry point used by embedding hosts. A console without a
client is valid: every method then returns ``None`` without side effects on
any sink, so code may call the console unconditionally.
"""

from __future__ import annotations

import logging
import weakref
from typing import Any

from lib_console_api.application.ports.call_stack import CallStackPort
from lib_console_api.application.ports.client import ConsoleClient
from lib_console_api.application.ports.values import ValuePort
from lib_console_api.application.values import PythonValues
from lib_console_api.domain.counters import DEFAULT_LABEL, CounterTable
from lib_console_api.domain.levels import LogLevel
from lib_console_api.domain.messages import compose_assertion_data, format_count, format_missing_count
from lib_console_api.domain.trace import Trace

logger = logging.getLogger(__name__)


class Console:
    """Dispatch console API calls to a client.

    Parameters
    ----------
    client:
        Optional sink. The console keeps only a weak reference; the host owns
        the client and must keep it alive.
    call_stack:
        Source of frame names for :meth:`trace`.
    values:
        Coercion for labels, assertion conditions and trace labels; defaults to
        :class:`PythonValues`.

    Examples
    --------
    >>> from lib_console_api.adapters.call_stack import ScriptedCallStack
    >>> console = Console(call_stack=ScriptedCallStack())
    >>> console.log("nobody is listening") is None
    True
    >>> console.counters.snapshot()
    {}
    """

    def __init__(
        self,
        client: ConsoleClient | None = None,
        *,
        call_stack: CallStackPort,
        values: ValuePort | None = None,
    ) -> None:
        self._client_ref: weakref.ReferenceType[ConsoleClient] | None = None
        self._call_stack = call_stack
        self._values = values if values is not None else PythonValues()
        self._counters = CounterTable()
        if client is not None:
            self.attach(client)

    @property
    def client(self) -> ConsoleClient | None:
        """Return the attached client, or ``None`` once it is gone."""

        if self._client_ref is None:
            return None
        return self._client_ref()

    @property
    def counters(self) -> CounterTable:
        return self._counters

    def attach(self, client: ConsoleClient) -> None:
        """Route subsequent records to ``client`` without taking ownership."""

        self._client_ref = weakref.ref(client)
        logger.debug("console client attached: %s", type(client).__name__)

    def detach(self) -> None:
        """Forget the current client; later calls become no-ops for sinks."""

        if self._client_ref is not None:
            logger.debug("console client detached")
        self._client_ref = None

    def debug(self, *data: Any) -> Any:
        return self._log(LogLevel.DEBUG, data)

    def error(self, *data: Any) -> Any:
        return self._log(LogLevel.ERROR, data)

    def info(self, *data: Any) -> Any:
        return self._log(LogLevel.INFO, data)

    def log(self, *data: Any) -> Any:
        return self._log(LogLevel.LOG, data)

    def warn(self, *data: Any) -> Any:
        return self._log(LogLevel.WARN, data)

    def clear(self, *_data: Any) -> None:
        """Clear the client's output surface when one is attached; arguments are ignored."""

        # Group stacks are not modelled, so there is no group stack to empty.
        client = self.client
        if client is not None:
            client.clear()
        return None

    def trace(self, *data: Any) -> Any:
        """Send a :class:`Trace` of the calling frames to the client's printer.

        The stack is only inspected when a client is attached. When ``data`` is
        given it runs through the client's formatter and the string forms of
        the results, joined by single spaces, become the label.
        """
        client = self.client
        if client is None:
            return None
        names = list(self._call_stack.function_names())[:-1]
        names.reverse()
        label = None
        if data:
            formatted = client.formatter(list(data))
            label = " ".join(self._values.to_string(item) for item in formatted)
        return client.printer(LogLevel.TRACE, Trace.from_frames(names, label=label))

    def count(self, *label: Any) -> None:
        """Increment the counter for ``label`` (``"default"``) and log it."""

        name = self._label(label)
        value = self._counters.increment(name)
        client = self.client
        if client is not None:
            client.logger(LogLevel.COUNT, [format_count(name, value)])
        return None

    def count_reset(self, *label: Any) -> None:
        """Zero the counter for ``label``; log a notice for unknown labels."""

        name = self._label(label)
        if self._counters.reset(name):
            return None
        client = self.client
        if client is not None:
            client.logger(LogLevel.COUNT_RESET, [format_missing_count(name)])
        return None

    countReset = count_reset

    def assert_(self, *args: Any) -> Any:
        """Log ``"Assertion failed"`` with ``args[1:]`` unless ``args[0]`` is truthy.

        A missing condition counts as falsy. The client's ``logger`` result is
        returned.
        """

        condition = self._values.to_boolean(args[0]) if args else False
        if condition:
            return None
        data = compose_assertion_data(
            args[1:],
            is_string=self._values.is_string,
            to_string=self._values.to_string,
        )
        client = self.client
        if client is None:
            return None
        return client.logger(LogLevel.ASSERT, data)

    def _log(self, level: LogLevel, data: tuple[Any, ...]) -> Any:
        client = self.client
        if client is None:
            return None
        return client.logger(level, list(data))

    def _label(self, args: tuple[Any, ...]) -> str:
        if not args:
            return DEFAULT_LABEL
        return self._values.to_string(args[0])


setattr(Console, "assert", Console.assert_)


__all__ = ["Console"]
