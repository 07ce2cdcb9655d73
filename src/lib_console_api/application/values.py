"""Default :class:`ValuePort` for hosts whose runtime values are Python objects."""

from __future__ import annotations

from typing import Any

from lib_console_api.application.ports.values import ValuePort


class PythonValues(ValuePort):
    """Coerce values with :func:`str` and :func:`bool`.

    Examples
    --------
    >>> values = PythonValues()
    >>> values.to_string(42), values.to_boolean(0), values.is_string("x")
    ('42', False, True)
    """

    def to_string(self, value: Any) -> str:
        return str(value)

    def to_boolean(self, value: Any) -> bool:
        return bool(value)

    def is_string(self, value: Any) -> bool:
        return isinstance(value, str)


__all__ = ["PythonValues"]
