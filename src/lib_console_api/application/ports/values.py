"""Port for coercing host runtime values."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ValuePort(Protocol):
    """Convert opaque host values; conversions may raise and are never caught."""

    def to_string(self, value: Any) -> str: ...

    def to_boolean(self, value: Any) -> bool: ...

    def is_string(self, value: Any) -> bool: ...


__all__ = ["ValuePort"]
