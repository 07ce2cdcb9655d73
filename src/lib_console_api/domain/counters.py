"""Per-console label counters backing ``count`` and ``countReset``."""

from __future__ import annotations

from typing import Iterator

DEFAULT_LABEL = "default"


class CounterTable:
    """Mapping from label to a non-negative count.

    Labels are created by the first :meth:`increment` and live for as long as
    the table does; :meth:`reset` zeroes an entry but never removes it.
    """

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def increment(self, label: str) -> int:
        """Add one to ``label`` (starting at one) and return the new value.

        Examples
        --------
        >>> table = CounterTable()
        >>> table.increment("a"), table.increment("a")
        (1, 2)
        """
        value = self._counts.get(label, 0) + 1
        self._counts[label] = value
        return value

    def reset(self, label: str) -> bool:
        """Zero ``label`` and return ``True``; return ``False`` for unseen labels.

        Examples
        --------
        >>> table = CounterTable()
        >>> table.reset("a")
        False
        >>> _ = table.increment("a")
        >>> table.reset("a"), table.get("a")
        (True, 0)
        """
        if label not in self._counts:
            return False
        self._counts[label] = 0
        return True

    def get(self, label: str) -> int | None:
        return self._counts.get(label)

    def snapshot(self) -> dict[str, int]:
        """Return a copy of the current counts."""

        return dict(self._counts)

    def __contains__(self, label: object) -> bool:
        return label in self._counts

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)


__all__ = ["CounterTable", "DEFAULT_LABEL"]
