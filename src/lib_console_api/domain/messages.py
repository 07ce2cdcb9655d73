"""Composition rules for messages the console builds on the caller's behalf.

Purpose
-------
Keep the exact wording of ``count``, ``countReset``, and ``assert`` records in
one place so the console and its tests agree on every byte.

Contents
--------
* :data:`ASSERTION_MESSAGE` – the generic assertion failure text.
* :func:`format_count` / :func:`format_missing_count` – counter messages.
* :func:`compose_assertion_data` – merges the failure text into caller data.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

ASSERTION_MESSAGE = "Assertion failed"


def format_count(label: str, value: int) -> str:
    """Return ``"<label>: <value>"``.

    Examples
    --------
    >>> format_count("default", 3)
    'default: 3'
    """
    return f"{label}: {value}"


def format_missing_count(label: str) -> str:
    """Return the notice logged when resetting a label that was never counted.

    Examples
    --------
    >>> format_missing_count("x")
    '"x" doesn\\'t have a count'
    """
    return f'"{label}" doesn\'t have a count'


def compose_assertion_data(
    data: Sequence[Any],
    *,
    is_string: Callable[[Any], bool],
    to_string: Callable[[Any], str],
) -> list[Any]:
    """Merge :data:`ASSERTION_MESSAGE` into the data of a failed assertion.

    * empty data becomes ``[message]``
    * a non-string first element gets the message prepended
    * a string first element is replaced by ``"<message>: <first>"``

    Examples
    --------
    >>> compose_assertion_data([], is_string=lambda v: isinstance(v, str), to_string=str)
    ['Assertion failed']
    >>> compose_assertion_data(["x", "y"], is_string=lambda v: isinstance(v, str), to_string=str)
    ['Assertion failed: x', 'y']
    >>> compose_assertion_data([42, "y"], is_string=lambda v: isinstance(v, str), to_string=str)
    ['Assertion failed', 42, 'y']
    """
    items = list(data)
    if not items:
        return [ASSERTION_MESSAGE]
    first = items[0]
    if not is_string(first):
        return [ASSERTION_MESSAGE, *items]
    items[0] = f"{ASSERTION_MESSAGE}: {to_string(first)}"
    return items


__all__ = [
    "ASSERTION_MESSAGE",
    "compose_assertion_data",
    "format_count",
    "format_missing_count",
]
