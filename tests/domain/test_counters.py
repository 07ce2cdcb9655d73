from __future__ import annotations

from lib_console_api.domain.counters import CounterTable


def test_increment_starts_at_one_and_accumulates() -> None:
    table = CounterTable()

    results = [table.increment("clicks") for _ in range(4)]

    assert results == [1, 2, 3, 4]
    assert table.get("clicks") == 4


def test_labels_are_counted_independently() -> None:
    table = CounterTable()
    table.increment("a")
    table.increment("b")
    table.increment("a")

    assert table.snapshot() == {"a": 2, "b": 1}


def test_reset_zeroes_but_keeps_label() -> None:
    table = CounterTable()
    table.increment("a")

    assert table.reset("a") is True
    assert "a" in table
    assert table.get("a") == 0
    assert table.increment("a") == 1


def test_reset_of_unknown_label_leaves_table_untouched() -> None:
    table = CounterTable()

    assert table.reset("ghost") is False
    assert "ghost" not in table
    assert len(table) == 0


def test_snapshot_is_a_copy() -> None:
    table = CounterTable()
    table.increment("a")

    snapshot = table.snapshot()
    snapshot["a"] = 99

    assert table.get("a") == 1
