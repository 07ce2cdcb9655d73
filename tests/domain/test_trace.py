from __future__ import annotations

import dataclasses

import pytest

from lib_console_api.domain.trace import ANONYMOUS_FRAME, Trace


def test_from_frames_names_empty_frames_anonymous() -> None:
    trace = Trace.from_frames(["handler", "", "main"], label="here")

    assert trace.stack == ("handler", ANONYMOUS_FRAME, "main")
    assert trace.label == "here"


def test_trace_is_immutable() -> None:
    trace = Trace(label=None, stack=("a",))

    with pytest.raises(dataclasses.FrozenInstanceError):
        trace.label = "changed"  # type: ignore[misc]


def test_render_lines_without_label() -> None:
    assert Trace(stack=["f"]).render_lines() == ["Trace", "  f"]


def test_to_dict() -> None:
    assert Trace(label="x", stack=("f", "g")).to_dict() == {"label": "x", "stack": ["f", "g"]}
