from __future__ import annotations

import pytest

from lib_console_api.adapters.call_stack import PythonCallStack, ScriptedCallStack
from lib_console_api.application.ports import CallStackPort


def test_scripted_stack_appends_native_frame() -> None:
    stack = ScriptedCallStack(["main"])

    assert stack.function_names() == ["main", "trace"]


def test_scripted_stack_without_native_frame() -> None:
    stack = ScriptedCallStack(native_frame=None)
    stack.push("main")

    assert stack.function_names() == ["main"]
    assert stack.pop() == "main"
    assert len(stack) == 0


def test_scripted_stack_frame_pops_on_error() -> None:
    stack = ScriptedCallStack()

    with pytest.raises(KeyError):
        with stack.frame("handler"):
            raise KeyError("boom")

    assert len(stack) == 0


def test_scripted_stack_pop_empty_raises() -> None:
    with pytest.raises(IndexError):
        ScriptedCallStack().pop()


def test_python_stack_ends_with_calling_function() -> None:
    names = PythonCallStack().function_names()

    assert names[-1] == "test_python_stack_ends_with_calling_function"
    assert "function_names" not in names


@pytest.mark.parametrize("adapter", [PythonCallStack(), ScriptedCallStack()])
def test_adapters_satisfy_port(adapter: object) -> None:
    assert isinstance(adapter, CallStackPort)
