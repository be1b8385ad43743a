"""Tests for errstack.output.errors module."""

from __future__ import annotations

from errstack.core.api import ErrorFactory, new, recover
from errstack.core.config import StackConfig
from errstack.core.errors import AnnotatedError
from errstack.core.frames import Address
from errstack.output.console import MockConsole, OutputRecord, Style
from errstack.output.errors import error_style, print_error_stack, print_frames


class TestPrintErrorStack:
    """Test print_error_stack."""

    def test_message_then_frames(self) -> None:
        console = MockConsole()
        err = new("boom")
        print_error_stack(err, console)

        assert console.outputs[0].message == "error: boom"
        assert console.outputs[1].style == Style.FRAME
        assert console.outputs[1].message.endswith("TestPrintErrorStack.test_message_then_frames")
        assert console.outputs[2].style == Style.DIM
        assert console.outputs[2].message.startswith("\t")
        assert console.count(Style.FRAME) == len(err.stack_frames())

    def test_with_type(self) -> None:
        console = MockConsole()
        print_error_stack(new(ValueError("x")), console, with_type=True)
        assert console.outputs[0].message == "error: ValueError x"

    def test_plain_exception(self) -> None:
        console = MockConsole()
        print_error_stack(KeyError("k"), console, with_type=True)
        assert console.messages == ["error: KeyError 'k'"]

    def test_empty_stack_warns(self) -> None:
        console = MockConsole()
        err = ErrorFactory(StackConfig(max_depth=0)).new("boom")
        print_error_stack(err, console)
        assert console.messages == ["error: boom", "warning: no stack captured"]


class TestPrintFrames:
    """Test print_frames."""

    def test_unresolved_frame_flagged(self) -> None:
        console = MockConsole()
        err = AnnotatedError(ValueError("x"), (Address(code=None),))
        print_frames(err.stack_frames(), console)
        assert console.messages == ["unknown.unknown", "\t(unresolved frame)"]


class TestErrorStyle:
    """Test error_style."""

    def test_annotated_error(self) -> None:
        assert error_style(new("boom")) == Style.ERROR

    def test_plain_exception(self) -> None:
        assert error_style(ValueError("x")) == Style.ERROR

    def test_recovered_panic(self) -> None:
        assert error_style(recover("oops")) == Style.PANIC

    def test_panic_message_line(self) -> None:
        console = MockConsole()
        print_error_stack(recover("oops"), console, with_type=True)
        assert console.outputs[0] == OutputRecord("panic: panic oops", Style.PANIC)
        assert not console.has_error()
        assert console.count(Style.FRAME) >= 1
