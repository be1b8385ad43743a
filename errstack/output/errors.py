"""Error presentation utilities.

Renders annotated errors on a console: the message line, then one two-line
block per frame, construction site first.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from errstack.core.errors import PANIC_TYPE_NAME, AnnotatedError, format_value, type_name
from errstack.output.console import Style

if TYPE_CHECKING:
    from errstack.core.frames import StackFrame
    from errstack.output.console import ConsoleProtocol

__all__ = ["error_style", "print_error_stack", "print_frames"]


def error_style(err: object) -> Style:
    """Style of the message line: PANIC for recovered panics, ERROR otherwise."""
    if isinstance(err, AnnotatedError) and err.type_name() == PANIC_TYPE_NAME:
        return Style.PANIC
    return Style.ERROR


def print_frames(frames: tuple[StackFrame, ...], console: ConsoleProtocol) -> None:
    """Print frame blocks; unresolved frames are flagged."""
    for frame in frames:
        console.print(f"{frame.package}.{frame.function}", Style.FRAME)
        if frame.resolved:
            console.print(f"\t{frame.file}:{frame.line_number}", Style.DIM)
        else:
            console.print("\t(unresolved frame)", Style.DIM)


def print_error_stack(err: object, console: ConsoleProtocol, *, with_type: bool = False) -> None:
    """Print an error and, when it carries one, its captured stack.

    Args:
        err: Any error or value; only AnnotatedError has frames to print
        console: Destination console
        with_type: Prefix the message with the error's type name
    """
    if isinstance(err, AnnotatedError):
        message = err.message
        name = err.type_name()
    else:
        message = format_value(err)
        name = type_name(err)
    line = f"{name} {message}" if with_type else message

    match error_style(err):
        case Style.PANIC:
            console.print(f"panic: {line}", Style.PANIC)
        case _:
            console.error(line)

    if not isinstance(err, AnnotatedError):
        return
    frames = err.stack_frames()
    if not frames:
        console.warning("no stack captured")
        return
    print_frames(frames, console)
