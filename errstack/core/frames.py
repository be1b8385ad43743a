"""Frame resolution.

An ``Address`` is the raw record taken when a stack is captured: the code
object being executed, its bytecode offset, the current line and the name of
the module the frame runs in. It holds no reference to the live frame, so
capturing is cheap and does not keep locals alive.

``resolve()`` turns an address into a human-readable ``StackFrame``. It never
raises; an address that cannot be mapped yields a placeholder frame whose
fields are ``"unknown"`` and whose ``resolved`` flag is False.
"""

from __future__ import annotations

import linecache
from collections.abc import Iterable
from dataclasses import dataclass
from types import CodeType

__all__ = [
    "UNKNOWN",
    "Address",
    "StackFrame",
    "resolve",
    "format_frames",
]

UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class Address:
    """Raw location captured from a running frame.

    Attributes:
        code: Code object of the frame, or None when unavailable.
        lasti: Offset of the last bytecode instruction executed.
        lineno: Line being executed, or None when the interpreter had none.
        module: ``__name__`` of the frame's globals, if any.
    """

    code: CodeType | None
    lasti: int = 0
    lineno: int | None = None
    module: str | None = None

    @property
    def pc(self) -> int:
        """Integer identifier for this location (0 without a code object)."""
        if self.code is None:
            return 0
        return id(self.code) + max(self.lasti, 0)


@dataclass(frozen=True, slots=True)
class StackFrame:
    """Resolved, human-readable location for one captured address."""

    address: Address
    file: str = UNKNOWN
    line_number: int = 0
    function: str = UNKNOWN
    package: str = UNKNOWN
    resolved: bool = False

    def source_line(self) -> str | None:
        """Return the stripped source text of this frame, if it can be read."""
        if not self.resolved or self.line_number <= 0:
            return None
        line = linecache.getline(self.file, self.line_number)
        return line.strip() or None

    def __str__(self) -> str:
        return f"{self.package}.{self.function}\n\t{self.file}:{self.line_number}\n"


def _code_line(code: CodeType, lasti: int) -> int | None:
    # Fallback when the frame reported no line (e.g. mid-instruction).
    for start, end, line in code.co_lines():
        if start <= lasti < end and line is not None:
            return line
    return code.co_firstlineno


def resolve(address: Address) -> StackFrame:
    """Resolve a captured address to a StackFrame.

    Args:
        address: The raw address to resolve

    Returns:
        A resolved frame, or a placeholder frame with ``resolved=False``
    """
    code = address.code
    if not isinstance(code, CodeType):
        return StackFrame(address=address)

    try:
        line = address.lineno
        if line is None:
            line = _code_line(code, address.lasti)
        function = getattr(code, "co_qualname", None) or code.co_name
        return StackFrame(
            address=address,
            file=code.co_filename or UNKNOWN,
            line_number=line or 0,
            function=function or UNKNOWN,
            package=address.module or UNKNOWN,
            resolved=True,
        )
    except (AttributeError, TypeError, ValueError):
        return StackFrame(address=address)


def format_frames(frames: Iterable[StackFrame]) -> str:
    """Render frames as consecutive two-line blocks, in the given order."""
    return "".join(str(frame) for frame in frames)
