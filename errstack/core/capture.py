"""Stack capture.

Addresses are collected innermost first: index 0 is the frame that asked for
the capture (after skipping), the last entry is the outermost caller.
"""

from __future__ import annotations

import sys
from types import FrameType, TracebackType

from .frames import Address, format_frames, resolve

__all__ = [
    "SNAPSHOT_LIMIT",
    "capture_stack",
    "capture_traceback",
    "snapshot",
]

# Upper bound on the size of a snapshot, in bytes.
SNAPSHOT_LIMIT = 1 << 16


def _module_name(frame: FrameType) -> str | None:
    name = frame.f_globals.get("__name__")
    return name if isinstance(name, str) else None


def _address(frame: FrameType, lasti: int | None = None, lineno: int | None = None) -> Address:
    return Address(
        code=frame.f_code,
        lasti=frame.f_lasti if lasti is None else lasti,
        lineno=frame.f_lineno if lineno is None else lineno,
        module=_module_name(frame),
    )


def capture_stack(skip: int = 0, max_depth: int | None = None) -> tuple[Address, ...]:
    """Capture the current call stack.

    Args:
        skip: Frames to skip above the caller. 0 starts at the function that
            called capture_stack, 1 at its caller, and so on.
        max_depth: Maximum number of addresses to keep (None for all)

    Returns:
        Captured addresses, empty when skip reaches past the outermost frame
    """
    if max_depth is not None and max_depth <= 0:
        return ()
    try:
        frame: FrameType | None = sys._getframe(max(skip, 0) + 1)
    except ValueError:
        return ()

    addresses: list[Address] = []
    while frame is not None:
        if max_depth is not None and len(addresses) >= max_depth:
            break
        addresses.append(_address(frame))
        frame = frame.f_back
    return tuple(addresses)


def capture_traceback(tb: TracebackType | None, max_depth: int | None = None) -> tuple[Address, ...]:
    """Capture addresses from a traceback, raise site first.

    Args:
        tb: Traceback of a caught exception (``exc.__traceback__``)
        max_depth: Maximum number of addresses to keep (None for all)

    Returns:
        Addresses ordered innermost first, like capture_stack
    """
    addresses: list[Address] = []
    while tb is not None:
        addresses.append(_address(tb.tb_frame, lasti=tb.tb_lasti, lineno=tb.tb_lineno))
        tb = tb.tb_next
    addresses.reverse()
    if max_depth is not None:
        del addresses[max(max_depth, 0):]
    return tuple(addresses)


def snapshot(skip: int = 0, limit: int = SNAPSHOT_LIMIT) -> bytes:
    """Render the current call stack, independent of any error.

    Meant for ad-hoc diagnostics, e.g. logging where a code path was reached.

    Args:
        skip: Frames to skip above the caller
        limit: Maximum size of the result in bytes

    Returns:
        Frame blocks for the whole stack, truncated to ``limit`` bytes
    """
    addresses = capture_stack(skip + 1)
    text = format_frames(resolve(address) for address in addresses)
    return text.encode("utf-8", errors="replace")[: max(limit, 0)]
