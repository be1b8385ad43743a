"""Stack-annotated errors.

``AnnotatedError`` pairs an underlying error with the call stack captured
when it was built and an optional message prefix. Frames are resolved lazily
on first use and cached for the lifetime of the error.

Any ``BaseException`` counts as an error. Other values are converted to a
``MessageError`` using their default string form; conversion never raises.
"""

from __future__ import annotations

import threading
from collections.abc import Sequence

from .frames import Address, StackFrame, format_frames, resolve

__all__ = [
    "PANIC_TYPE_NAME",
    "AnnotatedError",
    "MessageError",
    "UncaughtPanic",
    "as_error",
    "format_value",
    "type_name",
    "unwrap",
    "is_same",
]

# type_name() of an error built from a recovered panic.
PANIC_TYPE_NAME = "panic"

PREFIX_SEPARATOR = ": "


def format_value(value: object) -> str:
    """Default text of an arbitrary value, falling back to repr()."""
    try:
        return str(value)
    except Exception:
        pass
    try:
        return repr(value)
    except Exception:
        return f"<unprintable {type(value).__name__} object>"


def type_name(obj: object) -> str:
    """Qualified name of obj's type; builtins are left unqualified."""
    cls = type(obj)
    module = getattr(cls, "__module__", None)
    name = getattr(cls, "__qualname__", cls.__name__)
    if not module or module == "builtins":
        return name
    return f"{module}.{name}"


class MessageError(Exception):
    """Plain error built from a non-error value."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class UncaughtPanic(Exception):
    """A value that escaped normal error handling and was recovered."""

    def __init__(self, value: object) -> None:
        self.value = value
        if isinstance(value, BaseException):
            text = format_value(value)
            message = f"{type_name(value)}: {text}" if text else type_name(value)
        else:
            message = format_value(value)
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


def as_error(value: object) -> BaseException:
    """Return value if it is an error, otherwise wrap its text in a MessageError."""
    match value:
        case BaseException():
            return value
        case _:
            return MessageError(format_value(value))


class AnnotatedError(Exception):
    """An error with the call stack captured where it was created.

    Instances are immutable once built: the captured addresses and the prefix
    never change. Use the construction functions (``new``, ``wrap``,
    ``wrap_prefix``, ``errorf``) rather than instantiating directly.

    Attributes:
        underlying: The wrapped error.
        prefix: Text prepended to the message, "" when unset.
        addresses: Raw addresses captured at construction, innermost first.
    """

    def __init__(
        self,
        underlying: BaseException,
        addresses: Sequence[Address] = (),
        prefix: str = "",
    ) -> None:
        self._underlying = underlying
        self._addresses = tuple(addresses)
        self._prefix = prefix
        self._frames: tuple[StackFrame, ...] | None = None
        self._frames_lock = threading.Lock()
        super().__init__(self.message)

    @property
    def underlying(self) -> BaseException:
        return self._underlying

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def addresses(self) -> tuple[Address, ...]:
        return self._addresses

    @property
    def message(self) -> str:
        """The underlying message, preceded by ``prefix + ": "`` when set."""
        msg = format_value(self._underlying)
        if self._prefix:
            return f"{self._prefix}{PREFIX_SEPARATOR}{msg}"
        return msg

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"AnnotatedError({self.message!r}, frames={len(self._addresses)})"

    def __reduce__(self) -> tuple[type[AnnotatedError], tuple[BaseException, tuple[Address, ...], str]]:
        # Rebuild from the real fields; Exception's default uses args=(message,).
        return (AnnotatedError, (self._underlying, self._addresses, self._prefix))

    def with_prefix(self, prefix: str) -> AnnotatedError:
        """Return a copy carrying ``prefix`` in front of any existing prefix.

        The captured stack is kept as is.
        """
        if self._prefix:
            prefix = f"{prefix}{PREFIX_SEPARATOR}{self._prefix}"
        return AnnotatedError(self._underlying, self._addresses, prefix)

    def stack_frames(self) -> tuple[StackFrame, ...]:
        """Resolved frames, one per captured address.

        Resolution happens once; later calls return the same tuple.
        """
        frames = self._frames
        if frames is None:
            with self._frames_lock:
                if self._frames is None:
                    self._frames = tuple(resolve(address) for address in self._addresses)
                frames = self._frames
        return frames

    def stack(self) -> bytes:
        """The formatted stack trace as bytes."""
        return format_frames(self.stack_frames()).encode("utf-8", errors="replace")

    def error_stack(self) -> str:
        """Message followed by a newline and the stack trace."""
        return self.message + "\n" + format_frames(self.stack_frames())

    def type_error_stack(self) -> str:
        """Type name, a space, then error_stack()."""
        return self.type_name() + " " + self.error_stack()

    def type_name(self) -> str:
        """Type of the underlying error, or "panic" for a recovered panic."""
        if isinstance(self._underlying, UncaughtPanic):
            return PANIC_TYPE_NAME
        return type_name(self._underlying)


def unwrap(value: object) -> BaseException:
    """Return the error underlying value.

    One annotation layer is removed, so ``unwrap(new(err)) is err`` holds even
    when err is itself annotated. Plain errors are returned unchanged and
    other values are converted.
    """
    if isinstance(value, AnnotatedError):
        return value.underlying
    return as_error(value)


def is_same(err: object, original: object) -> bool:
    """Check whether two errors are the same object once unwrapped.

    This compares identity, not messages: two errors built independently
    from equal text are different.
    """
    if err is original:
        return True
    if isinstance(err, AnnotatedError):
        return is_same(err.underlying, original)
    if isinstance(original, AnnotatedError):
        return is_same(err, original.underlying)
    return False
