"""Construction API.

``ErrorFactory`` builds annotated errors using an explicit ``StackConfig``.
The module-level functions delegate to a process-wide default factory, which
``configure()`` replaces. Errors already built keep the stack they captured.

The ``skip`` argument follows one convention everywhere: 0 starts the trace
at the caller of the construction function, 1 at that caller's caller, and
so on. Helpers that build errors on behalf of their caller pass ``skip=1``
to leave themselves out of the trace.
"""

from __future__ import annotations

import threading

from .capture import capture_stack, capture_traceback
from .config import StackConfig
from .errors import (
    AnnotatedError,
    MessageError,
    UncaughtPanic,
    as_error,
    format_value,
    type_name,
)
from .frames import Address

__all__ = [
    "ErrorFactory",
    "configure",
    "get_config",
    "get_factory",
    "set_max_stack_depth",
    "new",
    "wrap",
    "wrap_prefix",
    "errorf",
    "recover",
]


def _format_message(fmt: str, args: tuple[object, ...]) -> str:
    if not args:
        return fmt
    try:
        return fmt % args
    except (TypeError, ValueError, KeyError):
        extra = ", ".join(format_value(arg) for arg in args)
        return f"{fmt} %!(EXTRA {extra})"
    except Exception as e:
        # An argument's __str__/__int__ raised while being formatted.
        extra = ", ".join(format_value(arg) for arg in args)
        return f"{fmt} %!(PANIC {type_name(e)}: {format_value(e)}; {extra})"


class ErrorFactory:
    """Builds annotated errors with a fixed capture configuration."""

    def __init__(self, config: StackConfig | None = None) -> None:
        self._config = config or StackConfig()

    @property
    def config(self) -> StackConfig:
        return self._config

    def _capture(self, skip: int) -> tuple[Address, ...]:
        # +2: this method and the public method that called it.
        return capture_stack(skip + 2, self._config.max_depth)

    def new(self, value: object, *, skip: int = 0) -> AnnotatedError:
        """Annotate value with the caller's stack.

        Errors are used as the underlying error verbatim (including annotated
        ones); other values are converted by their default string form.
        """
        return AnnotatedError(as_error(value), self._capture(skip))

    def wrap(self, value: object, skip: int = 0) -> AnnotatedError:
        """Like new(), but an AnnotatedError is returned unchanged."""
        if isinstance(value, AnnotatedError):
            return value
        return AnnotatedError(as_error(value), self._capture(skip))

    def wrap_prefix(self, value: object, prefix: str, skip: int = 0) -> AnnotatedError:
        """Wrap value and put prefix in front of its message.

        An existing prefix is kept after the new one, joined with ": ". The
        input is not modified; the result shares its captured stack.
        """
        return self.wrap(value, skip + 1).with_prefix(prefix)

    def errorf(self, fmt: str, *args: object) -> AnnotatedError:
        """Build an error from a printf-style message.

        ``errorf("failed at step %d", 3)`` has the message "failed at step 3".
        Mismatched arguments never raise; they are appended to the message.
        """
        return self.wrap(MessageError(_format_message(fmt, args)), 1)

    def recover(self, value: object, *, skip: int = 0) -> AnnotatedError:
        """Annotate a value that escaped normal error handling.

        The result's type_name() is "panic". When value is an exception with
        a traceback, the stack is taken from that traceback (raise site
        first); otherwise the caller's stack is captured.
        """
        tb = value.__traceback__ if isinstance(value, BaseException) else None
        if tb is not None:
            addresses = capture_traceback(tb, self._config.max_depth)
        else:
            addresses = self._capture(skip)
        return AnnotatedError(UncaughtPanic(value), addresses)


_default_factory = ErrorFactory()
_default_lock = threading.Lock()


def get_factory() -> ErrorFactory:
    """Return the process-wide default factory."""
    return _default_factory


def get_config() -> StackConfig:
    return _default_factory.config


def configure(config: StackConfig) -> StackConfig:
    """Replace the default configuration.

    Only errors built afterwards are affected.

    Returns:
        The previous configuration, so callers can restore it
    """
    global _default_factory
    with _default_lock:
        previous = _default_factory.config
        _default_factory = ErrorFactory(config)
    return previous


def set_max_stack_depth(depth: int) -> StackConfig:
    """Shorthand for configure(StackConfig(max_depth=depth))."""
    return configure(StackConfig(max_depth=depth))


def new(value: object) -> AnnotatedError:
    """Annotate value with the caller's stack. See ErrorFactory.new()."""
    return _default_factory.new(value, skip=1)


def wrap(value: object, skip: int = 0) -> AnnotatedError:
    """Annotate value unless it already is. See ErrorFactory.wrap()."""
    return _default_factory.wrap(value, skip + 1)


def wrap_prefix(value: object, prefix: str, skip: int = 0) -> AnnotatedError:
    """Wrap value and prefix its message. See ErrorFactory.wrap_prefix()."""
    return _default_factory.wrap_prefix(value, prefix, skip + 1)


def errorf(fmt: str, *args: object) -> AnnotatedError:
    """Build an error from a printf-style message. See ErrorFactory.errorf()."""
    return _default_factory.wrap(MessageError(_format_message(fmt, args)), 1)


def recover(value: object) -> AnnotatedError:
    """Annotate a recovered panic. See ErrorFactory.recover()."""
    return _default_factory.recover(value, skip=1)
