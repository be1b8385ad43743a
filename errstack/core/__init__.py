"""Core types: annotated errors, stack capture and configuration."""

from .api import (
    ErrorFactory,
    configure,
    errorf,
    get_config,
    get_factory,
    new,
    recover,
    set_max_stack_depth,
    wrap,
    wrap_prefix,
)
from .capture import capture_stack, capture_traceback, snapshot
from .config import (
    DEFAULT_MAX_STACK_DEPTH,
    ConfigError,
    StackConfig,
    load_config,
    load_config_or_default,
)
from .errors import (
    PANIC_TYPE_NAME,
    AnnotatedError,
    MessageError,
    UncaughtPanic,
    is_same,
    unwrap,
)
from .frames import UNKNOWN, Address, StackFrame, format_frames, resolve
from .result import Err, Ok, Result, is_ok

__all__ = [
    # api
    "ErrorFactory",
    "configure",
    "errorf",
    "get_config",
    "get_factory",
    "new",
    "recover",
    "set_max_stack_depth",
    "wrap",
    "wrap_prefix",
    # capture
    "capture_stack",
    "capture_traceback",
    "snapshot",
    # config
    "DEFAULT_MAX_STACK_DEPTH",
    "ConfigError",
    "StackConfig",
    "load_config",
    "load_config_or_default",
    # errors
    "PANIC_TYPE_NAME",
    "AnnotatedError",
    "MessageError",
    "UncaughtPanic",
    "is_same",
    "unwrap",
    # frames
    "UNKNOWN",
    "Address",
    "StackFrame",
    "format_frames",
    "resolve",
    # result
    "Err",
    "Ok",
    "Result",
    "is_ok",
]
