"""Errors that carry the call stack they were created on."""

from errstack.core import (
    DEFAULT_MAX_STACK_DEPTH,
    PANIC_TYPE_NAME,
    Address,
    AnnotatedError,
    ConfigError,
    ErrorFactory,
    MessageError,
    StackConfig,
    StackFrame,
    UncaughtPanic,
    configure,
    errorf,
    get_config,
    is_same,
    load_config,
    new,
    recover,
    set_max_stack_depth,
    snapshot,
    unwrap,
    wrap,
    wrap_prefix,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_MAX_STACK_DEPTH",
    "PANIC_TYPE_NAME",
    "Address",
    "AnnotatedError",
    "ConfigError",
    "ErrorFactory",
    "MessageError",
    "StackConfig",
    "StackFrame",
    "UncaughtPanic",
    "__version__",
    "configure",
    "errorf",
    "get_config",
    "is_same",
    "load_config",
    "new",
    "recover",
    "set_max_stack_depth",
    "snapshot",
    "unwrap",
    "wrap",
    "wrap_prefix",
]
