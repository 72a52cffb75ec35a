"""
Ambient logger context

Resolves "the current logger" without passing it through every call.
The binding lives in a ContextVar, so it follows asyncio tasks and the
callbacks they schedule. Thread pools do not carry it over; use
``wrap`` to carry the binding into work submitted to a pool.

Example:
    async def handle(request):
        with scope(Logger.from_options(context={"request": request.id})):
            await do_work()

    async def do_work():
        Logger.current().info("working")   # sees the request logger
"""

from __future__ import annotations
from contextlib import contextmanager
from contextvars import ContextVar, Token, copy_context
from typing import TYPE_CHECKING, Any, Callable, Iterator, Optional
import functools

if TYPE_CHECKING:
    from context_logger.core.logger import Logger

_current_logger: ContextVar[Optional["Logger"]] = ContextVar(
    "context_logger_current", default=None
)


def current() -> "Logger":
    """
    Return the logger bound to the active context.

    Falls back to a new logger configured from the environment when
    nothing is bound, or from the built-in defaults when the environment
    holds invalid values. Never returns None and never raises.
    """
    logger = _current_logger.get()
    if logger is None:
        from context_logger.core.logger import Logger
        from context_logger.core.logger_config import LoggerConfig
        try:
            return Logger()
        except ValueError:
            return Logger(LoggerConfig.default())
    return logger


def bound() -> Optional["Logger"]:
    """Return the bound logger, or None outside any scope."""
    return _current_logger.get()


def bind(logger: "Logger") -> Token:
    """
    Bind ``logger`` to the active context.

    Returns:
        Token to hand back to ``unbind`` at scope exit
    """
    return _current_logger.set(logger)


def unbind(token: Token) -> None:
    """Restore the binding that was active before ``bind``."""
    _current_logger.reset(token)


@contextmanager
def scope(logger: "Logger") -> Iterator["Logger"]:
    """
    Bind ``logger`` for the duration of a ``with`` block.

    Scopes nest: the innermost binding wins and leaving a scope restores
    the enclosing one.
    """
    token = bind(logger)
    try:
        yield logger
    finally:
        unbind(token)


def run(logger: "Logger", func: Callable[..., Any], *args, **kwargs) -> Any:
    """
    Call ``func`` in a copy of the current context with ``logger`` bound.

    The caller's own binding is untouched. For coroutines open a
    ``scope`` inside the coroutine instead; tasks created within it
    inherit the binding.

    Raises:
        TypeError: If func is not callable
    """
    if not callable(func):
        raise TypeError("func must be callable")

    def _bound_call():
        bind(logger)
        return func(*args, **kwargs)

    return copy_context().run(_bound_call)


def wrap(func: Callable[..., Any]) -> Callable[..., Any]:
    """
    Capture the caller's context for a callable run elsewhere.

    Example:
        executor.submit(wrap(process), item)

    Raises:
        TypeError: If func is not callable
    """
    if not callable(func):
        raise TypeError("func must be callable")

    captured = copy_context()

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        # A Context can only be entered once at a time; copy per call
        return captured.copy().run(func, *args, **kwargs)

    return wrapper
