"""Resolve loggers from the calling code.

The call site's module supplies the namespace and its code object
supplies the lexical context::

    from lognaming import get_logger

    class Worker:
        def run(self):
            log = get_logger()          # -> "mypkg.worker:Worker:run"
            db = get_logger(Keyword('db'))  # -> "mypkg.worker:db"
"""

import inspect
import logging

from .frames import CodeContext
from .forms import ResolvedCall, resolve_logger_form
from .namespaces import namespace_of


def resolve_call(*args, config=None, obtain_logger=logging.getLogger,
                 depth=1) -> ResolvedCall:
    """Resolve the logger for the function ``depth`` frames above this one.

    Args:
        *args: The call site's arguments (message, keyword, literal, logger).
        config: NamingConfig or NamingOptions.
        obtain_logger: Registry lookup.
        depth: 1 is the direct caller.
    """
    frame = inspect.currentframe()
    try:
        for _ in range(depth):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            raise ValueError(f"no caller frame at depth {depth}")
        namespace = namespace_of(frame.f_globals.get('__name__', '__main__'))
        context = CodeContext(frame.f_code)
        return resolve_logger_form(namespace, context, args, config, obtain_logger)
    finally:
        del frame


def get_logger(*args, config=None, obtain_logger=logging.getLogger, depth=1):
    """Return just the logger for the caller; see resolve_call()."""
    return resolve_call(*args, config=config, obtain_logger=obtain_logger,
                        depth=depth + 1).logger
