"""
Function tracing decorator.

Reports calls, return values and exceptions of decorated functions on
the opt-in 'trace' channel at DEBUG.
"""

import functools
import inspect

from ..levels import Level


def _short_repr(value, limit=60):
    if isinstance(value, (list, tuple)) and len(value) > 4:
        return f"[...{len(value)} items...]"
    text = repr(value)
    if len(text) > limit:
        return text[:limit - 3] + '...'
    return text


def trace(func):
    """Decorator to trace function calls via the diagnostics singleton."""
    module = inspect.getmodule(func)
    module_name = module.__name__ if module else "unknown"
    func_name = func.__qualname__

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        # Lazy import to avoid circular dependency
        from .manager import get_diagnostics

        out = get_diagnostics()
        if not out.channel_active('trace'):
            return func(*args, **kwargs)

        args_repr = [_short_repr(a) for a in args]
        args_repr.extend(f"{k}={_short_repr(v)}" for k, v in kwargs.items())
        out.emit(Level.DEBUG, ">> {mod}.{fn}({args})", channel='trace',
                 mod=module_name, fn=func_name, args=', '.join(args_repr))
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            out.emit(Level.DEBUG, "!! {mod}.{fn} raised: {exc}: {msg}",
                     channel='trace', mod=module_name, fn=func_name,
                     exc=type(e).__name__, msg=str(e))
            raise
        out.emit(Level.DEBUG, "<< {mod}.{fn} returned: {val}", channel='trace',
                 mod=module_name, fn=func_name, val=_short_repr(result))
        return result

    return wrapper
