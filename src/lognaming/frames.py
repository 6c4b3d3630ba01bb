"""
Lexical context walker.

Walks the chain of frames lexically enclosing a call site and turns it
into the list of names that follow the namespace in a default logger
name.  For example, a call inside ``helper`` defined in method
``Outer.run`` of module ``app`` gets the logger ``app:Outer:run:helper``.

Frame kinds and what they contribute:

    NAMED(name)          name, unless it is an internal marker or a
                         cleanup helper
    LABELS/FLET(inner)   whatever inner contributes (local functions)
    VARARGS(inner)       whatever inner contributes (wrapper entry points)
    ARG_PROCESSOR(inner) whatever inner contributes
    METHOD(a, b, ...)    every component, in order
    LAMBDA               nothing

Where lexical information comes from is abstracted by LexicalContext.
CodeContext reads it from a code object's ``co_qualname`` (Python 3.11+);
hosts without it degrade to namespace-only names.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Protocol, Sequence

from .diagnostics import get_diagnostics
from .levels import Level


class FrameKind(Enum):
    NAMED = 'named'
    LABELS = 'labels'
    FLET = 'flet'
    LAMBDA = 'lambda'
    METHOD = 'method'
    VARARGS = 'varargs'
    ARG_PROCESSOR = 'arg-processor'


# Kinds that contribute exactly what their inner frame/name contributes
_UNWRAPPED_KINDS = {
    FrameKind.LABELS, FrameKind.FLET,
    FrameKind.VARARGS, FrameKind.ARG_PROCESSOR,
}

# Compiler/runtime synthesized names that never show up in a logger name
INTERNAL_NAMES = frozenset({
    '<module>', '<genexpr>', '<listcomp>', '<setcomp>', '<dictcomp>',
    '<locals>', '.anonymous.', 'with-mutex-thunk',
})

CLEANUP_PATTERN = re.compile(r'^(cleanup-fun-|_cleanup_)', re.IGNORECASE)


@dataclass(frozen=True)
class Frame:
    """One lexical nesting unit around a call site.

    ``inner`` is a name or a nested Frame for the wrapping kinds, and a
    tuple of name components for METHOD.
    """
    kind: FrameKind
    inner: Any = None

    @classmethod
    def named(cls, name):
        return cls(FrameKind.NAMED, name)

    @classmethod
    def labels(cls, inner):
        return cls(FrameKind.LABELS, inner)

    @classmethod
    def flet(cls, inner):
        return cls(FrameKind.FLET, inner)

    @classmethod
    def lambda_(cls):
        return cls(FrameKind.LAMBDA)

    @classmethod
    def method(cls, *components):
        return cls(FrameKind.METHOD, tuple(components))

    @classmethod
    def varargs(cls, inner):
        return cls(FrameKind.VARARGS, inner)

    @classmethod
    def arg_processor(cls, inner):
        return cls(FrameKind.ARG_PROCESSOR, inner)


def include_name(name) -> bool:
    """True if a plain frame name belongs in a logger name."""
    if not name:
        return False
    name = str(name)
    if name in INTERNAL_NAMES:
        return False
    return CLEANUP_PATTERN.match(name) is None


def debug_names(frame) -> List[str]:
    """Names a single frame contributes, in reading order.

    A bare string is treated as a NAMED frame.
    """
    if not isinstance(frame, Frame):
        frame = Frame.named(frame)

    if frame.kind is FrameKind.NAMED:
        return [str(frame.inner)] if include_name(frame.inner) else []
    if frame.kind in _UNWRAPPED_KINDS:
        return debug_names(frame.inner)
    if frame.kind is FrameKind.METHOD:
        return [str(c) for c in frame.inner]
    # LAMBDA: anonymous functions add nothing
    return []


# =============================================================================
# Lexical context sources
# =============================================================================

class LexicalContext(Protocol):
    """Capability interface for hosts that can describe a call site's nesting."""

    def has_lexical_context(self) -> bool:
        ...

    def enclosing_frames(self) -> Sequence[Frame]:
        """Frames around the call site, innermost first."""
        ...


class FrameChain:
    """An explicit frame chain, innermost first."""

    def __init__(self, frames: Sequence[Any] = ()):
        self.frames = tuple(frames)

    def has_lexical_context(self) -> bool:
        return True

    def enclosing_frames(self) -> Sequence[Frame]:
        return self.frames

    def __repr__(self):
        return f"FrameChain({list(self.frames)!r})"


class CodeContext:
    """Lexical context of a compiled code object, read from ``co_qualname``."""

    def __init__(self, code):
        self.code = code

    @property
    def qualname(self) -> Optional[str]:
        return getattr(self.code, 'co_qualname', None)

    def has_lexical_context(self) -> bool:
        return self.qualname is not None

    def enclosing_frames(self) -> Sequence[Frame]:
        qualname = self.qualname
        if qualname is None:
            return ()
        return tuple(reversed(frames_from_qualname(qualname)))

    def __repr__(self):
        return f"CodeContext({self.qualname or self.code!r})"


class _NoContext:
    """Host without lexical introspection."""

    def has_lexical_context(self) -> bool:
        return False

    def enclosing_frames(self) -> Sequence[Frame]:
        return ()

    def __repr__(self):
        return "NO_CONTEXT"


NO_CONTEXT = _NoContext()


def frames_from_qualname(qualname: str) -> List[Frame]:
    """Translate a Python qualified name into frames, outermost first.

    ``Outer.run.<locals>.helper.<locals>.<lambda>`` becomes
    ``[METHOD(Outer, run), FLET(helper), LAMBDA]``.
    """
    parts = qualname.split('.')
    frames: List[Frame] = []
    classes: List[str] = []
    in_function = False

    for i, part in enumerate(parts):
        if part == '<locals>':
            continue
        following = parts[i + 1] if i + 1 < len(parts) else None

        if part.startswith('<'):
            # Markers: flush enclosing class names as plain frames
            frames.extend(Frame.named(c) for c in classes)
            classes = []
            if part == '<lambda>':
                frames.append(Frame.lambda_())
            else:
                frames.append(Frame.named(part))
            in_function = True
            continue

        if following is not None and following != '<locals>':
            # Something is nested directly inside: a class body
            classes.append(part)
            continue

        if classes:
            frames.append(Frame.method(*classes, part))
            classes = []
        elif in_function:
            frames.append(Frame.flet(part))
        else:
            frames.append(Frame.named(part))
        in_function = True

    return frames


def enclosing_names(context: Optional[LexicalContext]) -> List[str]:
    """Names of the enclosing frames, outermost first.

    Returns an empty list when the context is missing or carries no
    lexical information.
    """
    if context is None or not context.has_lexical_context():
        return []

    names: List[str] = []
    for frame in context.enclosing_frames():
        # Collect innermost-first; method components stay in order after
        # the final reverse.
        names.extend(reversed(debug_names(frame)))
    names.reverse()

    get_diagnostics().emit(Level.DEBUG, "frames {ctx!r} -> {names}",
                           channel='frames', ctx=context, names=names)
    return names
