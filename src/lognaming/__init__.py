"""lognaming — logger identity resolution.

Works out which logger a log call refers to, naming it after the
calling module and the functions lexically enclosing the call, and
parses human-entered level descriptors into numeric levels.
"""

from lognaming._version import __version__, __app_name__
from lognaming.callsite import get_logger, resolve_call
from lognaming.categories import apply_case, join_categories, render_component
from lognaming.config import (
    CategoryCase, NamingConfig, NamingOptions, load_naming_config,
)
from lognaming.errors import AmbiguousLevel, ConfigError, InvalidLevel, LevelError
from lognaming.forms import (
    ArgKind, Literal, ResolvedCall, classify_argument, resolve_logger_form,
)
from lognaming.frames import (
    NO_CONTEXT, CodeContext, Frame, FrameChain, FrameKind, LexicalContext,
    enclosing_names, frames_from_qualname,
)
from lognaming.levels import (
    DEFAULT_TABLE, MIN_LEVEL, UNSET_LEVEL, Level, LevelTable, level_name,
    parse_level,
)
from lognaming.namespaces import Namespace, namespace_of, shortest_name
from lognaming.symbols import Keyword, Symbol

__all__ = [
    "__version__", "__app_name__",
    "get_logger", "resolve_call",
    "apply_case", "join_categories", "render_component",
    "CategoryCase", "NamingConfig", "NamingOptions", "load_naming_config",
    "AmbiguousLevel", "ConfigError", "InvalidLevel", "LevelError",
    "ArgKind", "Literal", "ResolvedCall", "classify_argument",
    "resolve_logger_form",
    "NO_CONTEXT", "CodeContext", "Frame", "FrameChain", "FrameKind",
    "LexicalContext", "enclosing_names", "frames_from_qualname",
    "DEFAULT_TABLE", "MIN_LEVEL", "UNSET_LEVEL", "Level", "LevelTable",
    "level_name", "parse_level",
    "Namespace", "namespace_of", "shortest_name",
    "Keyword", "Symbol",
]
