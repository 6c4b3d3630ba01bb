"""Naming configuration for lognaming.

Category separator and case policy are looked up per namespace through
a NamingConfig that callers pass to the resolver explicitly.

Three-layer config resolution (highest priority wins):
  1. Explicit overrides passed to load_naming_config()
  2. Project config: .lognaming.json, found walking up from a directory
  3. Global config: ~/.lognaming/config.json

Example .lognaming.json::

    {
      "category-separator": ".",
      "namespaces": {
        "myapp.db": {"category-case": "lower"}
      },
      "diagnostics": {"threshold": "warn", "channels": ["resolve:debug"]}
    }
"""

import json
import os
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from .diagnostics import get_diagnostics, trace
from .errors import ConfigError
from .levels import Level
from .namespaces import Namespace


PROJECT_CONFIG_NAME = ".lognaming.json"

OPTION_KEYS = ('category_separator', 'category_case')


class CategoryCase(Enum):
    """How symbolic names are cased when rendered into a category name."""
    UPPER = 'upper'
    LOWER = 'lower'
    PRESERVE = 'preserve'
    DEFAULT = 'default'

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        # "readtable" is accepted as another spelling of the ambient default
        if text in ('readtable', 'readtable-default'):
            return cls.DEFAULT
        try:
            return cls(text)
        except ValueError:
            choices = ', '.join(c.value for c in cls)
            raise ConfigError(
                f"unknown category case {value!r} (expected one of: {choices})"
            ) from None


@dataclass(frozen=True)
class NamingOptions:
    """Options used when rendering one namespace's category names."""
    category_separator: str = ':'
    category_case: CategoryCase = CategoryCase.DEFAULT

    def __post_init__(self):
        sep = self.category_separator
        if not isinstance(sep, str) or len(sep) != 1:
            raise ConfigError(
                f"category separator must be a single character, got {sep!r}"
            )
        object.__setattr__(self, 'category_case',
                           CategoryCase.parse(self.category_case))


class NamingConfig:
    """Per-namespace naming options with defaults.

    Overrides are keyed by namespace name.  An override for ``myapp``
    also applies to ``myapp.db``; when several match, the longer name
    wins key by key.
    """

    def __init__(self, defaults: Optional[NamingOptions] = None,
                 namespaces: Optional[Dict[str, Dict[str, Any]]] = None,
                 diagnostics: Optional[Dict[str, Any]] = None):
        self.defaults = defaults or NamingOptions()
        self.namespaces: Dict[str, Dict[str, Any]] = {}
        for name, section in (namespaces or {}).items():
            self.namespaces[name] = _option_section(section)
            # Validate now rather than on first lookup
            replace(self.defaults, **self.namespaces[name])
        self.diagnostics: Dict[str, Any] = dict(diagnostics or {})

    def options_for(self, namespace) -> NamingOptions:
        """Return the effective options for a Namespace or namespace name."""
        name = namespace.name if isinstance(namespace, Namespace) else str(namespace)
        merged: Dict[str, Any] = {}
        for candidate in reversed(_dotted_parents(name)):
            merged.update(self.namespaces.get(candidate, {}))
        if not merged:
            return self.defaults
        return replace(self.defaults, **merged)

    def option(self, namespace, key: str):
        """Look up a single option (``category_separator`` or ``category_case``)."""
        key = key.replace('-', '_')
        if key not in OPTION_KEYS:
            raise ConfigError(f"unknown naming option {key!r}")
        return getattr(self.options_for(namespace), key)

    def __repr__(self):
        return (f"NamingConfig(defaults={self.defaults!r}, "
                f"namespaces={self.namespaces!r})")


def _dotted_parents(name: str):
    """``a.b.c`` -> ``['a.b.c', 'a.b', 'a']``."""
    parts = name.split('.')
    return ['.'.join(parts[:i]) for i in range(len(parts), 0, -1)]


def _option_section(section: Dict[str, Any]) -> Dict[str, Any]:
    """Normalize JSON keys (dash or underscore) and keep naming options only."""
    if not isinstance(section, dict):
        raise ConfigError(f"expected an object of naming options, got {section!r}")
    options = {}
    for key, value in section.items():
        arg_key = key.replace('-', '_')
        if arg_key in OPTION_KEYS:
            options[arg_key] = value
    return options


# ---------------------------------------------------------------------------
# Config file locations
# ---------------------------------------------------------------------------
def get_global_config_dir():
    """Return the global config directory (~/.lognaming/)."""
    return Path.home() / ".lognaming"


def get_global_config_path():
    """Return path to the global config file."""
    return get_global_config_dir() / "config.json"


def find_project_config(start_dir=None):
    """Walk up from start_dir looking for .lognaming.json.

    Returns the path if found, None otherwise.
    """
    current = Path(start_dir or os.getcwd()).resolve()
    for _ in range(20):  # safety limit
        candidate = current / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------
def load_json(path):
    """Load a JSON object from path, returning empty dict on error."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_global_config():
    """Load the global config file."""
    return load_json(get_global_config_path())


def load_project_config(start_dir=None):
    """Load the nearest .lognaming.json walking upward from start_dir."""
    path = find_project_config(start_dir)
    if path:
        return load_json(path), path
    return {}, None


def merge_layers(*layers):
    """Merge config dicts, later layers winning.

    Top-level options are replaced; the ``namespaces`` and ``diagnostics``
    sections are merged one entry deeper.
    """
    merged: Dict[str, Any] = {}
    for layer in layers:
        for key, value in layer.items():
            key = key.replace('-', '_')
            if key in ('namespaces', 'diagnostics') and isinstance(value, dict):
                section = dict(merged.get(key, {}))
                for sub_key, sub_value in value.items():
                    if (key == 'namespaces' and isinstance(sub_value, dict)
                            and isinstance(section.get(sub_key), dict)):
                        section[sub_key] = {**section[sub_key], **sub_value}
                    else:
                        section[sub_key] = sub_value
                merged[key] = section
            else:
                merged[key] = value
    return merged


def naming_config_from_dict(data: Dict[str, Any]) -> NamingConfig:
    """Build a NamingConfig from a (merged) config dict."""
    defaults = NamingOptions(**_option_section(data))
    return NamingConfig(
        defaults=defaults,
        namespaces=data.get('namespaces'),
        diagnostics=data.get('diagnostics'),
    )


@trace
def load_naming_config(start_dir=None, **overrides) -> NamingConfig:
    """Resolve naming config using three-layer precedence.

    Args:
        start_dir: Where to start looking for .lognaming.json (default: cwd).
        **overrides: Explicit values (``category_separator``,
            ``category_case``, ``namespaces``, ``diagnostics``); None values
            are ignored.

    Returns:
        NamingConfig built from global < project < explicit values.
    """
    global_cfg = load_global_config()
    project_cfg, project_path = load_project_config(start_dir)
    explicit = {k: v for k, v in overrides.items() if v is not None}

    merged = merge_layers(global_cfg, project_cfg, explicit)
    config = naming_config_from_dict(merged)
    get_diagnostics().emit(
        Level.DEBUG, "naming config: project={path} defaults={defaults}",
        channel='config', path=project_path, defaults=config.defaults,
    )
    return config


DEFAULT_CONFIG = NamingConfig()
