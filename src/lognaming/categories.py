"""Category name rendering and joining.

A category name is the separator-joined string that identifies a
logger, e.g. ``app:db:pool``.  Joining is plain concatenation; a
component that itself contains the separator is not escaped.
"""

from typing import Iterable

from .config import CategoryCase
from .symbols import symbol_name


def apply_case(name: str, case: CategoryCase = CategoryCase.DEFAULT) -> str:
    """Case a symbolic name according to ``case``.

    DEFAULT folds names written entirely in upper case (``APP``) to lower
    case and leaves every other spelling alone.
    """
    if case is CategoryCase.UPPER:
        return name.upper()
    if case is CategoryCase.LOWER:
        return name.lower()
    if case is CategoryCase.PRESERVE:
        return name
    return name.lower() if name.isupper() else name


def apply_token_case(name: str, case: CategoryCase = CategoryCase.DEFAULT) -> str:
    """Case a name taken from an explicit keyword or symbol argument.

    Under DEFAULT the name is lower-cased outright (``Worker`` -> ``worker``);
    the other policies behave as in apply_case().
    """
    if case is CategoryCase.DEFAULT:
        return name.lower()
    return apply_case(name, case)


def render_component(component, case: CategoryCase = CategoryCase.DEFAULT) -> str:
    """Render one category component.

    Symbols and keywords are cased by policy; strings and any other
    values are used as written.
    """
    name = symbol_name(component)
    if name is None:
        return str(component)
    return apply_case(name, case)


def join_categories(separator: str, components: Iterable) -> str:
    """Join components with separator.

    Raises:
        ValueError: If there are no components.
    """
    parts = [str(c) for c in components]
    if not parts:
        raise ValueError("at least one category component is required")
    return separator.join(parts)
