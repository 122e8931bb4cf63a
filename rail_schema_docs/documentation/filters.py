"""
Filtering policy separating user definitions from built-in schema noise.
"""

from collections.abc import Iterable

SPEC_DIRECTIVES = frozenset({"skip", "include", "deprecated"})
BUILTIN_SCALARS = frozenset({"String", "Boolean", "Int", "Float", "ID"})
INTROSPECTION_PREFIX = "__"


def is_spec_directive(name: str) -> bool:
    return name in SPEC_DIRECTIVES


def is_user_directive(name: str) -> bool:
    return not is_spec_directive(name)


def is_introspection_type(name: str) -> bool:
    return name.startswith(INTROSPECTION_PREFIX)


def is_builtin_scalar(name: str) -> bool:
    return name in BUILTIN_SCALARS


def is_user_type(name: str) -> bool:
    return not is_introspection_type(name) and not is_builtin_scalar(name)


def type_sort_key(name: str) -> tuple[str, str]:
    # Case-insensitive first; on ties lowercase sorts before uppercase
    return (name.casefold(), name.swapcase())


def sort_type_names(names: Iterable[str]) -> list[str]:
    """Order type names for listing, independently of their input order."""
    return sorted(names, key=type_sort_key)
