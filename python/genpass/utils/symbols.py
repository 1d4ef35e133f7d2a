"""
Built-in symbol groups.
"""

import string
from typing import Dict, FrozenSet, NamedTuple, Tuple

from ..exceptions import UnknownGroupError


class SymbolGroup(NamedTuple):
    """A named, fixed set of symbols that can be toggled as a whole."""

    name: str
    symbols: str


LATIN_UPPER = SymbolGroup("latin-upper", string.ascii_uppercase)
LATIN_LOWER = SymbolGroup("latin-lower", string.ascii_lowercase)
DIGITS = SymbolGroup("digits", string.digits)
SPECIAL = SymbolGroup("special", "`~!@#$%^&*()-_=+[]{}\\|;:'\",<.>/?")

# Declaration order is the order groups are added to an alphabet
BUILTIN_GROUPS: Tuple[SymbolGroup, ...] = (LATIN_UPPER, LATIN_LOWER, DIGITS, SPECIAL)

GROUP_NAMES: FrozenSet[str] = frozenset(group.name for group in BUILTIN_GROUPS)

GROUP_ALIASES: Dict[str, Tuple[str, ...]] = {
    "latin": (LATIN_UPPER.name, LATIN_LOWER.name),
}


def get_group(name: str) -> SymbolGroup:
    """
    Look up a built-in group by name.

    Args:
        name: Group name, e.g. "digits"

    Returns:
        The matching SymbolGroup

    Raises:
        UnknownGroupError: If no built-in group has that name
    """
    for group in BUILTIN_GROUPS:
        if group.name == name:
            return group
    raise UnknownGroupError(name)


def expand_group_names(names) -> FrozenSet[str]:
    """Resolve aliases such as "latin" into the concrete group names."""
    resolved = set()
    for name in names:
        if name in GROUP_ALIASES:
            resolved.update(GROUP_ALIASES[name])
        elif name in GROUP_NAMES:
            resolved.add(name)
        else:
            raise UnknownGroupError(name)
    return frozenset(resolved)


def format_symbols(symbols) -> str:
    """Render a set of symbols as a sorted string."""
    return "".join(sorted(set(symbols)))
