"""
Alphabet construction from built-in groups and user allow/deny sets.

The order of the steps is observable through the observer hooks:
built-in groups in catalog order, then allow sets, then deny sets.
"""

import logging
from typing import Iterable, Optional, Set

from ..config import GeneratorConfig
from ..exceptions import EmptyAlphabetError, EmptyUserSetError, InvalidSymbolError
from .symbols import BUILTIN_GROUPS, SymbolGroup, format_symbols

logger = logging.getLogger(__name__)


class AlphabetObserver:
    """Receives alphabet construction events. All hooks are no-ops by default."""

    def group_added(self, group: SymbolGroup) -> None:
        pass

    def symbols_allowed(self, symbols: str) -> None:
        pass

    def symbols_denied(self, symbols: str) -> None:
        pass

    def alphabet_built(self, alphabet: Set[str]) -> None:
        pass


class LoggingObserver(AlphabetObserver):
    """Writes one debug line per construction step."""

    def group_added(self, group: SymbolGroup) -> None:
        logger.debug(f"Add symbols {format_symbols(group.symbols)} ({group.name})")

    def symbols_allowed(self, symbols: str) -> None:
        logger.debug(f"Add symbols {format_symbols(symbols)}")

    def symbols_denied(self, symbols: str) -> None:
        logger.debug(f"Remove symbols {format_symbols(symbols)}")

    def alphabet_built(self, alphabet: Set[str]) -> None:
        logger.debug(f"Symbols to use: {format_symbols(alphabet)}")


def _is_surrogate(symbol: str) -> bool:
    return "\ud800" <= symbol <= "\udfff"


def _ensure_valid(sets: Iterable[str], option: str) -> None:
    for symbols in sets:
        if not symbols:
            raise EmptyUserSetError(option)
        # Undecodable argv bytes arrive as lone surrogates
        if any(_is_surrogate(symbol) for symbol in symbols):
            raise InvalidSymbolError(option)


def build_alphabet(config: GeneratorConfig,
                   observer: Optional[AlphabetObserver] = None) -> Set[str]:
    """
    Build the set of symbols a password may be drawn from.

    Args:
        config: Generator configuration
        observer: Receives an event per construction step (default: LoggingObserver)

    Returns:
        Non-empty set of single code point strings

    Raises:
        EmptyUserSetError: If an allow or deny set is empty
        InvalidSymbolError: If an allow or deny set holds a lone surrogate
        EmptyAlphabetError: If no symbols remain
    """
    if observer is None:
        observer = LoggingObserver()

    _ensure_valid(config.allow, "allow")
    _ensure_valid(config.deny, "deny")

    symbols: Set[str] = set()

    for group in BUILTIN_GROUPS:
        if group.name in config.disabled_groups:
            continue
        symbols.update(group.symbols)
        observer.group_added(group)

    for allowed in config.allow:
        symbols.update(allowed)
        observer.symbols_allowed(allowed)

    # Deny takes precedence over groups and allow sets
    for denied in config.deny:
        symbols.difference_update(denied)
        observer.symbols_denied(denied)

    if not symbols:
        raise EmptyAlphabetError()

    observer.alphabet_built(symbols)

    if len(symbols) == 1:
        logger.warning("There is only one symbol available for password generation")

    return symbols
