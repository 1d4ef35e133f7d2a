"""
Secure password generation utilities.
"""

import secrets
from typing import Iterable, Optional

from ..config import GeneratorConfig
from ..exceptions import EmptyAlphabetError, EntropySourceError, InvalidLengthError
from .alphabet import AlphabetObserver, build_alphabet
from .symbols import format_symbols


def generate_password(alphabet: Iterable[str], length: int, rng=None) -> str:
    """
    Draw a password uniformly at random from an alphabet.

    Args:
        alphabet: Symbols to draw from
        length: Number of symbols in the password
        rng: Object with a ``choice`` method (default: a fresh secrets.SystemRandom)

    Returns:
        Generated password string

    Raises:
        InvalidLengthError: If length is not positive
        EmptyAlphabetError: If the alphabet has no symbols
        EntropySourceError: If the operating system random source fails
    """
    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        raise InvalidLengthError(length)

    # Index into a stable ordering of the set
    charset = format_symbols(alphabet)
    if not charset:
        raise EmptyAlphabetError()

    if rng is None:
        rng = secrets.SystemRandom()

    try:
        return "".join(rng.choice(charset) for _ in range(length))
    except (OSError, NotImplementedError) as e:
        raise EntropySourceError(f"Unable to read from the system random source: {e}") from e


class PasswordGenerator:
    """Generate passwords from an alphabet built once from a configuration."""

    def __init__(self, config: GeneratorConfig,
                 observer: Optional[AlphabetObserver] = None):
        """
        Initialize password generator.

        Args:
            config: Generator configuration
            observer: Receives alphabet construction events

        Raises:
            EmptyUserSetError: If an allow or deny set is empty
            EmptyAlphabetError: If no symbols remain
        """
        self.config = config
        self.charset = format_symbols(build_alphabet(config, observer))

    def generate(self) -> str:
        """Generate a password of the configured length."""
        return generate_password(self.charset, self.config.length)
