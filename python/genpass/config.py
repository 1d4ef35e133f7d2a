"""
Generator configuration.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

from .exceptions import InvalidLengthError
from .utils.symbols import expand_group_names

DEFAULT_LENGTH = 24


@dataclass(frozen=True)
class GeneratorConfig:
    """Options for a single password generation run."""

    length: int = DEFAULT_LENGTH
    disabled_groups: FrozenSet[str] = field(default_factory=frozenset)
    allow: Tuple[str, ...] = ()
    deny: Tuple[str, ...] = ()
    copy_to_clipboard: bool = False
    verbose: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.length, bool) or not isinstance(self.length, int) or self.length < 1:
            raise InvalidLengthError(self.length)

        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "disabled_groups", expand_group_names(self.disabled_groups))
        object.__setattr__(self, "allow", tuple(self.allow))
        object.__setattr__(self, "deny", tuple(self.deny))
