"""
Custom exceptions for genpass.
"""


class GenpassException(Exception):
    """Base exception for genpass."""

    pass


class InvalidLengthError(GenpassException):
    """Requested password length is not a positive integer."""

    def __init__(self, length: object):
        super().__init__(f"Password length must be a positive integer, got {length!r}")
        self.length = length


class UnknownGroupError(GenpassException):
    """Symbol group name is not part of the built-in catalog."""

    def __init__(self, name: str):
        super().__init__(f"Unknown symbol group: {name!r}")
        self.name = name


class EmptyUserSetError(GenpassException):
    """An allow or deny set was supplied without any symbols."""

    def __init__(self, option: str):
        super().__init__(f"Symbols set for --{option} can't be empty")
        self.option = option


class InvalidSymbolError(GenpassException):
    """An allow or deny set holds a code point that is not a unicode scalar value."""

    def __init__(self, option: str):
        super().__init__(f"Symbols set for --{option} is not valid unicode")
        self.option = option


class EmptyAlphabetError(GenpassException):
    """No symbols are left to generate a password with."""

    def __init__(self) -> None:
        super().__init__("No symbols are allowed to generate password with")


class EntropySourceError(GenpassException):
    """The operating system random source failed."""

    pass


class ClipboardError(GenpassException):
    """Storing the password to the clipboard failed."""

    pass
