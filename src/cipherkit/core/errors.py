from __future__ import annotations


class CipherError(ValueError):
    """Base class for every failure raised by a cipher in this package."""


class EmptyInputError(CipherError):
    """Keyword or text was empty before any processing happened."""


class NoValidCharactersError(CipherError):
    """Normalization removed every character from the input."""


class CharacterNotInGridError(CipherError):
    def __init__(self, char: str) -> None:
        super().__init__(f"Character {char!r} is not in the key square.")
        self.char = char


class InvalidKeyError(CipherError):
    pass


class KeyLengthError(InvalidKeyError):
    pass


class InvalidSettingsError(CipherError):
    pass


class MalformedCiphertextError(CipherError):
    pass


class UnknownCipherError(CipherError):
    pass
