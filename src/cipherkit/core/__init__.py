from .errors import (
    CharacterNotInGridError,
    CipherError,
    EmptyInputError,
    InvalidKeyError,
    NoValidCharactersError,
)
from .registry import register_plugin, list_plugins, encrypt_known, decrypt_known

__all__ = [
    "CipherError",
    "EmptyInputError",
    "NoValidCharactersError",
    "CharacterNotInGridError",
    "InvalidKeyError",
    "register_plugin",
    "list_plugins",
    "encrypt_known",
    "decrypt_known",
]
