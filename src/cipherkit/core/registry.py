from __future__ import annotations

import logging
from typing import Optional, Protocol

from .errors import InvalidKeyError, UnknownCipherError

logger = logging.getLogger(__name__)


class CipherPlugin(Protocol):
    name: str
    needs_key: bool

    def encrypt(self, plaintext: str, key: Optional[str]) -> str:
        ...

    def decrypt(self, ciphertext: str, key: Optional[str]) -> str:
        ...


_PLUGINS: dict[str, CipherPlugin] = {}


def register_plugin(plugin: CipherPlugin) -> None:
    key = plugin.name.lower().strip()
    if not key:
        raise ValueError("Plugin must have a non-empty name.")
    if key in _PLUGINS:
        logger.debug("Replacing registered plugin %r", key)
    _PLUGINS[key] = plugin


def list_plugins() -> list[str]:
    return sorted(_PLUGINS.keys())


def get_plugin(cipher_name: str) -> CipherPlugin:
    name = cipher_name.lower().strip()
    if name not in _PLUGINS:
        raise UnknownCipherError(f"Unknown cipher '{cipher_name}'. Available: {', '.join(list_plugins())}")
    return _PLUGINS[name]


def _resolve(cipher_name: str, key: Optional[str]) -> CipherPlugin:
    plugin = get_plugin(cipher_name)
    if plugin.needs_key and key is None:
        raise InvalidKeyError(f"Cipher '{plugin.name}' requires --key.")
    return plugin


def encrypt_known(cipher_name: str, plaintext: str, key: Optional[str]) -> str:
    """Encrypt with a named cipher and the given key material."""
    plugin = _resolve(cipher_name, key)
    logger.debug("Encrypting %d chars with %s", len(plaintext), plugin.name)
    return plugin.encrypt(plaintext, key)


def decrypt_known(cipher_name: str, ciphertext: str, key: Optional[str]) -> str:
    """Decrypt when you already know the cipher type and have the key."""
    plugin = _resolve(cipher_name, key)
    logger.debug("Decrypting %d chars with %s", len(ciphertext), plugin.name)
    return plugin.decrypt(ciphertext, key)
