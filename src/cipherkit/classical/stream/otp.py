from __future__ import annotations

import secrets

from cipherkit.core.errors import InvalidKeyError, KeyLengthError, MalformedCiphertextError
from cipherkit.core.registry import register_plugin


def generate_key(length: int) -> bytes:
    """Random key bytes from the OS CSPRNG, one per byte of message."""
    if length < 0:
        raise ValueError("Key length must be non-negative.")
    return secrets.token_bytes(length)


def _xor(data: bytes, key: bytes) -> bytes:
    if len(data) != len(key):
        raise KeyLengthError(
            f"The lengths of the data ({len(data)}) and the key ({len(key)}) do not match."
        )
    return bytes(a ^ b for a, b in zip(data, key))


def encrypt(plaintext: str, key: bytes) -> bytes:
    return _xor(plaintext.encode("utf-8"), key)


def decrypt(ciphertext: bytes, key: bytes) -> bytes:
    # XOR is its own inverse
    return _xor(ciphertext, key)


def _from_hex(s: str, what: str) -> bytes:
    try:
        return bytes.fromhex(s.strip())
    except ValueError as e:
        if what == "key":
            raise InvalidKeyError("One-time pad key must be hex.") from e
        raise MalformedCiphertextError("One-time pad ciphertext must be hex.") from e


class OneTimePadCipher:
    """Registry adapter: key and ciphertext travel as hex strings."""

    name = "otp"
    needs_key = True

    def encrypt(self, plaintext: str, key: str) -> str:
        return encrypt(plaintext, _from_hex(key, "key")).hex()

    def decrypt(self, ciphertext: str, key: str) -> str:
        raw = decrypt(_from_hex(ciphertext, "ciphertext"), _from_hex(key, "key"))
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidKeyError("Decrypted bytes are not UTF-8; wrong key?") from e


register_plugin(OneTimePadCipher())
