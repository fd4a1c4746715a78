from __future__ import annotations

from cipherkit.core.registry import register_plugin
from cipherkit.classical.common import parse_int, shift_text


def encrypt(plaintext: str, key: int) -> str:
    return shift_text(plaintext, key % 26)


def decrypt(ciphertext: str, key: int) -> str:
    # Decrypt means shift backwards by key
    return shift_text(ciphertext, -(key % 26))


class CaesarCipher:
    name = "caesar"
    needs_key = True

    def encrypt(self, plaintext: str, key: str) -> str:
        return encrypt(plaintext, parse_int(key, "Caesar"))

    def decrypt(self, ciphertext: str, key: str) -> str:
        return decrypt(ciphertext, parse_int(key, "Caesar"))


register_plugin(CaesarCipher())
