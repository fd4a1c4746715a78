from __future__ import annotations

from cipherkit.core.errors import InvalidKeyError
from cipherkit.core.registry import register_plugin
from cipherkit.core.utils import normalize_az
from cipherkit.classical.common import letter_index, map_letters, shift_char


def _key_shifts(key: str) -> list[int]:
    k = normalize_az(key)
    if not k:
        raise InvalidKeyError("Vigenère key must contain at least one A-Z letter.")
    return [letter_index(ch) for ch in k]


def _vigenere(text: str, key: str, direction: int) -> str:
    # The key only advances on letters, so spacing and punctuation don't shift it.
    shifts = _key_shifts(key)
    return map_letters(text, lambda up, j: shift_char(up, direction * shifts[j % len(shifts)]))


def encrypt(plaintext: str, key: str) -> str:
    return _vigenere(plaintext, key, 1)


def decrypt(ciphertext: str, key: str) -> str:
    return _vigenere(ciphertext, key, -1)


class VigenereCipher:
    name = "vigenere"
    needs_key = True

    def encrypt(self, plaintext: str, key: str) -> str:
        return encrypt(plaintext, key)

    def decrypt(self, ciphertext: str, key: str) -> str:
        return decrypt(ciphertext, key)


register_plugin(VigenereCipher())
