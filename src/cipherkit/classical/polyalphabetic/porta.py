"""
Porta cipher.

Thirteen reciprocal alphabets, one per key letter pair (AB, CD, ..., YZ).
A key pair with index k swaps the two halves of the alphabet with an offset:

    plain A-M (p < 13)   -> 13 + (p + k) mod 13
    plain N-Z (p >= 13)  -> (p - 13 - k) mod 13

Every letter lands in the opposite half, so applying the same key twice
returns the plaintext and encryption and decryption are one operation.
"""
from __future__ import annotations

from cipherkit.core.errors import InvalidKeyError
from cipherkit.core.registry import register_plugin
from cipherkit.core.utils import normalize_az
from cipherkit.classical.common import A_ORD, letter_index, map_letters

HALF = 13


def _porta_char(up: str, k: int) -> str:
    p = letter_index(up)
    if p < HALF:
        return chr(A_ORD + HALF + (p + k) % HALF)
    return chr(A_ORD + (p - HALF - k) % HALF)


def _porta(text: str, key: str) -> str:
    k = normalize_az(key)
    if not k:
        raise InvalidKeyError("Porta key must contain at least one A-Z letter.")
    pairs = [letter_index(ch) // 2 for ch in k]
    return map_letters(text, lambda up, j: _porta_char(up, pairs[j % len(pairs)]))


def encrypt(plaintext: str, key: str) -> str:
    return _porta(plaintext, key)


def decrypt(ciphertext: str, key: str) -> str:
    return _porta(ciphertext, key)


class PortaCipher:
    name = "porta"
    needs_key = True

    def encrypt(self, plaintext: str, key: str) -> str:
        return encrypt(plaintext, key)

    def decrypt(self, ciphertext: str, key: str) -> str:
        return decrypt(ciphertext, key)


register_plugin(PortaCipher())
