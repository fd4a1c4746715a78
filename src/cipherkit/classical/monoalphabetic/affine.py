from __future__ import annotations

import math

from cipherkit.core.errors import InvalidKeyError
from cipherkit.core.registry import register_plugin
from cipherkit.classical.common import A_ORD, letter_index, map_letters, modinv, parse_two_ints


def _check_a(a: int) -> None:
    if math.gcd(a, 26) != 1:
        raise InvalidKeyError(
            "Affine key 'a' must be coprime with 26 (e.g., 1,3,5,7,9,11,15,17,19,21,23,25)."
        )


def encrypt(plaintext: str, a: int, b: int) -> str:
    """E(x) = (a*x + b) mod 26."""
    _check_a(a)
    return map_letters(plaintext, lambda up, _: chr(A_ORD + (a * letter_index(up) + b) % 26))


def decrypt(ciphertext: str, a: int, b: int) -> str:
    """D(y) = a^-1 * (y - b) mod 26."""
    _check_a(a)
    inv = modinv(a, 26)
    return map_letters(ciphertext, lambda up, _: chr(A_ORD + (inv * (letter_index(up) - b)) % 26))


class AffineCipher:
    name = "affine"
    needs_key = True

    def encrypt(self, plaintext: str, key: str) -> str:
        a, b = parse_two_ints(key)
        return encrypt(plaintext, a, b)

    def decrypt(self, ciphertext: str, key: str) -> str:
        a, b = parse_two_ints(key)
        return decrypt(ciphertext, a, b)


register_plugin(AffineCipher())
