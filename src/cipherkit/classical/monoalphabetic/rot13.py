from __future__ import annotations

from typing import Optional

from cipherkit.core.registry import register_plugin
from cipherkit.classical.common import shift_text

ROTATION = 13


def rot13(text: str) -> str:
    """Rotate letters by 13; applying it twice gives the input back."""
    return shift_text(text, ROTATION)


class Rot13Cipher:
    name = "rot13"
    needs_key = False

    def encrypt(self, plaintext: str, key: Optional[str]) -> str:
        # key unused; accepted for CLI consistency
        return rot13(plaintext)

    def decrypt(self, ciphertext: str, key: Optional[str]) -> str:
        return rot13(ciphertext)


register_plugin(Rot13Cipher())
