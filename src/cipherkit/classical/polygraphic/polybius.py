from __future__ import annotations

from typing import Optional

from cipherkit.classical.polygraphic.digraphs import normalize_text
from cipherkit.classical.polygraphic.keysquare import SIZE, PositionIndex, build_key_square
from cipherkit.core.errors import MalformedCiphertextError
from cipherkit.core.registry import register_plugin
from cipherkit.core.utils import chunked, strip_whitespace

_COORDS = "".join(str(i) for i in range(1, SIZE + 1))


def encrypt(plaintext: str, keyword: str = "") -> str:
    """Each letter becomes its 1-based row and column digits, e.g. H -> 23."""
    index = PositionIndex(build_key_square(keyword))
    out = []
    for ch in normalize_text(plaintext):
        r, c = index.locate(ch)
        out.append(f"{r + 1}{c + 1}")
    return "".join(out)


def decrypt(ciphertext: str, keyword: str = "") -> str:
    digits = strip_whitespace(ciphertext)
    if len(digits) % 2 != 0:
        raise MalformedCiphertextError("Polybius ciphertext must have an even number of digits.")

    index = PositionIndex(build_key_square(keyword))
    out = []
    for row, col in chunked(digits, 2):
        if row not in _COORDS or col not in _COORDS:
            raise MalformedCiphertextError(f"Bad coordinate pair '{row}{col}'. Use digits 1-{SIZE}.")
        out.append(index.letter_at(int(row) - 1, int(col) - 1))
    return "".join(out)


class PolybiusCipher:
    name = "polybius"
    needs_key = False

    def encrypt(self, plaintext: str, key: Optional[str]) -> str:
        # key is an optional keyword for a mixed square
        return encrypt(plaintext, key or "")

    def decrypt(self, ciphertext: str, key: Optional[str]) -> str:
        return decrypt(ciphertext, key or "")


register_plugin(PolybiusCipher())
