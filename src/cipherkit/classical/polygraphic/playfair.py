from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from cipherkit.classical.polygraphic.digraphs import Digraph, normalize_text, segment
from cipherkit.classical.polygraphic.keysquare import SIZE, PositionIndex, build_key_square
from cipherkit.config import PlayfairSettings
from cipherkit.core.errors import EmptyInputError
from cipherkit.core.registry import register_plugin

logger = logging.getLogger(__name__)


class Mode(Enum):
    # value is the row/column step taken in the square
    ENCRYPT = 1
    DECRYPT = -1


def transform_digraph(index: PositionIndex, digraph: Digraph, mode: Mode) -> Digraph:
    """
    Apply the Playfair rules to one pair:

      - same row:    each letter moves one column (right to encrypt, left to decrypt)
      - same column: each letter moves one row (down to encrypt, up to decrypt)
      - otherwise:   the letters take each other's column (the rectangle rule,
                     which is its own inverse)
    """
    r1, c1 = index.locate(digraph[0])
    r2, c2 = index.locate(digraph[1])
    step = mode.value

    if r1 == r2:
        return (
            index.letter_at(r1, (c1 + step) % SIZE),
            index.letter_at(r2, (c2 + step) % SIZE),
        )

    if c1 == c2:
        return (
            index.letter_at((r1 + step) % SIZE, c1),
            index.letter_at((r2 + step) % SIZE, c2),
        )

    return index.letter_at(r1, c2), index.letter_at(r2, c1)


def _playfair(mode: Mode, keyword: str, text: str, settings: Optional[PlayfairSettings]) -> str:
    if not keyword or not text:
        raise EmptyInputError("Keyword and text cannot be empty.")

    index = PositionIndex(build_key_square(keyword))
    logger.debug("Key square for %r:\n%s", keyword, index.square)

    digraphs = segment(normalize_text(text), settings)
    logger.debug("%s %d digraphs", mode.name.lower(), len(digraphs))

    return "".join(a + b for a, b in (transform_digraph(index, d, mode) for d in digraphs))


def encode(keyword: str, text: str, settings: Optional[PlayfairSettings] = None) -> str:
    """
    Encrypt text with the Playfair square built from keyword.

    Raises EmptyInputError if either argument is empty and
    NoValidCharactersError if text has no letters.
    """
    return _playfair(Mode.ENCRYPT, keyword, text, settings)


def decode(keyword: str, text: str, settings: Optional[PlayfairSettings] = None) -> str:
    """
    Decrypt text with the Playfair square built from keyword.

    Fillers inserted during encryption are left in place; only well-formed
    plaintext survives an exact round trip.
    """
    return _playfair(Mode.DECRYPT, keyword, text, settings)


class PlayfairCipher:
    name = "playfair"
    needs_key = True

    def encrypt(self, plaintext: str, key: str) -> str:
        return encode(key, plaintext)

    def decrypt(self, ciphertext: str, key: str) -> str:
        return decode(key, ciphertext)


register_plugin(PlayfairCipher())
