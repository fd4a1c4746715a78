from __future__ import annotations

import logging
from typing import Optional

from cipherkit.classical.polygraphic.keysquare import is_member, merge_letters
from cipherkit.config import DEFAULT_SETTINGS, PlayfairSettings
from cipherkit.core.errors import NoValidCharactersError

logger = logging.getLogger(__name__)

Digraph = tuple[str, str]


def normalize_text(text: str) -> str:
    """
    Uppercase, fold J into I, and drop everything outside the 25-letter alphabet.

    Spaces are dropped too: they have no cell in the square, so pairs are
    formed across word boundaries.
    """
    return "".join(ch for ch in merge_letters(text) if is_member(ch))


def segment(stream: str, settings: Optional[PlayfairSettings] = None) -> list[Digraph]:
    """
    Split a normalized stream into digraphs.

    A doubled letter gets a filler after its first occurrence and the second
    occurrence starts the next pair. An odd final letter is padded with a
    filler. The filler is settings.pad, or settings.alt_pad when the letter
    being padded is settings.pad itself.

        segment("HELLO") -> [("H", "E"), ("L", "X"), ("L", "O")]
    """
    settings = settings or DEFAULT_SETTINGS
    digraphs: list[Digraph] = []
    i = 0
    n = len(stream)

    while i < n:
        first = stream[i]
        if i + 1 >= n:
            digraphs.append((first, settings.filler_for(first)))
            break

        candidate = stream[i + 1]
        if candidate == first:
            filler = settings.filler_for(first)
            logger.debug("Doubled %s at %d, inserting %s", first, i, filler)
            digraphs.append((first, filler))
            i += 1
        else:
            digraphs.append((first, candidate))
            i += 2

    if not digraphs:
        raise NoValidCharactersError("No valid characters in the input text.")
    return digraphs
