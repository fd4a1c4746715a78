"""
Cipher settings
===============
Central place for the tunable constants of the digraph cipher.

Exports:
    PlayfairSettings: filler letters used by the digraph segmenter.
    DEFAULT_SETTINGS: the textbook choice, 'X' with 'Q' as the alternate.
"""
from __future__ import annotations

from dataclasses import dataclass

from cipherkit.classical.polygraphic.keysquare import ALPHABET_25
from cipherkit.core.errors import InvalidSettingsError

DEFAULT_PAD = "X"
DEFAULT_ALT_PAD = "Q"


@dataclass(frozen=True)
class PlayfairSettings:
    # Filler inserted between doubled letters and after an odd final letter.
    pad: str = DEFAULT_PAD
    # Used instead of 'pad' when the letter needing a partner is 'pad' itself.
    alt_pad: str = DEFAULT_ALT_PAD

    def __post_init__(self) -> None:
        for label, value in (("pad", self.pad), ("alt_pad", self.alt_pad)):
            if not isinstance(value, str) or len(value) != 1 or value not in ALPHABET_25:
                raise InvalidSettingsError(
                    f"{label} must be a single letter from {ALPHABET_25}, got {value!r}."
                )
        if self.pad == self.alt_pad:
            raise InvalidSettingsError("pad and alt_pad must differ.")

    def filler_for(self, letter: str) -> str:
        return self.alt_pad if letter == self.pad else self.pad


DEFAULT_SETTINGS = PlayfairSettings()
