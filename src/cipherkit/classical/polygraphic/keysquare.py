"""
5x5 key square shared by the Playfair and Polybius ciphers.

The square holds the 25-letter alphabet (J folded into I). A keyword is
written in first, without repeats, followed by the unused letters in
alphabetical order:

    keyword "PLAYFAIR"

        P L A Y F
        I R B C D
        E G H K M
        N O Q S T
        U V W X Z
"""
from __future__ import annotations

from dataclasses import dataclass

from cipherkit.core.errors import CharacterNotInGridError

SIZE = 5
ALPHABET_25 = "ABCDEFGHIKLMNOPQRSTUVWXYZ"
MERGED_LETTER = "J"
MERGED_INTO = "I"

_MEMBERS = frozenset(ALPHABET_25)


def merge_letters(text: str) -> str:
    """Uppercase and fold J into I. Every caller that feeds the square uses this."""
    # Only ASCII is case-folded; 'ß' -> 'SS' or 'ı' -> 'I' would invent letters.
    upper = "".join(ch.upper() if ch.isascii() else ch for ch in text)
    return upper.replace(MERGED_LETTER, MERGED_INTO)


def is_member(ch: str) -> bool:
    return ch in _MEMBERS


@dataclass(frozen=True)
class KeySquare:
    rows: tuple[tuple[str, ...], ...]

    def __post_init__(self) -> None:
        if len(self.rows) != SIZE or any(len(r) != SIZE for r in self.rows):
            raise ValueError(f"Key square must be {SIZE}x{SIZE}.")
        if sorted(self.letters) != sorted(ALPHABET_25):
            raise ValueError("Key square must be a permutation of the 25-letter alphabet.")

    @property
    def letters(self) -> str:
        """Cells in row-major order."""
        return "".join("".join(r) for r in self.rows)

    def at(self, row: int, col: int) -> str:
        return self.rows[row][col]

    def __str__(self) -> str:
        return "\n".join(" ".join(r) for r in self.rows)


def build_key_square(keyword: str) -> KeySquare:
    seen: set[str] = set()
    ordered: list[str] = []

    for ch in merge_letters(keyword or ""):
        if is_member(ch) and ch not in seen:
            seen.add(ch)
            ordered.append(ch)

    ordered.extend(ch for ch in ALPHABET_25 if ch not in seen)

    rows = tuple(tuple(ordered[i:i + SIZE]) for i in range(0, SIZE * SIZE, SIZE))
    return KeySquare(rows=rows)


class PositionIndex:
    """Letter <-> (row, col) lookups for one key square."""

    def __init__(self, square: KeySquare) -> None:
        self.square = square
        self._positions: dict[str, tuple[int, int]] = {}
        for r, row in enumerate(square.rows):
            for c, ch in enumerate(row):
                self._positions[ch] = (r, c)

    def locate(self, ch: str) -> tuple[int, int]:
        try:
            return self._positions[ch]
        except KeyError:
            raise CharacterNotInGridError(ch) from None

    def letter_at(self, row: int, col: int) -> str:
        return self.square.at(row, col)
