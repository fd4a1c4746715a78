"""
Key square construction and position lookups.
Run with:  python -m pytest tests/ -v
"""
import pytest

from cipherkit.classical.polygraphic.keysquare import (
    ALPHABET_25,
    KeySquare,
    PositionIndex,
    build_key_square,
    merge_letters,
)
from cipherkit.core.errors import CharacterNotInGridError

KEYWORDS = ["", "PLAYFAIR", "playfair example", "JIJI", "1234 !?", "ZZZZZZ", "the quick brown fox jumps"]


# ── Grid builder ──────────────────────────────────────────────────────────────
@pytest.mark.parametrize("keyword", KEYWORDS)
def test_square_is_permutation_of_alphabet(keyword):
    sq = build_key_square(keyword)
    assert len(sq.rows) == 5
    assert all(len(r) == 5 for r in sq.rows)
    assert sorted(sq.letters) == sorted(ALPHABET_25)
    assert len(set(sq.letters)) == 25


@pytest.mark.parametrize("keyword", KEYWORDS)
def test_square_build_is_idempotent(keyword):
    assert build_key_square(keyword) == build_key_square(keyword)


def test_playfair_keyword_layout():
    sq = build_key_square("PLAYFAIR")
    assert sq.rows == (
        ("P", "L", "A", "Y", "F"),
        ("I", "R", "B", "C", "D"),
        ("E", "G", "H", "K", "M"),
        ("N", "O", "Q", "S", "T"),
        ("U", "V", "W", "X", "Z"),
    )


def test_empty_or_invalid_keyword_gives_canonical_square():
    assert build_key_square("").letters == ALPHABET_25
    assert build_key_square("123 !!").letters == ALPHABET_25


def test_non_adjacent_duplicates_are_removed():
    # A repeats with other letters in between
    assert build_key_square("ABRACADABRA").letters.startswith("ABRCD")


def test_j_in_keyword_merges_into_i():
    sq = build_key_square("JUMP")
    assert sq.letters.startswith("IUMP")
    assert "J" not in sq.letters


def test_merge_letters_uppercases_and_folds_j():
    assert merge_letters("jolly Jig") == "IOLLY IIG"


def test_non_ascii_keyword_letters_are_ignored():
    assert build_key_square("ßı").letters == ALPHABET_25


def test_str_renders_rows():
    assert str(build_key_square("")).splitlines()[0] == "A B C D E"


def test_key_square_rejects_non_permutation():
    rows = tuple(tuple("AAAAA") for _ in range(5))
    with pytest.raises(ValueError):
        KeySquare(rows=rows)


# ── Position index ────────────────────────────────────────────────────────────
def test_locate_and_letter_at_are_inverse():
    idx = PositionIndex(build_key_square("MONARCHY"))
    for ch in ALPHABET_25:
        r, c = idx.locate(ch)
        assert idx.letter_at(r, c) == ch


def test_locate_known_positions():
    idx = PositionIndex(build_key_square("PLAYFAIR"))
    assert idx.locate("P") == (0, 0)
    assert idx.locate("H") == (2, 2)
    assert idx.locate("Z") == (4, 4)


@pytest.mark.parametrize("bad", ["J", "1", " ", ".", "a"])
def test_locate_outside_grid_raises(bad):
    idx = PositionIndex(build_key_square("PLAYFAIR"))
    with pytest.raises(CharacterNotInGridError) as exc:
        idx.locate(bad)
    assert exc.value.char == bad
