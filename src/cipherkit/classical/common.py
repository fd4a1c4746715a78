from __future__ import annotations

from typing import Callable, Tuple

from cipherkit.core.errors import InvalidKeyError

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
A_ORD = ord("A")


def letter_index(ch: str) -> int:
    return ord(ch) - A_ORD


def shift_char(ch: str, shift: int) -> str:
    """Shift one A-Z character by 'shift' (can be negative)."""
    idx = (ord(ch) - A_ORD + shift) % 26
    return chr(A_ORD + idx)


def map_letters(text: str, fn: Callable[[str, int], str]) -> str:
    """
    Apply fn(upper_letter, letter_number) to every A-Z letter of text.

    letter_number counts letters only, so keyed ciphers can advance their key
    without being disturbed by spaces or punctuation. Non-letters pass through
    and the original case of each letter is kept.
    """
    out = []
    j = 0
    for ch in text:
        up = ch.upper()
        if len(up) == 1 and "A" <= up <= "Z":
            mapped = fn(up, j)
            out.append(mapped if ch.isupper() else mapped.lower())
            j += 1
        else:
            out.append(ch)
    return "".join(out)


def shift_text(text: str, shift: int) -> str:
    """Caesar shift; preserves non-letters; preserves case."""
    return map_letters(text, lambda up, _: shift_char(up, shift))


def egcd(a: int, b: int) -> Tuple[int, int, int]:
    if a == 0:
        return (b, 0, 1)
    g, y, x = egcd(b % a, a)
    return (g, x - (b // a) * y, y)


def modinv(a: int, m: int) -> int:
    """Modular inverse of a under mod m; raises InvalidKeyError if none."""
    a %= m
    g, x, _ = egcd(a, m)
    if g != 1:
        raise InvalidKeyError(f"No modular inverse for a={a} mod {m}.")
    return x % m


def parse_int(key: str, what: str) -> int:
    try:
        return int(key.strip())
    except (AttributeError, ValueError) as e:
        raise InvalidKeyError(f"{what} key must be an integer.") from e


def parse_two_ints(key: str) -> tuple[int, int]:
    """
    Parse keys like: "5,8" or "5:8" or "5 8"
    Returns (a, b).
    """
    raw = key.strip().replace(":", ",").replace(" ", ",")
    parts = [p for p in raw.split(",") if p]
    if len(parts) != 2:
        raise InvalidKeyError("Expected key format like 'a,b' (e.g., '5,8').")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError as e:
        raise InvalidKeyError(f"Key parts must be integers, got {key!r}.") from e
