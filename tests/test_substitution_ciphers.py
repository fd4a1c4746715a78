"""
Caesar, ROT13, Affine, Vigenère and Porta.
"""
import pytest

from cipherkit.classical.monoalphabetic import affine, caesar
from cipherkit.classical.monoalphabetic.rot13 import rot13
from cipherkit.classical.polyalphabetic import porta, vigenere
from cipherkit.core.errors import InvalidKeyError


# ── Caesar ────────────────────────────────────────────────────────────────────
def test_caesar_encrypt():
    assert caesar.encrypt("Hello", 3) == "Khoor"


def test_caesar_decrypt():
    assert caesar.decrypt("Khoor", 3) == "Hello"


def test_caesar_keeps_punctuation():
    ct = caesar.encrypt("Hello, World!", 3)
    assert ct == "Khoor, Zruog!"
    assert caesar.decrypt(ct, 3) == "Hello, World!"


def test_caesar_large_and_negative_keys():
    assert caesar.encrypt("abc", 29) == "def"
    assert caesar.encrypt("abc", -1) == "zab"


def test_caesar_plugin_rejects_non_integer_key():
    with pytest.raises(InvalidKeyError):
        caesar.CaesarCipher().encrypt("hi", "three")


# ── ROT13 ─────────────────────────────────────────────────────────────────────
def test_rot13():
    assert rot13("Hello, World!") == "Uryyb, Jbeyq!"


def test_rot13_is_its_own_inverse():
    assert rot13(rot13("The Quick Brown Fox")) == "The Quick Brown Fox"


# ── Affine ────────────────────────────────────────────────────────────────────
def test_affine_encrypt():
    assert affine.encrypt("affine cipher", 5, 8) == "ihhwvc swfrcp"


def test_affine_decrypt():
    assert affine.decrypt("IHHWVC SWFRCP", 5, 8) == "AFFINE CIPHER"


@pytest.mark.parametrize("a", [2, 13, 26])
def test_affine_rejects_non_coprime_a(a):
    with pytest.raises(InvalidKeyError):
        affine.encrypt("abc", a, 1)
    with pytest.raises(InvalidKeyError):
        affine.decrypt("abc", a, 1)


@pytest.mark.parametrize("key", ["5,8", "5:8", "5 8"])
def test_affine_plugin_key_formats(key):
    assert affine.AffineCipher().encrypt("affine", key) == "ihhwvc"


def test_affine_plugin_bad_key():
    with pytest.raises(InvalidKeyError):
        affine.AffineCipher().decrypt("abc", "5")


# ── Vigenère ──────────────────────────────────────────────────────────────────
def test_vigenere_encrypt():
    assert vigenere.encrypt("HELLO", "KEY") == "RIJVS"


def test_vigenere_decrypt():
    assert vigenere.decrypt("RIJVS", "KEY") == "HELLO"


def test_vigenere_key_advances_on_letters_only():
    ct = vigenere.encrypt("He llo!", "key")
    assert ct == "Ri jvs!"
    assert vigenere.decrypt(ct, "key") == "He llo!"


def test_vigenere_empty_key():
    with pytest.raises(InvalidKeyError):
        vigenere.encrypt("HELLO", "123")


# ── Porta ─────────────────────────────────────────────────────────────────────
def test_porta_known_vector():
    ct = porta.encrypt("DEFENDTHEEASTWALLOFTHECASTLE", "FORTIFICATION")
    assert ct == "SYNNJSCVRNRLAHUTUKUCVRYRLANY"


def test_porta_is_reciprocal():
    ct = porta.encrypt("Defend the east wall!", "FORTIFICATION")
    assert porta.decrypt(ct, "FORTIFICATION") == "Defend the east wall!"
    assert porta.encrypt(ct, "FORTIFICATION") == "Defend the east wall!"


def test_porta_empty_key():
    with pytest.raises(InvalidKeyError):
        porta.decrypt("abc", "")
