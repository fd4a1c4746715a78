import pytest

from cipherkit.classical import register_all
from cipherkit.core.errors import InvalidKeyError, UnknownCipherError
from cipherkit.core.registry import decrypt_known, encrypt_known, get_plugin, list_plugins

ALL = ["affine", "caesar", "otp", "playfair", "polybius", "porta", "rot13", "vigenere"]


@pytest.fixture(autouse=True)
def _plugins():
    register_all()


def test_all_ciphers_registered():
    assert list_plugins() == ALL


def test_lookup_is_case_insensitive():
    assert get_plugin(" PlayFair ").name == "playfair"


def test_encrypt_and_decrypt_known():
    assert encrypt_known("playfair", "HIDE THE GOLD", "PLAYFAIR") == "EBIMQMGHVRCZ"
    assert decrypt_known("caesar", "Khoor", "3") == "Hello"


def test_keyless_cipher_accepts_missing_key():
    assert encrypt_known("rot13", "Hello", None) == "Uryyb"


def test_keyed_cipher_requires_key():
    with pytest.raises(InvalidKeyError):
        decrypt_known("vigenere", "RIJVS", None)


def test_unknown_cipher():
    with pytest.raises(UnknownCipherError) as exc:
        encrypt_known("enigma", "abc", "x")
    assert "playfair" in str(exc.value)
