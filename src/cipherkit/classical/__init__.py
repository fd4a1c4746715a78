from __future__ import annotations

def register_all() -> None:
    from .monoalphabetic import caesar, rot13, affine  # noqa: F401
    from .polyalphabetic import vigenere, porta  # noqa: F401
    from .polygraphic import playfair, polybius  # noqa: F401
    from .stream import otp  # noqa: F401
