from __future__ import annotations

import logging
from typing import Optional

import typer

from cipherkit.classical import register_all
from cipherkit.core.errors import CipherError
from cipherkit.core.registry import decrypt_known, encrypt_known, list_plugins
from cipherkit.logging_config import setup_logging

app = typer.Typer(help="cipherkit: classical cipher encode/decode tools.")


@app.callback()
def _init(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug details to stderr."),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write logs to this file."),
):
    setup_logging(logging.DEBUG if verbose else logging.WARNING, log_file=log_file)
    # Register plugins exactly once per CLI run
    register_all()


@app.command()
def plugins():
    """List all registered cipher plugins."""
    for name in list_plugins():
        typer.echo(name)


@app.command()
def encrypt(
    cipher: str = typer.Option(..., "--cipher", "-c", help="Cipher plugin name (e.g., playfair, vigenere)."),
    key: Optional[str] = typer.Option(None, "--key", "-k", help="Key material for the cipher."),
    text: str = typer.Argument(..., help="Plaintext to encrypt."),
):
    """Encrypt text with a named cipher."""
    try:
        ct = encrypt_known(cipher, text, key)
    except CipherError as e:
        raise typer.BadParameter(str(e))
    typer.echo(ct)


@app.command()
def decrypt(
    cipher: str = typer.Option(..., "--cipher", "-c", help="Cipher plugin name (e.g., playfair, vigenere)."),
    key: Optional[str] = typer.Option(None, "--key", "-k", help="Key material for the cipher."),
    text: str = typer.Argument(..., help="Ciphertext to decrypt."),
):
    """Decrypt when you already know the cipher type and have the key."""
    try:
        pt = decrypt_known(cipher, text, key)
    except CipherError as e:
        raise typer.BadParameter(str(e))
    typer.echo(pt)


@app.command()
def square(keyword: str = typer.Argument(..., help="Keyword for the 5x5 key square.")):
    """Show the Playfair/Polybius key square for a keyword."""
    from cipherkit.classical.polygraphic.keysquare import build_key_square

    typer.echo(str(build_key_square(keyword)))


@app.command()
def keygen(length: int = typer.Argument(..., min=1, help="Key length in bytes.")):
    """Print a random one-time-pad key as hex."""
    from cipherkit.classical.stream.otp import generate_key

    typer.echo(generate_key(length).hex())


def main():
    app()


if __name__ == "__main__":
    main()
