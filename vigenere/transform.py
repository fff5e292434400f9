"""Cipher transform: per-letter modular shift driven by a keystream."""

from .cipher_api import CHAR_SPACE, LengthMismatch, Mode, ascii_upper, is_letter

_UPPER_BASE = ord("A")
_LOWER_BASE = ord("a")


def _shift(ch: str, k: str, mode: Mode) -> str:
    m = ord(ascii_upper(ch)) - _UPPER_BASE
    # Non-letter key characters still yield a shift from their raw code.
    s = (ord(k) - _UPPER_BASE) % CHAR_SPACE
    if mode is Mode.ENCRYPT:
        c = (m + s) % CHAR_SPACE
    else:
        c = (m - s + CHAR_SPACE) % CHAR_SPACE
    base = _UPPER_BASE if "A" <= ch <= "Z" else _LOWER_BASE
    return chr(c + base)


def transform(message: str, keystream: str, mode: Mode) -> str:
    """Encrypt or decrypt `message` with a keystream of the same length.

    Non-alphabetic characters are copied through unchanged and their
    keystream slot is ignored. Letters keep their original case.

    Raises:
        LengthMismatch: if message and keystream lengths differ.
        TypeError: if mode is not a Mode member.
    """
    if not isinstance(mode, Mode):
        raise TypeError("mode must be a Mode member")
    if len(message) != len(keystream):
        raise LengthMismatch(
            f"message has {len(message)} characters but keystream has {len(keystream)}"
        )

    return "".join(
        _shift(ch, k, mode) if is_letter(ch) else ch
        for ch, k in zip(message, keystream)
    )
