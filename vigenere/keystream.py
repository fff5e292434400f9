"""Keystream generator.

Expands the key so it lines up with the letters of the message. Positions
holding non-alphabetic characters get the inert sentinel and do not consume
a key letter, so:

    message:   HELLO WORLD
    key:       KEY
    keystream: KEYKE YKEYK
"""

from .cipher_api import INERT, InvalidKey, ascii_upper, is_letter


def generate_keystream(message: str, key: str) -> str:
    """Return a keystream of len(message) characters for `key`."""
    if not key:
        raise InvalidKey("key must not be empty")

    key_len = len(key)
    out = []
    offset = 0
    for i, ch in enumerate(message):
        if not is_letter(ch):
            out.append(INERT)
            offset += 1
        else:
            out.append(ascii_upper(key[(i - offset) % key_len]))
    return "".join(out)
