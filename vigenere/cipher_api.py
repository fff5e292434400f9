"""Core types and errors for the Vigenere cipher engine."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union
import string

# Keystream slot for a non-alphabetic message character; never applied as a shift.
INERT = " "

# Size of the alphabet the shifts wrap around in.
CHAR_SPACE = 26

ASCII_LETTERS = frozenset(string.ascii_letters)


class VigenereError(Exception):
    """Base class for all errors raised by the cipher engine."""


class InvalidKey(VigenereError, ValueError):
    """Raised when the key cannot drive a keystream (it is empty)."""


class LengthMismatch(VigenereError, ValueError):
    """Raised when message, keystream or output lengths disagree.

    The keystream generator guarantees equal lengths by construction, so
    this signals a programming error rather than bad user input.
    """


class UsageError(VigenereError):
    """Raised for malformed command-line input such as an unknown mode."""


def is_letter(ch: str) -> bool:
    """Return True only for ASCII A-Z / a-z."""
    return ch in ASCII_LETTERS


def ascii_upper(ch: str) -> str:
    """Uppercase an ASCII letter; any other character is returned as-is.

    str.upper() is not used because it can change the length of non-ASCII
    characters (e.g. 'ß' -> 'SS').
    """
    if "a" <= ch <= "z":
        return chr(ord(ch) - 32)
    return ch


class Mode(Enum):
    """Direction of the transformation."""

    ENCRYPT = 0
    DECRYPT = 1

    @classmethod
    def from_flag(cls, value: Union[str, int]) -> "Mode":
        """Map the CLI mode token (0 = encrypt, 1 = decrypt) to a Mode."""
        if isinstance(value, cls):
            return value
        token = str(value)
        if token == "0":
            return cls.ENCRYPT
        if token == "1":
            return cls.DECRYPT
        raise UsageError(f"mode must be 0 (encrypt) or 1 (decrypt), got {value!r}")


@dataclass(frozen=True)
class CipherRequest:
    """One encrypt/decrypt invocation: the message, the key and the direction."""

    message: str
    key: str
    mode: Mode = Mode.ENCRYPT

    def __post_init__(self):
        if not isinstance(self.mode, Mode):
            raise TypeError("mode must be a Mode member")
        if not self.key:
            raise InvalidKey("key must not be empty")


@dataclass(frozen=True)
class CipherResult:
    """Outcome of running a CipherRequest through the engine.

    Observability field:
      - time_ms: duration of keystream generation plus transform in milliseconds
    """

    request: CipherRequest
    keystream: str
    output: str
    time_ms: Optional[float] = None

    def __post_init__(self):
        n = len(self.request.message)
        if len(self.keystream) != n or len(self.output) != n:
            raise LengthMismatch(
                f"message={n} keystream={len(self.keystream)} output={len(self.output)}"
            )


def serialize_result(result: CipherResult) -> Dict[str, Any]:
    """Serialize a CipherResult into a JSON-compatible dict.

    The key is deliberately left out; the keystream already shows how it was applied.
    """
    return {
        "mode": result.request.mode.name.lower(),
        "message": result.request.message,
        "keystream": result.keystream,
        "output": result.output,
        "time_ms": result.time_ms,
    }
