"""Vigenere - classical polyalphabetic cipher command-line utility."""

__version__ = "0.1.0"

# Expose a package-level logger so modules can call:
#   from vigenere import logger
#   logger.debug("...")
# The Engine configures handlers (e.g. JSONL FileHandler) when run with a `log_path`.
import logging
logger = logging.getLogger("vigenere")
# Provide a NullHandler by default to avoid "No handler found" warnings if not configured.
logger.addHandler(logging.NullHandler())

from .cipher_api import (
    CipherRequest,
    CipherResult,
    InvalidKey,
    LengthMismatch,
    Mode,
    UsageError,
    VigenereError,
)
from .keystream import generate_keystream
from .transform import transform
from .engine import Engine, encrypt, decrypt

__all__ = [
    "CipherRequest",
    "CipherResult",
    "Engine",
    "InvalidKey",
    "LengthMismatch",
    "Mode",
    "UsageError",
    "VigenereError",
    "decrypt",
    "encrypt",
    "generate_keystream",
    "logger",
    "transform",
]
