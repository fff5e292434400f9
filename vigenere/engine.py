"""Vigenere cipher engine."""

from typing import Dict, IO, Optional
import datetime
import json
import logging
import time
import traceback

from .cipher_api import CipherRequest, CipherResult, Mode
from .keystream import generate_keystream
from .transform import transform


class _JSONFormatter(logging.Formatter):
    """Render log records as single-line JSON objects (JSONL)."""

    def format(self, record):
        try:
            rec = {
                "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
                "level": record.levelname,
                "logger": record.name,
                "message": record.getMessage(),
            }
            for k in ("mode", "length", "time_ms"):
                if hasattr(record, k):
                    rec[k] = getattr(record, k)
            if record.exc_info:
                rec["exc"] = "".join(traceback.format_exception(*record.exc_info))
            return json.dumps(rec, ensure_ascii=False)
        except Exception:
            return super().format(record)


class Engine:
    """Runs the keystream generator and the cipher transform for a request."""

    def __init__(self):
        # Map of configured handler target -> handler to avoid duplicate handlers across calls
        self._log_handlers: Dict[str, logging.Handler] = {}
        self.logger = logging.getLogger("vigenere.engine")

    def configure_logging(self, log_level: str = "WARNING", log_path: Optional[str] = None,
                          stream: Optional[IO[str]] = None) -> None:
        """Configure logging for the package.

        - Respect `log_level` (default WARNING); unknown names fall back to WARNING.
        - If `stream` is given, attach a plain-text StreamHandler writing to it.
        - If `log_path` is given, attach a FileHandler that writes JSONL log records.
        Handlers are only added once per target, repeated calls just update their level.
        """
        level_no = getattr(logging, str(log_level).upper(), None)
        if not isinstance(level_no, int):
            level_no = logging.WARNING

        root_logger = logging.getLogger()
        root_logger.setLevel(level_no)

        targets = []
        if stream is not None:
            targets.append((f"stream:{id(stream)}", lambda: logging.StreamHandler(stream),
                            logging.Formatter("%(levelname)s %(name)s: %(message)s")))
        if log_path:
            targets.append((log_path, lambda: logging.FileHandler(log_path, encoding="utf-8"),
                            _JSONFormatter()))

        for name, factory, formatter in targets:
            existing = self._log_handlers.get(name)
            if existing:
                existing.setLevel(level_no)
                continue
            handler = factory()
            handler.setLevel(level_no)
            handler.setFormatter(formatter)
            root_logger.addHandler(handler)
            self._log_handlers[name] = handler

    def close(self) -> None:
        """Detach and close every handler this engine attached."""
        root_logger = logging.getLogger()
        for handler in self._log_handlers.values():
            root_logger.removeHandler(handler)
            handler.close()
        self._log_handlers.clear()

    def run(self, request: CipherRequest) -> CipherResult:
        """Generate the keystream for `request` and apply the transform.

        Only lengths and the mode are logged; the key and message text never are.
        """
        t0 = time.perf_counter()

        keystream = generate_keystream(request.message, request.key)
        self.logger.debug("keystream_generated", extra={"length": len(keystream)})

        output = transform(request.message, keystream, request.mode)
        duration_ms = (time.perf_counter() - t0) * 1000.0
        self.logger.debug("transform_applied",
                          extra={"mode": request.mode.name, "length": len(output), "time_ms": duration_ms})

        return CipherResult(request=request, keystream=keystream, output=output, time_ms=duration_ms)

    def process(self, message: str, key: str, mode: Mode = Mode.ENCRYPT) -> CipherResult:
        """Convenience wrapper building the CipherRequest from plain values."""
        return self.run(CipherRequest(message=message, key=key, mode=mode))


_default_engine: Optional[Engine] = None


def _engine() -> Engine:
    global _default_engine
    if _default_engine is None:
        _default_engine = Engine()
    return _default_engine


def encrypt(message: str, key: str) -> str:
    """Encrypt `message` with `key` and return the ciphertext."""
    return _engine().process(message, key, Mode.ENCRYPT).output


def decrypt(message: str, key: str) -> str:
    """Decrypt `message` with `key` and return the plaintext."""
    return _engine().process(message, key, Mode.DECRYPT).output

