from __future__ import annotations

import io
import logging
from pathlib import Path

from typer.testing import CliRunner

from lazutils import cli


def write_payload(root: Path, name: str, payload: bytes) -> Path:
    """Write `payload` to `root/name` and return the path."""

    dest = root / name
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_bytes(payload)
    return dest


def invoke(*args: str):
    """Run the lazutils CLI in-process and return the click result."""

    return CliRunner().invoke(cli.app, list(args))


def reset_lazutils_logger() -> None:
    """Drop handlers added by configure_logging so each test starts clean."""

    logger = logging.getLogger("lazutils")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


class FailingCloseHandle(io.BytesIO):
    """In-memory file whose close() reports an I/O error."""

    def close(self) -> None:
        super().close()
        raise OSError("simulated close failure")


class FailingSeekHandle(io.BytesIO):
    """In-memory file that cannot be seeked."""

    def seek(self, offset: int, whence: int = 0) -> int:
        raise OSError("simulated seek failure")


class ShortReadHandle(io.BytesIO):
    """In-memory file that reports a size but yields no bytes."""

    def readinto(self, buffer) -> int:  # type: ignore[override]
        return 0
