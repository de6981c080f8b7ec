"""Pydantic models describing lazutils configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from lazutils.io.loader import MAX_FILE_SIZE


class LoggingConfig(BaseModel):
    """Diagnostic output settings."""

    model_config = ConfigDict(extra="allow")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_path: Optional[Path] = None
    stream: Literal["stderr", "stdout"] = "stderr"


class HashingConfig(BaseModel):
    """Defaults for FNV-1a digests produced by the CLI."""

    model_config = ConfigDict(extra="allow")

    width: Literal[32, 64] = 64
    output: Literal["hex", "decimal"] = "hex"


class LoaderConfig(BaseModel):
    """Limits applied when loading files into memory."""

    model_config = ConfigDict(extra="allow")

    max_file_size: int = Field(default=MAX_FILE_SIZE, ge=1, le=MAX_FILE_SIZE)


class LazUtilsConfig(BaseModel):
    """Root configuration object."""

    model_config = ConfigDict(extra="allow")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    hashing: HashingConfig = Field(default_factory=HashingConfig)
    loader: LoaderConfig = Field(default_factory=LoaderConfig)


__all__ = [
    "HashingConfig",
    "LazUtilsConfig",
    "LoaderConfig",
    "LoggingConfig",
]
