"""Command-line entry points for lazutils."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from lazutils.config import ConfigError, LazUtilsConfig, load_config
from lazutils.io.loader import FileLoadError, load_bytes, load_file
from lazutils.util.hashing import fnv1a, hash32_cstring, hash64_cstring
from lazutils.util.logging import configure_logging
from lazutils.util.timing import get_nanoseconds

app = typer.Typer(add_completion=False, help="FNV-1a hashing and file loading utilities")

ConfigOption = typer.Option(None, "--config", "-c", help="Path to a YAML/TOML/JSON config file")
VerboseOption = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level")


def _setup(config_path: Optional[Path], verbose: bool) -> tuple[LazUtilsConfig, logging.Logger]:
    try:
        cfg = load_config(config_path)
    except ConfigError as exc:
        typer.echo(f"Config error: {exc}", err=True)
        raise typer.Exit(code=2) from exc

    stream = sys.stdout if cfg.logging.stream == "stdout" else sys.stderr
    logger = configure_logging(
        level="DEBUG" if verbose else cfg.logging.level,
        log_path=cfg.logging.log_path,
        stream=stream,
    )
    return cfg, logger


def _format_digest(value: int, *, width: int, output: str) -> str:
    if output == "decimal":
        return str(value)
    return f"{value:0{width // 4}x}"


@app.command("hash")
def hash_command(
    text: Optional[str] = typer.Argument(None, help="Literal text to hash (UTF-8)"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Hash the contents of this file"),
    width: Optional[int] = typer.Option(None, "--width", "-w", help="Digest width: 32 or 64"),
    cstring: bool = typer.Option(False, "--cstring", help="Stop at the first NUL byte"),
    decimal: bool = typer.Option(False, "--decimal", help="Print the digest in decimal"),
    config: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """Print the FNV-1a digest of TEXT or of a file's contents."""

    cfg, logger = _setup(config, verbose)
    if (text is None) == (file is None):
        typer.echo("Provide exactly one of TEXT or --file.", err=True)
        raise typer.Exit(code=2)

    bits = width if width is not None else cfg.hashing.width
    if bits not in (32, 64):
        typer.echo(f"Unsupported width {bits}; use 32 or 64.", err=True)
        raise typer.Exit(code=2)

    if file is not None:
        try:
            loaded = load_bytes(file, max_size=cfg.loader.max_file_size)
        except FileLoadError as exc:
            logger.error("unable to read file %s (%s)", exc.path, exc.reason)
            raise typer.Exit(code=1) from exc
        data = loaded[:-1]
    else:
        data = text.encode("utf-8")

    if cstring:
        digest = hash32_cstring(data) if bits == 32 else hash64_cstring(data)
    else:
        digest = fnv1a(data, width=bits)

    logger.debug("Hashed %d bytes at width %d", len(data), bits)
    output = "decimal" if decimal else cfg.hashing.output
    typer.echo(_format_digest(digest, width=bits, output=output))


@app.command()
def size(
    path: Path = typer.Argument(..., help="File to measure"),
    config: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """Print the bytes needed to load PATH, including the NUL terminator."""

    cfg, _ = _setup(config, verbose)
    required = load_file(path, max_size=cfg.loader.max_file_size)
    if required < 0:
        raise typer.Exit(code=1)
    typer.echo(str(required))


@app.command()
def now() -> None:
    """Print the current time in nanoseconds since the Unix epoch."""

    typer.echo(str(get_nanoseconds()))


def main() -> None:
    app()


__all__ = ["main", "app"]
