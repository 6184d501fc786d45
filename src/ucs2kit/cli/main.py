"""Typer-based command line interface for ucs2kit."""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import structlog
import typer

from ..config import AppConfig, dump_default_config, load_config
from ..logging import configure_logging
from ..paths import runtime_config_dir
from ..precompose import compose_pairs, precompose
from ..transcoder import char_count, decode_utf8, encode_utf8_be
from ..utils.byteorder import pack_units
from ..utils.units import terminate

app = typer.Typer(help="UTF-8 / UCS2 transcoding tools")
logger = structlog.get_logger(__name__)


@app.callback()
def main(ctx: typer.Context, config: Optional[Path] = typer.Option(None, "--config", metavar="PATH")) -> None:
    try:
        ctx.obj = load_config(config)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc
    configure_logging(ctx.obj.logging.normalized_level())


def _format_units(units: List[int]) -> str:
    return " ".join(f"{unit:04X}" for unit in units)


def _parse_code_point(value: str) -> int:
    text = value.strip()
    if text[:2].upper() in {"U+", "0X"}:
        text = text[2:]
    try:
        return int(text, 16)
    except ValueError as exc:
        raise typer.BadParameter(f"Not a hexadecimal code point: {value}") from exc


@app.command()
def decode(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, readable=True),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Write big-endian UCS2 here"),
    apply_precompose: Optional[bool] = typer.Option(None, "--precompose/--no-precompose", help="Combine base + mark pairs"),
) -> None:
    """Decode a UTF-8 file into UCS2."""
    config: AppConfig = ctx.obj
    settings = config.transcode
    if apply_precompose is None:
        apply_precompose = settings.precompose
    units = decode_utf8(path.read_bytes())
    if apply_precompose:
        units = compose_pairs(units)
    if settings.terminate:
        units = terminate(units)
    logger.info("cli.decode", path=str(path), units=len(units))
    if output is None:
        typer.echo(_format_units(units))
        return
    output.write_bytes(pack_units(units))
    typer.echo(f"UCS2 output written to {output}")


@app.command()
def encode(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, readable=True),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Write UTF-8 here"),
) -> None:
    """Encode a big-endian UCS2 file as UTF-8."""
    config: AppConfig = ctx.obj
    settings = config.transcode
    try:
        encoded = encode_utf8_be(path.read_bytes())
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc
    if settings.terminate:
        encoded = terminate(encoded)
    logger.info("cli.encode", path=str(path), size=len(encoded))
    if output is None:
        typer.echo(encoded, nl=False)
        return
    output.write_bytes(encoded)
    typer.echo(f"UTF-8 output written to {output}")


@app.command()
def count(path: Path = typer.Argument(..., exists=True, readable=True)) -> None:
    """Count UTF-8 characters up to the first terminator or malformed lead byte."""
    typer.echo(str(char_count(path.read_bytes())))


@app.command()
def compose(first: str = typer.Argument(...), second: str = typer.Argument(...)) -> None:
    """Look up the precomposed form of two hexadecimal code points."""
    try:
        combined = precompose(_parse_code_point(first), _parse_code_point(second))
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc
    if combined is None:
        typer.echo("no composition", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"U+{combined:04X}")


@app.command()
def init_config(
    destination: Optional[Path] = typer.Option(None, "--destination", help="Where to write the default config"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Write the default configuration as YAML."""
    target = destination or runtime_config_dir() / "config.yaml"
    if target.exists() and not force:
        typer.echo(f"Config already exists at {target}", err=True)
        raise typer.Exit(code=1)
    dump_default_config(target)
    typer.echo(f"Default config written to {target}")


@app.command()
def version() -> None:
    from ..version import __version__

    typer.echo(__version__)


if __name__ == "__main__":  # pragma: no cover
    app()
