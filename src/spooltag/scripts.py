# filename : scripts.py
# created  : 10/19/2026


import logging
import time

import click

from spooltag.app.display import (
    format_chip,
    format_colors,
    format_materials,
    format_specs,
    format_status,
    format_write,
)
from spooltag.app.service import ChipService
from spooltag.core.errors import ChipError
from spooltag.core.smartcard.logging import configure
from spooltag.core.spool import AuthKey, ChipConfig, SectorAddress
from spooltag.core.spool.config import KEY_TYPE_A, KEY_TYPE_B

lg = logging.getLogger(__name__)

_KEY_TYPES = {"A": KEY_TYPE_A, "B": KEY_TYPE_B}


def _parse_key(ctx, param, value):
    try:
        return AuthKey.from_hex(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


@click.group(context_settings={"auto_envvar_prefix": "SPOOLTAG"})
@click.option("-v", "--verbose", is_flag=True, help="TRACE level (show raw APDUs).")
@click.option(
    "--key",
    default="FFFFFFFFFFFF",
    show_default=True,
    callback=_parse_key,
    help="Sector key, 6 bytes hex.",
)
@click.option("--key-type", type=click.Choice(["A", "B"], case_sensitive=False), default="A", show_default=True)
@click.option("--sector", type=click.IntRange(0, 15), default=1, show_default=True)
@click.option("--block", type=click.IntRange(0, 2), default=0, show_default=True, help="Block within the sector.")
@click.pass_context
def spooltag(ctx, verbose, key, key_type, sector, block):
    """Read and write spool identity chips through a PC/SC reader."""
    configure(verbose)
    config = ChipConfig(
        key=key,
        address=SectorAddress(sector, block),
        key_type=_KEY_TYPES[key_type.upper()],
    )
    ctx.obj = ChipService(config)


@spooltag.command()
@click.pass_obj
def status(service):
    """Show reader and card presence."""
    click.echo(format_status(service.probe_status()))


@spooltag.command()
@click.pass_obj
def read(service):
    """Read material, color and manufacturer from the chip."""
    try:
        data = service.read_chip()
    except ChipError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(format_chip(data))


@spooltag.command()
@click.argument("material", type=int)
@click.argument("color", type=int)
@click.option("-m", "--manufacturer", type=int, default=None, help="Manufacturer code (default 1).")
@click.pass_obj
def write(service, material, color, manufacturer):
    """Write MATERIAL and COLOR codes to the chip."""
    try:
        result = service.write_chip(material, color, manufacturer)
    except ChipError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(format_write(result))


@spooltag.command()
@click.option("-i", "--interval", type=click.FloatRange(min=0.1), default=5.0, show_default=True, help="Seconds between polls.")
@click.option("-n", "--count", type=click.IntRange(min=1), default=None, help="Stop after this many polls.")
@click.pass_obj
def watch(service, interval, count):
    """Poll reader and card status until interrupted."""
    polls = 0
    last = None
    try:
        while count is None or polls < count:
            if polls:
                time.sleep(interval)
            current = format_status(service.probe_status())
            if current != last:
                click.echo(current)
                click.echo()
                last = current
            polls += 1
    except KeyboardInterrupt:
        pass


@spooltag.command()
def materials():
    """List material codes."""
    click.echo(format_materials())


@spooltag.command()
def colors():
    """List color codes."""
    click.echo(format_colors())


@spooltag.command()
def specs():
    """Show the chip's radio characteristics."""
    click.echo(format_specs())


@spooltag.command()
@click.option(
    "-f",
    "--file",
    "file",
    type=click.Path(exists=True),
    default=None,
    help="Run commands from a file.",
)
@click.pass_obj
def shell(service, file):
    """Interactive shell, or run a command file."""
    from spooltag.app.main import main

    if not main(service, file=file):
        raise click.ClickException("command file failed")
