"""Spool chip commands.

Each ``cmd_*`` function becomes a shell command named without the prefix.
The first argument is the runner; the return value tells whether the
command succeeded.
"""

from __future__ import annotations

import logging

from spooltag.app.display import (
    format_chip,
    format_colors,
    format_materials,
    format_specs,
    format_status,
    format_write,
)
from spooltag.core.errors import ChipError

lg = logging.getLogger(__name__)


def cmd_status(runner) -> bool:
    """Show reader and card presence."""
    status = runner._service.probe_status()
    lg.info("status:\n%s", format_status(status))
    return status.error is None


def cmd_read(runner) -> bool:
    """Read material, color and manufacturer from the chip."""
    try:
        data = runner._service.read_chip()
    except ChipError as exc:
        lg.error("read failed: %s", exc)
        return False
    lg.info("chip:\n%s", format_chip(data))
    return True


def cmd_write(runner, *, material: int, color: int, manufacturer: int | None = None) -> bool:
    """Write material, color and optional manufacturer (default 1) to the chip."""
    try:
        result = runner._service.write_chip(material, color, manufacturer)
    except ChipError as exc:
        lg.error("write failed: %s", exc)
        return False
    lg.info("%s", format_write(result))
    return True


def cmd_materials(runner) -> bool:
    """List material codes."""
    lg.info("materials:\n%s", format_materials())
    return True


def cmd_colors(runner) -> bool:
    """List color codes."""
    lg.info("colors:\n%s", format_colors())
    return True


def cmd_specs(runner) -> bool:
    """Show the chip's radio characteristics."""
    lg.info("RFID specs:\n%s", format_specs())
    return True
