"""Human-readable formatting of chip results and catalogs."""

from __future__ import annotations

from spooltag.app.catalog import COLORS, MATERIALS, RFID_SPECS
from spooltag.core.spool import ChipData, ProbeResult, WriteChipResult


def _material(code: int) -> str:
    name = MATERIALS.get(code)
    return f"{code} ({name})" if name else f"{code} (unknown)"


def _color(code: int) -> str:
    color = COLORS.get(code)
    return f"{code} ({color.name} {color.hex})" if color else f"{code} (unknown)"


def format_status(status: ProbeResult) -> str:
    lines = [
        f"  Reader:       {'connected' if status.connected else 'disconnected'}",
        f"  Reader name:  {status.reader_name or '-'}",
    ]
    if status.connected:
        lines.append(f"  Card:         {'present' if status.card_present else 'none'}")
    if status.error:
        lines.append(f"  Error:        {status.detail or status.error}")
    return "\n".join(lines)


def format_chip(data: ChipData) -> str:
    return "\n".join([
        f"  UID:          {data.uid.upper() if data.uid else '-'}",
        f"  Material:     {_material(data.material_code)}",
        f"  Color:        {_color(data.color_code)}",
        f"  Manufacturer: {data.manufacturer_code}",
    ])


def format_write(result: WriteChipResult) -> str:
    return (
        f"written: {result.confirmation} "
        f"[{MATERIALS.get(result.material_code, '?')}, "
        f"{COLORS[result.color_code].name if result.color_code in COLORS else '?'}]"
    )


def format_materials() -> str:
    return "\n".join(f"  {code:3d}  {name}" for code, name in MATERIALS.items())


def format_colors() -> str:
    return "\n".join(
        f"  {code:3d}  {color.hex}  {color.name}" for code, color in COLORS.items()
    )


def format_specs() -> str:
    return "\n".join([
        f"  Protocol:     {RFID_SPECS.protocol}",
        f"  Frequency:    {RFID_SPECS.frequency}",
        f"  Baud rate:    {RFID_SPECS.baud_rate}",
        f"  Distance:     {RFID_SPECS.operating_distance}",
        f"  Encryption:   {RFID_SPECS.encryption}",
    ])
