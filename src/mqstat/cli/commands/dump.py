"""Dump command for mqstat CLI.

Shows a hex dump of a captured message and its header read in both byte
orders. Used to find out which byte order a queue manager emits before
setting decoder.byte_order.
"""

from __future__ import annotations

__all__ = ["dump", "hex_dump", "guess_byte_order"]

from pathlib import Path

import click

from mqstat.constants import DEFAULT_DUMP_LENGTH, PCF_HEADER_LENGTH
from mqstat.models.wire import PCFHeader
from mqstat.pcf import decode_header
from mqstat.utils.file_helpers import read_message_file

from ..styling import style_dim, style_header, style_label

_BYTES_PER_LINE = 16


def hex_dump(data: bytes) -> str:
    """Format bytes as offset / hex / ASCII lines (16 bytes per line)."""
    lines = []
    for offset in range(0, len(data), _BYTES_PER_LINE):
        chunk = data[offset : offset + _BYTES_PER_LINE]
        left = " ".join(f"{b:02x}" for b in chunk[:8])
        right = " ".join(f"{b:02x}" for b in chunk[8:])
        text = "".join(chr(b) if 0x20 <= b < 0x7F else "." for b in chunk)
        lines.append(f"{offset:08x}  {left:<23}  {right:<23}  |{text}|")
    return "\n".join(lines)


def guess_byte_order(little: PCFHeader, big: PCFHeader) -> str | None:
    """Pick the byte order whose header declares the standard 36-byte length."""
    if little.struc_length == PCF_HEADER_LENGTH and big.struc_length != PCF_HEADER_LENGTH:
        return "little"
    if big.struc_length == PCF_HEADER_LENGTH and little.struc_length != PCF_HEADER_LENGTH:
        return "big"
    return None


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--length",
    "-n",
    type=click.IntRange(min=1),
    default=DEFAULT_DUMP_LENGTH,
    show_default=True,
    help="Number of bytes to hex dump",
)
def dump(file: Path, length: int) -> None:
    """Hex dump a captured message and analyze its PCF header.

    Header fields are shown read as big-endian and little-endian side by
    side. The order whose structure length is 36 is reported as likely.
    """
    data = read_message_file(file)

    click.echo(style_header(f"Message {file.name}"))
    click.echo(f"Length: {len(data)} bytes")
    click.echo()
    click.echo(f"Hex dump (first {min(length, len(data))} bytes):")
    click.echo(hex_dump(data[:length]))
    click.echo()

    if len(data) < PCF_HEADER_LENGTH:
        click.echo(style_dim(f"Too short for a PCF header ({PCF_HEADER_LENGTH} bytes needed)"))
        return

    big = decode_header(data, "big")
    little = decode_header(data, "little")

    click.echo(style_header("PCF Header Analysis"))
    click.echo(f"  {'Field':<18} {'BE':>12} {'LE':>12}")
    for name in PCFHeader.model_fields:
        click.echo(f"  {name:<18} {getattr(big, name):>12} {getattr(little, name):>12}")
    click.echo()

    likely = guess_byte_order(little, big)
    click.echo(style_label("Likely byte order") + f" {likely or 'unknown'}")
