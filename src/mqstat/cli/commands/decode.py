"""Decode command for mqstat CLI.

Decodes captured PCF messages (one message per file) and prints one JSON
document per line.
"""

from __future__ import annotations

__all__ = ["decode"]

import json
import sys
from pathlib import Path

import click

from mqstat.pcf import PCFDecoder, decode_batch, record_samples
from mqstat.telemetry.system import get_system_logger
from mqstat.utils.file_helpers import read_message_file

from ..helpers import init_logging, load_cli_config
from ..styling import style_error


@click.command()
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--byte-order",
    type=click.Choice(["little", "big"]),
    default=None,
    help="Wire byte order (overrides config)",
)
@click.option(
    "--message-type",
    default=None,
    help="Record type for unrecognized commands (overrides config)",
)
@click.option("--samples", is_flag=True, help="Print metric samples instead of records")
@click.pass_context
def decode(
    ctx: click.Context,
    files: tuple[Path, ...],
    byte_order: str | None,
    message_type: str | None,
    samples: bool,
) -> None:
    """Decode captured PCF statistics/accounting messages.

    Each FILE holds one complete message. Output is JSON Lines on stdout,
    one line per decoded message. Undecodable messages are logged and
    skipped; the exit code is 1 if any were skipped.

    \b
    Examples:
      mqstat decode msg-0001.bin
      mqstat decode --byte-order big --samples captures/*.bin
    """
    config = load_cli_config(ctx)
    init_logging(config)
    logger = get_system_logger()

    decoder = PCFDecoder(
        logger=logger,
        byte_order=byte_order or config.decoder.byte_order,
    )
    try:
        messages = [read_message_file(path) for path in files]
    except OSError as e:
        click.echo(style_error(f"Error: Failed to read message file: {e}"), err=True)
        sys.exit(1)

    result = decode_batch(
        decoder,
        messages,
        message_type=message_type or config.decoder.message_type,
        default_queue_manager=config.decoder.default_queue_manager,
    )

    for index, record in zip(result.record_indices, result.records):
        entry: dict[str, object] = {"file": str(files[index])}
        if samples:
            entry["samples"] = [
                sample._asdict()
                for sample in record_samples(
                    record,
                    default_queue_manager=config.decoder.default_queue_manager or "",
                    namespace=config.export.namespace,
                )
            ]
        else:
            entry["record"] = record.model_dump(mode="json")
        click.echo(json.dumps(entry))

    logger.info(
        {
            "event": "decode_completed",
            "message": (
                f"Decoded {len(result.records)} of {result.total} message(s) "
                f"({result.statistics_count} statistics, {result.accounting_count} accounting, "
                f"{result.dropped_count} dropped)"
            ),
            **result.to_dict(),
        }
    )

    if result.dropped_count:
        sys.exit(1)
