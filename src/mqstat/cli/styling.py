"""Terminal styling for mqstat CLI output.

Colors are dropped automatically when stdout is not a terminal, so piped
``decode`` output stays plain JSON.
"""

from __future__ import annotations

__all__ = [
    "style_dim",
    "style_error",
    "style_header",
    "style_label",
    "style_success",
]

import click


def style_header(title: str) -> str:
    """Section banner used by ``dump`` and ``config show``.

    Example:
        >>> click.echo(style_header("PCF Header Analysis"))
        --- PCF Header Analysis ---
    """
    return click.style(f"--- {title} ---", fg="cyan", bold=True)


def style_label(label: str) -> str:
    """Inline label such as ``Likely byte order:``."""
    return click.style(label + ":", fg="cyan", bold=True)


def style_success(message: str) -> str:
    return click.style("✓ " + message, fg="green")


def style_error(message: str) -> str:
    """Error line for stderr (config problems, unreadable files)."""
    return click.style("✗ " + message, fg="red")


def style_dim(message: str) -> str:
    """De-emphasized note, e.g. a buffer too short to analyze."""
    return click.style(message, dim=True)
