"""Command-line interface for mqstat.

Provides commands for decoding captured PCF messages, inspecting raw
message bytes, and managing configuration.
"""

from .main import cli, main

__all__ = ["cli", "main"]
