"""CLI subcommands for mqstat."""
