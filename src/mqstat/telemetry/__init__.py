"""Operational telemetry (system logging) for mqstat."""
