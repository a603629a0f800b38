"""Shared utilities for mqstat."""
