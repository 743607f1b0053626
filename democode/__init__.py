"""Validated parsing and logging samples."""
