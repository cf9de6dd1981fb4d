"""Shared utilities: logging setup and user-facing error messages."""
