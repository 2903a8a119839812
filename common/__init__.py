"""Shared constants, types and logging setup."""
