"""Async client for the bowling scoring service."""

__version__ = "0.1.0"
