"""Shared utilities for gitsemver."""

from gitsemver.utils._git import decode_bytes
from gitsemver.utils._logging import create_logger

__all__ = ["create_logger", "decode_bytes"]
