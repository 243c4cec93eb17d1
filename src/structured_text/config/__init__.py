"""Configuration module for structured text processing."""

from structured_text.config.base import Settings
from structured_text.config.loader import get_settings

__all__ = ["Settings", "get_settings"]
