"""Shared utilities for structured text processing."""
