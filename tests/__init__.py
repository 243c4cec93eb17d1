"""Structured text test suite."""
