"""Structured text bidi processing package.

This package provides the engine that makes structured text mixing
left-to-right and right-to-left scripts display correctly.
"""

__version__ = "0.1.0"
