"""Utility functions for structured text processing.

Thin wrappers around a shared :class:`StructuredTextEngine`. Unlike the
engine methods they take the text right after the processor, with
``features``, ``environment`` and ``state`` as optional keywords. Calls
without an environment use the default read from the current settings.
"""

from functools import lru_cache
from typing import List, Optional

from .engine import StructuredTextEngine
from .environment import Environment
from .features import Features
from .processor import ProcessorContract
from .types import Direction, StateCell


@lru_cache()
def get_engine() -> StructuredTextEngine:
    """Get the shared engine instance."""
    return StructuredTextEngine()


def lean_to_full_text(
    processor: Optional[ProcessorContract],
    text: str,
    features: Optional[Features] = None,
    environment: Optional[Environment] = None,
    state: Optional[StateCell] = None,
) -> str:
    """Add directional formatting characters to a structured text."""
    return get_engine().lean_to_full_text(processor, features, environment, text, state)


def full_to_lean_text(
    processor: Optional[ProcessorContract],
    text: str,
    features: Optional[Features] = None,
    environment: Optional[Environment] = None,
    state: Optional[StateCell] = None,
) -> str:
    """Remove directional formatting characters added by lean_to_full_text."""
    return get_engine().full_to_lean_text(processor, features, environment, text, state)


def lean_bidi_char_offsets(
    processor: Optional[ProcessorContract],
    text: str,
    features: Optional[Features] = None,
    environment: Optional[Environment] = None,
    state: Optional[StateCell] = None,
) -> List[int]:
    """Lean positions before which marks are inserted."""
    return get_engine().lean_bidi_char_offsets(
        processor, features, environment, text, state
    )


def get_cur_direction(
    processor: Optional[ProcessorContract],
    text: str,
    features: Optional[Features] = None,
    environment: Optional[Environment] = None,
) -> Direction:
    """Get the base direction of a structured text."""
    return get_engine().get_cur_direction(processor, features, environment, text)
