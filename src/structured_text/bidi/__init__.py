"""
Structured Text Bidi Support.

This module adds directional formatting characters to structured text
(paths, source code, e-mail addresses, queries) mixing left-to-right and
right-to-left scripts, removes them again, and maps offsets between the
two forms.
"""

from .classifier import DirectionalPropertyClassifier, DirProps
from .engine import StructuredTextEngine
from .environment import Environment
from .features import DEFAULT_FEATURES, Features
from .offsets import MarkOffsets
from .processor import ProcessorContract, SeparatorProcessor, resolve_processor
from .types import (
    LRE,
    LRM,
    PDF,
    RLE,
    RLM,
    STATE_INITIAL,
    Direction,
    DirectionClass,
    MarkPolicy,
    Orientation,
    StateCell,
)
from .utils import (
    full_to_lean_text,
    get_cur_direction,
    get_engine,
    lean_bidi_char_offsets,
    lean_to_full_text,
)

__all__ = [
    "DEFAULT_FEATURES",
    "LRE",
    "LRM",
    "PDF",
    "RLE",
    "RLM",
    "STATE_INITIAL",
    "Direction",
    "DirectionClass",
    "DirectionalPropertyClassifier",
    "DirProps",
    "Environment",
    "Features",
    "MarkOffsets",
    "MarkPolicy",
    "Orientation",
    "ProcessorContract",
    "SeparatorProcessor",
    "StateCell",
    "StructuredTextEngine",
    "full_to_lean_text",
    "get_cur_direction",
    "get_engine",
    "lean_bidi_char_offsets",
    "lean_to_full_text",
    "resolve_processor",
]
