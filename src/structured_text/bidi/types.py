"""Structured text types, enums and constants."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

LRM = "\u200e"  # Left-to-Right Mark
RLM = "\u200f"  # Right-to-Left Mark
LRE = "\u202a"  # Left-to-Right Embedding
RLE = "\u202b"  # Right-to-Left Embedding
PDF = "\u202c"  # Pop Directional Format

STATE_INITIAL = 0


class Direction(Enum):
    """Base direction of a structured text."""

    LTR = "ltr"
    RTL = "rtl"

    @property
    def mark(self) -> str:
        """Directional mark matching this direction."""
        return LRM if self is Direction.LTR else RLM

    @property
    def embedding(self) -> str:
        """Embedding character matching this direction."""
        return LRE if self is Direction.LTR else RLE


class Orientation(Enum):
    """Orientation of the component displaying the text."""

    LTR = "ltr"
    RTL = "rtl"
    CONTEXTUAL_LTR = "contextual_ltr"  # first strong char decides, LTR default
    CONTEXTUAL_RTL = "contextual_rtl"  # first strong char decides, RTL default
    UNKNOWN = "unknown"
    IGNORE = "ignore"

    @property
    def is_contextual(self) -> bool:
        """Whether the component derives its direction from the text."""
        return self in (Orientation.CONTEXTUAL_LTR, Orientation.CONTEXTUAL_RTL)


class DirectionClass(Enum):
    """Simplified strong-direction class of a character."""

    STRONG_L = "strong_l"
    STRONG_R = "strong_r"
    WEAK_OR_NEUTRAL = "weak_or_neutral"


class MarkPolicy(Enum):
    """Policy for the marks wrapping the whole text."""

    ORIENTATION = "orientation"  # derived from the environment orientation
    ALWAYS = "always"
    NEVER = "never"


@dataclass
class StateCell:
    """Continuation token owned by the caller across a multi-call session.

    A value of ``STATE_INITIAL`` (or any value <= 0) means there is no
    context carried over from a previous call. A positive value names the
    special case that the previous call left open; its further meaning is
    private to the processor family recorded in ``family``.
    """

    value: int = STATE_INITIAL
    family: Optional[str] = None

    @property
    def is_continuation(self) -> bool:
        """Whether the cell carries context from a previous call."""
        return self.value > STATE_INITIAL

    def reset(self) -> None:
        """Start a new session."""
        self.value = STATE_INITIAL
        self.family = None
