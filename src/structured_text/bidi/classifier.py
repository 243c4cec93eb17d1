"""Directional property classification of characters."""

import unicodedata
from typing import List, Optional

from .types import DirectionClass

# Directional formatting characters: reported as boundary neutrals so that
# marks inserted by the engine never influence direction detection.
FORMATTING_CHARACTERS = frozenset(
    [
        "\u061c",  # ALM
        "\u200e",  # LRM
        "\u200f",  # RLM
        "\u202a",  # LRE
        "\u202b",  # RLE
        "\u202c",  # PDF
        "\u202d",  # LRO
        "\u202e",  # RLO
        "\u2066",  # LRI
        "\u2067",  # RLI
        "\u2068",  # FSI
        "\u2069",  # PDI
    ]
)

STRONG_LEFT_CLASSES = frozenset(["L"])
STRONG_RIGHT_CLASSES = frozenset(["R", "AL"])
NUMBER_CLASSES = frozenset(["EN", "AN"])


class DirectionalPropertyClassifier:
    """Maps characters to Unicode bidi classes and strong-direction classes."""

    def bidi_class(self, char: str) -> str:
        """Get the Unicode bidirectional class of a character."""
        if char in FORMATTING_CHARACTERS:
            return "BN"
        # Unassigned code points have no class
        return unicodedata.bidirectional(char) or "ON"

    def classify(self, char: str) -> DirectionClass:
        """Determine the strong direction of a character."""
        return self.class_of(self.bidi_class(char))

    @staticmethod
    def class_of(bidi_class: str) -> DirectionClass:
        """Reduce a Unicode bidi class to a strong-direction class."""
        if bidi_class in STRONG_LEFT_CLASSES:
            return DirectionClass.STRONG_L
        elif bidi_class in STRONG_RIGHT_CLASSES:
            return DirectionClass.STRONG_R
        else:
            return DirectionClass.WEAK_OR_NEUTRAL


class DirProps:
    """Bidi classes of the characters of one lean text.

    Classes are computed on first access and cached for the duration of a
    single engine call. Processors read them; only mark insertion rewrites
    an entry.
    """

    def __init__(self, text: str, classifier: DirectionalPropertyClassifier):
        """Initialize DirProps."""
        self._text = text
        self._classifier = classifier
        self._classes: List[Optional[str]] = [None] * len(text)

    def __len__(self) -> int:
        return len(self._text)

    def __getitem__(self, index: int) -> str:
        bidi_class = self._classes[index]
        if bidi_class is None:
            bidi_class = self._classifier.bidi_class(self._text[index])
            self._classes[index] = bidi_class
        return bidi_class

    def strength(self, index: int) -> DirectionClass:
        """Strong-direction class of the character at ``index``."""
        return self._classifier.class_of(self[index])

    def first_strong(self) -> Optional[str]:
        """Bidi class of the first strong character, if any."""
        for index in range(len(self._text)):
            bidi_class = self[index]
            if bidi_class in STRONG_LEFT_CLASSES or bidi_class in STRONG_RIGHT_CLASSES:
                return bidi_class
        return None

    def override(self, index: int, bidi_class: str) -> None:
        """Replace the class of one character after a mark was inserted."""
        self._classes[index] = bidi_class
