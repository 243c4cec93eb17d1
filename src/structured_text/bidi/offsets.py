"""Mark offsets collected while scanning a lean text."""

from bisect import bisect_left
from typing import Iterator, List

from structured_text.utils.exceptions import ContractViolation

from .classifier import (
    NUMBER_CLASSES,
    STRONG_LEFT_CLASSES,
    STRONG_RIGHT_CLASSES,
    DirProps,
)
from .types import Direction


class MarkOffsets:
    """Lean positions before which a directional mark is inserted.

    Owned by the engine for the duration of one call. Processors only add
    boundaries through :meth:`insert_mark`; the offsets stay sorted and
    free of duplicates.
    """

    def __init__(self, text: str, dir_props: DirProps, direction: Direction):
        """Initialize MarkOffsets."""
        self._text = text
        self._dir_props = dir_props
        self._offsets: List[int] = []
        self.direction = direction

    def __len__(self) -> int:
        return len(self._offsets)

    def __iter__(self) -> Iterator[int]:
        return iter(self._offsets)

    def __contains__(self, index: object) -> bool:
        if not isinstance(index, int):
            return False
        position = bisect_left(self._offsets, index)
        return position < len(self._offsets) and self._offsets[position] == index

    def as_list(self) -> List[int]:
        """Copy of the offsets in ascending order."""
        return list(self._offsets)

    def insert_mark(self, index: int) -> None:
        """
        Register a mark immediately before lean position ``index``.

        Inserting twice at the same boundary is allowed and yields a single
        mark. The mark polarity follows the base direction of the text.

        Args:
            index: Lean position, ``0 <= index <= len(text)``
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise ContractViolation(f"Mark position must be an integer, got {index!r}")
        if index < 0 or index > len(self._text):
            raise ContractViolation(
                f"Mark position {index} is outside the text (length {len(self._text)})"
            )

        position = bisect_left(self._offsets, index)
        if position < len(self._offsets) and self._offsets[position] == index:
            return
        self._offsets.insert(position, index)

        # A mark at the very start does not change any neighbour
        if index < 1:
            return

        if index < len(self._text):
            bidi_class = self._dir_props[index]
            strong_or_number = (
                bidi_class in STRONG_LEFT_CLASSES
                or bidi_class in STRONG_RIGHT_CLASSES
                or bidi_class in NUMBER_CLASSES
            )
            target = index - 1 if strong_or_number else index
        else:
            target = index - 1
        strong = "L" if self.direction is Direction.LTR else "R"
        self._dir_props.override(target, strong)
