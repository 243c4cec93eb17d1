"""Structured text processor contract."""

from abc import ABC, abstractmethod
from typing import Mapping, Optional, Union

from structured_text.utils.exceptions import CallerUsageError, ContractViolation

from .classifier import DirProps
from .environment import Environment
from .features import Features
from .offsets import MarkOffsets
from .types import Direction, StateCell


class ProcessorContract(ABC):
    """
    Base class for structured text processors.

    A processor describes one kind of structured text (file paths, e-mail
    addresses, source code, ...). It declares its features and, when it
    handles special cases, locates and consumes them, requesting a mark at
    every boundary where the display would otherwise be reordered.

    Processors must not keep per-call data in instance fields; anything that
    has to survive between calls goes through the state cell.
    """

    @property
    def family(self) -> str:
        """Name of the processor family, recorded in state cells."""
        return type(self).__name__

    @abstractmethod
    def get_features(self, environment: Environment) -> Features:
        """Get the features of this processor for the given environment."""

    def index_of_special(
        self,
        features: Features,
        text: str,
        dir_props: DirProps,
        offsets: MarkOffsets,
        case_number: int,
        from_index: int,
    ) -> int:
        """
        Locate the next occurrence of a special case.

        Must be overridden by processors declaring special cases.

        Args:
            features: Effective features of the call
            text: Lean text
            dir_props: Bidi classes of the lean text
            offsets: Marks collected so far
            case_number: Special case to look for, 1-based
            from_index: Position to start looking from

        Returns:
            Position of the occurrence, or ``len(text)`` when there is none
        """
        raise ContractViolation(
            f"{self.family} declares {features.special_case_count} special "
            "case(s) but does not implement index_of_special"
        )

    def process_special(
        self,
        features: Features,
        text: str,
        dir_props: DirProps,
        offsets: MarkOffsets,
        state: StateCell,
        case_number: int,
        separator_location: int,
    ) -> int:
        """
        Consume the span of a special case found by index_of_special.

        Must be overridden by processors declaring special cases.

        Args:
            features: Effective features of the call
            text: Lean text
            dir_props: Bidi classes of the lean text
            offsets: Marks collected so far; add boundaries with insert_mark
            state: Working state cell of the call
            case_number: Special case being processed, 1-based
            separator_location: Position returned by index_of_special, or -1
                when continuing a case left open by a previous call

        Returns:
            Position where scanning resumes
        """
        raise ContractViolation(
            f"{self.family} declares {features.special_case_count} special "
            "case(s) but does not implement process_special"
        )

    @staticmethod
    def insert_mark(
        text: str, dir_props: DirProps, offsets: MarkOffsets, index: int
    ) -> None:
        """Request a directional mark immediately before ``index``."""
        offsets.insert_mark(index)

    @staticmethod
    def process_separator(
        features: Features,
        text: str,
        dir_props: DirProps,
        offsets: MarkOffsets,
        separator_location: int,
    ) -> None:
        """
        Add a mark before a separator when the display needs one.

        In an LTR text a mark is needed when RTL text (or an Arabic number)
        precedes the separator and RTL text or a number follows it. In an
        RTL text it is needed when LTR text precedes the separator and LTR
        text or a European number follows it.
        """
        length = len(text)

        if offsets.direction is Direction.RTL:
            for i in range(separator_location - 1, -1, -1):
                bidi_class = dir_props[i]
                if bidi_class in ("R", "AL"):
                    return
                if bidi_class == "L":
                    for j in range(separator_location, length):
                        bidi_class = dir_props[j]
                        if bidi_class in ("R", "AL"):
                            return
                        if bidi_class in ("L", "EN"):
                            offsets.insert_mark(separator_location)
                            return
                    return
            return

        done_arabic_number = False
        for i in range(separator_location - 1, -1, -1):
            bidi_class = dir_props[i]
            if bidi_class == "L":
                return
            if bidi_class in ("R", "AL"):
                for j in range(separator_location, length):
                    bidi_class = dir_props[j]
                    if bidi_class == "L":
                        return
                    if bidi_class in ("R", "AL", "EN", "AN"):
                        offsets.insert_mark(separator_location)
                        return
                return
            if bidi_class == "AN" and not done_arabic_number:
                for j in range(separator_location, length):
                    bidi_class = dir_props[j]
                    if bidi_class == "L":
                        return
                    if bidi_class in ("R", "AL", "AN"):
                        offsets.insert_mark(separator_location)
                        return
                done_arabic_number = True


class SeparatorProcessor(ProcessorContract):
    """Processor for text made of fields delimited by separator characters.

    Examples are paths (``\\``, ``/``, ``.``), URLs or comma separated
    lists: a mark is added before each separator that would otherwise be
    displayed in the wrong place.
    """

    SEPARATOR_CASE = 1

    def __init__(self, separators: str) -> None:
        """Initialize SeparatorProcessor."""
        if not isinstance(separators, str) or not separators:
            raise CallerUsageError("separators must be a non-empty string")
        self._features = Features(separators=separators, special_case_count=1)

    def get_features(self, environment: Environment) -> Features:
        """Get separator features; identical for every environment."""
        return self._features

    def index_of_special(
        self,
        features: Features,
        text: str,
        dir_props: DirProps,
        offsets: MarkOffsets,
        case_number: int,
        from_index: int,
    ) -> int:
        """Locate the next separator."""
        for index in range(from_index, len(text)):
            if text[index] in features.separators:
                return index
        return len(text)

    def process_special(
        self,
        features: Features,
        text: str,
        dir_props: DirProps,
        offsets: MarkOffsets,
        state: StateCell,
        case_number: int,
        separator_location: int,
    ) -> int:
        """Mark the separator if needed and resume right after it."""
        if separator_location < 0:
            # Separators never span calls
            return 0
        self.process_separator(features, text, dir_props, offsets, separator_location)
        return separator_location + 1


ProcessorSelector = Union[str, ProcessorContract, None]


def resolve_processor(
    selector: ProcessorSelector, registry: Mapping[str, ProcessorContract]
) -> Optional[ProcessorContract]:
    """
    Resolve a processor selector to a processor reference.

    Args:
        selector: Registry key, processor reference or None
        registry: Mapping of processor keys to processors

    Returns:
        The processor, or None when the selector is None
    """
    if selector is None or isinstance(selector, ProcessorContract):
        return selector
    if isinstance(selector, str):
        try:
            return registry[selector]
        except KeyError:
            known = ", ".join(sorted(registry)) or "none"
            raise CallerUsageError(
                f"Unknown processor '{selector}'. Registered processors: {known}"
            ) from None
    raise CallerUsageError(
        f"Processor selector must be a string or a processor, got {selector!r}"
    )
