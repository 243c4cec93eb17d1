"""Processor behaviour profile."""

from dataclasses import dataclass
from typing import Optional

from structured_text.utils.exceptions import CallerUsageError

from .environment import Environment
from .types import Direction, MarkPolicy


@dataclass(frozen=True)
class Features:
    """Features that affect the behaviour of a processor.

    Instances are immutable, hashable and meant to be cached and reused.

    Attributes:
        separators: Characters handled as separators by separator-based
            processors
        special_case_count: Number of special cases the processor handles
        dir_arabic: Direction forced on text whose first strong character
            is Arabic; ``None`` keeps the natural RTL direction
        dir_hebrew: Direction forced on text whose first strong character
            is Hebrew; ``None`` keeps the natural RTL direction
        ignore_arabic: Skip processing in Arabic-script environments
        ignore_hebrew: Skip processing in Hebrew-script environments
        leading_mark: Policy for the mark(s) prefixed to the whole text
        trailing_mark: Policy for the mark(s) suffixed to the whole text
    """

    separators: str = ""
    special_case_count: int = 0
    dir_arabic: Optional[Direction] = None
    dir_hebrew: Optional[Direction] = None
    ignore_arabic: bool = False
    ignore_hebrew: bool = False
    leading_mark: MarkPolicy = MarkPolicy.ORIENTATION
    trailing_mark: MarkPolicy = MarkPolicy.ORIENTATION

    def __post_init__(self) -> None:
        """Validate field values."""
        if not isinstance(self.separators, str):
            raise CallerUsageError(
                f"separators must be a string, got {self.separators!r}"
            )
        if (
            isinstance(self.special_case_count, bool)
            or not isinstance(self.special_case_count, int)
            or self.special_case_count < 0
        ):
            raise CallerUsageError(
                "special_case_count must be a non-negative integer, "
                f"got {self.special_case_count!r}"
            )
        for name in ("dir_arabic", "dir_hebrew"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, Direction):
                raise CallerUsageError(f"{name} must be a Direction, got {value!r}")
        for name in ("ignore_arabic", "ignore_hebrew"):
            if not isinstance(getattr(self, name), bool):
                raise CallerUsageError(f"{name} must be a bool")
        for name in ("leading_mark", "trailing_mark"):
            if not isinstance(getattr(self, name), MarkPolicy):
                raise CallerUsageError(f"{name} must be a MarkPolicy")

    def ignores_language(self, environment: Environment) -> bool:
        """Whether the processor does not apply to the environment language."""
        return (self.ignore_arabic and environment.is_arabic_script()) or (
            self.ignore_hebrew and environment.is_hebrew_script()
        )


DEFAULT_FEATURES = Features()
