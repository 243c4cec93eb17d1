"""Structured text engine.

Mediates between callers and structured text processors: runs a processor
over a lean text, collects the positions where directional marks are
needed, and builds the full text or the offset maps between the two forms.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from structured_text.utils.exceptions import CallerUsageError, ContractViolation
from structured_text.utils.logging import get_logger

from .classifier import DirectionalPropertyClassifier, DirProps
from .environment import Environment
from .features import Features
from .offsets import MarkOffsets
from .processor import ProcessorContract
from .types import PDF, Direction, MarkPolicy, Orientation, StateCell

logger = get_logger(__name__)


@dataclass
class LeanToFull:
    """Outcome of scanning one lean text."""

    text: str
    direction: Direction
    offsets: List[int] = field(default_factory=list)
    prefix: str = ""
    suffix: str = ""

    @property
    def mark(self) -> str:
        return self.direction.mark

    def full_text(self) -> str:
        """Lean text with marks and wrappers inserted."""
        parts = [self.prefix]
        last = 0
        for offset in self.offsets:
            parts.append(self.text[last:offset])
            parts.append(self.mark)
            last = offset
        parts.append(self.text[last:])
        parts.append(self.suffix)
        return "".join(parts)

    def lean_to_full_map(self) -> List[int]:
        """Position of every lean character within the full text."""
        mapping = []
        added = len(self.prefix)
        j = 0
        for i in range(len(self.text)):
            while j < len(self.offsets) and self.offsets[j] == i:
                added += 1
                j += 1
            mapping.append(i + added)
        return mapping

    def full_mark_positions(self) -> List[int]:
        """Positions of all inserted characters within the full text."""
        positions = list(range(len(self.prefix)))
        for count, offset in enumerate(self.offsets):
            positions.append(len(self.prefix) + offset + count)
        body_length = len(self.prefix) + len(self.text) + len(self.offsets)
        positions.extend(range(body_length, body_length + len(self.suffix)))
        return positions


class StructuredTextEngine:
    """
    Adds and removes directional formatting characters in structured text.

    Every operation takes a processor reference first. Passing ``None``
    makes the operation a no-op. ``features`` defaults to the processor's
    own features and ``environment`` to :meth:`Environment.default`.

    Without an explicit ``default_environment`` the default is read from the
    settings on every call.

    ``state`` is an optional :class:`StateCell` linking successive calls
    over consecutive parts of one larger text (e.g. lines of a source file).
    It is updated only when the call succeeds.
    """

    def __init__(
        self,
        classifier: Optional[DirectionalPropertyClassifier] = None,
        default_environment: Optional[Environment] = None,
    ) -> None:
        """Initialize StructuredTextEngine."""
        self.classifier = classifier or DirectionalPropertyClassifier()
        self._default_environment = default_environment

    @property
    def default_environment(self) -> Environment:
        """Environment used when a call passes none; read from settings if unset."""
        return self._default_environment or Environment.default()

    # Public operations

    def lean_to_full_text(
        self,
        processor: Optional[ProcessorContract],
        features: Optional[Features],
        environment: Optional[Environment],
        text: str,
        state: Optional[StateCell] = None,
    ) -> str:
        """
        Add directional formatting characters to a structured text.

        Args:
            processor: Processor reference, or None for a no-op
            features: Features overriding the processor's own, or None
            environment: Display environment, or None for the default
            text: Lean text
            state: Continuation state, or None for an independent call

        Returns:
            The full text
        """
        if processor is None:
            return text
        return self._lean_to_full(
            processor, features, environment, text, state
        ).full_text()

    def lean_to_full_map(
        self,
        processor: Optional[ProcessorContract],
        features: Optional[Features],
        environment: Optional[Environment],
        text: str,
        state: Optional[StateCell] = None,
    ) -> List[int]:
        """Compute the position of each lean character within the full text."""
        if processor is None:
            return list(range(len(text)))
        return self._lean_to_full(
            processor, features, environment, text, state
        ).lean_to_full_map()

    def lean_bidi_char_offsets(
        self,
        processor: Optional[ProcessorContract],
        features: Optional[Features],
        environment: Optional[Environment],
        text: str,
        state: Optional[StateCell] = None,
    ) -> List[int]:
        """
        Compute the lean positions before which marks are inserted.

        Marks wrapping the whole text because of the environment orientation
        are not included.
        """
        if processor is None:
            return []
        result = self._lean_to_full(processor, features, environment, text, state)
        return list(result.offsets)

    def full_to_lean_text(
        self,
        processor: Optional[ProcessorContract],
        features: Optional[Features],
        environment: Optional[Environment],
        text: str,
        state: Optional[StateCell] = None,
    ) -> str:
        """Remove the directional formatting characters added by lean_to_full_text."""
        if processor is None:
            return text
        lean, _ = self._full_to_lean(processor, features, environment, text, state)
        return lean

    def full_to_lean_map(
        self,
        processor: Optional[ProcessorContract],
        features: Optional[Features],
        environment: Optional[Environment],
        text: str,
        state: Optional[StateCell] = None,
    ) -> List[int]:
        """
        Compute the position of each full text character within the lean text.

        Characters added by lean_to_full_text map to -1.
        """
        if processor is None:
            return list(range(len(text)))
        _, mapping = self._full_to_lean(processor, features, environment, text, state)
        return mapping

    def full_bidi_char_offsets(
        self,
        processor: Optional[ProcessorContract],
        features: Optional[Features],
        environment: Optional[Environment],
        text: str,
        state: Optional[StateCell] = None,
    ) -> List[int]:
        """
        Compute the positions of the added characters within a full text.

        Marks wrapping the whole text are included.
        """
        if processor is None:
            return []
        _, mapping = self._full_to_lean(processor, features, environment, text, state)
        return [index for index, lean_index in enumerate(mapping) if lean_index < 0]

    def get_cur_direction(
        self,
        processor: Optional[ProcessorContract],
        features: Optional[Features],
        environment: Optional[Environment],
        text: str,
    ) -> Direction:
        """
        Get the base direction of a structured text.

        The first Arabic, Hebrew or Latin letter decides, subject to the
        per-script overrides in the features. Text without strong
        characters is RTL in a mirrored environment and LTR otherwise.
        """
        if processor is None:
            return Direction.LTR
        features, environment = self._resolve(
            processor, features, environment, text, None
        )
        return self._direction(features, environment, DirProps(text, self.classifier))

    # Internals

    def _resolve(
        self,
        processor: ProcessorContract,
        features: Optional[Features],
        environment: Optional[Environment],
        text: str,
        state: Optional[StateCell],
    ) -> Tuple[Features, Environment]:
        if not isinstance(processor, ProcessorContract):
            raise CallerUsageError(
                "processor must be a resolved ProcessorContract reference, "
                f"got {processor!r}"
            )
        if not isinstance(text, str):
            raise CallerUsageError(f"text must be a string, got {type(text).__name__}")
        if environment is None:
            environment = self.default_environment
        elif not isinstance(environment, Environment):
            raise CallerUsageError(
                f"environment must be an Environment, got {environment!r}"
            )
        if state is not None:
            if not isinstance(state, StateCell):
                raise CallerUsageError(f"state must be a StateCell, got {state!r}")
            if isinstance(state.value, bool) or not isinstance(state.value, int):
                raise CallerUsageError(
                    f"state value must be an integer, got {state.value!r}"
                )
        if features is None:
            features = processor.get_features(environment)
            if not isinstance(features, Features):
                message = f"{processor.family}.get_features returned {features!r}"
                logger.error(
                    "processor_contract_violated",
                    processor=processor.family,
                    error=message,
                )
                raise ContractViolation(message)
        elif not isinstance(features, Features):
            raise CallerUsageError(f"features must be Features, got {features!r}")
        if state is not None and state.value > features.special_case_count:
            raise CallerUsageError(
                f"state value {state.value} does not name a special case of "
                f"{processor.family} ({features.special_case_count} declared)"
            )
        return features, environment

    def _direction(
        self, features: Features, environment: Environment, dir_props: DirProps
    ) -> Direction:
        arabic, hebrew = features.dir_arabic, features.dir_hebrew
        if arabic is not None and arabic == hebrew:
            return arabic
        first = dir_props.first_strong()
        if first == "AL":
            return arabic or Direction.RTL
        if first == "R":
            return hebrew or Direction.RTL
        if first == "L":
            return Direction.LTR
        return Direction.RTL if environment.mirrored else Direction.LTR

    def _lean_to_full(
        self,
        processor: ProcessorContract,
        features: Optional[Features],
        environment: Optional[Environment],
        text: str,
        state: Optional[StateCell],
    ) -> LeanToFull:
        features, environment = self._resolve(
            processor, features, environment, text, state
        )
        log = logger.bind(processor=processor.family)
        dir_props = DirProps(text, self.classifier)
        direction = self._direction(features, environment, dir_props)

        if features.ignores_language(environment):
            log.debug("language_ignored", language=environment.language)
            return LeanToFull(text=text, direction=direction)

        prefix, suffix = self._wrappers(
            features, environment, text, dir_props, direction
        )
        offsets = MarkOffsets(text, dir_props, direction)
        working = StateCell()
        if state is not None and state.is_continuation:
            working.value = state.value

        try:
            self._scan(processor, features, text, dir_props, offsets, working)
        except ContractViolation as e:
            log.error("processor_contract_violated", error=str(e))
            raise

        if state is not None:
            if state.is_continuation and state.family not in (None, processor.family):
                log.warning("state_family_changed", state_family=state.family)
            state.value = working.value
            state.family = processor.family

        log.debug(
            "marks_computed",
            marks=len(offsets),
            length=len(text),
            direction=direction.value,
        )
        return LeanToFull(
            text=text,
            direction=direction,
            offsets=offsets.as_list(),
            prefix=prefix,
            suffix=suffix,
        )

    def _scan(
        self,
        processor: ProcessorContract,
        features: Features,
        text: str,
        dir_props: DirProps,
        offsets: MarkOffsets,
        state: StateCell,
    ) -> None:
        length = len(text)
        start = 0

        if state.is_continuation:
            case_number = state.value
            state.value = 0
            start = processor.process_special(
                features, text, dir_props, offsets, state, case_number, -1
            )
            if not isinstance(start, int) or start < 0:
                raise ContractViolation(
                    f"{processor.family}.process_special returned {start!r} "
                    "when continuing a previous call"
                )
            start = min(start, length)

        for case_number in range(1, features.special_case_count + 1):
            position = start
            while True:
                location = processor.index_of_special(
                    features, text, dir_props, offsets, case_number, position
                )
                if not isinstance(location, int):
                    raise ContractViolation(
                        f"{processor.family}.index_of_special returned {location!r}"
                    )
                if location < 0 or location >= length:
                    break
                if location < position:
                    raise ContractViolation(
                        f"{processor.family}.index_of_special returned {location}, "
                        f"before the requested position {position}"
                    )
                position = processor.process_special(
                    features, text, dir_props, offsets, state, case_number, location
                )
                if not isinstance(position, int) or position <= location:
                    raise ContractViolation(
                        f"{processor.family}.process_special returned {position!r} "
                        f"for special case {case_number} found at {location}"
                    )

    def _wrappers(
        self,
        features: Features,
        environment: Environment,
        text: str,
        dir_props: DirProps,
        direction: Direction,
    ) -> Tuple[str, str]:
        if not text:
            return "", ""

        mark = direction.mark
        orientation = environment.orientation
        if orientation is Orientation.IGNORE:
            prefix_length = 0
        elif orientation is Orientation.UNKNOWN:
            prefix_length = 2
        elif orientation.is_contextual:
            first = dir_props.first_strong()
            if first is None:
                contextual = (
                    Direction.LTR
                    if orientation is Orientation.CONTEXTUAL_LTR
                    else Direction.RTL
                )
            else:
                contextual = Direction.LTR if first == "L" else Direction.RTL
            prefix_length = 0 if contextual is direction else 1
        else:
            shown = Direction.LTR if orientation is Orientation.LTR else Direction.RTL
            prefix_length = 0 if shown is direction else 2

        if prefix_length == 2:
            prefix, suffix = direction.embedding + mark, mark + PDF
        elif prefix_length == 1:
            prefix, suffix = mark, ""
        else:
            prefix, suffix = "", ""

        if MarkPolicy.NEVER in (features.leading_mark, features.trailing_mark):
            # An embedding needs both ends
            if prefix_length == 2:
                prefix, suffix = mark, mark
        if features.leading_mark is MarkPolicy.NEVER:
            prefix = ""
        elif features.leading_mark is MarkPolicy.ALWAYS and not prefix:
            prefix = mark
        if features.trailing_mark is MarkPolicy.NEVER:
            suffix = ""
        elif features.trailing_mark is MarkPolicy.ALWAYS and not suffix:
            suffix = mark
        return prefix, suffix

    def _full_to_lean(
        self,
        processor: ProcessorContract,
        features: Optional[Features],
        environment: Optional[Environment],
        text: str,
        state: Optional[StateCell],
    ) -> Tuple[str, List[int]]:
        features, environment = self._resolve(
            processor, features, environment, text, state
        )
        if features.ignores_language(environment):
            return text, list(range(len(text)))

        dir_props = DirProps(text, self.classifier)
        direction = self._direction(features, environment, dir_props)
        mark = direction.mark

        # Marks and embeddings are neutral, so the lean text gets the same
        # wrappers as the full text.
        splits = [self._wrappers(features, environment, text, dir_props, direction)]
        if splits[0] != ("", ""):
            splits.append(("", ""))

        first: Optional[Tuple[LeanToFull, Optional[StateCell]]] = None
        for prefix, suffix in splits:
            if len(text) < len(prefix) + len(suffix) or not (
                text.startswith(prefix) and text.endswith(suffix)
            ):
                continue
            body = text[len(prefix) : len(text) - len(suffix)]
            inserted = {index for index, char in enumerate(body) if char == mark}
            while True:
                candidate = "".join(
                    char for index, char in enumerate(body) if index not in inserted
                )
                trial = self._copy_state(state)
                recomputed = self._lean_to_full(
                    processor, features, environment, candidate, trial
                )
                if first is None:
                    first = recomputed, trial
                full = recomputed.full_text()
                if full == text:
                    self._commit_state(state, trial)
                    mapping = [-1] * len(text)
                    lean_to_full = recomputed.lean_to_full_map()
                    for lean_index, full_index in enumerate(lean_to_full):
                        mapping[full_index] = lean_index
                    return candidate, mapping

                # The first mark that the recomputation does not reproduce
                # belongs to the lean text.
                rebuilt = full[
                    len(recomputed.prefix) : len(full) - len(recomputed.suffix)
                ]
                position = 0
                limit = min(len(body), len(rebuilt))
                while position < limit and body[position] == rebuilt[position]:
                    position += 1
                if position >= len(body) or position not in inserted:
                    break
                inserted.discard(position)

        # No lean text reproduces the input: align it against the first
        # recomputation, keeping every character the engine did not insert.
        assert first is not None
        recomputed, trial = first
        self._commit_state(state, trial)
        full = recomputed.full_text()
        added = set(recomputed.full_mark_positions())
        lean_chars: List[str] = []
        mapping = []
        i = j = 0
        while i < len(text):
            if j < len(full) and text[i] == full[j]:
                if j in added:
                    mapping.append(-1)
                else:
                    mapping.append(len(lean_chars))
                    lean_chars.append(text[i])
                i += 1
                j += 1
            elif j < len(full) and j in added:
                j += 1
            else:
                mapping.append(len(lean_chars))
                lean_chars.append(text[i])
                i += 1
        return "".join(lean_chars), mapping

    @staticmethod
    def _copy_state(state: Optional[StateCell]) -> Optional[StateCell]:
        if state is None:
            return None
        return StateCell(value=state.value, family=state.family)

    @staticmethod
    def _commit_state(state: Optional[StateCell], trial: Optional[StateCell]) -> None:
        if state is not None and trial is not None:
            state.value = trial.value
            state.family = trial.family
