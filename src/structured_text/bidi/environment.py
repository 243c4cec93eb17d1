"""Environment in which structured text is displayed."""

from dataclasses import dataclass
from typing import Optional

from structured_text.config import get_settings
from structured_text.utils.exceptions import CallerUsageError

from .types import Orientation

# Languages written right-to-left (ISO 639-1 and legacy codes)
BIDI_LANGUAGES = frozenset(
    [
        "ar",  # Arabic
        "he",  # Hebrew
        "iw",  # Hebrew (legacy code)
        "fa",  # Persian/Farsi
        "ur",  # Urdu
        "ps",  # Pashto
        "sd",  # Sindhi
        "ku",  # Kurdish (some variants)
        "dv",  # Dhivehi
        "yi",  # Yiddish
        "ji",  # Yiddish (legacy code)
    ]
)

ARABIC_SCRIPT_LANGUAGES = frozenset(["ar", "fa", "ur", "ps", "sd", "ku", "dv"])
HEBREW_SCRIPT_LANGUAGES = frozenset(["he", "iw", "yi", "ji"])


@dataclass(frozen=True)
class Environment:
    """Display environment of a structured text.

    Instances are immutable and may be shared freely between calls.

    Attributes:
        locale: Locale such as ``"he_IL"`` or ``"en-US"``; ``None`` means the
            configured default locale
        mirrored: Whether the GUI is mirrored (laid out right-to-left)
        orientation: Orientation of the component displaying the text
    """

    locale: Optional[str] = None
    mirrored: bool = False
    orientation: Orientation = Orientation.LTR

    def __post_init__(self) -> None:
        """Validate field types."""
        if self.locale is not None and not isinstance(self.locale, str):
            raise CallerUsageError(f"locale must be a string, got {self.locale!r}")
        if not isinstance(self.mirrored, bool):
            raise CallerUsageError(f"mirrored must be a bool, got {self.mirrored!r}")
        if not isinstance(self.orientation, Orientation):
            raise CallerUsageError(
                f"orientation must be an Orientation, got {self.orientation!r}"
            )

    @classmethod
    def default(cls) -> "Environment":
        """Build the environment described by the settings."""
        settings = get_settings()
        return cls(
            locale=settings.default_locale,
            mirrored=settings.default_mirrored,
            orientation=Orientation(settings.default_orientation),
        )

    @property
    def language(self) -> str:
        """Lower-cased primary language subtag of the locale."""
        locale = self.locale
        if locale is None:
            locale = get_settings().default_locale
        return locale.replace("-", "_").split("_")[0].lower()

    def is_bidi(self) -> bool:
        """Whether directional marks could ever be needed in this environment."""
        return self.mirrored or self.language in BIDI_LANGUAGES

    def is_arabic_script(self) -> bool:
        """Whether the language is written in Arabic script."""
        return self.language in ARABIC_SCRIPT_LANGUAGES

    def is_hebrew_script(self) -> bool:
        """Whether the language is written in Hebrew script."""
        return self.language in HEBREW_SCRIPT_LANGUAGES
