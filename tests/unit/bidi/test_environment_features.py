"""Test environment and features value types."""

import pytest

from structured_text.bidi import (
    DEFAULT_FEATURES,
    Direction,
    Environment,
    Features,
    MarkPolicy,
    Orientation,
)
from structured_text.utils.exceptions import CallerUsageError


class TestEnvironment:
    """Test the display environment."""

    def test_is_bidi(self):
        """Test bidi detection from the locale."""
        assert not Environment("en_US", False, Orientation.LTR).is_bidi()
        assert Environment("he", False, Orientation.LTR).is_bidi()
        assert Environment("he", False, Orientation.RTL).is_bidi()
        assert Environment("ar-EG", False, Orientation.CONTEXTUAL_LTR).is_bidi()
        assert Environment("iw_IL").is_bidi()

    def test_mirrored_is_bidi(self):
        """Test a mirrored GUI always allows marks."""
        assert Environment("en_US", True, Orientation.LTR).is_bidi()

    def test_language(self):
        """Test the primary subtag is extracted."""
        assert Environment("he_IL").language == "he"
        assert Environment("AR-eg").language == "ar"
        assert Environment("fa").language == "fa"

    def test_default_locale(self, monkeypatch):
        """Test a missing locale falls back to the settings."""
        monkeypatch.setenv("STRUCTURED_TEXT_DEFAULT_LOCALE", "ur_PK")
        assert Environment().language == "ur"
        assert Environment().is_bidi()

    def test_scripts(self):
        """Test script detection."""
        assert Environment("fa").is_arabic_script()
        assert not Environment("fa").is_hebrew_script()
        assert Environment("yi").is_hebrew_script()

    def test_default(self, monkeypatch):
        """Test the settings-based default environment."""
        monkeypatch.setenv("STRUCTURED_TEXT_DEFAULT_MIRRORED", "true")
        monkeypatch.setenv("STRUCTURED_TEXT_DEFAULT_ORIENTATION", "contextual_rtl")
        environment = Environment.default()
        assert environment.mirrored is True
        assert environment.orientation == Orientation.CONTEXTUAL_RTL
        assert environment.locale == "en"

    def test_immutable_and_hashable(self):
        """Test environments can be shared and cached."""
        environment = Environment("he", False, Orientation.RTL)
        with pytest.raises(AttributeError):
            environment.mirrored = True
        assert environment == Environment("he", False, Orientation.RTL)
        assert len({environment, Environment("he", False, Orientation.RTL)}) == 1

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"locale": 12},
            {"mirrored": "yes"},
            {"orientation": "ltr"},
        ],
    )
    def test_validation(self, kwargs):
        """Test malformed values are rejected."""
        with pytest.raises(CallerUsageError):
            Environment(**kwargs)


class TestFeatures:
    """Test processor features."""

    def test_defaults(self):
        """Test default features."""
        assert DEFAULT_FEATURES.special_case_count == 0
        assert DEFAULT_FEATURES.separators == ""
        assert DEFAULT_FEATURES.dir_arabic is None
        assert DEFAULT_FEATURES.leading_mark == MarkPolicy.ORIENTATION
        assert DEFAULT_FEATURES.trailing_mark == MarkPolicy.ORIENTATION

    def test_structural_equality(self):
        """Test equal features compare and hash equal."""
        first = Features(separators="/", special_case_count=2)
        second = Features(separators="/", special_case_count=2)
        assert first == second
        assert hash(first) == hash(second)

    def test_ignores_language(self):
        """Test language ignore flags."""
        features = Features(ignore_arabic=True)
        assert features.ignores_language(Environment("ar"))
        assert features.ignores_language(Environment("ur_PK"))
        assert not features.ignores_language(Environment("he"))
        assert not DEFAULT_FEATURES.ignores_language(Environment("ar"))

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"special_case_count": -1},
            {"special_case_count": 1.5},
            {"special_case_count": True},
            {"separators": None},
            {"dir_arabic": "rtl"},
            {"dir_hebrew": 1},
            {"ignore_hebrew": "no"},
            {"leading_mark": "always"},
        ],
    )
    def test_validation(self, kwargs):
        """Test malformed values are rejected."""
        with pytest.raises(CallerUsageError):
            Features(**kwargs)

    def test_direction_overrides(self):
        """Test per-script overrides are stored."""
        features = Features(dir_arabic=Direction.LTR, dir_hebrew=Direction.RTL)
        assert features.dir_arabic is Direction.LTR
        assert features.dir_hebrew is Direction.RTL
